"""Cookie routes backed by the cookie signer."""
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from typing import Annotated
from .dependencies import get_cookie_signer
from .signer import CookieSigner


router = APIRouter(prefix="/cookies", tags=["cookies"])


class SetCookieRequest(BaseModel):
    value: str
    signed: bool = True


class CookieResponse(BaseModel):
    name: str
    value: str | None = None


@router.get("/{name}", response_model=CookieResponse)
async def read_cookie(
    name: str,
    signer: Annotated[CookieSigner, Depends(get_cookie_signer)],
    signed: bool = Query(True),
):
    """Return a cookie value, verifying its signature cookie when signed.

    The value is null when the cookie is absent or fails verification. The
    response still carries any Set-Cookie the check produced: a signature
    matching a retired key is re-signed and one matching no key is cleared.
    """
    value = signer.get(name, signed)
    return CookieResponse(name=name, value=value or None)


@router.put("/{name}", response_model=CookieResponse)
async def write_cookie(
    name: str,
    request: SetCookieRequest,
    signer: Annotated[CookieSigner, Depends(get_cookie_signer)],
):
    """Set a cookie, with a companion signature cookie when signed.

    Characters that cannot travel in a cookie are dropped; the response
    carries the value as stored.
    """
    cookie = signer.create_cookie(name, request.value).sanitized()
    signer.set(cookie, request.signed)
    return CookieResponse(name=name, value=cookie.value)
