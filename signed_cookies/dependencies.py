"""FastAPI dependencies for signed cookie access."""
from functools import lru_cache
from typing import Annotated
from fastapi import Depends, Request, Response
from .config import Settings, get_settings
from .keygrip import KeyRing
from .signer import CookieSigner
from .transport import StarletteReadWriter


@lru_cache(maxsize=8)
def _keyring_for(keys: tuple[str, ...]) -> KeyRing | None:
    if not keys:
        return None
    return KeyRing(keys)


async def get_cookie_signer(
    request: Request,
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> CookieSigner:
    """Build a cookie signer bound to the current request and response.

    Key rings are shared between requests using the same keys.
    """
    options = settings.cookie_options()
    return CookieSigner(
        StarletteReadWriter(request, response),
        options,
        keyring=_keyring_for(tuple(options.keys)),
    )
