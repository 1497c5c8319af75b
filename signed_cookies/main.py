"""Main FastAPI application serving signed cookies."""
import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from . import routes
from .errors import InvalidCookieError, KeysNotConfiguredError


logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Signed Cookies",
    description="Tamper-evident cookies signed with a rotating key list",
    version="1.0.0",
)

# Mount routers
app.include_router(routes.router)


@app.exception_handler(KeysNotConfiguredError)
async def keys_not_configured_handler(request: Request, exc: KeysNotConfiguredError):
    """Report a signed request made without any signing keys configured."""
    logger.error("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


@app.exception_handler(InvalidCookieError)
async def invalid_cookie_handler(request: Request, exc: InvalidCookieError):
    """Reject a cookie that cannot be written, such as one with an invalid name."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
