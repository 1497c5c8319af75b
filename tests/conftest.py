import pytest

from signed_cookies import CookieOptions, CookieSigner, MemoryReadWriter


@pytest.fixture
def options() -> CookieOptions:
    return CookieOptions(
        keys=["A", "B"],
        path="/",
        domain="aslant.site",
        max_age=3600,
        secure=True,
        http_only=True,
    )


@pytest.fixture
def transport() -> MemoryReadWriter:
    return MemoryReadWriter()


@pytest.fixture
def signer(transport: MemoryReadWriter, options: CookieOptions) -> CookieSigner:
    return CookieSigner(transport, options)
