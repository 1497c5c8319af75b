"""Exceptions raised by the cookie signer."""


class CookieSignerError(Exception):
    """Base class for cookie signer errors."""


class KeysNotConfiguredError(CookieSignerError, ValueError):
    """A signed operation was requested but no signing keys are configured.

    This is a programming error, distinct from a signature that simply
    fails to verify (which is reported as an empty value).
    """

    def __init__(self, message: str = "Cookie signing keys are not configured"):
        super().__init__(message)


class InvalidCookieError(CookieSignerError, ValueError):
    """A cookie cannot be written, for example because its name is not a token."""
