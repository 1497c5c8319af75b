"""Signed cookie reads and writes over a cookie transport."""
import logging
from typing import Protocol
from .config import CookieOptions
from .cookie import Cookie
from .errors import KeysNotConfiguredError
from .keygrip import KeyRing


logger = logging.getLogger(__name__)

SIG_SUFFIX = ".sig"


class ReadWriter(Protocol):
    """Reads incoming cookies and writes outgoing cookies for one exchange."""

    def cookie(self, name: str) -> Cookie | None:
        """Return the incoming cookie called ``name``, or None if absent."""

    def set_cookie(self, cookie: Cookie) -> None:
        """Append ``cookie`` to the outgoing response."""


class CookieSigner:
    """Get and set cookies, optionally paired with a ``<name>.sig`` cookie.

    The signature cookie holds the signature of ``<name>=<value>`` made with
    one of the keys in the key ring. Transport errors raised by the
    read/writer are propagated unchanged.
    """

    def __init__(
        self,
        read_writer: ReadWriter,
        options: CookieOptions | None = None,
        keyring: KeyRing | None = None,
    ) -> None:
        self.read_writer = read_writer
        self.options = options or CookieOptions()
        if keyring is None and self.options.keys:
            keyring = KeyRing(self.options.keys)
        self._keyring = keyring

    @property
    def keyring(self) -> KeyRing | None:
        return self._keyring

    def get_keyring(self) -> KeyRing | None:
        return self._keyring

    def create_cookie(self, name: str, value: str) -> Cookie:
        """Build a cookie carrying the configured attributes."""
        opts = self.options
        return Cookie(
            name=name,
            value=value,
            path=opts.path,
            domain=opts.domain,
            expires=opts.expires,
            max_age=opts.max_age,
            secure=opts.secure,
            http_only=opts.http_only,
        )

    def get(self, name: str, signed: bool = False) -> str:
        """Return the value of cookie ``name``, or "" if it is absent.

        With ``signed`` the value is returned only if its signature cookie
        verifies. A signature that matches no key is cleared; one that
        matches a retired key is re-signed with the primary key.

        Raises:
            KeysNotConfiguredError: if ``signed`` is set and there are no keys
        """
        keyring = self._require_keyring() if signed else None

        cookie = self.read_writer.cookie(name)
        if cookie is None:
            return ""
        if keyring is None:
            return cookie.value

        sig_name = name + SIG_SUFFIX
        sig_cookie = self.read_writer.cookie(sig_name)
        if sig_cookie is None:
            return ""

        data = f"{name}={cookie.value}"
        index = keyring.index(data, sig_cookie.value)
        if index < 0:
            logger.warning("Signature mismatch for cookie %r, clearing %r", name, sig_name)
            self.set(self.create_cookie(sig_name, ""))
            return ""
        if index > 0:
            # Move the client onto the primary key so the next check matches first
            logger.debug("Cookie %r signed with retired key %d, re-signing", name, index)
            self.set(self.create_cookie(sig_name, keyring.sign(data)))
        return cookie.value

    def set(self, cookie: Cookie, signed: bool = False) -> None:
        """Write ``cookie``, followed by its signature cookie if ``signed``.

        The cookie is sanitized before it is written, so the signature covers
        the value exactly as the client will send it back.

        Raises:
            KeysNotConfiguredError: if ``signed`` is set and there are no keys
            InvalidCookieError: if the cookie name is not a valid token
        """
        keyring = self._require_keyring() if signed else None

        cookie = cookie.sanitized()
        self.read_writer.set_cookie(cookie)
        if keyring is not None:
            data = f"{cookie.name}={cookie.value}"
            self.set(self.create_cookie(cookie.name + SIG_SUFFIX, keyring.sign(data)))

    def _require_keyring(self) -> KeyRing:
        if self._keyring is None:
            raise KeysNotConfiguredError()
        return self._keyring
