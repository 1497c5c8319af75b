"""Cookie model and Set-Cookie serialization."""
import ipaddress
import logging
import re
from datetime import datetime, timezone
from email.utils import format_datetime
from pydantic import BaseModel
from .errors import InvalidCookieError


logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_DOMAIN_LABEL = re.compile(r"[A-Za-z0-9_-]{1,63}")


class Cookie(BaseModel):
    """A cookie name/value pair with its presentation attributes."""

    name: str
    value: str = ""
    path: str | None = None
    domain: str | None = None
    expires: datetime | None = None
    # Seconds; 0 means unset and a negative value means delete now
    max_age: int = 0
    secure: bool = False
    http_only: bool = False

    def sanitized(self) -> "Cookie":
        """Return a copy holding only what can be sent in a Set-Cookie header.

        Bytes that are not allowed in a value or path (control characters,
        non-ASCII, ``"``, ``;`` and ``\\`` for values, ``;`` for paths) are
        dropped. An invalid domain is removed.

        Raises:
            InvalidCookieError: if the name is not a valid token
        """
        if not valid_cookie_name(self.name):
            raise InvalidCookieError(f"Invalid cookie name {self.name!r}")
        update = {"value": sanitize_cookie_value(self.value)}
        if self.path:
            update["path"] = sanitize_cookie_path(self.path)
        if self.domain:
            domain = self.domain.lstrip(".")
            if valid_cookie_domain(domain):
                update["domain"] = domain
            else:
                logger.warning("Invalid cookie domain %r, dropping domain attribute", self.domain)
                update["domain"] = None
        return self.model_copy(update=update)

    def serialize(self) -> str:
        """Render the cookie as a Set-Cookie header value.

        The cookie is sanitized first, so the result is always ASCII.
        Attributes are emitted in the order Path, Domain, Expires, Max-Age,
        HttpOnly, Secure and only when set.

        Raises:
            InvalidCookieError: if the name is not a valid token
        """
        cookie = self.sanitized()
        parts = [f"{cookie.name}={_quote(cookie.value)}"]
        if cookie.path:
            parts.append(f"Path={cookie.path}")
        if cookie.domain:
            parts.append(f"Domain={cookie.domain}")
        if cookie.expires is not None and cookie.expires.year >= 1601:
            parts.append(f"Expires={_http_date(cookie.expires)}")
        if cookie.max_age > 0:
            parts.append(f"Max-Age={cookie.max_age}")
        elif cookie.max_age < 0:
            parts.append("Max-Age=0")
        if cookie.http_only:
            parts.append("HttpOnly")
        if cookie.secure:
            parts.append("Secure")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.serialize()


def valid_cookie_name(name: str) -> bool:
    return _TOKEN.fullmatch(name) is not None


def valid_cookie_domain(domain: str) -> bool:
    """Check for a host name or an IPv4 address usable as a Domain attribute."""
    if not domain or len(domain) > 255:
        return False
    try:
        return ipaddress.ip_address(domain).version == 4
    except ValueError:
        pass
    labels = domain.split(".")
    if not all(_DOMAIN_LABEL.fullmatch(label) for label in labels):
        return False
    if any(label.startswith("-") or label.endswith("-") for label in labels):
        return False
    # all-numeric names are not host names
    return any(char.isalpha() or char == "_" for char in domain)


def sanitize_cookie_value(value: str) -> str:
    return _sanitize("Cookie.Value", value, _valid_value_char)


def sanitize_cookie_path(path: str) -> str:
    return _sanitize("Cookie.Path", path, _valid_path_char)


def _valid_value_char(char: str) -> bool:
    return 0x20 <= ord(char) < 0x7F and char not in '";\\'


def _valid_path_char(char: str) -> bool:
    return 0x20 <= ord(char) < 0x7F and char != ";"


def _sanitize(field: str, text: str, valid) -> str:
    kept = "".join(char for char in text if valid(char))
    if kept != text:
        logger.warning("Invalid characters in %s, dropping them", field)
    return kept


def _quote(value: str) -> str:
    if " " in value or "," in value:
        return f'"{value}"'
    return value


def _http_date(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)
