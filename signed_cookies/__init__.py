"""Tamper-evident cookies signed with a rotating list of keys."""
from .config import CookieOptions, Settings
from .cookie import Cookie
from .errors import CookieSignerError, InvalidCookieError, KeysNotConfiguredError
from .keygrip import KeyRing
from .signer import SIG_SUFFIX, CookieSigner, ReadWriter
from .transport import MemoryReadWriter, StarletteReadWriter

__all__ = [
    "SIG_SUFFIX",
    "Cookie",
    "CookieOptions",
    "CookieSigner",
    "CookieSignerError",
    "InvalidCookieError",
    "KeyRing",
    "KeysNotConfiguredError",
    "MemoryReadWriter",
    "ReadWriter",
    "Settings",
    "StarletteReadWriter",
]

__version__ = "1.0.0"
