"""Key ring signing and verification using itsdangerous."""
import hashlib
import hmac
from typing import Any, Callable, Sequence
from itsdangerous import Signer
from .errors import KeysNotConfiguredError


class KeyRing:
    """Ordered list of secret keys used to sign and verify messages.

    The first key is the primary key and is the only one used to produce
    signatures. Every key is accepted for verification, which allows a new
    key to be rotated in while cookies signed with older keys stay valid.

    Signatures are the HMAC of the message keyed with the secret as-is,
    encoded as URL-safe base64 without padding.
    """

    def __init__(
        self,
        keys: Sequence[str | bytes],
        digest_method: Callable[..., Any] = hashlib.sha1,
    ) -> None:
        if not keys:
            raise KeysNotConfiguredError("KeyRing requires at least one key")
        self._signers = tuple(
            Signer(key, key_derivation="none", digest_method=digest_method)
            for key in keys
        )

    def __len__(self) -> int:
        return len(self._signers)

    def __repr__(self) -> str:
        return f"<KeyRing keys={len(self)}>"

    def sign(self, message: str) -> str:
        """Sign ``message`` with the primary key."""
        return self._signers[0].get_signature(message).decode("ascii")

    def index(self, message: str, signature: str) -> int:
        """Find the key that produced ``signature`` for ``message``.

        Keys are tried in order. Encoded signatures are compared in constant
        time, so a non-canonical encoding of a valid MAC does not match.

        Returns:
            The position of the first matching key, or -1 if none match
        """
        for position, signer in enumerate(self._signers):
            expected = signer.get_signature(message)
            if hmac.compare_digest(expected, signature.encode("utf-8")):
                return position
        return -1

    def verify(self, message: str, signature: str) -> bool:
        """Return True if any key produced ``signature`` for ``message``."""
        return self.index(message, signature) >= 0
