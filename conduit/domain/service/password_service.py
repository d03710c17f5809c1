"""Password hashing domain service (the credential service)."""

import hashlib
import hmac
import secrets

from .base import Service

SALT_BYTES = 16
ITERATIONS = 10000
KEY_LENGTH = 512


class PasswordService(Service):
    """Derive and verify password digests.

    Digests are PBKDF2-HMAC-SHA512 over a random hex salt, stored hex
    encoded next to the salt on the user record.
    """

    def generate_salt(self) -> str:
        """Return a fresh random salt."""
        return secrets.token_hex(SALT_BYTES)

    def hash(self, password: str, salt: str) -> str:
        """Derive the digest of a password with the given salt."""
        return hashlib.pbkdf2_hmac(
            "sha512",
            password.encode("utf-8"),
            salt.encode("utf-8"),
            ITERATIONS,
            dklen=KEY_LENGTH,
        ).hex()

    def verify(self, password: str, salt: str, digest: str) -> bool:
        """Check a password against a stored salt and digest."""
        return hmac.compare_digest(self.hash(password, salt), digest)
