"""Password hashing with scrypt.

Each account stores its own random salt next to the derived key. The key is
derived with scrypt, a memory-hard KDF, so brute-forcing a stolen hash stays
expensive even though the salt is known.

The work factor is passed in at construction time rather than read from
global state, so tests can use a cheap factor and production the reference
one (n=2**15, r=8, p=1, 32-byte output).
"""

import base64
import hashlib
import hmac

# OpenSSL refuses scrypt calls needing more than its default 32 MiB unless
# maxmem is raised explicitly
_MAXMEM_HEADROOM = 1024 * 1024


class PasswordHasher:
    """Derives and verifies fixed-length scrypt password hashes."""

    def __init__(self, n: int = 32768, r: int = 8, p: int = 1, dklen: int = 32):
        if n < 2 or n & (n - 1):
            raise ValueError(f"scrypt n must be a power of two greater than 1, got {n}")
        self.n = n
        self.r = r
        self.p = p
        self.dklen = dklen

    @classmethod
    def from_settings(cls, settings) -> "PasswordHasher":
        """Build a hasher from the scrypt_* configuration values."""
        return cls(
            n=settings.scrypt_n,
            r=settings.scrypt_r,
            p=settings.scrypt_p,
            dklen=settings.scrypt_dklen,
        )

    @property
    def maxmem(self) -> int:
        return 128 * self.r * self.n * self.p + _MAXMEM_HEADROOM

    def hash(self, password: str, salt: str) -> str:
        """
        Hash a password with the given salt.

        Deterministic: the same (password, salt) pair always yields the same
        base64-encoded key of dklen bytes, whatever the password length.

        Args:
            password: Plaintext password
            salt: Stored salt in its text form (used as UTF-8 bytes)

        Returns:
            Base64-encoded derived key
        """
        key = hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt.encode("utf-8"),
            n=self.n,
            r=self.r,
            p=self.p,
            dklen=self.dklen,
            maxmem=self.maxmem,
        )
        return base64.b64encode(key).decode("ascii")

    def verify(self, password: str, salt: str, expected_hash: str) -> bool:
        """Check a candidate password against a stored hash in constant time."""
        candidate = self.hash(password, salt)
        return hmac.compare_digest(candidate.encode("ascii"), expected_hash.encode("ascii"))
