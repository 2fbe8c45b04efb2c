"""
Hash algorithms supported for HMAC-based one-time passwords.
"""

from enum import Enum

from cryptography.hazmat.primitives import hashes


class Algorithm(str, Enum):
    """Supported HMAC algorithms."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """
        Resolve an algorithm from its name, ignoring case and dashes.

        Raises:
            ValueError: If the name is not a supported algorithm.
        """
        return cls(name.strip().upper().replace("-", ""))

    @property
    def digest_size(self) -> int:
        """Number of bytes in the HMAC output."""
        return _HASH_MAP[self].digest_size

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return a fresh ``cryptography`` hash instance for this algorithm."""
        return _HASH_MAP[self]()


_HASH_MAP: dict[Algorithm, type[hashes.HashAlgorithm]] = {
    Algorithm.SHA1: hashes.SHA1,
    Algorithm.SHA256: hashes.SHA256,
    Algorithm.SHA384: hashes.SHA384,
    Algorithm.SHA512: hashes.SHA512,
}
