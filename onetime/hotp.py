"""
HOTP (HMAC-based One-Time Password) implementation following RFC 4226.
"""

import struct
from typing import Optional

from cryptography.hazmat.primitives import hmac

from onetime.configuration import Configuration
from onetime.window import MAX_COUNTER, MIN_COUNTER, find_skew


class HOTP:
    """
    Counter-based password generator and validator.

    Usage::

        hotp = HOTP(b"12345678901234567890", Configuration(digits=6, window=1))
        hotp.generate_password(0)             # "755224"
        hotp.skew(1, "755224")                # -1
    """

    def __init__(
        self,
        secret: bytes,
        configuration: Optional[Configuration] = None,
    ) -> None:
        """
        Args:
            secret:        Raw shared secret.  Any length is accepted.
            configuration: Validated parameters; defaults to SHA1, 6 digits,
                           dynamic truncation and no window.

        Raises:
            TypeError: If ``secret`` is not bytes-like.
        """
        if not isinstance(secret, (bytes, bytearray, memoryview)):
            raise TypeError(f"Secret must be bytes, got {type(secret).__name__}.")
        self._secret = bytes(secret)
        self._configuration = configuration or Configuration()

    def __repr__(self) -> str:
        return f"HOTP(configuration={self._configuration!r})"

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    # ── Generating ───────────────────────────────────────────────────────

    def generate_password(self, counter: int) -> str:
        """
        Return the password for ``counter``.

        Raises:
            TypeError:  If ``counter`` is not an integer.
            ValueError: If ``counter`` does not fit a signed 64-bit integer.
        """
        if isinstance(counter, bool) or not isinstance(counter, int):
            raise TypeError(f"Counter must be an integer, got {type(counter).__name__}.")
        if not MIN_COUNTER <= counter <= MAX_COUNTER:
            raise ValueError(f"Counter {counter} is outside the signed 64-bit range.")
        code = self._truncate(self._digest(counter))
        return str(code % self._configuration.modulus).zfill(self._configuration.digits)

    # ── Validating ───────────────────────────────────────────────────────

    def is_valid_password(self, password: str, counter: int) -> bool:
        """True if ``password`` matches a counter within the window of ``counter``."""
        return self.skew(counter, password) is not None

    def skew(self, counter: int, password: str) -> Optional[int]:
        """
        Return the offset from ``counter`` to the counter matching
        ``password``, or None if no counter in the window matches.
        """
        return find_skew(
            self.generate_password, password, counter, self._configuration.tolerance
        )

    # ── Internals ────────────────────────────────────────────────────────

    def _digest(self, counter: int) -> bytes:
        mac = hmac.HMAC(self._secret, self._configuration.algorithm.hash_algorithm())
        mac.update(struct.pack(">q", counter))
        return mac.finalize()

    def _truncate(self, digest: bytes) -> int:
        offset = self._configuration.offset
        if offset is None:
            # Dynamic truncation
            offset = digest[-1] & 0x0F
        return (
            (digest[offset] & 0x7F) << 24
            | (digest[offset + 1] & 0xFF) << 16
            | (digest[offset + 2] & 0xFF) << 8
            | (digest[offset + 3] & 0xFF)
        )
