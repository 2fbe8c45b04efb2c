"""
Validated parameter set for HOTP/TOTP generation.

A :class:`Configuration` is checked once when it is built.  Out-of-range values
are rejected with a :class:`ConfigurationError` subclass naming the offending
field; nothing is silently adjusted.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from onetime.algorithm import Algorithm

logger = logging.getLogger(__name__)

# ── Constants ────────────────────────────────────────────────────────────────

DEFAULT_DIGITS = 6
MIN_DIGITS = 1
MAX_DIGITS = 9
MAX_WINDOW = 5
TRUNCATION_BYTES = 4    # bytes read at the truncation offset


# ── Errors ───────────────────────────────────────────────────────────────────

class ConfigurationError(ValueError):
    """Base class for rejected configuration values."""

    field = ""

    def __init__(
        self,
        value: object,
        lower: Optional[int] = None,
        upper: Optional[int] = None,
    ) -> None:
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(self._describe())

    def _describe(self) -> str:
        return (
            f"{self.field.capitalize()} must be an integer between "
            f"{self.lower} and {self.upper}, got {self.value!r}."
        )


class InvalidAlgorithm(ConfigurationError):
    field = "algorithm"

    def _describe(self) -> str:
        supported = ", ".join(a.value for a in Algorithm)
        return f"Unsupported algorithm {self.value!r}. Expected one of: {supported}."


class InvalidDigits(ConfigurationError):
    field = "digits"


class InvalidOffset(ConfigurationError):
    field = "offset"


class InvalidWindow(ConfigurationError):
    field = "window"


def _in_range(value: object, lower: int, upper: int) -> bool:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return lower <= value <= upper


# ── Configuration ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Configuration:
    """
    HOTP parameters.

    Attributes:
        algorithm: HMAC algorithm (default SHA1).  A name such as ``"sha256"``
                   is accepted and converted.
        digits:    Password length, 1 to 9 (default 6).
        offset:    Fixed truncation offset in ``0 .. digest_size - 5``, or
                   ``None`` for dynamic truncation.
        window:    Number of counters on each side of the expected counter
                   accepted during validation, 0 to 5.  ``None`` and ``0``
                   both mean exact-counter matching only.

    Raises:
        InvalidAlgorithm, InvalidDigits, InvalidOffset, InvalidWindow
    """

    algorithm: Algorithm = Algorithm.SHA1
    digits: int = DEFAULT_DIGITS
    offset: Optional[int] = None
    window: Optional[int] = None

    def __post_init__(self) -> None:
        algorithm = self.algorithm
        if not isinstance(algorithm, Algorithm):
            try:
                algorithm = Algorithm.from_name(str(algorithm))
            except ValueError:
                raise InvalidAlgorithm(self.algorithm) from None
            object.__setattr__(self, "algorithm", algorithm)

        if not _in_range(self.digits, MIN_DIGITS, MAX_DIGITS):
            raise InvalidDigits(self.digits, MIN_DIGITS, MAX_DIGITS)

        max_offset = algorithm.digest_size - TRUNCATION_BYTES - 1
        if self.offset is not None and not _in_range(self.offset, 0, max_offset):
            raise InvalidOffset(self.offset, 0, max_offset)

        if self.window is not None and not _in_range(self.window, 0, MAX_WINDOW):
            raise InvalidWindow(self.window, 0, MAX_WINDOW)

        logger.debug(
            "Configuration: algorithm=%s digits=%d offset=%s window=%s",
            algorithm.value, self.digits, self.offset, self.window,
        )

    @property
    def tolerance(self) -> int:
        """Effective window; ``None`` counts as 0."""
        return self.window or 0

    @property
    def modulus(self) -> int:
        return 10**self.digits
