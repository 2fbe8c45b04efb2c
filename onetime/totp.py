"""
TOTP (Time-based One-Time Password) implementation following RFC 6238.

Timestamps are always supplied by the caller; this module never reads the
system clock.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Optional, Union

from onetime.hotp import HOTP
from onetime.utils import clamp

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = 30.0
MIN_PERIOD = 1.0
MAX_PERIOD = 120.0

Timestamp = Union[int, float, datetime]


def unix_seconds(timestamp: Timestamp) -> float:
    """
    Convert ``timestamp`` to seconds since the Unix epoch.

    Naive datetimes are interpreted as UTC.
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return timestamp.timestamp()
    return timestamp


def counter_for_period(timestamp: Timestamp, period: float) -> int:
    """Return floor(unix_seconds / period), the HOTP counter for ``timestamp``."""
    return int(unix_seconds(timestamp) // period)


class TOTP:
    """
    Time-based password generator and validator.

    All timestamps falling in the same period map to the same HOTP counter,
    so validation tolerance is governed by the HOTP configuration's window.
    """

    def __init__(self, hotp: HOTP, period: float = DEFAULT_PERIOD) -> None:
        """
        Args:
            hotp:   Configured HOTP generator.
            period: Time step in seconds, clamped to 1 .. 120 (default 30).

        Raises:
            ValueError: If ``period`` is NaN.
        """
        if math.isnan(period):
            raise ValueError("TOTP period must be a number, got NaN.")
        self._hotp = hotp
        self._period = float(clamp(period, MIN_PERIOD, MAX_PERIOD))
        if self._period != period:
            logger.warning("TOTP period %s clamped to %s seconds.", period, self._period)

    def __repr__(self) -> str:
        return f"TOTP(hotp={self._hotp!r}, period={self._period})"

    @property
    def hotp(self) -> HOTP:
        return self._hotp

    @property
    def period(self) -> float:
        return self._period

    # ── Converting ───────────────────────────────────────────────────────

    def counter_for(self, timestamp: Timestamp) -> int:
        """Return the HOTP counter for the period containing ``timestamp``."""
        return counter_for_period(timestamp, self._period)

    def remaining_seconds(self, timestamp: Timestamp) -> float:
        """Return seconds until the period containing ``timestamp`` expires."""
        return self._period - (unix_seconds(timestamp) % self._period)

    # ── Generating ───────────────────────────────────────────────────────

    def generate_password(self, timestamp: Timestamp) -> str:
        """Return the password for ``timestamp``; equal for the whole period."""
        return self._hotp.generate_password(self.counter_for(timestamp))

    # ── Validating ───────────────────────────────────────────────────────

    def is_valid_password(self, password: str, timestamp: Timestamp) -> bool:
        """True if ``password`` is valid at ``timestamp`` within the window."""
        return self._hotp.is_valid_password(password, self.counter_for(timestamp))

    def skew(self, timestamp: Timestamp, password: str) -> Optional[int]:
        """
        Return the offset, in periods, from the period of ``timestamp`` to the
        period matching ``password``, or None if nothing in the window matches.
        """
        return self._hotp.skew(self.counter_for(timestamp), password)
