"""
Utility helpers for onetime.
"""

import base64
import binascii
import re
from typing import TypeVar

_N = TypeVar("_N", int, float)


# ── Base32 ────────────────────────────────────────────────────────────────────

def normalize_secret(secret: str) -> str:
    """
    Normalise a base32 secret: strip spaces and dashes, uppercase, add padding.

    Raises:
        ValueError: If the string contains invalid base32 characters.
    """
    secret = secret.strip().upper().replace(" ", "").replace("-", "")
    # Base32 alphabet: A-Z and 2-7
    if not re.fullmatch(r"[A-Z2-7]+=*", secret):
        raise ValueError("Secret contains invalid base32 characters.")
    secret = secret.rstrip("=")
    return secret + "=" * ((8 - len(secret) % 8) % 8)


def decode_secret(secret: str) -> bytes:
    """
    Decode a base32-encoded secret string to raw bytes.

    Args:
        secret: Base32 secret (spaces and dashes are stripped).

    Raises:
        ValueError: On invalid base32 input.
    """
    try:
        return base64.b32decode(normalize_secret(secret))
    except binascii.Error as exc:
        raise ValueError(f"Invalid base32 secret: {exc}") from exc


# ── Ranges ────────────────────────────────────────────────────────────────────

def clamp(value: _N, lower: _N, upper: _N) -> _N:
    """Return ``value`` limited to ``lower .. upper``."""
    return min(max(value, lower), upper)


# ── Display ───────────────────────────────────────────────────────────────────

def format_otp(code: str, group: int = 3) -> str:
    """
    Format an OTP code with spaces for readability.

    Example::

        >>> format_otp("123456")
        '123 456'
    """
    return " ".join(code[i : i + group] for i in range(0, len(code), group))
