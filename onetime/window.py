"""
Tolerant password matching over a window of neighbouring counters.
"""

import logging
from typing import Callable, Iterator, Optional

from cryptography.hazmat.primitives import constant_time

logger = logging.getLogger(__name__)

MIN_COUNTER = -(2**63)
MAX_COUNTER = 2**63 - 1


def candidate_offsets(window: int) -> Iterator[int]:
    """
    Yield counter offsets in search order: ``0, -1, +1, -2, +2, ...``.

    At equal distance the earlier counter is tried first, so a password that
    happens to match on both sides resolves to the negative offset.
    """
    yield 0
    for distance in range(1, window + 1):
        yield -distance
        yield distance


def passwords_equal(candidate: str, expected: str) -> bool:
    """Compare two passwords in constant time."""
    if not isinstance(candidate, str):
        return False
    try:
        candidate_bytes = candidate.encode("ascii")
    except UnicodeEncodeError:
        return False
    return constant_time.bytes_eq(candidate_bytes, expected.encode("ascii"))


def find_skew(
    generate: Callable[[int], str],
    password: str,
    counter: int,
    window: int,
) -> Optional[int]:
    """
    Search ``counter - window .. counter + window`` for ``password``.

    Args:
        generate: Returns the password for a counter.
        password: Candidate password.
        counter:  Expected counter.
        window:   Counters accepted on each side of ``counter``.

    Returns:
        The offset from ``counter`` to the matching counter, or None.
    """
    for offset in candidate_offsets(window):
        candidate = counter + offset
        if not MIN_COUNTER <= candidate <= MAX_COUNTER:
            continue
        if passwords_equal(password, generate(candidate)):
            if offset:
                logger.debug("Password matched with skew %+d.", offset)
            return offset
    return None
