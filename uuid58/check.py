"""Fast uuid58 validity checks."""

from __future__ import annotations

import re
from typing import Any, Final

from .alphabet import UUID58_INDEX, UUID58_MAX, UUID58_WIDTH

# Shape only: 22 alphabet symbols. Does not check the 128-bit range; use
# is_uuid58() for the complete check.
UUID58_REGEX: Final[re.Pattern[str]] = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{22}\Z")


def is_uuid58(candidate: Any) -> bool:
    """Return True iff ``decode(candidate)`` would succeed.

    Compares against UUID58_MAX symbol by symbol instead of accumulating the
    128-bit integer. Fixed width plus a positional alphabet means the first
    differing symbol decides the numeric order.

    >>> is_uuid58("XDY9dmBbcMBXqcRvYw8xJ2")
    True
    >>> is_uuid58("O0lI")
    False
    """
    if not isinstance(candidate, str) or len(candidate) != UUID58_WIDTH:
        return False
    if UUID58_REGEX.match(candidate) is None:
        return False
    for ch, top in zip(candidate, UUID58_MAX):
        if ch != top:
            return UUID58_INDEX[ch] < UUID58_INDEX[top]
    return True


is_valid = is_uuid58
