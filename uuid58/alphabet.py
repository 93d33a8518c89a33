"""Base58 alphabet constants shared by the uuid58 codec.

Bitcoin ordering: digits, then uppercase, then lowercase, with the easily
confused ``0``, ``O``, ``I`` and ``l`` removed. Index 0 (``"1"``) is the zero
digit and the left-padding character.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

UUID58_ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
UUID58_LENGTH: Final[int] = len(UUID58_ALPHABET)
UUID58_WIDTH: Final[int] = 22
UUID58_INDEX: Final[Mapping[str, int]] = MappingProxyType(
    {ch: i for i, ch in enumerate(UUID58_ALPHABET)}
)

UUID_BYTES: Final[int] = 16
UUID_MAX: Final[int] = (1 << 128) - 1

# Base58 expansion of 2**128 - 1.
UUID58_MAX: Final[str] = "YcVfxkQb6JRzqk5kF2tNLv"  # cspell:disable-line

ZERO_DIGIT: Final[str] = UUID58_ALPHABET[0]
