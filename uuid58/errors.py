from __future__ import annotations

from typing import Any


class Uuid58Error(ValueError):
    """Base class for malformed codec input."""

    def __init__(self, message: str, *, value: Any) -> None:
        super().__init__(message)
        self.value = value


class EncodeError(Uuid58Error):
    """Input is not 32 hex digits (hyphens optional)."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid UUID format: {value!r}", value=value)


class DecodeError(Uuid58Error):
    """Input is not a 22-char Base58 string within the 128-bit range."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid uuid58 string: {value!r}", value=value)
