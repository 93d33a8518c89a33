from __future__ import annotations

import uuid

from .alphabet import UUID58_ALPHABET, UUID58_LENGTH, UUID58_WIDTH, UUID_BYTES, UUID_MAX, ZERO_DIGIT
from .errors import EncodeError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _encode_int(n: int) -> str:
    # Caller guarantees 0 <= n <= UUID_MAX, so the result never exceeds the width.
    chars: list[str] = []
    while n > 0:
        n, rem = divmod(n, UUID58_LENGTH)
        chars.append(UUID58_ALPHABET[rem])
    encoded = "".join(reversed(chars))
    return (ZERO_DIGIT * (UUID58_WIDTH - len(encoded))) + encoded


def _hex_digits(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    hex_text = value.replace("-", "")
    if len(hex_text) != 32 or not all(ch in _HEX_DIGITS for ch in hex_text):
        return None
    return hex_text.lower()


def _encode_or_error(value: object) -> str | EncodeError:
    hex_text = _hex_digits(value)
    if hex_text is None:
        return EncodeError(value)
    return _encode_int(int(hex_text, 16))


def encode(uuid_text: str) -> str:
    """Encode UUID text as a 22-character uuid58 string.

    Hyphens are optional and hex digits are case-insensitive::

        >>> encode("f4b247fd-1f87-45d4-aa06-1c6fc0a8dfaf")
        'XDY9dmBbcMBXqcRvYw8xJ2'

    Raises EncodeError unless the input reduces to exactly 32 hex digits.
    """
    out = _encode_or_error(uuid_text)
    if isinstance(out, EncodeError):
        raise out
    return out


def encode_safe(uuid_text: str) -> str | EncodeError:
    """Like encode(), but returns the EncodeError instead of raising it."""
    return _encode_or_error(uuid_text)


def encode_int(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0 or value > UUID_MAX:
        raise EncodeError(value)
    return _encode_int(value)


def encode_bytes(raw: bytes) -> str:
    if not isinstance(raw, (bytes, bytearray)) or len(raw) != UUID_BYTES:
        raise EncodeError(raw)
    return _encode_int(int.from_bytes(raw, "big"))


def encode_uuid(value: uuid.UUID) -> str:
    if not isinstance(value, uuid.UUID):
        raise EncodeError(value)
    return _encode_int(value.int)
