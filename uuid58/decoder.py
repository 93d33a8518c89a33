from __future__ import annotations

import uuid

from .alphabet import UUID58_INDEX, UUID58_LENGTH, UUID58_WIDTH, UUID_BYTES, UUID_MAX
from .errors import DecodeError


def _decode_int_or_error(value: object) -> int | DecodeError:
    if not isinstance(value, str) or len(value) != UUID58_WIDTH:
        return DecodeError(value)
    n = 0
    for ch in value:
        digit = UUID58_INDEX.get(ch)
        if digit is None:
            return DecodeError(value)
        n = n * UUID58_LENGTH + digit
    if n > UUID_MAX:
        return DecodeError(value)
    return n


def _format_uuid(n: int) -> str:
    hex_text = f"{n:032x}"
    return f"{hex_text[:8]}-{hex_text[8:12]}-{hex_text[12:16]}-{hex_text[16:20]}-{hex_text[20:]}"


def _decode_or_error(value: object) -> str | DecodeError:
    n = _decode_int_or_error(value)
    if isinstance(n, DecodeError):
        return n
    return _format_uuid(n)


def decode(base58_text: str) -> str:
    """Decode a uuid58 string to canonical lowercase, hyphenated UUID text.

    >>> decode("XDY9dmBbcMBXqcRvYw8xJ2")
    'f4b247fd-1f87-45d4-aa06-1c6fc0a8dfaf'

    Raises DecodeError when the input is not 22 characters long, contains a
    symbol outside the alphabet, or names a value above 2**128 - 1.
    """
    out = _decode_or_error(base58_text)
    if isinstance(out, DecodeError):
        raise out
    return out


def decode_safe(base58_text: str) -> str | DecodeError:
    """Like decode(), but returns the DecodeError instead of raising it."""
    return _decode_or_error(base58_text)


def decode_int(base58_text: str) -> int:
    n = _decode_int_or_error(base58_text)
    if isinstance(n, DecodeError):
        raise n
    return n


def decode_bytes(base58_text: str) -> bytes:
    return decode_int(base58_text).to_bytes(UUID_BYTES, "big")


def decode_uuid(base58_text: str) -> uuid.UUID:
    return uuid.UUID(int=decode_int(base58_text))
