"""Fixed-width Base58 encoding for 128-bit UUIDs.

Every UUID maps to exactly 22 characters of the Bitcoin Base58 alphabet,
left-padded with ``"1"``. The command surface in ``uuid58.cli`` is a thin
Typer wrapper; the codec functions below are pure and thread-safe.
"""

from .alphabet import UUID58_ALPHABET, UUID58_LENGTH, UUID58_MAX, UUID58_WIDTH
from .check import UUID58_REGEX, is_uuid58, is_valid
from .decoder import decode, decode_bytes, decode_int, decode_safe, decode_uuid
from .encoder import encode, encode_bytes, encode_int, encode_safe, encode_uuid
from .errors import DecodeError, EncodeError, Uuid58Error
from .generator import generate, uuid58

__all__ = [
    "__version__",
    "UUID58_ALPHABET",
    "UUID58_LENGTH",
    "UUID58_MAX",
    "UUID58_REGEX",
    "UUID58_WIDTH",
    "DecodeError",
    "EncodeError",
    "Uuid58Error",
    "decode",
    "decode_bytes",
    "decode_int",
    "decode_safe",
    "decode_uuid",
    "encode",
    "encode_bytes",
    "encode_int",
    "encode_safe",
    "encode_uuid",
    "generate",
    "is_uuid58",
    "is_valid",
    "uuid58",
]

__version__ = "0.1.0"
