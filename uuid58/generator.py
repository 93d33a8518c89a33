from __future__ import annotations

import secrets

from .alphabet import UUID_BYTES
from .encoder import encode_bytes


def _uuid4_bytes() -> bytes:
    raw = bytearray(secrets.token_bytes(UUID_BYTES))
    raw[6] = (raw[6] & 0x0F) | 0x40
    raw[8] = (raw[8] & 0x3F) | 0x80
    return bytes(raw)


def uuid58() -> str:
    """Generate a random (version 4) UUID as a 22-character uuid58 string."""
    return encode_bytes(_uuid4_bytes())


generate = uuid58
