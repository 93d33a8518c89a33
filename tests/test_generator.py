import uuid

import pytest

from uuid58 import decode, decode_uuid, generate, is_uuid58, uuid58
from uuid58 import generator


def test_uuid58_shape():
    value = uuid58()
    assert len(value) == 22
    assert is_uuid58(value)


def test_generate_is_uuid58():
    assert generate is uuid58


def test_generated_ids_carry_version_and_variant_bits():
    for _ in range(200):
        hex_text = decode(uuid58()).replace("-", "")
        assert hex_text[12] == "4"
        assert hex_text[16] in "89ab"


def test_generated_ids_parse_as_stdlib_uuid4():
    value = decode_uuid(uuid58())
    assert value.version == 4
    assert value.variant == uuid.RFC_4122


def test_generated_ids_are_distinct():
    values = {uuid58() for _ in range(1000)}
    assert len(values) == 1000


def test_version_and_variant_overwrite_random_bits(monkeypatch):
    monkeypatch.setattr(generator.secrets, "token_bytes", lambda n: b"\xff" * n)
    assert decode(uuid58()) == "ffffffff-ffff-4fff-bfff-ffffffffffff"

    monkeypatch.setattr(generator.secrets, "token_bytes", lambda n: b"\x00" * n)
    assert decode(uuid58()) == "00000000-0000-4000-8000-000000000000"


def test_generator_requests_16_bytes(monkeypatch):
    seen: list[int] = []

    def _token_bytes(n: int) -> bytes:
        seen.append(n)
        return bytes(range(n))

    monkeypatch.setattr(generator.secrets, "token_bytes", _token_bytes)
    value = uuid58()
    assert seen == [16]
    assert decode(value) == "00010203-0405-4607-8809-0a0b0c0d0e0f"


def test_random_source_failure_propagates(monkeypatch):
    def _broken(n: int) -> bytes:
        raise OSError("entropy source unavailable")

    monkeypatch.setattr(generator.secrets, "token_bytes", _broken)
    with pytest.raises(OSError, match="entropy"):
        uuid58()


def test_generator_encodes_through_encode_bytes(monkeypatch):
    seen: list[bytes] = []
    real = generator.encode_bytes

    def _encode_bytes(raw: bytes) -> str:
        seen.append(raw)
        return real(raw)

    monkeypatch.setattr(generator, "encode_bytes", _encode_bytes)
    value = uuid58()
    assert len(seen) == 1
    assert len(seen[0]) == 16
    assert decode(value).replace("-", "") == seen[0].hex()
