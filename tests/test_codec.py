import pytest
from hypothesis import given
from hypothesis import strategies as st

from shamirssecret.codec import (
    chunk_capacity,
    decode_bytes,
    decode_chunks,
    decode_text,
    encode_bytes,
    encode_chunks,
)
from shamirssecret.errors import CodecError
from shamirssecret.field import MERSENNE_127, MERSENNE_2281


def test_encode_ab():
    assert encode_bytes(b"AB") == 65066
    assert decode_bytes(65066) == b"AB"
    assert decode_text(65066) == "AB"


def test_small_byte_is_zero_padded():
    assert encode_bytes(b"\x07") == 7
    assert decode_bytes(7) == b"\x07"


def test_empty_bytes():
    assert encode_bytes(b"") == 0
    assert decode_bytes(0, length=0) == b""


def test_leading_nul_needs_length():
    value = encode_bytes(b"\x00A")
    assert decode_bytes(value) == b"A"
    assert decode_bytes(value, length=2) == b"\x00A"


@given(st.binary(min_size=1, max_size=512).filter(lambda b: b[0] != 0))
def test_roundtrip(data):
    assert decode_bytes(encode_bytes(data)) == data


@given(st.binary(max_size=512))
def test_roundtrip_with_length(data):
    assert decode_bytes(encode_bytes(data), length=len(data)) == data


@pytest.mark.parametrize("value", [256, 65999, 300065])
def test_group_above_255(value):
    with pytest.raises(CodecError):
        decode_bytes(value)


def test_negative_value():
    with pytest.raises(CodecError):
        decode_bytes(-1)


def test_length_too_small():
    with pytest.raises(CodecError):
        decode_bytes(65066, length=1)
    with pytest.raises(CodecError):
        decode_bytes(5, length=0)


def test_decode_text_rejects_non_ascii():
    with pytest.raises(CodecError):
        decode_text(encode_bytes(b"\xff\xfe"))
    assert decode_text(encode_bytes("é".encode("utf-8")), encoding="utf-8") == "é"


def test_chunk_capacity():
    assert chunk_capacity(MERSENNE_127) == 12
    assert chunk_capacity(MERSENNE_2281) == 228
    with pytest.raises(CodecError):
        chunk_capacity(7)


def test_chunks_keep_inner_nul_bytes():
    data = b"A" * 12 + b"\x00" + b"B" * 11 + b"CD"
    chunks = encode_chunks(data, MERSENNE_127)
    assert len(chunks) == 3
    assert decode_chunks(chunks, MERSENNE_127) == data


def test_encode_chunks_rejects_empty():
    with pytest.raises(CodecError):
        encode_chunks(b"", MERSENNE_127)


@given(st.binary(min_size=1, max_size=200))
def test_chunks_fit_the_field(data):
    chunks = encode_chunks(data, MERSENNE_127)
    assert all(0 <= chunk < MERSENNE_127 for chunk in chunks)


@given(st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127), min_size=1, max_size=300))
def test_text_chunks_roundtrip(text):
    data = text.encode("ascii")
    assert decode_chunks(encode_chunks(data, MERSENNE_127), MERSENNE_127) == data
