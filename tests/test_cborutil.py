import io

import pytest

from fvmstate.cborutil import (
    MAX_UINT64,
    MajorType,
    decode_uvarint,
    encode_header,
    encode_uvarint,
    read_header,
)


def test_empty_byte_string_header():
    assert encode_header(MajorType.BYTE_STRING, 0) == b"@"


def test_empty_text_string_header():
    assert encode_header(MajorType.TEXT_STRING, 0) == b"\x60"


@pytest.mark.parametrize("major", list(MajorType))
@pytest.mark.parametrize(
    "value", [0, 23, 24, 255, 256, 65535, 65536, 2**32 - 1, 2**32, MAX_UINT64]
)
def test_header_round_trip(major, value):
    encoded = encode_header(major, value)
    stream = io.BytesIO(encoded)
    assert read_header(stream) == (major, value)
    assert stream.read() == b""


def test_header_lengths_grow_with_value():
    sizes = [len(encode_header(MajorType.ARRAY, v)) for v in (0, 24, 256, 65536, 2**32)]
    assert sizes == sorted(sizes)
    assert len(set(sizes)) == len(sizes)


@pytest.mark.parametrize("value", [-1, MAX_UINT64 + 1])
def test_header_value_out_of_range(value):
    with pytest.raises(ValueError):
        encode_header(MajorType.UNSIGNED_INT, value)


def test_read_header_empty_stream():
    with pytest.raises(EOFError):
        read_header(io.BytesIO(b""))


def test_read_header_truncated():
    truncated = encode_header(MajorType.BYTE_STRING, 1000)[:-1]
    with pytest.raises(EOFError):
        read_header(io.BytesIO(truncated))


def test_read_header_rejects_non_canonical():
    non_canonical = bytes([0x18, 0x05])
    with pytest.raises(ValueError, match="canonical"):
        read_header(io.BytesIO(non_canonical))


def test_read_header_rejects_indefinite_length():
    with pytest.raises(ValueError):
        read_header(io.BytesIO(bytes([0x5F])))


@pytest.mark.parametrize("value", [0, 1, 127, 128, 300, 2**32, MAX_UINT64])
def test_uvarint_round_trip(value):
    encoded = encode_uvarint(value)
    assert decode_uvarint(encoded) == (value, len(encoded))


def test_uvarint_with_offset():
    encoded = b"\xff" + encode_uvarint(300) + b"\x00"
    value, end = decode_uvarint(encoded, 1)
    assert value == 300
    assert encoded[end:] == b"\x00"


def test_uvarint_truncated():
    with pytest.raises(ValueError, match="truncated"):
        decode_uvarint(b"\x80\x80")


def test_uvarint_overflow():
    with pytest.raises(ValueError, match="overflow"):
        decode_uvarint(b"\xff" * 9 + b"\x02")
    with pytest.raises(ValueError, match="overflow"):
        decode_uvarint(b"\xff" * 10 + b"\x01")


def test_uvarint_negative_rejected():
    with pytest.raises(ValueError):
        encode_uvarint(-1)