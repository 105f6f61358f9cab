"""Low-level binary encoding helpers: CBOR headers and unsigned varints."""

from __future__ import annotations

from enum import IntEnum
from typing import BinaryIO

MAX_UINT64 = (1 << 64) - 1
_MAX_VARINT_LEN = 10

# Additional-info value -> (width in bytes, smallest value that needs it).
_WIDE_FORMS = {
    24: (1, 24),
    25: (2, 1 << 8),
    26: (4, 1 << 16),
    27: (8, 1 << 32),
}


class MajorType(IntEnum):
    """CBOR major types."""

    UNSIGNED_INT = 0
    NEGATIVE_INT = 1
    BYTE_STRING = 2
    TEXT_STRING = 3
    ARRAY = 4
    MAP = 5
    TAG = 6
    OTHER = 7


def encode_header(major: MajorType | int, value: int) -> bytes:
    """Encode a CBOR header of the given major type with its argument value."""
    major = MajorType(major)
    if not 0 <= value <= MAX_UINT64:
        raise ValueError(f"CBOR header value out of range: {value}")
    lead = major << 5
    if value < 24:
        return bytes([lead | value])
    for info, (width, _) in _WIDE_FORMS.items():
        if value < 1 << (8 * width):
            return bytes([lead | info]) + value.to_bytes(width, "big")
    raise AssertionError("unreachable")  # pragma: no cover


def read_header(stream: BinaryIO) -> tuple[MajorType, int]:
    """Read one CBOR header from a binary stream, returning (major type, value)."""
    first = stream.read(1)
    if not first:
        raise EOFError("no CBOR header to read")
    major = MajorType(first[0] >> 5)
    info = first[0] & 0x1F
    if info < 24:
        return major, info
    form = _WIDE_FORMS.get(info)
    if form is None:
        raise ValueError(f"invalid CBOR additional info: {info}")
    width, minimum = form
    raw = stream.read(width)
    if len(raw) < width:
        raise EOFError("truncated CBOR header")
    value = int.from_bytes(raw, "big")
    if value < minimum:
        raise ValueError("cbor input was not canonical")
    return major, value


def encode_uvarint(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as a little-endian base-128 varint."""
    if not 0 <= value <= MAX_UINT64:
        raise ValueError(f"uvarint value out of range: {value}")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode_uvarint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a varint starting at offset; return (value, offset after it)."""
    value = 0
    shift = 0
    for count, byte in enumerate(bytes(data[offset:]), start=1):
        if count > _MAX_VARINT_LEN:
            raise ValueError("varint overflows 64 bits")
        if byte < 0x80:
            if count == _MAX_VARINT_LEN and byte > 1:
                raise ValueError("varint overflows 64 bits")
            return value | byte << shift, offset + count
        value |= (byte & 0x7F) << shift
        shift += 7
    raise ValueError("truncated varint")