"""Arbitrary-precision integer helpers with the chain's byte, CBOR and JSON forms.

Amounts are plain Python ints; ``None`` stands for an unset value and is
encoded as zero where the encoders allow it.
"""

from __future__ import annotations

import io
import json
import re
from typing import BinaryIO

from .cborutil import MajorType, encode_header, read_header

MAX_SERIALIZED_LEN = 128
"""Maximum length of the byte form of a serialized integer."""

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def from_string(text: str) -> int:
    """Parse a base-10 integer string."""
    if not _DECIMAL.fullmatch(text):
        raise ValueError("failed to parse string as a big int")
    return int(text)


def positive_from_unsigned_bytes(data: bytes) -> int:
    """Interpret data as a big-endian unsigned magnitude."""
    return int.from_bytes(data, "big")


def product(*args: int) -> int:
    result = 1
    for value in args:
        result *= value
    return result


def sum_of(*args: int) -> int:
    return sum(args, 0)


def subtract(first: int, *args: int) -> int:
    return first - sum(args, 0)


def mod(a: int, b: int) -> int:
    """Euclidean modulus: the result is always in [0, |b|)."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return a % abs(b)


def div(a: int, b: int) -> int:
    """Euclidean division, paired with :func:`mod`."""
    return (a - mod(a, b)) // b


def exp(a: int, e: int) -> int:
    """Return a**e, or 1 when e <= 0."""
    if e <= 0:
        return 1
    return a**e


def lsh(a: int, n: int) -> int:
    if n < 0:
        raise ValueError("negative shift count")
    return a << n


def rsh(a: int, n: int) -> int:
    if n < 0:
        raise ValueError("negative shift count")
    return a >> n


def bit_len(a: int) -> int:
    """Bit length of the absolute value."""
    return abs(a).bit_length()


def maximum(x: int, y: int) -> int:
    return x if x > y else y


def minimum(x: int, y: int) -> int:
    return x if x < y else y


def cmp(a: int, b: int) -> int:
    return (a > b) - (a < b)


def to_bytes(value: int | None) -> bytes:
    """Sign-prefixed big-endian form: 0x00 positive, 0x01 negative, empty for zero."""
    if value is None:
        raise ValueError("failed to convert to bytes, big is nil")
    if value == 0:
        return b""
    magnitude = abs(value)
    body = magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")
    return (b"\x00" if value > 0 else b"\x01") + body


def from_bytes(data: bytes) -> int:
    """Inverse of :func:`to_bytes`."""
    if not data:
        return 0
    prefix = data[0]
    if prefix not in (0, 1):
        raise ValueError(f"big int prefix should be either 0 or 1, got {prefix}")
    magnitude = int.from_bytes(data[1:], "big")
    return -magnitude if prefix == 1 else magnitude


def marshal_cbor(value: int | None) -> bytes:
    """Encode as a CBOR byte string holding the sign-prefixed bytes."""
    encoded = to_bytes(0 if value is None else value)
    if len(encoded) > MAX_SERIALIZED_LEN:
        raise ValueError(f"big integer byte array too long ({len(encoded)} bytes)")
    return encode_header(MajorType.BYTE_STRING, len(encoded)) + encoded


def unmarshal_cbor(stream: BinaryIO | bytes) -> int:
    """Decode a value written by :func:`marshal_cbor` from bytes or a binary stream."""
    if isinstance(stream, (bytes, bytearray, memoryview)):
        stream = io.BytesIO(bytes(stream))
    major, length = read_header(stream)
    if major != MajorType.BYTE_STRING:
        raise ValueError(f"cbor input for fil big int was not a byte string ({major:x})")
    if length == 0:
        return 0
    if length > MAX_SERIALIZED_LEN:
        raise ValueError(f"big integer byte array too long ({length} bytes)")
    data = stream.read(length)
    if len(data) < length:
        raise EOFError("unexpected end of big integer bytes")
    return from_bytes(data)


def to_json(value: int | None) -> str:
    """Encode as a JSON string of decimal digits."""
    return json.dumps(str(0 if value is None else value))


def from_json(text: str | bytes) -> int:
    """Decode a JSON string of decimal digits."""
    decoded = json.loads(text)
    if not isinstance(decoded, str):
        raise ValueError("big int JSON value must be a string")
    if not _DECIMAL.fullmatch(decoded):
        raw = text.decode() if isinstance(text, (bytes, bytearray)) else text
        raise ValueError(f"failed to parse big string: '{raw}'")
    return int(decoded)