"""Core identifiers, amounts and mapping keys of the actor state model."""

from __future__ import annotations

from typing import NewType

from .address import Address
from .cborutil import MAX_UINT64, decode_uvarint, encode_uvarint
from .cid import Cid

ActorID = NewType("ActorID", int)
"""Sequential number assigned to an actor at creation; embedded in ID addresses."""

MethodNum = NewType("MethodNum", int)
"""Index of a method in an actor's method table."""

ChainEpoch = NewType("ChainEpoch", int)
"""Epoch number of the chain state."""

DealID = NewType("DealID", int)

TokenAmount = int
DealWeight = int
Randomness = bytes
Multiaddrs = bytes
PeerID = bytes

RANDOMNESS_LENGTH = 32

_MIN_INT64 = -(1 << 63)
_MAX_INT64 = (1 << 63) - 1


def new_token_amount(value: int) -> TokenAmount:
    return int(value)


def addr_key(address: Address) -> bytes:
    """Mapping key for an address: its byte form."""
    return bytes(address)


def cid_key(cid: Cid) -> bytes:
    """Mapping key for a content identifier: its binary form."""
    return bytes(cid)


def uint_key(value: int) -> bytes:
    """Mapping key for an unsigned 64-bit integer: its varint encoding."""
    if not 0 <= value <= MAX_UINT64:
        raise ValueError(f"value out of uint64 range: {value}")
    return encode_uvarint(value)


def parse_uint_key(key: bytes) -> int:
    key = bytes(key)
    if not key:
        # An empty key decodes to zero, consuming all (zero) bytes.
        return 0
    try:
        value, end = decode_uvarint(key)
    except ValueError:
        raise ValueError("failed to decode varint key") from None
    if end != len(key):
        raise ValueError("failed to decode varint key")
    return value


def int_key(value: int) -> bytes:
    """Mapping key for a signed 64-bit integer: its zig-zag varint encoding."""
    if not _MIN_INT64 <= value <= _MAX_INT64:
        raise ValueError(f"value out of int64 range: {value}")
    zigzag = value << 1 if value >= 0 else ((-value) << 1) - 1
    return encode_uvarint(zigzag)


def parse_int_key(key: bytes) -> int:
    zigzag = parse_uint_key(key)
    value = zigzag >> 1
    return ~value if zigzag & 1 else value