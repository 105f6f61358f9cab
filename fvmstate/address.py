"""Actor addresses and the well-known singleton actor addresses."""

from __future__ import annotations

import base64
import hashlib
from dataclasses import dataclass
from enum import IntEnum

from .cborutil import decode_uvarint, encode_uvarint

NETWORK_PREFIX = "f"
_MAX_ACTOR_ID = (1 << 63) - 1
_CHECKSUM_LEN = 4


class Protocol(IntEnum):
    ID = 0
    SECP256K1 = 1
    ACTOR = 2
    BLS = 3
    UNKNOWN = 255


_PAYLOAD_LENGTHS = {Protocol.SECP256K1: 20, Protocol.ACTOR: 20, Protocol.BLS: 48}


def _blake2b(data: bytes, size: int) -> bytes:
    return hashlib.blake2b(data, digest_size=size).digest()


def _decode_id(payload: bytes) -> int:
    value, end = decode_uvarint(payload)
    if end != len(payload):
        raise ValueError("invalid ID address payload")
    if value > _MAX_ACTOR_ID:
        raise ValueError("IDs must be less than 2^63")
    return value


@dataclass(frozen=True)
class Address:
    """An address: a protocol tag followed by a protocol-specific payload."""

    protocol: Protocol
    payload: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "protocol", Protocol(self.protocol))
        object.__setattr__(self, "payload", bytes(self.payload))
        if self.protocol is Protocol.UNKNOWN:
            if self.payload:
                raise ValueError("undefined address carries no payload")
        elif self.protocol is Protocol.ID:
            _decode_id(self.payload)
        elif len(self.payload) != _PAYLOAD_LENGTHS[self.protocol]:
            raise ValueError(
                f"invalid payload length {len(self.payload)} for protocol {self.protocol.name}"
            )

    def __bytes__(self) -> bytes:
        if self.protocol is Protocol.UNKNOWN:
            return b""
        return bytes([self.protocol]) + self.payload

    @classmethod
    def from_bytes(cls, data: bytes) -> Address:
        """Parse the byte form produced by ``bytes(address)``."""
        if not data:
            return cls(Protocol.UNKNOWN)
        try:
            protocol = Protocol(data[0])
        except ValueError:
            raise ValueError(f"unknown address protocol {data[0]}") from None
        if protocol is Protocol.UNKNOWN:
            raise ValueError(f"unknown address protocol {data[0]}")
        return cls(protocol, bytes(data[1:]))

    @property
    def id(self) -> int:
        """The actor ID of an ID address."""
        if self.protocol is not Protocol.ID:
            raise ValueError("address is not an ID address")
        return _decode_id(self.payload)

    def __str__(self) -> str:
        if self.protocol is Protocol.UNKNOWN:
            return "<empty>"
        prefix = f"{NETWORK_PREFIX}{int(self.protocol)}"
        if self.protocol is Protocol.ID:
            return prefix + str(self.id)
        checksum = _blake2b(bytes(self), _CHECKSUM_LEN)
        encoded = base64.b32encode(self.payload + checksum).decode("ascii")
        return prefix + encoded.lower().rstrip("=")


UNDEF = Address(Protocol.UNKNOWN)


def new_id_address(actor_id: int) -> Address:
    if not 0 <= actor_id <= _MAX_ACTOR_ID:
        raise ValueError("IDs must be less than 2^63")
    return Address(Protocol.ID, encode_uvarint(actor_id))


def new_actor_address(data: bytes) -> Address:
    """An actor address whose payload is the 160-bit blake2b hash of data."""
    return Address(Protocol.ACTOR, _blake2b(bytes(data), 20))


SYSTEM_ACTOR_ADDR = new_id_address(0)
INIT_ACTOR_ADDR = new_id_address(1)
REWARD_ACTOR_ADDR = new_id_address(2)
CRON_ACTOR_ADDR = new_id_address(3)
STORAGE_POWER_ACTOR_ADDR = new_id_address(4)
STORAGE_MARKET_ACTOR_ADDR = new_id_address(5)
VERIFIED_REGISTRY_ACTOR_ADDR = new_id_address(6)
BURNT_FUNDS_ACTOR_ADDR = new_id_address(99)

FIRST_NON_SINGLETON_ACTOR_ID = 100