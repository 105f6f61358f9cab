"""Content identifiers (version 1) and the default identifier builder."""

from __future__ import annotations

import base64
import binascii
import hashlib
from dataclasses import dataclass, replace

from .cborutil import decode_uvarint, encode_uvarint

# Codecs.
RAW = 0x55
DAG_CBOR = 0x71
FIL_COMMITMENT_UNSEALED = 0xF101

# Multihash functions.
IDENTITY = 0x00
SHA2_256_TRUNC254_PADDED = 0x1012
BLAKE2B_256 = 0xB220

HASH_FUNCTION = BLAKE2B_256
"""The default hash function for computing identifiers."""

CID_INLINE_LIMIT = -1
"""Blocks up to this size are inlined with the identity hash; -1 disables it."""

_BASE32_PREFIX = "b"


@dataclass(frozen=True)
class Cid:
    """A version-1 content identifier."""

    codec: int
    hash_code: int
    digest: bytes

    def __bytes__(self) -> bytes:
        return (
            encode_uvarint(1)
            + encode_uvarint(self.codec)
            + encode_uvarint(self.hash_code)
            + encode_uvarint(len(self.digest))
            + self.digest
        )

    def __str__(self) -> str:
        encoded = base64.b32encode(bytes(self)).decode("ascii")
        return _BASE32_PREFIX + encoded.lower().rstrip("=")

    @classmethod
    def from_bytes(cls, data: bytes) -> Cid:
        data = bytes(data)
        version, offset = decode_uvarint(data)
        if version != 1:
            raise ValueError(f"unsupported CID version {version}")
        codec, offset = decode_uvarint(data, offset)
        hash_code, offset = decode_uvarint(data, offset)
        length, offset = decode_uvarint(data, offset)
        digest = data[offset:]
        if len(digest) != length:
            raise ValueError("CID digest length does not match its multihash header")
        return cls(codec, hash_code, digest)

    @classmethod
    def parse(cls, text: str) -> Cid:
        """Parse the base32 multibase string form."""
        if not text.startswith(_BASE32_PREFIX):
            raise ValueError("unsupported multibase encoding")
        body = text[len(_BASE32_PREFIX):].upper()
        try:
            raw = base64.b32decode(body + "=" * (-len(body) % 8))
        except binascii.Error as exc:
            raise ValueError(f"invalid base32 CID: {exc}") from exc
        return cls.from_bytes(raw)


def _digest(hash_code: int, data: bytes) -> bytes:
    if hash_code == BLAKE2B_256:
        return hashlib.blake2b(data, digest_size=32).digest()
    if hash_code == IDENTITY:
        return bytes(data)
    raise ValueError(f"unsupported hash function 0x{hash_code:x}")


@dataclass(frozen=True)
class CidBuilder:
    """Builds identifiers with a fixed codec and hash function."""

    codec: int = DAG_CBOR
    hash_function: int = HASH_FUNCTION
    inline_limit: int = CID_INLINE_LIMIT

    def with_codec(self, codec: int) -> CidBuilder:
        return replace(self, codec=codec)

    def sum(self, data: bytes) -> Cid:
        hash_code = IDENTITY if len(data) <= self.inline_limit else self.hash_function
        return Cid(self.codec, hash_code, _digest(hash_code, data))


CID_BUILDER = CidBuilder()
"""Default builder: DAG-CBOR codec, 256-bit blake2b."""