"""Storage deal labels, proposals, deal state and market method parameter types."""

from __future__ import annotations

import base64
import binascii
import hashlib
import io
import json
from dataclasses import dataclass, field
from typing import Any, BinaryIO, NamedTuple

from . import bigint
from .abi import ChainEpoch, DealID, DealWeight, TokenAmount
from .address import NETWORK_PREFIX, UNDEF, Address, Protocol, new_id_address
from .cborutil import MajorType, encode_header, read_header
from .cid import FIL_COMMITMENT_UNSEALED, SHA2_256_TRUNC254_PADDED, Cid
from .market_policy import DEAL_MAX_LABEL_SIZE
from .piece import PaddedPieceSize
from .sector import RegisteredSealProof

BYTE_ARRAY_MAX_LEN = 2 << 20
"""Largest byte or text string accepted in CBOR form."""

_UNDEF_ADDRESS_STRING = "<empty>"
_CHECKSUM_LEN = 4


class _CidPrefix(NamedTuple):
    version: int
    codec: int
    hash_code: int
    hash_length: int


PIECE_CID_PREFIX = _CidPrefix(
    version=1,
    codec=FIL_COMMITMENT_UNSEALED,
    hash_code=SHA2_256_TRUNC254_PADDED,
    hash_length=32,
)


@dataclass(frozen=True)
class DealLabel:
    """A deal label: either a UTF-8 string or raw bytes.

    The default value is the empty string label.
    """

    data: bytes = b""
    binary: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_string(cls, text: str | bytes) -> DealLabel:
        if isinstance(text, str):
            raw = text.encode("utf-8", "surrogatepass")
        else:
            raw = bytes(text)
        if len(raw) > DEAL_MAX_LABEL_SIZE:
            raise ValueError(
                f"provided string is too large to be a label ({len(raw)}), "
                f"max length ({DEAL_MAX_LABEL_SIZE})"
            )
        try:
            raw.decode("utf-8")
        except UnicodeDecodeError:
            raise ValueError("provided string is invalid utf8") from None
        return cls(raw, False)

    @classmethod
    def from_bytes(cls, data: bytes) -> DealLabel:
        data = bytes(data)
        if len(data) > DEAL_MAX_LABEL_SIZE:
            raise ValueError(
                f"provided bytes are too large to be a label ({len(data)}), "
                f"max length ({DEAL_MAX_LABEL_SIZE})"
            )
        return cls(data, True)

    def is_string(self) -> bool:
        return not self.binary

    def is_bytes(self) -> bool:
        return self.binary

    def to_string(self) -> str:
        if not self.is_string():
            raise ValueError("label is not string")
        return self.data.decode("utf-8")

    def to_bytes(self) -> bytes:
        if not self.is_bytes():
            raise ValueError("label is not bytes")
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def marshal_cbor(self) -> bytes:
        """Encode as a CBOR text string or byte string, depending on the label's kind."""
        if len(self.data) > BYTE_ARRAY_MAX_LEN:
            raise ValueError(
                f"label is too long to marshal ({len(self.data)}), "
                f"max allowed ({BYTE_ARRAY_MAX_LEN})"
            )
        major = MajorType.BYTE_STRING if self.binary else MajorType.TEXT_STRING
        return encode_header(major, len(self.data)) + self.data

    @classmethod
    def unmarshal_cbor(cls, data: bytes | BinaryIO) -> DealLabel:
        """Decode a label from CBOR bytes or a binary stream."""
        stream = io.BytesIO(bytes(data)) if isinstance(data, (bytes, bytearray, memoryview)) else data
        major, length = read_header(stream)
        if major not in (MajorType.TEXT_STRING, MajorType.BYTE_STRING):
            raise ValueError(
                f"unexpected major tag ({int(major)}) when unmarshaling DealLabel: "
                f"only textString ({int(MajorType.TEXT_STRING)}) or "
                f"byteString ({int(MajorType.BYTE_STRING)}) expected"
            )
        if length > BYTE_ARRAY_MAX_LEN:
            raise ValueError(f"label was too long ({length}), max allowed ({BYTE_ARRAY_MAX_LEN})")
        buf = stream.read(length)
        if len(buf) < length:
            raise EOFError("unexpected end of label bytes")
        binary = major != MajorType.TEXT_STRING
        if not binary:
            try:
                buf.decode("utf-8")
            except UnicodeDecodeError:
                raise ValueError("label string not valid utf8") from None
        return cls(buf, binary)

    def to_json(self) -> str:
        """Encode as a JSON string; only string labels can be encoded."""
        try:
            text = self.to_string()
        except ValueError as exc:
            raise ValueError(f"can only marshal strings: {exc}") from None
        return json.dumps(text)

    @classmethod
    def from_json(cls, text: str | bytes) -> DealLabel:
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"failed to unmarshal string: {exc}") from None
        if not isinstance(decoded, str):
            raise ValueError("failed to unmarshal string: JSON value is not a string")
        try:
            return cls.from_string(decoded)
        except ValueError as exc:
            raise ValueError(f"failed to create label from string: {exc}") from None


EMPTY_DEAL_LABEL = DealLabel()


def marshal_label_cbor(label: DealLabel | None) -> bytes:
    """Encode a label; a missing label encodes as the empty string label."""
    return (EMPTY_DEAL_LABEL if label is None else label).marshal_cbor()


def _address_from_string(text: str) -> Address:
    if text == _UNDEF_ADDRESS_STRING:
        return UNDEF
    if len(text) < 3 or text[0] not in (NETWORK_PREFIX, "t"):
        raise ValueError(f"invalid address string: {text!r}")
    try:
        protocol = Protocol(int(text[1]))
    except ValueError:
        raise ValueError(f"unknown address protocol in {text!r}") from None
    body = text[2:]
    if protocol is Protocol.ID:
        if not body.isdigit():
            raise ValueError(f"invalid ID address: {text!r}")
        return new_id_address(int(body))
    if protocol is Protocol.UNKNOWN:
        raise ValueError(f"unknown address protocol in {text!r}")
    upper = body.upper()
    try:
        raw = base64.b32decode(upper + "=" * (-len(upper) % 8))
    except binascii.Error as exc:
        raise ValueError(f"invalid address encoding: {exc}") from None
    payload, checksum = raw[:-_CHECKSUM_LEN], raw[-_CHECKSUM_LEN:]
    expected = hashlib.blake2b(bytes([protocol]) + payload, digest_size=_CHECKSUM_LEN).digest()
    if checksum != expected:
        raise ValueError("invalid address checksum")
    return Address(protocol, payload)


def _cid_to_json(cid: Cid | None) -> Any:
    return None if cid is None else {"/": str(cid)}


def _cid_from_json(value: Any) -> Cid | None:
    if value is None:
        return None
    if not isinstance(value, dict) or not isinstance(value.get("/"), str):
        raise ValueError("CID JSON must be an object with a '/' string")
    return Cid.parse(value["/"])


def _amount_from_json(value: Any) -> int:
    if value is None:
        return 0
    return bigint.from_json(json.dumps(value))


@dataclass(frozen=True)
class DealState:
    sector_start_epoch: ChainEpoch
    """-1 if not yet included in a proven sector."""
    last_updated_epoch: ChainEpoch
    """-1 if the deal state was never updated."""
    slash_epoch: ChainEpoch
    """-1 if the deal was never slashed."""


@dataclass(frozen=True)
class DealProposal:
    """A storage deal between a client and a provider."""

    piece_cid: Cid | None = None
    piece_size: PaddedPieceSize = PaddedPieceSize(0)
    verified_deal: bool = False
    client: Address = UNDEF
    provider: Address = UNDEF
    label: DealLabel = EMPTY_DEAL_LABEL
    start_epoch: ChainEpoch = ChainEpoch(0)
    end_epoch: ChainEpoch = ChainEpoch(0)
    storage_price_per_epoch: TokenAmount = 0
    provider_collateral: TokenAmount = 0
    client_collateral: TokenAmount = 0

    def duration(self) -> ChainEpoch:
        return ChainEpoch(self.end_epoch - self.start_epoch)

    def total_storage_fee(self) -> TokenAmount:
        return self.storage_price_per_epoch * self.duration()

    def client_balance_requirement(self) -> TokenAmount:
        return self.client_collateral + self.total_storage_fee()

    def provider_balance_requirement(self) -> TokenAmount:
        return self.provider_collateral

    def to_json(self) -> str:
        return json.dumps(
            {
                "PieceCID": _cid_to_json(self.piece_cid),
                "PieceSize": int(self.piece_size),
                "VerifiedDeal": self.verified_deal,
                "Client": str(self.client),
                "Provider": str(self.provider),
                "Label": json.loads(self.label.to_json()),
                "StartEpoch": int(self.start_epoch),
                "EndEpoch": int(self.end_epoch),
                "StoragePricePerEpoch": str(self.storage_price_per_epoch),
                "ProviderCollateral": str(self.provider_collateral),
                "ClientCollateral": str(self.client_collateral),
            }
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> DealProposal:
        obj = json.loads(text)
        if not isinstance(obj, dict):
            raise ValueError("deal proposal JSON must be an object")
        label_value = obj.get("Label")
        label = (
            EMPTY_DEAL_LABEL
            if label_value is None
            else DealLabel.from_json(json.dumps(label_value))
        )
        return cls(
            piece_cid=_cid_from_json(obj.get("PieceCID")),
            piece_size=PaddedPieceSize(obj.get("PieceSize") or 0),
            verified_deal=bool(obj.get("VerifiedDeal", False)),
            client=_address_from_string(obj.get("Client") or _UNDEF_ADDRESS_STRING),
            provider=_address_from_string(obj.get("Provider") or _UNDEF_ADDRESS_STRING),
            label=label,
            start_epoch=ChainEpoch(obj.get("StartEpoch") or 0),
            end_epoch=ChainEpoch(obj.get("EndEpoch") or 0),
            storage_price_per_epoch=_amount_from_json(obj.get("StoragePricePerEpoch")),
            provider_collateral=_amount_from_json(obj.get("ProviderCollateral")),
            client_collateral=_amount_from_json(obj.get("ClientCollateral")),
        )


@dataclass(frozen=True)
class WithdrawBalanceParams:
    provider_or_client_address: Address
    amount: TokenAmount


@dataclass(frozen=True)
class SectorDeals:
    sector_expiry: ChainEpoch
    deal_ids: list[DealID] = field(default_factory=list)


@dataclass(frozen=True)
class VerifyDealsForActivationParams:
    sectors: list[SectorDeals] = field(default_factory=list)


@dataclass(frozen=True)
class SectorWeights:
    deal_space: int
    """Total space in bytes of submitted deals."""
    deal_weight: DealWeight
    """Total space*time of submitted deals."""
    verified_deal_weight: DealWeight
    """Total space*time of submitted verified deals."""


@dataclass(frozen=True)
class VerifyDealsForActivationReturn:
    sectors: list[SectorWeights] = field(default_factory=list)


@dataclass(frozen=True)
class ActivateDealsParams:
    deal_ids: list[DealID]
    sector_expiry: ChainEpoch


@dataclass(frozen=True)
class SectorDataSpec:
    deal_ids: list[DealID]
    sector_type: RegisteredSealProof


@dataclass(frozen=True)
class OnMinerSectorsTerminateParams:
    epoch: ChainEpoch
    deal_ids: list[DealID] = field(default_factory=list)