"""Sector sizes, identifiers and the registered proof types with their metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, NewType

from .abi import ActorID
from .cborutil import MAX_UINT64

SectorNumber = NewType("SectorNumber", int)
"""Numeric identifier of a sector, usually relative to a miner."""

MAX_SECTOR_NUMBER = (1 << 63) - 1
"""The largest assignable sector number."""

StoragePower = int
"""Unit of storage power, in bytes."""

SectorQuality = int

SealRandomness = bytes
InteractiveSealRandomness = bytes
PoStRandomness = bytes

_BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def new_storage_power(value: int) -> StoragePower:
    return int(value)


class SectorSize(int):
    """Size of a sector in bytes; one of a small set of sizes used by the network."""

    def __new__(cls, value: int = 0):
        if not 0 <= value <= MAX_UINT64:
            raise ValueError(f"sector size out of range: {value}")
        return super().__new__(cls, value)

    def __str__(self) -> str:
        return str(int(self))

    def __repr__(self) -> str:
        return f"SectorSize({int(self)})"

    def short_string(self) -> str:
        """Human-scale abbreviation, truncated unless the size is a power of 1024."""
        size = int(self)
        unit = 0
        while size >= 1024 and unit < len(_BINARY_UNITS) - 1:
            size //= 1024
            unit += 1
        return f"{size}{_BINARY_UNITS[unit]}"


@dataclass(frozen=True)
class SectorID:
    miner: ActorID
    number: SectorNumber


class RegisteredPoStProof(IntEnum):
    STACKED_DRG_WINNING_2KIB_V1 = 0
    STACKED_DRG_WINNING_8MIB_V1 = 1
    STACKED_DRG_WINNING_512MIB_V1 = 2
    STACKED_DRG_WINNING_32GIB_V1 = 3
    STACKED_DRG_WINNING_64GIB_V1 = 4
    STACKED_DRG_WINDOW_2KIB_V1 = 5
    STACKED_DRG_WINDOW_8MIB_V1 = 6
    STACKED_DRG_WINDOW_512MIB_V1 = 7
    STACKED_DRG_WINDOW_32GIB_V1 = 8
    STACKED_DRG_WINDOW_64GIB_V1 = 9

    def _info(self) -> PoStProofInfo:
        try:
            return POST_PROOF_INFOS[self]
        except KeyError:
            raise ValueError(f"unsupported proof type: {int(self)}") from None

    def sector_size(self) -> SectorSize:
        return self._info().sector_size

    def proof_size(self) -> int:
        """Size of a single PoSt proof for this proof type."""
        return self._info().proof_size


class RegisteredAggregationProof(IntEnum):
    SNARK_PACK_V1 = 0


class RegisteredUpdateProof(IntEnum):
    STACKED_DRG_2KIB_V1 = 0
    STACKED_DRG_8MIB_V1 = 1
    STACKED_DRG_512MIB_V1 = 2
    STACKED_DRG_32GIB_V1 = 3
    STACKED_DRG_64GIB_V1 = 4


class RegisteredSealProof(IntEnum):
    STACKED_DRG_2KIB_V1 = 0
    STACKED_DRG_8MIB_V1 = 1
    STACKED_DRG_512MIB_V1 = 2
    STACKED_DRG_32GIB_V1 = 3
    STACKED_DRG_64GIB_V1 = 4

    STACKED_DRG_2KIB_V1_1 = 5
    STACKED_DRG_8MIB_V1_1 = 6
    STACKED_DRG_512MIB_V1_1 = 7
    STACKED_DRG_32GIB_V1_1 = 8
    STACKED_DRG_64GIB_V1_1 = 9

    def _info(self) -> SealProofInfo:
        try:
            return SEAL_PROOF_INFOS[self]
        except KeyError:
            raise ValueError(f"unsupported proof type: {int(self)}") from None

    def proof_size(self) -> int:
        """Size of seal proofs for this sector type."""
        return self._info().proof_size

    def sector_size(self) -> SectorSize:
        return self._info().sector_size

    def registered_winning_post_proof(self) -> RegisteredPoStProof:
        return self._info().winning_post_proof

    def registered_window_post_proof(self) -> RegisteredPoStProof:
        return self._info().window_post_proof

    def registered_update_proof(self) -> RegisteredUpdateProof:
        return self._info().update_proof


@dataclass(frozen=True)
class SealProofInfo:
    """Metadata about a seal proof type."""

    proof_size: int
    sector_size: SectorSize
    winning_post_proof: RegisteredPoStProof
    window_post_proof: RegisteredPoStProof
    update_proof: RegisteredUpdateProof


@dataclass(frozen=True)
class PoStProofInfo:
    """Metadata about a PoSt proof type."""

    sector_size: SectorSize
    proof_size: int


SS_2KIB = SectorSize(2 << 10)
SS_8MIB = SectorSize(8 << 20)
SS_512MIB = SectorSize(512 << 20)
SS_32GIB = SectorSize(32 << 30)
SS_64GIB = SectorSize(64 << 30)

# (sector size, seal proof size, size suffix) for each size class, in proof-number order.
_SIZE_CLASSES = (
    (SS_2KIB, 192, "2KIB"),
    (SS_8MIB, 192, "8MIB"),
    (SS_512MIB, 192, "512MIB"),
    (SS_32GIB, 1920, "32GIB"),
    (SS_64GIB, 1920, "64GIB"),
)


def _seal_infos() -> dict[RegisteredSealProof, SealProofInfo]:
    infos = {}
    for sector_size, proof_size, suffix in _SIZE_CLASSES:
        info = SealProofInfo(
            proof_size=proof_size,
            sector_size=sector_size,
            winning_post_proof=RegisteredPoStProof[f"STACKED_DRG_WINNING_{suffix}_V1"],
            window_post_proof=RegisteredPoStProof[f"STACKED_DRG_WINDOW_{suffix}_V1"],
            update_proof=RegisteredUpdateProof[f"STACKED_DRG_{suffix}_V1"],
        )
        infos[RegisteredSealProof[f"STACKED_DRG_{suffix}_V1"]] = info
        infos[RegisteredSealProof[f"STACKED_DRG_{suffix}_V1_1"]] = info
    return dict(sorted(infos.items()))


def _post_infos() -> dict[RegisteredPoStProof, PoStProofInfo]:
    infos = {}
    for kind in ("WINNING", "WINDOW"):
        for sector_size, _, suffix in _SIZE_CLASSES:
            proof = RegisteredPoStProof[f"STACKED_DRG_{kind}_{suffix}_V1"]
            infos[proof] = PoStProofInfo(sector_size=sector_size, proof_size=192)
    return infos


SEAL_PROOF_INFOS: Mapping[RegisteredSealProof, SealProofInfo] = MappingProxyType(_seal_infos())
POST_PROOF_INFOS: Mapping[RegisteredPoStProof, PoStProofInfo] = MappingProxyType(_post_infos())