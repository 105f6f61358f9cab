"""Policy values tied to seal and PoSt proof types."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .abi import ChainEpoch
from .network import EPOCHS_IN_DAY, EPOCHS_IN_YEAR
from .sector import RegisteredPoStProof, RegisteredSealProof, StoragePower

EPOCHS_IN_540_DAYS = ChainEpoch(540 * EPOCHS_IN_DAY)
"""Maximum lifetime of V1 stacked DRG sectors since network version 11."""

EPOCHS_IN_FIVE_YEARS = ChainEpoch(5 * EPOCHS_IN_YEAR)
"""Maximum lifetime of V1_1 stacked DRG sectors."""

_CONSENSUS_MINER_MIN_POWER: StoragePower = 10 << 40


@dataclass(frozen=True)
class SealProofPolicy:
    """Policy values associated with a seal proof type."""

    sector_max_lifetime: ChainEpoch


@dataclass(frozen=True)
class PoStProofPolicy:
    """Policy values associated with a PoSt proof type."""

    window_post_partition_sectors: int
    consensus_miner_min_power: StoragePower


def _seal_policies() -> dict[RegisteredSealProof, SealProofPolicy]:
    short = SealProofPolicy(EPOCHS_IN_540_DAYS)
    long = SealProofPolicy(EPOCHS_IN_FIVE_YEARS)
    return {
        proof: (long if proof.name.endswith("_V1_1") else short)
        for proof in RegisteredSealProof
    }


SEAL_PROOF_POLICIES_V11: Mapping[RegisteredSealProof, SealProofPolicy] = MappingProxyType(
    _seal_policies()
)

# Partition sizes must match those used by the proofs library.
# Winning PoSt proof types are omitted.
POST_PROOF_POLICIES: Mapping[RegisteredPoStProof, PoStProofPolicy] = MappingProxyType(
    {
        RegisteredPoStProof.STACKED_DRG_WINDOW_2KIB_V1: PoStProofPolicy(
            2, _CONSENSUS_MINER_MIN_POWER
        ),
        RegisteredPoStProof.STACKED_DRG_WINDOW_8MIB_V1: PoStProofPolicy(
            2, _CONSENSUS_MINER_MIN_POWER
        ),
        RegisteredPoStProof.STACKED_DRG_WINDOW_512MIB_V1: PoStProofPolicy(
            2, _CONSENSUS_MINER_MIN_POWER
        ),
        RegisteredPoStProof.STACKED_DRG_WINDOW_32GIB_V1: PoStProofPolicy(
            2349, _CONSENSUS_MINER_MIN_POWER
        ),
        RegisteredPoStProof.STACKED_DRG_WINDOW_64GIB_V1: PoStProofPolicy(
            2300, _CONSENSUS_MINER_MIN_POWER
        ),
    }
)


def _post_policy(proof: RegisteredPoStProof | int) -> PoStProofPolicy:
    try:
        return POST_PROOF_POLICIES[proof]
    except KeyError:
        raise ValueError(f"unsupported proof type: {int(proof)}") from None


def seal_proof_window_post_partition_sectors(proof: RegisteredSealProof | int) -> int:
    """Number of sectors proved in a single Window PoSt proof for a seal proof type."""
    try:
        seal = RegisteredSealProof(proof)
    except ValueError:
        raise ValueError(f"unsupported proof type: {int(proof)}") from None
    return post_proof_window_post_partition_sectors(seal.registered_window_post_proof())


def seal_proof_sector_maximum_lifetime(proof: RegisteredSealProof | int) -> ChainEpoch:
    """Maximum duration between activation and expiration of a sector of this type."""
    try:
        return SEAL_PROOF_POLICIES_V11[proof].sector_max_lifetime
    except KeyError:
        raise ValueError(f"unsupported proof type: {int(proof)}") from None


def consensus_miner_min_power(proof: RegisteredPoStProof | int) -> StoragePower:
    """Minimum power of a miner to take part in leader election, in bytes."""
    return _post_policy(proof).consensus_miner_min_power


def post_proof_window_post_partition_sectors(proof: RegisteredPoStProof | int) -> int:
    """Number of sectors proved in a single Window PoSt proof."""
    return _post_policy(proof).window_post_partition_sectors