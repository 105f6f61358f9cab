"""Network-wide parameters and small shared value types."""

from __future__ import annotations

from dataclasses import dataclass

from .abi import ChainEpoch

EPOCH_DURATION_SECONDS = 30
"""Duration of a chain epoch, in seconds."""

SECONDS_IN_HOUR = 60 * 60
SECONDS_IN_DAY = 24 * SECONDS_IN_HOUR
EPOCHS_IN_HOUR = SECONDS_IN_HOUR // EPOCH_DURATION_SECONDS
EPOCHS_IN_DAY = 24 * EPOCHS_IN_HOUR
EPOCHS_IN_YEAR = 365 * EPOCHS_IN_DAY

if SECONDS_IN_HOUR % EPOCH_DURATION_SECONDS != 0:
    raise RuntimeError(
        f"epoch duration {EPOCH_DURATION_SECONDS} does not evenly divide "
        f"one hour ({SECONDS_IN_HOUR})"
    )

EXPECTED_LEADERS_PER_EPOCH = 5
"""Expected total block quality in an epoch."""

TOKEN_PRECISION = 1_000_000_000_000_000_000
"""Number of indivisible token units in one FIL."""

TOTAL_FILECOIN = 2_000_000_000 * TOKEN_PRECISION
"""Maximum supply of tokens that will ever exist, in token units."""

QUALITY_BASE_MULTIPLIER = 10
"""Quality multiplier for committed capacity (no deals) in a sector."""

DEAL_WEIGHT_MULTIPLIER = 10
"""Quality multiplier for unverified deals in a sector."""

VERIFIED_DEAL_WEIGHT_MULTIPLIER = 100
"""Quality multiplier for verified deals in a sector."""

SECTOR_QUALITY_PRECISION = 20
"""Precision used for quality-adjusted power calculations."""

ONE_NANO_FIL = 1_000_000_000

DEFAULT_HAMT_BITWIDTH = 5
"""Default log2 of the branching factor for HAMTs."""


@dataclass(frozen=True)
class BigFrac:
    numerator: int
    denominator: int


@dataclass(frozen=True)
class QuantSpec:
    """A quantization spec: a unit and the offset from zero the modulus is based on."""

    unit: ChainEpoch
    offset: ChainEpoch