"""Market policy: deal duration, price and collateral bounds, and deal weight."""

from __future__ import annotations

from typing import Any

from . import bigint
from .abi import ChainEpoch, DealWeight, TokenAmount
from .network import EPOCHS_IN_DAY, TOTAL_FILECOIN, BigFrac

PROVIDER_COLLATERAL_SUPPLY_TARGET = BigFrac(numerator=1, denominator=100)
"""Share of normalized circulating supply that provider collateral must cover."""

DEAL_MIN_DURATION = ChainEpoch(180 * EPOCHS_IN_DAY)
DEAL_MAX_DURATION = ChainEpoch(540 * EPOCHS_IN_DAY)

DEAL_MAX_LABEL_SIZE = 256
"""Maximum size of a deal label, in bytes."""


def deal_duration_bounds(piece_size: int) -> tuple[ChainEpoch, ChainEpoch]:
    """Inclusive bounds on deal duration."""
    return DEAL_MIN_DURATION, DEAL_MAX_DURATION


def deal_price_per_epoch_bounds(piece_size: int, duration: int) -> tuple[TokenAmount, TokenAmount]:
    return 0, TOTAL_FILECOIN


def deal_provider_collateral_bounds(
    piece_size: int,
    verified: bool,
    network_raw_power: int,
    network_qa_power: int,
    baseline_power: int,
    network_circulating_supply: TokenAmount,
) -> tuple[TokenAmount, TokenAmount]:
    """Bounds on provider collateral.

    The minimum is the supply target share of the circulating supply, scaled by
    the deal's share of max(baseline power, network raw power, deal size).
    """
    lock_target_num = PROVIDER_COLLATERAL_SUPPLY_TARGET.numerator * network_circulating_supply
    lock_target_denom = PROVIDER_COLLATERAL_SUPPLY_TARGET.denominator
    power_share_num = int(piece_size)
    power_share_denom = max(network_raw_power, baseline_power, power_share_num)

    num = lock_target_num * power_share_num
    denom = lock_target_denom * power_share_denom
    return bigint.div(num, denom), TOTAL_FILECOIN


def deal_client_collateral_bounds(piece_size: int, duration: int) -> tuple[TokenAmount, TokenAmount]:
    return 0, TOTAL_FILECOIN


def deal_weight(proposal: Any) -> DealWeight:
    """Weight of a deal proposal: its size times its duration."""
    return int(proposal.duration()) * int(proposal.piece_size)