"""Market actor deal checks: validating deals for activation in a sector."""

from __future__ import annotations

from typing import Iterable, Mapping

from .abi import ChainEpoch, DealID, DealWeight
from .address import Address
from .deal import DealProposal
from .market_policy import deal_weight

EPOCH_UNDEFINED = ChainEpoch(-1)

PROPOSALS_AMT_BITWIDTH = 5
"""Bitwidth of the deal proposals array."""

STATES_AMT_BITWIDTH = 6
"""Bitwidth of the deal states array."""


class DealValidationError(ValueError):
    """A deal failed validation."""


class IllegalArgumentError(DealValidationError):
    """The deal or its arguments are not acceptable."""


class NotFoundError(DealValidationError):
    """A referenced deal does not exist."""


class ForbiddenError(DealValidationError):
    """The caller may not act on the deal."""


def validate_deal_can_activate(
    proposal: DealProposal,
    miner_addr: Address,
    sector_expiration: ChainEpoch,
    sector_activation: ChainEpoch,
) -> None:
    """Raise unless the proposal can be activated by this miner in this sector."""
    if proposal.provider != miner_addr:
        raise ForbiddenError(
            f"proposal has provider {proposal.provider}, must be {miner_addr}"
        )
    if sector_activation > proposal.start_epoch:
        raise IllegalArgumentError(
            f"proposal start epoch {proposal.start_epoch} has already elapsed "
            f"at {sector_activation}"
        )
    if proposal.end_epoch > sector_expiration:
        raise IllegalArgumentError(
            f"proposal expiration {proposal.end_epoch} exceeds sector expiration "
            f"{sector_expiration}"
        )


def validate_deals_for_activation(
    proposals: Mapping[DealID, DealProposal],
    deal_ids: Iterable[DealID],
    miner_addr: Address,
    sector_expiry: ChainEpoch,
    curr_epoch: ChainEpoch,
) -> tuple[DealWeight, DealWeight, int]:
    """Validate deals for activation and return their combined weights.

    Returns (deal weight, verified deal weight, total deal space in bytes).
    """
    seen: set[DealID] = set()
    total_space = 0
    total_weight = 0
    total_verified_weight = 0
    for deal_id in deal_ids:
        if deal_id in seen:
            raise IllegalArgumentError(f"deal ID {deal_id} present multiple times")
        seen.add(deal_id)

        proposal = proposals.get(deal_id)
        if proposal is None:
            raise NotFoundError(f"no such deal {deal_id}")
        try:
            validate_deal_can_activate(proposal, miner_addr, sector_expiry, curr_epoch)
        except DealValidationError as exc:
            raise type(exc)(f"cannot activate deal {deal_id}: {exc}") from exc

        total_space += int(proposal.piece_size)
        weight = deal_weight(proposal)
        if proposal.verified_deal:
            total_verified_weight += weight
        else:
            total_weight += weight
    return total_weight, total_verified_weight, total_space