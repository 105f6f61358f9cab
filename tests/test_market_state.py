import pytest

from fvmstate.abi import ChainEpoch, DealID
from fvmstate.address import new_id_address
from fvmstate.deal import DealProposal
from fvmstate.market_policy import deal_weight
from fvmstate.market_state import (
    EPOCH_UNDEFINED,
    DealValidationError,
    ForbiddenError,
    IllegalArgumentError,
    NotFoundError,
    validate_deal_can_activate,
    validate_deals_for_activation,
)
from fvmstate.piece import PaddedPieceSize

MINER = new_id_address(1000)
OTHER = new_id_address(1001)


def _proposal(size=2048, start=10, end=100, verified=False, provider=MINER):
    return DealProposal(
        piece_size=PaddedPieceSize(size),
        verified_deal=verified,
        provider=provider,
        start_epoch=ChainEpoch(start),
        end_epoch=ChainEpoch(end),
    )


def test_epoch_undefined_is_minus_one():
    assert EPOCH_UNDEFINED == -1
    result = validate_deals_for_activation(
        {DealID(1): _proposal(start=0)}, [1], MINER, 100, EPOCH_UNDEFINED
    )
    assert result[2] == 2048


def test_no_deals_gives_zero_weights():
    assert validate_deals_for_activation({}, [], MINER, 100, 5) == (0, 0, 0)


def test_weights_split_between_verified_and_unverified():
    plain = _proposal(size=2048)
    verified = _proposal(size=4096, verified=True)
    proposals = {DealID(1): plain, DealID(2): verified}
    weight, verified_weight, space = validate_deals_for_activation(
        proposals, [DealID(1), DealID(2)], MINER, 100, 5
    )
    assert weight == deal_weight(plain)
    assert verified_weight == deal_weight(verified)
    assert space == 2048 + 4096


def test_unverified_weights_accumulate():
    first = _proposal(size=2048, end=50)
    second = _proposal(size=1024, end=80)
    weight, verified_weight, space = validate_deals_for_activation(
        {DealID(1): first, DealID(2): second}, [1, 2], MINER, 100, 5
    )
    assert weight == deal_weight(first) + deal_weight(second)
    assert verified_weight == 0
    assert space == 2048 + 1024


def test_duplicate_deal_id_rejected():
    with pytest.raises(IllegalArgumentError, match="present multiple times"):
        validate_deals_for_activation({DealID(7): _proposal()}, [7, 7], MINER, 100, 5)


def test_missing_deal_rejected():
    with pytest.raises(NotFoundError, match="no such deal 9"):
        validate_deals_for_activation({DealID(7): _proposal()}, [9], MINER, 100, 5)


def test_wrong_provider_is_forbidden_and_wrapped():
    with pytest.raises(ForbiddenError, match="cannot activate deal 3") as info:
        validate_deals_for_activation(
            {DealID(3): _proposal(provider=OTHER)}, [3], MINER, 100, 5
        )
    assert isinstance(info.value, DealValidationError)
    assert isinstance(info.value.__cause__, ForbiddenError)


def test_start_epoch_already_elapsed():
    with pytest.raises(IllegalArgumentError, match="has already elapsed"):
        validate_deal_can_activate(_proposal(start=10), MINER, 100, 11)


def test_activation_at_start_epoch_accepted():
    result = validate_deals_for_activation({DealID(1): _proposal(start=10)}, [1], MINER, 100, 10)
    assert result[2] == 2048


def test_expiration_exceeds_sector():
    with pytest.raises(IllegalArgumentError, match="exceeds sector expiration"):
        validate_deal_can_activate(_proposal(end=101), MINER, 100, 5)


def test_expiration_equal_to_sector_accepted():
    result = validate_deals_for_activation({DealID(1): _proposal(end=100)}, [1], MINER, 100, 5)
    assert result[0] == deal_weight(_proposal(end=100))


def test_provider_mismatch_direct():
    with pytest.raises(ForbiddenError, match="must be"):
        validate_deal_can_activate(_proposal(provider=OTHER), MINER, 100, 5)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        validate_deals_for_activation({}, [1], MINER, 100, 5)