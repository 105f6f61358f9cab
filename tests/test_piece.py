import pytest

from fvmstate.cid import CID_BUILDER
from fvmstate.piece import PaddedPieceSize, PieceInfo, UnpaddedPieceSize

UNPADDED = [127, 1016, 34091302912]
PADDED = [128, 1024, 34359738368]


@pytest.mark.parametrize("size", UNPADDED)
def test_unpadded_valid(size):
    assert UnpaddedPieceSize(size).validate() == size


@pytest.mark.parametrize("size", PADDED)
def test_padded_valid(size):
    assert PaddedPieceSize(size).validate() == size


@pytest.mark.parametrize("unpadded, padded", list(zip(UNPADDED, PADDED)))
def test_convert(unpadded, padded):
    assert UnpaddedPieceSize(unpadded).padded() == PaddedPieceSize(padded)
    assert PaddedPieceSize(padded).unpadded() == UnpaddedPieceSize(unpadded)
    assert isinstance(UnpaddedPieceSize(unpadded).padded(), PaddedPieceSize)


@pytest.mark.parametrize("size", UNPADDED)
def test_swap_and_round_trip_unpadded(size):
    piece = UnpaddedPieceSize(size)
    assert piece.padded().validate() == piece.padded()
    assert piece.padded().unpadded().validate() == size


@pytest.mark.parametrize("size", PADDED)
def test_swap_and_round_trip_padded(size):
    piece = PaddedPieceSize(size)
    assert piece.unpadded().validate() == piece.unpadded()
    assert piece.unpadded().padded().validate() == size


@pytest.mark.parametrize("size", [9, 128, 99453687, 1016 + 0x1000000])
def test_unpadded_invalid(size):
    with pytest.raises(ValueError):
        UnpaddedPieceSize(size).validate()


@pytest.mark.parametrize("size", [8, 127, 99453687, 0xC00, 1025])
def test_padded_invalid(size):
    with pytest.raises(ValueError):
        PaddedPieceSize(size).validate()


def test_minimum_messages():
    with pytest.raises(ValueError, match="minimum piece size"):
        UnpaddedPieceSize(0).validate()
    with pytest.raises(ValueError, match="power of 2"):
        PaddedPieceSize(0xC00).validate()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        PaddedPieceSize(-1)


def test_piece_info_fields():
    cid = CID_BUILDER.sum(b"piece")
    info = PieceInfo(PaddedPieceSize(128), cid)
    assert info.size == 128
    assert info.piece_cid == cid