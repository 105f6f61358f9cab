"""Piece sizes in their unpadded and padded forms."""

from __future__ import annotations

from dataclasses import dataclass

from .cborutil import MAX_UINT64
from .cid import Cid


class _Size(int):
    def __new__(cls, value: int = 0):
        if not 0 <= value <= MAX_UINT64:
            raise ValueError(f"{cls.__name__} out of range: {value}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class UnpaddedPieceSize(_Size):
    """Size of a piece in bytes before padding."""

    def padded(self) -> PaddedPieceSize:
        return PaddedPieceSize(int(self) + int(self) // 127)

    def validate(self) -> UnpaddedPieceSize:
        """Raise ValueError unless the size is 127 times a power of two."""
        if self < 127:
            raise ValueError("minimum piece size is 127 bytes")
        trailing_zeros = (self & -self).bit_length() - 1
        if int(self) >> trailing_zeros != 127:
            raise ValueError("unpadded piece size must be a power of 2 multiple of 127")
        return self


class PaddedPieceSize(_Size):
    """Size of a piece in bytes after padding."""

    def unpadded(self) -> UnpaddedPieceSize:
        return UnpaddedPieceSize(int(self) - int(self) // 128)

    def validate(self) -> PaddedPieceSize:
        """Raise ValueError unless the size is a power of two of at least 128."""
        if self < 128:
            raise ValueError("minimum padded piece size is 128 bytes")
        if bin(self).count("1") != 1:
            raise ValueError("padded piece size must be a power of 2")
        return self


@dataclass(frozen=True)
class PieceInfo:
    size: PaddedPieceSize
    piece_cid: Cid