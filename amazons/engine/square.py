"""
A square on the board and the mapping between (row, col) and the flat index used to store the board.

(placed in its own module as multiple other modules need to import it)

The game server sends the board as a flat list of (BOARD_SIZE + 1) * (BOARD_SIZE + 1) integers.
Row 0 and column 0 are padding, so a square (row, col) lives at index row * STRIDE + col.
"""

from __future__ import annotations

from dataclasses import dataclass

from amazons.core.exceptions import IndexOutOfRangeError

# Amazons is played on a 10x10 board.
BOARD_SIZE = 10
STRIDE = BOARD_SIZE + 1
# Smallest board list that covers every index to_index() can produce
MIN_BOARD_LENGTH = STRIDE * STRIDE

# Inclusive (lowest, highest) coordinate a queen or an arrow may land on.
# NOTE: the board is numbered 1..BOARD_SIZE, but the engine has always stopped at BOARD_SIZE - 1.
# Kept as is (see DESIGN.md), change the upper bound here to open up the last row and column.
PLAYABLE_BOUNDS = (1, BOARD_SIZE - 1)


def to_index(row: int, col: int) -> int:
    return row * STRIDE + col


def from_index(index: int) -> Square:
    """Inverse of to_index(). Only indices that belong to a row in [0, BOARD_SIZE] decode."""
    row, col = divmod(index, STRIDE)
    if not (0 <= row < STRIDE):
        raise IndexOutOfRangeError(
            f"Index {index} decodes to row {row}, outside of [0, {STRIDE - 1}]"
        )
    return Square(row, col)


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> Square:
        return from_index(index)

    @classmethod
    def from_pair(cls, pair: list[int] | tuple[int, int]) -> Square:
        """The server sends squares as [row, col]"""
        row, col = pair
        return cls(row, col)

    def to_index(self) -> int:
        return to_index(self.row, self.col)

    def to_pair(self) -> tuple[int, int]:
        return (self.row, self.col)

    def is_within_bounds(self) -> bool:
        lowest, highest = PLAYABLE_BOUNDS
        return (lowest <= self.row <= highest) and (lowest <= self.col <= highest)
