"""The Game board: an immutable snapshot of every square, plus the rules that produce the next snapshot"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from amazons.core.exceptions import IndexOutOfRangeError, InvalidBoardError
from amazons.core.shared_types import Color
from amazons.engine.moves import Move, arrow_shots, queen_moves
from amazons.engine.pieces import QUEEN_OF_COLOR, QUEENS_PER_COLOR, Cell
from amazons.engine.square import BOARD_SIZE, MIN_BOARD_LENGTH, Square, from_index


@dataclass(frozen=True)
class Board:
    """
    Flat tuple of cells, addressed through Square.to_index().

    Length and cell values are checked once here, so no other method needs to worry about them.
    Only the first MIN_BOARD_LENGTH cells belong to a square, anything after that has to be empty.
    Boards never change: apply_move() and move_queen() hand back a new Board.
    """

    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) < MIN_BOARD_LENGTH:
            raise InvalidBoardError(
                f"Board needs at least {MIN_BOARD_LENGTH} cells, got {len(self.cells)}"
            )

        try:
            cells = tuple(Cell(value) for value in self.cells)
        except ValueError as err:
            raise InvalidBoardError(f"Unknown cell value on the board: {err}") from err

        trailing = [
            index
            for index, cell in enumerate(cells[MIN_BOARD_LENGTH:], start=MIN_BOARD_LENGTH)
            if cell != Cell.EMPTY
        ]
        if trailing:
            raise InvalidBoardError(
                f"Cells past index {MIN_BOARD_LENGTH - 1} do not belong to a square and must be empty: {trailing}"
            )
        # frozen dataclass, so bypass __setattr__ to store the coerced cells
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> Self:
        """Build a board from the integers sent by the game server (0: empty, 1: white queen, 2: black queen, 3: arrow)"""
        return cls(tuple(values))

    @classmethod
    def empty(cls) -> Self:
        return cls((Cell.EMPTY,) * MIN_BOARD_LENGTH)

    @classmethod
    def with_pieces(cls, pieces: dict[Square, Cell]) -> Self:
        """Convenience method: an empty board with the given squares filled in (handy for setting up positions)"""
        return cls.empty()._replace(pieces)

    def to_list(self) -> list[int]:
        """Reverse of from_sequence()"""
        return [int(cell) for cell in self.cells]

    def cell(self, square: Square) -> Cell:
        return self.cells[self._index(square)]

    # --- PIECE LOCATOR ---
    def locate_color(self, color: Color) -> list[Square]:
        """Squares of all queens of the given color, in index order (i.e. row by row)"""
        queen = QUEEN_OF_COLOR[color]
        return [
            from_index(index) for index, cell in enumerate(self.cells) if cell == queen
        ]

    # --- TRANSITIONS ---
    def move_queen(self, origin: Square, destination: Square) -> Self:
        """Only the first half of a turn: the queen moved, no arrow placed yet."""
        return self._replace({origin: Cell.EMPTY, destination: self.cell(origin)})

    def apply_move(self, move: Move) -> Self:
        """
        Play a full turn. The move is NOT validated here, use is_legal_move() first if you do not trust it.

        The arrow is written last, so it wins if it points at the destination.
        """
        return self._replace(
            {
                move.origin: Cell.EMPTY,
                move.destination: self.cell(move.origin),
                move.arrow: Cell.ARROW,
            }
        )

    def apply_moves(self, moves: list[Move]) -> Self:
        """convenience method to apply multiple moves (if you quickly want a board in a given position reached after some moves)"""
        board = self
        for move in moves:
            board = board.apply_move(move)
        return board

    def generate_moves(self, color: Color) -> list[Move]:
        """
        Every legal full move for the given color.

        Ordered by queen (index order), then queen destination, then arrow target,
        each in the order the movement rules produce them.
        """
        moves: list[Move] = []
        for origin in self.locate_color(color):
            for destination in queen_moves(self, origin):
                after_queen_move = self.move_queen(origin, destination)
                for arrow in arrow_shots(after_queen_move, destination):
                    moves.append(Move(origin, destination, arrow))
        return moves

    def _index(self, square: Square) -> int:
        """Flat index of a square, refusing anything outside of rows/columns 0..BOARD_SIZE (a negative index would wrap around)"""
        if not (0 <= square.row <= BOARD_SIZE and 0 <= square.col <= BOARD_SIZE):
            raise IndexOutOfRangeError(f"Square {square.to_pair()} is not on the board")
        return square.to_index()

    def _replace(self, changes: dict[Square, Cell]) -> Self:
        """Copy of the board with some squares overwritten (in insertion order)"""
        cells = list(self.cells)
        for square, cell in changes.items():
            cells[self._index(square)] = cell
        return type(self)(tuple(cells))


def check_queen_counts(board: Board, expected: int = QUEENS_PER_COLOR) -> None:
    """
    Optional sanity check for a freshly received board: exactly `expected` queens of each color.

    The movement rules themselves never rely on this.
    """
    for color in Color:
        found = len(board.locate_color(color))
        if found != expected:
            raise InvalidBoardError(
                f"Expected {expected} {color} queens on the board, found {found}"
            )
