"""
Geometry of a turn: where a queen can slide to, where it can shoot an arrow, and whether a full move is legal.

A turn in Amazons has two halves:
1. a queen slides any distance along one of 8 directions (like a chess queen, no captures, no jumping)
2. from its new square the same queen shoots an arrow, which slides by the same rule and blocks the square it lands on.
"""

from dataclasses import dataclass
from typing import Protocol, Self

from amazons.engine.pieces import Cell
from amazons.engine.square import Square


class Board(Protocol):
    """Just the parts the movement rules need"""

    def cell(self, square: Square) -> Cell: ...
    def move_queen(self, origin: Square, destination: Square) -> Self: ...


Vector = tuple[int, int]

# (delta_row, delta_col). The order fixes the order in which moves are listed.
DIRECTIONS: tuple[Vector, ...] = (
    (-1, 0),  # up
    (1, 0),  # down
    (0, -1),  # left
    (0, 1),  # right
    (-1, -1),  # up-left
    (-1, 1),  # up-right
    (1, -1),  # down-left
    (1, 1),  # down-right
)


@dataclass(frozen=True)
class Move:
    """A full turn: queen from origin to destination, then an arrow fired from destination"""

    origin: Square
    destination: Square
    arrow: Square

    @classmethod
    def from_pairs(
        cls,
        origin: list[int] | tuple[int, int],
        destination: list[int] | tuple[int, int],
        arrow: list[int] | tuple[int, int],
    ) -> Self:
        """The server describes a move as three [row, col] pairs"""
        return cls(
            Square.from_pair(origin),
            Square.from_pair(destination),
            Square.from_pair(arrow),
        )

    def to_pairs(self) -> tuple[tuple[int, int], ...]:
        return (self.origin.to_pair(), self.destination.to_pair(), self.arrow.to_pair())


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: tuple[Vector, ...] = DIRECTIONS
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    ---
    Walk outwards along every direction, one square at a time, and collect the empty squares
    until we hit the edge of the playable area or any occupied square (queen of either color, or an arrow).
    The square that blocks is never part of the result.

    ---
    Result is ordered by direction first (in the order given), then by distance from `square`.
    """
    reachable: list[Square] = []
    for d_row, d_col in directions:
        row = square.row
        col = square.col
        while True:
            row += d_row
            col += d_col
            target_square = Square(row, col)
            if not target_square.is_within_bounds():
                break

            if board.cell(target_square) != Cell.EMPTY:
                break

            reachable.append(target_square)
    return reachable


def queen_moves(board: Board, square: Square) -> list[Square]:
    """Squares the queen standing on `square` can slide to"""
    return raycasting_move(square, board)


def arrow_shots(board: Board, square: Square) -> list[Square]:
    """
    Squares an arrow fired from `square` can land on.

    NOTE: Pass the board AFTER the queen moved (see Board.move_queen), so the square the queen just left
    counts as empty and the arrow can fly through / land on it.
    """
    return raycasting_move(square, board)


# --- LEGALITY ---
def is_legal_move(board: Board, move: Move) -> bool:
    """
    Both halves of the turn have to work out:
    * the destination must be reachable by the queen on the current board
    * the arrow target must be reachable from the destination on the board where the queen has moved (no arrow placed yet)

    Illegal moves simply return False: callers that want to know which half failed can call
    queen_moves() / arrow_shots() themselves.
    """
    if move.destination not in queen_moves(board, move.origin):
        return False

    after_queen_move = board.move_queen(move.origin, move.destination)
    return move.arrow in arrow_shots(after_queen_move, move.destination)
