"""Defines what can occupy a square"""

from enum import IntEnum

from amazons.core.shared_types import Color


class Cell(IntEnum):
    """Values match the integers used in the game server's board list."""

    EMPTY = 0
    WHITE_QUEEN = 1
    BLACK_QUEEN = 2
    ARROW = 3


QUEEN_OF_COLOR: dict[Color, Cell] = {
    Color.WHITE: Cell.WHITE_QUEEN,
    Color.BLACK: Cell.BLACK_QUEEN,
}

CELL_TO_SYMBOL: dict[Cell, str] = {
    Cell.EMPTY: ".",
    Cell.WHITE_QUEEN: "W",
    Cell.BLACK_QUEEN: "B",
    Cell.ARROW: "X",
}

# Standard setup has four amazons a side
QUEENS_PER_COLOR = 4
