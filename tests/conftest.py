"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from amazons.engine.board import Board
from amazons.engine.pieces import Cell
from amazons.engine.square import MIN_BOARD_LENGTH, Square

# Standard starting squares of the game (rows counted from the top of the server's board)
WHITE_START = [Square(7, 1), Square(10, 4), Square(10, 7), Square(7, 10)]
BLACK_START = [Square(4, 1), Square(1, 4), Square(1, 7), Square(4, 10)]


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def board_with_pieces() -> Callable[[dict[tuple[int, int], Cell]], Board]:
    """Call the inner function with {(row, col): cell} to get an otherwise empty board"""

    def _create_board(pieces: dict[tuple[int, int], Cell]) -> Board:
        return Board.with_pieces(
            {Square(row, col): cell for (row, col), cell in pieces.items()}
        )

    return _create_board


@pytest.fixture
def starting_state() -> list[int]:
    """Board list as the server sends it at the start of a game"""
    state = [0] * MIN_BOARD_LENGTH
    for square in WHITE_START:
        state[square.to_index()] = int(Cell.WHITE_QUEEN)
    for square in BLACK_START:
        state[square.to_index()] = int(Cell.BLACK_QUEEN)
    return state
