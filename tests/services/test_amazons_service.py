"""Unit tests for amazons/services/amazons_service.py"""

import logging

import pytest

from amazons.core.exceptions import (
    GameStateError,
    InvalidBoardError,
    InvalidMessageError,
)
from amazons.core.shared_types import Color
from amazons.engine.pieces import Cell
from amazons.engine.square import MIN_BOARD_LENGTH, Square
from amazons.services.amazons_service import (
    AmazonsService,
    BoardStateMessage,
    OpponentMoveMessage,
    QueenSummary,
)


@pytest.fixture
def service_in_game(starting_state: list[int]) -> AmazonsService:
    service = AmazonsService()
    service.on_board_state(BoardStateMessage(game_state=starting_state))
    return service


# --- BOARD STATE ---
def test_no_board_before_first_message() -> None:
    service = AmazonsService()
    with pytest.raises(GameStateError):
        _ = service.current_board


def test_board_state_replaces_board(starting_state: list[int]) -> None:
    service = AmazonsService()
    board = service.on_board_state(BoardStateMessage(game_state=starting_state))
    assert service.current_board == board
    assert board.to_list() == starting_state


def test_strict_queen_count(starting_state: list[int]) -> None:
    service = AmazonsService(strict_queen_count=True)
    service.on_board_state(BoardStateMessage(game_state=starting_state))

    with pytest.raises(InvalidBoardError):
        service.on_board_state(BoardStateMessage(game_state=[0] * MIN_BOARD_LENGTH))


# --- OPPONENT MOVES ---
def test_opponent_move_updates_board(service_in_game: AmazonsService) -> None:
    board_before = service_in_game.current_board
    message = OpponentMoveMessage(
        queen_position_current=[4, 1],
        queen_position_next=[4, 5],
        arrow_position=[2, 3],
    )
    board = service_in_game.on_opponent_move(message)

    assert board.cell(Square(4, 1)) == Cell.EMPTY
    assert board.cell(Square(4, 5)) == Cell.BLACK_QUEEN
    assert board.cell(Square(2, 3)) == Cell.ARROW
    assert service_in_game.current_board == board
    # the previous snapshot stays valid
    assert board_before.cell(Square(4, 1)) == Cell.BLACK_QUEEN


def test_illegal_opponent_move_is_logged_and_applied(
    service_in_game: AmazonsService, caplog: pytest.LogCaptureFixture
) -> None:
    """Server is the referee: apply the move, but warn that our board might be out of sync"""
    message = OpponentMoveMessage(
        queen_position_current=[4, 1],
        queen_position_next=[6, 2],
        arrow_position=[6, 3],
    )
    with caplog.at_level(logging.WARNING):
        board = service_in_game.on_opponent_move(message)

    assert "illegal" in caplog.text
    assert board.cell(Square(6, 2)) == Cell.BLACK_QUEEN


def test_opponent_move_before_board() -> None:
    service = AmazonsService()
    message = OpponentMoveMessage(
        queen_position_current=[4, 1],
        queen_position_next=[4, 5],
        arrow_position=[2, 3],
    )
    with pytest.raises(GameStateError):
        service.on_opponent_move(message)


# --- SUMMARY ---
def test_summarize(service_in_game: AmazonsService) -> None:
    summaries = service_in_game.summarize(Color.BLACK)
    assert len(summaries) == 4
    assert all(isinstance(summary, QueenSummary) for summary in summaries)
    assert [summary.square for summary in summaries] == [
        (1, 4),
        (1, 7),
        (4, 1),
        (4, 10),
    ]
    assert all(summary.num_queen_moves > 0 for summary in summaries)
    assert all(summary.num_arrow_shots > 0 for summary in summaries)


def test_summarize_boxed_in_queen() -> None:
    state = [0] * MIN_BOARD_LENGTH
    state[Square(1, 1).to_index()] = int(Cell.WHITE_QUEEN)
    for square in [Square(1, 2), Square(2, 1), Square(2, 2)]:
        state[square.to_index()] = int(Cell.ARROW)

    service = AmazonsService()
    service.on_board_state(BoardStateMessage(game_state=state))
    assert service.summarize(Color.WHITE) == [
        QueenSummary(
            square=(1, 1), num_queen_moves=0, first_move=None, num_arrow_shots=0
        )
    ]


@pytest.mark.parametrize(
    "field, pair",
    [("arrow_position", [-1, 10]), ("queen_position_current", [11, 5])],
)
def test_opponent_move_off_the_board_never_reaches_the_board(
    service_in_game: AmazonsService, field: str, pair: list[int]
) -> None:
    """Rejected while reading the message: the tracked board stays as it was"""
    board_before = service_in_game.current_board
    fields = {
        "queen_position_current": [4, 1],
        "queen_position_next": [4, 5],
        "arrow_position": [2, 3],
    }
    fields[field] = pair
    with pytest.raises(InvalidMessageError):
        service_in_game.on_opponent_move(OpponentMoveMessage(**fields))

    assert service_in_game.current_board == board_before
    assert board_before.cell(Square(10, 10)) == Cell.EMPTY
