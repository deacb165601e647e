"""
Orchestration between the messages coming from the game server and the move engine.

Keeps track of the single board of the game being played. Everything else is delegated to the engine,
which never holds state of its own.
"""

import logging

from amazons.api.messages import BoardStateMessage, OpponentMoveMessage, QueenSummary
from amazons.core.exceptions import GameStateError
from amazons.core.shared_types import Color
from amazons.engine.board import Board, check_queen_counts
from amazons.engine.moves import arrow_shots, is_legal_move, queen_moves
from amazons.engine.render import render_board

_LOGGER = logging.getLogger(__name__)


class AmazonsService:
    """Tracks the board of one game, one message at a time."""

    def __init__(self, strict_queen_count: bool = False) -> None:
        self._board: Board | None = None
        self.strict_queen_count = strict_queen_count

    @property
    def current_board(self) -> Board:
        if self._board is None:
            raise GameStateError("No board received from the server yet.")
        return self._board

    # -- Message handlers ---
    def on_board_state(self, message: BoardStateMessage) -> Board:
        """The server sent the full board (start of the game): replace whatever we had."""
        board = message.to_board()
        if self.strict_queen_count:
            check_queen_counts(board)

        self._board = board
        _LOGGER.info("Received board state")
        _LOGGER.debug("Current board:\n%s", render_board(board))
        return board

    def on_opponent_move(self, message: OpponentMoveMessage) -> Board:
        """
        The opponent played a move: apply it to the board we track.

        ---
        The server is the referee, so a move our engine considers illegal is still applied.
        We only log it, as it most likely means our copy of the board went out of sync.
        """
        board = self.current_board
        move = message.to_move()
        _LOGGER.info(
            "Opponent move: queen %s -> %s, arrow %s",
            move.origin.to_pair(),
            move.destination.to_pair(),
            move.arrow.to_pair(),
        )
        if not is_legal_move(board, move):
            _LOGGER.warning("Opponent move %s is illegal on the tracked board", move)

        self._board = board.apply_move(move)
        _LOGGER.debug("Board after opponent move:\n%s", render_board(self._board))
        return self._board

    # -- Introspection ---
    def summarize(self, color: Color) -> list[QueenSummary]:
        """For every queen of the color: how many moves it has, and how many arrow shots follow its first move."""
        board = self.current_board
        summaries: list[QueenSummary] = []
        for square in board.locate_color(color):
            moves = queen_moves(board, square)
            first_move = moves[0] if moves else None
            num_arrow_shots = (
                len(arrow_shots(board.move_queen(square, first_move), first_move))
                if first_move is not None
                else 0
            )
            summaries.append(
                QueenSummary(
                    square=square.to_pair(),
                    num_queen_moves=len(moves),
                    first_move=first_move.to_pair() if first_move else None,
                    num_arrow_shots=num_arrow_shots,
                )
            )
        return summaries
