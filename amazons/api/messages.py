"""Incoming messages from the game server and outgoing report models"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from amazons.core.exceptions import InvalidBoardError, InvalidMessageError
from amazons.engine.board import Board
from amazons.engine.moves import Move
from amazons.engine.pieces import Cell
from amazons.engine.square import BOARD_SIZE, MIN_BOARD_LENGTH

Pair = list[int]


# --- INCOMING MESSAGES ---
class BoardStateMessage(BaseModel):
    """Full board, one integer per flat index (see amazons/engine/square.py)"""

    model_config = ConfigDict(populate_by_name=True)

    game_state: list[int] = Field(alias="game-state")

    @field_validator("game_state")
    @classmethod
    def validate_game_state(cls, value: list[int]) -> list[int]:
        if len(value) < MIN_BOARD_LENGTH:
            raise InvalidBoardError(
                f"Board state must contain at least {MIN_BOARD_LENGTH} cells, got {len(value)}."
            )

        known_values = {int(cell) for cell in Cell}
        unknown = sorted(set(value) - known_values)
        if unknown:
            raise InvalidBoardError(f"Unknown cell values in board state: {unknown}")
        return value

    def to_board(self) -> Board:
        return Board.from_sequence(self.game_state)


class OpponentMoveMessage(BaseModel):
    """Three [row, col] pairs: where the queen was, where it went, where its arrow landed."""

    model_config = ConfigDict(populate_by_name=True)

    queen_position_current: Pair = Field(alias="queen-position-current")
    queen_position_next: Pair = Field(alias="queen-position-next")
    arrow_position: Pair = Field(alias="arrow-position")

    @field_validator(
        *["queen_position_current", "queen_position_next", "arrow_position"]
    )
    @classmethod
    def validate_pair(cls, value: Pair) -> Pair:
        """
        NOTE: pydantic itself rejects non-integer coordinates (ValidationError) before this runs,
        here we only check the shape and range of the pair.
        """
        if len(value) != 2:
            raise InvalidMessageError(
                f"Cannot interpret {value!r} as a [row, col] pair."
            )
        if not all(0 <= coordinate <= BOARD_SIZE for coordinate in value):
            raise InvalidMessageError(
                f"Square {value!r} is not on the board, coordinates must lie in [0, {BOARD_SIZE}]."
            )
        return value

    def to_move(self) -> Move:
        return Move.from_pairs(
            self.queen_position_current,
            self.queen_position_next,
            self.arrow_position,
        )


# --- REPORTS ---
class QueenSummary(BaseModel):
    """What a single queen can do on the current board"""

    square: tuple[int, int]
    num_queen_moves: int
    # arrow shots after the first queen move, if the queen can move at all
    first_move: tuple[int, int] | None
    num_arrow_shots: int
