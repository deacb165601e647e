"""
Plain text picture of a board, for logs and debugging.

ex) a board with a white queen on (1, 4) and an arrow on (2, 4):

       1 2 3 4 5 6 7 8 9 10
      ---------------------
   1 | . . . W . . . . . . |
   2 | . . . X . . . . . . |
   ...
  10 | . . . . . . . . . . |
      ---------------------
"""

from amazons.engine.board import Board
from amazons.engine.pieces import CELL_TO_SYMBOL
from amazons.engine.square import BOARD_SIZE, Square

ROW_LABEL_WIDTH = len(str(BOARD_SIZE))


def render_board(board: Board) -> str:
    """Header with column numbers, one line per row, framed by a border"""
    indent = " " * (ROW_LABEL_WIDTH + 1)
    header = indent + "  " + " ".join(str(col) for col in range(1, BOARD_SIZE + 1))
    border = indent + " " + "-" * (2 * BOARD_SIZE + 1)

    lines = [header, border]
    lines.extend(_render_row(board, row) for row in range(1, BOARD_SIZE + 1))
    lines.append(border)
    return "\n".join(lines)


def _render_row(board: Board, row: int) -> str:
    symbols = " ".join(
        CELL_TO_SYMBOL[board.cell(Square(row, col))] for col in range(1, BOARD_SIZE + 1)
    )
    return f"{row:>{ROW_LABEL_WIDTH}} | {symbols} |"
