from __future__ import annotations

from typing import List, Optional

import numpy as np

from .board import Board
from .directions import Direction


EMPTY_CELL = "  "
CELL_BORDER = "---"


def robot_cell(facing: Direction) -> str:
    """Two-character marker of the robot, e.g. ``RN`` when facing North."""
    return f"R{facing.initial}"


def board_cells(
    board: Board,
    x: Optional[int] = None,
    y: Optional[int] = None,
    facing: Direction = Direction.NORTH,
) -> np.ndarray:
    """Return a (height, width) array of cell strings indexed as [y, x].

    The robot marker is drawn only when (x, y) is given and on the board.
    """
    cells = np.full((board.height, board.width), EMPTY_CELL, dtype="<U2")
    if x is not None and y is not None and board.contains(x, y):
        cells[y, x] = robot_cell(facing)
    return cells


def render_board(
    board: Board,
    x: Optional[int] = None,
    y: Optional[int] = None,
    facing: Direction = Direction.NORTH,
) -> str:
    """Render the board as text, highest row first.

    Coordinates:
    - Column indices are printed on top, row indices on the left.
    - Row ``height - 1`` is printed first so that North points up.
    """
    cells = board_cells(board, x, y, facing)
    border = "  " + CELL_BORDER * board.width + "-"
    header = "  " + "".join(f"  {n}" for n in range(board.width)) + " "

    lines: List[str] = [header]
    for row in range(board.height - 1, -1, -1):
        lines.append(border)
        lines.append(f"{row} |" + "|".join(cells[row]) + "|")
    lines.append(border)
    return "\n".join(lines) + "\n"
