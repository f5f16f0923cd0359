from __future__ import annotations


BOARD_WIDTH = 5
BOARD_HEIGHT = 5


class Board:
    """Fixed 5x5 table top the robot moves on.

    Cells are addressed with integer coordinates, origin at the bottom-left
    corner:
    - x increases to the right (East)
    - y increases upward (North)
    """

    width = BOARD_WIDTH
    height = BOARD_HEIGHT

    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) is a cell of the board."""
        return 0 <= x < self.width and 0 <= y < self.height
