from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from .pieces import color_for_token


Coordinate = Tuple[int, int]
LockedCell = Tuple[int, int, int]


class GameGrid:
    """Fixed-size board of locked cells.

    The grid uses 0 for empty cells and positive integers for locked cells.
    Integer values are tetromino identities and map to colors for rendering.
    Row 0 is the top of the board.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_occupied(self, x: int, y: int) -> bool:
        return bool(self.grid[y, x] != 0)

    def collides(self, cells: Iterable[Coordinate]) -> bool:
        """True if any cell leaves the side or bottom walls or hits a locked cell.

        Cells above the top row only collide with the side walls.
        """
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height:
                return True
            if y >= 0 and self.is_occupied(x, y):
                return True
        return False

    def lock_cells(self, cells: Iterable[LockedCell]) -> None:
        for x, y, token in cells:
            if not self.is_inside(x, y):
                raise ValueError(f"cannot lock cell outside the board: ({x}, {y})")
            self.grid[y, x] = token

    def is_row_full(self, y: int) -> bool:
        return bool(np.all(self.grid[y] != 0))

    def clear_full_rows(self) -> int:
        """Remove full rows, collapsing the rows above them downwards.

        Scans bottom-to-top. After a collapse the same index holds the row that
        was above it, so the index is checked again before moving up.
        """
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if self.is_row_full(y):
                self.grid[1 : y + 1] = self.grid[0:y].copy()
                self.grid[0] = 0
                cleared += 1
            else:
                y -= 1
        return cleared

    def get_max_height(self) -> int:
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        top_index = int(non_empty_rows[0])
        return self.height - top_index

    def count_holes(self) -> int:
        holes = 0
        for x in range(self.width):
            column = self.grid[:, x]
            seen_block = False
            for cell in column:
                if cell != 0:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def colors(self) -> List[List[Optional[str]]]:
        return [[color_for_token(int(v)) for v in row] for row in self.grid]

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
