from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .pieces import TetrominoType


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a session handed to presentation layers.

    ``board`` holds identity tokens (0 = empty) and ``colors`` the matching
    nullable color tokens, both indexed ``[y][x]``. The active piece is not
    merged into either; use ``piece_cells`` to draw it.
    """

    width: int
    height: int
    board: np.ndarray
    colors: Tuple[Tuple[Optional[str], ...], ...]
    piece_kind: Optional[TetrominoType]
    piece_shape: Optional[np.ndarray]
    piece_color: Optional[str]
    piece_x: int
    piece_y: int
    score: int
    level: int
    lines_cleared: int
    game_over: bool
    state: str

    @property
    def piece_cells(self) -> Tuple[Tuple[int, int], ...]:
        if self.piece_shape is None:
            return ()
        ys, xs = np.nonzero(self.piece_shape)
        return tuple((self.piece_x + int(dx), self.piece_y + int(dy)) for dy, dx in zip(ys, xs))

    def color_at(self, x: int, y: int) -> Optional[str]:
        """Color shown at (x, y) with the active piece drawn over the board."""
        if (x, y) in self.piece_cells:
            return self.piece_color
        return self.colors[y][x]
