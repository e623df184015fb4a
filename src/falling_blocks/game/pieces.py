from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    L = 4
    J = 5
    S = 6
    Z = 7


Shape = np.ndarray


def rotate_cw(shape: Shape) -> Shape:
    """Transpose then reverse each row: a clockwise quarter turn."""
    return shape.T[:, ::-1].copy()


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[0, 1, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.L: np.array([[1, 0], [1, 0], [1, 1]], dtype=np.int8),
    TetrominoType.J: np.array([[0, 1], [0, 1], [1, 1]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
}

COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#00f0f0",
    TetrominoType.O: "#f0f000",
    TetrominoType.T: "#a000f0",
    TetrominoType.L: "#f0a000",
    TetrominoType.J: "#0000f0",
    TetrominoType.S: "#00f000",
    TetrominoType.Z: "#f00000",
}

for _shape in BASE_SHAPES.values():
    _shape.setflags(write=False)


def color_for_token(token: int) -> Optional[str]:
    """Color of a board token; 0 (empty) maps to None."""
    if token == 0:
        return None
    return COLORS[TetrominoType(token)]


@dataclass
class ActivePiece:
    """The falling piece: a shape matrix anchored at its top-left (x, y)."""

    kind: TetrominoType
    shape: Shape
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, kind: TetrominoType, x: int, y: int) -> "ActivePiece":
        return cls(kind=kind, shape=BASE_SHAPES[kind].copy(), x=x, y=y)

    @property
    def color(self) -> str:
        return COLORS[self.kind]

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def rotated_shape(self) -> Shape:
        return rotate_cw(self.shape)

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        h, w = self.shape.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self.x, self.y)
