from __future__ import annotations

from typing import Optional, Tuple

from falling_blocks.game import COLORS, TetrominoType


RGB = Tuple[int, int, int]

EMPTY_RGB: RGB = (44, 62, 80)  # #2c3e50
BACKGROUND_RGB: RGB = (10, 10, 14)
TEXT_RGB: RGB = (230, 230, 230)


def hex_to_rgb(token: str) -> RGB:
    token = token.lstrip("#")
    return int(token[0:2], 16), int(token[2:4], 16), int(token[4:6], 16)


def rgb_for_color(token: Optional[str]) -> RGB:
    return EMPTY_RGB if token is None else hex_to_rgb(token)


def color_for_value(v: int) -> RGB:
    """Board or observation value to RGB; negative values are the falling piece."""
    if v == 0:
        return EMPTY_RGB
    return hex_to_rgb(COLORS[TetrominoType(abs(v))])
