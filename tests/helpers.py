from __future__ import annotations

from typing import Iterable, Optional, Sequence

from falling_blocks.events import EventBus
from falling_blocks.game import FallingBlocksGame, GameConfig, TetrominoType


class FixedRng:
    """Stands in for random.Random: hands out a fixed, repeating piece order."""

    def __init__(self, kinds: Iterable[TetrominoType]):
        self.kinds = list(kinds)
        self.calls = 0

    def choice(self, seq: Sequence[TetrominoType]) -> TetrominoType:
        kind = self.kinds[self.calls % len(self.kinds)]
        self.calls += 1
        assert kind in seq
        return kind


def make_game(*kinds: TetrominoType, bus: Optional[EventBus] = None, **config) -> FallingBlocksGame:
    return FallingBlocksGame(GameConfig(**config), rng=FixedRng(kinds), bus=bus)
