from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional

import numpy as np

from falling_blocks.events import EventBus
from falling_blocks.events import names as ev

from .grid import GameGrid
from .pieces import ActivePiece, TetrominoType
from .rules import ScoringRules
from .snapshot import GameSnapshot


logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5


class EngineState(Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    LOCKING = "locking"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_y: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"board must be at least 1x1, got {self.width}x{self.height}")
        if not 0 <= self.spawn_y < self.height:
            raise ValueError(f"spawn_y {self.spawn_y} is outside the board")


class FallingBlocksGame:
    """One falling-block session: board, active piece, score and gravity clock.

    Intents (``move_left``, ``rotate``, ...) apply synchronously and return
    whether they changed anything. ``tick`` advances the gravity clock. Once the
    game is over every entry point is a no-op.

    ``rng`` is anything with a ``choice(seq)`` method; it defaults to a
    ``random.Random`` seeded from ``config.random_seed``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        rng: Optional[Any] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = rng if rng is not None else random.Random(self.config.random_seed)
        self.bus = bus
        self.grid = GameGrid(self.config.width, self.config.height)
        self.score = 0
        self.level = 1
        self.lines_cleared_total = 0
        self.game_over = False
        self.state = EngineState.SPAWNING
        self.current_piece: Optional[ActivePiece] = None
        self._elapsed_ms = 0.0
        self.reset()

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------
    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng = random.Random(seed)
        self.grid.reset()
        self.score = 0
        self.level = 1
        self.lines_cleared_total = 0
        self.game_over = False
        self._elapsed_ms = 0.0
        self._spawn_piece()
        self._publish_state()

    @property
    def is_running(self) -> bool:
        return not self.game_over

    @property
    def tick_interval(self) -> float:
        return self.rules.tick_interval(self.level)

    def _random_kind(self) -> TetrominoType:
        return TetrominoType(self.rng.choice(list(TetrominoType)))

    def _spawn_piece(self) -> None:
        self.state = EngineState.SPAWNING
        kind = self._random_kind()
        piece = ActivePiece.spawn(kind, 0, self.config.spawn_y)
        piece.x = self.grid.width // 2 - piece.width // 2
        self.current_piece = piece
        self._elapsed_ms = 0.0
        if self.check_collision(0, 0):
            logger.debug("spawn of %s at (%d, %d) is blocked", kind.name, piece.x, piece.y)
            self._end_game()
            return
        self.state = EngineState.FALLING
        logger.debug("spawned %s at (%d, %d)", kind.name, piece.x, piece.y)
        self._emit(ev.EVENT_PIECE_SPAWNED, kind=kind, x=piece.x, y=piece.y)

    def _end_game(self) -> None:
        self.game_over = True
        self.state = EngineState.GAME_OVER
        logger.info("game over with score %d at level %d", self.score, self.level)
        self._emit(ev.EVENT_GAME_OVER, score=self.score)

    # ------------------------------------------------------------------
    # Collision
    # ------------------------------------------------------------------
    def check_collision(self, dx: int, dy: int) -> bool:
        """Would the active piece collide if shifted by (dx, dy)?"""
        piece = self.current_piece
        if piece is None:
            return True
        return self.grid.collides(piece.cells_at(piece.x + dx, piece.y + dy))

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------
    def _move(self, dx: int, dy: int, action: Action) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        if self.check_collision(dx, dy):
            return False
        self.current_piece.x += dx
        self.current_piece.y += dy
        self._emit(ev.EVENT_PIECE_MOVED, action=action, x=self.current_piece.x, y=self.current_piece.y)
        self._publish_state()
        return True

    def move_left(self) -> bool:
        return self._move(-1, 0, Action.LEFT)

    def move_right(self) -> bool:
        return self._move(1, 0, Action.RIGHT)

    def soft_drop(self) -> bool:
        # Never locks: a grounded piece waits for gravity.
        return self._move(0, 1, Action.SOFT_DROP)

    def rotate(self) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        original = self.current_piece.shape
        self.current_piece.shape = self.current_piece.rotated_shape()
        if self.check_collision(0, 0):
            # No wall kicks: a blocked rotation is simply rejected.
            self.current_piece.shape = original
            return False
        self._emit(ev.EVENT_PIECE_ROTATED, shape=self.current_piece.shape.copy())
        self._publish_state()
        return True

    def hard_drop(self) -> bool:
        if self.game_over or self.current_piece is None:
            return False
        while not self.check_collision(0, 1):
            self.current_piece.y += 1
        self._lock_piece()
        self._publish_state()
        return True

    def step(self, action: Action) -> bool:
        """Dispatch an ``Action`` to the matching intent."""
        action = Action(action)
        if action == Action.LEFT:
            return self.move_left()
        if action == Action.RIGHT:
            return self.move_right()
        if action == Action.ROTATE:
            return self.rotate()
        if action == Action.SOFT_DROP:
            return self.soft_drop()
        if action == Action.HARD_DROP:
            return self.hard_drop()
        return False

    # ------------------------------------------------------------------
    # Gravity and locking
    # ------------------------------------------------------------------
    def tick(self, elapsed_ms: float) -> bool:
        """Advance the gravity clock; returns True when a gravity step ran."""
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time must be non-negative, got {elapsed_ms}")
        if self.game_over:
            return False
        self._elapsed_ms += elapsed_ms
        if self._elapsed_ms < self.tick_interval:
            return False
        self._elapsed_ms = 0.0
        self.gravity_step()
        return True

    def gravity_step(self) -> None:
        if self.game_over or self.current_piece is None:
            return
        if self.check_collision(0, 1):
            self._lock_piece()
        else:
            self.current_piece.y += 1
        self._publish_state()

    def _lock_piece(self) -> int:
        assert self.current_piece is not None
        self.state = EngineState.LOCKING
        piece = self.current_piece
        token = int(piece.kind)
        cells = [(x, y) for x, y in piece.cells() if y >= 0]
        self.grid.lock_cells((x, y, token) for x, y in cells)
        logger.debug("locked %s at (%d, %d)", piece.kind.name, piece.x, piece.y)
        self._emit(ev.EVENT_PIECE_LOCKED, kind=piece.kind, cells=cells)

        lines = self.grid.clear_full_rows()
        if lines > 0:
            self._apply_line_clear(lines)
        self._spawn_piece()
        return lines

    def _apply_line_clear(self, lines: int) -> None:
        self.lines_cleared_total += lines
        self.score += self.rules.score_for_lines(lines, self.level)
        new_level = max(self.level, self.rules.level_for_score(self.score))
        logger.debug("cleared %d row(s), score now %d", lines, self.score)
        self._emit(ev.EVENT_LINES_CLEARED, count=lines, score=self.score, level=new_level)
        if new_level > self.level:
            self.level = new_level
            logger.info("level up: %d (interval %.1f ms)", self.level, self.tick_interval)
            self._emit(ev.EVENT_LEVEL_UP, level=self.level)

    # ------------------------------------------------------------------
    # Outbound state
    # ------------------------------------------------------------------
    def snapshot(self) -> GameSnapshot:
        board = self.grid.clone_state()
        board.setflags(write=False)
        piece = self.current_piece
        shape = None
        if piece is not None:
            shape = piece.shape.copy()
            shape.setflags(write=False)
        return GameSnapshot(
            width=self.grid.width,
            height=self.grid.height,
            board=board,
            colors=tuple(tuple(row) for row in self.grid.colors()),
            piece_kind=piece.kind if piece is not None else None,
            piece_shape=shape,
            piece_color=piece.color if piece is not None else None,
            piece_x=piece.x if piece is not None else 0,
            piece_y=piece.y if piece is not None else 0,
            score=self.score,
            level=self.level,
            lines_cleared=self.lines_cleared_total,
            game_over=self.game_over,
            state=self.state.value,
        )

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if self.current_piece is not None and not self.game_over:
            for x, y in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(self.current_piece.kind)
        return state

    def _emit(self, name: str, **payload) -> None:
        if self.bus is not None:
            self.bus.emit(name, **payload)

    def _publish_state(self) -> None:
        if self.bus is not None:
            self.bus.emit(ev.EVENT_STATE_CHANGED, snapshot=self.snapshot())
