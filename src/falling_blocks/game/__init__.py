"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid: Board of locked cells, collision testing and row clearing
- ActivePiece: The falling tetromino and its rotation
- TetrominoType: Enum of available piece types
- ScoringRules: Scoring, level and gravity cadence
- FallingBlocksGame: Session state machine, intents and gravity clock
- GameSnapshot: Read-only view for presentation layers
"""

from .grid import GameGrid
from .pieces import ActivePiece, TetrominoType, BASE_SHAPES, COLORS, rotate_cw
from .rules import ScoringRules
from .snapshot import GameSnapshot
from .core import FallingBlocksGame, GameConfig, EngineState, Action

__all__ = [
    "GameGrid",
    "ActivePiece",
    "TetrominoType",
    "BASE_SHAPES",
    "COLORS",
    "rotate_cw",
    "ScoringRules",
    "GameSnapshot",
    "FallingBlocksGame",
    "GameConfig",
    "EngineState",
    "Action",
]
