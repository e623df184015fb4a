from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    points_per_line: int = 100
    score_per_level: int = 1000
    base_interval_ms: float = 1000.0

    def __post_init__(self) -> None:
        if self.points_per_line < 0:
            raise ValueError("points_per_line must be non-negative")
        if self.score_per_level <= 0:
            raise ValueError("score_per_level must be positive")
        if self.base_interval_ms <= 0:
            raise ValueError("base_interval_ms must be positive")

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.points_per_line * level

    def level_for_score(self, score: int) -> int:
        return score // self.score_per_level + 1

    def tick_interval(self, level: int) -> float:
        """Milliseconds between gravity steps; shrinks as the level rises."""
        return self.base_interval_ms / level
