import pytest

from falling_blocks.game import ScoringRules


def test_line_score_scales_with_lines_and_level():
    rules = ScoringRules()
    assert rules.score_for_lines(0, 5) == 0
    assert rules.score_for_lines(1, 1) == 100
    assert rules.score_for_lines(2, 3) == 600
    assert rules.score_for_lines(4, 2) == 800


def test_level_from_score():
    rules = ScoringRules()
    assert rules.level_for_score(0) == 1
    assert rules.level_for_score(999) == 1
    assert rules.level_for_score(1000) == 2
    assert rules.level_for_score(2500) == 3


def test_tick_interval_shrinks_with_level():
    rules = ScoringRules()
    assert rules.tick_interval(1) == 1000
    assert rules.tick_interval(2) == 500
    assert rules.tick_interval(4) == 250


def test_invalid_rules_rejected():
    with pytest.raises(ValueError):
        ScoringRules(score_per_level=0)
    with pytest.raises(ValueError):
        ScoringRules(base_interval_ms=-1)
