from falling_blocks.game import TetrominoType
from falling_blocks.visualization.text import render_text
from tests.helpers import make_game


def test_render_text_shows_board_piece_and_status():
    game = make_game(TetrominoType.O, TetrominoType.I)
    game.hard_drop()
    lines = render_text(game.snapshot()).splitlines()
    assert len(lines) == 21
    assert lines[0] == "...@@@@..."
    assert lines[19] == "....OO...."
    assert lines[-1] == "Score: 0  Level: 1"


def test_render_text_without_piece():
    game = make_game(TetrominoType.O)
    lines = render_text(game.snapshot(), show_piece=False).splitlines()
    assert lines[0] == "." * 10


def test_render_text_marks_game_over():
    game = make_game(TetrominoType.O)
    while not game.game_over:
        game.hard_drop()
    text = render_text(game.snapshot())
    assert text.endswith("GAME OVER")
    assert "@" not in text
