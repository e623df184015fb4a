from __future__ import annotations

from typing import Dict

from falling_blocks.game import GameSnapshot, TetrominoType


EMPTY_CHAR = "."
ACTIVE_CHAR = "@"


def render_text(snapshot: GameSnapshot, show_piece: bool = True) -> str:
    """Render a snapshot as text: locked cells by piece letter, the falling piece as '@'."""
    letters: Dict[int, str] = {int(t): t.name for t in TetrominoType}
    active = set(snapshot.piece_cells) if show_piece and not snapshot.game_over else set()
    lines = []
    for y in range(snapshot.height):
        row = []
        for x in range(snapshot.width):
            if (x, y) in active:
                row.append(ACTIVE_CHAR)
            else:
                v = int(snapshot.board[y, x])
                row.append(letters[v] if v else EMPTY_CHAR)
        lines.append("".join(row))
    status = f"Score: {snapshot.score}  Level: {snapshot.level}"
    if snapshot.game_over:
        status += "  GAME OVER"
    lines.append(status)
    return "\n".join(lines)
