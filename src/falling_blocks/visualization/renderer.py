from __future__ import annotations

import pygame

from falling_blocks.game import GameSnapshot
from .palette import BACKGROUND_RGB, TEXT_RGB, rgb_for_color


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_width: int = 160) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: pygame.font.Font | None = None

    def window_size(self, width: int, height: int) -> tuple[int, int]:
        return (
            width * self.cell_size + self.margin * 3 + self.panel_width,
            height * self.cell_size + self.margin * 2,
        )

    def _grid_surface(self, snapshot: GameSnapshot) -> pygame.Surface:
        surf = pygame.Surface((snapshot.width * self.cell_size, snapshot.height * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(snapshot.height):
            for x in range(snapshot.width):
                self._cell(surf, x, y, rgb_for_color(snapshot.colors[y][x]))
        piece_color = rgb_for_color(snapshot.piece_color)
        for x, y in snapshot.piece_cells:
            if 0 <= y < snapshot.height:
                self._cell(surf, x, y, piece_color)
        return surf

    def _cell(self, surf: pygame.Surface, x: int, y: int, color: tuple[int, int, int]) -> None:
        rect = pygame.Rect(
            x * self.cell_size,
            y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )
        pygame.draw.rect(surf, color, rect)

    def _text(self, screen: pygame.Surface, text: str, x: int, y: int) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        screen.blit(self._font.render(text, True, TEXT_RGB), (x, y))

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        screen.fill(BACKGROUND_RGB)
        screen.blit(self._grid_surface(snapshot), (self.margin, self.margin))

        panel_x = self.margin * 2 + snapshot.width * self.cell_size
        self._text(screen, f"Score: {snapshot.score}", panel_x, self.margin)
        self._text(screen, f"Level: {snapshot.level}", panel_x, self.margin + 30)
        self._text(screen, f"Lines: {snapshot.lines_cleared}", panel_x, self.margin + 60)
        if snapshot.game_over:
            self._text(screen, "GAME OVER", panel_x, self.margin + 110)
            self._text(screen, "R: restart", panel_x, self.margin + 140)
            self._text(screen, "Esc: quit", panel_x, self.margin + 170)
        pygame.display.flip()
