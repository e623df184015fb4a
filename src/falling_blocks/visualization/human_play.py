from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, Optional

import pygame

from falling_blocks.events import EventBus
from falling_blocks.events import names as ev
from falling_blocks.game import FallingBlocksGame, GameConfig
from .renderer import Renderer


logger = logging.getLogger(__name__)


def key_bindings(game: FallingBlocksGame) -> Dict[int, Callable[[], bool]]:
    return {
        pygame.K_LEFT: game.move_left,
        pygame.K_RIGHT: game.move_right,
        pygame.K_UP: game.rotate,
        pygame.K_DOWN: game.soft_drop,
        pygame.K_SPACE: game.hard_drop,
    }


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the keyboard.")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def run(seed: Optional[int] = None, cell_size: int = 28, fps: int = 60) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        bus = EventBus()
        bus.subscribe(ev.EVENT_GAME_OVER, lambda sender, score: logger.info("Game Over! Score: %d", score))
        game = FallingBlocksGame(GameConfig(random_seed=seed), bus=bus)
        bindings = key_bindings(game)
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.grid.width, game.grid.height))
        pygame.display.set_caption("Falling Blocks")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and game.game_over:
                        game.reset()
                    else:
                        intent = bindings.get(event.key)
                        if intent is not None:
                            intent()

            elapsed = clock.tick(fps)
            if game.is_running:
                game.tick(elapsed)

            renderer.draw(screen, game.snapshot())
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')
    run(seed=args.seed, cell_size=args.cell_size, fps=args.fps)


if __name__ == "__main__":  # pragma: no cover
    main()
