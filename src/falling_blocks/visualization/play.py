from __future__ import annotations

import argparse
from typing import Callable, Dict, Optional

import pygame

from falling_blocks.game import Game, GameConfig, MoveDirection
from falling_blocks.session import PlaySession
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Callable[[PlaySession], bool]] = {
    pygame.K_LEFT: lambda s: s.move(MoveDirection.LEFT),
    pygame.K_RIGHT: lambda s: s.move(MoveDirection.RIGHT),
    pygame.K_DOWN: lambda s: s.move(MoveDirection.DOWN),
    pygame.K_UP: lambda s: s.rotate_clockwise(),
    pygame.K_y: lambda s: s.rotate_clockwise(),
    pygame.K_z: lambda s: s.rotate_counter_clockwise(),
    pygame.K_x: lambda s: s.rotate_counter_clockwise(),
}


def _new_session(config: GameConfig, autoplay: bool) -> PlaySession:
    return PlaySession(Game.from_config(config), autoplay=autoplay)


def run(autoplay: bool = False, rows: int = 20, columns: int = 11, seed: Optional[int] = None) -> None:
    config = GameConfig(rows=rows, columns=columns, random_seed=seed)
    pygame.init()
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=28)
        screen = pygame.display.set_mode(renderer.window_size(rows, columns))
        pygame.display.set_caption("Falling Blocks - Autoplay" if autoplay else "Falling Blocks")

        session = _new_session(config, autoplay)
        started = pygame.time.get_ticks()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and session.is_over:
                        session = _new_session(config, autoplay)
                        started = pygame.time.get_ticks()
                    elif not session.is_over:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            command(session)

            if not session.is_over:
                session.update((pygame.time.get_ticks() - started) / 1000.0)

            renderer.draw(screen, session.game)

            if session.is_over:
                font = renderer.font()
                text = font.render("Game Over - R to restart, ESC to quit", True, (255, 255, 255))
                rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
                screen.blit(text, rect)

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Falling Blocks in a pygame window")
    parser.add_argument("--autoplay", action="store_true", help="Let the autoplayer drive the pieces")
    parser.add_argument("--rows", type=int, default=20)
    parser.add_argument("--columns", type=int, default=11)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    run(autoplay=args.autoplay, rows=args.rows, columns=args.columns, seed=args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
