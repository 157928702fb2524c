from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from falling_blocks.game import Game, Piece


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (0, 0, 240),    # J
        3: (240, 160, 0),  # L
        4: (240, 240, 0),  # O
        5: (0, 240, 0),    # S
        6: (160, 0, 240),  # T
        7: (240, 0, 0),    # Z
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, panel_width: int = 160) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, rows: int, columns: int) -> Tuple[int, int]:
        width = columns * self.cell_size + self.margin * 3 + self.panel_width
        height = rows * self.cell_size + self.margin * 2
        return width, height

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        width = w * self.cell_size
        height = h * self.cell_size
        surf = pygame.Surface((width, height))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                v = int(state[y, x])
                color = _color_for_value(v)
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color, rect)
        return surf

    def _preview_surface(self, piece: Piece) -> pygame.Surface:
        size = 4 * self.cell_size
        surf = pygame.Surface((size, size))
        surf.fill((30, 30, 36))
        if piece.is_empty:
            return surf
        color = _color_for_value(int(piece.kind))
        body = piece.body
        x0 = (4 - body.columns) * self.cell_size // 2
        y0 = (4 - body.rows) * self.cell_size // 2
        for r, c in body.occupied():
            rect = pygame.Rect(
                x0 + c * self.cell_size,
                y0 + r * self.cell_size,
                self.cell_size - 1,
                self.cell_size - 1,
            )
            pygame.draw.rect(surf, color, rect)
        return surf

    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        return self._font

    def draw(self, screen: pygame.Surface, game: Game) -> None:
        state = game.get_state()
        grid_surf = self._grid_surface(state)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))

        panel_x = self.margin * 2 + grid_surf.get_width()
        font = self.font()
        screen.blit(font.render("Next", True, (255, 255, 255)), (panel_x, self.margin))
        preview = self._preview_surface(game.preview_piece)
        screen.blit(preview, (panel_x, self.margin + 30))

        y = self.margin + 40 + preview.get_height()
        for label, value in (("Lines", game.lines_cleared), ("Score", game.score)):
            text = font.render(f"{label}: {value}", True, (255, 255, 255))
            screen.blit(text, (panel_x, y))
            y += 30
