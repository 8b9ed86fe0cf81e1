from typing import Iterable, Optional

import pygame

from constants import defaults
from schemas.game import EngineSnapshot
from schemas.geometry import Point
from systems.system import System


class RenderSystem(System):
    def __init__(self, rows: int, columns: int, cell_size: int, window: Optional[pygame.Surface] = None):
        self.cell_size = cell_size

        # The wall ring sits on row `rows` and column `columns`, draw one extra of each
        self.screen_width = self.cell_size * (columns + 1)
        self.screen_height = self.cell_size * (rows + 1)
        self.window = window
        self._owns_display = False

    def setup(self):
        if self.window is None:
            self.window = pygame.display.set_mode((self.screen_width, self.screen_height))
            pygame.display.set_caption("Snake Game")
            self._owns_display = True

        self.window.fill(defaults.BACKGROUND_COLOR)

    def run(self, snapshot: EngineSnapshot, perimeter: Iterable[Point]):
        self.window.fill(defaults.BACKGROUND_COLOR)

        for cell in perimeter:
            self._draw_cell(cell, defaults.WALL_COLOR)

        self._draw_cell(snapshot.food, defaults.FOOD_COLOR)

        for segment in snapshot.body:
            self._draw_cell(segment, defaults.SNAKE_COLOR)
        self._draw_cell(snapshot.head, defaults.SNAKE_HEAD_COLOR)

        if self._owns_display:
            pygame.display.flip()

    def _draw_cell(self, cell: Point, color: tuple[int, int, int]):
        pygame.draw.rect(
            self.window,
            color,
            (
                cell.x * self.cell_size,
                cell.y * self.cell_size,
                self.cell_size,
                self.cell_size,
            ),
        )
