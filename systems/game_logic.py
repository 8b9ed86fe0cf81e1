import logging
from typing import Optional

import numpy as np

from entities.pit import Pit
from entities.snake import Snake
from schemas.geometry import Point
from systems.system import System

logger = logging.getLogger(__name__)


class GameLogicSystem(System):
    """Collision and food rules for one snake inside one pit."""

    def __init__(self, pit: Pit, rng: np.random.Generator) -> None:
        self._pit = pit
        self._rng = rng

    def run(self, snake: Snake, food: Point) -> tuple[bool, bool]:
        """Resolve a snake that has just moved.

        Returns ``(finished, ate_food)``. Walls and the snake's own body are
        checked before the food, so a fatal move never counts as a meal.
        """
        if self.has_finished(snake):
            return True, False

        if snake.is_eating_snack(food):
            snake.make_longer()
            return False, True

        return False, False

    def has_finished(self, snake: Snake) -> bool:
        if snake.collides_with_bounds(self._pit):
            logger.debug("Snake hit the wall at %s", snake.head)
            return True
        if snake.is_eating_itself():
            logger.debug("Snake bit itself at %s", snake.head)
            return True
        return False

    def free_cells(self, snake: Snake) -> list[Point]:
        occupied = set(snake.body)
        return [cell for cell in self._pit.interior() if cell not in occupied]

    def spawn_food(self, snake: Snake) -> Optional[Point]:
        candidates = self.free_cells(snake)
        if not candidates:
            return None

        food = candidates[int(self._rng.integers(len(candidates)))]
        logger.debug("Placed food at %s (%d free cells)", food, len(candidates))
        return food
