import logging
from typing import Optional

import numpy as np

from constants import defaults
from constants.direction import Direction
from constants.game_state import GameState
from entities.pit import Pit
from entities.snake import Snake
from game_logic.errors import FoodPlacementError
from schemas.game import EngineSnapshot
from schemas.geometry import Point
from schemas.settings import GameSettings
from systems.game_logic import GameLogicSystem

logger = logging.getLogger(__name__)


class SnakeEngine:
    """Tick driven simulation of one snake, one pit and one piece of food.

    The engine is owned by a single caller that feeds it direction changes
    and calls :meth:`tick` once per frame until it reports
    ``GameState.FINISHED``.
    """

    def __init__(
        self,
        pit_height: int,
        pit_width: int,
        snake_length: int = defaults.SNAKE_LENGTH,
        rng: Optional[np.random.Generator] = None,
    ):
        self._pit = Pit(height=pit_height, width=pit_width)
        self._snake = Snake(snake_length, Point(*defaults.SNAKE_ORIGIN))
        self._rng = rng if rng is not None else np.random.default_rng()
        self._state = GameState.RUNNING

        self.game_logic_system = GameLogicSystem(self._pit, self._rng)

        food = self.game_logic_system.spawn_food(self._snake)
        if food is None:
            raise FoodPlacementError(
                f"No free cell for food in a {pit_height}x{pit_width} pit "
                f"with a snake of length {snake_length}"
            )
        self._food = food

    @classmethod
    def from_settings(cls, settings: GameSettings) -> "SnakeEngine":
        return cls(
            settings.pit_height,
            settings.pit_width,
            settings.snake_length,
            rng=np.random.default_rng(settings.seed),
        )

    @property
    def snake_body(self) -> tuple[Point, ...]:
        return self._snake.body

    @property
    def food(self) -> Point:
        return self._food

    @property
    def pit(self) -> Pit:
        return self._pit

    @property
    def pit_height(self) -> int:
        return self._pit.height

    @property
    def pit_width(self) -> int:
        return self._pit.width

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_finished(self) -> bool:
        return self._state == GameState.FINISHED

    def change_direction(self, direction: Direction):
        self._snake.change_direction(direction)

    def tick(self) -> GameState:
        if self.is_finished:
            return self._state

        self._snake.move_to_next_position()

        finished, ate_food = self.game_logic_system.run(self._snake, self._food)
        if finished:
            # The snake is left where it died so the last frame can be drawn
            self._state = GameState.FINISHED
            return self._state

        if ate_food:
            food = self.game_logic_system.spawn_food(self._snake)
            if food is None:
                logger.warning("No free cell left for food, keeping it at %s", self._food)
            else:
                self._food = food

        return self._state

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            body=list(self._snake.body),
            food=self._food,
            pit_height=self._pit.height,
            pit_width=self._pit.width,
            state=self._state,
        )
