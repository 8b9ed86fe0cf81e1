import numpy as np
import pytest

from constants import defaults
from entities.pit import Pit
from entities.snake import Snake
from game_logic.engine import SnakeEngine
from schemas.geometry import Point
from systems.game_logic import GameLogicSystem


class ScriptedRng:
    """Stands in for a numpy Generator and hands out chosen indices first."""

    def __init__(self, picks, seed=0):
        self._picks = list(picks)
        self._fallback = np.random.default_rng(seed)

    def integers(self, high):
        if self._picks:
            pick = self._picks.pop(0)
            assert 0 <= pick < high
            return pick
        return self._fallback.integers(high)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_engine(rng):
    def _make_engine(pit_height=10, pit_width=10, snake_length=3):
        return SnakeEngine(pit_height, pit_width, snake_length, rng=rng)

    return _make_engine


@pytest.fixture
def engine_with_food():
    """Build an engine whose first piece of food lands on a chosen cell."""

    def _engine_with_food(food, pit_height=10, pit_width=10, snake_length=3, later_picks=()):
        pit = Pit(height=pit_height, width=pit_width)
        snake = Snake(snake_length, Point(*defaults.SNAKE_ORIGIN))
        free = GameLogicSystem(pit, np.random.default_rng()).free_cells(snake)
        picks = [free.index(food), *later_picks]
        return SnakeEngine(pit_height, pit_width, snake_length, rng=ScriptedRng(picks))

    return _engine_with_food
