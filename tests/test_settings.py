import pytest
from pydantic import ValidationError

from constants import defaults
from schemas.settings import GameSettings


class TestGameSettings:
    def test_defaults(self):
        settings = GameSettings()
        assert settings.pit_height == defaults.PIT_HEIGHT
        assert settings.pit_width == defaults.PIT_WIDTH
        assert settings.snake_length == 3
        assert settings.seed is None
        assert settings.tick_seconds == 1.0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("pit_height", 0),
            ("pit_width", -2),
            ("snake_length", 0),
            ("tick_seconds", 0),
            ("cell_size", 0),
        ],
    )
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            GameSettings(**{field: value})

    def test_snake_must_fit_pit_width(self):
        with pytest.raises(ValidationError, match="does not fit"):
            GameSettings(pit_width=6, snake_length=5)

    def test_snake_touching_right_wall_is_allowed(self):
        assert GameSettings(pit_width=5, snake_length=3).pit_width == 5

    @pytest.mark.parametrize("pit_height", [1, 2])
    def test_snake_must_start_above_bottom_wall(self, pit_height):
        """The starting row has to be inside the pit, not on its wall."""
        with pytest.raises(ValidationError, match="wall"):
            GameSettings(pit_height=pit_height, pit_width=10)

    def test_lowest_pit_keeping_start_row_inside(self):
        assert GameSettings(pit_height=3, pit_width=10).pit_height == 3
