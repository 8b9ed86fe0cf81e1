from typing import Optional

from pydantic import BaseModel, Field, model_validator

from constants import defaults


class GameSettings(BaseModel):
    pit_height: int = Field(default=defaults.PIT_HEIGHT, gt=0)
    pit_width: int = Field(default=defaults.PIT_WIDTH, gt=0)
    snake_length: int = Field(default=defaults.SNAKE_LENGTH, ge=1)
    seed: Optional[int] = None
    tick_seconds: float = Field(default=defaults.TICK_SECONDS, gt=0)
    cell_size: int = Field(default=defaults.CELL_SIZE, gt=0)

    @model_validator(mode="after")
    def snake_fits_in_pit(self) -> "GameSettings":
        origin_x, origin_y = defaults.SNAKE_ORIGIN
        if origin_x + self.snake_length > self.pit_width:
            raise ValueError(
                f"A snake of length {self.snake_length} does not fit in a pit "
                f"of width {self.pit_width}"
            )
        if origin_y >= self.pit_height:
            raise ValueError(
                f"The snake starts on row {origin_y}, which is a wall in a pit "
                f"of height {self.pit_height}"
            )
        return self
