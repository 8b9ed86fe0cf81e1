from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from constants.direction import Direction
from constants.game_state import GameState
from schemas.geometry import Point


class PlayerCommand(BaseModel):
    direction: Optional[Direction] = None
    quit_game: bool = False


class EngineSnapshot(BaseModel):
    """Read-only view of the engine handed to the render side.

    The body is ordered tail first, head last.
    """

    model_config = ConfigDict(frozen=True)

    body: List[Point]
    food: Point
    pit_height: int
    pit_width: int
    state: GameState

    @property
    def head(self) -> Point:
        return self.body[-1]
