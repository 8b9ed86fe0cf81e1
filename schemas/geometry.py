from pydantic import BaseModel, ConfigDict, NonNegativeInt


class Point(BaseModel):
    """A cell of the pit grid. Coordinates never go below zero."""

    model_config = ConfigDict(frozen=True)

    x: NonNegativeInt
    y: NonNegativeInt

    def __init__(self, x: int, y: int):
        super().__init__(x=x, y=y)

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"
