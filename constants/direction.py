from enum import Enum


class Direction(Enum):
    # Grid offsets, y grows downwards
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value
