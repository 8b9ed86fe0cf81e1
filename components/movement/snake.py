import numpy as np

from components.body.snake import SnakeBody
from components.movement.component import MovementComponent
from constants.direction import Direction
from schemas.geometry import Point


class SnakeMovement(MovementComponent):
    def __init__(self, snake_body: SnakeBody, direction: Direction = Direction.RIGHT):
        super().__init__(direction)
        self.snake_body = snake_body

    def move(self):
        self.snake_body.push_head(self.next_head())

    def next_head(self) -> Point:
        np_offset = np.array(self.direction.offset).astype(int)
        np_offset = np.multiply(np_offset, np.array([self.speed, self.speed]).astype(int))

        np_head = np.array(self.snake_body.head.to_tuple()).astype(int)

        # Coordinates saturate at the low edge instead of going negative
        new_head = np.maximum(np.add(np_offset, np_head), 0)
        return Point(int(new_head[0]), int(new_head[1]))
