from itertools import islice

from components.body.snake import SnakeBody
from components.movement.snake import SnakeMovement
from constants.direction import Direction
from entities.base import Entity
from entities.pit import Pit
from schemas.geometry import Point


class Snake(Entity):
    """The player snake.

    Movement and growth share one step: the new head is appended first and the
    tail is dropped afterwards unless a growth was requested with
    :meth:`make_longer` since the previous move.
    """

    def __init__(self, length: int, origin: Point):
        super().__init__()

        self.body_component = SnakeBody(origin, length)
        self.movement_component = SnakeMovement(self.body_component, Direction.RIGHT)

    @property
    def body(self) -> tuple[Point, ...]:
        return tuple(self.body_component.segments)

    @property
    def head(self) -> Point:
        return self.body_component.head

    @property
    def tail(self) -> Point:
        return self.body_component.tail

    @property
    def direction(self) -> Direction:
        return self.movement_component.direction

    @property
    def growth_pending(self) -> bool:
        return self.body_component.growth_pending

    def __len__(self):
        return len(self.body_component)

    def move_to_next_position(self):
        self.movement_component.move()

    def change_direction(self, direction: Direction):
        # Reversing into the body is allowed, the self collision check catches it
        self.movement_component.direction = direction

    def make_longer(self):
        self.body_component.growth_pending = True

    def is_eating_itself(self) -> bool:
        segments = self.body_component.segments
        head = segments[-1]
        return any(segment == head for segment in islice(segments, len(segments) - 1))

    def is_eating_snack(self, snack: Point) -> bool:
        return self.head == snack

    def collides_with_point(self, point: Point) -> bool:
        return self.body_component.occupies(point)

    def collides_with_bounds(self, pit: Pit) -> bool:
        return pit.is_wall(self.head)
