from components.body.component import BodyComponent
from schemas.geometry import Point


class SnakeBody(BodyComponent):
    """Snake segments from tail (first) to head (last)."""

    def __init__(self, origin: Point, size: int):
        if size < 1:
            raise ValueError(f"Snake size must be at least 1, got {size}")

        super().__init__(Point(origin.x + i, origin.y) for i in range(size))
        self.growth_pending = False

    @property
    def head(self) -> Point:
        return self.segments[-1]

    @property
    def tail(self) -> Point:
        return self.segments[0]

    def push_head(self, new_head: Point):
        self.segments.append(new_head)

        if self.growth_pending:
            # Keep the tail, the body is one segment longer now
            self.growth_pending = False
        else:
            self.segments.popleft()
