from collections import deque
from typing import Iterable

from schemas.geometry import Point


class BodyComponent:
    """Ordered cells of an entity, oldest first."""

    def __init__(self, segments: Iterable[Point]):
        self.segments: deque[Point] = deque(segments)
        if not self.segments:
            raise ValueError("Body must have at least one segment")

    def occupies(self, point: Point) -> bool:
        return point in self.segments

    def __len__(self):
        return len(self.segments)
