from pydantic import BaseModel, ConfigDict, PositiveInt

from schemas.geometry import Point


class Pit(BaseModel):
    """The walled rectangle the snake lives in.

    The walls are the ring x in {0, width} and y in {0, height}, so the cells
    a snake may occupy are 1 <= x < width and 1 <= y < height. Renderers draw a
    (width + 1) x (height + 1) grid to show the whole ring.
    """

    model_config = ConfigDict(frozen=True)

    height: PositiveInt
    width: PositiveInt

    def is_wall(self, point: Point) -> bool:
        return (
            point.x <= 0
            or point.y <= 0
            or point.x >= self.width
            or point.y >= self.height
        )

    def interior(self) -> list[Point]:
        return [
            Point(x, y)
            for y in range(1, self.height)
            for x in range(1, self.width)
        ]

    def get_perimeter(self) -> list[Point]:
        perimeter = []
        for y in range(self.height + 1):
            if y == 0 or y == self.height:
                for x in range(self.width + 1):
                    perimeter.append(Point(x, y))
            else:
                perimeter.append(Point(0, y))
                perimeter.append(Point(self.width, y))
        return perimeter
