"""
Tests for the Pit: wall rule, interior cells and perimeter.
"""

import pytest
from pydantic import ValidationError

from entities.pit import Pit
from schemas.geometry import Point


class TestPit:
    def test_pit_is_immutable(self):
        pit = Pit(height=4, width=5)
        with pytest.raises(ValidationError):
            pit.height = 10

    @pytest.mark.parametrize("height, width", [(0, 5), (5, 0), (-1, 3)])
    def test_dimensions_must_be_positive(self, height, width):
        with pytest.raises(ValidationError):
            Pit(height=height, width=width)

    def test_interior_cells(self):
        """Interior runs 1 <= x < width and 1 <= y < height, row by row."""
        pit = Pit(height=3, width=4)
        assert pit.interior() == [
            Point(1, 1), Point(2, 1), Point(3, 1),
            Point(1, 2), Point(2, 2), Point(3, 2),
        ]

    def test_interior_is_empty_for_thin_pits(self):
        assert Pit(height=1, width=10).interior() == []
        assert Pit(height=10, width=1).interior() == []

    def test_no_interior_cell_is_a_wall(self):
        pit = Pit(height=6, width=7)
        assert not any(pit.is_wall(cell) for cell in pit.interior())


class TestPitPerimeter:
    def test_perimeter_size(self):
        """The ring around a (width + 1) x (height + 1) grid."""
        pit = Pit(height=4, width=5)
        perimeter = pit.get_perimeter()
        assert len(perimeter) == 2 * (pit.width + 1) + 2 * (pit.height + 1) - 4
        assert len(set(perimeter)) == len(perimeter)

    def test_perimeter_includes_bottom_row(self):
        pit = Pit(height=4, width=5)
        perimeter = pit.get_perimeter()
        assert [Point(x, 4) for x in range(6)] == perimeter[-6:]
        assert [Point(x, 0) for x in range(6)] == perimeter[:6]

    def test_perimeter_side_columns(self):
        pit = Pit(height=4, width=5)
        perimeter = set(pit.get_perimeter())
        for y in range(1, 4):
            assert Point(0, y) in perimeter
            assert Point(5, y) in perimeter
            assert Point(1, y) not in perimeter

    def test_every_perimeter_cell_is_a_wall(self):
        pit = Pit(height=7, width=3)
        assert all(pit.is_wall(cell) for cell in pit.get_perimeter())

    def test_perimeter_and_interior_cover_the_drawn_grid(self):
        pit = Pit(height=5, width=6)
        drawn = {Point(x, y) for x in range(pit.width + 1) for y in range(pit.height + 1)}
        assert set(pit.get_perimeter()) | set(pit.interior()) == drawn
        assert not set(pit.get_perimeter()) & set(pit.interior())
