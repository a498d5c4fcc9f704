"""Tests for grid coordinate helpers."""

import pytest

from pixel_snake.constants import GRID_SIZE
from pixel_snake.geometry import advance, footprint, in_bounds, manhattan, step
from pixel_snake.models import Direction


class TestAdvance:
    @pytest.mark.parametrize(
        "cell, direction, expected",
        [
            ((0, 7), Direction.LEFT, (GRID_SIZE - 1, 7)),
            ((GRID_SIZE - 1, 7), Direction.RIGHT, (0, 7)),
            ((7, 0), Direction.UP, (7, GRID_SIZE - 1)),
            ((7, GRID_SIZE - 1), Direction.DOWN, (7, 0)),
        ],
    )
    def test_wraps_at_every_edge(self, cell, direction, expected):
        assert advance(cell, direction) == expected

    def test_interior_move(self):
        assert advance((5, 5), Direction.RIGHT) == (6, 5)
        assert advance((5, 5), Direction.UP) == (5, 4)

    def test_custom_grid_size(self):
        assert advance((0, 0), Direction.LEFT, size=30) == (29, 0)


class TestStep:
    def test_step_does_not_wrap(self):
        assert step((0, 3), Direction.LEFT) == (-1, 3)
        assert not in_bounds(step((0, 3), Direction.LEFT))

    def test_in_bounds_edges(self):
        assert in_bounds((0, 0))
        assert in_bounds((GRID_SIZE - 1, GRID_SIZE - 1))
        assert not in_bounds((GRID_SIZE, 0))


def test_manhattan():
    assert manhattan((1, 2), (4, 0)) == 5


def test_footprint_covers_two_by_two():
    assert sorted(footprint((3, 4))) == [(3, 4), (3, 5), (4, 4), (4, 5)]
