"""Tests for entity occupancy bookkeeping."""

from collections import deque

from pixel_snake.models import Direction, Food, FoodKind, Obstacle, RivalSnake
from pixel_snake.registry import EntityRegistry


def make_rival(rid, segments, direction=Direction.RIGHT):
    rival = RivalSnake(rid=rid, head_color="#fff", body_color="#aaa", direction=direction)
    rival.segments = deque(segments)
    return rival


class TestSnakeCells:
    def test_push_and_pop_keep_index_in_sync(self):
        reg = EntityRegistry()
        reg.set_snake([(5, 5), (4, 5), (3, 5)])
        reg.push_head((6, 5))
        assert reg.on_snake((6, 5))
        assert reg.pop_tail() == (3, 5)
        assert not reg.on_snake((3, 5))
        assert list(reg.snake) == [(6, 5), (5, 5), (4, 5)]

    def test_duplicate_cells_are_reference_counted(self):
        reg = EntityRegistry()
        reg.set_snake([(1, 1), (1, 1)])
        reg.pop_tail()
        assert reg.on_snake((1, 1))
        reg.pop_tail()
        assert not reg.on_snake((1, 1))


class TestRivals:
    def test_on_rival_can_exclude_one_rival(self):
        reg = EntityRegistry()
        a = make_rival(0, [(2, 2), (1, 2)])
        b = make_rival(1, [(8, 8), (7, 8)])
        reg.add_rival(a)
        reg.add_rival(b)
        assert reg.on_rival((1, 2))
        assert not reg.on_rival((1, 2), exclude=a)
        assert reg.on_rival((7, 8), exclude=a)

    def test_growth_duplicates_tail(self):
        reg = EntityRegistry()
        rival = make_rival(0, [(2, 2), (1, 2)])
        reg.add_rival(rival)
        reg.rival_grow(rival, 2)
        assert list(rival.segments) == [(2, 2), (1, 2), (1, 2), (1, 2)]
        reg.rival_pop_tail(rival)
        reg.rival_pop_tail(rival)
        assert reg.on_rival((1, 2))
        reg.rival_pop_tail(rival)
        assert not reg.on_rival((1, 2))

    def test_remove_rival_frees_cells(self):
        reg = EntityRegistry()
        rival = make_rival(0, [(2, 2)])
        reg.add_rival(rival)
        reg.remove_rival(rival)
        assert reg.rivals == []
        assert not reg.is_occupied((2, 2))


class TestObstaclesAndFood:
    def test_move_obstacle_updates_index(self):
        reg = EntityRegistry()
        obstacle = Obstacle(cell=(10, 10), anchor=(10, 10))
        reg.set_obstacles([obstacle])
        reg.move_obstacle(obstacle, (11, 10))
        assert reg.on_obstacle((11, 10))
        assert not reg.on_obstacle((10, 10))
        assert obstacle.anchor == (10, 10)

    def test_big_food_occupies_two_by_two(self):
        reg = EntityRegistry()
        reg.set_big_food(Food((4, 4), FoodKind.BIG, 20))
        for cell in [(4, 4), (5, 4), (4, 5), (5, 5)]:
            assert reg.in_big_food(cell)
            assert reg.is_occupied(cell)
        assert not reg.in_big_food((6, 4))
        reg.set_big_food(None)
        assert not reg.is_occupied((5, 5))

    def test_food_lookup_and_removal(self):
        reg = EntityRegistry()
        reg.add_food(Food((3, 3)))
        reg.set_slow_food(Food((7, 7), FoodKind.SLOW, 5))
        assert reg.food_at((3, 3)).value == 10
        assert reg.on_slow_food((7, 7))
        assert reg.remove_food((3, 3)) is not None
        assert reg.remove_food((3, 3)) is None

    def test_clear_empties_everything(self):
        reg = EntityRegistry()
        reg.set_snake([(1, 1)])
        reg.set_obstacles([Obstacle((2, 2), (2, 2))])
        reg.add_food(Food((3, 3)))
        reg.add_rival(make_rival(0, [(4, 4)]))
        reg.clear()
        assert not any(reg.is_occupied(c) for c in [(1, 1), (2, 2), (3, 3), (4, 4)])
