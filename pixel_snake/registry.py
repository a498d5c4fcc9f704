"""Entity storage with incremental occupancy indices."""

from collections import Counter, deque
from typing import Iterable, Optional

from .constants import GRID_SIZE
from .geometry import footprint
from .models import Cell, Food, Obstacle, RivalSnake


def _release(counter: Counter, cell: Cell):
    counter[cell] -= 1
    if counter[cell] <= 0:
        del counter[cell]


class EntityRegistry:
    """Owns every entity on the board and answers "what is on this cell".

    Snake and rival bodies are reference-counted so that growth (which
    duplicates the tail segment) and tail removal stay O(1).
    """

    def __init__(self, size: int = GRID_SIZE):
        self.size = size
        self.snake: deque[Cell] = deque()
        self._snake_cells: Counter = Counter()
        self.rivals: list[RivalSnake] = []
        self.obstacles: list[Obstacle] = []
        self._obstacle_cells: dict[Cell, Obstacle] = {}
        self.food: dict[Cell, Food] = {}
        self.big_food: Optional[Food] = None
        self._big_cells: set[Cell] = set()
        self.slow_food: Optional[Food] = None

    def clear(self):
        self.set_snake([])
        self.clear_rivals()
        self.set_obstacles([])
        self.clear_food()

    # ── Player snake ────────────────────────────────────────────────

    def set_snake(self, cells: Iterable[Cell]):
        self.snake = deque(cells)
        self._snake_cells = Counter(self.snake)

    def push_head(self, cell: Cell):
        self.snake.appendleft(cell)
        self._snake_cells[cell] += 1

    def pop_tail(self) -> Cell:
        cell = self.snake.pop()
        _release(self._snake_cells, cell)
        return cell

    def on_snake(self, cell: Cell) -> bool:
        return cell in self._snake_cells

    # ── Rivals ──────────────────────────────────────────────────────

    def add_rival(self, rival: RivalSnake):
        rival.cells = Counter(rival.segments)
        self.rivals.append(rival)

    def remove_rival(self, rival: RivalSnake):
        if rival in self.rivals:
            self.rivals.remove(rival)

    def clear_rivals(self):
        self.rivals = []

    def rival_push_head(self, rival: RivalSnake, cell: Cell):
        rival.segments.appendleft(cell)
        rival.cells[cell] += 1

    def rival_pop_tail(self, rival: RivalSnake) -> Cell:
        cell = rival.segments.pop()
        _release(rival.cells, cell)
        return cell

    def rival_grow(self, rival: RivalSnake, segments: int):
        tail = rival.segments[-1]
        for _ in range(segments):
            rival.segments.append(tail)
            rival.cells[tail] += 1

    def on_rival(self, cell: Cell, exclude: Optional[RivalSnake] = None) -> bool:
        return any(cell in r.cells for r in self.rivals if r is not exclude)

    # ── Obstacles ───────────────────────────────────────────────────

    def set_obstacles(self, obstacles: Iterable[Obstacle]):
        self.obstacles = list(obstacles)
        self._obstacle_cells = {o.cell: o for o in self.obstacles}

    def move_obstacle(self, obstacle: Obstacle, cell: Cell):
        del self._obstacle_cells[obstacle.cell]
        obstacle.cell = cell
        self._obstacle_cells[cell] = obstacle

    def on_obstacle(self, cell: Cell) -> bool:
        return cell in self._obstacle_cells

    # ── Food ────────────────────────────────────────────────────────

    def add_food(self, food: Food):
        self.food[food.cell] = food

    def remove_food(self, cell: Cell) -> Optional[Food]:
        return self.food.pop(cell, None)

    def food_at(self, cell: Cell) -> Optional[Food]:
        return self.food.get(cell)

    def clear_food(self):
        self.food = {}
        self.set_big_food(None)
        self.set_slow_food(None)

    def set_big_food(self, food: Optional[Food]):
        self.big_food = food
        self._big_cells = set(footprint(food.cell)) if food else set()

    def in_big_food(self, cell: Cell) -> bool:
        return cell in self._big_cells

    def set_slow_food(self, food: Optional[Food]):
        self.slow_food = food

    def on_slow_food(self, cell: Cell) -> bool:
        return self.slow_food is not None and self.slow_food.cell == cell

    def on_any_food(self, cell: Cell) -> bool:
        return cell in self.food or self.in_big_food(cell) or self.on_slow_food(cell)

    def is_occupied(self, cell: Cell) -> bool:
        return (
            self.on_snake(cell)
            or self.on_obstacle(cell)
            or self.on_any_food(cell)
            or self.on_rival(cell)
        )
