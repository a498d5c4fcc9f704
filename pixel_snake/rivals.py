"""Rival snake behaviour: greedy food chasing, avoidance and decomposition."""

import logging
import random
from typing import Optional

from .constants import RIVAL_CADENCE_TICKS, RIVAL_MIN_FOOD_VALUE
from .geometry import in_bounds, manhattan, step
from .models import Cell, Direction, EventKind, Food, FoodKind, GameEvent, RivalSnake
from .registry import EntityRegistry
from .spawner import Spawner

logger = logging.getLogger(__name__)


class RivalController:
    def __init__(self, registry: EntityRegistry, spawner: Spawner, rng: random.Random):
        self.registry = registry
        self.spawner = spawner
        self.rng = rng
        self.timer = 0

    def reset(self):
        self.timer = 0

    @staticmethod
    def cadence(tick_rate: int) -> int:
        return max(1, RIVAL_CADENCE_TICKS // tick_rate)

    def update(self, tick_rate: int) -> list[GameEvent]:
        """Advance the shared rival clock and move every rival that is due."""
        if not self.registry.rivals:
            return []
        self.timer += 1
        if self.timer < self.cadence(tick_rate):
            return []
        self.timer = 0

        events = []
        for rival in list(self.registry.rivals):
            if rival not in self.registry.rivals:
                continue
            rival.move_timer += 1
            if rival.move_timer < rival.move_interval:
                continue
            rival.move_timer = 0
            events.extend(self.move(rival))
        return events

    def nearest_food(self, head: Cell) -> Optional[Cell]:
        targets = list(self.registry.food)
        if self.registry.big_food is not None:
            targets.append(self.registry.big_food.cell)
        if not targets:
            return None
        return min(targets, key=lambda f: manhattan(f, head))

    def preferred_direction(self, rival: RivalSnake) -> Direction:
        head = rival.head()
        target = self.nearest_food(head)
        if target is None:
            return rival.direction
        dx, dy = target[0] - head[0], target[1] - head[1]
        if abs(dx) > abs(dy):
            return Direction.RIGHT if dx > 0 else Direction.LEFT
        if dy != 0:
            return Direction.DOWN if dy > 0 else Direction.UP
        return rival.direction

    def is_safe(self, rival: RivalSnake, direction: Direction) -> bool:
        cell = step(rival.head(), direction)
        return (
            in_bounds(cell, self.registry.size)
            and not self.registry.on_obstacle(cell)
            and cell not in rival.cells
            and not self.registry.on_rival(cell, exclude=rival)
        )

    def choose_direction(self, rival: RivalSnake) -> Direction:
        preferred = self.preferred_direction(rival)
        if self.is_safe(rival, preferred):
            return preferred
        for direction in Direction:
            if self.is_safe(rival, direction):
                return direction
        return rival.direction

    def move(self, rival: RivalSnake) -> list[GameEvent]:
        reg = self.registry
        rival.direction = self.choose_direction(rival)
        new_head = step(rival.head(), rival.direction)

        if not in_bounds(new_head, reg.size):
            rival.direction = self.rng.choice(list(Direction))
            return [self.decompose(rival, "wall")]
        if reg.on_obstacle(new_head):
            return [self.decompose(rival, "obstacle")]
        if new_head in rival.cells:
            return [self.decompose(rival, "self")]
        if reg.on_rival(new_head, exclude=rival):
            return [self.decompose(rival, "rival")]

        reg.rival_push_head(rival, new_head)
        reg.rival_pop_tail(rival)
        self.eat(rival)

        if reg.on_snake(new_head):
            return [self.decompose(rival, "player")]
        return []

    def eat(self, rival: RivalSnake):
        reg = self.registry
        head = rival.head()
        if reg.remove_food(head) is not None:
            reg.rival_grow(rival, 1)
            rival.speed_boosts += 1
            self.spawner.place_standard_food()
        if reg.in_big_food(head):
            reg.set_big_food(None)
            reg.rival_grow(rival, 2)
            rival.speed_boosts += 1

    def decompose(self, rival: RivalSnake, cause: str) -> GameEvent:
        """Remove a rival and scatter its body as standard food."""
        reg = self.registry
        length = len(rival.segments)
        value = max(RIVAL_MIN_FOOD_VALUE, length // 2)
        dropped = 0
        for cell in dict.fromkeys(rival.segments):
            if not in_bounds(cell, reg.size):
                continue
            if reg.on_obstacle(cell) or reg.on_snake(cell) or reg.on_any_food(cell):
                continue
            reg.add_food(Food(cell, FoodKind.STANDARD, value))
            dropped += 1
        reg.remove_rival(rival)
        logger.debug("Rival %d decomposed (%s) into %d food cells", rival.rid, cause, dropped)
        return GameEvent(EventKind.RIVAL_DECOMPOSED, {
            "rid": rival.rid,
            "cause": cause,
            "food": dropped,
            "value": value,
        })
