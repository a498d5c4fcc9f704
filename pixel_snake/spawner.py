"""Rejection-sampling placement of food and rival snakes."""

import logging
import random
from typing import Callable, Optional

from .constants import (
    BIG_FOOD_SCORE, RIVAL_COLORS, RIVAL_LENGTH, RIVAL_MIN_LEVEL,
    RIVAL_OBSTACLE_CLEARANCE, RIVAL_PLACEMENT_ATTEMPTS, RIVAL_PLAYER_CLEARANCE,
    RIVALS_PER_LEVEL, SLOW_FOOD_SCORE, SPAWN_ATTEMPTS, STANDARD_FOOD_SCORE,
)
from .geometry import footprint, in_bounds, manhattan
from .models import DIRECTIONS, Cell, Direction, Food, FoodKind, RivalSnake
from .registry import EntityRegistry

logger = logging.getLogger(__name__)


class Spawner:
    def __init__(self, registry: EntityRegistry, rng: random.Random,
                 max_attempts: int = SPAWN_ATTEMPTS):
        self.registry = registry
        self.rng = rng
        self.max_attempts = max_attempts
        self._next_rival_id = 0

    def _sample(self, upper: int, accept: Callable[[Cell], bool]) -> Optional[Cell]:
        attempts = 0
        while attempts < self.max_attempts:
            cell = (self.rng.randrange(upper), self.rng.randrange(upper))
            if accept(cell):
                return cell
            attempts += 1
        return None

    def _free(self, cell: Cell) -> bool:
        return not self.registry.is_occupied(cell)

    def place_standard_food(self, value: int = STANDARD_FOOD_SCORE) -> Optional[Food]:
        cell = self._sample(self.registry.size, self._free)
        if cell is None:
            logger.debug("No free cell for standard food after %d attempts", self.max_attempts)
            return None
        food = Food(cell, FoodKind.STANDARD, value)
        self.registry.add_food(food)
        return food

    def place_big_food(self) -> Optional[Food]:
        if self.registry.big_food is not None:
            return None
        cell = self._sample(
            self.registry.size - 1,
            lambda anchor: all(self._free(c) for c in footprint(anchor)),
        )
        if cell is None:
            logger.debug("No free 2x2 area for big food after %d attempts", self.max_attempts)
            return None
        food = Food(cell, FoodKind.BIG, BIG_FOOD_SCORE)
        self.registry.set_big_food(food)
        return food

    def place_slow_food(self) -> Optional[Food]:
        if self.registry.slow_food is not None:
            return None
        cell = self._sample(self.registry.size, self._free)
        if cell is None:
            logger.debug("No free cell for slow food after %d attempts", self.max_attempts)
            return None
        food = Food(cell, FoodKind.SLOW, SLOW_FOOD_SCORE)
        self.registry.set_slow_food(food)
        return food

    def reset_rival_ids(self):
        self._next_rival_id = 0

    def _rival_spot_ok(self, segments: list[Cell]) -> bool:
        reg = self.registry
        for cell in segments:
            if not in_bounds(cell, reg.size) or reg.is_occupied(cell):
                return False
            if any(manhattan(cell, s) < RIVAL_PLAYER_CLEARANCE for s in reg.snake):
                return False
            if any(manhattan(cell, o.cell) < RIVAL_OBSTACLE_CLEARANCE for o in reg.obstacles):
                return False
            for rival in reg.rivals:
                if any(manhattan(cell, s) < RIVAL_PLAYER_CLEARANCE for s in rival.segments):
                    return False
        return True

    def place_rival(self) -> Optional[RivalSnake]:
        size = self.registry.size
        for _ in range(RIVAL_PLACEMENT_ATTEMPTS):
            head = (self.rng.randrange(size), self.rng.randrange(size))
            direction = self.rng.choice(list(Direction))
            dx, dy = DIRECTIONS[direction]
            segments = [(head[0] - dx * i, head[1] - dy * i) for i in range(RIVAL_LENGTH)]
            if not self._rival_spot_ok(segments):
                continue
            rid = self._next_rival_id
            self._next_rival_id += 1
            head_color, body_color = RIVAL_COLORS[rid % len(RIVAL_COLORS)]
            rival = RivalSnake(
                rid=rid,
                head_color=head_color,
                body_color=body_color,
                direction=direction,
            )
            rival.segments.extend(segments)
            self.registry.add_rival(rival)
            return rival
        logger.debug("Gave up placing a rival after %d attempts", RIVAL_PLACEMENT_ATTEMPTS)
        return None

    def place_rivals(self, level: int) -> list[RivalSnake]:
        if level < RIVAL_MIN_LEVEL:
            return []
        placed = []
        for _ in range(RIVALS_PER_LEVEL):
            rival = self.place_rival()
            if rival is not None:
                placed.append(rival)
        return placed
