"""Core game state and per-tick simulation."""

import logging
import random
import time
from typing import Callable, Optional

from .constants import (
    BIG_FOOD_CHANCE, BIG_FOOD_SCORE, DEFAULT_VARIANT, FOOD_COUNT, GRID_SIZE,
    LEVEL_COUNTDOWN, MAX_LEVEL, MIN_TICK_RATE, OBSTACLE_DRIFT_CHANCE,
    OBSTACLE_DRIFT_INTERVAL, OBSTACLE_DRIFT_RADIUS, RIVAL_MIN_LEVEL,
    SLOW_FOOD_CHANCE, SLOW_FOOD_PENALTY, SLOW_FOOD_SCORE, START_LENGTH, VARIANTS,
)
from .geometry import advance, in_bounds, step
from .levels import build_level_obstacles, level_target, milestone_for_score, tick_rate_for_score
from .models import (
    OPPOSITES, Cell, Direction, EventKind, GameEvent, GameStatus, Outcome, SessionStats,
)
from .registry import EntityRegistry
from .rivals import RivalController
from .spawner import Spawner

logger = logging.getLogger(__name__)


class GameState:
    def __init__(self, variant: str = DEFAULT_VARIANT, rng: Optional[random.Random] = None,
                 scheduler=None, clock: Callable[[], float] = time.monotonic,
                 stats: Optional[SessionStats] = None):
        if variant not in VARIANTS:
            raise ValueError(f"Unknown game variant: {variant!r}")
        self.game_options: dict = {"variant": variant, **VARIANTS[variant]}
        self.rng = rng or random.Random()
        self.scheduler = scheduler
        self.clock = clock
        self.stats = stats or SessionStats()

        self.registry = EntityRegistry(GRID_SIZE)
        self.spawner = Spawner(self.registry, self.rng)
        self.rivals = RivalController(self.registry, self.spawner, self.rng)

        self.status = GameStatus.IDLE
        self.outcome: Optional[Outcome] = None
        self.level = 1
        self.score = 0
        self.last_milestone = 0
        self.tick_rate = self.game_options["base_tick_rate"]
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.tick_count = 0
        self.obstacle_timer = 0
        self.level_changing = False
        self.level_change_at: Optional[float] = None
        self.events: list[GameEvent] = []

        self.reset_for_level(self.level)

    # ── Properties ──────────────────────────────────────────────────

    @property
    def snake(self):
        return self.registry.snake

    @property
    def leveled(self) -> bool:
        return self.game_options["leveled"]

    @property
    def target_score(self) -> int:
        if self.leveled:
            return level_target(self.level)
        return self.game_options["win_score"]

    def set_variant(self, variant: str):
        if variant not in VARIANTS:
            raise ValueError(f"Unknown game variant: {variant!r}")
        self.game_options = {"variant": variant, **VARIANTS[variant]}
        self.level = 1
        self.reset_for_level(self.level)

    # ── Session controls ────────────────────────────────────────────

    def start(self):
        if self.status in (GameStatus.RUNNING, GameStatus.PAUSED):
            return
        self.reset_for_level(self.level)
        self.status = GameStatus.RUNNING
        self.outcome = None
        logger.info("Game started on level %d", self.level)
        if self.scheduler is not None:
            self.scheduler.start(self.tick_rate)

    def pause(self):
        if self.status is not GameStatus.RUNNING:
            return
        self.status = GameStatus.PAUSED
        if self.scheduler is not None:
            self.scheduler.stop()

    def resume(self):
        if self.status is not GameStatus.PAUSED:
            return
        self.status = GameStatus.RUNNING
        if self.scheduler is not None:
            self.scheduler.start(self.tick_rate)

    def toggle_pause(self):
        if self.status is GameStatus.PAUSED:
            self.resume()
        else:
            self.pause()

    def restart(self):
        if self.scheduler is not None:
            self.scheduler.stop()
        self.status = GameStatus.IDLE
        self.outcome = None
        self.reset_for_level(self.level)

    def set_direction(self, direction: Direction):
        """Buffer a turn for the next tick; reversals are dropped."""
        if self.status is not GameStatus.RUNNING:
            return
        if OPPOSITES[direction] == self.direction:
            return
        self.next_direction = direction

    # ── Level setup ─────────────────────────────────────────────────

    def reset_for_level(self, level: int):
        reg = self.registry
        reg.clear()
        self.level = level
        self.score = 0
        self.last_milestone = 0
        self.obstacle_timer = 0
        self.level_changing = False
        self.level_change_at = None
        self.rivals.reset()
        self.spawner.reset_rival_ids()
        self.set_tick_rate(self.game_options["base_tick_rate"])

        reg.set_obstacles(build_level_obstacles(level))

        cx = cy = GRID_SIZE // 2
        reg.set_snake([(cx - i, cy) for i in range(START_LENGTH)])
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT

        if self.game_options["rivals"] and level >= RIVAL_MIN_LEVEL:
            self.spawner.place_rivals(level)

        for _ in range(FOOD_COUNT):
            self.spawner.place_standard_food()

    def set_tick_rate(self, rate: int):
        if rate == self.tick_rate:
            return
        self.tick_rate = rate
        if self.status is GameStatus.RUNNING and self.scheduler is not None:
            self.scheduler.set_rate(rate)

    def update_speed(self):
        self.set_tick_rate(tick_rate_for_score(
            self.score,
            self.game_options["base_tick_rate"],
            self.game_options["max_tick_rate"],
        ))

    # ── Simulation ──────────────────────────────────────────────────

    def tick(self):
        if self.status is not GameStatus.RUNNING:
            return
        self.events.clear()

        if self.level_changing:
            if self.clock() < self.level_change_at:
                return
            self.level_changing = False
            self.level_change_at = None

        self.tick_count += 1
        reg = self.registry

        self.direction = self.next_direction
        head = advance(reg.snake[0], self.direction, reg.size)

        if reg.on_snake(head):
            self.game_over(win=False, cause="self")
            return
        if reg.on_obstacle(head):
            self.game_over(win=False, cause="obstacle")
            return
        if self.level >= RIVAL_MIN_LEVEL and reg.on_rival(head):
            self.game_over(win=False, cause="rival")
            return

        reg.push_head(head)

        if self.consume(head):
            self.check_milestone()
            if self.score >= self.target_score:
                if not self.complete_level():
                    return
            self.update_speed()
            if self.rng.random() < BIG_FOOD_CHANCE:
                self.spawner.place_big_food()
            if self.rng.random() < SLOW_FOOD_CHANCE:
                self.spawner.place_slow_food()
        else:
            reg.pop_tail()

        self.obstacle_timer += 1
        if self.obstacle_timer >= OBSTACLE_DRIFT_INTERVAL:
            self.drift_obstacles()
            self.obstacle_timer = 0

        self.events.extend(self.rivals.update(self.tick_rate))

    def consume(self, head: Cell) -> bool:
        """Apply every food under the new head; True if anything was eaten."""
        reg = self.registry
        ate = False

        food = reg.remove_food(head)
        if food is not None:
            self.score += food.value
            self.spawner.place_standard_food()
            self.events.append(GameEvent(EventKind.FOOD_EATEN, {"cell": head, "value": food.value}))
            ate = True

        if reg.in_big_food(head):
            self.score += BIG_FOOD_SCORE
            reg.set_big_food(None)
            self.events.append(GameEvent(EventKind.BIG_FOOD_EATEN, {"cell": head, "value": BIG_FOOD_SCORE}))
            ate = True

        if reg.on_slow_food(head):
            self.score += SLOW_FOOD_SCORE
            reg.set_slow_food(None)
            self.set_tick_rate(max(self.tick_rate - SLOW_FOOD_PENALTY, MIN_TICK_RATE))
            self.events.append(GameEvent(EventKind.SLOW_FOOD_EATEN, {"cell": head, "value": SLOW_FOOD_SCORE}))
            ate = True

        return ate

    def check_milestone(self):
        milestone = milestone_for_score(self.score)
        if milestone > self.last_milestone and milestone > 0:
            self.last_milestone = milestone
            self.events.append(GameEvent(EventKind.MILESTONE, {"score": milestone}))

    def complete_level(self) -> bool:
        """Handle a reached target. Returns False when the game has ended."""
        if not self.leveled:
            self.game_over(win=True, cause="target")
            return False

        finished = self.level
        if finished < MAX_LEVEL:
            next_level = finished + 1
            self.events.append(GameEvent(EventKind.LEVEL_COMPLETE, {"level": finished, "next_level": next_level}))
        else:
            next_level = 1
            self.events.append(GameEvent(EventKind.GAME_WON, {"level": finished}))
        logger.info("Level %d complete, moving to level %d", finished, next_level)

        self.reset_for_level(next_level)
        self.level_changing = True
        self.level_change_at = self.clock() + LEVEL_COUNTDOWN
        return True

    def drift_obstacles(self):
        reg = self.registry
        for obstacle in reg.obstacles:
            if self.rng.random() >= OBSTACLE_DRIFT_CHANCE:
                continue
            cell = step(obstacle.cell, self.rng.choice(list(Direction)))
            if not in_bounds(cell, reg.size):
                continue
            # must stay strictly inside the anchor radius
            if (abs(cell[0] - obstacle.anchor[0]) >= OBSTACLE_DRIFT_RADIUS
                    or abs(cell[1] - obstacle.anchor[1]) >= OBSTACLE_DRIFT_RADIUS):
                continue
            if (reg.on_snake(cell) or reg.on_any_food(cell)
                    or reg.on_obstacle(cell) or reg.on_rival(cell)):
                continue
            reg.move_obstacle(obstacle, cell)

    def game_over(self, win: bool, cause: str = ""):
        self.status = GameStatus.ENDED
        self.outcome = Outcome.WIN if win else Outcome.LOSS
        self.stats.record(self.score)
        if self.scheduler is not None:
            self.scheduler.stop()
        if not win:
            self.level = 1
            self.registry.clear_rivals()
        logger.info("Game over (%s, %s) with score %d", self.outcome.value, cause, self.score)
        self.events.append(GameEvent(EventKind.GAME_OVER, {
            "outcome": self.outcome.value,
            "cause": cause,
            "score": self.score,
        }))
