"""Data models."""

from collections import Counter, deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .constants import RIVAL_BOOST_STEP, STANDARD_FOOD_SCORE

Cell = tuple[int, int]


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


DIRECTIONS: dict[Direction, Cell] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class FoodKind(Enum):
    STANDARD = "standard"
    BIG = "big"
    SLOW = "slow"


class GameStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


class Outcome(Enum):
    WIN = "win"
    LOSS = "loss"


class EventKind(Enum):
    FOOD_EATEN = "food_eaten"
    BIG_FOOD_EATEN = "big_food_eaten"
    SLOW_FOOD_EATEN = "slow_food_eaten"
    MILESTONE = "milestone"
    LEVEL_COMPLETE = "level_complete"
    GAME_WON = "game_won"
    GAME_OVER = "game_over"
    RIVAL_DECOMPOSED = "rival_decomposed"


@dataclass
class Food:
    cell: Cell
    kind: FoodKind = FoodKind.STANDARD
    value: int = STANDARD_FOOD_SCORE


@dataclass(eq=False)
class Obstacle:
    cell: Cell
    anchor: Cell


@dataclass(eq=False)
class RivalSnake:
    rid: int
    head_color: str
    body_color: str
    direction: Direction
    segments: deque = field(default_factory=deque)
    cells: Counter = field(default_factory=Counter)
    move_timer: int = 0
    speed_boosts: int = 0

    def head(self) -> Optional[Cell]:
        return self.segments[0] if self.segments else None

    @property
    def speed_multiplier(self) -> float:
        return min(1.0, 1.0 + self.speed_boosts * RIVAL_BOOST_STEP)

    @property
    def move_interval(self) -> int:
        return int(1 / self.speed_multiplier)


@dataclass
class GameEvent:
    kind: EventKind
    data: dict = field(default_factory=dict)


@dataclass
class SessionStats:
    high_score: int = 0
    play_count: int = 0

    def record(self, score: int):
        self.high_score = max(self.high_score, score)
        self.play_count += 1
