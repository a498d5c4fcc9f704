"""Level layouts and score-driven progression rules."""

from .constants import (
    BASE_OBSTACLES, BASE_TICK_RATE, LEVEL_SCORE_INCREMENT, MAX_OBSTACLES,
    MAX_TICK_RATE, MILESTONE_STEP, OBSTACLE_POSITIONS,
    OBSTACLES_PER_LEVEL, SCORE_PER_SPEED_TIER,
)
from .models import Obstacle


def level_target(level: int) -> int:
    return level * LEVEL_SCORE_INCREMENT


def obstacle_count(level: int) -> int:
    return min(BASE_OBSTACLES + (level - 1) * OBSTACLES_PER_LEVEL, MAX_OBSTACLES)


def build_level_obstacles(level: int) -> list[Obstacle]:
    count = min(obstacle_count(level), len(OBSTACLE_POSITIONS))
    return [Obstacle(cell=pos, anchor=pos) for pos in OBSTACLE_POSITIONS[:count]]


def tick_rate_for_score(score: int, base: int = BASE_TICK_RATE, cap: int = MAX_TICK_RATE) -> int:
    """One step faster per score tier, up to the variant cap."""
    return min(base + score // SCORE_PER_SPEED_TIER, cap)


def milestone_for_score(score: int) -> int:
    return score // MILESTONE_STEP * MILESTONE_STEP
