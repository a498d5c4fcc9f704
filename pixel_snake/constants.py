"""Game constants."""

GRID_SIZE = 40
START_LENGTH = 3
FOOD_COUNT = 3
SPAWN_ATTEMPTS = 500

BASE_TICK_RATE = 4
MAX_TICK_RATE = 8
MIN_TICK_RATE = 3
SCORE_PER_SPEED_TIER = 20
SLOW_FOOD_PENALTY = 2

MAX_LEVEL = 5
LEVEL_SCORE_INCREMENT = 100
MILESTONE_STEP = 100
LEVEL_COUNTDOWN = 2.0

STANDARD_FOOD_SCORE = 10
BIG_FOOD_SCORE = 20
SLOW_FOOD_SCORE = 5
BIG_FOOD_CHANCE = 0.3
SLOW_FOOD_CHANCE = 0.2

BASE_OBSTACLES = 5
OBSTACLES_PER_LEVEL = 3
MAX_OBSTACLES = 20
OBSTACLE_DRIFT_INTERVAL = 10
OBSTACLE_DRIFT_CHANCE = 0.3
OBSTACLE_DRIFT_RADIUS = 2

# Candidate obstacle cells, taken in order.
OBSTACLE_POSITIONS = [
    (10, 10), (35, 10), (10, 35), (35, 35),
    (22, 15), (22, 30), (15, 22), (30, 22),
    (8, 20), (37, 25), (12, 8), (32, 12),
    (18, 35), (28, 8), (6, 30), (38, 18),
    (14, 25), (26, 32), (20, 5), (25, 38),
]

RIVAL_MIN_LEVEL = 3
RIVALS_PER_LEVEL = 2
RIVAL_LENGTH = 3
RIVAL_PLACEMENT_ATTEMPTS = 100
RIVAL_PLAYER_CLEARANCE = 5
RIVAL_OBSTACLE_CLEARANCE = 3
RIVAL_CADENCE_TICKS = 60
RIVAL_BOOST_STEP = 0.05
RIVAL_MIN_FOOD_VALUE = 5

# (head, body) colour pairs, indexed by rival id.
RIVAL_COLORS = [
    ("#ff3366", "#cc0044"),
    ("#cc66ff", "#8833cc"),
]

VARIANTS = {
    "levels": {
        "base_tick_rate": BASE_TICK_RATE,
        "max_tick_rate": MAX_TICK_RATE,
        "leveled": True,
        "rivals": True,
        "win_score": None,
    },
    "classic": {
        "base_tick_rate": 6,
        "max_tick_rate": 12,
        "leveled": False,
        "rivals": False,
        "win_score": 500,
    },
}
DEFAULT_VARIANT = "levels"
