"""High score and play count persistence."""

import json
import logging
import os

from .models import SessionStats

logger = logging.getLogger(__name__)

DEFAULT_STATS_PATH = "snake_stats.json"


class StatsStore:
    def __init__(self, path: str = None):
        self.path = path or os.getenv("PIXEL_SNAKE_STATS_PATH", DEFAULT_STATS_PATH)

    def load(self) -> SessionStats:
        if not os.path.exists(self.path):
            return SessionStats()
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            return SessionStats(
                high_score=int(data.get("high_score", 0)),
                play_count=int(data.get("play_count", 0)),
            )
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable stats file %s: %s", self.path, e)
            return SessionStats()

    def save(self, stats: SessionStats):
        with open(self.path, "w") as f:
            json.dump({"high_score": stats.high_score, "play_count": stats.play_count}, f)
