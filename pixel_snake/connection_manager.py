"""WebSocket connection management and state serialization."""

import json
import logging

from fastapi import WebSocket

from .game import GameState
from .models import GameEvent

logger = logging.getLogger(__name__)


class ConnectionManager:
    def __init__(self):
        self.connections: set[WebSocket] = set()

    async def connect(self, ws: WebSocket):
        await ws.accept()
        self.connections.add(ws)

    def disconnect(self, ws: WebSocket):
        self.connections.discard(ws)

    async def broadcast(self, message: str):
        disconnected = []
        for ws in list(self.connections):
            try:
                await ws.send_text(message)
            except Exception as e:
                logger.debug("Dropping connection after failed send: %s", e)
                disconnected.append(ws)
        for ws in disconnected:
            self.connections.discard(ws)


def cells_to_list(cells) -> list[list[int]]:
    return [[x, y] for x, y in cells]


def event_to_dict(event: GameEvent) -> dict:
    data = {k: list(v) if isinstance(v, tuple) else v for k, v in event.data.items()}
    return {"kind": event.kind.value, **data}


def build_state_msg(game: GameState) -> str:
    reg = game.registry
    rivals = [
        {
            "id": r.rid,
            "segments": cells_to_list(r.segments),
            "direction": r.direction.value,
            "head_color": r.head_color,
            "body_color": r.body_color,
        }
        for r in reg.rivals
    ]
    food = [
        {"cell": list(f.cell), "kind": f.kind.value, "value": f.value}
        for f in reg.food.values()
    ]
    big_food = list(reg.big_food.cell) if reg.big_food else None
    slow_food = list(reg.slow_food.cell) if reg.slow_food else None
    return json.dumps({
        "type": "state",
        "grid": reg.size,
        "snake": cells_to_list(reg.snake),
        "direction": game.direction.value,
        "rivals": rivals,
        "obstacles": [list(o.cell) for o in reg.obstacles],
        "food": food,
        "big_food": big_food,
        "slow_food": slow_food,
        "score": game.score,
        "level": game.level,
        "target_score": game.target_score,
        "tick_rate": game.tick_rate,
        "status": game.status.value,
        "outcome": game.outcome.value if game.outcome else None,
        "level_changing": game.level_changing,
        "variant": game.game_options["variant"],
        "high_score": game.stats.high_score,
        "play_count": game.stats.play_count,
        "events": [event_to_dict(e) for e in game.events],
    })
