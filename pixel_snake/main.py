"""FastAPI application: WebSocket endpoint, tick scheduler and stats persistence."""

import json
import logging
import os

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from .connection_manager import ConnectionManager, build_state_msg
from .constants import VARIANTS
from .game import GameState
from .models import Direction, EventKind, GameStatus
from .scheduler import TickScheduler
from .stats import StatsStore

logger = logging.getLogger(__name__)

app = FastAPI()
stats_store = StatsStore()
game = GameState(stats=stats_store.load())
manager = ConnectionManager()


async def on_tick():
    game.tick()
    if any(e.kind is EventKind.GAME_OVER for e in game.events):
        save_stats()
    await manager.broadcast(build_state_msg(game))


scheduler = TickScheduler(on_tick, rate=game.tick_rate)
game.scheduler = scheduler


def save_stats():
    try:
        stats_store.save(game.stats)
    except OSError as e:
        logger.warning("Could not save stats to %s: %s", stats_store.path, e)


@app.get("/stats")
async def get_stats():
    return {"high_score": game.stats.high_score, "play_count": game.stats.play_count}


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await manager.connect(ws)
    await ws.send_text(build_state_msg(game))
    try:
        while True:
            raw = await ws.receive_text()
            try:
                msg = json.loads(raw)
            except ValueError:
                logger.debug("Ignoring malformed message: %r", raw[:80])
                continue
            if not isinstance(msg, dict):
                continue
            kind = msg.get("type")

            if kind == "input":
                try:
                    direction = Direction(msg.get("direction"))
                except ValueError:
                    continue
                game.set_direction(direction)
                continue
            elif kind == "start":
                game.start()
            elif kind == "pause":
                game.toggle_pause()
            elif kind == "restart":
                game.restart()
            elif kind == "game_options":
                variant = msg.get("variant")
                if game.status in (GameStatus.RUNNING, GameStatus.PAUSED) or variant not in VARIANTS:
                    continue
                game.set_variant(variant)
            else:
                continue
            await manager.broadcast(build_state_msg(game))
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(ws)
        if not manager.connections and game.status is GameStatus.RUNNING:
            game.pause()


def run():
    import uvicorn

    from .logging_config import configure_logging

    configure_logging()
    host = os.getenv("PIXEL_SNAKE_HOST", "0.0.0.0")
    port = int(os.getenv("PIXEL_SNAKE_PORT", "8765"))
    logger.info("Snake server starting on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
