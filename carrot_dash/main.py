"""FastAPI application — HTTP routes and the per-player WebSocket session."""

import json
import logging
import os

from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from .connection_manager import ConnectionManager, build_welcome_msg, game_config, parse_direction
from .game import GameError, GameState
from .runner import GameRunner

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await manager.close_all()


app = FastAPI(lifespan=lifespan)
manager = ConnectionManager()


@app.get("/")
async def index():
    return {"name": "carrot-dash", "websocket": "/ws"}


@app.get("/config")
async def config():
    return game_config()


async def handle_message(runner: GameRunner, raw: str):
    try:
        msg = json.loads(raw)
    except ValueError:
        logger.debug("ignoring malformed message %r", raw[:80])
        return
    if not isinstance(msg, dict):
        return

    kind = msg.get("type")
    try:
        if kind == "start":
            await runner.start()
        elif kind == "restart":
            await runner.restart()
        elif kind == "stop":
            await runner.stop()
        elif kind in ("input", "key"):
            d = parse_direction(msg)
            if d is not None:
                runner.change_direction(d)
        else:
            logger.debug("ignoring message type %r", kind)
    except GameError as e:
        logger.debug("ignoring %s: %s", kind, e)


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await ws.accept()
    runner = GameRunner(GameState(), ws.send_text)
    manager.register(ws, runner)
    logger.info("session opened (%d active)", len(manager.connections))
    try:
        await ws.send_text(build_welcome_msg())
        await runner.publish()
        while True:
            message = await ws.receive()
            if message["type"] == "websocket.disconnect":
                break
            raw = message.get("text")
            if raw is None:
                logger.debug("ignoring binary frame")
                continue
            await handle_message(runner, raw)
    except WebSocketDisconnect:
        pass
    finally:
        await manager.disconnect(ws)
        logger.info("session closed (%d active)", len(manager.connections))


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    host = os.environ.get("CARROT_DASH_HOST", "0.0.0.0")
    port = int(os.environ.get("CARROT_DASH_PORT", "8765"))
    logger.info("Carrot Dash starting on http://localhost:%d", port)
    uvicorn.run(app, host=host, port=port)
