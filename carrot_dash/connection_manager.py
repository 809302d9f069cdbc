"""WebSocket connection management and state serialization."""

import json
from typing import Optional

from fastapi import WebSocket

from .constants import (
    GRID_SIZE, CELL_SIZE, TICK_INTERVAL, FRAME_RATE, FIREWORK_EVERY,
    FOOD_REWARD, DIRECTIONS, KEY_BINDINGS, FIREWORK_COLORS,
)
from .models import Snapshot


class ConnectionManager:
    def __init__(self):
        self.connections: dict = {}

    def register(self, ws: WebSocket, runner):
        self.connections[ws] = runner

    async def disconnect(self, ws: WebSocket):
        runner = self.connections.pop(ws, None)
        if runner is not None:
            await runner.close()

    async def close_all(self):
        for ws in list(self.connections):
            await self.disconnect(ws)


def game_config() -> dict:
    return {
        "grid": GRID_SIZE,
        "cell_size": CELL_SIZE,
        "tick_interval": TICK_INTERVAL,
        "frame_rate": FRAME_RATE,
        "food_reward": FOOD_REWARD,
        "firework_every": FIREWORK_EVERY,
        "colors": FIREWORK_COLORS,
    }


def build_welcome_msg() -> str:
    return json.dumps({"type": "welcome", **game_config()})


def scoreboard(snap: Snapshot) -> dict:
    return {
        "score": snap.score,
        "food_eaten": snap.food_eaten,
        "trigger_count": snap.trigger_count,
        "high_score": snap.high_score,
        "next_reward": snap.next_reward,
    }


def build_state_msg(snap: Snapshot) -> str:
    fireworks = []
    for fw in snap.fireworks:
        fireworks.append({
            "x": fw.x,
            "y": fw.y,
            "color": fw.color,
            "exploded": fw.exploded,
            "particles": [
                {"x": p.x, "y": p.y, "color": p.color, "alpha": p.alpha}
                for p in fw.particles
            ],
        })
    return json.dumps({
        "type": "state",
        "phase": snap.phase.value,
        "segments": [list(s) for s in snap.segments],
        "direction": snap.direction,
        "food": list(snap.food) if snap.food is not None else None,
        "fireworks": fireworks,
        "won": snap.won,
        **scoreboard(snap),
    })


def build_game_over_msg(snap: Snapshot) -> str:
    return json.dumps({"type": "game_over", "won": snap.won, **scoreboard(snap)})


def parse_direction(msg: dict) -> Optional[str]:
    """Directional intent carried by an `input` or `key` message, if any."""
    if msg.get("type") == "input":
        d = msg.get("direction")
    elif msg.get("type") == "key":
        key = msg.get("key")
        d = KEY_BINDINGS.get(key) if isinstance(key, str) else None
    else:
        return None
    if isinstance(d, str) and d in DIRECTIONS:
        return d
    return None
