"""Drives one GameState from a tick clock and a frame clock."""

import logging
from typing import Awaitable, Callable

from .clock import Clock
from .connection_manager import build_game_over_msg, build_state_msg
from .constants import FRAME_RATE, TICK_INTERVAL
from .game import GameState

logger = logging.getLogger(__name__)


class GameRunner:
    """Owns the two schedulers of a session.

    The tick clock moves the creature and only runs while playing. The frame
    clock animates fireworks and runs while any are in flight, game over or not.
    """

    def __init__(self, state: GameState, send: Callable[[str], Awaitable[None]]):
        self.state = state
        self.send = send
        self.tick_clock = Clock(TICK_INTERVAL, self._on_tick, "tick")
        self.frame_clock = Clock(1 / FRAME_RATE, self._on_frame, "frame")
        self.closed = False

    async def start(self):
        self.state.start()
        await self._begin()

    async def restart(self):
        self.state.restart()
        await self._begin()

    async def _begin(self):
        await self.frame_clock.stop()
        self.tick_clock.start()
        await self.publish()

    async def stop(self):
        self.state.stop()
        await self.tick_clock.stop()
        await self.publish()
        await self._send(build_game_over_msg(self.state.snapshot()))

    def change_direction(self, direction: str) -> bool:
        return self.state.change_direction(direction)

    async def _send(self, message: str):
        if self.closed:
            return
        try:
            await self.send(message)
        except Exception:
            logger.debug("send failed, client gone")
            self.closed = True

    async def publish(self):
        await self._send(build_state_msg(self.state.snapshot()))

    async def _on_tick(self) -> bool:
        if self.state.tick() is None:
            return False
        if self.state.fireworks.active:
            self.frame_clock.start()
        await self.publish()
        if not self.state.playing:
            await self._send(build_game_over_msg(self.state.snapshot()))
        # a restart may have landed while sending
        return self.state.playing and not self.closed

    async def _on_frame(self) -> bool:
        self.state.frame()
        await self.publish()
        return self.state.fireworks.active and not self.closed

    async def close(self):
        await self.tick_clock.stop()
        await self.frame_clock.stop()
        logger.debug("runner closed")
