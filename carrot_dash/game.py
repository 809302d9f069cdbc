"""Core game state and logic."""

import logging
import random
from typing import Optional

from .constants import FIREWORK_EVERY
from .creature import CreatureSimulator, TickOutcome
from .fireworks import FireworkSystem
from .models import GamePhase, Progress, Snapshot

logger = logging.getLogger(__name__)


class GameError(Exception):
    pass


class InvalidTransition(GameError):
    def __init__(self, action: str, phase: GamePhase):
        super().__init__(f"cannot {action} while {phase.value}")
        self.action = action
        self.phase = phase


class GameState:
    def __init__(self, rng=random):
        self.rng = rng
        self.phase = GamePhase.IDLE
        self.progress = Progress()
        self.simulator = CreatureSimulator(self.progress, rng)
        self.fireworks = FireworkSystem(rng)
        self.won = False

    @property
    def playing(self) -> bool:
        return self.phase is GamePhase.PLAYING

    def _begin(self):
        self.simulator.reset()
        self.progress.reset()
        self.fireworks.clear()
        self.won = False
        self.phase = GamePhase.PLAYING

    def start(self):
        if self.phase is not GamePhase.IDLE:
            raise InvalidTransition("start", self.phase)
        self._begin()
        logger.debug("game started")

    def restart(self):
        if self.phase is not GamePhase.GAME_OVER:
            raise InvalidTransition("restart", self.phase)
        self._begin()
        logger.debug("game restarted, high score %d", self.progress.high_score)

    def stop(self):
        if self.phase is not GamePhase.PLAYING:
            raise InvalidTransition("stop", self.phase)
        self.phase = GamePhase.GAME_OVER
        logger.debug("game stopped at score %d", self.progress.score)

    def change_direction(self, direction: str) -> bool:
        if not self.playing:
            return False
        return self.simulator.change_direction(direction)

    def tick(self) -> Optional[TickOutcome]:
        if not self.playing:
            return None

        outcome = self.simulator.tick()
        if outcome.collision is not None:
            self.phase = GamePhase.GAME_OVER
            logger.debug("%s collision, final score %d", outcome.collision.value, self.progress.score)
            return outcome

        p = self.progress
        if p.score > p.high_score:
            p.high_score = p.score

        if outcome.firework_trigger:
            launched = self.fireworks.trigger(p.trigger_count)
            p.trigger_count += 1
            logger.debug("celebration #%d with %d fireworks", p.trigger_count, len(launched))

        if outcome.board_full:
            self.won = True
            self.phase = GamePhase.GAME_OVER
            logger.debug("board full, score %d", p.score)
        return outcome

    def frame(self) -> bool:
        """Advance fireworks one frame; True while any remain in flight."""
        self.fireworks.update()
        return self.fireworks.active

    def snapshot(self) -> Snapshot:
        c = self.simulator.creature
        p = self.progress
        return Snapshot(
            phase=self.phase,
            segments=tuple(c.segments),
            direction=c.direction,
            food=self.simulator.food,
            fireworks=self.fireworks.snapshot(),
            score=p.score,
            food_eaten=p.food_eaten,
            trigger_count=p.trigger_count,
            high_score=p.high_score,
            next_reward=FIREWORK_EVERY - p.food_eaten % FIREWORK_EVERY,
            won=self.won,
        )
