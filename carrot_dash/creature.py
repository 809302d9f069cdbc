"""Creature movement and feeding."""

import random
from dataclasses import dataclass
from typing import Optional

from .collision import detect_collision
from .constants import (
    DIRECTIONS, OPPOSITES, FOOD_REWARD, FIREWORK_EVERY, START_FOOD,
)
from .food import spawn_food
from .models import CollisionKind, Creature, Position, Progress


@dataclass
class Step:
    body: list
    collision: Optional[CollisionKind] = None
    ate: bool = False


@dataclass
class TickOutcome:
    collision: Optional[CollisionKind] = None
    ate: bool = False
    firework_trigger: bool = False
    board_full: bool = False


def advance(body: list, facing: str, food) -> Step:
    """Move one cell in `facing`. On collision the returned body is `body` itself."""
    dx, dy = DIRECTIONS[facing]
    hx, hy = body[0]
    head = Position(hx + dx, hy + dy)

    collision = detect_collision(head, body)
    if collision is not None:
        return Step(body=body, collision=collision)

    new_body = [head] + body
    if head == food:
        return Step(body=new_body, ate=True)
    new_body.pop()
    return Step(body=new_body)


class CreatureSimulator:
    def __init__(self, progress: Progress, rng=random):
        self.progress = progress
        self.rng = rng
        self.creature = Creature()
        self.food: Optional[Position] = Position(*START_FOOD)

    def reset(self):
        self.creature = Creature()
        self.food = Position(*START_FOOD)

    def change_direction(self, direction: str) -> bool:
        if direction not in DIRECTIONS:
            return False
        if OPPOSITES[direction] == self.creature.direction:
            return False
        self.creature.intent = direction
        return True

    def tick(self) -> TickOutcome:
        c = self.creature
        if c.intent is not None:
            c.direction, c.intent = c.intent, None

        step = advance(c.segments, c.direction, self.food)
        if step.collision is not None:
            return TickOutcome(collision=step.collision)

        c.segments = step.body
        if not step.ate:
            return TickOutcome()

        p = self.progress
        p.food_eaten += 1
        p.score += FOOD_REWARD
        self.food = spawn_food(c.segments, self.rng)
        return TickOutcome(
            ate=True,
            firework_trigger=p.food_eaten % FIREWORK_EVERY == 0,
            board_full=self.food is None,
        )
