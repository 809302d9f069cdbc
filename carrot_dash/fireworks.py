"""Firework celebration: launch, explosion and particle decay."""

import math
import random

from .constants import (
    FIELD_W, FIELD_H, MAX_FIREWORKS, ASCENT_RATE,
    EXPLODE_ALTITUDE_MIN, EXPLODE_ALTITUDE_BAND, ESCAPE_ALTITUDE,
    PARTICLES_MIN, PARTICLES_SPREAD, SPEED_MIN, SPEED_SPREAD,
    LIFE_MIN, LIFE_SPREAD, GRAVITY, FRICTION, FIREWORK_COLORS,
)
from .models import Firework, FireworkView, Particle, ParticleView


def firework_count(trigger_index: int, rng=random) -> int:
    """3-5 rockets for the first celebration, doubling each time, capped."""
    base = 3 + rng.randrange(3)
    return min(base * 2 ** trigger_index, MAX_FIREWORKS)


class FireworkSystem:
    def __init__(self, rng=random):
        self.rng = rng
        self.fireworks: list[Firework] = []

    @property
    def active(self) -> bool:
        return bool(self.fireworks)

    def clear(self):
        self.fireworks.clear()

    def trigger(self, trigger_index: int) -> list[Firework]:
        count = firework_count(trigger_index, self.rng)
        spacing = FIELD_W / (count + 1)
        launched = [
            Firework(
                x=spacing * (i + 1),
                y=FIELD_H,
                color=self.rng.choice(FIREWORK_COLORS),
                explode_at=EXPLODE_ALTITUDE_MIN + self.rng.random() * EXPLODE_ALTITUDE_BAND,
            )
            for i in range(count)
        ]
        self.fireworks.extend(launched)
        return launched

    def explode(self, fw: Firework):
        n = PARTICLES_MIN + self.rng.randrange(PARTICLES_SPREAD)
        for i in range(n):
            angle = 2 * math.pi * i / n
            speed = SPEED_MIN + self.rng.random() * SPEED_SPREAD
            life = LIFE_MIN + self.rng.randrange(LIFE_SPREAD)
            fw.particles.append(Particle(
                x=fw.x,
                y=fw.y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                color=self.rng.choice(FIREWORK_COLORS),
                life=life,
                max_life=life,
            ))
        fw.exploded = True

    def update(self):
        for fw in self.fireworks:
            if not fw.exploded:
                new_y = fw.y - ASCENT_RATE
                if new_y < fw.explode_at:
                    self.explode(fw)
                fw.y = new_y
                continue

            for p in fw.particles:
                p.x += p.vx
                p.y += p.vy + GRAVITY
                p.vx *= FRICTION
                p.vy *= FRICTION
                p.life -= 1
            fw.particles = [p for p in fw.particles if p.life > 0]

        self.fireworks = [
            fw for fw in self.fireworks
            if (fw.particles if fw.exploded else fw.y > ESCAPE_ALTITUDE)
        ]

    def snapshot(self) -> tuple:
        return tuple(
            FireworkView(
                x=fw.x,
                y=fw.y,
                color=fw.color,
                exploded=fw.exploded,
                particles=tuple(ParticleView(p.x, p.y, p.color, p.alpha) for p in fw.particles),
            )
            for fw in self.fireworks
        )
