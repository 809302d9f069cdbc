"""Food placement."""

import random
from typing import Optional

from .constants import GRID_SIZE, MAX_FOOD_ATTEMPTS
from .models import Position


def spawn_food(occupied, rng=random) -> Optional[Position]:
    """Pick a free cell for the next carrot.

    Random draws are capped at MAX_FOOD_ATTEMPTS; after that the grid is
    scanned row by row. Returns None when no cell is free.
    """
    occupied = set(occupied)
    if len(occupied) < GRID_SIZE * GRID_SIZE:
        for _ in range(MAX_FOOD_ATTEMPTS):
            cell = Position(rng.randrange(GRID_SIZE), rng.randrange(GRID_SIZE))
            if cell not in occupied:
                return cell

    for y in range(GRID_SIZE):
        for x in range(GRID_SIZE):
            if (x, y) not in occupied:
                return Position(x, y)
    return None
