"""Wall and self collision checks."""

from typing import Optional

from .constants import GRID_SIZE
from .models import CollisionKind


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


def detect_collision(head, body) -> Optional[CollisionKind]:
    """Return what `head` would run into, or None if the cell is free.

    `body` is the creature before the move; its current head is skipped since
    the new head replaces it.
    """
    x, y = head
    if not in_bounds(x, y):
        return CollisionKind.WALL
    if head in body[1:]:
        return CollisionKind.SELF
    return None
