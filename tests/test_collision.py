import pytest

from carrot_dash.collision import detect_collision
from carrot_dash.models import CollisionKind, Position


@pytest.mark.parametrize("head", [(-1, 5), (20, 0), (0, 20), (5, -1)])
def test_outside_grid_is_wall(head):
    assert detect_collision(Position(*head), [Position(0, 0)]) is CollisionKind.WALL


def test_edges_are_inside():
    body = [Position(10, 10)]
    for head in [(0, 0), (19, 19), (0, 19), (19, 0)]:
        assert detect_collision(Position(*head), body) is None


def test_running_into_body_is_self_collision():
    body = [Position(5, 5), Position(5, 6), Position(6, 6), Position(6, 5)]
    assert detect_collision(Position(6, 5), body) is CollisionKind.SELF
    assert detect_collision(Position(5, 6), body) is CollisionKind.SELF


def test_current_head_is_not_checked():
    assert detect_collision(Position(5, 5), [Position(5, 5)]) is None


def test_free_cell():
    body = [Position(5, 5), Position(4, 5)]
    assert detect_collision(Position(6, 5), body) is None
