import dataclasses
import random

import pytest

from carrot_dash import creature as creature_module
from carrot_dash.constants import DIRECTIONS
from carrot_dash.game import GameState, InvalidTransition
from carrot_dash.models import GamePhase, Position


@pytest.fixture
def game():
    g = GameState(random.Random(4))
    g.start()
    return g


def feed(game):
    c = game.simulator.creature
    dx, dy = DIRECTIONS[c.direction]
    game.simulator.food = Position(c.head().x + dx, c.head().y + dy)
    return game.tick()


def test_idle_ignores_ticks_and_input():
    g = GameState()
    assert g.phase is GamePhase.IDLE
    assert g.tick() is None
    assert g.change_direction("up") is False


def test_start_sets_up_board(game):
    snap = game.snapshot()
    assert snap.phase is GamePhase.PLAYING
    assert snap.segments == ((10, 10),)
    assert snap.food == (15, 15)
    assert snap.direction == "right"
    assert snap.score == 0
    assert snap.next_reward == 3


def test_bad_transitions_raise(game):
    with pytest.raises(InvalidTransition):
        game.start()
    with pytest.raises(InvalidTransition):
        game.restart()
    with pytest.raises(InvalidTransition):
        GameState().stop()


def test_scenario_eat_one(game):
    game.simulator.food = Position(11, 10)
    game.tick()
    snap = game.snapshot()
    assert snap.segments[0] == (11, 10)
    assert len(snap.segments) == 2
    assert snap.score == 10
    assert snap.food not in snap.segments
    assert snap.high_score == 10
    assert snap.next_reward == 2


def test_scenario_wall(game):
    game.simulator.creature.segments = [Position(0, 5)]
    game.simulator.creature.direction = "left"
    outcome = game.tick()
    assert outcome.collision is not None
    assert game.phase is GamePhase.GAME_OVER
    assert game.snapshot().segments == ((0, 5),)
    assert game.tick() is None
    assert game.change_direction("up") is False


def test_scenario_nine_meals(game):
    for _ in range(9):
        feed(game)
    snap = game.snapshot()
    assert snap.food_eaten == 9
    assert snap.trigger_count == 3
    assert snap.score == 90
    assert game.fireworks.active


def test_trigger_index_grows_the_burst(game, monkeypatch):
    seen = []
    real = game.fireworks.trigger
    monkeypatch.setattr(game.fireworks, "trigger", lambda i: seen.append(i) or real(i))
    for _ in range(9):
        feed(game)
    assert seen == [0, 1, 2]


def test_stop_then_restart_resets(game):
    for _ in range(4):
        feed(game)
    game.stop()
    assert game.phase is GamePhase.GAME_OVER
    with pytest.raises(InvalidTransition):
        game.stop()

    game.restart()
    snap = game.snapshot()
    assert snap.phase is GamePhase.PLAYING
    assert snap.segments == ((10, 10),)
    assert snap.score == 0
    assert snap.food_eaten == 0
    assert snap.trigger_count == 0
    assert snap.fireworks == ()
    assert snap.high_score == 40


def test_fireworks_outlive_game_over(game):
    for _ in range(3):
        feed(game)
    game.stop()
    assert game.frame() is True
    frames = 1
    while game.frame():
        frames += 1
        assert frames < 1000
    assert not game.fireworks.active


def test_board_full_is_a_win(game, monkeypatch):
    monkeypatch.setattr(creature_module, "spawn_food", lambda occupied, rng: None)
    feed(game)
    snap = game.snapshot()
    assert snap.phase is GamePhase.GAME_OVER
    assert snap.won
    assert snap.food is None


def test_snapshot_is_frozen(game):
    snap = game.snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 100
    game.tick()
    assert snap.segments == ((10, 10),)
