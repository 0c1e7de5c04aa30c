"""Tests for the SnakeGame controller and the signals it publishes."""
import dataclasses

from tick_snake import (
    Direction,
    Position,
    Signal,
    SignalBus,
    SnakeConfig,
    SnakeGame,
    Status,
)

P = Position


def _collect(bus: SignalBus, *names: Signal) -> list:
    received = []
    for name in names:
        bus.subscribe(name, lambda n, d: received.append((n, d)))
    return received


def _place_food(game: SnakeGame, food: Position) -> None:
    game._session = dataclasses.replace(game.session, food=food)


def test_new_game_is_ready():
    game = SnakeGame(seed=1)
    assert game.status is Status.READY
    assert game.score == 0
    assert game.speed == 150


def test_seed_generated_when_omitted():
    assert isinstance(SnakeGame().seed, int)


def test_same_seed_same_food():
    a = SnakeGame(seed=42)
    b = SnakeGame(seed=42)
    assert a.start().food == b.start().food


def test_step_before_start_does_nothing():
    game = SnakeGame(seed=1)
    before = game.session
    out = game.step()
    assert out.session is before


def test_start_then_step_moves():
    game = SnakeGame(seed=1)
    game.start()
    _place_food(game, P(0, 0))
    game.step()
    assert game.session.head == P(6, 10)


def test_steer_applies_on_next_step():
    game = SnakeGame(seed=1)
    game.start()
    _place_food(game, P(0, 0))
    game.steer(Direction.DOWN)
    game.step()
    assert game.session.head == P(5, 11)
    assert game.session.direction is Direction.DOWN


def test_pause_blocks_steps():
    game = SnakeGame(seed=1)
    game.start()
    game.pause()
    head = game.session.head
    game.step()
    assert game.session.head == head
    game.resume()
    assert game.status is Status.RUNNING


def test_toggle_pause():
    game = SnakeGame(seed=1)
    game.start()
    game.toggle_pause()
    assert game.status is Status.PAUSED
    game.toggle_pause()
    assert game.status is Status.RUNNING


def test_food_eaten_and_speed_changed_signals():
    bus = SignalBus()
    received = _collect(bus, Signal.FOOD_EATEN, Signal.SPEED_CHANGED)
    game = SnakeGame(seed=1, bus=bus)
    game.start()
    _place_food(game, P(6, 10))
    game.step()
    assert received == [
        (Signal.FOOD_EATEN, {"score": 10}),
        (Signal.SPEED_CHANGED, {"speed": 148}),
    ]


def test_game_over_signal():
    bus = SignalBus()
    received = _collect(bus, Signal.GAME_OVER)
    config = SnakeConfig(snake=(P(19, 10), P(18, 10)))
    game = SnakeGame(config, seed=1, bus=bus)
    game.start()
    game.step()
    assert game.is_over is True
    assert received == [(Signal.GAME_OVER, {"score": 0, "reason": "wall"})]


def test_restart_after_game_over():
    config = SnakeConfig(snake=(P(19, 10), P(18, 10)))
    game = SnakeGame(config, seed=1)
    game.start()
    game.step()
    assert game.is_over
    game.start()
    assert game.status is Status.RUNNING
    assert game.score == 0
    assert game.session.snake == (P(19, 10), P(18, 10))


def test_no_signals_on_plain_move():
    bus = SignalBus()
    received = _collect(bus, Signal.FOOD_EATEN, Signal.SPEED_CHANGED, Signal.GAME_OVER)
    game = SnakeGame(seed=1, bus=bus)
    game.start()
    _place_food(game, P(0, 0))
    game.step()
    assert received == []
