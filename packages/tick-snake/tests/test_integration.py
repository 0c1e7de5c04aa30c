"""End-to-end games driven through SnakeGame and Scheduler."""
import dataclasses

from tick_snake import (
    Direction,
    HighScoreStore,
    Position,
    Scheduler,
    SnakeConfig,
    SnakeGame,
    Status,
    map_key_to_direction,
)

P = Position


def test_complete_move_without_eating():
    game = SnakeGame(seed=3)
    game.start()
    game._session = dataclasses.replace(game.session, food=P(15, 15))
    game.step()
    assert game.session.snake == (P(6, 10), P(5, 10), P(4, 10))
    assert game.score == 0


def test_eat_grow_and_record_high_score(tmp_path):
    game = SnakeGame(seed=3)
    store = HighScoreStore(tmp_path / "hs.json")
    store.subscribe(game.bus)
    game.start()
    game._session = dataclasses.replace(game.session, food=P(6, 10))
    game.step()
    assert len(game.session.snake) == 4
    assert game.score == 10
    assert store.high_score == 10
    assert HighScoreStore(tmp_path / "hs.json").high_score == 10


def test_key_driven_game_until_wall():
    """Steer up from the spawn and run into the top wall."""
    config = SnakeConfig(initial_speed=250)
    game = SnakeGame(config, seed=5)
    game.start()
    game._session = dataclasses.replace(game.session, food=P(19, 19))
    store = HighScoreStore()
    store.subscribe(game.bus)
    sched = Scheduler(game)

    game.steer(map_key_to_direction("W"))
    # Head at y=10 needs 10 moves to reach row 0, the 11th hits the wall.
    fired = sched.advance(0.25 * 20)
    assert fired == 11
    assert game.status is Status.OVER
    assert game.session.head == P(5, 0)
    assert game.session.direction is Direction.UP
    assert store.high_score == 0


def test_snake_never_overlaps_during_random_play():
    game = SnakeGame(SnakeConfig(grid_size=8), seed=11)
    game.start()
    turns = [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT]
    for i in range(500):
        if game.is_over:
            game.start()
        game.steer(turns[(i // 3) % 4])
        game.step()
        snake = game.session.snake
        assert len(set(snake)) == len(snake)
        if game.session.food is not None:
            assert game.session.food not in snake
