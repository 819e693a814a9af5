import math
import random

import pytest

from arcadesixteen.asteroids import (
    AsteroidsGame,
    Bullet,
    Controls,
    load_highscore,
    save_highscore,
)
from arcadesixteen.astro import Astro, AsteroidSize


@pytest.fixture
def game():
    return AsteroidsGame(rng=random.Random(7))


def _isolate(game, size, position):
    asteroid = Astro(size, position, random.Random(1))
    game.big, game.medium, game.small = [], [], []
    {AsteroidSize.BIG: game.big, AsteroidSize.MEDIUM: game.medium,
     AsteroidSize.SMALL: game.small}[size].append(asteroid)
    return asteroid


def test_highscore_round_trip(tmp_path):
    path = tmp_path / "hs.txt"
    save_highscore(path, 1234)
    assert load_highscore(path) == 1234


def test_load_highscore_rejects_garbage(tmp_path):
    path = tmp_path / "hs.txt"
    path.write_text("abc")
    with pytest.raises(ValueError):
        load_highscore(path)


def test_bullet_step_and_off_screen():
    bullet = Bullet((10.0, 10.0), (-4.0, 0.0))
    assert not bullet.is_off_screen()
    bullet.step()
    bullet.step()
    bullet.step()
    assert bullet.position == (-2.0, 10.0)
    assert bullet.is_off_screen()


def test_initial_wave(game):
    assert len(game.big) == game.max_big
    assert game.medium == [] and game.small == []


def test_spawn_position_is_on_an_edge(game):
    for _ in range(50):
        x, y = game.spawn_position()
        assert x == 0.0 or y == 0.0
        assert 0 <= x <= game.screen_width - game.big_texture_size
        assert 0 <= y <= game.screen_height - game.big_texture_size


def test_big_asteroid_splits_into_two_mediums(game):
    big = _isolate(game, AsteroidSize.BIG, (100.0, 100.0))
    game.bullets = [Bullet((100.0, 100.0), (0.0, 0.0))]
    game.update(0.0, Controls())
    assert game.big == []
    assert len(game.medium) == 2
    assert game.score == 10
    assert game.bullets == []
    first, second = game.medium
    assert first.velocity == big.velocity
    assert second.velocity == (-big.velocity[0], -big.velocity[1])
    assert second.rot == -big.rot


def test_medium_asteroid_splits_into_two_smalls(game):
    _isolate(game, AsteroidSize.MEDIUM, (100.0, 100.0))
    game.bullets = [Bullet((100.0, 100.0), (0.0, 0.0))]
    game.update(0.0, Controls())
    assert game.medium == []
    assert len(game.small) == 2
    assert game.score == 20


def test_small_asteroid_is_destroyed(game):
    _isolate(game, AsteroidSize.SMALL, (100.0, 100.0))
    game.bullets = [Bullet((100.0, 100.0), (0.0, 0.0))]
    game.update(0.0, Controls())
    assert game.small == [] and game.medium == [] and game.big == []
    assert game.score == 30


def test_ship_collision_ends_game(game):
    _isolate(game, AsteroidSize.BIG, game.ship_position)
    game.update(0.0, Controls())
    assert game.game_over is True


def test_speed_is_capped(game):
    game.big = []
    game.update(100.0, Controls(move=True))
    assert math.hypot(*game.ship_velocity) <= game.max_speed + 1e-9


def test_ship_wraps_horizontally(game):
    game.big = []
    game.ship_position = (game.screen_width - 1.0, 100.0)
    game.ship_velocity = (3.0, 0.0)
    game.update(1.0, Controls(move=True))
    assert game.ship_position[0] == 0.0


def test_shooting_respects_delay(game):
    game.big = []
    game.update(game.shot_delay * 2, Controls(shoot=True))
    assert len(game.bullets) == 1
    game.update(0.0, Controls(shoot=True))
    assert len(game.bullets) == 1


def test_rotation_follows_controls(game):
    game.big = []
    game.update(0.1, Controls(right=True))
    assert game.ship_angle == pytest.approx(game.rotation_speed * 0.1)


def test_highscore_saved_when_beaten(tmp_path):
    path = tmp_path / "hs.txt"
    game = AsteroidsGame(highscore=5, highscore_path=path, rng=random.Random(3))
    game.score = 40
    game.update(0.0, Controls())
    assert game.highscore == 40
    assert load_highscore(path) == 40


def test_reset_after_game_over(game):
    game.game_over = True
    game.score = 50
    game.big = []
    game.medium = [Astro(AsteroidSize.MEDIUM, (1.0, 1.0))]
    game.reset()
    assert game.game_over is False
    assert game.score == 0
    assert len(game.big) == game.max_big
    assert game.medium == []
    assert game.ship_position == (game.screen_width / 2, game.screen_height / 2)