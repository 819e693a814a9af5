import pytest

from arcadesixteen.ghost import Direction, Ghost

TILE = (16.0, 16.0)
START = (0.0, 0.0)


def open_field():
    return [[1 if x in (0, 19) or y in (0, 22) else 0 for y in range(23)] for x in range(20)]


def make_ghost(ghost_type=0, tile=(5, 5), start=START):
    return Ghost(ghost_type, tile, TILE, start, open_field(), speed=16.0)


def test_position_from_tile():
    g = make_ghost(tile=(9, 8), start=(10.0, 20.0))
    assert g.position == (9 * 16.0 + 10.0, 8 * 16.0 + 20.0)


def test_find_path_heads_toward_target():
    g = make_ghost()
    g.find_path((10, 5), (5, 5))
    assert g.instruction is Direction.RIGHT
    assert g.prev_pos == (5, 5)


def test_find_path_up():
    g = make_ghost()
    g.find_path((5, 2), (5, 5))
    assert g.instruction is Direction.UP


def test_find_path_never_steps_back():
    g = make_ghost()
    g.prev_pos = (6, 5)
    g.find_path((10, 5), (5, 5))
    assert g.instruction is Direction.DOWN


def test_find_path_avoids_wall():
    g = make_ghost(tile=(18, 5))
    g.find_path((25, 5), (18, 5))
    assert g.instruction is not Direction.RIGHT
    assert g.instruction is Direction.DOWN


def test_tunnels():
    g = make_ghost()
    g.find_path((5, 5), (1, 10))
    assert g.instruction is Direction.RIGHT
    g.find_path((5, 5), (18, 10))
    assert g.instruction is Direction.LEFT
    assert g.prev_pos == (18, 10)


def test_scatter_goes_to_own_corner():
    g = make_ghost(0, tile=(5, 1))
    g.scatter((5, 1))
    assert g.instruction is Direction.LEFT
    h = make_ghost(3, tile=(5, 21))
    h.scatter((5, 21))
    assert h.instruction is Direction.RIGHT


def test_step_moves_partially():
    g = make_ghost()
    g.instruction = Direction.RIGHT
    x0, y0 = g.position
    assert g.step(0.25) is False
    assert g.position[0] > x0
    assert g.position[1] == y0
    assert g.position[0] - x0 == pytest.approx(g.dist_traveled)


def test_step_completes_tile():
    g = make_ghost()
    g.instruction = Direction.RIGHT
    g.dist_traveled = TILE[0] + 1
    x0 = g.position[0]
    assert g.step(0.25) is True
    assert g.dist_traveled == 0.0
    assert g.position[0] < x0


def test_fright_frame():
    g = make_ghost(2)
    g.instruction = Direction.UP
    g.step(0.01, True)
    assert g.frame_start == (0.0, 4 * g.sprite_size[1])


def test_dead_frame_row():
    g = make_ghost(1)
    g.alive = False
    g.instruction = Direction.UP
    g.step(0.01)
    assert g.frame_start[1] == 5 * g.sprite_size[1]
    assert g.frame_size == g.dead_sprite_size


def test_die_at_home_revives():
    g = make_ghost(tile=(9, 8))
    g.alive = False
    g.die(0.01)
    assert g.alive is True


def test_die_away_from_home_stays_dead():
    g = make_ghost()
    g.alive = False
    g.die(0.01)
    assert g.alive is False


def test_reset():
    g = make_ghost(0)
    g.alive = False
    g.beg = False
    g.dist_traveled = 5.0
    g.st = -1
    g.reset()
    assert (g.alive, g.beg, g.dist_traveled, g.st) == (True, True, 0.0, 1)
    p = make_ghost(1)
    p.st = -1
    p.reset()
    assert p.st == 0


def test_blinky_first_update_targets_player():
    g = make_ghost(0)
    g.update((160.0, 80.0), False, 0.01)
    assert g.beg is False
    assert g.instruction is Direction.RIGHT


def test_clyde_leaves_house_in_order():
    g = make_ghost(3)
    g.update((160.0, 80.0), False, 0.01)
    assert g.instruction is Direction.LEFT
    assert g.beg is True
    g.dist_traveled = 20.0
    g.update((160.0, 80.0), False, 0.01)
    assert g.st == 0
    g.update((160.0, 80.0), False, 0.01)
    assert g.instruction is Direction.UP


def test_pinky_starts_up():
    g = make_ghost(1)
    g.update_pinky((160.0, 80.0), 0.0, False, 0.01)
    assert g.instruction is Direction.UP


def test_inky_starts_right():
    g = make_ghost(2)
    g.update_inky((160.0, 80.0), 0.0, (80.0, 80.0), False, 0.01)
    assert g.instruction is Direction.RIGHT


@pytest.mark.parametrize("rot, expected", [(0.0, Direction.RIGHT), (180.0, Direction.LEFT)])
def test_pinky_aims_ahead(rot, expected):
    g = make_ghost(1)
    g.beg = False
    g.dist_traveled = 20.0
    g.update_pinky((80.0, 80.0), rot, False, 0.01)
    assert g.instruction is expected


def test_fright_scatters():
    g = make_ghost(0, tile=(5, 1))
    g.dist_traveled = 20.0
    g.update((160.0, 80.0), True, 0.01)
    assert g.instruction is Direction.LEFT
    assert g.prev_pos == (5, 1)


def test_dead_ghost_update_revives_at_home():
    g = make_ghost(0, tile=(9, 8))
    g.alive = False
    g.update((160.0, 80.0), False, 0.01)
    assert g.alive is True