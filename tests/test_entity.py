from arcadesixteen.entity import Entity

SPRITE = (16.0, 16.0)
UNTIL = (16.0, 16.0)
AIR = [0, 0, 0, 0]
GROUND = [0, 1, 0, 0]


def test_coin_jumps_then_is_out():
    c = Entity((50.0, 100.0), SPRITE, SPRITE, 1, speed=2.0)
    lowest = c.position[1]
    for _ in range(200):
        c.update(UNTIL, AIR)
        lowest = min(lowest, c.position[1])
        if c.out:
            break
    assert c.out is True
    assert c.wiggling == 0
    assert lowest < 100.0 - UNTIL[1] * 2.5
    assert c.position[1] > 100.0


def test_mushroom_rises_out_of_box():
    m = Entity((50.0, 100.0), SPRITE, SPRITE, 2, speed=3.0)
    for _ in range(200):
        m.update(UNTIL, GROUND)
        if m.out:
            break
    assert m.out is True
    assert 100.0 - m.position[1] >= UNTIL[1]


def test_mushroom_wanders_when_out():
    m = Entity((50.0, 100.0), SPRITE, SPRITE, 2, speed=3.0)
    m.out = True
    x0 = m.position[0]
    m.update(UNTIL, GROUND)
    assert m.position[0] > x0
    m.update(UNTIL, [0, 1, 1, 0])
    assert m.speed < 0


def test_mushroom_falls_without_ground():
    m = Entity((50.0, 100.0), SPRITE, SPRITE, 2)
    m.out = True
    m.update(UNTIL, AIR)
    assert m.position[1] > 100.0


def test_big_mario_mushroom_stays_put():
    m = Entity((50.0, 100.0), SPRITE, SPRITE, 2, big_mario=True)
    m.out = True
    m.update(UNTIL, GROUND)
    assert m.position[0] == 50.0
    assert m.animation.max_swap == 3
    assert m.animation.start == (SPRITE[0], 0.0)


def test_display_includes_offsets():
    c = Entity((50.0, 100.0), SPRITE, SPRITE, 1)
    c.set_offset(-20.0)
    c.odd_x = 5.0
    c.update(UNTIL, AIR)
    assert c.display_position == (c.position[0] - 20.0 + 5.0, c.position[1])


def test_hitboxes():
    c = Entity((50.0, 100.0), SPRITE, SPRITE, 1)
    c.update(UNTIL, AIR)
    top, bottom, left, right = c.hitboxes()
    dx, dy = c.display_position
    assert top.width == SPRITE[0] - 5
    assert right.x == dx + SPRITE[0]
    assert bottom.y == dy + SPRITE[1]
    assert left.height == SPRITE[1] - 5