# arcadesixteen

Small arcade games on pygame. The rules and movement of each game live in
plain Python classes that know nothing about drawing. You can step them from
your own loop or from tests. A small pygame front end plays two of them.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
arcadesixteen
```

This opens a 640×480 window on a menu with two buttons, **Arkanoid** and
**Asteroids**. Click a button with the left mouse button to start that game.
In each game, the **Back** button returns to the menu.

Options:

- `--game {menu,arkanoid,asteroids}` chooses the screen to start on. The default is `menu`.
- `--highscore-file PATH` sets where the Asteroids high score is read and written.
  The default is `res/asteroids/hs.txt`.
  - If the file is missing or does not hold a number, the high score starts at 0.
  - When the score passes the high score, the file is overwritten. The directory holding it must already exist.

Controls:

- **Arkanoid**: Left and Right move the paddle.
- **Asteroids**: Left and Right turn the ship, Up thrusts and Space shoots.
- In either game, R starts a new round after the game is lost.

## The game logic

Each game advances when you call `update` with a time step in seconds:

```python
from arcadesixteen.arkanoid import ArkanoidGame

game = ArkanoidGame()
for _ in range(60):
    game.update(1 / 60, left=False, right=True)
print(game.position, len(game.blocks), game.game_over)
```

### Arkanoid

`arcadesixteen.arkanoid.ArkanoidGame` holds the game's state:

- the ball, the paddle and a grid of block `Rect`s;
- `update(delta, left, right)` moves the ball and paddle and removes the first block the ball touches;
- `collide(rect)` reverses the ball's direction when one of its edge sensors touches `rect`;
- `reset()` starts a new round.

### Asteroids

`arcadesixteen.asteroids.AsteroidsGame` holds the ship, the bullets (`Bullet`) and three lists of asteroids: `big`, `medium` and `small`.

- `update(delta, controls)` takes a `Controls` value saying which keys are held.
- A shot big asteroid splits into two medium ones, and a shot medium asteroid into two small ones. Each hit adds 10, 20 or 30 points.
- `spawn_position()` picks a random point on the left or top edge.
- `reset()` starts a new game.
- `load_highscore(path)` and `save_highscore(path, score)` read and write the high score file.

The asteroids themselves are `arcadesixteen.astro.Astro`, sized by `AsteroidSize`.

### Maze ghosts

`arcadesixteen.ghost.Ghost` moves one tile at a time through a grid `field`, in which `1` marks a wall. Its `type` sets how it chooses a target tile:

- type 0 chases the player with `update`;
- type 1 aims two tiles ahead of the player with `update_pinky`;
- type 2 aims opposite the chaser with `update_inky`;
- type 3 keeps its distance with `update`.

The other methods:

- `find_path(target, cur_pos)` picks the open neighbour closest to the target and never steps straight back. The result is a `Direction`.
- `scatter(cur_pos)` heads for the ghost's own corner, as used in fright mode.
- `die(delta)` returns the ghost to its house.
- `reset()` restarts the sequence for leaving the house.

### Platformer pieces

- `arcadesixteen.box.Box` with `BlockType` covers ground, bricks, mystery boxes, pipes and scenery. A block that can bump moves up a third of its height and back when `update(wiggle=True)` is called.
- `arcadesixteen.enemy.Enemy` is a walker that falls, turns at walls and either disappears or shrinks when killed. Its `update` returns `True` when the enemy should be removed.
- `arcadesixteen.entity.Entity` is a coin, which jumps and vanishes, or a mushroom, which rises and then wanders.
- `arcadesixteen.projectile.Projectile` is a fireball that bounces off the ground. It is removed at walls and at the screen edges.

Each of these pieces has `set_offset(off_x)` for horizontal scrolling and `hitboxes()` returning its edge sensor rectangles. The `update` methods of `Enemy`, `Entity` and `Projectile` take `contacts`, a four-item sequence of flags for the top, bottom, left and right edges.

### Shared parts

- `arcadesixteen.button.Rect` is an axis-aligned rectangle with `intersects` and `contains`.
- `arcadesixteen.button.Button` is a labelled rectangle with `is_clicked(mouse_x, mouse_y, pressed)`.
- `arcadesixteen.animation.TwoFrameAnimation` and `SpriteAnimation` compute which sprite-sheet frame to show as time passes.
- `arcadesixteen.app.run_frames(frame_time, step, max_step)` splits a frame's time into steps no longer than `max_step`. The main loop uses it with steps of 1/60 s.

## What it does not do

- The window plays only Arkanoid and Asteroids. The ghost, block, enemy, item and projectile classes have no screen: there is no playable maze game or platformer level, and no level data.
- `arcadesixteen.app.GameState` also names Tetris, Space Invaders, Pong, Pac-Man, Simon and Super Mario. None of these has a game in this package, and the front end shows the menu for them.
- Nothing is drawn from image files or bundled fonts. The front end draws simple shapes and uses a system font.