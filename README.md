# ballpit

An interactive ball pit. Hold the mouse button to drop handfuls of balls
of random size, colour and friction. They fall under gravity, bounce off the
edges of the window and knock into each other. Nearby balls are found with a
uniform spatial grid.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the window.

## Running

```
ballpit
```

By default this opens a 640×480 world where each world pixel is drawn as a
2×2 block on screen.

Options:

| Option            | Meaning                                   | Default |
|-------------------|-------------------------------------------|---------|
| `--width N`       | world width in pixels                     | 640     |
| `--height N`      | world height in pixels                    | 480     |
| `--pixel-size N`  | screen pixels per world pixel             | 2       |
| `--seed N`        | random seed for dropped balls             | none    |

Width, height and pixel size must be positive.

Controls:

| Key       | Action                               |
|-----------|--------------------------------------|
| Mouse 1   | Drop ten balls per frame (hold)      |
| TAB       | Show help (hold)                     |
| C         | Clear all balls                      |
| Q         | Toggle drawing the collision grid    |
| ESC       | Quit                                 |

The number of live balls is shown in the top-left corner.

## Using the simulation from code

The physics does not need a window:

```python
from ballpit.physics import Vec2, World, PhysicsBall, BallProperties
from ballpit.engine import PhysicsEngine

world = World(640, 480)
engine = PhysicsEngine()  # gravity=200.0, cell_size=32.0
engine.add(
    PhysicsBall(
        position=Vec2(100.0, 100.0),
        velocity=Vec2(200.0, 0.0),
        color=(255, 0, 0),
        radius=5,
        weight=11,
        properties=BallProperties(stickyness=0.0, friction=0.5),
    )
)

for _ in range(60):
    engine.update(1 / 60, world)

for ball in engine.objects():
    print(ball.position)
```

`ballpit.physics` holds `Vec2` (an immutable vector with `mag`, `mag2` and
`dot`), `World`, `ImpactWorldResult`, `BallProperties` and `PhysicsBall`, whose
static methods test for and respond to ball–ball and ball–wall collisions.

`PhysicsEngine.update(dt, world)` splits `dt` into four sub-updates of up to
four steps each. After an update, `update_times`, `tree_build_times` and
`collision_times` hold the measured durations in milliseconds. Dead balls are
removed once at least 50 of them are counted in the last sub-update.

`BallPit` in `ballpit.app` holds a world and an engine together. Its `drop`,
`step` and `alive_count` methods can be called without a display; `run` opens
the window and runs the interactive loop.

## Tests

```
pip install .[test]
pytest
```