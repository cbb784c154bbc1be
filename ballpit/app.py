"""Interactive ball pit: drop balls with the mouse and watch them bounce."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence, Tuple

from ballpit.engine import PhysicsEngine
from ballpit.physics import BallProperties, PhysicsBall, Vec2, World

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
DEFAULT_PIXEL_SIZE = 2
GRID_CELL_SIZE = 32

BALLS_PER_DROP = 10
VELOCITY_X_RANGE = (-1500.0, 1500.0)
VELOCITY_Y_RANGE = (-500.0, 500.0)
STICKYNESS_RANGE = (0.0, 0.0)
FRICTION_RANGE = (0.1, 0.85)
COLOR_RANGE = (0, 255)
RADIUS_RANGE = (2, 10)

HELP_LINES = (
    "ESC: Quit",
    "TAB: Show this help",
    "C: Clear balls",
    "Q: Draw collision grid",
    "Mouse 1: Drop balls!",
)

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_BLUE = (0, 0, 255)
_RED = (255, 0, 0)
_TEXT_HEIGHT = 10


class BallPit:
    """The ball pit game: a world, a physics engine and the controls around them."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        pixel_width: int = DEFAULT_PIXEL_SIZE,
        pixel_height: int = DEFAULT_PIXEL_SIZE,
        seed: Optional[int] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"world size must be positive, got {width}x{height}")
        if pixel_width <= 0 or pixel_height <= 0:
            raise ValueError(
                f"pixel size must be positive, got {pixel_width}x{pixel_height}"
            )
        self.world = World(width, height)
        self.pixel_width = pixel_width
        self.pixel_height = pixel_height
        self.engine = PhysicsEngine(cell_size=GRID_CELL_SIZE)
        self.show_grid = False
        self._rng = random.Random(seed)

    def drop(self, position: Tuple[float, float]) -> None:
        """Add a burst of randomly sized, coloured and moving balls at position."""
        rng = self._rng
        x, y = position
        for _ in range(BALLS_PER_DROP):
            velocity = Vec2(rng.uniform(*VELOCITY_X_RANGE), rng.uniform(*VELOCITY_Y_RANGE))
            color = tuple(rng.randint(*COLOR_RANGE) for _ in range(3))
            radius = rng.randint(*RADIUS_RANGE)
            properties = BallProperties(
                stickyness=rng.uniform(*STICKYNESS_RANGE),
                friction=rng.uniform(*FRICTION_RANGE),
            )
            self.engine.add(
                PhysicsBall(
                    position=Vec2(float(x), float(y)),
                    velocity=velocity,
                    color=color,
                    radius=radius,
                    weight=radius * 2 + 1,
                    properties=properties,
                )
            )

    def step(self, dt: float, clear: bool = False) -> None:
        """Advance the game by dt seconds, first removing every ball if clear is set."""
        if clear:
            self.engine.remove_all()
        self.engine.update(dt, self.world)

    def alive_count(self) -> int:
        """Number of balls that are not dead."""
        return sum(1 for ball in self.engine.objects() if not ball.dead)

    def run(self) -> None:
        """Open a window and run the game until it is closed or ESC is released."""
        import pygame

        pygame.init()
        try:
            width, height = self.world.width, self.world.height
            window = pygame.display.set_mode(
                (width * self.pixel_width, height * self.pixel_height)
            )
            pygame.display.set_caption("Ball Pit")
            canvas = pygame.Surface((width, height))
            font = pygame.font.Font(None, 14)
            clock = pygame.time.Clock()
            clock.tick()

            running = True
            while running:
                dt = clock.tick() / 1000.0
                clear = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYUP:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        elif event.key == pygame.K_c:
                            clear = True
                        elif event.key == pygame.K_q:
                            self.show_grid = not self.show_grid

                show_help = bool(pygame.key.get_pressed()[pygame.K_TAB])
                if pygame.mouse.get_pressed()[0]:
                    mx, my = pygame.mouse.get_pos()
                    self.drop((mx // self.pixel_width, my // self.pixel_height))

                self.step(dt, clear)

                canvas.fill(_BLACK)
                self._draw_text(pygame, canvas, font, "TAB to show help", (10, height - 10))
                self._draw_physics(pygame, canvas, font)
                if show_help:
                    self._draw_help(pygame, canvas, font)

                pygame.transform.scale(canvas, window.get_size(), window)
                pygame.display.flip()
        finally:
            pygame.quit()

    @staticmethod
    def _draw_text(pygame, canvas, font, text: str, position: Tuple[int, int]) -> None:
        canvas.blit(font.render(text, False, _WHITE), position)

    def _draw_physics(self, pygame, canvas, font) -> None:
        for ball in self.engine.objects():
            if ball.dead:
                continue
            x, y = int(ball.position.x), int(ball.position.y)
            if ball.single_point():
                if 0 <= x < self.world.width and 0 <= y < self.world.height:
                    canvas.set_at((x, y), ball.color)
            else:
                pygame.draw.circle(canvas, ball.color, (x, y), ball.radius)

        if self.show_grid:
            self._draw_grid(pygame, canvas)

        self._draw_text(pygame, canvas, font, str(self.alive_count()), (10, 10))

    def _draw_grid(self, pygame, canvas) -> None:
        width, height = self.world.width, self.world.height
        for x in range(0, width + 1, GRID_CELL_SIZE):
            pygame.draw.line(canvas, _RED, (x, 0), (x, height))
        for y in range(0, height + 1, GRID_CELL_SIZE):
            pygame.draw.line(canvas, _RED, (0, y), (width, y))

    def _draw_help(self, pygame, canvas, font) -> None:
        starting_point = 20
        total_height = 5 * 2 + len(HELP_LINES) * _TEXT_HEIGHT
        pygame.draw.rect(
            canvas,
            _BLUE,
            pygame.Rect(10, 10, self.world.width - starting_point, total_height + 10),
        )
        for index, line in enumerate(HELP_LINES):
            self._draw_text(
                pygame, canvas, font, line, (starting_point, starting_point + index * _TEXT_HEIGHT)
            )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the ball pit game."""
    parser = argparse.ArgumentParser(prog="ballpit", description="Drop balls and watch them bounce.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="world width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="world height in pixels")
    parser.add_argument(
        "--pixel-size", type=int, default=DEFAULT_PIXEL_SIZE, help="screen pixels per world pixel"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed for dropped balls")
    args = parser.parse_args(argv)

    try:
        game = BallPit(args.width, args.height, args.pixel_size, args.pixel_size, seed=args.seed)
    except ValueError as error:
        parser.error(str(error))
    game.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())