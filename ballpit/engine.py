"""The stepping simulation that moves and collides balls."""

from __future__ import annotations

import math
import time
from collections import defaultdict
from typing import Dict, Iterator, List, Tuple

from ballpit.physics import ImpactWorldResult, PhysicsBall, Vec2, World

DEFAULT_GRAVITY = 200.0

_Box = Tuple[float, float, float, float]


def _bounding_box(ball: PhysicsBall) -> _Box:
    x, y, r = ball.position.x, ball.position.y, ball.radius
    return (x - r, y - r, x + r, y + r)


def _overlap(a: _Box, b: _Box) -> bool:
    return a[0] <= b[2] and b[0] <= a[2] and a[1] <= b[3] and b[1] <= a[3]


class _SpatialGrid:
    """Uniform grid that finds balls near a box."""

    def __init__(self, cell_size: float) -> None:
        self._cell_size = cell_size
        self._cells: Dict[Tuple[int, int], List[PhysicsBall]] = defaultdict(list)

    def _keys(self, box: _Box) -> Iterator[Tuple[int, int]]:
        size = self._cell_size
        for cx in range(math.floor(box[0] / size), math.floor(box[2] / size) + 1):
            for cy in range(math.floor(box[1] / size), math.floor(box[3] / size) + 1):
                yield cx, cy

    def insert(self, ball: PhysicsBall) -> None:
        for key in self._keys(_bounding_box(ball)):
            self._cells[key].append(ball)

    def query(self, box: _Box) -> List[PhysicsBall]:
        found: Dict[int, PhysicsBall] = {}
        for key in self._keys(box):
            for ball in self._cells.get(key, ()):
                found.setdefault(id(ball), ball)
        return list(found.values())


class PhysicsEngine:
    """Owns the balls and advances them through time."""

    UPDATES = 4
    MAX_STEPS = 4
    CULL_DEAD_THRESHOLD = 50
    REST_SPEED2 = 0.005

    def __init__(self, gravity: float = DEFAULT_GRAVITY, cell_size: float = 32.0) -> None:
        self.gravity = gravity
        self._cell_size = cell_size
        self._balls: List[PhysicsBall] = []
        self._grid = _SpatialGrid(cell_size)
        self._pairs: List[Tuple[PhysicsBall, PhysicsBall]] = []
        self.update_times: List[float] = []
        self.tree_build_times: List[float] = []
        self.collision_times: List[float] = []

    def add(self, ball: PhysicsBall) -> None:
        """Add a ball to the simulation."""
        self._balls.append(ball)

    def remove_all(self) -> None:
        """Remove every ball."""
        self._balls.clear()

    def objects(self) -> Tuple[PhysicsBall, ...]:
        """The balls currently simulated, in insertion order."""
        return tuple(self._balls)

    def update(self, dt: float, world: World) -> None:
        """Advance the simulation by dt seconds inside world."""
        sim_elapsed_time = dt / self.UPDATES
        dead_count = 0
        self.update_times = []
        self.tree_build_times = []
        self.collision_times = []

        for _ in range(self.UPDATES):
            update_start = time.perf_counter()
            for ball in self._balls:
                ball.physics_time_remaining = sim_elapsed_time

            dead_count = 0
            early_break = True
            for _ in range(self.MAX_STEPS):
                self._grid = _SpatialGrid(self._cell_size)
                for ball in self._balls:
                    if ball.dead:
                        dead_count += 1
                        continue
                    if ball.physics_time_remaining <= 0.0:
                        continue
                    early_break = False
                    self._integrate(ball, world)

                if early_break:
                    break

                build_start = time.perf_counter()
                for ball in self._balls:
                    if not ball.dead:
                        self._grid.insert(ball)
                self.tree_build_times.append(_elapsed_ms(build_start))

                collision_start = time.perf_counter()
                self._pairs.clear()
                for ball in self._balls:
                    if ball.dead:
                        continue
                    self._static_responses(ball)
                    intended_speed = ball.velocity.mag()
                    actual_distance = (ball.position - ball.old_position).mag()
                    actual_time = actual_distance / intended_speed if intended_speed > 0.0 else 0.0
                    ball.physics_time_remaining -= actual_time
                self._dynamic_responses()
                self.collision_times.append(_elapsed_ms(collision_start))

            self.update_times.append(_elapsed_ms(update_start))

        if dead_count >= self.CULL_DEAD_THRESHOLD:
            self._balls = [ball for ball in self._balls if not ball.dead]

    def _integrate(self, ball: PhysicsBall, world: World) -> None:
        ball.old_position = ball.position
        remaining = ball.physics_time_remaining
        ball.velocity = Vec2(ball.velocity.x, ball.velocity.y + self.gravity * remaining)
        if ball.velocity.mag2() < self.REST_SPEED2:
            ball.velocity = Vec2()
        ball.position = ball.position + ball.velocity * remaining
        result = PhysicsBall.impacts_world_bounds(ball, world)
        if result is not ImpactWorldResult.NONE:
            PhysicsBall.world_collision_response(result, ball, world)

    def _static_responses(self, ball: PhysicsBall) -> None:
        box = _bounding_box(ball)
        for other in self._grid.query(box):
            if other is ball or other.dead:
                continue
            if _overlap(_bounding_box(ball), _bounding_box(other)) and PhysicsBall.collides_with(
                ball, other
            ):
                PhysicsBall.static_collision_response(ball, other)
                self._pairs.append((ball, other))

    def _dynamic_responses(self) -> None:
        for a, b in self._pairs:
            if not a.dead and not b.dead:
                PhysicsBall.dynamic_collision_response(a, b)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0