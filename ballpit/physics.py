"""Ball geometry, collision tests and collision responses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def mag2(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def mag(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.mag2())

    def dot(self, other: "Vec2") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class World:
    """The rectangular area balls live in, in pixels."""

    width: int
    height: int


class ImpactWorldResult(Enum):
    """Which edge of the world a ball crosses, if any."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass
class BallProperties:
    """Material properties of a ball."""

    stickyness: float = 0.0
    friction: float = 1.0


Color = Tuple[int, int, int]


@dataclass(eq=False)
class PhysicsBall:
    """A simulated ball; compared by identity."""

    position: Vec2
    velocity: Vec2 = Vec2()
    color: Color = (255, 255, 255)
    radius: int = 1
    weight: int = 1
    properties: BallProperties = field(default_factory=BallProperties)
    dead: bool = False
    old_position: Optional[Vec2] = None
    physics_time_remaining: float = 0.0

    def __post_init__(self) -> None:
        if self.old_position is None:
            self.old_position = self.position

    def single_point(self) -> bool:
        """True when the ball is small enough to draw as one pixel."""
        return self.radius <= 1

    @staticmethod
    def static_collision_response(a: "PhysicsBall", b: "PhysicsBall") -> None:
        """Push two overlapping balls apart along the line joining them."""
        collision_vector = a.position - b.position
        distance = collision_vector.mag()
        if distance == 0.0:
            # The dynamic response drifts coincident balls apart.
            return
        overlap = 0.5 * (distance - b.radius - a.radius)
        shift = (collision_vector / distance) * overlap
        a.position = a.position - shift
        b.position = b.position + shift

    @staticmethod
    def dynamic_collision_response(a: "PhysicsBall", b: "PhysicsBall") -> None:
        """Exchange momentum between two colliding balls."""
        collision_vector = b.position - a.position
        distance = collision_vector.mag()
        if distance == 0.0:
            distance = 0.1
        normal = collision_vector / distance
        relative_velocity = a.velocity - b.velocity
        speed = relative_velocity.dot(normal)
        if speed < 0:
            # Already moving away from each other.
            return
        impulse = 2 * speed / (a.weight + b.weight)
        a.velocity = a.velocity - normal * (impulse * b.weight)
        b.velocity = b.velocity + normal * (impulse * a.weight)

    @staticmethod
    def collides_with(a: "PhysicsBall", b: "PhysicsBall") -> bool:
        """True when the two balls touch or overlap."""
        reach = a.radius + b.radius
        return (a.position - b.position).mag2() <= reach * reach

    @staticmethod
    def impacts_world_bounds(ball: "PhysicsBall", world: World) -> ImpactWorldResult:
        """Report the first world edge the ball crosses."""
        x, y, r = ball.position.x, ball.position.y, ball.radius
        if x + r > world.width:
            return ImpactWorldResult.RIGHT
        if x - r < 0:
            return ImpactWorldResult.LEFT
        if y + r > world.height:
            return ImpactWorldResult.BOTTOM
        if y - r < 0:
            return ImpactWorldResult.TOP
        return ImpactWorldResult.NONE

    @staticmethod
    def world_collision_response(
        result: ImpactWorldResult, ball: "PhysicsBall", world: World
    ) -> None:
        """Move the ball back inside the world and reflect its velocity."""
        x, y, r = ball.position.x, ball.position.y, ball.radius
        if result is ImpactWorldResult.LEFT:
            normal = Vec2(1.0, 0.0)
            ball.position = Vec2(r, y)
        elif result is ImpactWorldResult.RIGHT:
            normal = Vec2(-1.0, 0.0)
            ball.position = Vec2(world.width - r, y)
        elif result is ImpactWorldResult.TOP:
            normal = Vec2(0.0, -1.0)
            ball.position = Vec2(x, r)
        elif result is ImpactWorldResult.BOTTOM:
            normal = Vec2(0.0, 1.0)
            ball.position = Vec2(x, world.height - r)
        else:
            return
        d = 2 * ball.velocity.dot(normal)
        ball.velocity = ball.velocity - (normal * d) * ball.properties.friction