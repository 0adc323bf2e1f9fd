"""Shared geometry and components used by the player, the world and collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vec2"]
    ONE: ClassVar["Vec2"]

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return the unit vector pointing the same way.

        Raises ValueError for the zero vector, which has no direction.
        """
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def distance(self, other: Vec2) -> float:
        """Euclidean distance between two points."""
        return (self - other).length()


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)


@dataclass(frozen=True)
class Aabb2d:
    """An axis-aligned bounding box given by its minimum and maximum corners."""

    min: Vec2
    max: Vec2

    @classmethod
    def from_center(cls, center: Vec2, half_size: Vec2) -> Aabb2d:
        """Build a box centred on ``center`` that extends ``half_size`` each way."""
        return cls(center - half_size, center + half_size)

    def intersects(self, other: Aabb2d) -> bool:
        """True when the boxes overlap; touching edges count as overlapping."""
        x_overlaps = self.min.x <= other.max.x and self.max.x >= other.min.x
        y_overlaps = self.min.y <= other.max.y and self.max.y >= other.min.y
        return x_overlaps and y_overlaps


@dataclass
class MovementSpeed:
    """Distance an entity moves per frame."""

    speed: float = 0.0


@dataclass
class ConversationTrigger:
    """An area that starts a conversation when the player first touches it."""

    size: Vec2 = field(default_factory=lambda: Vec2.ZERO)
    is_contact: bool = False