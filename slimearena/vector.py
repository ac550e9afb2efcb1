"""Small vector types and the parameter block used when playing effects."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Vec3", "Vector2", "Vector2F", "EffectParams"]


@dataclass(frozen=True)
class Vec3:
    """A three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass
class Vector2:
    """An integer screen position."""

    x: int = 0
    y: int = 0
    z: int = 0

    def to_vector2f(self) -> Vector2F:
        return Vector2F(float(self.x), float(self.y), 0.0)


@dataclass
class Vector2F:
    """A float screen position."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_vector2(self) -> Vector2:
        return Vector2(int(self.x), int(self.y), int(self.z))


@dataclass
class EffectParams:
    """Position, rotation and scale of a playing effect, with its play flags."""

    pos: Vec3 = field(default_factory=Vec3)
    rot: Vec3 = field(default_factory=Vec3)
    scl: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    is_loop: bool = False
    is_stop: bool = False