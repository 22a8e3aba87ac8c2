import math
from collections.abc import Iterable
from dataclasses import dataclass


# Core geometry types used by the navigation engine
@dataclass(frozen=True)
class Point3:
    x: float  # scene units, Y-up
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class AABB:
    min: Point3
    max: Point3

    def __post_init__(self):
        for axis in ("x", "y", "z"):
            lo, hi = getattr(self.min, axis), getattr(self.max, axis)
            if not lo <= hi:  # also rejects NaN
                raise ValueError(f"AABB min.{axis}={lo} must not exceed max.{axis}={hi}")

    @classmethod
    def from_center_size(cls, center: Point3, size: tuple[float, float, float]) -> "AABB":
        hx, hy, hz = (abs(s) / 2.0 for s in size)
        return cls(
            Point3(center.x - hx, center.y - hy, center.z - hz),
            Point3(center.x + hx, center.y + hy, center.z + hz),
        )

    @classmethod
    def around(cls, points: Iterable[Point3]) -> "AABB":
        pts = list(points)
        if not pts:
            raise ValueError("cannot bound an empty point set")
        return cls(
            Point3(min(p.x for p in pts), min(p.y for p in pts), min(p.z for p in pts)),
            Point3(max(p.x for p in pts), max(p.y for p in pts), max(p.z for p in pts)),
        )

    @property
    def center(self) -> Point3:
        return Point3(
            (self.min.x + self.max.x) / 2.0,
            (self.min.y + self.max.y) / 2.0,
            (self.min.z + self.max.z) / 2.0,
        )

    def contains(self, p: Point3) -> bool:
        return (
            self.min.x <= p.x <= self.max.x
            and self.min.y <= p.y <= self.max.y
            and self.min.z <= p.z <= self.max.z
        )


def intersects(a: AABB, b: AABB) -> bool:
    """Inclusive overlap test on all three axes (touching boxes intersect)."""
    return (
        a.min.x <= b.max.x
        and b.min.x <= a.max.x
        and a.min.y <= b.max.y
        and b.min.y <= a.max.y
        and a.min.z <= b.max.z
        and b.min.z <= a.max.z
    )


def _clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def closest_point(box: AABB, point: Point3) -> Point3:
    """Clamp `point` into `box`; a point already inside is returned unchanged."""
    if box.contains(point):
        return point
    return Point3(
        _clamp(point.x, box.min.x, box.max.x),
        _clamp(point.y, box.min.y, box.max.y),
        _clamp(point.z, box.min.z, box.max.z),
    )


def distance(a: Point3, b: Point3) -> float:
    return math.dist(a.as_tuple(), b.as_tuple())
