import math
import numbers

from dataclasses import dataclass
from enum import IntEnum


class InvalidCoordinate(ValueError):
    """
    Raised when a point is constructed from an infinite or NaN coordinate.
    """


class Orientation(IntEnum):
    CLOCKWISE = -1
    COLLINEAR = 0
    COUNTERCLOCKWISE = 1


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def __post_init__(self):
        if not isinstance(self.x, numbers.Real) or not isinstance(self.y, numbers.Real):
            raise TypeError(f'Coordinates must be real numbers: ({self.x!r}, {self.y!r})')
        try:
            x, y = float(self.x), float(self.y)
        except OverflowError:
            raise InvalidCoordinate(f'Coordinates must be finite: ({self.x}, {self.y})') from None
        if math.isinf(x) or math.isinf(y):
            raise InvalidCoordinate(f'Coordinates must be finite: ({x}, {y})')
        if math.isnan(x) or math.isnan(y):
            raise InvalidCoordinate(f'Coordinates cannot be NaN: ({x}, {y})')
        # -0.0 == 0.0, so this only rewrites the sign
        object.__setattr__(self, 'x', x if x != 0.0 else 0.0)
        object.__setattr__(self, 'y', y if y != 0.0 else 0.0)

    def __lt__(self, other):
        return yx_order(self, other) < 0

    def __str__(self):
        return f'({self.x}, {self.y})'

    @property
    def r(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    @property
    def theta(self) -> float:
        return math.atan2(self.y, self.x)

    def angle_to(self, other: 'Point2D') -> float:
        return math.atan2(other.y - self.y, other.x - self.x)

    def distance_to(self, other: 'Point2D') -> float:
        return math.sqrt(self.distance_squared_to(other))

    def distance_squared_to(self, other: 'Point2D') -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


def area2(a: Point2D, b: Point2D, c: Point2D) -> float:
    """
    Twice the signed area of triangle abc,
    i.e. cross product of segments ab and ac.
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def ccw(a: Point2D, b: Point2D, c: Point2D) -> Orientation:
    """
    Turn direction of a -> b -> c.
    Every turn test in the hull code goes through this function.
    """
    area = area2(a, b, c)
    if area < 0:
        return Orientation.CLOCKWISE
    if area > 0:
        return Orientation.COUNTERCLOCKWISE
    return Orientation.COLLINEAR


def _cmp(a: float, b: float) -> int:
    return (a > b) - (a < b)


def yx_order(p: Point2D, q: Point2D) -> int:
    if p.y != q.y:
        return _cmp(p.y, q.y)
    return _cmp(p.x, q.x)


def x_order(p: Point2D, q: Point2D) -> int:
    return _cmp(p.x, q.x)


def y_order(p: Point2D, q: Point2D) -> int:
    return _cmp(p.y, q.y)


def r_order(p: Point2D, q: Point2D) -> int:
    return _cmp(p.x * p.x + p.y * p.y, q.x * q.x + q.y * q.y)


def theta_order(p: Point2D, q: Point2D) -> int:
    return _cmp(p.theta, q.theta)


def angle_to_order(pivot: Point2D, p: Point2D, q: Point2D) -> int:
    return _cmp(pivot.angle_to(p), pivot.angle_to(q))


def polar_order(pivot: Point2D, q1: Point2D, q2: Point2D) -> int:
    """
    Compare q1 and q2 by polar angle around pivot, counter-clockwise
    starting from the direction of positive x.

    The plane is split at the horizontal line through pivot, so no
    atan2 branch cut is involved. Points on the same ray from pivot
    compare equal.
    """
    dx1 = q1.x - pivot.x
    dy1 = q1.y - pivot.y
    dx2 = q2.x - pivot.x
    dy2 = q2.y - pivot.y

    if dy1 >= 0 > dy2:
        return -1
    if dy2 >= 0 > dy1:
        return 1
    if dy1 == 0 and dy2 == 0:
        if dx1 >= 0 > dx2:
            return -1
        if dx2 >= 0 > dx1:
            return 1
        return 0
    return -ccw(pivot, q1, q2)


def distance_to_order(pivot: Point2D, p: Point2D, q: Point2D) -> int:
    return _cmp(pivot.distance_squared_to(p), pivot.distance_squared_to(q))


def polar_distance_order(pivot: Point2D, p: Point2D, q: Point2D) -> int:
    """
    Polar order around pivot, nearer points first along a common ray.
    """
    return polar_order(pivot, p, q) or distance_to_order(pivot, p, q)
