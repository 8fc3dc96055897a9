import numpy as np

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __lt__(self, other):
        return (self.x, self.y) < (other.x, other.y)


@dataclass(frozen=True)
class IndexedPoint(Point):
    index: int

    def point(self) -> Point:
        return Point(self.x, self.y)


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def is_left(start: Point, end: Point, query: Point) -> bool:
    """
    Orientation test: True iff query lies strictly to the left of
    the directed line start -> end. Collinear points are not left.
    """
    return cross(start, end, query) > 0


def line_distance(start: Point, end: Point, query: Point) -> float:
    """
    Distance from query to the line through start and end, scaled by
    the length of the segment. Only comparable between points measured
    against the same line.
    """
    return abs(cross(start, end, query))


def to_points(coords) -> list[Point]:
    """
    Convert an (n, 2) array-like of coordinates into points.
    """
    arr = np.asarray(coords, dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f'Expected an (n, 2) array of coordinates, got shape {arr.shape}')
    if not np.isfinite(arr).all():
        raise ValueError('Coordinates must be finite')
    return [Point(float(x), float(y)) for x, y in arr]
