import logging

from geometry import Point, IndexedPoint, cross, is_left, line_distance

logger = logging.getLogger(__name__)


class QuickHullBuilder:
    """
    QuickHull for planar point sets.

    The hull is built in a single list seeded with the two x-extreme points.
    Every recursive step inserts the furthest point of its region right
    before the end of its baseline, so the list stays in boundary order
    without sorting. The result starts with the lower chain (walked from
    the max-x point towards the min-x point), followed by the min-x point,
    the upper chain and the max-x point: a clockwise walk in y-up axes.

    Collinear points on the hull boundary are dropped. Duplicate coordinates
    are collapsed to their first occurrence before the hull is built.
    """

    def compute_hull(self, points: list[Point]) -> list[Point]:
        """
        Compute the convex hull boundary of a point set.
        Inputs with less than 3 points are returned as they are.

        Time complexity: O(n*log(n)) expected, O(n^2) worst case.
        """
        if len(points) < 3:
            return list(points)

        indexed = self.preprocess_points(points)
        if len(indexed) < 3:
            return [p.point() for p in indexed]

        p_min, p_max = self.extreme_points(indexed)
        rest = [p for p in indexed if p.index not in (p_min.index, p_max.index)]

        upper = [p for p in rest if is_left(p_min, p_max, p)]
        lower = [p for p in rest if is_left(p_max, p_min, p)]
        logger.debug(
            'Split %d points by %s -> %s: %d upper, %d lower, %d collinear',
            len(indexed), p_min.point(), p_max.point(),
            len(upper), len(lower), len(rest) - len(upper) - len(lower),
        )

        hull = self.drop_straight_angles(self.build(p_min, p_max, upper, lower))
        logger.debug('Hull has %d vertices', len(hull))
        return [p.point() for p in hull]

    @staticmethod
    def preprocess_points(points: list[Point]) -> list[IndexedPoint]:
        """
        Drop repeated coordinates (first occurrence wins) and tag
        the remaining points with their position.
        """
        unique = dict.fromkeys(Point(p.x, p.y) for p in points)
        if len(unique) < len(points):
            logger.debug('Dropped %d duplicate points', len(points) - len(unique))
        return [IndexedPoint(p.x, p.y, i) for i, p in enumerate(unique)]

    @staticmethod
    def extreme_points(points: list[IndexedPoint]) -> tuple[IndexedPoint, IndexedPoint]:
        """
        Find points with min and max x. Ties keep the first occurrence.
        If all points share the same x, extremes are searched along y instead.
        """
        min_idx = max_idx = 0
        for i, p in enumerate(points):
            if p.x < points[min_idx].x:
                min_idx = i
            if p.x > points[max_idx].x:
                max_idx = i

        if min_idx == max_idx:
            for i, p in enumerate(points):
                if p.y < points[min_idx].y:
                    min_idx = i
                if p.y > points[max_idx].y:
                    max_idx = i

        assert min_idx != max_idx, 'Extreme points coincide'
        return points[min_idx], points[max_idx]

    @staticmethod
    def furthest_point(a: Point, b: Point, points: list[IndexedPoint]) -> IndexedPoint:
        """
        Point with the max distance from line ab. Ties keep the first occurrence.
        """
        furthest = points[0]
        furthest_distance = line_distance(a, b, furthest)
        for p in points[1:]:
            distance = line_distance(a, b, p)
            if distance > furthest_distance:
                furthest, furthest_distance = p, distance
        return furthest

    @staticmethod
    def drop_straight_angles(hull: list[IndexedPoint]) -> list[IndexedPoint]:
        """
        Remove vertices lying on the segment between their neighbours.

        A tie for the furthest point can pick the middle of a run of points
        parallel to the baseline; that point ends up as a vertex with a
        straight angle.
        """
        n = len(hull)
        if n < 3:
            return hull

        corners = [
            v for i, v in enumerate(hull)
            if cross(hull[i - 1], v, hull[(i + 1) % n]) != 0
        ]
        if len(corners) < n:
            logger.debug('Dropped %d straight-angle vertices', n - len(corners))
        return corners

    def build(
        self,
        p_min: IndexedPoint,
        p_max: IndexedPoint,
        upper: list[IndexedPoint],
        lower: list[IndexedPoint],
    ) -> list[IndexedPoint]:
        hull = [p_min, p_max]
        upper_hull = self.process(p_min, p_max, upper, hull)
        lower_hull = self.process(p_max, p_min, lower, hull)
        return self.merge(upper_hull, lower_hull)

    def process(
        self,
        a: IndexedPoint,
        b: IndexedPoint,
        points: list[IndexedPoint],
        hull: list[IndexedPoint],
    ) -> list[IndexedPoint]:
        """
        Insert hull vertices of the region to the left of ab into hull.

        All points are assumed to lie strictly left of ab, and both a and b
        must already be in hull. New vertices go right before b.
        """
        if len(points) == 0:
            return hull

        insert_at = hull.index(b)
        if len(points) == 1:
            hull.insert(insert_at, points[0])
            return hull

        f = self.furthest_point(a, b, points)
        hull.insert(insert_at, f)
        rest = [p for p in points if p.index != f.index]

        left_af = [p for p in rest if is_left(a, f, p)]
        left_fb = [p for p in rest if is_left(f, b, p)]

        left_hull = self.process(a, f, left_af, hull)
        right_hull = self.process(f, b, left_fb, hull)
        return self.merge(left_hull, right_hull)

    @staticmethod
    def merge(first: list[IndexedPoint], second: list[IndexedPoint]) -> list[IndexedPoint]:
        # both halves were written into the same list
        assert first is second
        return first


class MergingHullBuilder(QuickHullBuilder):
    """
    QuickHull where every recursive branch returns its own chain
    and the chains are concatenated explicitly.

    Produces exactly the same sequence as QuickHullBuilder, but no state is
    shared between branches, so they can be evaluated independently.
    """

    def build(
        self,
        p_min: IndexedPoint,
        p_max: IndexedPoint,
        upper: list[IndexedPoint],
        lower: list[IndexedPoint],
    ) -> list[IndexedPoint]:
        upper_chain = self.chain(p_min, p_max, upper)
        lower_chain = self.chain(p_max, p_min, lower)
        return self.merge(lower_chain + [p_min], upper_chain + [p_max])

    def chain(self, a: IndexedPoint, b: IndexedPoint, points: list[IndexedPoint]) -> list[IndexedPoint]:
        """
        Hull vertices strictly between a and b, ordered from a to b.
        """
        if len(points) <= 1:
            return list(points)

        f = self.furthest_point(a, b, points)
        rest = [p for p in points if p.index != f.index]

        left_af = [p for p in rest if is_left(a, f, p)]
        left_fb = [p for p in rest if is_left(f, b, p)]

        return self.merge(self.chain(a, f, left_af) + [f], self.chain(f, b, left_fb))

    @staticmethod
    def merge(first: list[IndexedPoint], second: list[IndexedPoint]) -> list[IndexedPoint]:
        return first + second
