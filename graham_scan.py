import logging

from functools import cmp_to_key, partial
from typing import Iterable

from geometry import Orientation, Point2D, ccw, polar_distance_order

logger = logging.getLogger(__name__)


class GrahamScan:
    def __init__(self, debug: bool = False):
        # raise instead of logging when the scan output is not strictly convex
        self.debug = debug

    def compute_hull(self, points: Iterable[Point2D]) -> list[Point2D]:
        """
        Convex hull of a multiset of points, counter-clockwise,
        starting from the lowest (then leftmost) point.
        No three consecutive hull vertices are collinear.

        Degenerate inputs give degenerate hulls: [] for no points,
        a single point when all points coincide and the two extreme
        points when all points lie on a line.

        Time complexity: O(n*log(n)).
        """
        points = list(points)
        n = len(points)
        if n == 0:
            return []

        pivot = min(points)
        points.sort(key=cmp_to_key(partial(polar_distance_order, pivot)))
        logger.debug("Scanning %s points around pivot %s", n, pivot)

        # copies of the pivot are at distance 0, so they come first
        k1 = 0
        while k1 < n and points[k1] == pivot:
            k1 += 1
        if k1 == n:
            return [pivot]

        # of the points on the first ray from pivot keep the farthest
        k2 = k1 + 1
        while k2 < n and ccw(pivot, points[k1], points[k2]) == Orientation.COLLINEAR:
            k2 += 1

        hull = [pivot, points[k2 - 1]]
        for p in points[k2:]:
            # hull is a convex chain of every point seen so far
            while len(hull) >= 2 and ccw(hull[-2], hull[-1], p) != Orientation.COUNTERCLOCKWISE:
                hull.pop()
            hull.append(p)

        if not self.is_convex(hull):
            if self.debug:
                raise AssertionError(f'Hull is not convex: {hull}')
            logger.warning("Hull is not strictly convex, orientation tests lost precision: %s", hull)
        logger.debug("Hull has %s vertices", len(hull))
        return hull

    @staticmethod
    def is_convex(hull: list[Point2D]) -> bool:
        """
        Check that every cyclic triple of hull vertices turns strictly counter-clockwise.
        """
        n = len(hull)
        if n <= 2:
            return True
        return all(
            ccw(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) == Orientation.COUNTERCLOCKWISE
            for i in range(n)
        )


def compute_hull(points: Iterable[Point2D], debug: bool = False) -> list[Point2D]:
    return GrahamScan(debug=debug).compute_hull(points)


def is_convex(hull: list[Point2D]) -> bool:
    return GrahamScan.is_convex(hull)
