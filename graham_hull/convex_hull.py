import functools
import logging
import typing as t

from graham_hull import constants, data
from graham_hull.data import Point

logger = logging.getLogger(__name__)


def orientation(a: Point, b: Point, c: Point) -> int:
    """
    Signed cross product of a->b->c. With y pointing up a positive value is a
    clockwise turn, a negative value a counter-clockwise turn and zero means
    the three points are collinear.
    """
    return (b.y - a.y) * (c.x - b.x) - (b.x - a.x) * (c.y - b.y)


def turn(a: Point, b: Point, c: Point) -> constants.Turn:
    d = orientation(a, b, c)
    if d > 0:
        return constants.Turn.CLOCKWISE
    elif d < 0:
        return constants.Turn.COUNTER_CLOCKWISE
    return constants.Turn.COLLINEAR


def dist_sq(a: Point, b: Point) -> int:
    return (a.x - b.x) * (a.x - b.x) + (a.y - b.y) * (a.y - b.y)


def pivot_key(p: Point) -> t.Tuple[int, int]:
    # lowest y, then lowest x
    return p.y, p.x


def select_pivot(points: t.Sequence[Point]) -> Point:
    if not points:
        raise data.EmptyInputError('cannot select a pivot from no points')
    return min(points, key=pivot_key)


def compare(pivot: Point, p1: Point, p2: Point) -> int:
    """
    Order p1 and p2 by polar angle around pivot, counter-clockwise first.
    Points on the same ray from the pivot are ordered nearest first.
    """
    orient = orientation(pivot, p1, p2)
    if orient == 0:
        return dist_sq(pivot, p1) - dist_sq(pivot, p2)
    return orient


def angular_sort(pivot: Point, points: t.Iterable[Point]) -> t.List[Point]:
    return sorted(points,
                  key=functools.cmp_to_key(functools.partial(compare, pivot)))


def _scan(sorted_points: t.List[Point]) -> t.List[Point]:
    hull = [sorted_points[0], sorted_points[1]]
    for p in sorted_points[2:]:
        # drop the top while (second, top, p) is not a strict left turn
        while len(hull) >= 2 and orientation(hull[-2], hull[-1], p) >= 0:
            hull.pop()
        hull.append(p)
    return hull


def graham_scan(points: t.Iterable[data.PointLike]) -> t.List[Point]:
    """
    Convex hull of points, counter-clockwise from the pivot (lowest y, then
    lowest x). Collinear boundary points and duplicates are dropped, so a
    collinear input yields its two end points. The caller's collection is
    left untouched.
    """
    distinct = data.unique(data.as_points(points))
    pivot = select_pivot(distinct)
    if len(distinct) < constants.MIN_HULL_POINTS:
        return [pivot] + [p for p in distinct if p != pivot]

    hull = _scan(angular_sort(pivot, distinct))
    logger.debug('Hull of %s points has %s vertices', len(distinct), len(hull))
    return hull


def is_convex(hull: t.Sequence[Point]) -> bool:
    """True if every vertex, wrapping around, is a strict left turn."""
    n = len(hull)
    if n < constants.MIN_HULL_POINTS:
        return True
    return all(orientation(hull[i - 2], hull[i - 1], hull[i]) < 0
               for i in range(n))


def _on_segment(a: Point, b: Point, p: Point) -> bool:
    return (orientation(a, b, p) == 0
            and min(a.x, b.x) <= p.x <= max(a.x, b.x)
            and min(a.y, b.y) <= p.y <= max(a.y, b.y))


def contains(hull: t.Sequence[Point], point: data.PointLike) -> bool:
    """True if point lies on or inside the counter-clockwise hull."""
    p = data.as_point(point)
    if not hull:
        return False
    if len(hull) == 1:
        return hull[0] == p
    if len(hull) == 2:
        return _on_segment(hull[0], hull[1], p)
    return all(orientation(hull[i - 1], hull[i], p) <= 0
               for i in range(len(hull)))
