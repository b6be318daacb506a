# crosswires/domain/intersections.py
from collections.abc import Iterator, Sequence

from crosswires.domain.cost import cost
from crosswires.domain.geometry import Point, PointWithCost, Segment
from crosswires.domain.segments import split_on_direction


def between(i: int, low: int, high: int) -> bool:
    """Closed-interval containment."""
    return low <= i <= high


def crossing(h: Segment, v: Segment) -> PointWithCost | None:
    """Crossing point of a horizontal and a vertical segment, if they meet."""
    if between(v.end1.x, h.end1.x, h.end2.x) and between(h.end1.y, v.end1.y, v.end2.y):
        p = Point(v.end1.x, h.end1.y)
        return PointWithCost(p, cost(p, h, v))
    return None


def _overlap_points(a: Segment, b: Segment, horizontal: bool) -> list[PointWithCost]:
    # A collinear run is sampled at its two boundaries only.
    if horizontal:
        lo, hi = max(a.end1.x, b.end1.x), min(a.end2.x, b.end2.x)
        points = [Point(lo, a.end1.y), Point(hi, a.end1.y)]
    else:
        lo, hi = max(a.end1.y, b.end1.y), min(a.end2.y, b.end2.y)
        points = [Point(a.end1.x, lo), Point(a.end1.x, hi)]
    if lo > hi:
        return []
    return [PointWithCost(p, cost(p, a, b)) for p in points]


def intersects_horizontal(
    segment: Segment, horizontals: Sequence[Segment], verticals: Sequence[Segment]
) -> list[PointWithCost]:
    found: list[PointWithCost] = []
    for other in horizontals:
        if segment.end1.y == other.end1.y:
            found.extend(_overlap_points(segment, other, horizontal=True))
    for other in verticals:
        hit = crossing(segment, other)
        if hit is not None:
            found.append(hit)
    return found


def intersects_vertical(
    segment: Segment, horizontals: Sequence[Segment], verticals: Sequence[Segment]
) -> list[PointWithCost]:
    found: list[PointWithCost] = []
    for other in verticals:
        if segment.end1.x == other.end1.x:
            found.extend(_overlap_points(segment, other, horizontal=False))
    for other in horizontals:
        hit = crossing(other, segment)
        if hit is not None:
            found.append(hit)
    return found


def intersects(
    segment: Segment, horizontals: Sequence[Segment], verticals: Sequence[Segment]
) -> list[PointWithCost]:
    if segment.is_vertical:
        return intersects_vertical(segment, horizontals, verticals)
    return intersects_horizontal(segment, horizontals, verticals)


def crossing_candidates(
    path1: Sequence[Segment], path2: Sequence[Segment]
) -> Iterator[tuple[Segment, list[PointWithCost]]]:
    """
    Yield (segment, candidates) for every segment of `path1` tested against all
    of `path2`. Both paths must already be normalized.
    """
    horizontals, verticals = split_on_direction(path2)
    for segment in path1:
        yield segment, intersects(segment, horizontals, verticals)
