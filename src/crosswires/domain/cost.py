# crosswires/domain/cost.py
from crosswires.domain.geometry import Point, Segment


def cost_for_segment(p: Point, s: Segment) -> int:
    """
    Wire length walked from the wire's origin to `p`, assuming `p` lies on `s`.
    Points off the segment are extrapolated, not rejected.
    """
    if s.is_horizontal:
        lo, hi, at = s.end1.x, s.end2.x, p.x
    else:
        lo, hi, at = s.end1.y, s.end2.y, p.y
    return s.steps + (hi - at if s.mirrored else at - lo)


def cost(p: Point, segment1: Segment, segment2: Segment) -> int:
    return cost_for_segment(p, segment1) + cost_for_segment(p, segment2)
