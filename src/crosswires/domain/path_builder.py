# crosswires/domain/path_builder.py
from collections.abc import Iterable

from crosswires.domain.geometry import ORIGIN, Direction, PathStep, Point, Segment
from crosswires.errors import InvariantError


def _advance(curr: Point, step: PathStep) -> Point:
    # directions are validated by the parser
    if not isinstance(step.direction, Direction):
        raise InvariantError(f"unknown direction {step.direction!r} in {step}")
    return curr.moved(step.direction, step.distance)


def build_segments(steps: Iterable[PathStep], origin: Point = ORIGIN) -> list[Segment]:
    """
    Walk the steps from `origin` and emit one Segment per step, in traversal
    order. Each segment records the wire length walked before it begins.
    """
    segments: list[Segment] = []
    curr, walked = origin, 0
    for step in steps:
        nxt = _advance(curr, step)
        segments.append(Segment(curr, nxt, walked))
        walked += step.distance
        curr = nxt
    return segments


def end_point(steps: Iterable[PathStep], origin: Point = ORIGIN) -> Point:
    curr = origin
    for step in steps:
        curr = _advance(curr, step)
    return curr
