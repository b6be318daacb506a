# crosswires/domain/segments.py
from collections.abc import Iterable

from crosswires.domain.geometry import Segment


def normalize(segment: Segment) -> Segment:
    """Order endpoints by (x, y) so interval arithmetic can assume end1 <= end2."""
    if (segment.end1.x, segment.end1.y) > (segment.end2.x, segment.end2.y):
        return Segment(segment.end2, segment.end1, segment.steps, mirrored=True)
    return segment


def normalize_all(segments: Iterable[Segment]) -> list[Segment]:
    return [normalize(s) for s in segments]


def split_on_direction(segments: Iterable[Segment]) -> tuple[list[Segment], list[Segment]]:
    horizontals: list[Segment] = []
    verticals: list[Segment] = []
    for segment in segments:
        (verticals if segment.is_vertical else horizontals).append(segment)
    return horizontals, verticals
