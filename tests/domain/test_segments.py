from crosswires.domain.geometry import Point, Segment
from crosswires.domain.parser import parse_wire
from crosswires.domain.path_builder import build_segments
from crosswires.domain.segments import normalize, normalize_all, split_on_direction


def test_normalize_swaps_left_and_down_segments():
    left = normalize(Segment(Point(8, 5), Point(3, 5), 13))
    assert left == Segment(Point(3, 5), Point(8, 5), 13, mirrored=True)
    down = normalize(Segment(Point(3, 5), Point(3, 2), 18))
    assert down == Segment(Point(3, 2), Point(3, 5), 18, mirrored=True)


def test_normalize_keeps_right_and_up_segments():
    s = Segment(Point(0, 0), Point(0, 7), 0)
    assert normalize(s) is s


def test_normalize_orders_endpoints_and_is_idempotent():
    segs = normalize_all(build_segments(parse_wire("R75,D30,R83,U83,L12,D49,R71,U7,L72")))
    for s in segs:
        assert s.end1.x <= s.end2.x and s.end1.y <= s.end2.y
    assert normalize_all(segs) == segs
    assert [s.mirrored for s in segs] == [False, True, False, False, True, True, False, False, True]


def test_split_on_direction_preserves_order():
    segs = normalize_all(build_segments(parse_wire("R8,U5,L5,D3")))
    horizontals, verticals = split_on_direction(segs)
    assert horizontals == [segs[0], segs[2]]
    assert verticals == [segs[1], segs[3]]


def test_zero_length_segment_is_grouped_by_the_shared_x_test():
    dot = Segment(Point(1, 1), Point(1, 1), 0)
    horizontals, verticals = split_on_direction([dot])
    assert verticals == [dot] and horizontals == []


def test_swapped_segment_is_always_flagged_mirrored():
    odd = Segment(Point(5, 0), Point(1, 0), 3, mirrored=True)
    assert normalize(odd) == Segment(Point(1, 0), Point(5, 0), 3, mirrored=True)
