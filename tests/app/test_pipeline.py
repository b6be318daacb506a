import pytest

from crosswires.app.hooks import NoopHooks
from crosswires.app.pipeline import solve
from crosswires.domain.geometry import Point
from crosswires.errors import WireParseError

EXAMPLE_1 = ("R8,U5,L5,D3", "U7,R6,D4,L4")
EXAMPLE_2 = ("R75,D30,R83,U83,L12,D49,R71,U7,L72", "U62,R66,U55,R34,D71,R55,D58,R83")
EXAMPLE_3 = (
    "R98,U47,R26,D63,R33,U87,L62,D20,R33,U53,R51",
    "U98,R91,D20,R16,D67,R40,U7,R15,U6,R7",
)


# --- test hook that records stage order ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.trace = []
        self.errors = []

    def run_start(self, *, wires):
        self.trace.append("run_start")

    def wire_parsed(self, wire, steps):
        self.trace.append(f"wire_parsed:{wire}:{len(steps)}")

    def segment_built(self, wire, step, segment):
        self.trace.append(f"segment:{wire}")

    def result(self, result):
        self.trace.append("result")

    def run_end(self, *, candidates, wall_ms):
        self.trace.append("run_end")

    def error(self, *, stage, exc):
        self.errors.append((stage, type(exc).__name__))


@pytest.mark.parametrize(
    "wires, distance, cost",
    [(EXAMPLE_1, 6, 30), (EXAMPLE_2, 159, 610), (EXAMPLE_3, 135, 410)],
)
def test_known_wires(wires, distance, cost):
    result = solve(*wires)
    assert result.found
    assert result.distance == distance
    assert result.cost == cost


def test_winning_points_for_small_example():
    result = solve(*EXAMPLE_1)
    assert result.closest.point == Point(3, 3)
    assert result.cheapest.point == Point(6, 5)


def test_swapping_wires_does_not_change_answers():
    a = solve(*EXAMPLE_2)
    b = solve(*reversed(EXAMPLE_2))
    assert (a.distance, a.cost) == (b.distance, b.cost)


def test_hooks_see_every_stage_in_order():
    hooks = TraceHooks()
    solve(*EXAMPLE_1, hooks=hooks)
    assert hooks.trace == (
        ["run_start", "wire_parsed:1:4"]
        + ["segment:1"] * 4
        + ["wire_parsed:2:4"]
        + ["segment:2"] * 4
        + ["result", "run_end"]
    )
    assert hooks.errors == []


def test_parse_error_is_reported_then_raised():
    hooks = TraceHooks()
    with pytest.raises(WireParseError):
        solve("R8,U5", "U7,X6", hooks=hooks)
    assert hooks.errors == [("parse", "WireParseError")]
    assert "result" not in hooks.trace


def test_custom_delimiter():
    result = solve("R8;U5;L5;D3", "U7;R6;D4;L4", delimiter=";")
    assert result.distance == 6
