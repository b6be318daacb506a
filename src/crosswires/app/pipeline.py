# crosswires/app/pipeline.py
import time

from crosswires.app.hooks import NoopHooks, PipelineHooks
from crosswires.domain.geometry import CrossingResult, PointWithCost, Segment
from crosswires.domain.intersections import crossing_candidates
from crosswires.domain.parser import parse_wire
from crosswires.domain.path_builder import build_segments
from crosswires.domain.reducer import reduce_candidates
from crosswires.domain.segments import normalize_all
from crosswires.errors import CrosswiresError


def _wire_segments(
    wire: int, line: str, delimiter: str, hooks: PipelineHooks
) -> list[Segment]:
    steps = parse_wire(line, delimiter)
    hooks.wire_parsed(wire, steps)
    segments = build_segments(steps)
    for step, segment in zip(steps, segments):
        hooks.segment_built(wire, step, segment)
    return normalize_all(segments)


def solve(
    wire1: str,
    wire2: str,
    *,
    delimiter: str = ",",
    hooks: PipelineHooks | None = None,
) -> CrossingResult:
    """
    Parse both wires, intersect them and reduce to the closest and cheapest
    crossings. Parse errors propagate after being reported to `hooks.error`.
    """
    hooks = hooks or NoopHooks()
    t0 = time.perf_counter()
    hooks.run_start(wires=2)

    stage = "parse"
    try:
        path1 = _wire_segments(1, wire1, delimiter, hooks)
        path2 = _wire_segments(2, wire2, delimiter, hooks)

        stage = "intersect"
        found: list[PointWithCost] = []
        for segment, hits in crossing_candidates(path1, path2):
            hooks.candidates(segment, hits)
            found.extend(hits)

        stage = "reduce"
        result = reduce_candidates(found)
    except CrosswiresError as exc:
        hooks.error(stage=stage, exc=exc)
        raise

    hooks.result(result)
    hooks.run_end(candidates=result.candidates, wall_ms=(time.perf_counter() - t0) * 1000.0)
    return result
