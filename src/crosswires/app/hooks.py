# app/hooks.py
from typing import Protocol

from crosswires.domain.geometry import CrossingResult, PathStep, PointWithCost, Segment


class PipelineHooks(Protocol):
    def run_start(self, *, wires: int): ...
    def wire_parsed(self, wire: int, steps: list[PathStep]): ...
    def segment_built(self, wire: int, step: PathStep, segment: Segment): ...
    def candidates(self, segment: Segment, found: list[PointWithCost]): ...
    def result(self, result: CrossingResult): ...
    def run_end(self, *, candidates: int, wall_ms: float): ...
    def error(self, *, stage: str, exc: BaseException): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def wire_parsed(self, *_, **__):
        pass

    def segment_built(self, *_, **__):
        pass

    def candidates(self, *_, **__):
        pass

    def result(self, *_, **__):
        pass

    def run_end(self, **_):
        pass

    def error(self, *_, **__):
        pass
