# crosswires/domain/reducer.py
from collections.abc import Iterable, Sequence

import numpy as np

from crosswires.domain.geometry import CrossingResult, PointWithCost, Segment
from crosswires.domain.intersections import crossing_candidates
from crosswires.domain.segments import normalize_all


def _first_min(values: np.ndarray, mask: np.ndarray) -> int | None:
    idx = np.flatnonzero(mask)
    if idx.size == 0:
        return None
    # argmin returns the first minimum, so ties keep scan order
    return int(idx[np.argmin(values[idx])])


def reduce_candidates(candidates: Iterable[PointWithCost]) -> CrossingResult:
    """
    Pick the non-origin candidate nearest the origin (Manhattan) and the one
    with the smallest positive combined cost. The two winners may differ.
    """
    cands = list(candidates)
    if not cands:
        return CrossingResult(None, None, 0)

    rows = np.array([(c.point.x, c.point.y, c.cost) for c in cands], dtype=np.int64)
    dist = np.abs(rows[:, 0]) + np.abs(rows[:, 1])
    costs = rows[:, 2]

    i_dist = _first_min(dist, dist > 0)
    i_cost = _first_min(costs, costs > 0)
    return CrossingResult(
        closest=None if i_dist is None else cands[i_dist],
        cheapest=None if i_cost is None else cands[i_cost],
        candidates=len(cands),
    )


def closest_intersect(path1: Sequence[Segment], path2: Sequence[Segment]) -> CrossingResult:
    found: list[PointWithCost] = []
    for _, hits in crossing_candidates(normalize_all(path1), normalize_all(path2)):
        found.extend(hits)
    return reduce_candidates(found)
