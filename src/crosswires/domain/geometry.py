from dataclasses import asdict, dataclass
from enum import Enum


class Direction(Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


# Core geometry types used by the intersection engine
@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def manhattan(self) -> int:
        return abs(self.x) + abs(self.y)

    def moved(self, direction: Direction, distance: int) -> "Point":
        dx, dy = direction.offset
        return Point(self.x + dx * distance, self.y + dy * distance)


ORIGIN = Point(0, 0)


@dataclass(frozen=True)
class PathStep:
    direction: Direction
    distance: int

    def __str__(self) -> str:
        return f"({self.direction.value} {self.distance})"


@dataclass(frozen=True)
class Segment:
    """
    Axis-aligned piece of a wire.

    `steps` is the wire length walked before the segment starts. `mirrored`
    is set when normalization swapped the endpoints, so the walk starts at
    `end2` rather than `end1`.
    """

    end1: Point
    end2: Point
    steps: int
    mirrored: bool = False

    def __str__(self) -> str:
        ms = "<>" if self.mirrored else ""
        return f"({self.end1}-{self.end2}#{self.steps}{ms})"

    @property
    def is_vertical(self) -> bool:
        return self.end1.x == self.end2.x

    @property
    def is_horizontal(self) -> bool:
        return not self.is_vertical


@dataclass(frozen=True)
class PointWithCost:
    point: Point
    cost: int


@dataclass(frozen=True)
class CrossingResult:
    closest: PointWithCost | None
    cheapest: PointWithCost | None
    candidates: int = 0

    @property
    def distance(self) -> int | None:
        return None if self.closest is None else self.closest.point.manhattan()

    @property
    def cost(self) -> int | None:
        return None if self.cheapest is None else self.cheapest.cost

    @property
    def found(self) -> bool:
        return self.closest is not None and self.cheapest is not None

    def to_record(self) -> dict:
        return {**asdict(self), "distance": self.distance, "cost": self.cost, "found": self.found}
