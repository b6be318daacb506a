# crosswires/domain/parser.py
from crosswires.domain.geometry import Direction, PathStep
from crosswires.errors import WireParseError

_DIRECTIONS = {d.value: d for d in Direction}


def parse_step(token: str, index: int = 0) -> PathStep:
    """Turn a token like ``R75`` into a PathStep."""
    tok = token.strip()
    if not tok:
        raise WireParseError(token, index, "empty token")
    direction = _DIRECTIONS.get(tok[0])
    if direction is None:
        raise WireParseError(token, index, f"unknown direction {tok[0]!r}")
    digits = tok[1:]
    if not (digits.isascii() and digits.isdigit()):
        raise WireParseError(token, index, f"distance {digits!r} is not a non-negative integer")
    return PathStep(direction, int(digits))


def parse_wire(line: str, delimiter: str = ",") -> list[PathStep]:
    if not line.strip():
        raise WireParseError(line, 0, "wire has no steps")
    return [parse_step(tok, i) for i, tok in enumerate(line.strip().split(delimiter))]
