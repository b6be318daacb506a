# crosswires/errors.py


class CrosswiresError(Exception):
    """Base class for every failure the pipeline surfaces to its caller."""


class InputReadError(CrosswiresError):
    """The wire source could not be read or does not hold two wires."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"cannot read wires from {source!r}: {reason}")
        self.source = source
        self.reason = reason


class WireParseError(CrosswiresError, ValueError):
    """A token is not a direction letter followed by an integer distance."""

    def __init__(self, token: str, index: int, reason: str):
        super().__init__(f"bad token {token!r} at position {index}: {reason}")
        self.token = token
        self.index = index
        self.reason = reason


class InvariantError(CrosswiresError, AssertionError):
    """Internal consistency fault; parsing should make these unreachable."""
