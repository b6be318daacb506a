import pytest

from crosswires.domain.geometry import Direction, PathStep
from crosswires.domain.parser import parse_step, parse_wire
from crosswires.errors import WireParseError


def test_parse_step_reads_direction_and_distance():
    assert parse_step("R75") == PathStep(Direction.RIGHT, 75)
    assert parse_step(" U7\n") == PathStep(Direction.UP, 7)
    assert parse_step("D0") == PathStep(Direction.DOWN, 0)


def test_parse_wire_keeps_order():
    steps = parse_wire("R8,U5,L5,D3")
    assert [str(s) for s in steps] == ["(R 8)", "(U 5)", "(L 5)", "(D 3)"]


def test_parse_wire_custom_delimiter():
    assert len(parse_wire("R1;L1;U2", delimiter=";")) == 3


@pytest.mark.parametrize(
    "token",
    ["X5", "r5", "R", "R5x", "R-5", "R 5", "", "R\N{SUPERSCRIPT TWO}", "U\N{ARABIC-INDIC DIGIT THREE}"],
)
def test_bad_tokens_raise(token):
    with pytest.raises(WireParseError):
        parse_step(token)


def test_parse_error_names_token_and_position():
    with pytest.raises(WireParseError) as ei:
        parse_wire("R8,U5,Q5,D3")
    assert ei.value.token == "Q5"
    assert ei.value.index == 2
    assert "Q5" in str(ei.value)


def test_blank_wire_is_rejected():
    with pytest.raises(WireParseError, match="no steps"):
        parse_wire("   ")


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_step("Z1")


def test_non_ascii_digits_are_reported_as_parse_errors():
    with pytest.raises(WireParseError) as ei:
        parse_wire("R8,U\N{SUPERSCRIPT TWO},L5")
    assert ei.value.index == 1
