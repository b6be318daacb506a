# crosswires/cli.py
import argparse
import sys

from pydantic import ValidationError

from crosswires.app.build import build
from crosswires.domain.geometry import CrossingResult
from crosswires.errors import CrosswiresError
from crosswires.io.config import load_scenario

EXIT_OK, EXIT_NO_CROSSING, EXIT_BAD_INPUT = 0, 1, 2


def _create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crosswires",
        description="Find where two orthogonal wires cross: closest to the origin and cheapest to reach",
    )
    parser.add_argument('input', nargs='?', default=None,
                        help='Text file with one wire per line (default: input.txt)')
    parser.add_argument('--config', '-c', type=str, default=None,
                        help='JSON scenario file')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], default=None,
                        help='Log level for JSON run logs on stderr')
    parser.add_argument('--debug', action='store_true',
                        help='Log every segment and intersection')
    parser.add_argument('--json', action='store_true',
                        help='Print the result as one JSON line instead of text')
    return parser


def format_report(result: CrossingResult) -> str:
    lines = []
    if result.closest is None:
        lines.append("TASK 1: no intersection")
    else:
        lines.append(f"TASK 1: dist: {result.distance} for {result.closest.point}")
    if result.cheapest is None:
        lines.append("TASK 2: no intersection")
    else:
        lines.append(f"TASK 2: dist: {result.cost} for {result.cheapest.point}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = _create_argument_parser().parse_args(argv)

    overrides: dict = {}
    if args.input is not None:
        overrides["input"] = {"path": args.input, "wires": None}
    log: dict = {}
    if args.log_level:
        log["level"] = args.log_level
    if args.debug:
        log["debug"] = True
    if log:
        overrides["log"] = log
    if args.json:
        overrides["output"] = "json"

    try:
        model = load_scenario(args.config, **overrides)
        result = build(model).run()
    except (CrosswiresError, ValidationError) as exc:
        print(f"crosswires: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if model.output == "text":
        print(format_report(result))
    return EXIT_OK if result.found else EXIT_NO_CROSSING


if __name__ == "__main__":
    sys.exit(main())
