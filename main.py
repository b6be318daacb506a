# main.py
import sys

from crosswires.app.build import build
from crosswires.cli import format_report, main


def run(wire1: str, wire2: str) -> None:
    """Solve two literal wires without touching the filesystem."""
    app = build({"input": {"path": None, "wires": [wire1, wire2]}})
    print(format_report(app.run()))


if __name__ == "__main__":
    if len(sys.argv) == 1:
        # demo wires
        run("R75,D30,R83,U83,L12,D49,R71,U7,L72", "U62,R66,U55,R34,D71,R55,D58,R83")
    else:
        sys.exit(main())
