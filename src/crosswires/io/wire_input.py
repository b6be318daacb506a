# crosswires/io/wire_input.py
from pathlib import Path

from crosswires.config.models import InputModel
from crosswires.errors import InputReadError


def read_wires(path: str | Path) -> tuple[str, str]:
    """Return the first two non-blank lines of `path`."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(str(path), getattr(exc, "strerror", None) or str(exc)) from exc
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    if len(lines) < 2:
        raise InputReadError(str(path), f"expected two wires, found {len(lines)}")
    return lines[0], lines[1]


def load_wires(model: InputModel) -> tuple[str, str]:
    if model.wires is not None:
        return model.wires
    return read_wires(model.path)
