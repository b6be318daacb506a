# crosswires/io/config.py
from collections.abc import Mapping
from pathlib import Path

from crosswires.config.models import ScenarioModel
from crosswires.errors import InputReadError


def load_scenario(path: str | Path | None = None, **overrides) -> ScenarioModel:
    """
    Validate a JSON scenario file (or an empty default) and apply top-level overrides.
    Overrides that are mappings are merged into the matching section.
    """
    data: dict = {}
    if path is not None:
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(str(path), getattr(exc, "strerror", None) or str(exc)) from exc
        data = ScenarioModel.model_validate_json(raw).model_dump()
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(data.get(key), Mapping):
            data[key] = {**data[key], **value}
        else:
            data[key] = value
    return ScenarioModel.model_validate(data)
