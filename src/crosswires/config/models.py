import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


class InputModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str | None = "input.txt"
    # literal wires for demos; takes precedence over `path`
    wires: tuple[str, str] | None = None
    delimiter: str = Field(default=",", min_length=1)

    @field_validator("path")
    @classmethod
    def _expand(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return os.path.expandvars(os.path.expanduser(v))

    @model_validator(mode="after")
    def _check_source(self):
        if self.wires is None and not self.path:
            raise ValueError("input needs either a path or literal wires")
        return self


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "crosswires"
    run_id: str = "local"
    input: InputModel = Field(default_factory=InputModel)
    log: LogModel = Field(default_factory=LogModel)
    output: Literal["text", "json"] = "text"
