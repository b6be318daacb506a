# crosswires/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from crosswires.app.hooks import NoopHooks, PipelineHooks
from crosswires.app.pipeline import solve
from crosswires.config.models import ScenarioModel
from crosswires.domain.geometry import CrossingResult
from crosswires.errors import CrosswiresError
from crosswires.io.recorder import JsonlSink, Recorder
from crosswires.io.run_logging import RunLogging  # JSON logs
from crosswires.io.wire_input import load_wires


@dataclass
class App:
    model: ScenarioModel
    hooks: PipelineHooks
    recorder: Recorder | None = None

    def run(self) -> CrossingResult:
        try:
            wire1, wire2 = load_wires(self.model.input)
        except CrosswiresError as exc:
            self.hooks.error(stage="read", exc=exc)
            raise
        result = solve(wire1, wire2, delimiter=self.model.input.delimiter, hooks=self.hooks)
        if self.recorder:
            self.recorder.emit(result)
        return result


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        RunLogging(
            run_id=model.run_id,
            level="DEBUG" if model.log.debug else model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Result recorder for machine-readable output
    if recorder is None and model.output == "json":
        recorder = Recorder(JsonlSink())

    return App(model=model, hooks=hooks, recorder=recorder)
