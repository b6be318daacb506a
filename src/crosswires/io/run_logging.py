# io/run_logging.py
import json
import logging
import sys

from crosswires.app.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="crosswires", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class RunLogging(NoopHooks):
    """
    Structured JSON logs for one pipeline run. Per-segment detail is only
    emitted in debug mode, sampled every `sample_every` calls.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._seen = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _sampled(self) -> bool:
        self._seen += 1
        return self.debug and (self._seen % self.sample_every) == 0

    # --------------------------------------------------------

    def run_start(self, *, wires: int):
        self._emit("INFO", "run_start", wires=wires)

    def wire_parsed(self, wire, steps):
        self._emit("INFO", "wire_parsed", wire=wire, steps=len(steps))

    def segment_built(self, wire, step, segment):
        if self._sampled():
            self._emit("DEBUG", "segment", wire=wire, step=str(step), segment=str(segment))

    def candidates(self, segment, found):
        if found and self._sampled():
            self._emit(
                "DEBUG",
                "intersect",
                segment=str(segment),
                points=[f"{c.point}#{c.cost}" for c in found],
            )

    def result(self, result):
        self._emit(
            "INFO",
            "result",
            distance=result.distance,
            cost=result.cost,
            candidates=result.candidates,
        )

    def run_end(self, *, candidates: int, wall_ms: float):
        self._emit("INFO", "run_end", candidates=candidates, wall_ms=round(wall_ms, 3))

    def error(self, *, stage: str, exc: BaseException):
        self._emit("ERROR", "pipeline_error", stage=stage, error=str(exc), kind=type(exc).__name__)
