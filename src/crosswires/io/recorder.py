# io/recorder.py
import json
import sys
from dataclasses import asdict, is_dataclass
from typing import Protocol


class Sink(Protocol):
    def write(self, ev) -> None: ...


def _shape(ev) -> dict:
    # events may carry derived values; they expose them through to_record()
    if hasattr(ev, "to_record"):
        body = ev.to_record()
    else:
        body = asdict(ev) if is_dataclass(ev) else dict(ev)
    return {"kind": type(ev).__name__, **body}


class JsonlSink:
    def __init__(self, fp=None):
        self.fp = fp

    def write(self, ev) -> None:
        fp = self.fp or sys.stdout
        fp.write(json.dumps(_shape(ev)) + "\n")


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)

    def emit(self, ev):
        for s in self.sinks:
            s.write(ev)
