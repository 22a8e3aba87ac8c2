# io/kernel_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from campus_nav.sim.hooks import NoopHooks


class JsonFormatter(logging.Formatter):
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


def default_json_logger(name="campus_nav", level="INFO", stream=None) -> logging.Logger:
    """Attach one JSON stream handler to the package logger (idempotent)."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class KernelLogging(NoopHooks):
    """
    Structured logs for the scheduler and the events it carries.
    """

    BUSINESS = {"TourStep", "TourFinished"}

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        if logger is None:
            default_json_logger(level=level)
            logger = logging.getLogger("campus_nav.kernel")
        self.log = logger
        self._processed = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _shape_event(self, ev) -> tuple[str, dict]:
        name = type(ev).__name__
        data = asdict(ev) if is_dataclass(ev) else {"t": getattr(ev, "t", None)}
        return name, data

    # engine lifecycle

    def run_start(self, *, until, max_events, qsize):
        self._emit("INFO", "run_start", until=until, max_events=max_events, qsize=qsize)

    def run_end(self, *, processed, **extra):
        self._emit("INFO", "run_end", processed=processed, **extra)

    def schedule(self, ev, *, now, qsize):
        if self.debug:
            name, data = self._shape_event(ev)
            self._emit("DEBUG", "schedule", event=name, now=now, qsize=qsize, **data)

    def dispatch_start(self, ev, *, seq, qsize, handlers):
        self._processed += 1
        name, data = self._shape_event(ev)
        level = "INFO" if name in self.BUSINESS else ("DEBUG" if self.debug else None)
        if level:
            self._emit(level, name, **data, seq=seq, qsize=qsize, handlers=handlers)

    def dispatch_end(self, ev, *, out_events, ms):
        if self.debug:
            self._emit("DEBUG", "dispatch_done", event=type(ev).__name__, produced=out_events, ms=ms)

    def error(self, ev, *, reason: str, **extra):
        name, _ = self._shape_event(ev)
        self._emit("ERROR", "kernel_error", event=name, reason=reason, **extra)
