# sim/hooks.py
from typing import Protocol

from campus_nav.sim.event import BaseEvent


class KernelHooks(Protocol):
    """Observer of the scheduler; every call is fire-and-forget."""

    def run_start(self, *, until: float | None, max_events: int | None, qsize: int): ...
    def run_end(self, *, processed: int, last_t: float, qsize: int, wall_ms: float): ...
    def schedule(self, ev: BaseEvent, *, now: float, qsize: int): ...
    def dispatch_start(self, ev: BaseEvent, *, seq: int, qsize: int, handlers: int): ...
    def dispatch_end(self, ev: BaseEvent, *, out_events: int, ms: float): ...
    def error(self, ev: BaseEvent, *, reason: str, **kw): ...


class NoopHooks:
    """Default hooks: ignore everything."""

    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def schedule(self, *_, **__):
        pass

    def dispatch_start(self, *_, **__):
        pass

    def dispatch_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
