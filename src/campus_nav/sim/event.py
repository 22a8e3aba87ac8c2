# sim/event.py
from dataclasses import dataclass


@dataclass(order=True)
class BaseEvent:
    t: float  # scheduler seconds since the kernel started
