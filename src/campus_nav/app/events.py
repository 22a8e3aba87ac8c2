# app/events.py
from dataclasses import dataclass

from campus_nav.sim.event import BaseEvent


# Waypoint tour
@dataclass(order=True)
class TourStep(BaseEvent):
    tour_id: int
    index: int
    task_id: int  # versioning to make steps of a cancelled tour harmless


@dataclass(order=True)
class TourFinished(BaseEvent):
    tour_id: int
    visited: int
