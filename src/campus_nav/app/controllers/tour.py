# campus_nav/app/controllers/tour.py
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from campus_nav.app.events import TourFinished, TourStep
from campus_nav.app.protocols import WaypointVisitor
from campus_nav.domain.entities.scene import SceneObjectRef

TourStatus = Literal["running", "done", "cancelled"]


@dataclass
class TourState:
    tour_id: int
    waypoints: tuple[SceneObjectRef, ...]
    current_index: int = -1  # -1 until the first stop is visited
    task_id: int = 0
    status: TourStatus = "running"

    @property
    def current(self) -> SceneObjectRef | None:
        if 0 <= self.current_index < len(self.waypoints):
            return self.waypoints[self.current_index]
        return None

    @property
    def remaining(self) -> tuple[SceneObjectRef, ...]:
        return self.waypoints[self.current_index + 1 :]

    @property
    def done(self) -> bool:
        return self.status != "running"


class TourHandler:
    """
    Visits waypoints one after another, `dwell_s` apart. The timing lives in
    the kernel: each TourStep schedules the next. Cancelling bumps task_id so
    steps already queued for that tour become no-ops.
    """

    def __init__(self, visitor: WaypointVisitor, dwell_s: float = 2.0):
        if dwell_s <= 0:
            raise ValueError("dwell_s must be > 0")
        self.visitor = visitor
        self.dwell_s = dwell_s
        self.tours: dict[int, TourState] = {}
        self._next_id = 0

    def start(self, now: float, waypoints: Sequence[SceneObjectRef]) -> tuple[TourState, list]:
        self._next_id += 1
        st = TourState(tour_id=self._next_id, waypoints=tuple(waypoints))
        self.tours[st.tour_id] = st
        if not st.waypoints:
            st.status = "done"
            return st, [TourFinished(t=now, tour_id=st.tour_id, visited=0)]
        return st, [TourStep(t=now, tour_id=st.tour_id, index=0, task_id=st.task_id)]

    def cancel(self, tour_id: int) -> bool:
        st = self.tours.get(tour_id)
        if st is None or st.done:
            return False
        st.task_id += 1
        st.status = "cancelled"
        return True

    def on_tour_step(self, ev: TourStep):
        st = self.tours.get(ev.tour_id)
        if st is None or st.done or ev.task_id != st.task_id:
            return []  # stale

        self.visitor.visit(st.waypoints[ev.index], t=ev.t)
        st.current_index = ev.index

        if ev.index + 1 < len(st.waypoints):
            return [
                TourStep(
                    t=ev.t + self.dwell_s, tour_id=st.tour_id, index=ev.index + 1, task_id=st.task_id
                )
            ]
        st.status = "done"
        return [TourFinished(t=ev.t, tour_id=st.tour_id, visited=len(st.waypoints))]
