from collections.abc import Hashable, Sequence
from typing import Protocol, runtime_checkable

from campus_nav.domain.entities.scene import SceneObjectRef


# ------------- Navigation core --------------------
@runtime_checkable
class Frontier(Protocol):
    """
    Min-priority frontier for the shortest-path search.
    Ordering: ascending priority, equal priorities first-in-first-out.
    Stale duplicate entries for the same element are allowed.
    """

    def enqueue(self, element: Hashable, priority: float) -> None: ...
    def dequeue(self) -> tuple[Hashable, float]:
        """Remove and return (element, priority); callers check is_empty() first."""

    def is_empty(self) -> bool: ...


# ------------- Scene collaborator --------------------
@runtime_checkable
class SceneSnapshotProvider(Protocol):
    """
    Responsibilities:
      • Hand the navigation core the current candidate objects.
      • Group objects by id prefix ("road_", "waypoint_", ...).
    """

    def snapshot(self) -> Sequence[SceneObjectRef]: ...
    def by_prefix(self, prefix: str) -> list[SceneObjectRef]: ...


@runtime_checkable
class Paintable(Protocol):
    """A renderable surface that can take a highlight colour without sharing state."""

    id: str

    def set_highlight_color(self, color: str) -> None: ...
    def clear_highlight(self) -> None: ...


@runtime_checkable
class WaypointVisitor(Protocol):
    """Moves the view to a waypoint (camera jump lives in the renderer)."""

    def visit(self, waypoint: SceneObjectRef, *, t: float) -> None: ...
