from dataclasses import dataclass

from campus_nav.domain.entities.geometry import AABB, Point3


@dataclass(frozen=True)
class SceneObjectRef:
    """Read-only view of a named scene object handed over by the renderer."""

    id: str  # stable name, e.g. "road_12" or "waypoint_library"
    position: Point3
    bbox: AABB


@dataclass(frozen=True)
class Material:
    color: str  # "#rrggbb"
    name: str = ""

    def with_color(self, color: str) -> "Material":
        return Material(color=color, name=self.name)
