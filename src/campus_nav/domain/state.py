# campus_nav/domain/state.py
from collections.abc import Iterable
from dataclasses import dataclass, field

from campus_nav.domain.entities.scene import SceneObjectRef

ROAD_PREFIX = "road_"
LOCATION_PREFIX = "location"
WAYPOINT_PREFIX = "waypoint_"
BUILDING_PREFIX = "building"


@dataclass
class SceneCatalog:
    """
    Snapshot of the loaded model as the navigation core sees it.
    Insertion order is preserved; it decides locator tie-breaks.
    """

    objects: dict[str, SceneObjectRef] = field(default_factory=dict)
    surfaces: dict[str, object] = field(default_factory=dict)
    candidate_prefixes: tuple[str, ...] = (ROAD_PREFIX, WAYPOINT_PREFIX, LOCATION_PREFIX)

    @classmethod
    def from_objects(cls, objs: Iterable[SceneObjectRef], **kw) -> "SceneCatalog":
        cat = cls(**kw)
        for o in objs:
            cat.add(o)
        return cat

    def add(self, obj: SceneObjectRef, surface: object | None = None) -> None:
        if obj.id in self.objects:
            raise ValueError(f"duplicate scene object id {obj.id!r}")
        self.objects[obj.id] = obj
        if surface is not None:
            self.surfaces[obj.id] = surface

    def attach_surface(self, obj_id: str, surface: object) -> None:
        self.surfaces[obj_id] = surface

    def get(self, obj_id: str) -> SceneObjectRef | None:
        return self.objects.get(obj_id)

    def by_prefix(self, prefix: str) -> list[SceneObjectRef]:
        return [o for oid, o in self.objects.items() if oid.startswith(prefix)]

    def snapshot(self) -> list[SceneObjectRef]:
        """Objects whose id starts with any candidate prefix, in catalog order."""
        prefixes = self.candidate_prefixes
        return [o for oid, o in self.objects.items() if oid.startswith(prefixes)]

    def waypoints(self) -> list[SceneObjectRef]:
        return self.by_prefix(WAYPOINT_PREFIX)

    def roads(self) -> list[SceneObjectRef]:
        return self.by_prefix(ROAD_PREFIX)

    def buildings(self) -> list[SceneObjectRef]:
        return self.by_prefix(BUILDING_PREFIX)
