import logging
import math
from collections.abc import Sequence
from numbers import Real

from campus_nav.app.protocols import SceneSnapshotProvider
from campus_nav.domain.entities.geometry import Point3
from campus_nav.domain.entities.route import PathResult
from campus_nav.domain.entities.scene import SceneObjectRef
from campus_nav.domain.graph.builder import GraphBuilder
from campus_nav.domain.navigation.locator import NearestNodeLocator
from campus_nav.errors import InvalidQueryError

log = logging.getLogger(__name__)


def validate_point(p: Point3, name: str = "point") -> Point3:
    for axis in ("x", "y", "z"):
        v = getattr(p, axis)
        if isinstance(v, bool) or not isinstance(v, Real):
            raise InvalidQueryError(f"{name}.{axis}", v, "must be a number")
        if not math.isfinite(v):
            raise InvalidQueryError(f"{name}.{axis}", v)
    return p


class NavigationService:
    """
    Given two 3D coordinates: snap each to the nearest candidate, build the
    overlap graph from the same candidates and run the shortest-path search.
    Unresolvable queries return PathResult.unreachable(); they never raise.
    """

    def __init__(
        self,
        *,
        builder: GraphBuilder | None = None,
        locator: NearestNodeLocator | None = None,
        scene: SceneSnapshotProvider | None = None,
    ):
        self.builder = builder or GraphBuilder()
        self.locator = locator or NearestNodeLocator()
        self.scene = scene

    def candidates(self) -> Sequence[SceneObjectRef]:
        if self.scene is None:
            return ()
        return self.scene.snapshot()

    def find_path(
        self,
        start_point: Point3,
        end_point: Point3,
        candidates: Sequence[SceneObjectRef] | None = None,
    ) -> PathResult:
        validate_point(start_point, "start")
        validate_point(end_point, "end")
        objs = list(self.candidates() if candidates is None else candidates)

        start = self.locator.locate(start_point, objs)
        end = self.locator.locate(end_point, objs)
        if start.object is None or end.object is None:
            log.info(
                "navigation_unresolved",
                extra={"extra": {"candidates": len(objs)}},
            )
            return PathResult.unreachable()

        graph = self.builder.build(objs)
        result = graph.shortest_path(start.object.id, end.object.id)
        log.info(
            "navigation_query",
            extra={
                "extra": {
                    "start_id": start.object.id,
                    "end_id": end.object.id,
                    "start_snap": start.distance,
                    "end_snap": end.distance,
                    "nodes": len(graph),
                    "edges": graph.edge_count,
                    "hops": result.hops,
                    "distance": result.distance if result.found else None,
                }
            },
        )
        return result
