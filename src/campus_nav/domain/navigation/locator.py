import math
from collections.abc import Iterable

from campus_nav.domain.entities.geometry import Point3, closest_point, distance
from campus_nav.domain.entities.route import LocateResult
from campus_nav.domain.entities.scene import SceneObjectRef


class NearestNodeLocator:
    """Map a free 3D point to the candidate whose bounding box is closest to it."""

    def locate(self, point: Point3, candidates: Iterable[SceneObjectRef]) -> LocateResult:
        best, best_d = None, math.inf
        for obj in candidates:
            d = distance(point, closest_point(obj.bbox, point))
            if d < best_d:  # strict: first encountered wins ties
                best, best_d = obj, d
        return LocateResult(best, best_d)
