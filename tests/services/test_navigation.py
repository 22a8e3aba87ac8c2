# tests/services/test_navigation.py
import math

import pytest

from campus_nav.domain.entities.geometry import AABB, Point3
from campus_nav.domain.entities.route import PathResult
from campus_nav.domain.entities.scene import SceneObjectRef
from campus_nav.domain.graph.builder import GraphBuilder
from campus_nav.domain.state import SceneCatalog
from campus_nav.errors import InvalidQueryError
from campus_nav.services.navigation import NavigationService


def seg(oid: str, x0: float, x1: float, z0: float = -0.5, z1: float = 0.5) -> SceneObjectRef:
    b = AABB(Point3(x0, 0.0, z0), Point3(x1, 0.2, z1))
    return SceneObjectRef(oid, b.center, b)


@pytest.fixture
def roads() -> list[SceneObjectRef]:
    # three road pieces end to end along x, plus an unconnected car park
    return [
        seg("road_a", 0.0, 4.0),
        seg("road_b", 4.0, 8.0),
        seg("road_c", 8.0, 12.0),
        seg("road_carpark", 0.0, 4.0, 10.0, 14.0),
    ]


class CountingBuilder(GraphBuilder):
    def __init__(self):
        super().__init__()
        self.calls = 0
        self.seen = []

    def build(self, objects):
        self.calls += 1
        self.seen.append(list(objects))
        return super().build(objects)


def test_find_path_along_roads(roads):
    svc = NavigationService()
    r = svc.find_path(Point3(0.5, 0, 0), Point3(11.0, 0, 0), roads)
    assert r.path == ("road_a", "road_b", "road_c")
    assert r.distance == pytest.approx(8.0)


def test_same_object_for_both_ends(roads):
    r = NavigationService().find_path(Point3(1, 0, 0), Point3(3, 0, 0), roads)
    assert r == PathResult(("road_a",), 0.0)


def test_disconnected_endpoints(roads):
    r = NavigationService().find_path(Point3(1, 0, 0), Point3(1, 0, 12), roads)
    assert r == PathResult.unreachable()


def test_empty_candidates_skip_the_builder():
    builder = CountingBuilder()
    svc = NavigationService(builder=builder)
    r = svc.find_path(Point3(0, 0, 0), Point3(1, 1, 1), [])
    assert r.path == () and math.isinf(r.distance)
    assert builder.calls == 0


def test_builder_sees_exactly_the_located_candidates(roads):
    builder = CountingBuilder()
    svc = NavigationService(builder=builder)
    svc.find_path(Point3(0, 0, 0), Point3(12, 0, 0), roads)
    assert builder.calls == 1
    assert builder.seen == [roads]


def test_snapshot_provider_is_used_when_no_candidates(roads):
    catalog = SceneCatalog.from_objects([*roads, seg("building_gym", 4.0, 8.0)])
    svc = NavigationService(scene=catalog)
    r = svc.find_path(Point3(0, 0, 0), Point3(12, 0, 0))
    assert r.path == ("road_a", "road_b", "road_c")
    # buildings are not candidates by default
    assert "building_gym" not in r.path


def test_no_scene_and_no_candidates_is_unresolved():
    assert NavigationService().find_path(Point3(0, 0, 0), Point3(1, 0, 0)) == PathResult.unreachable()


@pytest.mark.parametrize(
    "bad",
    [
        Point3(math.nan, 0.0, 0.0),
        Point3(0.0, math.inf, 0.0),
        Point3(0.0, 0.0, "3"),
        Point3(True, 0.0, 0.0),
        Point3(None, 0.0, 0.0),
    ],
)
def test_malformed_points_fail_fast(roads, bad):
    svc = NavigationService()
    with pytest.raises(InvalidQueryError):
        svc.find_path(bad, Point3(0, 0, 0), roads)
    with pytest.raises(ValueError):
        svc.find_path(Point3(0, 0, 0), bad, roads)
