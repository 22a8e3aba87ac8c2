# tests/domain/test_locator.py
import math

import pytest

from campus_nav.domain.entities.geometry import AABB, Point3
from campus_nav.domain.entities.route import LocateResult
from campus_nav.domain.entities.scene import SceneObjectRef
from campus_nav.domain.navigation.locator import NearestNodeLocator


def unit_at(oid: str, x: float, z: float = 0.0) -> SceneObjectRef:
    p = Point3(x, 0.0, z)
    return SceneObjectRef(oid, p, AABB.from_center_size(p, (1.0, 1.0, 1.0)))


@pytest.fixture
def locator() -> NearestNodeLocator:
    return NearestNodeLocator()


def test_empty_candidates(locator):
    r = locator.locate(Point3(1, 2, 3), [])
    assert r == LocateResult.none()
    assert r.object is None and math.isinf(r.distance)


def test_point_inside_box_is_zero_distance(locator):
    cands = [unit_at("road_1", 0.0), unit_at("road_2", 5.0)]
    r = locator.locate(Point3(5.2, 0.1, -0.3), cands)
    assert r.object.id == "road_2"
    assert r.distance == 0.0


def test_distance_is_to_box_not_position(locator):
    # a big box whose centre is far away still wins if its surface is closer
    big = SceneObjectRef("plaza", Point3(20, 0, 0), AABB(Point3(3, -1, -1), Point3(37, 1, 1)))
    small = unit_at("kiosk", 0.0)
    r = locator.locate(Point3(2.0, 0.0, 0.0), [small, big])
    assert r.object.id == "plaza"
    assert r.distance == pytest.approx(1.0)


def test_ties_go_to_first_candidate(locator):
    left, right = unit_at("left", -2.0), unit_at("right", 2.0)
    assert locator.locate(Point3(0, 0, 0), [left, right]).object.id == "left"
    assert locator.locate(Point3(0, 0, 0), [right, left]).object.id == "right"


def test_accepts_any_iterable(locator):
    r = locator.locate(Point3(10, 0, 0), (unit_at(f"road_{i}", float(i)) for i in range(5)))
    assert r.object.id == "road_4"
    assert r.distance == pytest.approx(5.5)
