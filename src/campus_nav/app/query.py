# campus_nav/app/query.py
import math
from collections.abc import Mapping
from urllib.parse import parse_qs

from campus_nav.domain.entities.geometry import Point3
from campus_nav.errors import InvalidQueryError

FIELDS = ("x1", "y1", "x2", "y2")


def _number(field: str, raw: object) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise InvalidQueryError(field, raw, "is required")
    if isinstance(raw, bool):
        raise InvalidQueryError(field, raw, "must be a number")
    try:
        v = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        raise InvalidQueryError(field, raw, "must be a number") from None
    if not math.isfinite(v):
        raise InvalidQueryError(field, raw)
    return v


def plane_point(u: float, v: float, height: float = 0.0) -> Point3:
    """Page coordinates lie on the ground plane; the scene is Y-up."""
    return Point3(u, height, v)


def parse_query_points(params: Mapping[str, object] | str) -> tuple[Point3, Point3]:
    """
    Read x1, y1, x2, y2 (page query parameters) into two ground-plane points.
    A raw query string such as "x1=0&y1=2&x2=5&y2=1" is accepted too.
    """
    if isinstance(params, str):
        params = {k: v[-1] for k, v in parse_qs(params.lstrip("?")).items()}
    x1, y1, x2, y2 = (_number(f, params.get(f)) for f in FIELDS)
    return plane_point(x1, y1), plane_point(x2, y2)
