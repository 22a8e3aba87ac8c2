# campus_nav/io/scene_manifest.py
"""
Scene manifest: the renderer's hand-off of named objects to the navigation
core, as JSON. Each entry is

    {"id": "road_3", "position": [x, y, z],
     "bbox": {"min": [x, y, z], "max": [x, y, z]}}

or, instead of "bbox", a "size": [sx, sy, sz] centred on the position.
Entries may also carry "color" to get a highlightable surface.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, ValidationError, model_validator

from campus_nav.domain.entities.geometry import AABB, Point3
from campus_nav.domain.entities.scene import Material, SceneObjectRef
from campus_nav.domain.entities.surface import MeshSurface
from campus_nav.domain.state import SceneCatalog
from campus_nav.errors import SceneManifestError

Vec3 = tuple[FiniteFloat, FiniteFloat, FiniteFloat]


class BoxModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    min: Vec3
    max: Vec3

    @model_validator(mode="after")
    def _ordered(self):
        if any(lo > hi for lo, hi in zip(self.min, self.max)):
            raise ValueError(f"bbox min {self.min} exceeds max {self.max}")
        return self


class SceneObjectModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str = Field(min_length=1)
    position: Vec3
    bbox: BoxModel | None = None
    size: Vec3 | None = None
    color: str | None = Field(default=None, pattern=r"^#[0-9a-fA-F]{6}$")

    @model_validator(mode="after")
    def _one_extent(self):
        if (self.bbox is None) == (self.size is None):
            raise ValueError("exactly one of 'bbox' or 'size' is required")
        return self

    def to_ref(self) -> SceneObjectRef:
        pos = Point3(*self.position)
        if self.bbox is not None:
            box = AABB(Point3(*self.bbox.min), Point3(*self.bbox.max))
        else:
            box = AABB.from_center_size(pos, self.size)
        return SceneObjectRef(id=self.id, position=pos, bbox=box)


class SceneManifestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    objects: list[SceneObjectModel] = Field(default_factory=list)


def parse_manifest(data, **catalog_kw) -> SceneCatalog:
    """Build a catalog from decoded JSON (a list of objects or {"objects": [...]})."""
    if isinstance(data, list):
        data = {"objects": data}
    try:
        manifest = SceneManifestModel.model_validate(data)
    except ValidationError as e:
        raise SceneManifestError(f"invalid scene manifest: {e}") from e

    cat = SceneCatalog(**catalog_kw)
    for m in manifest.objects:
        surface = None if m.color is None else MeshSurface(m.id, Material(m.color, name=m.id))
        try:
            cat.add(m.to_ref(), surface)
        except ValueError as e:
            raise SceneManifestError(str(e)) from e
    return cat


def load_manifest(path: str | Path, **catalog_kw) -> SceneCatalog:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SceneManifestError(f"cannot read scene manifest {p}: {e}") from e
    return parse_manifest(data, **catalog_kw)
