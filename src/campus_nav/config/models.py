import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class SceneModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    manifest: str | None = None

    @field_validator("manifest")
    @classmethod
    def _expand(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return os.path.expandvars(os.path.expanduser(v))


# ----------------- FRONTIERS ---------------------


class FrontierSortedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["sorted"] = "sorted"


class FrontierHeapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["heap"] = "heap"


FrontierUnion = Annotated[FrontierSortedModel | FrontierHeapModel, Field(discriminator="kind")]


# ----------------- NAVIGATION ---------------------


class NavigationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    frontier: FrontierUnion = Field(default_factory=FrontierSortedModel)
    candidate_prefixes: list[str] = Field(default_factory=lambda: ["road_", "waypoint_", "location"])

    @field_validator("candidate_prefixes")
    @classmethod
    def _non_empty(cls, v: list[str]) -> list[str]:
        if not v or any(not p for p in v):
            raise ValueError("candidate_prefixes must be a non-empty list of non-empty strings")
        return v


class TourModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    dwell_s: float = Field(default=2.0, gt=0)
    prefix: str = "waypoint_"


class HighlightModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    color: str = Field(default="#ff0000", pattern=r"^#[0-9a-fA-F]{6}$")


# ------------------------------------------------------------------


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "campus"
    run_id: str = "local"
    log: LogModel = LogModel()
    scene: SceneModel = SceneModel()
    navigation: NavigationModel = Field(default_factory=NavigationModel)
    tour: TourModel = TourModel()
    highlight: HighlightModel = HighlightModel()
