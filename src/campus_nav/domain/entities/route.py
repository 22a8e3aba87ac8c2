import math
from dataclasses import dataclass

from campus_nav.domain.entities.scene import SceneObjectRef


@dataclass(frozen=True)
class PathResult:
    path: tuple[str, ...]
    distance: float  # inf <=> path is empty

    @classmethod
    def unreachable(cls) -> "PathResult":
        return cls((), math.inf)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def hops(self) -> int:
        return max(0, len(self.path) - 1)


@dataclass(frozen=True)
class LocateResult:
    object: SceneObjectRef | None
    distance: float

    @classmethod
    def none(cls) -> "LocateResult":
        return cls(None, math.inf)
