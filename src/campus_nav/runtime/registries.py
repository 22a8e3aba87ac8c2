# runtime/registries.py
from collections.abc import Callable

from campus_nav.app.protocols import Frontier
from campus_nav.config.models import FrontierHeapModel, FrontierSortedModel, FrontierUnion
from campus_nav.domain.graph.frontier import HeapFrontier, SortedFrontier

FrontierFactory = Callable[[], Frontier]
FrontierMaker = Callable[[FrontierUnion], FrontierFactory]

_frontier_registry: dict[str, FrontierMaker] = {}


# ------------------- Frontier registries ---------------------------


def register_frontier(kind: str):
    def deco(fn: FrontierMaker):
        _frontier_registry[kind] = fn
        return fn

    return deco


def make_frontier(cfg: FrontierUnion) -> FrontierFactory:
    try:
        maker = _frontier_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown frontier kind {cfg.kind!r}") from None
    return maker(cfg)


@register_frontier("sorted")
def _make_sorted(cfg: FrontierSortedModel):
    return SortedFrontier


@register_frontier("heap")
def _make_heap(cfg: FrontierHeapModel):
    return HeapFrontier
