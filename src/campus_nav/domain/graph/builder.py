from collections.abc import Callable, Sequence

import numpy as np

from campus_nav.app.protocols import Frontier
from campus_nav.domain.entities.scene import SceneObjectRef
from campus_nav.domain.graph.frontier import SortedFrontier
from campus_nav.domain.graph.graph import Graph


class GraphBuilder:
    """
    Objects are adjacent iff their bounding boxes overlap (inclusive).
    Edge weight is the Euclidean distance between object positions. This is a
    proximity heuristic: touching boxes do not guarantee physical connectivity.
    """

    def __init__(self, frontier_factory: Callable[[], Frontier] = SortedFrontier):
        self.frontier_factory = frontier_factory

    def build(self, objects: Sequence[SceneObjectRef]) -> Graph:
        g = Graph(frontier_factory=self.frontier_factory)
        ids = [o.id for o in objects]
        if len(set(ids)) != len(ids):
            dupes = sorted({i for i in ids if ids.count(i) > 1})
            raise ValueError(f"scene object ids must be unique; duplicated: {dupes}")
        for i in ids:
            g.add_vertex(i)
        if len(objects) < 2:
            return g

        pos = np.asarray([o.position.as_tuple() for o in objects], dtype=float)
        lo = np.asarray([o.bbox.min.as_tuple() for o in objects], dtype=float)
        hi = np.asarray([o.bbox.max.as_tuple() for o in objects], dtype=float)

        # (n, n) overlap matrix: a.min <= b.max and b.min <= a.max on every axis
        overlap = np.all(lo[:, None, :] <= hi[None, :, :], axis=2) & np.all(
            lo[None, :, :] <= hi[:, None, :], axis=2
        )
        # row-major over the strict upper triangle => pairs (i, j), i < j, in order
        for i, j in np.argwhere(np.triu(overlap, k=1)):
            w = float(np.linalg.norm(pos[i] - pos[j]))
            g.add_edge(ids[i], ids[j], w)
        return g
