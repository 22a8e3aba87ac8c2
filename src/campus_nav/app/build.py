# campus_nav/app/build.py
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from campus_nav.app.controllers.highlight import PathHighlighter
from campus_nav.app.controllers.tour import TourHandler, TourState
from campus_nav.app.protocols import WaypointVisitor
from campus_nav.app.query import parse_query_points
from campus_nav.app.wiring import wire
from campus_nav.config.models import AppModel
from campus_nav.domain.entities.geometry import Point3
from campus_nav.domain.entities.route import PathResult
from campus_nav.domain.entities.scene import SceneObjectRef
from campus_nav.domain.graph.builder import GraphBuilder
from campus_nav.domain.navigation.locator import NearestNodeLocator
from campus_nav.domain.state import SceneCatalog
from campus_nav.io.kernel_logging import KernelLogging, default_json_logger
from campus_nav.io.scene_manifest import load_manifest
from campus_nav.runtime.registries import make_frontier
from campus_nav.services.navigation import NavigationService
from campus_nav.sim.hooks import NoopHooks
from campus_nav.sim.kernel import Kernel


class LoggingVisitor(WaypointVisitor):
    """Stand-in for the renderer's camera jump: records and logs each stop."""

    def __init__(self, logger: logging.Logger | None = None):
        self.log = logger or logging.getLogger("campus_nav.tour")
        self.visited: list[tuple[float, str]] = []

    def visit(self, waypoint: SceneObjectRef, *, t: float) -> None:
        self.visited.append((t, waypoint.id))
        self.log.info("tour_visit", extra={"extra": {"t": t, "waypoint": waypoint.id}})


@dataclass
class App:
    config: AppModel
    kernel: Kernel
    catalog: SceneCatalog
    navigation: NavigationService
    highlighter: PathHighlighter
    tour: TourHandler

    def find_path(self, start: Point3, end: Point3) -> PathResult:
        return self.navigation.find_path(start, end)

    def navigate_query(self, params) -> PathResult:
        """Resolve page parameters (x1, y1, x2, y2), find the path and highlight it."""
        start, end = parse_query_points(params)
        result = self.find_path(start, end)
        self.highlighter.reset()
        self.highlighter.highlight(result, self.catalog.surfaces.values())
        return result

    def start_tour(self, waypoints: list[SceneObjectRef] | None = None) -> TourState:
        wps = self.catalog.by_prefix(self.config.tour.prefix) if waypoints is None else waypoints
        state, events = self.tour.start(self.kernel.now, wps)
        self.kernel.schedule_all(events)
        return state


def build(
    cfg: AppModel | Mapping | None = None,
    *,
    catalog: SceneCatalog | None = None,
    visitor: WaypointVisitor | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = AppModel()
    else:
        model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    if use_logging:
        default_json_logger(level=model.log.level)

    # 1) Scene snapshot
    prefixes = tuple(model.navigation.candidate_prefixes)
    if catalog is None:
        if model.scene.manifest:
            catalog = load_manifest(model.scene.manifest, candidate_prefixes=prefixes)
        else:
            catalog = SceneCatalog(candidate_prefixes=prefixes)

    # 2) Kernel (with hooks)
    hooks = (
        KernelLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )
    kernel = Kernel(hooks=hooks)

    # 3) Navigation core
    frontier = make_frontier(model.navigation.frontier)
    navigation = NavigationService(
        builder=GraphBuilder(frontier_factory=frontier),
        locator=NearestNodeLocator(),
        scene=catalog,
    )

    # 4) Collaborator-facing controllers
    highlighter = PathHighlighter(color=model.highlight.color)
    tour = TourHandler(visitor or LoggingVisitor(), dwell_s=model.tour.dwell_s)

    # 5) Wiring
    wire(kernel, tour=tour)

    return App(model, kernel, catalog, navigation, highlighter, tour)
