# campus_nav/app/controllers/highlight.py
import logging
from collections.abc import Iterable

from campus_nav.app.protocols import Paintable
from campus_nav.domain.entities.route import PathResult

log = logging.getLogger(__name__)


class PathHighlighter:
    """Recolor every paintable surface whose id lies on a path."""

    def __init__(self, color: str = "#ff0000"):
        self.color = color
        self._lit: dict[str, Paintable] = {}

    def highlight(self, result: PathResult, surfaces: Iterable[object]) -> list[str]:
        on_path = set(result.path)
        painted: list[str] = []
        skipped = 0
        for s in surfaces:
            if not isinstance(s, Paintable):
                skipped += 1
                continue
            if s.id in on_path:
                s.set_highlight_color(self.color)
                self._lit[s.id] = s
                painted.append(s.id)
        log.debug(
            "path_highlight", extra={"extra": {"painted": len(painted), "not_paintable": skipped}}
        )
        return painted

    def reset(self) -> list[str]:
        cleared = list(self._lit)
        for s in self._lit.values():
            s.clear_highlight()
        self._lit.clear()
        return cleared
