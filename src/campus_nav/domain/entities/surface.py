from dataclasses import dataclass, field

from campus_nav.domain.entities.scene import Material


@dataclass
class MeshSurface:
    """
    Renderer-side surface wrapper. Materials may be shared between meshes, so
    highlighting swaps in a private copy and keeps the original for reset.
    """

    id: str
    material: Material
    _original: Material | None = field(default=None, repr=False)

    @property
    def highlighted(self) -> bool:
        return self._original is not None

    def set_highlight_color(self, color: str) -> None:
        if self._original is None:
            self._original = self.material
        if self.material.color != color:
            self.material = self._original.with_color(color)

    def clear_highlight(self) -> None:
        if self._original is not None:
            self.material, self._original = self._original, None
