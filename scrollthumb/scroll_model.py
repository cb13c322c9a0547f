from dataclasses import dataclass

from scrollthumb.position_mapper import Geometry

@dataclass
class ScrollModel:
    """Scrollable content along one axis; the owner of the real offset."""
    content_size: float = 0.0
    viewport_size: float = 0.0
    offset: float = 0.0

    def max(self) -> float: return max(0.0, float(self.content_size - self.viewport_size))
    def clamp(self): self.offset = max(0.0, min(self.max(), self.offset))
    def scroll(self, d: float): self.offset += d; self.clamp()
    def set_position(self, target: float): self.offset = float(target); self.clamp()
    def apply_move(self, delta: float): self.scroll(-delta)

    def resize(self, content_size: float, viewport_size: float) -> None:
        self.content_size = content_size
        self.viewport_size = viewport_size
        self.clamp()

    def geometry(self, min_scroll_size: float = 0.0) -> Geometry:
        return Geometry(
            real_size=float(self.content_size),
            container_size=float(self.viewport_size),
            content_position=self.offset,
            min_scroll_size=min_scroll_size,
        )
