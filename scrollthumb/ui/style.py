from dataclasses import dataclass, replace

@dataclass
class ScrollbarStyle:
    thickness: int = 10
    margin: int = 4
    radius: int = 4
    track_color: tuple[int, int, int, int] = (255, 255, 255, 32)
    track_active_color: tuple[int, int, int, int] = (255, 255, 255, 56)   # while dragging
    thumb_color: tuple[int, int, int, int] = (255, 255, 255, 160)
    thumb_active_color: tuple[int, int, int, int] = (255, 255, 255, 224)
    show_when_no_overflow: bool = True

    def derive(self, **overrides) -> "ScrollbarStyle":
        """ Create a variant style without mutating the base. """
        return replace(self, **overrides)

    def track_color_for(self, dragging: bool) -> tuple[int, int, int, int]:
        return self.track_active_color if dragging else self.track_color

    def thumb_color_for(self, dragging: bool) -> tuple[int, int, int, int]:
        return self.thumb_active_color if dragging else self.thumb_color
