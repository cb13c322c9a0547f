from __future__ import annotations

from typing import Optional

import pygame

from scrollthumb.anim import SmoothedThumb
from scrollthumb.position_mapper import ThumbGeometry
from scrollthumb.scrollbar import Scrollbar
from scrollthumb.ui.style import ScrollbarStyle


class ScrollbarWidget:
    """
    pygame adapter around a Scrollbar:
      - `rect` is the track, in screen coordinates
      - left click on the thumb starts a relative drag (thumb wins over track)
      - left click elsewhere on the track jumps, then keeps dragging
      - moves/releases arrive through the Scrollbar's attached pointer source
    Smoothing, when given, only changes what is drawn.
    """
    def __init__(
        self,
        rect: pygame.Rect,
        scrollbar: Scrollbar,
        *,
        style: Optional[ScrollbarStyle] = None,
        smoothing: Optional[SmoothedThumb] = None,
    ) -> None:
        self.scrollbar = scrollbar
        self.style = style or ScrollbarStyle()
        self.smoothing = smoothing
        self._shown: Optional[ThumbGeometry] = None
        self.rect = pygame.Rect(0, 0, 0, 0)
        self.set_rect(rect)

    def set_rect(self, rect: pygame.Rect) -> None:
        self.rect = pygame.Rect(rect)
        self.scrollbar.track_origin = self.rect.topleft

    @property
    def visible(self) -> bool:
        g = self.scrollbar.gesture.geometry
        overflow = g is not None and g.has_range()
        return overflow or self.style.show_when_no_overflow

    # ----- input -----
    def handle_event(self, e: pygame.event.Event) -> bool:
        if e.type != pygame.MOUSEBUTTONDOWN or e.button != 1 or not self.visible:
            return False
        if self.thumb_rect().collidepoint(e.pos):
            self.scrollbar.press_thumb(e.pos)
            return True
        if self.rect.collidepoint(e.pos):
            self.scrollbar.press_track(e.pos)
            return True
        return False

    # ----- update/draw -----
    def update(self, dt: float) -> None:
        if self.smoothing is None:
            self._shown = None
            return
        self._shown = self.smoothing.update(dt, self.scrollbar.thumb)

    def thumb_rect(self) -> pygame.Rect:
        """Hit testing always uses the exact thumb; drawing may use the smoothed one."""
        return self._rect_for(self.scrollbar.thumb)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible or self.rect.w <= 0 or self.rect.h <= 0:
            return
        st = self.style
        dragging = self.scrollbar.is_dragging
        pygame.draw.rect(surface, st.track_color_for(dragging), self.rect, border_radius=st.radius)

        thumb = self._shown or self.scrollbar.thumb
        pygame.draw.rect(surface, st.thumb_color_for(dragging), self._rect_for(thumb), border_radius=st.radius)

    def _rect_for(self, thumb: ThumbGeometry) -> pygame.Rect:
        size = int(round(thumb.thumb_size))
        offset = int(round(thumb.thumb_offset))
        if self.scrollbar.axis.is_vertical:
            return pygame.Rect(self.rect.x, self.rect.y + offset, self.rect.w, size)
        return pygame.Rect(self.rect.x + offset, self.rect.y, size, self.rect.h)
