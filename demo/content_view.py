from __future__ import annotations
from typing import Optional

import pygame

from scrollthumb.scroll_model import ScrollModel


class ContentView:
    """
    A large checkerboard of numbered cells seen through a viewport.
    Owns the real scroll offsets (one ScrollModel per axis); scrollbars
    only ever ask it to move.
    """
    def __init__(self, width: int, height: int, cell: int = 80, *, wheel_px: int = 40) -> None:
        self.cell = max(8, int(cell))
        self.wheel_px = wheel_px
        self.x = ScrollModel(content_size=width)
        self.y = ScrollModel(content_size=height)
        self.viewport = pygame.Rect(0, 0, 0, 0)
        self._font: Optional[pygame.font.Font] = None

    def set_viewport(self, rect: pygame.Rect) -> None:
        self.viewport = pygame.Rect(rect)
        self.x.resize(self.x.content_size, self.viewport.w)
        self.y.resize(self.y.content_size, self.viewport.h)

    # --- scrollbar callbacks -------------------------------------------------
    def jump_x(self, target: float) -> None: self.x.set_position(target)
    def jump_y(self, target: float) -> None: self.y.set_position(target)

    def move(self, dx: float, dy: float) -> None:
        self.x.apply_move(dx)
        self.y.apply_move(dy)

    # --- input --------------------------------------------------------------
    def handle_event(self, e: pygame.event.Event) -> bool:
        if e.type != pygame.MOUSEWHEEL:
            return False
        if not self.viewport.collidepoint(pygame.mouse.get_pos()):
            return False
        # wheel up (y > 0) reveals content above
        self.y.scroll(-e.y * self.wheel_px)
        self.x.scroll(e.x * self.wheel_px)
        return True

    # --- draw ---------------------------------------------------------------
    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None:
            self._font = pygame.font.Font(None, max(12, self.cell // 4))
        vp = self.viewport
        prev_clip = surface.get_clip()
        surface.set_clip(vp)

        ox, oy = int(round(self.x.offset)), int(round(self.y.offset))
        c = self.cell
        cols = int(self.x.content_size) // c + 1
        first_col, first_row = ox // c, oy // c
        last_col = min(cols - 1, (ox + vp.w) // c)
        last_row = min(int(self.y.content_size) // c, (oy + vp.h) // c)

        for row in range(first_row, last_row + 1):
            for col in range(first_col, last_col + 1):
                r = pygame.Rect(vp.x + col * c - ox, vp.y + row * c - oy, c, c)
                shade = 34 if (row + col) % 2 else 24
                pygame.draw.rect(surface, (shade, shade + 2, shade + 6), r)
                label = self._font.render(f"{row},{col}", True, (150, 150, 160))
                surface.blit(label, label.get_rect(center=r.center))

        surface.set_clip(prev_clip)
