from __future__ import annotations

import logging

import pygame

from scrollthumb.anim import SmoothedThumb
from scrollthumb.axis import Axis
from scrollthumb.scrollbar import Scrollbar
from scrollthumb.settings import AppCfg
from scrollthumb.ui.pointer import PygamePointerSource
from scrollthumb.ui.widget import ScrollbarWidget

from demo.content_view import ContentView

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Minimal host: a big scrollable grid with one vertical and one
    horizontal scrollbar. The content view owns the offsets; every frame
    its geometry is pushed into the scrollbars, and their notifications
    flow back into the content view.
    """

    def __init__(self, cfg: AppCfg):
        self.cfg = cfg
        pygame.init()
        pygame.display.set_caption(cfg.window.title)

        self._flags = pygame.RESIZABLE | pygame.DOUBLEBUF
        self.screen = pygame.display.set_mode(
            (int(cfg.window.width), int(cfg.window.height)),
            flags=self._flags,
        )
        self.clock = pygame.time.Clock()
        self.running = True

        self.content = ContentView(
            cfg.content.width, cfg.content.height, cfg.content.cell,
            wheel_px=cfg.input.scroll_wheel_pixels,
        )
        self.pointer = PygamePointerSource()

        sb = cfg.scrollbar
        self.widgets: list[ScrollbarWidget] = []
        for axis, jump in ((Axis.VERTICAL, self.content.jump_y), (Axis.HORIZONTAL, self.content.jump_x)):
            bar = Scrollbar(axis, on_position_change=jump, on_move=self.content.move)
            bar.attach(self.pointer)
            smoothing = SmoothedThumb(sb.spring) if sb.smooth_scrolling else None
            self.widgets.append(ScrollbarWidget(pygame.Rect(0, 0, 0, 0), bar, style=sb.style, smoothing=smoothing))

        self._layout(self.screen.get_size())
        logger.info("demo started: content %sx%s", cfg.content.width, cfg.content.height)

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        try:
            while self.running:
                dt = self.clock.tick(self.cfg.fps) / 1000.0

                for e in pygame.event.get():
                    if e.type == pygame.QUIT:
                        self.running = False
                        break
                    if e.type == pygame.VIDEORESIZE:
                        self._resize_to(e.w, e.h)
                        continue
                    if e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                        self.running = False
                        break

                    # presses go to widgets first; moves/releases are global
                    if any(w.handle_event(e) for w in self.widgets):
                        continue
                    if self.pointer.dispatch(e):
                        continue
                    self.content.handle_event(e)

                self._sync_geometry()
                for w in self.widgets:
                    w.update(dt)

                self.screen.fill(self.cfg.window.bg_rgb)
                self.content.draw(self.screen)
                for w in self.widgets:
                    w.draw(self.screen)
                pygame.display.flip()
        finally:
            for w in self.widgets:
                w.scrollbar.destroy()
            pygame.quit()

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _sync_geometry(self) -> None:
        min_size = self.cfg.scrollbar.min_scroll_size
        for w in self.widgets:
            model = self.content.y if w.scrollbar.axis.is_vertical else self.content.x
            # tiny windows: the floor may not exceed the track
            w.scrollbar.update(model.geometry(min(min_size, model.viewport_size)))

    def _layout(self, size: tuple[int, int]) -> None:
        st = self.cfg.scrollbar.style
        gutter = st.thickness + 2 * st.margin
        w, h = size
        viewport = pygame.Rect(0, 0, max(1, w - gutter), max(1, h - gutter))
        self.content.set_viewport(viewport)

        # track length equals the viewport along its axis
        vbar, hbar = self.widgets
        vbar.set_rect(pygame.Rect(viewport.right + st.margin, viewport.y, st.thickness, viewport.h))
        hbar.set_rect(pygame.Rect(viewport.x, viewport.bottom + st.margin, viewport.w, st.thickness))
        self._sync_geometry()

    def _resize_to(self, w: int, h: int) -> None:
        w = max(1, int(w))
        h = max(1, int(h))
        self.screen = pygame.display.set_mode((w, h), flags=self._flags)
        self._layout((w, h))
