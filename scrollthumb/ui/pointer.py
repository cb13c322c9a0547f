from __future__ import annotations

import pygame

from scrollthumb.pointer_source import PointerEventSource


class PygamePointerSource(PointerEventSource):
    """
    Feeds pygame mouse events into the global pointer listeners.
    Call dispatch() for every event the app pumps; presses are not
    handled here (widgets hit-test those themselves).
    """
    def dispatch(self, e: pygame.event.Event) -> bool:
        if e.type == pygame.MOUSEMOTION:
            return self.emit_move(e.pos)
        if e.type == pygame.MOUSEBUTTONUP and getattr(e, "button", 1) == 1:
            return self.emit_release(e.pos)
        return False
