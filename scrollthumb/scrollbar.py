from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from scrollthumb.axis import Axis
from scrollthumb.drag_gesture import DragGestureController, MoveFn, PositionChangeFn
from scrollthumb.pointer_source import PointerEventSource, Pos
from scrollthumb.position_mapper import Geometry, ThumbGeometry

logger = logging.getLogger(__name__)


class Scrollbar:
    """
    One scrollbar thumb, independent of any renderer.

    Lifecycle:
      - construct          -> ready for presses
      - update(geometry)   -> every render, returns exact ThumbGeometry
      - attach(source)     -> receive global pointer move/release
      - detach() / destroy -> listeners removed, pending drag discarded

    Screen positions are projected onto the track with `track_origin`,
    which the rendering adapter keeps in sync with the track rect.
    """
    def __init__(
        self,
        axis: Axis,
        geometry: Optional[Geometry] = None,
        *,
        on_position_change: Optional[PositionChangeFn] = None,
        on_move: Optional[MoveFn] = None,
        track_origin: Tuple[float, float] = (0, 0),
    ) -> None:
        self.axis = Axis.parse(axis)
        self.track_origin = track_origin
        self.gesture = DragGestureController(
            self.axis, geometry,
            on_position_change=on_position_change,
            on_move=on_move,
        )
        self._source: Optional[PointerEventSource] = None

    # ----- geometry / outputs -----------------------------------------------
    def update(self, geometry: Geometry) -> ThumbGeometry:
        return self.gesture.update_geometry(geometry)

    @property
    def thumb(self) -> ThumbGeometry:
        return self.gesture.thumb

    @property
    def is_dragging(self) -> bool:
        return self.gesture.is_dragging

    @property
    def attached(self) -> bool:
        return self._source is not None

    def project(self, pos: Pos) -> float:
        return self.axis.pick(pos) - self.axis.pick(self.track_origin)

    # ----- presses (delivered by the adapter's hit testing) ------------------
    def press_track(self, pos: Pos) -> None:
        self.gesture.on_track_press(self.project(pos))

    def press_thumb(self, pos: Pos) -> None:
        self.gesture.on_thumb_press(self.project(pos))

    # ----- global listeners -------------------------------------------------
    def attach(self, source: PointerEventSource) -> None:
        if source is self._source:
            return
        self.detach()
        source.add_listener("move", self._on_source_move)
        source.add_listener("release", self._on_source_release)
        self._source = source
        logger.debug("%s scrollbar attached", self.axis.value)

    def detach(self) -> None:
        source, self._source = self._source, None
        if source is None:
            return
        source.remove_listener("move", self._on_source_move)
        source.remove_listener("release", self._on_source_release)
        logger.debug("%s scrollbar detached", self.axis.value)

    @contextmanager
    def attached_to(self, source: PointerEventSource) -> Iterator["Scrollbar"]:
        self.attach(source)
        try:
            yield self
        finally:
            self.detach()

    def destroy(self) -> None:
        self.detach()
        self.gesture.reset()

    def _on_source_move(self, pos: Pos) -> None:
        self.gesture.on_pointer_move(self.project(pos))

    def _on_source_release(self, pos: Pos) -> None:
        self.gesture.on_pointer_release()
