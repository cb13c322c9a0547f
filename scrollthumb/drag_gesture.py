from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from scrollthumb.axis import Axis
from scrollthumb.position_mapper import (
    Geometry, ThumbGeometry, compute_multiplier, thumb_geometry_for,
    track_click_to_content_position,
)

logger = logging.getLogger(__name__)

PositionChangeFn = Callable[[float], None]
MoveFn = Callable[[float, float], None]


@dataclass
class DragState:
    is_dragging: bool = False
    last_pointer_coordinate: float = 0.0


class DragGestureController:
    """
    Idle/Dragging state machine for one scrollbar thumb.

      - on_track_press(c)  -> Dragging, emits absolute on_position_change(target)
      - on_thumb_press(c)  -> Dragging, emits nothing (relative drag begins)
      - on_pointer_move(c) -> while Dragging, emits on_move(dx, dy) in content units
      - on_pointer_release -> Idle

    Coordinates are track-local along the active axis. Thumb drags only ever
    report deltas; track presses only ever report absolute targets.
    on_move is called as (dx, dy), x first; callbacks written for a (dy, dx) onMove must swap.
    With no geometry yet, or no scroll range, presses still start a gesture
    but nothing is emitted.
    """
    def __init__(
        self,
        axis: Axis,
        geometry: Optional[Geometry] = None,
        *,
        on_position_change: Optional[PositionChangeFn] = None,
        on_move: Optional[MoveFn] = None,
    ) -> None:
        self.axis = Axis.parse(axis)
        self.on_position_change = on_position_change
        self.on_move = on_move
        self.state = DragState()
        self._geometry: Optional[Geometry] = None
        self._thumb = ThumbGeometry(0, 0)
        if geometry is not None:
            self.update_geometry(geometry)

    # --- geometry -----------------------------------------------------------
    def update_geometry(self, geometry: Geometry) -> ThumbGeometry:
        self._geometry = geometry
        self._thumb = thumb_geometry_for(geometry)
        return self._thumb

    @property
    def geometry(self) -> Optional[Geometry]:
        return self._geometry

    @property
    def thumb(self) -> ThumbGeometry:
        return self._thumb

    @property
    def is_dragging(self) -> bool:
        return self.state.is_dragging

    @property
    def multiplier(self) -> Optional[float]:
        g = self._geometry
        if g is None or not g.has_range():
            return None
        return compute_multiplier(g.container_size, g.real_size)

    # --- transitions --------------------------------------------------------
    def on_track_press(self, coord: float) -> None:
        self._begin(coord, "track")
        g = self._geometry
        if g is None or not g.has_range():
            return
        target = track_click_to_content_position(
            coord, g.container_size, g.real_size, self._thumb.thumb_size)
        if self.on_position_change:
            self.on_position_change(target)

    def on_thumb_press(self, coord: float) -> None:
        self._begin(coord, "thumb")

    def on_pointer_move(self, coord: float) -> None:
        if not self.state.is_dragging:
            return
        delta = self.state.last_pointer_coordinate - coord
        self.state.last_pointer_coordinate = coord
        m = self.multiplier
        if m is None:
            return
        dx, dy = self.axis.split(delta / m)
        if self.on_move:
            self.on_move(dx, dy)

    def on_pointer_release(self) -> None:
        if self.state.is_dragging:
            logger.debug("%s drag released at %s", self.axis.value, self.state.last_pointer_coordinate)
        self.state.is_dragging = False

    def reset(self) -> None:
        self.state = DragState()

    # --- helpers ------------------------------------------------------------
    def _begin(self, coord: float, where: str) -> None:
        logger.debug("%s drag started on %s at %s", self.axis.value, where, coord)
        self.state.is_dragging = True
        self.state.last_pointer_coordinate = coord
