"""
Pure conversion between content coordinates and thumb coordinates.

Content side: real content size, visible container size and the current
scroll offset. Thumb side: thumb length and its offset along the track.
Nothing here clamps caller input; callers own well-formed geometry
(non-negative sizes, 0 <= content_position <= real - container).
Preconditions are asserted; with asserts stripped (python -O) the documented
fallbacks below apply instead. A min_scroll_size longer than the track is
not an error: the thumb is capped to the track and the first occurrence of
each (min_scroll_size, container_size) pair is logged.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# (min_scroll_size, container_size) pairs already reported
_capped_seen: set = set()


class DegenerateGeometryError(ValueError):
    """Content fits inside the container, so there is no scroll range."""


@dataclass(frozen=True)
class Geometry:
    real_size: float
    container_size: float
    content_position: float = 0.0
    min_scroll_size: float = 0.0

    @property
    def scroll_range(self) -> float:
        return self.real_size - self.container_size

    def has_range(self) -> bool:
        return self.real_size > self.container_size


@dataclass(frozen=True)
class ThumbGeometry:
    thumb_size: float
    thumb_offset: float

    @property
    def end(self) -> float:
        return self.thumb_offset + self.thumb_size


def _warn_capped(min_scroll_size: float, container_size: float) -> None:
    key = (min_scroll_size, container_size)
    if key in _capped_seen:
        return
    _capped_seen.add(key)
    logger.warning("min_scroll_size %s exceeds track %s; capping thumb", min_scroll_size, container_size)


def round_half_up(value: float) -> int:
    """Nearest integer, ties going up (JS Math.round semantics)."""
    return int(math.floor(value + 0.5))


def fractional_position(real_size: float, container_size: float, content_position: float) -> float:
    """
    Proportion (0..1) of the scroll range the content is scrolled to.
    Raises DegenerateGeometryError when there is no range.
    """
    relative = real_size - container_size
    if relative == 0:
        raise DegenerateGeometryError(
            f"no scroll range: real_size == container_size == {container_size}")
    return 1 - (relative - content_position) / relative


def compute_thumb_geometry(real_size: float, container_size: float,
                           content_position: float, min_scroll_size: float = 0.0) -> ThumbGeometry:
    """
    Thumb length is proportional to the visible fraction of the content,
    floored at min_scroll_size. The offset is rounded half-up and never
    pushes the thumb past the end of the track.
    """
    assert real_size >= 0 and container_size >= 0, "sizes must be non-negative"
    if real_size <= container_size:
        # Everything visible: thumb fills the track.
        return ThumbGeometry(thumb_size=container_size, thumb_offset=0)

    assert 0 <= content_position <= real_size - container_size, "content_position out of range"

    proportional = container_size * container_size / real_size
    thumb_size = max(min_scroll_size, proportional)
    if thumb_size > container_size:
        _warn_capped(min_scroll_size, container_size)
        thumb_size = container_size

    free = container_size - thumb_size
    f = fractional_position(real_size, container_size, content_position)
    offset = min(round_half_up(free * f), int(math.floor(free)))
    return ThumbGeometry(thumb_size=thumb_size, thumb_offset=offset)


def thumb_geometry_for(geometry: Geometry) -> ThumbGeometry:
    return compute_thumb_geometry(geometry.real_size, geometry.container_size,
                                  geometry.content_position, geometry.min_scroll_size)


def compute_multiplier(container_size: float, real_size: float) -> float:
    """
    Track pixels per content unit. Moving the thumb by d track pixels
    moves the content by d / multiplier. Empty content yields 1.0.
    """
    assert real_size > 0, "real_size must be positive"
    if real_size <= 0:
        return 1.0
    return container_size / real_size


def track_click_to_content_position(click: float, container_size: float,
                                    real_size: float, thumb_size: float) -> float:
    """
    Content position that centres the thumb under a click at `click`
    (track-local). Not clamped; the content owner saturates it.
    """
    m = compute_multiplier(container_size, real_size)
    return (click - thumb_size / 2) / m
