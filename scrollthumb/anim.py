"""
Spring smoothing for the thumb geometry stream.

This is presentation only: it sits between Scrollbar.thumb (exact values)
and the renderer. Springs are integrated in fixed steps so the result
does not depend on frame rate.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from scrollthumb.position_mapper import ThumbGeometry

STEP = 1.0 / 60.0
MAX_STEPS = 10  # after a long stall, jump instead of replaying seconds of motion


@dataclass
class SpringConfig:
    stiffness: float = 170.0
    damping: float = 26.0
    precision: float = 0.01


@dataclass
class Spring:
    config: SpringConfig = field(default_factory=SpringConfig)
    value: float | None = None
    velocity: float = 0.0
    _carry: float = 0.0
    _target: float | None = None

    @property
    def at_rest(self) -> bool:
        return self.value is not None and self.velocity == 0.0 and self.value == self._target

    def snap(self, value: float) -> float:
        self.value = float(value)
        self._target = self.value
        self.velocity = 0.0
        self._carry = 0.0
        return self.value

    def update(self, dt: float, target: float) -> float:
        self._target = float(target)
        if self.value is None:
            return self.snap(target)

        self._carry += max(0.0, dt)
        steps = int(self._carry / STEP)
        self._carry -= steps * STEP
        if steps > MAX_STEPS:
            return self.snap(target)

        k, c, eps = self.config.stiffness, self.config.damping, self.config.precision
        for _ in range(steps):
            force = -k * (self.value - target) - c * self.velocity
            self.velocity += force * STEP
            self.value += self.velocity * STEP
            if abs(self.velocity) < eps and abs(self.value - target) < eps:
                return self.snap(target)
        if self.value == target:
            self.velocity = 0.0
        return self.value


class SmoothedThumb:
    """Springs both thumb fields toward the exact geometry."""
    def __init__(self, config: SpringConfig | None = None):
        cfg = config or SpringConfig()
        self._size = Spring(cfg)
        self._offset = Spring(cfg)

    @property
    def at_rest(self) -> bool:
        return self._size.at_rest and self._offset.at_rest

    def snap(self, target: ThumbGeometry) -> ThumbGeometry:
        return ThumbGeometry(self._size.snap(target.thumb_size), self._offset.snap(target.thumb_offset))

    def update(self, dt: float, target: ThumbGeometry) -> ThumbGeometry:
        return ThumbGeometry(
            self._size.update(dt, target.thumb_size),
            self._offset.update(dt, target.thumb_offset),
        )
