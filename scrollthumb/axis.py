from __future__ import annotations
from enum import Enum
from typing import Tuple, Union


class Axis(Enum):
    """
    The single dimension a scrollbar operates on.
    Vertical reads the y coordinate and drives height/top,
    horizontal reads x and drives width/left.
    """
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def parse(cls, value: Union["Axis", str]) -> "Axis":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown axis {value!r} (expected 'vertical' or 'horizontal')") from None

    @property
    def is_vertical(self) -> bool:
        return self is Axis.VERTICAL

    def pick(self, pos: Tuple[float, float]) -> float:
        """Active coordinate of an (x, y) pair."""
        return pos[1] if self.is_vertical else pos[0]

    def split(self, delta: float) -> Tuple[float, float]:
        """(dx, dy) with the inactive axis always 0."""
        return (0.0, delta) if self.is_vertical else (delta, 0.0)
