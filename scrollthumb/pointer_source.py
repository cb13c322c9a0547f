from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

Pos = Tuple[float, float]
PointerListener = Callable[[Pos], None]

KINDS = ("move", "release")


class PointerEventSource:
    """
    Process-wide pointer events (what a hosting document would deliver).
    Widgets register move/release listeners while they are live and
    remove them on teardown.
    """
    def __init__(self) -> None:
        self._listeners: Dict[str, List[PointerListener]] = {k: [] for k in KINDS}

    def add_listener(self, kind: str, fn: PointerListener) -> None:
        bucket = self._bucket(kind)
        if fn not in bucket:
            bucket.append(fn)
            logger.debug("added %s listener %r", kind, fn)

    def remove_listener(self, kind: str, fn: PointerListener) -> None:
        bucket = self._bucket(kind)
        if fn in bucket:
            bucket.remove(fn)
            logger.debug("removed %s listener %r", kind, fn)

    def listener_count(self, kind: Optional[str] = None) -> int:
        if kind is None:
            return sum(len(v) for v in self._listeners.values())
        return len(self._bucket(kind))

    def emit_move(self, pos: Pos) -> bool:
        return self._emit("move", pos)

    def emit_release(self, pos: Pos) -> bool:
        return self._emit("release", pos)

    # --- helpers ------------------------------------------------------------
    def _emit(self, kind: str, pos: Pos) -> bool:
        # snapshot: listeners may deregister while being called
        listeners = list(self._listeners[kind])
        for fn in listeners:
            fn(pos)
        return bool(listeners)

    def _bucket(self, kind: str) -> List[PointerListener]:
        if kind not in self._listeners:
            raise ValueError(f"unknown pointer event kind {kind!r} (expected one of {KINDS})")
        return self._listeners[kind]
