"""A scene holding a tree of items and driving the per-frame game loop."""

from __future__ import annotations

import time

from .items import Item, Rect, Vec2

FRAME_INTERVAL_MS = 1000 // 90


def _segment_hits(rect: Rect, start: Vec2, end: Vec2) -> bool:
    if rect.is_empty:
        return False
    dx, dy = end.x - start.x, end.y - start.y
    t0, t1 = 0.0, 1.0
    for p, q in (
        (-dx, start.x - rect.left),
        (dx, rect.right - start.x),
        (-dy, start.y - rect.top),
        (dy, rect.bottom - start.y),
    ):
        if p == 0:
            if q < 0:
                return False
            continue
        t = q / p
        if p < 0:
            t0 = max(t0, t)
        else:
            t1 = min(t1, t)
        if t0 > t1:
            return False
    return True


class Scene:
    """Container of items with a fixed rectangle and a frame update hook."""

    def __init__(self, width: float = 0.0, height: float = 0.0) -> None:
        self.width = width
        self.height = height
        self.delta_time = 0
        self._last_time: int | None = None
        self._roots: list[Item] = []

    @property
    def scene_rect(self) -> Rect:
        return Rect(0.0, 0.0, self.width, self.height)

    def add_item(self, item: Item) -> None:
        """Add an item, with its children, as a top-level item of this scene."""
        if item.scene is self and item.parent is None:
            return
        if item.scene is not None and item.scene is not self:
            item.scene.remove_item(item)
        item._detach()
        self._roots.append(item)
        item._set_scene(self)

    def remove_item(self, item: Item) -> None:
        """Remove an item and its children; a child item is detached from its parent."""
        if item.scene is not self:
            return
        item._detach()
        item._set_scene(None)

    def items(self) -> list[Item]:
        """All items, topmost first: later items above earlier, children above parents."""
        ordered: list[Item] = []
        for root in self._roots:
            ordered.append(root)
            ordered.extend(root.descendants())
        ordered.reverse()
        return ordered

    def colliding_items(self, item: Item) -> list[Item]:
        own = item.scene_rect()
        return [
            other
            for other in self.items()
            if other is not item and own.intersects(other.scene_rect())
        ]

    def items_on_segment(self, start: Vec2, end: Vec2) -> list[Item]:
        """Items whose scene rectangle is crossed by the segment, topmost first."""
        return [item for item in self.items() if _segment_hits(item.scene_rect(), start, end)]

    def update(self, now: float | None = None) -> None:
        """Run one frame; `now` is a timestamp in milliseconds."""
        if now is None:
            now = time.monotonic() * 1000
        self.delta_time = 0 if self._last_time is None else now - self._last_time
        self._last_time = now
        self.process_input()
        self.process_movement()
        self.process_picking()

    def process_input(self) -> None:
        """Hook for reading player input."""

    def process_movement(self) -> None:
        """Hook for moving items."""

    def process_picking(self) -> None:
        """Hook for picking up items."""