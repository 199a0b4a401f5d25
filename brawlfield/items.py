"""Geometry primitives and the base classes for everything placed on the battlefield."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, Iterable, Iterator

if TYPE_CHECKING:
    from .scene import Scene


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance between two points."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def bounding(cls, points: Iterable[Vec2]) -> Rect:
        """The smallest rectangle holding every given point."""
        pts = list(points)
        if not pts:
            return cls()
        left = min(p.x for p in pts)
        top = min(p.y for p in pts)
        right = max(p.x for p in pts)
        bottom = max(p.y for p in pts)
        return cls(left, top, right - left, bottom - top)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def corners(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        return (
            Vec2(self.left, self.top),
            Vec2(self.right, self.top),
            Vec2(self.right, self.bottom),
            Vec2(self.left, self.bottom),
        )

    def intersects(self, other: Rect) -> bool:
        """True when both rectangles share an area; touching edges do not count."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def translated(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


class ItemType(Enum):
    """Kinds of item that can be spawned onto the field."""

    KNIFE = auto()
    BOMB = auto()
    RIFLE = auto()
    SNIPER = auto()
    BANDAGE = auto()
    MEDKIT = auto()
    ADRENALINE = auto()


class Item:
    """A node of the scene graph with a position, an optional image and children."""

    solid: ClassVar[bool] = False

    def __init__(
        self,
        parent: Item | None = None,
        pixmap_path: str = "",
        size: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self.pixmap_path = pixmap_path
        self.pixmap_size = Vec2(*size)
        self.pos = Vec2()
        self.rotation = 0.0
        self.transform_origin = Vec2()
        self.scale = Vec2(1.0, 1.0)
        self.opacity = 1.0
        self.pixmap_opacity = 1.0
        self.parent: Item | None = None
        self.scene: Scene | None = None
        self._children: list[Item] = []
        if parent is not None:
            self.set_parent_item(parent)

    @property
    def children(self) -> tuple[Item, ...]:
        return tuple(self._children)

    def bounding_rect(self) -> Rect:
        """The local rectangle covered by the item's image, empty without one."""
        if self.pixmap_path:
            return Rect(0.0, 0.0, self.pixmap_size.x, self.pixmap_size.y)
        return Rect()

    def map_to_scene(self, point: Vec2) -> Vec2:
        """Map a point from item coordinates to scene coordinates."""
        p = point
        if self.rotation:
            rad = math.radians(self.rotation)
            cos, sin = math.cos(rad), math.sin(rad)
            origin = self.transform_origin
            dx, dy = p.x - origin.x, p.y - origin.y
            p = Vec2(origin.x + dx * cos - dy * sin, origin.y + dx * sin + dy * cos)
        p = Vec2(p.x * self.scale.x, p.y * self.scale.y) + self.pos
        if self.parent is not None:
            return self.parent.map_to_scene(p)
        return p

    def map_rect_to_scene(self, rect: Rect) -> Rect:
        return Rect.bounding(self.map_to_scene(c) for c in rect.corners())

    def scene_pos(self) -> Vec2:
        return self.map_to_scene(Vec2())

    def scene_rect(self) -> Rect:
        """The bounding rectangle in scene coordinates."""
        return self.map_rect_to_scene(self.bounding_rect())

    def descendants(self) -> Iterator[Item]:
        for child in self._children:
            yield child
            yield from child.descendants()

    def set_parent_item(self, parent: Item | None) -> None:
        """Reparent the item; it follows its new parent into that parent's scene."""
        if parent is self.parent:
            return
        if parent is self or (parent is not None and parent in set(self.descendants())):
            raise ValueError("an item cannot become a child of itself or its descendants")
        scene = parent.scene if parent is not None else self.scene
        self._detach()
        if parent is not None:
            parent._children.append(self)
            self.parent = parent
        elif scene is not None:
            scene._roots.append(self)
        self._set_scene(scene)

    def colliding_items(self) -> list[Item]:
        if self.scene is None:
            return []
        return self.scene.colliding_items(self)

    def _detach(self) -> None:
        if self.parent is not None:
            self.parent._children.remove(self)
            self.parent = None
        elif self.scene is not None and self in self.scene._roots:
            self.scene._roots.remove(self)

    def _set_scene(self, scene: Scene | None) -> None:
        self.scene = scene
        for child in self._children:
            child._set_scene(scene)


class Mountable(ABC):
    """Something that can be carried by a character or lie free on the field."""

    mounted: bool = False

    def mount_to_parent(self) -> None:
        self.mounted = True

    def unmount(self) -> None:
        self.mounted = False

    @abstractmethod
    def update(self) -> None:
        """Advance the item by one frame while it lies free."""


@dataclass
class Gravitational:
    """Velocity and ground state of a body pulled down by gravity."""

    gravity: float = 0.098
    on_ground: bool = False
    velocity: Vec2 = field(default_factory=Vec2)

    def apply_gravity(self) -> None:
        if not self.on_ground:
            self.velocity = Vec2(self.velocity.x, self.velocity.y + self.gravity)


class GravitationalMountableItem(Item, Mountable):
    """A mountable item that falls until it lands on a platform."""

    def __init__(
        self,
        parent: Item | None = None,
        pixmap_path: str = "",
        size: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        super().__init__(parent, pixmap_path, size)
        self.gravity_handler = Gravitational()

    def update(self) -> None:
        self.gravity_handler.apply_gravity()
        self.pos = self.pos + self.gravity_handler.velocity
        for other in self.colliding_items():
            if not other.solid:
                continue
            own = self.scene_rect()
            platform = other.scene_rect()
            if platform.top <= own.bottom <= platform.bottom:
                self.gravity_handler.velocity = Vec2()
                self.gravity_handler.on_ground = True
                self.rotation = 0.0
                return