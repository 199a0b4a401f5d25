"""Background maps scaled to fill the scene."""

from __future__ import annotations

from .items import Item, Vec2
from .scene import Scene

BATTLEFIELD_BACKGROUND = "Items/Maps/Battlefield/Background.png"
BATTLEFIELD_SIZE = (1280.0, 720.0)


class Map(Item):
    """A background image that can be fitted to a scene."""

    def __init__(
        self,
        parent: Item | None = None,
        pixmap_path: str = "",
        size: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        super().__init__(parent, pixmap_path, size)

    def scale_to_fit_scene(self, scene: Scene) -> None:
        """Scale uniformly to fit inside the scene and centre the result."""
        scene_rect = scene.scene_rect
        item_rect = self.bounding_rect()
        if item_rect.is_empty:
            raise ValueError("cannot scale a map without an image area")
        factor = min(scene_rect.width / item_rect.width, scene_rect.height / item_rect.height)
        self.scale = Vec2(self.scale.x * factor, self.scale.y * factor)
        self.pos = Vec2(
            (scene_rect.width - item_rect.width * factor) / 2,
            (scene_rect.height - item_rect.height * factor) / 2,
        )

    def floor_height(self) -> float:
        rect = self.scene_rect()
        return rect.top + (rect.top - rect.bottom) * 0.5

    def spawn_pos(self) -> Vec2:
        rect = self.scene_rect()
        return Vec2((rect.left + rect.right) * 0.5, self.floor_height())


class Battlefield(Map):
    """The arena background."""

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, BATTLEFIELD_BACKGROUND, BATTLEFIELD_SIZE)

    def floor_height(self) -> float:
        return self.scene_rect().bottom - 185