"""Weapons: knives swung in melee, guns that fire bullets and bombs that are thrown.

Hit detection recognises characters as items whose class sets a true
``combatant`` attribute and that carry a numeric ``health`` attribute.
The item a weapon is attached to is never hurt by it.
"""

from __future__ import annotations

from typing import ClassVar, Iterator

from .items import GravitationalMountableItem, Item, Mountable, Vec2

BULLET_PIXMAP = "Items/Weapons/Bullet.png"
KNIFE_PIXMAP = "Items/Weapons/Knife.png"
RIFLE_PIXMAP = "Items/Weapons/Rifle.png"
SNIPER_PIXMAP = "Items/Weapons/Sniper.png"
BOMB_PIXMAP = "Items/Weapons/Bomb.png"

BULLET_SIZE = (10.0, 4.0)
MUZZLE_OFFSET = Vec2(60.0, 30.0)
BULLET_VELOCITY = Vec2(4.0, 0.0)
THROW_VELOCITY = Vec2(3.0, -3.0)


def _targets(item: Item) -> Iterator[Item]:
    """Characters other than the item's carrier that overlap the item."""
    scene = item.scene
    if scene is None:
        return
    own = item.scene_rect()
    for other in scene.items():
        if (
            getattr(other, "combatant", False)
            and other is not item.parent
            and own.intersects(other.scene_rect())
        ):
            yield other


def _touches_platform(item: Item) -> bool:
    return any(other.solid for other in item.colliding_items())


def _bottom_middle(item: Item) -> Vec2:
    bounds = item.bounding_rect()
    return Vec2(bounds.width / 2, bounds.height)


class Bullet(Item, Mountable):
    """A projectile moving horizontally until it hits a character or a platform."""

    DAMAGE: ClassVar[float] = 30

    def __init__(self, parent: Item | None = None, pixmap_path: str = BULLET_PIXMAP) -> None:
        super().__init__(parent, pixmap_path, BULLET_SIZE)
        self.damage = self.DAMAGE
        self.velocity = Vec2()
        self.spent = False

    def injury_detector(self) -> None:
        """Damage the first character hit, or stop at a platform; either removes the bullet."""
        if self.scene is None:
            return
        target = next(_targets(self), None)
        if target is not None:
            target.health = target.health - self.damage
            self._expire()
            return
        if _touches_platform(self):
            self._expire()

    def update(self) -> None:
        self.unmount()
        self.pos = Vec2(self.pos.x + self.velocity.x, self.pos.y)

    def _expire(self) -> None:
        self.unmount()
        if self.scene is not None:
            self.scene.remove_item(self)
        self.spent = True


class MeleeWeapon(GravitationalMountableItem):
    """A weapon that hurts whatever it overlaps while swung."""

    DAMAGE: ClassVar[float] = 15
    SIZE: ClassVar[tuple[float, float]] = (0.0, 0.0)

    def __init__(self, parent: Item | None = None, pixmap_path: str = "") -> None:
        super().__init__(parent, pixmap_path, self.SIZE)
        self.damage = self.DAMAGE

    def attack(self) -> None:
        """Swing: rotate a quarter turn about the bottom middle."""
        self.transform_origin = _bottom_middle(self)
        self.rotation = 90.0

    def reversion(self) -> None:
        """Return to the upright rest position."""
        self.transform_origin = _bottom_middle(self)
        self.rotation = 0.0

    def injury_detector(self) -> None:
        for target in list(_targets(self)):
            target.health = target.health - self.damage

    def set_weapon_opacity(self, opacity: float) -> None:
        self.pixmap_opacity = opacity


class RangedWeapon(GravitationalMountableItem):
    """A gun firing one bullet at a time from its carrier's position."""

    DAMAGE: ClassVar[float] = 0
    SIZE: ClassVar[tuple[float, float]] = (0.0, 0.0)

    def __init__(self, parent: Item | None = None, pixmap_path: str = "") -> None:
        super().__init__(parent, pixmap_path, self.SIZE)
        self.damage = self.DAMAGE
        self.bullet: Bullet | None = None

    @property
    def spent(self) -> bool:
        """True once the last bullet fired has hit something."""
        return self.bullet is not None and self.bullet.spent

    def attack(self) -> None:
        bullet = Bullet(self, BULLET_PIXMAP)
        bullet.damage = self.damage
        bullet.set_parent_item(self.parent)
        bullet.mount_to_parent()
        bullet.pos = MUZZLE_OFFSET
        bullet.velocity = BULLET_VELOCITY
        self.bullet = bullet

    def injury_detector(self) -> None:
        if self.bullet is not None:
            self.bullet.injury_detector()

    def delete_bullet(self) -> None:
        self.bullet = None

    def bullet_movement(self) -> None:
        if self.bullet is not None:
            self.bullet.update()

    def set_weapon_opacity(self, opacity: float) -> None:
        self.pixmap_opacity = opacity


class ThrowWeapon(GravitationalMountableItem):
    """A weapon launched in an arc that hurts the first character it reaches."""

    DAMAGE: ClassVar[float] = 20
    SIZE: ClassVar[tuple[float, float]] = (0.0, 0.0)

    def __init__(self, parent: Item | None = None, pixmap_path: str = "") -> None:
        super().__init__(parent, pixmap_path, self.SIZE)
        self.damage = self.DAMAGE
        self.spent = False

    def attack(self) -> None:
        self.gravity_handler.velocity = THROW_VELOCITY

    def injury_detector(self) -> None:
        """Damage the first character hit, or stop at a platform; either removes the weapon."""
        if self.scene is None:
            return
        target = next(_targets(self), None)
        if target is not None:
            target.health = target.health - self.damage
            self._expire()
            return
        if _touches_platform(self):
            self._expire()

    def set_weapon_opacity(self, opacity: float) -> None:
        self.pixmap_opacity = opacity

    def _expire(self) -> None:
        self.gravity_handler.velocity = Vec2()
        self.gravity_handler.on_ground = True
        if self.scene is not None:
            self.scene.remove_item(self)
        self.spent = True


class Knife(MeleeWeapon):
    SIZE = (16.0, 40.0)

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, KNIFE_PIXMAP)

    def mount_to_parent(self) -> None:
        Mountable.mount_to_parent(self)
        self.pos = Vec2(30.0, 5.0)
        self.transform_origin = _bottom_middle(self)
        self.rotation = 0.0

    def unmount(self) -> None:
        self.gravity_handler.on_ground = False
        Mountable.unmount(self)
        self.rotation = 0.0


class Rifle(RangedWeapon):
    DAMAGE = 30
    SIZE = (60.0, 20.0)

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, RIFLE_PIXMAP)

    def mount_to_parent(self) -> None:
        Mountable.mount_to_parent(self)
        self.pos = Vec2(5.0, 30.0)
        self.transform_origin = _bottom_middle(self)
        self.rotation = 0.0

    def unmount(self) -> None:
        Mountable.unmount(self)
        self.rotation = 0.0


class Sniper(RangedWeapon):
    DAMAGE = 50
    SIZE = (80.0, 20.0)

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, SNIPER_PIXMAP)

    def mount_to_parent(self) -> None:
        Mountable.mount_to_parent(self)
        self.pos = Vec2(5.0, 30.0)
        self.transform_origin = _bottom_middle(self)
        self.rotation = 0.0

    def unmount(self) -> None:
        Mountable.unmount(self)
        self.rotation = 0.0


class Bomb(ThrowWeapon):
    SIZE = (24.0, 24.0)

    def __init__(self, parent: Item | None = None) -> None:
        super().__init__(parent, BOMB_PIXMAP)

    def mount_to_parent(self) -> None:
        Mountable.mount_to_parent(self)
        self.pos = Vec2(30.0, 30.0)
        self.transform_origin = _bottom_middle(self)
        self.rotation = 0.0

    def unmount(self) -> None:
        self.gravity_handler.on_ground = False
        Mountable.unmount(self)
        self.rotation = 0.0