"""Weapon handling, healing and hit detection for fighting characters."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar

from .items import GravitationalMountableItem, Item
from .kits import Adrenaline, Bandage, Medkit
from .weapons import Bomb, Knife, RangedWeapon, Rifle, Sniper

CHARACTER_SIZE = (46.0, 90.0)
MAX_HEALTH = 100.0
FIST_DAMAGE = 10.0
BANDAGE_HEAL = 30.0
HEAL_PER_TICK = 6.0
HEAL_INTERVAL_MS = 1000
ADRENALINE_DURATION_MS = 5000
ADRENALINE_SPEED_BONUS = 0.2

_WEAPON_SLOTS = ("knife", "bomb", "rifle", "sniper")


class WeaponMode(IntEnum):
    """What a character attacks with."""

    FIST = 0
    KNIFE = 1
    BOMB = 2
    RIFLE = 3
    SNIPER = 4


class Arsenal(Item):
    """An item that carries at most one weapon, has health and deals blows.

    Timed effects run on an internal clock moved forward by ``advance_time``.
    """

    combatant: ClassVar[bool] = True

    def __init__(
        self,
        parent: Item | None = None,
        pixmap_path: str = "",
        size: tuple[float, float] = CHARACTER_SIZE,
    ) -> None:
        super().__init__(parent, pixmap_path, size)
        self.width, self.height = size
        self._health = MAX_HEALTH
        self.mode = WeaponMode.FIST
        self.is_attacking = False
        self.fist_raised = False
        self.knife: Knife | None = None
        self.bomb: Bomb | None = None
        self.rifle: Rifle | None = None
        self.sniper: Sniper | None = None
        self.rifle_has_bullet = False
        self.sniper_has_bullet = False
        self.extra_speed = 0.0
        self._clock = 0
        self._next_heal_at: int | None = None
        self._heal_stop_at: int | None = None
        self._speed_reset_at: int | None = None

    @property
    def health(self) -> float:
        return self._health

    @health.setter
    def health(self, value: float) -> None:
        self._health = min(value, MAX_HEALTH)

    @property
    def health_bar_width(self) -> float:
        """Width of the health bar drawn above the character."""
        return max(0.0, self.width * self._health / MAX_HEALTH)

    def update_fist_pixmap(self, fist: bool) -> None:
        """Switch between the standing and the punching pose."""
        self.fist_raised = fist

    def any_weapon(self) -> bool:
        return any(getattr(self, slot) is not None for slot in _WEAPON_SLOTS)

    def _drop_weapon(self, incoming: str) -> None:
        for slot in _WEAPON_SLOTS:
            weapon: GravitationalMountableItem | None = getattr(self, slot)
            if weapon is None:
                continue
            if isinstance(weapon, RangedWeapon):
                weapon.delete_bullet()
            weapon.opacity = 1.0 if slot == incoming else 0.0
            weapon.unmount()
            weapon.set_parent_item(self.parent)
            if weapon.scene is not None:
                weapon.scene.remove_item(weapon)
            setattr(self, slot, None)
            return

    def _equip(self, slot: str, weapon: GravitationalMountableItem, mode: WeaponMode) -> None:
        self._drop_weapon(slot)
        weapon.set_parent_item(self)
        weapon.mount_to_parent()
        setattr(self, slot, weapon)
        self.mode = mode

    def pickup_knife(self, knife: Knife) -> Knife:
        self._equip("knife", knife, WeaponMode.KNIFE)
        return knife

    def pickup_bomb(self, bomb: Bomb) -> Bomb:
        self._equip("bomb", bomb, WeaponMode.BOMB)
        return bomb

    def pickup_rifle(self, rifle: Rifle) -> Rifle:
        self.rifle_has_bullet = True
        self._equip("rifle", rifle, WeaponMode.RIFLE)
        return rifle

    def pickup_sniper(self, sniper: Sniper) -> Sniper:
        self.sniper_has_bullet = True
        self._equip("sniper", sniper, WeaponMode.SNIPER)
        return sniper

    @staticmethod
    def _consume(kit: Item) -> None:
        if kit.scene is not None:
            kit.scene.remove_item(kit)

    def pickup_bandage(self, bandage: Bandage) -> None:
        """Heal by a fixed amount and use the bandage up."""
        self.health = min(self._health + BANDAGE_HEAL, MAX_HEALTH)
        self._consume(bandage)

    def pickup_medkit(self, medkit: Medkit) -> None:
        """Heal fully and use the medkit up."""
        self.health = MAX_HEALTH
        self._consume(medkit)

    def pickup_adrenaline(self, adrenaline: Adrenaline) -> None:
        """Heal at once and then every second, and move faster, for a while."""
        self._consume(adrenaline)
        self.health = self._health + HEAL_PER_TICK
        self._next_heal_at = self._clock + HEAL_INTERVAL_MS
        self._heal_stop_at = self._clock + ADRENALINE_DURATION_MS
        self.extra_speed = ADRENALINE_SPEED_BONUS
        self._speed_reset_at = self._clock + ADRENALINE_DURATION_MS

    def advance_time(self, ms: int) -> None:
        """Move the effect clock forward, applying every effect that falls due."""
        if ms < 0:
            raise ValueError("time cannot run backwards")
        self._clock += ms
        while self._next_heal_at is not None and self._next_heal_at <= self._clock:
            if self._heal_stop_at is not None and self._next_heal_at >= self._heal_stop_at:
                self._next_heal_at = None
                self._heal_stop_at = None
                break
            self.health = self._health + HEAL_PER_TICK
            self._next_heal_at += HEAL_INTERVAL_MS
        if self._speed_reset_at is not None and self._speed_reset_at <= self._clock:
            self.extra_speed = 0.0
            self._speed_reset_at = None

    def attack_animation(self, mode: WeaponMode) -> None:
        if mode == WeaponMode.FIST:
            self.update_fist_pixmap(True)
        elif mode == WeaponMode.KNIFE:
            if self.knife is not None:
                self.knife.attack()
        elif mode == WeaponMode.BOMB:
            if self.bomb is not None:
                self.bomb.attack()
                self.bomb.unmount()
        elif mode == WeaponMode.RIFLE:
            if self.rifle is not None and self.rifle_has_bullet:
                self.rifle.attack()
                self.rifle_has_bullet = False
        elif mode == WeaponMode.SNIPER:
            if self.sniper is not None and self.sniper_has_bullet:
                self.sniper.attack()
                self.sniper_has_bullet = False

    def reversion_animation(self, mode: WeaponMode) -> None:
        if mode == WeaponMode.KNIFE and self.knife is not None:
            self.knife.reversion()

    def short_injury_detector(self, mode: WeaponMode) -> None:
        """Hit detection for fist and knife blows."""
        if mode == WeaponMode.FIST:
            self.fist_injury_detector()
        elif mode == WeaponMode.KNIFE:
            if not self.is_attacking:
                return
            if self.knife is not None:
                self.knife.injury_detector()
            self.is_attacking = False

    def long_injury_detector(self, mode: WeaponMode) -> None:
        """Hit detection for thrown bombs and fired bullets."""
        if mode == WeaponMode.BOMB:
            if self.bomb is not None:
                self.bomb.injury_detector()
                if self.bomb.spent:
                    self.bomb = None
            if self.bomb is None:
                self.is_attacking = False
        elif mode in (WeaponMode.RIFLE, WeaponMode.SNIPER):
            slot = "rifle" if mode == WeaponMode.RIFLE else "sniper"
            gun: RangedWeapon | None = getattr(self, slot)
            if gun is None:
                return
            if not gun.spent:
                gun.injury_detector()
            if gun.spent:
                self.is_attacking = False
                if gun.scene is not None:
                    gun.scene.remove_item(gun)
                setattr(self, slot, None)

    def fist_injury_detector(self) -> None:
        """Punch the first other character found; it is hurt only if it overlaps."""
        if not self.is_attacking or self.scene is None:
            return
        own = self.scene_rect()
        for other in self.scene.items():
            if not getattr(other, "combatant", False) or other is self:
                continue
            if own.intersects(other.scene_rect()):
                other.health = other.health - FIST_DAMAGE
            self.is_attacking = False
            return