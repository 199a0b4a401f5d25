"""Player-controlled fighters: input handling, movement, gravity and terrain effects."""

from __future__ import annotations

import math
from enum import Enum, auto

from .combat import CHARACTER_SIZE, Arsenal, WeaponMode
from .items import Item, Rect, Vec2
from .platforms import GrassPlatform, IcePlatform

JUMP_SPEED = -2.0
ICE_MOVE_SPEED = 0.5
GRAVITY_FACTOR = 0.08
VERTICAL_SUBSTEPS = 6
GROUND_PROBE_DEPTH = 10.0
INVISIBLE_OPACITY = 0.2


class GroundType(Enum):
    """Surface a character is standing on."""

    LAND = auto()
    GRASS = auto()
    ICE = auto()


class Character(Arsenal):
    """A fighter driven by key states, pulled by gravity and blocked by platforms."""

    move_speed = 0.2

    def __init__(self, parent: Item | None = None, pixmap_path: str = "") -> None:
        super().__init__(parent, pixmap_path, CHARACTER_SIZE)
        self.left_down = False
        self.right_down = False
        self.up_down = False
        self.pick_down = False
        self.attack_down = False
        self.picking = False
        self.crouching = False
        self.invisible = False
        self.velocity = Vec2()
        self.gravity = 0.98
        self.on_ground = True
        self.ground_type = GroundType.LAND
        self._last_pick_down = False
        self._attack_held = False

    def bounding_rect(self) -> Rect:
        return Rect(0.0, 0.0, self.width, self.height)

    def settle(self) -> None:
        """Resolve the spawn position: a character born on a platform stays still."""
        self.handle_collision()
        self.update_ground_status()
        if self.on_ground:
            self.velocity = Vec2(self.velocity.x, 0.0)

    def update(self) -> None:
        """Run hit detection and bullet flight for an attack in progress."""
        if self.is_attacking and self._attack_held:
            self.short_injury_detector(self.mode)
        if self.is_attacking:
            if self.rifle is not None:
                self.rifle.bullet_movement()
            if self.sniper is not None:
                self.sniper.bullet_movement()
            self.long_injury_detector(self.mode)

    def _start_attack_if_pressed(self, *, allow_fist_fallback: bool) -> None:
        if self.attack_down and not self.is_attacking and not self._attack_held:
            if allow_fist_fallback:
                self.is_attacking = True
                if not self.any_weapon():
                    self.mode = WeaponMode.FIST
                self.attack_animation(self.mode)
                self._attack_held = True
            elif self.any_weapon():
                self.is_attacking = True
                self.attack_animation(self.mode)
                self._attack_held = True
            else:
                self.mode = WeaponMode.FIST
        if not self.attack_down:
            if self._attack_held:
                self.reversion_animation(self.mode)
            self._attack_held = False

    def process_input(self) -> None:
        """Turn the current key states into motion, attacks and pick-ups for one frame."""
        if self.pick_down:
            self.velocity = Vec2(0.0, self.velocity.y)
            self.update_crouch_pixmap(True)
            self.picking = not self._last_pick_down
            self._last_pick_down = True
            if self.mode in (WeaponMode.RIFLE, WeaponMode.SNIPER):
                self._start_attack_if_pressed(allow_fist_fallback=False)
        else:
            self.update_crouch_pixmap(False)
            self._last_pick_down = False

            speed = self.move_speed_by_ground_type() + self.extra_speed
            if self.left_down:
                self.velocity = Vec2(-speed, self.velocity.y)
                self.scale = Vec2(-1.0, 1.0)
            elif self.right_down:
                self.velocity = Vec2(speed, self.velocity.y)
                self.scale = Vec2(1.0, 1.0)
            else:
                self.velocity = Vec2(0.0, self.velocity.y)

            if self.up_down and self.on_ground:
                self.velocity = Vec2(self.velocity.x, JUMP_SPEED)
                self.on_ground = False

            self._start_attack_if_pressed(allow_fist_fallback=True)

        self.apply_gravity()
        self.update()

        hide = self.ground_type is GroundType.GRASS and self.pick_down
        if hide != self.invisible:
            self.invisible = hide
            self._set_opacity(INVISIBLE_OPACITY if hide else 1.0)

    def _set_opacity(self, opacity: float) -> None:
        self.pixmap_opacity = opacity
        for weapon in (self.knife, self.bomb, self.rifle, self.sniper):
            if weapon is not None:
                weapon.set_weapon_opacity(opacity)

    def apply_gravity(self) -> None:
        if not self.on_ground:
            self.velocity = Vec2(self.velocity.x, self.velocity.y + self.gravity * GRAVITY_FACTOR)
        else:
            self.velocity = Vec2(self.velocity.x, 0.0)

    def handle_collision(self) -> None:
        """Push the character out of walls and land it on platforms it falls into."""
        own = self.scene_rect()
        for other in self.colliding_items():
            if not other.solid:
                continue
            platform = other.scene_rect()
            if not own.intersects(platform):
                continue
            name = getattr(other, "name", "")
            if name == "leftWall":
                if own.left < platform.right:
                    self.pos = Vec2(platform.right + own.width, self.pos.y)
                    self.velocity = Vec2(0.0, self.velocity.y)
            elif name == "rightWall":
                if own.right > platform.left:
                    self.pos = Vec2(platform.left - own.width, self.pos.y)
                    self.velocity = Vec2(0.0, self.velocity.y)
            else:
                self._land_on(other)

    def _land_on(self, platform: Item) -> None:
        if self.velocity.y <= 0:
            return
        own = self.scene_rect()
        rect = platform.scene_rect()
        if rect.top < own.bottom < rect.bottom:
            self.velocity = Vec2(self.velocity.x, 0.0)
            self.on_ground = True

    def update_ground_status(self) -> None:
        """Leave the ground once no platform is underfoot any more."""
        if not self.on_ground:
            return
        own = self.scene_rect()
        for other in self.colliding_items():
            if not other.solid:
                continue
            rect = other.scene_rect()
            if own.intersects(rect) and own.bottom < rect.bottom:
                return
        self.on_ground = False

    def update_position(self, delta_time: float) -> None:
        """Move by velocity over `delta_time` ms, vertically in small sub-steps."""
        self.pos = Vec2(self.pos.x + self.velocity.x * delta_time, self.pos.y)
        self.handle_collision()
        step = self.velocity.y * (delta_time / VERTICAL_SUBSTEPS)
        for _ in range(VERTICAL_SUBSTEPS):
            self.pos = Vec2(self.pos.x, self.pos.y + step)
            self.handle_collision()
            self.update_ground_status()
            self.update_surface_effects()

    def _detect_ground_type(self) -> GroundType:
        if self.scene is None:
            return GroundType.LAND
        own = self.scene_rect()
        start = Vec2(own.center.x, own.bottom)
        end = start + Vec2(0.0, GROUND_PROBE_DEPTH)
        for item in self.scene.items_on_segment(start, end):
            if not item.solid:
                continue
            if isinstance(item, IcePlatform):
                return GroundType.ICE
            if isinstance(item, GrassPlatform):
                return GroundType.GRASS
            return GroundType.LAND
        return GroundType.LAND

    def update_surface_effects(self) -> None:
        """Record the kind of ground directly below the character's feet."""
        self.ground_type = self._detect_ground_type()

    def move_speed_by_ground_type(self) -> float:
        if self.ground_type is GroundType.ICE:
            return ICE_MOVE_SPEED
        return self.move_speed

    def rotation_angle(self) -> float:
        """Facing angle in degrees: 0 when facing right, 180 when facing left."""
        return math.degrees(math.atan2(0.0, self.scale.x))

    def update_crouch_pixmap(self, crouch: bool) -> None:
        """Switch between the standing and the crouching pose."""
        self.crouching = crouch
        self.fist_raised = False

    def update_fist_pixmap(self, fist: bool) -> None:
        """Switch between the standing and the punching pose."""
        self.crouching = False
        self.fist_raised = fist