"""The battle arena: two fighters, terrain, walls and items that drop from the sky."""

from __future__ import annotations

import math
import random
from enum import Enum, auto
from typing import Callable

from .character import Character
from .factory import create_item, item_types
from .fighters import Enemy, Link
from .items import GravitationalMountableItem, Mountable, Vec2
from .kits import Adrenaline, Bandage, Medkit
from .maps import Battlefield
from .platforms import AirPlatform, GrassPlatform, IcePlatform, LandPlatform
from .scene import Scene
from .weapons import Bomb, Knife, Rifle, Sniper

SCENE_WIDTH = 1280.0
SCENE_HEIGHT = 720.0
SPAWN_INTERVAL_MS = 15000
SPAWN_X_RANGE = (100, 1180)
PICK_DISTANCE = 100.0

RED_WINS = 0
BLUE_WINS = 1


class Key(Enum):
    """Keys the battle reacts to."""

    A = auto()
    LEFT = auto()
    D = auto()
    RIGHT = auto()
    W = auto()
    UP = auto()
    S = auto()
    DOWN = auto()
    E = auto()
    ZERO = auto()


_KEY_BINDINGS: dict[Key, tuple[str, str]] = {
    Key.A: ("link", "left_down"),
    Key.LEFT: ("enemy", "left_down"),
    Key.D: ("link", "right_down"),
    Key.RIGHT: ("enemy", "right_down"),
    Key.W: ("link", "up_down"),
    Key.UP: ("enemy", "up_down"),
    Key.S: ("link", "pick_down"),
    Key.DOWN: ("enemy", "pick_down"),
    Key.E: ("link", "attack_down"),
    Key.ZERO: ("enemy", "attack_down"),
}


def _platform(
    kind: type[AirPlatform], x: float, y: float, width: float, height: float, name: str = ""
) -> AirPlatform:
    platform = kind()
    platform.pos = Vec2(x, y)
    platform.set_size(width, height)
    platform.name = name
    return platform


class BattleScene(Scene):
    """The arena scene, running the fight frame by frame."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(SCENE_WIDTH, SCENE_HEIGHT)
        self.rng = rng if rng is not None else random.Random()
        self.gameover_listeners: list[Callable[[int], None]] = []
        self._spawn_clock = 0.0

        self.map = Battlefield()
        self.map.scale_to_fit_scene(self)
        self.add_item(self.map)

        self.link = Link()
        self.enemy = Enemy()
        self.add_item(self.link)
        self.add_item(self.enemy)
        self.link.pos = Vec2(540.0, 535.0)
        self.enemy.pos = Vec2(740.0, 535.0)

        self.ground = _platform(AirPlatform, 0, 625, 1280, 95)
        self.ice_left = _platform(IcePlatform, 160, 395, 355, 60)
        self.grass_right = _platform(GrassPlatform, 770, 395, 355, 60)
        self.land_middle = _platform(LandPlatform, 465, 165, 355, 60)
        for platform in (self.ground, self.ice_left, self.grass_right, self.land_middle):
            self.add_item(platform)

        self.left_wall = _platform(AirPlatform, 0, 0, 10, 720, "leftWall")
        self.add_item(self.left_wall)
        self.right_wall = _platform(AirPlatform, 1270, 0, 10, 720, "rightWall")
        self.add_item(self.right_wall)

        for fighter in self.fighters:
            fighter.settle()

    @property
    def fighters(self) -> tuple[Character, Character]:
        return (self.link, self.enemy)

    def process_input(self) -> None:
        super().process_input()
        for fighter in self.fighters:
            fighter.process_input()

    def process_movement(self) -> None:
        super().process_movement()
        for fighter in self.fighters:
            fighter.update_position(self.delta_time)

    def process_picking(self) -> None:
        super().process_picking()
        for fighter in self.fighters:
            if fighter.picking:
                mountable = self.find_nearest_unmounted(fighter.pos, PICK_DISTANCE)
                if mountable is not None:
                    self.pickup_mountable(fighter, mountable)

    def _set_key(self, key: Key, pressed: bool) -> bool:
        binding = _KEY_BINDINGS.get(key)
        if binding is None:
            return False
        who, flag = binding
        setattr(getattr(self, who), flag, pressed)
        return True

    def key_press(self, key: Key) -> bool:
        """Mark a key as held; returns whether the battle uses that key."""
        return self._set_key(key, True)

    def key_release(self, key: Key) -> bool:
        """Mark a key as released; returns whether the battle uses that key."""
        return self._set_key(key, False)

    def update(self, now: float | None = None) -> None:
        """Check for a winner, run one frame, move free items and spawn new ones when due."""
        self.check_game_over()
        super().update(now)
        elapsed = max(self.delta_time, 0)
        for fighter in self.fighters:
            fighter.advance_time(elapsed)
        for item in self.items():
            if isinstance(item, Mountable) and not item.mounted and item.scene is self:
                item.update()
        self._spawn_clock += elapsed
        while self._spawn_clock >= SPAWN_INTERVAL_MS:
            self._spawn_clock -= SPAWN_INTERVAL_MS
            self.spawn_random_item()

    def find_nearest_unmounted(
        self, pos: Vec2, threshold: float = math.inf
    ) -> Mountable | None:
        """The free mountable item closest to `pos`, if any lies nearer than `threshold`."""
        nearest: Mountable | None = None
        best = threshold
        for item in self.items():
            if isinstance(item, Mountable) and not item.mounted:
                distance = pos.distance_to(item.pos)
                if distance < best:
                    best = distance
                    nearest = item
        return nearest

    @staticmethod
    def pickup_mountable(character: Character, mountable: Mountable) -> Mountable | None:
        """Let a character take an item; returns what the character now holds of it."""
        if isinstance(mountable, Knife):
            return character.pickup_knife(mountable)
        if isinstance(mountable, Bomb):
            return character.pickup_bomb(mountable)
        if isinstance(mountable, Rifle):
            return character.pickup_rifle(mountable)
        if isinstance(mountable, Sniper):
            return character.pickup_sniper(mountable)
        if isinstance(mountable, Bandage):
            return character.pickup_bandage(mountable)
        if isinstance(mountable, Medkit):
            return character.pickup_medkit(mountable)
        if isinstance(mountable, Adrenaline):
            return character.pickup_adrenaline(mountable)
        return None

    def spawn_random_item(self) -> GravitationalMountableItem:
        """Drop an item of a random type at a random place along the top edge."""
        types = item_types()
        item_type = types[self.rng.randrange(len(types))]
        item = create_item(item_type)
        item.pos = Vec2(float(self.rng.randrange(*SPAWN_X_RANGE)), 0.0)
        self.add_item(item)
        item.unmount()
        return item

    def check_game_over(self) -> int | None:
        """Report the winner to every listener once a fighter has no health left."""
        if self.link.health <= 0:
            winner = RED_WINS
        elif self.enemy.health <= 0:
            winner = BLUE_WINS
        else:
            return None
        for listener in list(self.gameover_listeners):
            listener(winner)
        return winner