"""The game window: draws the battle, feeds it keys and announces the winner."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .battle import BLUE_WINS, RED_WINS, BattleScene, Key  # noqa: E402
from .combat import Arsenal  # noqa: E402
from .fighters import Enemy, Link  # noqa: E402
from .items import Item, Rect  # noqa: E402
from .maps import Map  # noqa: E402
from .platforms import AirPlatform, GrassPlatform, IcePlatform, LandPlatform  # noqa: E402
from .weapons import Bullet  # noqa: E402

ASSET_DIR = Path(__file__).with_name("assets")
WINDOW_TITLE = "brawlfield"
GAMEOVER_TITLE = "游戏结束"
FPS = 90

_MESSAGES = {
    RED_WINS: "红方胜利！",
    BLUE_WINS: "蓝方胜利！",
}

_KEYMAP = {
    pygame.K_a: Key.A,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_d: Key.D,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_w: Key.W,
    pygame.K_UP: Key.UP,
    pygame.K_s: Key.S,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_e: Key.E,
    pygame.K_0: Key.ZERO,
    pygame.K_KP0: Key.ZERO,
}

_FALLBACK_COLOURS: tuple[tuple[type, tuple[int, int, int]], ...] = (
    (Link, (60, 110, 230)),
    (Enemy, (220, 60, 60)),
    (IcePlatform, (170, 220, 250)),
    (GrassPlatform, (70, 170, 70)),
    (LandPlatform, (150, 110, 70)),
    (Map, (40, 45, 60)),
    (Bullet, (250, 230, 80)),
)
_DEFAULT_COLOUR = (220, 200, 120)
_HEALTH_BAR_COLOUR = (220, 30, 30)
_CJK_FONTS = "notosanscjksc,notosanscjk,microsoftyahei,simhei,wenquanyizenhei,pingfangsc"


def translate_key(pygame_key: int) -> Key | None:
    """The battle key for a pygame key code, or None for keys the battle ignores."""
    return _KEYMAP.get(pygame_key)


def winner_message(winner: int) -> str | None:
    """The announcement for a winner code, or None for an unknown code."""
    return _MESSAGES.get(winner)


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(
        round(rect.x), round(rect.y), max(1, round(rect.width)), max(1, round(rect.height))
    )


def _mirrored(item: Item) -> bool:
    sign = 1.0
    node: Item | None = item
    while node is not None:
        sign *= 1.0 if node.scale.x >= 0 else -1.0
        node = node.parent
    return sign < 0


class _Renderer:
    """Draws scene items with their images, or plain coloured boxes without them."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self._images: dict[str, pygame.Surface | None] = {}

    def _image(self, path: str) -> pygame.Surface | None:
        if not path:
            return None
        if path not in self._images:
            try:
                self._images[path] = pygame.image.load(str(ASSET_DIR / path)).convert_alpha()
            except (pygame.error, OSError):
                self._images[path] = None
        return self._images[path]

    def draw(self, scene: BattleScene) -> None:
        self.screen.fill((20, 20, 28))
        for item in reversed(scene.items()):
            self._draw_item(item)

    def _draw_item(self, item: Item) -> None:
        if isinstance(item, AirPlatform) and not item.texture:
            return
        alpha = max(0.0, min(1.0, item.opacity * item.pixmap_opacity))
        rect = item.scene_rect()
        if alpha > 0 and not rect.is_empty:
            target = _to_pygame_rect(rect)
            surface = self._surface_for(item, target)
            surface.set_alpha(round(alpha * 255))
            self.screen.blit(surface, surface.get_rect(center=target.center))
        if isinstance(item, Arsenal):
            bar = item.map_rect_to_scene(Rect(0.0, -10.0, item.health_bar_width, 5.0))
            if not bar.is_empty:
                pygame.draw.rect(self.screen, _HEALTH_BAR_COLOUR, _to_pygame_rect(bar))

    def _surface_for(self, item: Item, target: pygame.Rect) -> pygame.Surface:
        image = self._image(item.pixmap_path or getattr(item, "texture", ""))
        if image is None:
            surface = pygame.Surface(target.size)
            colour = next(
                (c for kind, c in _FALLBACK_COLOURS if isinstance(item, kind)), _DEFAULT_COLOUR
            )
            surface.fill(colour)
            return surface
        if item.rotation:
            base = item.bounding_rect()
            size = (
                max(1, round(base.width * abs(item.scale.x))),
                max(1, round(base.height * abs(item.scale.y))),
            )
            surface = pygame.transform.scale(image, size)
            if _mirrored(item):
                surface = pygame.transform.flip(surface, True, False)
            return pygame.transform.rotate(surface, -item.rotation)
        surface = pygame.transform.scale(image, target.size)
        if _mirrored(item):
            surface = pygame.transform.flip(surface, True, False)
        return surface


class Game:
    """The main window holding one battle until a fighter wins."""

    def __init__(self) -> None:
        self.scene = BattleScene()
        self.scene.gameover_listeners.append(self.gameover)
        self.running = True
        self.message: str | None = None

    def gameover(self, winner: int) -> None:
        """Stop the battle and record the announcement for the winner."""
        message = winner_message(winner)
        if message is None:
            return
        self.message = message
        self.running = False

    def run(self) -> str | None:
        """Open the window and play until someone wins or the window is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((int(self.scene.width), int(self.scene.height)))
            pygame.display.set_caption(WINDOW_TITLE)
            renderer = _Renderer(screen)
            clock = pygame.time.Clock()
            closed = False
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                        closed = True
                    elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                        key = translate_key(event.key)
                        if key is None:
                            continue
                        if event.type == pygame.KEYDOWN:
                            self.scene.key_press(key)
                        else:
                            self.scene.key_release(key)
                if not self.running:
                    break
                self.scene.update(pygame.time.get_ticks())
                renderer.draw(self.scene)
                pygame.display.flip()
                clock.tick(FPS)
            if self.message is not None and not closed:
                self._announce(screen, renderer, clock)
        finally:
            pygame.quit()
        return self.message

    def _announce(
        self, screen: pygame.Surface, renderer: _Renderer, clock: pygame.time.Clock
    ) -> None:
        pygame.display.set_caption(f"{GAMEOVER_TITLE} - {self.message}")
        renderer.draw(self.scene)
        font = pygame.font.SysFont(_CJK_FONTS, 48)
        text = font.render(self.message or "", True, (255, 255, 255))
        box = text.get_rect(center=screen.get_rect().center).inflate(60, 40)
        panel = pygame.Surface(box.size)
        panel.fill((0, 0, 0))
        panel.set_alpha(190)
        screen.blit(panel, box)
        screen.blit(text, text.get_rect(center=box.center))
        pygame.display.flip()
        while True:
            for event in pygame.event.get():
                if event.type in (pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                    return
            clock.tick(30)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="brawlfield",
        description="Two-player platform brawler. Blue: A/D move, W jump, S crouch/pick, "
        "E attack. Red: arrows move/jump/crouch, 0 attack.",
    )
    parser.parse_args(argv)
    Game().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())