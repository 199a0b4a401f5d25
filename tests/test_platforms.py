import pytest

from brawlfield.items import Item, Rect, Vec2
from brawlfield.platforms import (
    AirPlatform,
    GrassPlatform,
    IcePlatform,
    LandPlatform,
)
from brawlfield.scene import Scene


def test_new_platform_has_empty_bounds():
    assert AirPlatform().bounding_rect().is_empty


def test_set_size_sets_bounds():
    platform = AirPlatform()
    platform.set_size(355, 60)
    assert platform.bounding_rect() == Rect(0, 0, 355, 60)


def test_scene_rect_follows_position():
    platform = AirPlatform()
    platform.set_size(355, 60)
    platform.pos = Vec2(160, 395)
    assert platform.scene_rect() == Rect(160, 395, 355, 60)


def test_name_round_trip():
    wall = AirPlatform()
    wall.name = "leftWall"
    assert wall.name == "leftWall"


@pytest.mark.parametrize(
    "cls, word", [(GrassPlatform, "Grass"), (IcePlatform, "Ice"), (LandPlatform, "Land")]
)
def test_textured_platforms(cls, word):
    platform = cls()
    assert isinstance(platform, AirPlatform)
    assert platform.solid
    assert word in platform.texture
    assert platform.pixmap_path == ""


def test_platform_is_solid_and_plain_item_is_not():
    assert AirPlatform().solid
    assert not Item().solid


def test_platform_collides_with_item():
    scene = Scene(1280, 720)
    ground = AirPlatform()
    ground.set_size(1280, 95)
    ground.pos = Vec2(0, 625)
    scene.add_item(ground)
    body = Item(None, "body.png", (46, 90))
    body.pos = Vec2(540, 540)
    scene.add_item(body)
    assert body.colliding_items() == [ground]