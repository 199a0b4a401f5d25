import math

import pytest

from brawlfield.items import (
    Gravitational,
    GravitationalMountableItem,
    Item,
    ItemType,
    Mountable,
    Rect,
    Vec2,
)
from brawlfield.platforms import AirPlatform
from brawlfield.scene import Scene


def test_vec2_distance():
    assert Vec2(0, 0).distance_to(Vec2(3, 4)) == pytest.approx(5.0)


def test_vec2_arithmetic_round_trip():
    a, b = Vec2(1.5, -2.0), Vec2(7.0, 3.25)
    assert (a + b) - b == a


def test_rect_intersects_overlap():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))


def test_rect_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))


def test_empty_rect_never_intersects():
    assert not Rect(0, 0, 0, 10).intersects(Rect(-5, -5, 20, 20))


def test_rect_translated_keeps_size():
    r = Rect(1, 2, 3, 4)
    t = r.translated(10, 20)
    assert (t.width, t.height) == (r.width, r.height)
    assert t.left == r.left + 10
    assert t.translated(-10, -20) == r


def test_item_without_pixmap_has_empty_bounds():
    assert Item().bounding_rect().is_empty


def test_item_with_pixmap_bounds():
    assert Item(None, "img.png", (40, 20)).bounding_rect() == Rect(0, 0, 40, 20)


def test_child_scene_pos_follows_parent():
    parent = Item()
    parent.pos = Vec2(10, 10)
    child = Item(parent)
    child.pos = Vec2(5, 7)
    assert child.scene_pos() == parent.pos + child.pos


def test_parent_cycle_rejected():
    parent = Item()
    child = Item(parent)
    with pytest.raises(ValueError):
        parent.set_parent_item(child)


def test_rotation_swaps_scene_extent():
    item = Item(None, "img.png", (10, 20))
    item.transform_origin = Vec2(5, 20)
    item.rotation = 90
    rect = item.scene_rect()
    assert rect.width == pytest.approx(20)
    assert rect.height == pytest.approx(10)


def test_mirrored_item_extends_left_of_pos():
    item = Item(None, "img.png", (10, 10))
    item.pos = Vec2(100, 0)
    item.scale = Vec2(-1, 1)
    assert item.scene_rect().right == pytest.approx(100)


def test_item_type_order_and_lookup():
    members = [ItemType(t.value) for t in ItemType]
    assert [t.name for t in members] == [
        "KNIFE", "BOMB", "RIFLE", "SNIPER", "BANDAGE", "MEDKIT", "ADRENALINE",
    ]
    assert members == list(ItemType)


def test_mountable_is_abstract():
    with pytest.raises(TypeError):
        Mountable()


def test_gravity_default_and_application():
    body = Gravitational()
    assert body.gravity == 0.098
    body.apply_gravity()
    body.apply_gravity()
    assert body.velocity.y == pytest.approx(2 * body.gravity)


def test_gravity_ignored_on_ground():
    body = Gravitational(on_ground=True)
    body.apply_gravity()
    assert body.velocity == Vec2()


def test_mount_and_unmount():
    item = GravitationalMountableItem(None, "img.png", (10, 10))
    item.mount_to_parent()
    assert item.mounted
    item.unmount()
    assert not item.mounted


def test_free_item_falls():
    scene = Scene(200, 200)
    item = GravitationalMountableItem(None, "img.png", (10, 10))
    scene.add_item(item)
    item.update()
    assert item.pos.y == pytest.approx(item.gravity_handler.gravity)
    assert not item.gravity_handler.on_ground


def test_item_lands_on_platform():
    scene = Scene(200, 200)
    platform = AirPlatform()
    platform.set_size(200, 20)
    platform.pos = Vec2(0, 100)
    scene.add_item(platform)
    item = GravitationalMountableItem(None, "img.png", (10, 10))
    item.pos = Vec2(50, 91)
    item.rotation = 45
    scene.add_item(item)
    item.update()
    assert item.gravity_handler.on_ground
    assert item.gravity_handler.velocity == Vec2()
    assert item.rotation == 0
    assert not math.isnan(item.pos.y)