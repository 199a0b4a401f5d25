import pytest

from brawlfield.items import Vec2
from brawlfield.kits import Adrenaline, Bandage, Medkit
from brawlfield.platforms import LandPlatform
from brawlfield.scene import Scene

KITS = [Adrenaline, Bandage, Medkit]


def test_kit_has_image_area():
    for kit in (Adrenaline(), Bandage(), Medkit()):
        assert "Kits" in kit.pixmap_path
        assert not kit.bounding_rect().is_empty


def test_kit_starts_unmounted_and_round_trips():
    for kit in (Adrenaline(), Bandage(), Medkit()):
        assert kit.mounted is False
        kit.mount_to_parent()
        assert kit.mounted is True
        kit.unmount()
        assert kit.mounted is False


@pytest.mark.parametrize("cls", KITS)
def test_kit_falls_and_lands_on_platform(cls):
    scene = Scene(400, 400)
    floor = LandPlatform()
    floor.set_size(200.0, 20.0)
    floor.pos = Vec2(0.0, 100.0)
    scene.add_item(floor)
    kit = cls()
    kit.pos = Vec2(50.0, 0.0)
    scene.add_item(kit)
    for _ in range(1000):
        kit.update()
        if kit.gravity_handler.on_ground:
            break
    floor_rect = floor.scene_rect()
    assert kit.gravity_handler.on_ground is True
    assert kit.gravity_handler.velocity == Vec2()
    assert floor_rect.top <= kit.scene_rect().bottom <= floor_rect.bottom


def test_kit_without_platform_keeps_falling():
    scene = Scene(400, 400)
    kit = Bandage()
    scene.add_item(kit)
    previous = kit.pos.y
    for _ in range(5):
        kit.update()
        assert kit.pos.y > previous
        previous = kit.pos.y
    assert kit.gravity_handler.on_ground is False