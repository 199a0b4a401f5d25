import pytest

from brawlfield.factory import create_item, item_types
from brawlfield.items import ItemType
from brawlfield.kits import Adrenaline, Bandage, Medkit
from brawlfield.weapons import Bomb, Knife, Rifle, Sniper


def test_item_types_order():
    assert item_types() == [
        ItemType.KNIFE,
        ItemType.BOMB,
        ItemType.RIFLE,
        ItemType.SNIPER,
        ItemType.BANDAGE,
        ItemType.MEDKIT,
        ItemType.ADRENALINE,
    ]


def test_item_types_cover_every_enum_member():
    assert set(item_types()) == set(ItemType)


@pytest.mark.parametrize(
    ("item_type", "cls"),
    [
        (ItemType.KNIFE, Knife),
        (ItemType.BOMB, Bomb),
        (ItemType.RIFLE, Rifle),
        (ItemType.SNIPER, Sniper),
        (ItemType.BANDAGE, Bandage),
        (ItemType.MEDKIT, Medkit),
        (ItemType.ADRENALINE, Adrenaline),
    ],
)
def test_create_item_builds_matching_class(item_type, cls):
    item = create_item(item_type)
    assert type(item) is cls
    assert item.mounted is False
    assert item.parent is None


def test_create_item_returns_fresh_instances():
    first = create_item(ItemType.KNIFE)
    second = create_item(ItemType.KNIFE)
    assert first is not second
    assert type(first) is type(second)


@pytest.mark.parametrize("bad", ["knife", 3, None, [ItemType.KNIFE]])
def test_create_item_rejects_unknown(bad):
    with pytest.raises(ValueError):
        create_item(bad)