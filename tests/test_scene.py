from brawlfield.items import Item, Rect, Vec2
from brawlfield.scene import Scene


def _box(x, y, w, h):
    item = Item(None, "box.png", (w, h))
    item.pos = Vec2(x, y)
    return item


class _RecordingScene(Scene):
    def __init__(self):
        super().__init__(100, 100)
        self.calls = []

    def process_input(self):
        self.calls.append("input")

    def process_movement(self):
        self.calls.append("movement")

    def process_picking(self):
        self.calls.append("picking")


def test_scene_rect_matches_size():
    assert Scene(1280, 720).scene_rect == Rect(0, 0, 1280, 720)


def test_add_item_includes_children():
    scene = Scene()
    parent = Item()
    child = Item(parent)
    scene.add_item(parent)
    assert child.scene is scene
    assert set(scene.items()) == {parent, child}


def test_items_topmost_first():
    scene = Scene()
    a, b = Item(), Item()
    scene.add_item(a)
    scene.add_item(b)
    child = Item(a)
    assert scene.items() == [b, child, a]


def test_remove_item_removes_subtree_and_detaches():
    scene = Scene()
    parent = Item()
    child = Item(parent)
    grandchild = Item(child)
    scene.add_item(parent)
    scene.remove_item(child)
    assert scene.items() == [parent]
    assert child.parent is None
    assert grandchild.scene is None
    assert parent.children == ()


def test_reparent_to_none_keeps_scene():
    scene = Scene()
    parent = Item()
    child = Item(parent)
    scene.add_item(parent)
    child.set_parent_item(None)
    assert child.scene is scene
    assert child in scene.items()
    assert parent.children == ()


def test_add_moves_item_between_scenes():
    first, second = Scene(), Scene()
    item = Item()
    first.add_item(item)
    second.add_item(item)
    assert first.items() == []
    assert second.items() == [item]


def test_colliding_items():
    scene = Scene()
    a = _box(0, 0, 10, 10)
    b = _box(5, 5, 10, 10)
    c = _box(50, 50, 10, 10)
    for item in (a, b, c):
        scene.add_item(item)
    assert scene.colliding_items(a) == [b]
    assert a.colliding_items() == [b]


def test_items_on_segment():
    scene = Scene()
    floor = _box(0, 100, 200, 20)
    scene.add_item(floor)
    assert scene.items_on_segment(Vec2(50, 95), Vec2(50, 105)) == [floor]
    assert scene.items_on_segment(Vec2(50, 80), Vec2(50, 90)) == []
    assert scene.items_on_segment(Vec2(250, 95), Vec2(250, 105)) == []


def test_update_measures_delta():
    scene = Scene(100, 100)
    scene.update(1000)
    assert scene.delta_time == 0
    scene.update(1016)
    assert scene.delta_time == 16
    scene.update(1020)
    assert scene.delta_time == 4


def test_update_runs_hooks_in_order():
    scene = _RecordingScene()
    Scene.update(scene, 1000)
    Scene.update(scene, 1016)
    assert scene.delta_time == 16
    assert scene.calls == ["input", "movement", "picking"] * 2