from brawlfield.combat import FIST_DAMAGE, MAX_HEALTH
from brawlfield.fighters import Enemy, Link
from brawlfield.items import Vec2
from brawlfield.scene import Scene


def test_link_poses():
    link = Link()
    assert link.pixmap_path == "Items/Players/NPC_Blue.png"
    link.update_crouch_pixmap(True)
    assert link.pixmap_path == "Items/Players/NPC_Blue_Crouch.png"
    assert link.crouching is True
    link.update_crouch_pixmap(False)
    assert link.pixmap_path == "Items/Players/NPC_Blue.png"
    link.update_fist_pixmap(True)
    assert link.pixmap_path == "Items/Players/NPC_Blue_Fist.png"
    assert link.fist_raised is True


def test_enemy_poses():
    enemy = Enemy()
    assert enemy.pixmap_path == "Items/Players/NPC_Red.png"
    enemy.update_crouch_pixmap(True)
    assert enemy.pixmap_path == "Items/Players/NPC_Red_Crouch.png"
    enemy.update_fist_pixmap(True)
    assert enemy.pixmap_path == "Items/Players/NPC_Red_Fist.png"
    enemy.update_fist_pixmap(False)
    assert enemy.pixmap_path == "Items/Players/NPC_Red.png"


def test_fighters_start_healthy_and_distinct():
    link, enemy = Link(), Enemy()
    assert link.health == MAX_HEALTH
    assert enemy.health == MAX_HEALTH
    assert {link.pixmap_path, link.CROUCH, link.FIST}.isdisjoint(
        {enemy.pixmap_path, enemy.CROUCH, enemy.FIST}
    )


def test_punch_pose_lasts_one_frame():
    link = Link()
    link.attack_down = True
    link.process_input()
    assert link.pixmap_path == Link.FIST
    link.process_input()
    assert link.pixmap_path == Link.STAND


def test_link_punches_enemy():
    scene = Scene(1280, 720)
    link, enemy = Link(), Enemy()
    scene.add_item(link)
    scene.add_item(enemy)
    link.pos = Vec2(540, 300)
    enemy.pos = Vec2(560, 300)
    link.attack_down = True
    link.process_input()
    assert enemy.health == MAX_HEALTH - FIST_DAMAGE
    assert link.health == MAX_HEALTH