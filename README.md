# brawlfield

A local two-player platform brawler. Two fighters share one keyboard on a
1280×720 battlefield with ice, grass and land platforms. Every 15 seconds a
random item drops from the top of the field: a knife, a bomb, a rifle, a sniper
rifle, a bandage, a medkit or a shot of adrenaline. Grab it, fight, and knock
your opponent's health down to zero.

## Installing

```
pip install .
```

This pulls in `pygame`, which the game uses for its window, drawing and input.

## Playing

```
brawlfield
```

The command takes no options besides `--help`.

| Action               | Blue (Link) | Red (Enemy)             |
|----------------------|-------------|-------------------------|
| Move left            | `A`         | `←`                     |
| Move right           | `D`         | `→`                     |
| Jump                 | `W`         | `↑`                     |
| Crouch / pick up     | `S`         | `↓`                     |
| Attack               | `E`         | `0` (or keypad `0`)     |

Pressing crouch picks up the nearest free item within 100 pixels of the
fighter. A fighter holds one weapon at a time; picking up a new one drops the
old. While crouched with a rifle or sniper in hand, the attack key still fires.

Each fighter starts with 100 health, shown as a red bar above its head.

### Items

- **Fist** (no weapon): 10 damage to an overlapping opponent.
- **Knife**: a 15-damage swing.
- **Bomb**: thrown in an arc; 20 damage on a hit, gone on any contact with a
  fighter or a platform.
- **Rifle**: one bullet, 30 damage.
- **Sniper**: one bullet, 50 damage.
- **Bandage**: restores 30 health, up to the cap of 100.
- **Medkit**: restores health to 100.
- **Adrenaline**: 6 health at once and 6 more every second while it lasts, and
  extra speed, both for five seconds.

### Terrain

- **Ice** makes you move faster.
- **Grass** hides you when you crouch on it: you and your weapon turn almost
  transparent.
- The walls at each side of the field keep fighters inside.

When one fighter's health reaches zero the game shows the winner ("红方胜利！"
for red, "蓝方胜利！" for blue) and closes on the next key press, mouse click or
window close.

### Images

The window draws images from a `brawlfield/assets` directory when they are
there (for example `Items/Players/NPC_Blue.png`). The package does not ship
any; without them every fighter, platform and item is drawn as a plain
coloured box.

## Using it as a library

The game logic runs without a window.

```python
import random
from brawlfield.battle import BattleScene, Key

scene = BattleScene(random.Random(1))
scene.gameover_listeners.append(lambda winner: print("winner", winner))
scene.key_press(Key.D)
for now in range(0, 1000, 11):
    scene.update(now)          # time in milliseconds
scene.key_release(Key.D)
print(scene.link.pos, scene.link.health)
```

- `BattleScene.key_press` / `key_release` take a `Key` and return whether the
  battle uses it.
- `BattleScene.update(now)` runs one frame; `check_game_over()` returns
  `battle.RED_WINS` (0), `battle.BLUE_WINS` (1) or `None`, and calls every
  listener in `gameover_listeners` with the winner.
- `BattleScene.spawn_random_item()` drops a random item at once.
- `brawlfield.factory.create_item` builds an item from any
  `brawlfield.items.ItemType`; `brawlfield.factory.item_types()` lists the kinds
  that can spawn.
- `brawlfield.game.Game().run()` opens the window and returns the winner's
  announcement, or `None` if the window was closed first.

## Running the tests

```
pip install .[test]
pytest
```