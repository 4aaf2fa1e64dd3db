# sohop

A small platformer built on an entity–component–system design. Each entity
(`sohop.components.Entity`) is a bundle of optional components — `Position`,
`Image`, `Gravity`, `Keyboard` and `Collision` — and the systems in
`sohop.systems` run over every entity once per frame:

- **`draw_system`** – blits the entity's image at its position on the game's
  screen (does nothing when the entity has no image or the game no screen)
- **`movement_system`** – moves keyboard-controlled entities left (`a`) or
  right (`d`) by 0.07 pixels a frame, refusing any step that would overlap
  another entity's collision box
- **`collision_system`** – prints `Colidindo` for each other entity the given
  one overlaps, and returns those entities
- **`jump_system`** – turns a pending jump request into an upward velocity
  of -3.2 when the entity may jump, and clears the request
- **`gravity_system`** – carries a jump through its arc (velocity grows by
  0.06 a frame until it reaches zero), otherwise lets the entity drift down
  by 0.08 a frame until it reaches y = 300, where it may jump again

`collision_checker(a, b)` tells whether two entities' axis-aligned boxes
overlap.

`sohop.game.Game` holds up to 10 entities (`add_entity` raises
`RuntimeError` beyond that), the set of keys held down (`keydown`, `keyup`,
`is_pressed`) and the screen to draw on. Pressing `w` sets a jump request on
the first entity, if it has keyboard and gravity components.

The level built by `load_level` holds two entities side by side: a
keyboard-controlled player at (64, 64) and a second entity at (128, 64) with
no keyboard. Both have gravity and a 32×32 collision box, so both fall to the
floor; only the player walks and jumps.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used for the window, input, images and
drawing.

## Playing

```
sohop
```

This opens a 1080×768 window titled `joguinho`. Options:

- `--image PATH` – sprite used for both entities (default
  `assets/idle/idle01.xpm`, relative to the current directory). If the file
  does not exist, the entities are not drawn but the game still runs.
- `--frames N` – stop after `N` frames instead of running until the window
  is closed.

Controls:

| Key | Action      |
|-----|-------------|
| `a` | move left   |
| `d` | move right  |
| `w` | jump        |

Close the window to quit.

## Using it as a library

```python
from sohop.components import Entity, Position, Collision, Gravity, Keyboard
from sohop.game import Game
from sohop.systems import movement_system, jump_system, gravity_system

game = Game()
player = Entity(
    position=Position(64, 64),
    gravity=Gravity(can_jump=True),
    keyboard=Keyboard(),
    collision=Collision(32, 32),
)
game.add_entity(player)

game.keydown(ord("d"))
movement_system(game, player)
gravity_system(game, player)
```

`game_loop(game)` in `sohop.main` clears the screen (if any) and runs every
system over every entity for one frame; `load_level(game, image_path=None)`
adds the two entities of the default level and returns them.

## What it does not do

There is no map file, no collectibles, no exit, no score and no move
counter: the level is the two fixed entities above, and collisions are only
reported, not acted on beyond blocking sideways movement.

## Running the tests

```
pip install .[test]
pytest
```