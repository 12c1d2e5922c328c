# classyclash

A small top-down action game. You control a sword-carrying hero who stays at
the centre of a 384×384 window while the world map scrolls beneath him. A rock
and a log block your way. A goblin and a slime walk toward you and drain 10
health per second for as long as they touch you. Click them away before your
health of 100 runs out.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

```
classyclash
classyclash --assets path/to/assets
```

`--assets` names the directory that holds the images. It defaults to `assets`
in the current directory. The directory must contain:

```
characters/hero_idle.png      characters/hero_run.png
characters/goblin_idle.png    characters/goblin_run.png
characters/slime_idle.png     characters/slime_run.png
characters/weapon_sword.png
map/WorldMap.png  map/Rock.png  map/Log.png
```

Each character sheet holds six animation frames side by side.

| Input                    | Effect                                                  |
|--------------------------|---------------------------------------------------------|
| `W` `A` `S` `D`          | move up / left / down / right                           |
| hold left mouse button   | swing the sword                                         |
| click left mouse button  | defeat every enemy that is touching the hero            |
| close the window         | quit                                                    |

The hero cannot leave the map or walk through the props. The current health
is shown at the top of the window. At zero health the game shows
"Game Over!" until you close the window.

## Using the pieces

The game logic does not need a window of its own:

- `classyclash.base_character.BaseCharacter` is the abstract base of the
  characters. It holds sprite-sheet animation, movement at a fixed speed in
  the direction of `velocity`, `undo_movement()` and `collision_rectangle()`.
  Subclasses implement `screen_position()`.
- `classyclash.character.Character` is the hero. Before each `tick` it reads
  its `controls` attribute, a `classyclash.character.Controls` (`left`,
  `right`, `up`, `down`, `attack`, `attack_pressed`). It also has `health` and
  `take_damage()`.
- `classyclash.enemy.Enemy` chases its `target` hero and damages it on contact.
  It raises `RuntimeError` if it ticks or is placed without a target.
- `classyclash.prop.Prop` is fixed scenery with `render()` and
  `collision_rectangle()`.
- `classyclash.game.Game` ties them together, and `Game.step(delta_time,
  canvas, controls)` runs one frame. `classyclash.game.load_game` builds the
  standard world from an asset directory, and `classyclash.game.health_text`
  formats the health label, for example `"Health: 100.0"`.

Textures only need `get_width()` and `get_height()`. A canvas passed to
`Game.step` needs four methods:

- `clear(color)`
- `draw_scaled(texture, position, scale)`
- `draw_sprite(texture, source, dest, origin, rotation)`
- `draw_text(text, x, y, size, color)`

Rectangles are `(x, y, width, height)` tuples.

## What it does not do

- It ships no images. You must supply the asset directory yourself.
- There is no sound, no saving, no restart after "Game Over!" and no further
  levels.

## Running the tests

```
pip install ".[test]"
pytest
```