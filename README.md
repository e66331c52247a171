# raycer

A small top-down racing game. You drive a car over a map of ground tiles with
different grip, alongside a computer-controlled car that heads for the centre
of the map. The physics treats each wheel on its own: engine torque spins the
wheels, and static or kinetic friction against the ground pushes the body and
turns it.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and draws the game.

## Playing

```
raycer
raycer --base DIR
```

`--base` names the directory that holds the `assets` directory (or sits next
to it); by default it is the directory of the program being run. If no
`assets` directory is found, the command prints `Assets directory not found!`
and exits with status 1.

The game starts at the main menu. Press **Space** or click **PLAY** to start
the race on the map `map_test`; **Escape** pauses and resumes. The main menu
also has **SETTINGS** and **EXIT** (which asks for confirmation); the pause
menu has **CONTINUE**, **SETTINGS** and **EXIT TO MENU**. The settings screen
has a **FULLSCREEN** checkbox; **EXIT** or **Escape** leaves it.

| Key   | Action                          |
|-------|---------------------------------|
| W / S | accelerate / reverse            |
| A / D | steer right / left              |
| Q / E | shift down / up (gears 1 to 5)  |
| F3    | show or hide debug values       |

While driving, the bottom right corner shows a speedometer with the current
gear and an RPM dial.

## Assets and maps

The `assets` directory is looked for as `BASE/assets` first and then
`BASE/../assets`. A map named `NAME` is read from two text files in it.

`NAME_entities.txt`, one command per line:

```
# a comment
collider 1 4 -1 -1 -1 1 1 1 1 -1
entity model tree.glb position 10 0 5 heading 0.5 collider 1
checkpoint 0 0 0 10 0 0 10 10 10
```

* `collider ID COUNT x y ...` defines a polygon collider of `COUNT` vertices.
* `entity` places a model at a position (`x y z`, with `y` up) with a heading
  in radians, optionally using a collider defined earlier. An entity with a
  collider becomes a `Collidable`, otherwise a plain `Entity`.
* `checkpoint ID ax ay bx by cx cy dx dy` defines a four-cornered checkpoint
  zone, made of the triangles (a, b, c) and (b, c, d).
* Any other line is ignored.

`NAME_materials.txt` holds the grid size `N` followed by `N` rows of `N`
characters, one per cell: `.` is grass, `x` is asphalt, anything else is
sand, as is everything outside the grid. Each cell is 5 units across. A
missing map file raises `FileNotFoundError`; a malformed one raises
`ValueError`.

## Using the pieces

The simulation runs without a window:

* `raycer.world.World` holds entities, ground materials and checkpoint zones.
  `spawn_entity` gives an entity its id, `update(delta_time)` steps every
  entity, and `material_at_position` returns the `GroundMaterial` under a
  ground-plane point.
* `raycer.vehicle.Vehicle` is a `raycer.rigidbody.Rigidbody` driven by a
  `raycer.controller.Controller`: either a `raycer.controller.PlayerController`
  fed from a `raycer.controller.KeyState`, or `raycer.ai.StraightGuy`.
* `raycer.collidable.Collidable.check_collision` tests two polygon colliders
  for overlap along separating axes.
* `raycer.model_manager.ModelManager` finds the assets directory, hands out
  shared `Model` handles and fills a world from a map with `load_map`.
* `raycer.game.Game` ties the world and `raycer.ui.UiManager` together;
  `Game.load_level("test")` builds the two cars without reading map files.

## What it does not do

* Models are only file handles: `.glb` files are never read or rendered. The
  world is drawn from above as flat coloured ground cells, a grid, collider
  outlines and checkpoint corners.
* Collisions are detected but do not push bodies apart.
* Entering a checkpoint zone only prints a line to standard error; there is no
  lap counting or timing. `UiManager.draw_leaderboard` can draw a table of
  `PlayerInfo` rows, but the game never shows it.

## Running the tests

```
pip install .[test]
pytest
```