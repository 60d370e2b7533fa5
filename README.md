# rescueboat

This package holds the game logic of a small arcade game. You steer a boat
around a circular level and pick up swimmers. Each swimmer you rescue joins a
trail behind the boat. The game ends when the boat leaves the level or runs
into a swimmer in its own trail.

The package contains the simulation and nothing else: transforms, collisions,
input state, the swimmers and the boat. It also has cameras, which produce view
and projection matrices as numpy arrays.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `rescueboat.math3d`

Vector, quaternion and matrix helpers for a left-handed, row-vector
coordinate system. Quaternions are stored as `(x, y, z, w)`.

- `dot`, `cross`, `length`, `normalize`, `lerp`
- `quaternion_from_euler_degrees`, `quaternion_multiply`, `quaternion_slerp`,
  `rotate_vector`, `matrix_to_quaternion`
- `matrix_from_srt`, `transform4`, `look_to_lh`, `look_at_lh`,
  `perspective_fov_lh`

`perspective_fov_lh` raises `ValueError` in these cases:

- a clip distance is not positive
- the near and far clip distances are equal
- the field of view is zero
- the aspect ratio is zero

The module also defines a `Vertex` dataclass, which holds a position, a uv,
a normal and a tangent.

### `rescueboat.collider`

`Collider` is an oriented box. Its centre is the owner's position plus an
offset. Its members are:

- `move_to`
- `half_size`
- `world_matrix`
- `normal`
- `center_global`
- `collides`, which runs a separating-axis test (`sat`) over the 15 candidate
  axes.

### `rescueboat.gameobject`

`GameObject` holds a position, a quaternion `rotation` and a `scale`. It can
carry an optional collider, which keeps its position and rotation in sync with
the object. Its members are:

- `move_absolute`, `move_relative`
- `set_rotation_euler`, `rotate`
- `forward_axis`, `right_axis`, `up_axis`
- `world_matrix` and `world_inv_trans_matrix`, both cached
- `add_collider`

### `rescueboat.camera`

`Camera` builds a view matrix with `create_view_matrix` and a perspective
projection with `create_projection_matrix`. You read them through
`view_matrix` and `projection_matrix`. Both matrices are stored transposed.

### `rescueboat.entities`

`Entity` is a game object with a `mesh` and a `material`. The package treats
both as opaque values. A new entity registers itself with an `EntityManager`,
or with the shared `default_manager()` when none is given.

`EntityManager.update` updates every enabled entity. After that it carries out
the removals that were queued by `remove` or `remove_by_name`. A removal made
with `release=True` also sets `entity.released`.

The manager raises errors in these cases:

| Call | Condition | Error |
| --- | --- | --- |
| `add` | the entity is already in the manager | `ValueError` |
| `remove` | the entity is not in the manager | `ValueError` |
| `remove_by_name` | no entity has that name | `KeyError` |

### `rescueboat.inputs`

`InputManager` and `MouseButton` track keyboard and mouse input. You feed the
state in with these calls:

- `press_key` and `release_key`
- `on_mouse_down`, `on_mouse_up`, `on_mouse_move` and `on_mouse_wheel`
- `update_focus` and `update_mouse_pos`
- `set_window_rect`

You query it with these calls:

- `get_key`
- `get_mouse_button`, `get_mouse_button_down` and `get_mouse_button_up`
- `window_center_x` and `window_center_y`

`update_states` carries the button states over to the next frame and clears
the wheel. While focus is required and the window is not focused, every query
returns `False`.

### `rescueboat.fxaa`

`FXAASettings` is a dataclass of settings for an FXAA pass. It has the
`BooleanFlag`, `PresetFlag` and `LuminanceFlag` enums. `load_preset` copies
the values of one of the six standard presets; `CUSTOM` leaves them as they
are. `reset` restores the defaults.

### `rescueboat.swimmer`

`Swimmer` and `SwimmerState` model the swimmers. A swimmer rises from below
the surface with buoyancy physics, then floats. After `join_trail` it follows
its leader with a time lag, like the body of a snake. When the boat crashes,
the swimmers in the trail play a short hit animation down the line.

A swimmer needs a collider for its water physics. Without one it raises
`RuntimeError`.

### `rescueboat.swimmer_manager`

`SwimmerManager` spawns swimmers 5 units below random points in the level, on
a timer. It keeps at most five waiting swimmers. It hands a swimmer to a
leader with `attach_swimmer`.

### `rescueboat.boat`

`Boat` and `BoatState` make up the player. The arrow keys or A/W/D/S start
the round and steer the boat. The boat moves forward on its own. It picks up
floating swimmers that it touches.

The boat crashes when it leaves the level radius, or when it hits a following
swimmer in its trail beyond the first. On a crash it prints a game-over
message. `reset` clears the trail and moves the boat back to the origin
along an arc.

### `rescueboat.focus_camera`

`FocusCamera` stays at an anchor point and always faces its focus object.
Scrolling the wheel moves its target from the anchor toward the focus object.
The camera stops moving closer once it is within `max_zoom` of the focus.
`y_min` sets the lowest height it will go to.

## Example

The boat is itself an entity, so the entity manager updates it. Do not call
`boat.update` as well.

```python
from rescueboat.entities import EntityManager
from rescueboat.inputs import InputManager
from rescueboat.swimmer_manager import SwimmerManager
from rescueboat.boat import Boat, BoatState

entities = EntityManager()
inputs = InputManager()
swimmers = SwimmerManager(entities, 12.0, None)
boat = Boat(None, None, 13.0, swimmers, inputs, entities)
boat.add_collider((0.9, 0.8, 2.3), (0, 0, 0))

inputs.update_focus(True)
inputs.press_key("A")
for _ in range(60):
    if boat.state is BoatState.PLAYING:
        swimmers.update(1 / 60)
    entities.update(1 / 60)
    inputs.update_states()
```

## What this package does not do

The package has no window, no rendering and no game loop or command to start
the game. Meshes and materials are placeholders that the package stores but
never draws. The FXAA settings are plain data, and nothing in the package
applies them.

You need to supply all of the following yourself:

- reading the keyboard and mouse
- feeding that input to an `InputManager`
- calling the updates once per frame
- drawing the scene from the matrices the cameras and game objects provide