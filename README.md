# loopzone

The core of a side-scrolling platformer engine. It holds game state and the
rules that change it: actors and their components, collision detection, a
camera that follows an actor, loop and pipe courses, animation timing, and
cached textures, sprites and flipbooks. A frontend supplies the input and
does the drawing.

## Modules

- `loopzone.geometry`: the immutable `Vector` (arithmetic, `length`,
  `length_squared`, `normalized`, `dot`, `cross`) and the integer `Rect`
  (`Rect.from_center`, `intersects`), plus `Stat`, `MyDegree` and
  `radian_to_degree` / `degree_to_radian`.
- `loopzone.enums`: `KeyState`, `KeyType`, `SceneType`, `ColliderType`,
  `ComponentType`, `PixelColliderType`, `CollisionLayer`, `PixelDirection`,
  `CourseKind`, the colour constants (`RED`, `MAGENTA`, `CYAN`, ...) and
  `rgb()`, which packs three channels into a `0x00BBGGRR` value and raises
  `ValueError` for channels outside 0-255.
- `loopzone.actor`: `Actor` and `Component`. An actor owns components,
  forwards `begin_play` and `tick` to them, finds them by type with
  `find_component`, and records the overlaps it is told about in
  `actor.overlaps`.
- `loopzone.timing`: `TimeManager`. Call `start()` once, then `update()` each
  frame. It sets `delta_time`, and recomputes `fps` once a second. Its clock
  can be swapped out for testing.
- `loopzone.input`: `InputManager`. Each `update(pressed_keys, mouse_pos)`
  moves every key to `DOWN` (first frame held), `PRESS` (still held), `UP`
  (just released) or `NONE`. You query keys with `button_down`,
  `button_press`, `button_up`, `button_none` or `state`. Key codes outside
  0-255 raise `ValueError`.
- `loopzone.colliders`: `Collider`, `BoxCollider`, `SphereCollider`,
  `PixelCollider` and `AccelObj`.
  - `Collider.check_collision` accepts a collider when that collider's layer
    is set in its `collision_flag` mask. Use `add_collision_layer`,
    `remove_collision_layer` and `reset_collision_flag` to change the mask.
  - Box and sphere colliders override it with shape tests: `box_to_box`,
    `sphere_to_sphere` and `sphere_to_box`.
  - A `PixelCollider` is a probe point offset from its owner. It never
    reports a collision.
- `loopzone.collision`: `CollisionManager`. It tests each pair of registered
  colliders with different owners. While a pair overlaps, both owners get
  `on_component_begin_overlap` on every update. When a recorded contact ends,
  both get `on_component_end_overlap`.
- `loopzone.camera`: `Camera` and `CameraComponent`. The component sets the
  camera to its owner's position, clamped so the view stays inside a 5000×4000
  world.
- `loopzone.courses`: `LoopCourse` and `PipeCourse` track whether their
  runner has entered, passed and escaped them, and set a `color` from it.
  `CourseManager` updates the courses and holds the one the runner is on:
  `contacted_course()`, `course_entered`, `course_passed`.
- `loopzone.resources`: `Texture`, `Sprite`, `Flipbook`, `FlipbookInfo` and
  `ResourceManager`.
  - Textures are loaded with Pillow, optionally rotated with
    `Texture.load_rotated`. `Texture.pixel(x, y)` returns a packed colour.
  - `ResourceManager` caches textures, sprites and flipbooks by key and
    resolves relative paths against its `resource_path`. Its `clear()`
    forgets textures only.
- `loopzone.linemesh`: `LineMesh` saves and loads line segments as a count
  followed by `(x1,y1)->(x2,y2)` lines. On save the x coordinates are centred.
  `translated(pos)` returns the segments offset by `pos`.
- `loopzone.actors`: `FlipbookActor` advances a flipbook's frames by its time
  manager's delta time. It gives the current frame's `source_rect()` and its
  `screen_position(camera_pos, window_size)`. `SpriteActor` gives the screen
  position of its sprite.
- `loopzone.objects`: the abstract `GameObject` and `Monster`. A monster moves
  to the mouse's projection onto its rail segment and stays put when the
  projection falls outside it.
- `loopzone.events`: `Event` and `EventManager`, a queue of named callbacks.
  `execute()` runs the callbacks in order. `set_callbacks` and `update`
  empty the queue for a new scene.

## Installing

```
pip install .
```

Add the `test` extra to get pytest:

```
pip install .[test]
```

## Example

```python
from loopzone.actor import Actor
from loopzone.colliders import BoxCollider
from loopzone.collision import CollisionManager
from loopzone.geometry import Vector

manager = CollisionManager()

player = Actor(Vector(100, 100))
body = BoxCollider(Vector(40, 40))
player.add_component(body)
manager.add_collider(body)

block = Actor(Vector(120, 100))
ground = BoxCollider(Vector(50, 50))
block.add_component(ground)
manager.add_collider(ground)

manager.update()
assert (body, ground) in player.overlaps
assert (ground, body) in block.overlaps
```

## What it does not do

- It opens no window and draws nothing. `FlipbookActor`, `SpriteActor` and
  `LineMesh` report what to draw and where, and the frontend draws it.
- It has no scenes or game loop. You call `update` and `tick` on the managers
  and actors yourself.
- It has no playable character, physics or rigid body.
- It installs no command.

## Tests

```
pytest
```