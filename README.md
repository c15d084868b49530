# revengine

A small component-based game engine. The world is a set of scenes; each
scene holds game objects; each game object carries components such as a
transform, a camera, input bindings and a textured quad. The loop in
`revengine.engine.Engine.run` catches up on `fixed_update` in steps of
1/120 s, then calls `update`, `late_update` and `render` on every active
scene once per frame, and stops when the window is closed.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
revengine-demo [RESOURCE_FOLDER]
```

`RESOURCE_FOLDER` defaults to `../game_resources`. It must contain:

- `sound/pew_pew.wav` (played once at start-up),
- `doomSprites/Enemies/bossb1.png`,
- `doomSprites/Bullets/misla5.png` and `doomSprites/Bullets/misla1.png`,
- `doomSprites/Weapons/pisga0.png`.

The shaders are read from `../engine_resources/shaders/VertexShader.hlsl`,
`../engine_resources/shaders/UI_vs.hlsl` and
`../engine_resources/shaders/PixelShader.hlsl`, relative to the working
directory. None of these files ship with the package.

The demo scene has a player with a camera steered by the mouse, a weapon
quad, two enemies and a three-level parent/child chain of objects. Keys:
W/S move forward and back, D/A move right and left, I/K pitch, J/L yaw;
T moves the top of the chain, G and B turn its middle and lowest objects.
Close the window to quit.

## Using the engine

```python
from revengine.comp_input import CompInput
from revengine.core import CoreSystems
from revengine.engine import Engine
from revengine.game_object import GameObject
from revengine.scene import Scene


def load():
    player = GameObject()
    controls = player.add_component(CompInput)
    controls.bind_action(26, lambda: player.transform.move_forward(1))

    scene = Scene()
    scene.add_game_object(player)
    CoreSystems.scene_manager.add_scene(scene)
    return CoreSystems.scene_manager


Engine(700, 500).run(load)
```

`add_component(component_type, *args, **kwargs)` builds the component with
the game object as its first argument, followed by the given arguments.

### Building blocks

- `revengine.core.CoreSystems` holds the shared `scene_manager`, `sound`,
  `render_window`, `input_manager` and `resource_manager`, each created on
  first access. `CoreSystems.reset()` forgets them all.
- `GameObject` owns components and child objects and gets a
  `CompTransform` on creation. `add_component` raises
  `ComponentExistsError` if a component of that type is already there;
  `has_component`, `get_component` and `remove_component` look components
  up by type. `add_child` records the child's position and rotation
  relative to its new parent; `remove_child` detaches a whole subtree.
- `CompTransform` holds position, rotation (radians, pitch/yaw/roll,
  wrapped into one turn) and scale, builds the model matrix, and moves and
  turns children along with their parent.
- `CompInput` subscribes to the shared `InputManager` and binds actions to
  key scan codes. Several actions may share one key; all of them run, in
  binding order, when the key is pressed.
- `CompCamera` keeps a `Camera` view matrix in step with a transform and
  turns that transform by the relative mouse motion of each frame.
- `CompRender` builds a quad centred on the origin at the object's depth,
  registers it with the render window and, on `render`, hands the model,
  view and projection matrices and the texture to its shader.
- `TextureShader` and `TextureShader2D` read shader sources, check that the
  `vs_main` / `ps_main` entry points are present, and upload transposed
  matrices; a missing file or entry point raises `ShaderCompileError`.
- `Texture` decodes an image to RGBA with Pillow; a missing or unreadable
  file raises `TextureNotFoundError`. `ResourceManager` loads each texture
  once by name; `get_resource` raises `ResourceNotFoundError` for unknown
  names.
- `Sound` plays named sounds through pygame's mixer. Loading a path that
  does not exist raises `FileNotFoundError`; a name that is already taken,
  a file that cannot be decoded, or playing an unknown name raises
  `SoundError`.
- `MemoryPool` disables the given game object and holds a fixed number of
  slots that all refer to it; `activate` enables and returns it while it is
  disabled and returns `None` afterwards.
- `SceneManager` keeps every scene and the list of active ones;
  `Scene.set_active` adds a scene to that list or takes it out.
- `BulletComp` moves its transform forward by 0.1 on every fixed update.
- `revengine.render_window.perspective_lh` builds the left-handed
  projection matrix the window uses.

## What it does not do

Drawing goes to a software device (`revengine.device`) that records each
indexed draw in `DeviceContext.draw_calls` and clears them every frame; it
does not rasterise anything. The window opened by the engine shows only
the background colour, not the quads, and shader sources are checked but
never executed.