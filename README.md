# hazel

Engine-side building blocks for a small real-time application. It is written in
plain Python and uses NumPy for the matrix math.

## Modules

- `hazel.events`: window, application, keyboard and mouse events. Each event
  class has an `event_type` (an `EventType`) and `category_flags` (an
  `EventCategory` flag set). Use `Event.is_in_category(category)` to test the
  flags. An `EventDispatcher(event).dispatch(EventClass, handler)` calls
  `handler` only when the event has that class's type. It returns whether the
  handler was called, and it stores the handler's result in `event.handled`.
- `hazel.layer`: `Layer`, with the hooks `on_attach`, `on_detach`, `on_update`,
  `on_imgui_render` and `on_event`, and `LayerStack`.
  - `push_layer` puts a layer after the other layers but before any overlay.
  - `push_overlay` always appends.
  - `pop_layer` and `pop_overlay` remove an entry if it is present.
  - Iterate the stack bottom-up to update, and use `reversed(stack)` to send
    events from the top down.
- `hazel.keycodes`: the `Key` and `MouseButton` integer enumerations.
- `hazel.input`: `Input`, the polled state of keys, mouse buttons and the
  cursor.
  - The windowing code feeds it with `press_key`, `release_key`,
    `press_mouse_button`, `release_mouse_button` and `move_mouse`.
  - Code reads it with `is_key_pressed`, `is_mouse_button_pressed`, `mouse_x`,
    `mouse_y` and `mouse_position`.
- `hazel.timestep`: `Timestep`, a frame delta. It has `seconds` and
  `milliseconds`, converts to `float`, and multiplies with numbers.
- `hazel.log`: `init()` sets up two loggers, `core_logger()` (named `HAZEL`)
  and `client_logger()` (named `APP`).
  - Both log at trace level to standard output in the form
    `[HH:MM:SS] NAME: message`.
  - Lines are coloured when the output is a terminal.
- `hazel.rng`: `seed(value=None)` and `random_float()`.
  - `random_float()` returns floats in [0, 1] from a 32-bit Mersenne Twister.
  - The generator starts from seed 5489.
  - `seed()` with no value reseeds from system entropy.
- `hazel.instrumentor`: profiling in the Chrome trace event JSON format.
  - `get_instrumentor()` returns the process-wide `Instrumentor`, which has
    `begin_session`, `end_session` and `write_profile`.
  - `profile_scope(name)` or `InstrumentationTimer` times a `with` block.
- `hazel.buffer`: `ShaderDataType`, `shader_data_type_size`, `BufferElement`
  (with `component_count`) and `BufferLayout`. A layout computes each element's
  byte `offset` and the total `stride`.
- `hazel.textures`: the enumerations `MultiSample`, `TextureType`,
  `TextureFormat`, `TextureRenderUsage` and `RenderTargetKind`, the dataclass
  `TextureBufferSpecification`, and the colours `WHITE` and `BLACK`.
- `hazel.shader`: the abstract `Shader` interface and `ShaderLibrary`.
  - `add` raises `ValueError` for a duplicate name.
  - `get` raises `KeyError` for a missing one.
  - `exists` and `in` test for a name.
- `hazel.renderer`: `RenderNode`, `RenderingData`, the abstract `RenderPass`,
  `OpaquePass` and `Renderer`.
  - `OpaquePass` records the nodes it was given since the last camera setup.
  - `Renderer` runs its passes in the order they were added.
- `hazel.orthographic_camera`: `OrthographicCamera` and
  `OrthographicCameraController`.
  - WASD moves the camera and Q/E rotates it, when rotation is enabled.
  - The scroll wheel zooms, and the zoom level is never below 0.25.
  - A window resize changes the aspect ratio.
- `hazel.camera`: the perspective `Camera` and `PerspectiveCameraController`.
  - Holding the right button lets you look around, and WASD works while it is
    held.
  - The middle button pans.
  - The scroll wheel moves the camera along its view direction.
- `hazel.scene`: `Scene` and `Entity`, with the components
  `TransformComponent`, `SpriteRendererComponent`, `TagComponent` and
  `CameraComponent`.

## Examples

Sending an event down a layer stack:

```python
from hazel.events import EventCategory, EventDispatcher, WindowResizeEvent
from hazel.layer import Layer, LayerStack

class GameLayer(Layer):
    def on_event(self, event):
        EventDispatcher(event).dispatch(WindowResizeEvent, lambda e: e.width == 0)

stack = LayerStack()
stack.push_layer(GameLayer("game"))

event = WindowResizeEvent(1280, 720, False, True)
for layer in reversed(stack):
    layer.on_event(event)
    if event.handled:
        break

print(str(event))                                        # WindowResizeEvent: 1280, 720
print(event.is_in_category(EventCategory.APPLICATION))   # True
```

Driving a camera controller from input state:

```python
from hazel.events import MouseScrolledEvent
from hazel.input import Input
from hazel.keycodes import Key
from hazel.orthographic_camera import OrthographicCameraController
from hazel.timestep import Timestep

state = Input()
controller = OrthographicCameraController(16 / 9, rotation=True, input=state)

state.press_key(Key.D)
controller.on_update(Timestep(0.1))
print(controller.camera.position)        # [0.5 0.  0. ]

controller.on_event(MouseScrolledEvent(0.0, 1.0))
print(controller.zoom_level)             # 0.75
```

Entities and components:

```python
from hazel.scene import Scene, SpriteRendererComponent, TagComponent, TransformComponent

scene = Scene()
player = scene.create_entity("player")
player.add_component(SpriteRendererComponent((1.0, 0.0, 0.0, 1.0)))

print(player.get_component(TagComponent).tag)             # player
print(player.has_component(TransformComponent))           # True
print(list(scene.view(SpriteRendererComponent)) == [player])  # True
```

Profiling a block:

```python
from hazel.instrumentor import get_instrumentor, profile_scope

profiler = get_instrumentor()
profiler.begin_session("Startup", "profile-startup.json")
with profile_scope("load assets"):
    ...
profiler.end_session()
```

## What it does not do

The package has no window, no main loop and no GPU back end. Some parts describe
rendering without performing it:

- `Shader` and `RenderPass` are interfaces for you to implement.
- `OpaquePass` only records what it was asked to draw.
- There is no mesh, model or texture loading.

Keyboard and mouse state reaches `Input` only through the calls your own
windowing code makes.

## Running the tests

```
pip install -e ".[test]"
pytest
```