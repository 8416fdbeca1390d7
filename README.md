# backrooms

A small procedural room engine. It builds an enclosed room out of one plane
mesh (floor, ceiling and four walls), gives each surface its own shader and
material, and renders it through a camera in an OpenGL viewport.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
backrooms
```

The command first changes the working directory two levels up (it expects
to be started from `bin/Debug` or `bin/Release`); if that fails it logs an
error and carries on. It then opens a 1280×720 window titled
"Backrooms Engine" and draws the room every frame.

Shader sources are read from `shaders/vertex/` and `shaders/fragment/`
relative to the working directory:

- `DefaultFloor.vert` / `DefaultFloor.frag`
- `DefaultCeiling.vert` / `DefaultCeiling.frag`
- `DefaultWallpaper.vert` / `DefaultWallpaper.frag`

A missing or empty file, or a compile or link failure, raises
`backrooms.shader.ShaderError`.

## Using the library

- `backrooms.geometry`: frozen `Vector2`, `Vector3`, `Color` and `Vertex`
  values; `Vertex.flatten()` gives the eight floats in buffer order.
- `backrooms.transforms`: 4×4 `numpy` matrix helpers (`identity`,
  `translate`, `rotate`, `scale`, `look_at`, `perspective`, `normalize`).
- `backrooms.camera`: `Camera` with `CameraMode.FIRST_PERSON` and
  `CameraMode.THIRD_PERSON`, `process_keyboard` (takes a set of `Key`
  values), `process_mouse_movement`, `switch_mode` and `view_matrix()`.
- `backrooms.mesh`: `Mesh`, `Model` and `create_plane_mesh`. Meshes upload
  themselves to the GPU on their first `draw()`.
- `backrooms.shader`, `backrooms.texture`, `backrooms.material`: `Shader`,
  `Texture` (image files are loaded with Pillow and flipped vertically;
  failures raise `TextureError`) and `Material`.
- `backrooms.scene`: `SceneObject` with `MeshComponent` and
  `MaterialComponent`; an object is drawn only when it has both.
- `backrooms.panels`: `MaterialPanel`, `ModelBrowser` and
  `RoomGeneratorPanel`, each exposing its state and `Signal`s that fire when
  values change.
- `backrooms.viewport`: `Viewport` and `build_scene`.
- `backrooms.app`: `AppWindow` and `main`.

```python
from backrooms.camera import Camera, Key
from backrooms.mesh import create_plane_mesh

plane = create_plane_mesh(50.0, 50.0, 4.0)
print(len(plane.vertices), plane.indices)

camera = Camera((0.0, 2.0, 5.0))
camera.process_keyboard({Key.W}, 0.5)
print(camera.position, camera.view_matrix())
```

The camera moves at 3 units per second, twice that with shift held. Holding
control narrows the field of view from 60° down to 30°, and letting go
widens it back again. Pitch is always kept between -89° and 89°.

## What it does not do

- The window shows only the viewport. The material, model browser and room
  generator panels exist as objects with their values and signals, and
  `AppWindow.docks` records where they belong, but they are not drawn.
- The viewport does not react to keyboard or mouse input; the camera only
  moves when its methods are called.
- Nothing is connected to the panels' signals: the room is not regenerated
  from the seed or size, and no models are loaded.