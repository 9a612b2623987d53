# stlscene

A small toolkit for building simple 3D scenes out of binary STL meshes.
It loads meshes, decides which models in a scene to draw or unload by their
distance from the camera, and moves a first-person camera from stick and
button input.

## Modules

### `stlscene.stl`: binary STL loading

- `load_stl(path)` reads a binary STL file from disk. `parse_stl(data)` does
  the same for raw bytes. Both return an `STLModel`.
- An `STLModel` holds `triangles`, a list of `Triangle`, and `vertices`, a
  list of `Vertex`. Its `triangle_count` property gives the number of
  triangles.
- A `Triangle` has a `normal` and three corners, `v1`, `v2` and `v3`, all of
  them `Vec3` named tuples. Its `corners` property returns the three corners
  together.
- `triangles_to_vertices(triangles)` expands each triangle into three
  `Vertex` records. Each record holds `u`, `v`, `color`, `nx`, `ny`, `nz`,
  `x`, `y` and `z`. The texture coordinates are zero, and every vertex takes
  its colour from the facet normal.
- `normal_to_color(nx, ny, nz)` normalises the vector and maps each component
  from -1..1 to 0..255. It packs the result as `0xAABBGGRR`, with alpha set
  to 255.
- `STLError` is raised in three cases: the file cannot be opened, the data is
  shorter than the 84-byte header and count, or the file holds fewer
  triangle records than its header declares.

### `stlscene.model`: placed models and a recording renderer

- `load_model(filename, position, rotation)` loads the mesh and returns a
  `Model` that holds its `filename`, `position`, `rotation`, its mesh in
  `stl`, and an `is_valid` flag.
- `Model.render(renderer)` passes the mesh, position and rotation to
  `renderer.draw`.
- `Model.unload()` drops the mesh and marks the model as not valid. The
  placement is kept.
- `Model.reload()` reads the mesh from `filename` again and marks the model
  as valid.
- `Renderer.draw(model, position, rotation)` appends a `DrawCommand` to
  `Renderer.commands`. A `DrawCommand` holds the `position`, the `rotation`
  and a tuple of `vertices`, and has a `vertex_count` property. A missing or
  empty mesh is skipped. `Renderer.clear()` empties the command list.
  Subclass `Renderer` and override `draw` to send the geometry to a real
  graphics back end.

### `stlscene.modellist`: distance-based streaming

- A `ModelList` keeps models in the order they were added. It supports
  `len()` and iteration. `add(model)` raises `OverflowError` once the list
  already holds `MAX_MODELS` (1,000,000) models.
- `render_all(eye, renderer)` handles each model in turn:
  - a loaded model within `CULL_DIST` (250) of the eye is drawn;
  - a loaded model farther than `FREE_DIST` (350) is unloaded;
  - an unloaded model closer than `ALLOC_DIST` (300) is reloaded. It is
    drawn from the next call on.
- `distance(a, b)` is the Euclidean distance between two 3D points.

### `stlscene.player`: first-person camera

- `stick_to_axes(lx, ly)` turns raw stick readings (0..255, centre 128) into
  `(strafe, forward)` amounts. A reading within a dead zone of 20 around the
  centre gives `(0.0, 0.0)`. Pushing the stick up (smaller `ly`) gives a
  positive forward amount.
- A `Player` has `x`, `y`, `z`, `yaw` and `pitch`. It starts at `z = -20`.
  `update(lx, ly, buttons)` moves the player along its heading from the
  stick, then turns by 0.1 radians for each button pressed:
  `Buttons.TRIANGLE` pitches up, `Buttons.CROSS` pitches down,
  `Buttons.SQUARE` increases yaw and `Buttons.CIRCLE` decreases it.
- `eye()` returns the camera position, 50 units above the player.
  `center()` returns the point one unit ahead of the eye along the view
  direction, for use with a look-at view.

## What it does not do

The package does not open a window, rasterise triangles or read a real
controller. `Renderer` only records draw commands, and the player is driven
by the values passed to `update`. Only binary STL is read; ASCII STL files
are not supported.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Example

```python
from stlscene.stl import Vec3
from stlscene.model import load_model, Renderer
from stlscene.modellist import ModelList
from stlscene.player import Player, Buttons

scene = ModelList()
scene.add(load_model("teapot.stl", Vec3(0, 10, 0), Vec3(4.712, 0, 0)))
scene.add(load_model("plane.stl", Vec3(0, 0, -200), Vec3(4.712, 0, 0)))

player = Player()
renderer = Renderer()
for _ in range(10):
    renderer.clear()
    player.update(128, 60, Buttons.SQUARE)   # push forward while turning
    scene.render_all(player.eye(), renderer)
    for command in renderer.commands:
        print(f"{command.vertex_count} vertices at {command.position}")
```

## Running the tests

```
pip install .[test]
pytest
```