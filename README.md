# zenengine

The math and scene-setup core of a small 3D engine, written in plain Python
with no dependencies.

## Modules

- `zenengine.vectors` holds the basic value types:
  - `Vector2`, `Vector3` and `Vector4`. These are immutable vectors with `+`, `-`,
    unary `-`, scalar `*` and scalar `/`.
  - `Vector3` also has `cross`, `length`, `normalized` and `rotated(angle, axis)`,
    where the angle is in degrees. It has the constants `ZERO`, `ONE`, `UP`,
    `RIGHT` and `FORWARD`.
  - `Vector4` has `length`, `normalized`, `ZERO` and `ONE`.
  - `Quaternion` supports `*` with another quaternion or with a `Vector3`. It also
    has `normalized`, `conjugate`, `to_degrees` and `IDENTITY`.
  - `PersProjInfo` (field of view in degrees, width, height, near, far) and
    `OrthoProjInfo` (right, left, bottom, top, near, far) hold projection settings.
  - `to_radian` and `to_degree` convert angles.
- `zenengine.matrix` provides `Matrix4`, an immutable row-major 4x4 matrix:
  - It can be indexed by row (`m[1]`) or by element (`m[1, 2]`).
  - `*` multiplies it by another matrix or by a `Vector4`.
  - Class methods build matrices: `identity`, `zero`, `scale_transform`,
    `rotate_transform` (angles in degrees, composed as `Rz * Ry * Rx`),
    `quaternion_transform`, `translation_transform`, `camera_transform`,
    `perspective_projection` and `orthographic_projection`.
  - Instance methods are `transpose`, `determinant`, `inverse`, `flatten` and
    `format`. `inverse` raises `SingularMatrixError` when the determinant is zero.
    `flatten` returns 16 floats, row by row. `format` returns four lines of
    six-decimal numbers.
- `zenengine.vertex` provides `Vertex`, which holds a position, a texture
  coordinate and a normal. `as_floats()` gives these as eight interleaved floats.
- `zenengine.camera` provides `Camera3D`, a free-look camera, together with the
  `Key` enum and the `Renderable` base class:
  - `on_input(pressed_keys, mouse_position)` applies one frame of input. W, S, A
    and D move the camera along its view direction or sideways, and PAGE_UP and
    PAGE_DOWN move it up and down. Mouse movement changes the horizontal and
    vertical angles. The method returns `True` when W, S, A or D moved the camera.
  - `render()` keeps turning the camera while the mouse rests near a window edge,
    and then calls `update()`.
  - `update()` recomputes `target` and `up` from the two angles.
- `zenengine.pipeline` provides `Pipeline3D` and `Orientation3D`:
  - You set the scale, world position, rotation, camera and projection settings.
  - From these it builds the world, view, projection, view-projection,
    world-view-projection, orthographic world-view-projection, world-view and
    world-projection matrices.
  - A transform that needs a projection which has not been set raises `ValueError`.
  - A camera must be set before any view-dependent transform is built.
- `zenengine.bmp` reads uncompressed BMP images:
  - `parse_bmp(data)` and `load_bmp(path)` return a `BmpImage` with `width`,
    `height`, `data_offset`, `image_size` and the raw BGR `pixels`.
  - Data shorter than the 54-byte header, or without the `BM` signature, raises
    `BmpError`.
  - A zero image size in the header is taken as `width * height * 3`.

## Example

```python
from zenengine.vectors import Vector3, PersProjInfo
from zenengine.pipeline import Pipeline3D

pipeline = Pipeline3D()
pipeline.set_scale(2.0, 2.0, 2.0)
pipeline.set_world_position(0.0, 0.0, 5.0)
pipeline.set_rotation(0.0, 45.0, 0.0)
pipeline.set_camera(Vector3(0, 0, 0), Vector3(0, 0, 1), Vector3(0, 1, 0))
pipeline.set_perspective_projection(
    PersProjInfo(fov=60.0, width=640.0, height=480.0, z_near=1.0, z_far=100.0)
)

wvp = pipeline.world_view_projection_transform()
print(wvp.format())
values = wvp.flatten()  # 16 floats, row by row
```

## What it does not do

This package computes geometry and reads image bytes. It does not render
anything:

- It opens no window.
- It makes no graphics-API calls and compiles no shaders.
- It does not upload textures.
- It does not load 3D model files.
- It does not poll the keyboard or mouse. `Camera3D` only receives the
  input you pass to it.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```