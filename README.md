# wireframer

A small software renderer that draws wireframes of Wavefront `.obj` models
into an RGBA pixel buffer and, from the command line, into a PNG file.
Everything runs on the CPU. Vertices are transformed to clip space with a
model–view–projection matrix. Edges whose ends fall behind the camera or far
outside the view are skipped, and the rest are drawn with Xiaolin Wu's
anti-aliased line algorithm.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
render-to-file input.obj CAM_X CAM_Y CAM_Z {perspective|orthographic} output.png
```

The camera sits at `(CAM_X, CAM_Y, CAM_Z)` and looks at the origin, with +Y
as up. The image is 1000×1000 pixels, white lines on a dark background
(RGB 24, 24, 28), and it is fully opaque.

- `perspective` uses a 100° vertical field of view, near plane 0.01 and far plane 100.
- `orthographic` uses the box `[-6, 6] × [-4, 4]`, near plane 0.01 and far plane 100.

The command prints the number of vertices, faces and edges it loaded. It
exits with status 1, after a message on standard error, in these cases:

- the number of arguments is wrong;
- a camera coordinate is not a number;
- the file has no `.obj` extension or cannot be opened;
- the projection type is unknown;
- the PNG cannot be written.

## Library use

```python
from wireframer.objparser import load_obj
from wireframer.render import render_image
from wireframer.vecmath import Vec3

model = load_obj("cube.obj")
raster = render_image(model, Vec3(3.0, 2.0, 5.0), "perspective", 640, 480)
rgba = raster.to_rgba_bytes()    # row-major RGBA, 4 bytes per pixel
```

### Modules

- `wireframer.vecmath` provides the immutable vectors `Vec2`, `IVec2`, `Vec3`
  and `Vec4`, and `Mat4`, a 4×4 matrix stored column-major.
  - Vectors support `+`, `-`, scalar `*`, and `/` (for the float vectors).
    `IVec2 // n` truncates toward zero.
  - Matrices are multiplied with each other and applied to a `Vec4` with the
    `@` operator, as in `proj @ view @ model`. `Mat4` also has `at`,
    `column`, `multiply_point` and `multiply_direction`.
  - Helpers: `radians`, `dot`, `cross`, `length`, `normalize`, `length_sq`,
    `manhattan`, `translate`, `scale`, `rotate`, `perspective`, `ortho` and
    `look_at`.
  - `perspective` and `ortho` raise `ValueError` for degenerate bounds.
- `wireframer.objparser` reads vertices and faces.
  - It provides `parse_obj(lines)`, `load_obj(filename)` and
    `extract_edges(faces)`, which return an `ObjModel` with `vertices`,
    `faces` (`Face` objects with zero-based `vertex_indices`) and `edges`.
  - Vertex lines that are not exactly three numbers are skipped.
  - In face entries like `1/2/3` only the first index counts. Faces with
    fewer than three entries or non-numeric indices are skipped.
  - Faces that refer to missing vertices are skipped with a logged warning.
  - Edges are unique `(low, high)` index pairs in sorted order.
  - `load_obj` raises `ObjError` for a wrong extension or an unreadable file.
- `wireframer.transforms` holds the scene matrices.
  - `ModelMatrix` (translation, rotation in degrees, scale) and `ViewMatrix`
    (position, target, up) rebuild their `matrix()` only after a parameter
    changes.
  - `ProjectionMatrix` starts as the identity and is switched with
    `set_perspective` or `set_orthographic`. Its `projection_type` is a
    `ProjectionType`.
- `wireframer.vertexprocessor`: `VertexProcessor(model, view, projection)`
  has `transform_vertices`, which returns clip-space `Vec4` positions.
- `wireframer.clipper` provides `ScreenClipper(xmin, ymin, xmax, ymax)`
  (Cohen–Sutherland, inclusive bounds) and `NearPlaneClipper(near_plane)`.
  Each `clip_line` returns the clipped pair of points, or `None` when the
  segment is rejected.
- `wireframer.rasterizer` provides `Color` (RGBA, 0–255, opaque by default)
  and `Rasterizer(width, height)`, which has:
  - `clear`;
  - `plot_aa`, which blends RGB and keeps alpha;
  - `draw_line`;
  - `pixel`;
  - `to_rgba_bytes`.
- `wireframer.render` holds the pipeline.
  - `draw_edges` draws into a raster and returns the number of lines drawn.
    It takes an optional near-plane clipper and an optional screen clipper.
    Without a screen clipper it only drops lines lying wholly beyond one
    screen edge.
  - `render_image` renders a whole model.
  - `ndc_to_screen` and `clip_screen_line` are the coordinate helpers.
  - `compute_center` and `orbit_eye` compute a bounding-box centre and an
    orbiting camera position.
  - `main` is the `render-to-file` command.

## What it does not do

There is no interactive viewer. The package opens no window and handles no
mouse or keyboard input. `compute_center` and `orbit_eye` are there to place
a camera, but showing the result on screen is left to the caller. It reads
only vertex (`v`) and face (`f`) lines. Normals, texture coordinates,
materials and groups are ignored, and nothing is filled or shaded: output is
lines only.