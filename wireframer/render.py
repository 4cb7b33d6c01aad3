"""Wireframe rendering pipeline and the render-to-file command."""

from __future__ import annotations

import math
import sys
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .clipper import NearPlaneClipper, ScreenClipper
from .objparser import ObjError, ObjModel, load_obj
from .rasterizer import Color, Rasterizer
from .transforms import ProjectionType
from .vecmath import IVec2, Mat4, Vec3, Vec4, look_at, ortho, perspective, radians
from .vertexprocessor import VertexProcessor

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 1000
BACKGROUND = Color(24, 24, 28)
WHITE = Color(255, 255, 255)

_USAGE = (
    "Usage: render-to-file input.obj cam_x cam_y cam_z "
    "[perspective|orthographic] output.png"
)


def ndc_to_screen(ndc_x: float, ndc_y: float, width: int, height: int) -> IVec2:
    """Map normalised device coordinates to pixel coordinates (y grows downwards)."""
    x = int((ndc_x * 0.5 + 0.5) * width)
    y = int((1.0 - (ndc_y * 0.5 + 0.5)) * height)
    return IVec2(x, y)


def clip_screen_line(p0: IVec2, p1: IVec2, width: int, height: int) -> bool:
    """False when both ends lie beyond the same screen edge."""
    if (p0.x < 0 and p1.x < 0) or (p0.x >= width and p1.x >= width):
        return False
    if (p0.y < 0 and p1.y < 0) or (p0.y >= height and p1.y >= height):
        return False
    return True


def compute_center(vertices: Iterable[Vec3]) -> Vec3:
    """Centre of the axis-aligned bounding box of the vertices."""
    lo = [1e9, 1e9, 1e9]
    hi = [-1e9, -1e9, -1e9]
    for v in vertices:
        for axis, value in enumerate(v):
            lo[axis] = min(lo[axis], value)
            hi[axis] = max(hi[axis], value)
    return (Vec3(*lo) + Vec3(*hi)) * 0.5


def orbit_eye(center: Vec3, yaw_degrees: float, pitch_degrees: float, distance: float) -> Vec3:
    """Camera position orbiting ``center`` at the given angles and distance."""
    yaw = radians(yaw_degrees)
    pitch = radians(pitch_degrees)
    direction = Vec3(
        math.cos(pitch) * math.sin(yaw),
        math.sin(pitch),
        math.cos(pitch) * math.cos(yaw),
    )
    return center + direction * distance


def _excess(v: float) -> float:
    return max(0.0, abs(v) - 1.0)


def draw_edges(
    raster: Rasterizer,
    clip_space: Sequence[Vec4],
    edges: Iterable[Tuple[int, int]],
    color: Color = WHITE,
    near_epsilon: float = 1e-3,
    ndc_limit: float = 100.0,
    near_clipper: Optional[NearPlaneClipper] = None,
    screen_clipper: Optional[ScreenClipper] = None,
) -> int:
    """Draw the edges of clip-space vertices into ``raster``; returns the lines drawn."""
    threshold = ndc_limit - 1.0
    drawn = 0
    for first, second in edges:
        v0 = clip_space[first]
        v1 = clip_space[second]
        if near_clipper is not None:
            clipped = near_clipper.clip_line(v0, v1)
            if clipped is None:
                continue
            v0, v1 = clipped
        if v0.w < near_epsilon or v1.w < near_epsilon:
            continue

        nx0, ny0 = v0.x / v0.w, v0.y / v0.w
        nx1, ny1 = v1.x / v1.w, v1.y / v1.w
        if max(_excess(nx0), _excess(ny0)) > threshold:
            continue
        if max(_excess(nx1), _excess(ny1)) > threshold:
            continue

        p0 = ndc_to_screen(nx0, ny0, raster.width, raster.height)
        p1 = ndc_to_screen(nx1, ny1, raster.width, raster.height)
        dx, dy = p0.x - p1.x, p0.y - p1.y
        if dx * dx + dy * dy < 4:
            continue

        if screen_clipper is None:
            if not clip_screen_line(p0, p1, raster.width, raster.height):
                continue
        else:
            segment = screen_clipper.clip_line(p0, p1)
            if segment is None:
                continue
            p0, p1 = segment
        raster.draw_line(p0, p1, color)
        drawn += 1
    return drawn


def _projection(kind: Union[ProjectionType, str], width: int, height: int) -> Mat4:
    try:
        kind = ProjectionType(kind)
    except ValueError:
        raise ValueError(
            "Unknown projection type (should be 'perspective' or 'orthographic')."
        ) from None
    if kind is ProjectionType.PERSPECTIVE:
        return perspective(radians(100.0), float(width) / height, 0.01, 100.0)
    return ortho(-6.0, 6.0, -4.0, 4.0, 0.01, 100.0)


def render_image(
    model: ObjModel,
    eye: Vec3,
    projection_type: Union[ProjectionType, str],
    width: int = WINDOW_WIDTH,
    height: int = WINDOW_HEIGHT,
) -> Rasterizer:
    """Render the model's edges seen from ``eye`` towards the origin."""
    proj = _projection(projection_type, width, height)
    view = look_at(eye, Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    processor = VertexProcessor(Mat4.identity(), view, proj)
    raster = Rasterizer(width, height)
    raster.clear(BACKGROUND)
    clip_space = processor.transform_vertices(model.vertices)
    draw_edges(raster, clip_space, model.edges, WHITE)
    return raster


def _save_png(raster: Rasterizer, path: str) -> None:
    from PIL import Image

    data = bytearray(raster.to_rgba_bytes())
    data[3::4] = b"\xff" * (raster.width * raster.height)
    Image.frombytes("RGBA", (raster.width, raster.height), bytes(data)).save(path, "PNG")


def main(argv: Optional[List[str]] = None) -> int:
    """Render an OBJ wireframe from a camera position into a PNG file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 6:
        print(_USAGE, file=sys.stderr)
        return 1

    obj_file, cam_x, cam_y, cam_z, proj_type, out_file = args
    try:
        eye = Vec3(float(cam_x), float(cam_y), float(cam_z))
    except ValueError:
        print("Camera coordinates must be numbers.", file=sys.stderr)
        return 1

    try:
        model = load_obj(obj_file)
    except ObjError as exc:
        print(exc, file=sys.stderr)
        print("Failed to load OBJ file.", file=sys.stderr)
        return 1
    print(
        f"Loaded {len(model.vertices)} vertices and {len(model.faces)} faces "
        f"with {len(model.edges)} edges."
    )

    try:
        raster = render_image(model, eye, proj_type)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        _save_png(raster, out_file)
    except (OSError, ValueError):
        print("Could not write output PNG file.", file=sys.stderr)
        return 1
    print(f"Rendered frame saved to {out_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())