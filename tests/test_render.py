import math

import pytest
from PIL import Image

from wireframer.clipper import NearPlaneClipper, ScreenClipper
from wireframer.objparser import parse_obj
from wireframer.rasterizer import Color, Rasterizer
from wireframer.render import (
    clip_screen_line,
    compute_center,
    draw_edges,
    main,
    ndc_to_screen,
    orbit_eye,
    render_image,
)
from wireframer.transforms import ProjectionType
from wireframer.vecmath import IVec2, Vec3, Vec4

SQUARE_OBJ = "v -1 -1 0\nv 1 -1 0\nv 1 1 0\nv -1 1 0\nf 1 2 3 4\n"
BACKGROUND = Color(24, 24, 28)


def test_ndc_corners_map_to_screen_corners():
    assert ndc_to_screen(-1.0, 1.0, 100, 80) == IVec2(0, 0)
    assert ndc_to_screen(1.0, -1.0, 100, 80) == IVec2(100, 80)


def test_ndc_origin_maps_to_middle():
    assert ndc_to_screen(0.0, 0.0, 100, 100) == IVec2(50, 50)


def test_clip_screen_line_rejects_same_side():
    assert clip_screen_line(IVec2(-5, 3), IVec2(-1, 7), 10, 10) is False
    assert clip_screen_line(IVec2(2, 10), IVec2(5, 12), 10, 10) is False


def test_clip_screen_line_accepts_crossing():
    assert clip_screen_line(IVec2(-5, 3), IVec2(5, 3), 10, 10) is True


def test_compute_center_of_box():
    verts = [Vec3(-1, 0, 2), Vec3(3, 4, 6), Vec3(1, 2, 4)]
    assert compute_center(verts) == Vec3(1.0, 2.0, 4.0)


def test_compute_center_empty_is_origin():
    assert compute_center([]) == Vec3(0.0, 0.0, 0.0)


def test_orbit_eye_distance_invariant():
    center = Vec3(1.0, 2.0, 3.0)
    eye = orbit_eye(center, 37.0, -20.0, 7.5)
    d = eye - center
    assert math.isclose(math.sqrt(d.x**2 + d.y**2 + d.z**2), 7.5)


def test_orbit_eye_zero_angles_along_z():
    eye = orbit_eye(Vec3(0.0, 0.0, 0.0), 0.0, 0.0, 5.0)
    assert eye.x == pytest.approx(0.0)
    assert eye.y == pytest.approx(0.0)
    assert eye.z == pytest.approx(5.0)


def test_draw_edges_skips_points_behind_camera():
    raster = Rasterizer(20, 20)
    before = raster.to_rgba_bytes()
    clip = [Vec4(0, 0, 0, -1.0), Vec4(0.5, 0.5, 0, 1.0)]
    assert draw_edges(raster, clip, [(0, 1)]) == 0
    assert raster.to_rgba_bytes() == before


def test_draw_edges_skips_tiny_edges():
    raster = Rasterizer(20, 20)
    clip = [Vec4(0.0, 0.0, 0, 1.0), Vec4(0.01, 0.0, 0, 1.0)]
    assert draw_edges(raster, clip, [(0, 1)]) == 0


def test_draw_edges_skips_far_outside_points():
    raster = Rasterizer(20, 20)
    clip = [Vec4(0.0, 0.0, 0, 1.0), Vec4(500.0, 0.0, 0, 1.0)]
    assert draw_edges(raster, clip, [(0, 1)]) == 0


def test_draw_edges_draws_visible_edge():
    raster = Rasterizer(20, 20)
    clip = [Vec4(-0.5, 0.0, 0, 1.0), Vec4(0.5, 0.0, 0, 1.0)]
    assert draw_edges(raster, clip, [(0, 1)]) == 1
    assert raster.pixel(10, 10) == Color(255, 255, 255)


def test_draw_edges_with_clippers():
    raster = Rasterizer(20, 20)
    clip = [Vec4(-0.5, 0.0, 0, -1.0), Vec4(0.5, 0.0, 0, 1.0), Vec4(-3.0, 0.0, 0, 1.0)]
    count = draw_edges(
        raster,
        clip,
        [(0, 1), (1, 2)],
        near_clipper=NearPlaneClipper(0.01),
        screen_clipper=ScreenClipper(0, 0, 19, 19),
    )
    assert count >= 1
    assert raster.pixel(0, 10) == Color(255, 255, 255)


def test_render_image_unknown_projection():
    model = parse_obj(SQUARE_OBJ.splitlines())
    with pytest.raises(ValueError):
        render_image(model, Vec3(0, 0, 5), "fisheye", 40, 40)


@pytest.mark.parametrize("kind", ["perspective", ProjectionType.ORTHOGRAPHIC])
def test_render_image_draws_on_background(kind):
    model = parse_obj(SQUARE_OBJ.splitlines())
    raster = render_image(model, Vec3(0, 0, 5), kind, 60, 60)
    pixels = [raster.pixel(x, y) for y in range(60) for x in range(60)]
    assert raster.pixel(0, 0) == BACKGROUND
    assert any(p != BACKGROUND for p in pixels)


def test_main_wrong_argument_count():
    assert main(["only.obj"]) == 1


def test_main_bad_camera_value(tmp_path):
    obj = tmp_path / "square.obj"
    obj.write_text(SQUARE_OBJ)
    assert main([str(obj), "x", "0", "5", "perspective", str(tmp_path / "o.png")]) == 1


def test_main_missing_file(tmp_path):
    out = tmp_path / "o.png"
    assert main([str(tmp_path / "none.obj"), "0", "0", "5", "perspective", str(out)]) == 1
    assert not out.exists()


def test_main_unknown_projection(tmp_path):
    obj = tmp_path / "square.obj"
    obj.write_text(SQUARE_OBJ)
    out = tmp_path / "o.png"
    assert main([str(obj), "0", "0", "5", "fisheye", str(out)]) == 1
    assert not out.exists()


def test_main_writes_png(tmp_path):
    obj = tmp_path / "square.obj"
    obj.write_text(SQUARE_OBJ)
    out = tmp_path / "frame.png"
    assert main([str(obj), "0", "0", "5", "perspective", str(out)]) == 0
    with Image.open(out) as image:
        assert image.size == (1000, 1000)
        assert image.convert("RGBA").getpixel((0, 0)) == (24, 24, 28, 255)