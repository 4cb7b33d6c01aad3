import pytest

from wireframer.clipper import NearPlaneClipper, ScreenClipper
from wireframer.vecmath import IVec2, Vec4


@pytest.fixture
def screen():
    return ScreenClipper(0, 0, 99, 99)


def test_segment_inside_is_unchanged(screen):
    p0, p1 = IVec2(10, 20), IVec2(80, 90)
    assert screen.clip_line(p0, p1) == (p0, p1)


def test_segment_outside_on_one_side_is_rejected(screen):
    assert screen.clip_line(IVec2(-10, 5), IVec2(-3, 60)) is None
    assert screen.clip_line(IVec2(10, 150), IVec2(90, 120)) is None


def test_segment_outside_in_two_regions_missing_box_is_rejected(screen):
    assert screen.clip_line(IVec2(-10, 5), IVec2(5, -10)) is None


def test_horizontal_segment_is_cut_to_edges(screen):
    result = screen.clip_line(IVec2(-50, 50), IVec2(150, 50))
    assert result == (IVec2(screen.xmin, 50), IVec2(screen.xmax, 50))


def test_vertical_segment_is_cut_to_edges(screen):
    result = screen.clip_line(IVec2(30, 200), IVec2(30, -200))
    assert result == (IVec2(30, screen.ymax), IVec2(30, screen.ymin))


def test_diagonal_crossing_ends_inside(screen):
    q0, q1 = screen.clip_line(IVec2(-40, -20), IVec2(160, 130))
    for q in (q0, q1):
        assert screen.xmin <= q.x <= screen.xmax
        assert screen.ymin <= q.y <= screen.ymax
    assert q0.x < q1.x
    assert q0.y < q1.y


def test_one_endpoint_inside_keeps_it(screen):
    inner = IVec2(50, 50)
    result = screen.clip_line(inner, IVec2(300, 50))
    assert result == (inner, IVec2(screen.xmax, 50))


def test_near_plane_accepts_points_in_front():
    clipper = NearPlaneClipper(0.1)
    p0, p1 = Vec4(1.0, 2.0, 3.0, 1.0), Vec4(-1.0, 0.0, 2.0, 5.0)
    assert clipper.clip_line(p0, p1) == (p0, p1)


def test_near_plane_point_on_plane_counts_as_inside():
    clipper = NearPlaneClipper(0.1)
    p0, p1 = Vec4(0.0, 0.0, 0.0, 0.1), Vec4(1.0, 1.0, 1.0, 2.0)
    assert clipper.clip_line(p0, p1) == (p0, p1)


def test_near_plane_rejects_points_behind():
    clipper = NearPlaneClipper(0.1)
    assert clipper.clip_line(Vec4(0.0, 0.0, 0.0, -1.0), Vec4(1.0, 0.0, 0.0, 0.05)) is None


def test_near_plane_clips_first_point_onto_plane():
    clipper = NearPlaneClipper(0.1)
    p0, p1 = Vec4(0.0, 0.0, 0.0, -1.0), Vec4(2.0, 0.0, 0.0, 1.0)
    q0, q1 = clipper.clip_line(p0, p1)
    assert q1 == p1
    assert q0.w == pytest.approx(clipper.near_plane)
    # Along this segment x == w + 1, so the clipped point must stay on it.
    assert q0.x == pytest.approx(q0.w + 1.0)


def test_near_plane_clips_second_point_onto_plane():
    clipper = NearPlaneClipper(0.5)
    p0, p1 = Vec4(2.0, 4.0, 0.0, 1.0), Vec4(0.0, 0.0, 0.0, -1.0)
    q0, q1 = clipper.clip_line(p0, p1)
    assert q0 == p0
    assert q1.w == pytest.approx(clipper.near_plane)
    # Along this segment y == 2 * (w + 1) and x == w + 1.
    assert q1.y == pytest.approx(2.0 * (q1.w + 1.0))
    assert q1.x == pytest.approx(q1.w + 1.0)