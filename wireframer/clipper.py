"""Line clipping: Cohen–Sutherland in screen space and near-plane clipping in clip space."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Optional, Tuple

from .vecmath import IVec2, Vec4


class _OutCode(IntFlag):
    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


@dataclass(frozen=True)
class ScreenClipper:
    """Clips integer line segments to an inclusive screen rectangle."""

    xmin: int
    ymin: int
    xmax: int
    ymax: int

    def _out_code(self, x: int, y: int) -> _OutCode:
        code = _OutCode.INSIDE
        if x < self.xmin:
            code |= _OutCode.LEFT
        elif x > self.xmax:
            code |= _OutCode.RIGHT
        if y < self.ymin:
            code |= _OutCode.BOTTOM
        elif y > self.ymax:
            code |= _OutCode.TOP
        return code

    def clip_line(self, p0: IVec2, p1: IVec2) -> Optional[Tuple[IVec2, IVec2]]:
        """Return the clipped segment, or None if it lies wholly outside."""
        x0, y0 = p0.x, p0.y
        x1, y1 = p1.x, p1.y
        code0 = self._out_code(x0, y0)
        code1 = self._out_code(x1, y1)

        while True:
            if not (code0 | code1):
                return IVec2(x0, y0), IVec2(x1, y1)
            if code0 & code1:
                return None

            out = code0 if code0 else code1
            if out & _OutCode.TOP:
                x = x0 + _trunc_div((x1 - x0) * (self.ymax - y0), y1 - y0)
                y = self.ymax
            elif out & _OutCode.BOTTOM:
                x = x0 + _trunc_div((x1 - x0) * (self.ymin - y0), y1 - y0)
                y = self.ymin
            elif out & _OutCode.RIGHT:
                y = y0 + _trunc_div((y1 - y0) * (self.xmax - x0), x1 - x0)
                x = self.xmax
            else:
                y = y0 + _trunc_div((y1 - y0) * (self.xmin - x0), x1 - x0)
                x = self.xmin

            if out == code0:
                x0, y0 = x, y
                code0 = self._out_code(x0, y0)
            else:
                x1, y1 = x, y
                code1 = self._out_code(x1, y1)


@dataclass(frozen=True)
class NearPlaneClipper:
    """Clips clip-space segments so that every point has ``w >= near_plane``."""

    near_plane: float

    def clip_line(self, p0: Vec4, p1: Vec4) -> Optional[Tuple[Vec4, Vec4]]:
        """Return the clipped segment, or None if both ends are behind the plane."""
        inside0 = p0.w >= self.near_plane
        inside1 = p1.w >= self.near_plane

        if inside0 and inside1:
            return p0, p1
        if not inside0 and not inside1:
            return None

        if not inside0:
            t = (self.near_plane - p0.w) / (p1.w - p0.w)
            return _lerp(p0, p1, t), p1
        t = (self.near_plane - p1.w) / (p0.w - p1.w)
        return p0, _lerp(p1, p0, t)


def _lerp(a: Vec4, b: Vec4, t: float) -> Vec4:
    return Vec4(*(x + t * (y - x) for x, y in zip(a, b)))