"""Software rasterizer: an RGBA pixel buffer with anti-aliased line drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vecmath import IVec2


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour; opaque by default."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} outside 0..255")


def _frac(x: float) -> float:
    return x - math.floor(x)


def _to_byte(value: float) -> int:
    return max(0, min(255, int(value)))


class Rasterizer:
    """A fixed-size pixel buffer that lines can be drawn into."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid raster size {width}x{height}")
        self._width = width
        self._height = height
        self._buffer = bytearray(bytes((0, 0, 0, 255)) * (width * height))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self, color: Color) -> None:
        """Fill every pixel with ``color``."""
        self._buffer[:] = bytes((color.r, color.g, color.b, color.a)) * (
            self._width * self._height
        )

    def pixel(self, x: int, y: int) -> Color:
        """The colour of the pixel at (x, y)."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height}")
        i = (y * self._width + x) * 4
        r, g, b, a = self._buffer[i : i + 4]
        return Color(r, g, b, a)

    def plot_aa(self, x: int, y: int, color: Color, intensity: float) -> None:
        """Blend ``color`` into the pixel with the given coverage; alpha is kept."""
        if not (0 <= x < self._width and 0 <= y < self._height and intensity > 0.0):
            return
        buf = self._buffer
        i = (y * self._width + x) * 4
        rest = 1.0 - intensity
        buf[i] = _to_byte(color.r * intensity + buf[i] * rest)
        buf[i + 1] = _to_byte(color.g * intensity + buf[i + 1] * rest)
        buf[i + 2] = _to_byte(color.b * intensity + buf[i + 2] * rest)

    def _plot(self, steep: bool, major: int, minor: int, color: Color, intensity: float) -> None:
        if steep:
            self.plot_aa(minor, major, color, intensity)
        else:
            self.plot_aa(major, minor, color, intensity)

    def draw_line(self, p0: IVec2, p1: IVec2, color: Color) -> None:
        """Draw an anti-aliased line between two pixel positions (Wu's algorithm)."""
        x0, y0 = p0.x, p0.y
        x1, y1 = p1.x, p1.y
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0

        dx = float(x1 - x0)
        dy = float(y1 - y0)
        gradient = 1.0 if dx == 0.0 else dy / dx

        y_end = float(y0)
        y_pixel = int(y_end)
        self._plot(steep, x0, y_pixel, color, 1.0 - _frac(y_end))
        self._plot(steep, x0, y_pixel + 1, color, _frac(y_end))

        y = y_end + gradient
        for x in range(x0 + 1, x1):
            y_pix = int(y)
            self._plot(steep, x, y_pix, color, 1.0 - _frac(y))
            self._plot(steep, x, y_pix + 1, color, _frac(y))
            y += gradient

        y_last = float(y1)
        self._plot(steep, x1, int(y_last), color, 1.0 - _frac(y_last))
        self._plot(steep, x1, int(y_last) + 1, color, _frac(y_last))

    def to_rgba_bytes(self) -> bytes:
        """The whole buffer as row-major RGBA bytes."""
        return bytes(self._buffer)