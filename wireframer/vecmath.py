"""Small linear-algebra toolkit: 2/3/4-component vectors and a column-major 4x4 matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Union

Number = Union[int, float]


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


class _Vector:
    """Component-wise behaviour shared by all vector types."""

    __slots__ = ()

    def __iter__(self) -> Iterator[Number]:
        raise TypeError(f"{type(self).__name__} does not define its components")

    def __len__(self) -> int:
        return len(tuple(self))

    def __getitem__(self, i: int) -> Number:
        values = tuple(self)
        if not 0 <= i < len(values):
            raise IndexError(f"{type(self).__name__} index {i} out of range")
        return values[i]

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __mul__(self, s):
        if not isinstance(s, (int, float)):
            return NotImplemented
        return type(self)(*(a * s for a in self))

    __rmul__ = __mul__


class _FloatVector(_Vector):
    __slots__ = ()

    def __truediv__(self, s):
        if not isinstance(s, (int, float)):
            return NotImplemented
        return type(self)(*(a / s for a in self))


@dataclass(frozen=True, slots=True)
class Vec2(_FloatVector):
    """Two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))


@dataclass(frozen=True, slots=True)
class IVec2(_Vector):
    """Two-component integer vector; ``//`` truncates toward zero."""

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        return iter((self.x, self.y))

    def __mul__(self, s):
        if not isinstance(s, int):
            return NotImplemented
        return IVec2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __floordiv__(self, s):
        if not isinstance(s, int):
            return NotImplemented
        return IVec2(_trunc_div(self.x, s), _trunc_div(self.y, s))


@dataclass(frozen=True, slots=True)
class Vec3(_FloatVector):
    """Three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))


@dataclass(frozen=True, slots=True)
class Vec4(_FloatVector):
    """Four-component float vector (homogeneous coordinates)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def xyz(self) -> Vec3:
        """The first three components as a Vec3."""
        return Vec3(self.x, self.y, self.z)


def dot(a: _Vector, b: _Vector) -> Number:
    """Dot product of two vectors of the same type."""
    if type(a) is not type(b):
        raise TypeError(f"cannot dot {type(a).__name__} with {type(b).__name__}")
    return sum(x * y for x, y in zip(a, b))


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product of two 3D vectors."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def length(v: _Vector) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def normalize(v: _FloatVector) -> _FloatVector:
    """Unit vector in the direction of ``v``; the zero vector stays zero."""
    n = length(v)
    if n == 0.0:
        return type(v)(*(0.0 for _ in v))
    return v / n


def length_sq(v: IVec2) -> int:
    """Squared length of an integer vector."""
    return dot(v, v)


def manhattan(v: IVec2) -> int:
    """Manhattan length of an integer vector."""
    return abs(v.x) + abs(v.y)


def _idx(col: int, row: int) -> int:
    return col * 4 + row


_IDENTITY_VALUES = tuple(1.0 if i in (0, 5, 10, 15) else 0.0 for i in range(16))


@dataclass(frozen=True, slots=True)
class Mat4:
    """4x4 matrix stored column-major as 16 floats."""

    values: tuple = _IDENTITY_VALUES

    def __post_init__(self) -> None:
        vals = tuple(float(v) for v in self.values)
        if len(vals) != 16:
            raise ValueError(f"Mat4 needs 16 values, got {len(vals)}")
        object.__setattr__(self, "values", vals)

    @staticmethod
    def identity() -> "Mat4":
        """The identity matrix."""
        return Mat4()

    def at(self, col: int, row: int) -> float:
        """Element at the given column and row."""
        if not (0 <= col < 4 and 0 <= row < 4):
            raise IndexError(f"Mat4 index ({col}, {row}) out of range")
        return self.values[_idx(col, row)]

    def column(self, col: int) -> tuple:
        """The four elements of one column."""
        if not 0 <= col < 4:
            raise IndexError(f"Mat4 column {col} out of range")
        return self.values[col * 4 : col * 4 + 4]

    def _row_dot(self, row: int, comps) -> float:
        return sum(self.values[_idx(c, row)] * comps[c] for c in range(len(comps)))

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            out = [
                sum(self.values[_idx(k, row)] * other.values[_idx(col, k)] for k in range(4))
                for col in range(4)
                for row in range(4)
            ]
            return Mat4(tuple(out))
        if isinstance(other, Vec4):
            comps = tuple(other)
            return Vec4(*(self._row_dot(row, comps) for row in range(4)))
        return NotImplemented

    def multiply_point(self, v: Vec3) -> Vec3:
        """Transform a point (w=1), dividing by the resulting w when non-zero."""
        comps = (v.x, v.y, v.z, 1.0)
        x, y, z, w = (self._row_dot(row, comps) for row in range(4))
        if w != 0.0:
            x, y, z = x / w, y / w, z / w
        return Vec3(x, y, z)

    def multiply_direction(self, v: Vec3) -> Vec3:
        """Transform a direction, ignoring translation."""
        comps = (v.x, v.y, v.z)
        return Vec3(*(self._row_dot(row, comps) for row in range(3)))


def _identity_list() -> list:
    return list(_IDENTITY_VALUES)


def translate(t: Vec3, m: Optional[Mat4] = None) -> Mat4:
    """Translation matrix, applied after ``m`` when given."""
    vals = _identity_list()
    vals[_idx(3, 0)], vals[_idx(3, 1)], vals[_idx(3, 2)] = t.x, t.y, t.z
    tm = Mat4(tuple(vals))
    return tm if m is None else tm @ m


def scale(s: Vec3, m: Optional[Mat4] = None) -> Mat4:
    """Scale matrix, applied after ``m`` when given."""
    vals = _identity_list()
    vals[_idx(0, 0)], vals[_idx(1, 1)], vals[_idx(2, 2)] = s.x, s.y, s.z
    sm = Mat4(tuple(vals))
    return sm if m is None else sm @ m


def rotate(angle: float, axis: Vec3, m: Optional[Mat4] = None) -> Mat4:
    """Rotation by ``angle`` radians about ``axis``, applied after ``m`` when given."""
    a = normalize(axis)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    x, y, z = a.x, a.y, a.z

    vals = [0.0] * 16
    vals[_idx(0, 0)] = t * x * x + c
    vals[_idx(0, 1)] = t * x * y + s * z
    vals[_idx(0, 2)] = t * x * z - s * y
    vals[_idx(1, 0)] = t * x * y - s * z
    vals[_idx(1, 1)] = t * y * y + c
    vals[_idx(1, 2)] = t * y * z + s * x
    vals[_idx(2, 0)] = t * x * z + s * y
    vals[_idx(2, 1)] = t * y * z - s * x
    vals[_idx(2, 2)] = t * z * z + c
    vals[_idx(3, 3)] = 1.0
    rm = Mat4(tuple(vals))
    return rm if m is None else rm @ m


def perspective(fovy_radians: float, aspect: float, z_near: float, z_far: float) -> Mat4:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if z_far == z_near:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fovy_radians / 2.0)
    vals = [0.0] * 16
    vals[_idx(0, 0)] = f / aspect
    vals[_idx(1, 1)] = f
    vals[_idx(2, 2)] = (z_far + z_near) / (z_near - z_far)
    vals[_idx(2, 3)] = -1.0
    vals[_idx(3, 2)] = (2.0 * z_far * z_near) / (z_near - z_far)
    return Mat4(tuple(vals))


def ortho(left: float, right: float, bottom: float, top: float, z_near: float, z_far: float) -> Mat4:
    """Orthographic projection of the given box onto the unit cube."""
    if right == left or top == bottom or z_far == z_near:
        raise ValueError("orthographic bounds must have non-zero extent")
    vals = [0.0] * 16
    vals[_idx(0, 0)] = 2.0 / (right - left)
    vals[_idx(1, 1)] = 2.0 / (top - bottom)
    vals[_idx(2, 2)] = -2.0 / (z_far - z_near)
    vals[_idx(3, 3)] = 1.0
    vals[_idx(3, 0)] = -(right + left) / (right - left)
    vals[_idx(3, 1)] = -(top + bottom) / (top - bottom)
    vals[_idx(3, 2)] = -(z_far + z_near) / (z_far - z_near)
    return Mat4(tuple(vals))


def look_at(eye: Vec3, center: Vec3, up: Vec3) -> Mat4:
    """View matrix placing the camera at ``eye`` looking at ``center``."""
    f = normalize(center - eye)
    s = normalize(cross(f, up))
    u = cross(s, f)

    vals = _identity_list()
    vals[_idx(0, 0)], vals[_idx(1, 0)], vals[_idx(2, 0)] = s.x, s.y, s.z
    vals[_idx(0, 1)], vals[_idx(1, 1)], vals[_idx(2, 1)] = u.x, u.y, u.z
    vals[_idx(0, 2)], vals[_idx(1, 2)], vals[_idx(2, 2)] = -f.x, -f.y, -f.z
    vals[_idx(3, 0)] = -dot(s, eye)
    vals[_idx(3, 1)] = -dot(u, eye)
    vals[_idx(3, 2)] = dot(f, eye)
    return Mat4(tuple(vals))