"""Model, view and projection matrices with cached recomputation."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .vecmath import Mat4, Vec3, look_at, ortho, perspective, radians, rotate, scale, translate


class ModelMatrix:
    """Object-to-world transform built from translation, rotation and scale."""

    def __init__(self) -> None:
        self._translation = Vec3(0.0, 0.0, 0.0)
        self._rotation_angle = 0.0
        self._rotation_axis = Vec3(0.0, 1.0, 0.0)
        self._scale = Vec3(1.0, 1.0, 1.0)
        self._cache: Optional[Mat4] = None

    @property
    def translation(self) -> Vec3:
        return self._translation

    @translation.setter
    def translation(self, value: Vec3) -> None:
        self._translation = value
        self._cache = None

    @property
    def rotation_angle(self) -> float:
        """Rotation angle in degrees."""
        return self._rotation_angle

    @property
    def rotation_axis(self) -> Vec3:
        return self._rotation_axis

    @property
    def scale(self) -> Vec3:
        return self._scale

    @scale.setter
    def scale(self, value: Vec3) -> None:
        self._scale = value
        self._cache = None

    def set_rotation(self, angle_degrees: float, axis: Vec3) -> None:
        """Rotate by ``angle_degrees`` about ``axis``."""
        self._rotation_angle = angle_degrees
        self._rotation_axis = axis
        self._cache = None

    def matrix(self) -> Mat4:
        """The composed model matrix: translate, then rotate, then scale."""
        if self._cache is None:
            mat = Mat4.identity()
            mat = translate(self._translation, mat)
            mat = rotate(radians(self._rotation_angle), self._rotation_axis, mat)
            mat = scale(self._scale, mat)
            self._cache = mat
        return self._cache


class ViewMatrix:
    """Camera transform defined by position, target and up vector."""

    def __init__(self) -> None:
        self._position = Vec3(0.0, 0.0, 10.0)
        self._target = Vec3(0.0, 0.0, 0.0)
        self._up = Vec3(0.0, 1.0, 0.0)
        self._cache: Optional[Mat4] = None

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Vec3) -> None:
        self._position = value
        self._cache = None

    @property
    def target(self) -> Vec3:
        return self._target

    @target.setter
    def target(self, value: Vec3) -> None:
        self._target = value
        self._cache = None

    @property
    def up(self) -> Vec3:
        return self._up

    @up.setter
    def up(self, value: Vec3) -> None:
        self._up = value
        self._cache = None

    def set_camera(self, position: Vec3, target: Vec3, up: Vec3) -> None:
        """Set position, target and up at once."""
        self._position = position
        self._target = target
        self._up = up
        self._cache = None

    def matrix(self) -> Mat4:
        """The look-at view matrix for the current camera."""
        if self._cache is None:
            self._cache = look_at(self._position, self._target, self._up)
        return self._cache


class ProjectionType(Enum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


class ProjectionMatrix:
    """Perspective or orthographic projection; starts as identity, typed perspective."""

    def __init__(self) -> None:
        self._matrix = Mat4.identity()
        self._type = ProjectionType.PERSPECTIVE

    @property
    def projection_type(self) -> ProjectionType:
        return self._type

    def set_perspective(
        self, fov_degrees: float, aspect: float, near_plane: float, far_plane: float
    ) -> None:
        """Use a perspective projection with a vertical field of view in degrees."""
        self._matrix = perspective(radians(fov_degrees), aspect, near_plane, far_plane)
        self._type = ProjectionType.PERSPECTIVE

    def set_orthographic(
        self,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near_plane: float,
        far_plane: float,
    ) -> None:
        """Use an orthographic projection of the given box."""
        self._matrix = ortho(left, right, bottom, top, near_plane, far_plane)
        self._type = ProjectionType.ORTHOGRAPHIC

    def matrix(self) -> Mat4:
        """The current projection matrix."""
        return self._matrix