"""Transformation of object-space vertices into clip space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .vecmath import Mat4, Vec3, Vec4


@dataclass
class VertexProcessor:
    """Applies the model-view-projection transform to vertices."""

    model: Mat4
    view: Mat4
    projection: Mat4

    def transform_vertices(self, vertices: Iterable[Vec3]) -> List[Vec4]:
        """Clip-space positions of the vertices, taken with w = 1."""
        mvp = self.projection @ self.view @ self.model
        return [mvp @ Vec4(v.x, v.y, v.z, 1.0) for v in vertices]