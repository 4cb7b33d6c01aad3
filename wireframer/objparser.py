"""Reader for the vertex and face subset of Wavefront OBJ files."""

from __future__ import annotations

import logging
import math
import os
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .vecmath import Vec3

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]

_FLT_MAX = 3.4028234663852886e38
_FLT_MIN = 1.1754943508222875e-38

_FLOAT_PREFIX = re.compile(
    r"""
    [+-]?
    (?:
        (?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)
      | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | inf(?:inity)?
      | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


class ObjError(Exception):
    """Raised when an OBJ file cannot be loaded."""


@dataclass(frozen=True)
class Face:
    """A polygon given by zero-based vertex indices."""

    vertex_indices: Tuple[int, ...]


@dataclass
class ObjModel:
    """Vertices, faces and the unique edges of a loaded model."""

    vertices: List[Vec3] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)


def _parse_float(token: str) -> Optional[float]:
    """Parse the leading number of ``token`` as a single-precision value would be read.

    Returns None when there is no number or it is out of single-precision range.
    """
    match = _FLOAT_PREFIX.match(token)
    if match is None:
        return None
    text = match.group(0)
    if match.group("hex"):
        sign = -1.0 if text.startswith("-") else 1.0
        value = sign * float.fromhex(text.lstrip("+-"))
    else:
        value = float(text)
    if math.isnan(value):
        return value
    lowered = text.lower()
    if math.isinf(value):
        return value if "inf" in lowered else None
    if abs(value) > _FLT_MAX:
        return None
    if value == 0.0:
        if re.search(r"[1-9]", lowered.split("e")[0].split("p")[0].replace("0x", "", 1)):
            return None
        return value
    if abs(value) < _FLT_MIN:
        return None
    return value


def _parse_vertex(tokens: Sequence[str]) -> Optional[Vec3]:
    if len(tokens) != 3:
        return None
    coords = [_parse_float(t) for t in tokens]
    if any(c is None for c in coords):
        return None
    return Vec3(*coords)


def _face_indices(tokens: Sequence[str]) -> Optional[Tuple[int, ...]]:
    if len(tokens) < 3:
        return None
    indices = []
    for token in tokens:
        head = token.split("/", 1)[0]
        if not head or not all(ch in "0123456789" for ch in head):
            return None
        indices.append(int(head) - 1)
    return tuple(indices)


def extract_edges(faces: Iterable[Face]) -> List[Edge]:
    """Unique undirected edges of the faces, each as (low, high), in sorted order."""
    unique = set()
    for face in faces:
        idx = face.vertex_indices
        for a, b in zip(idx, idx[1:] + idx[:1]):
            unique.add((min(a, b), max(a, b)))
    return sorted(unique)


def parse_obj(lines: Iterable[str]) -> ObjModel:
    """Build a model from OBJ text lines; malformed lines are skipped."""
    model = ObjModel()
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        prefix, rest = tokens[0], tokens[1:]
        if prefix == "v":
            vertex = _parse_vertex(rest)
            if vertex is not None:
                model.vertices.append(vertex)
        elif prefix == "f":
            indices = _face_indices(rest)
            if indices is None:
                continue
            count = len(model.vertices)
            if all(0 <= i < count for i in indices):
                model.faces.append(Face(indices))
            else:
                logger.warning(
                    "Face references nonexistent vertex in line: %s", line.rstrip("\n")
                )
    model.edges = extract_edges(model.faces)
    return model


def load_obj(filename: Union[str, os.PathLike]) -> ObjModel:
    """Load an ``.obj`` file; raises ObjError for a wrong extension or unreadable file."""
    name = os.fspath(filename)
    dot = name.rfind(".")
    if dot == -1 or name[dot:] != ".obj":
        raise ObjError(f"File must have .obj extension. Provided: {name}")
    try:
        with open(name, encoding="utf-8", errors="replace") as handle:
            return parse_obj(handle)
    except OSError as exc:
        raise ObjError(f"Cannot open {name}: {exc}") from exc