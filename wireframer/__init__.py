"""CPU wireframe renderer for Wavefront OBJ models: vector maths, OBJ reading, clipping, rasterising and PNG output."""

__version__ = "0.1.0"

__all__ = [
    "clipper",
    "objparser",
    "rasterizer",
    "render",
    "transforms",
    "vecmath",
    "vertexprocessor",
]