[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "wireframer"
version = "0.1.0"
description = "CPU wireframe renderer for Wavefront OBJ models with anti-aliased line drawing"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["wireframe", "obj", "rasterizer", "3d", "rendering", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
render-to-file = "wireframer.render:main"

[tool.setuptools.packages.find]
include = ["wireframer*"]

[tool.pytest.ini_options]
addopts = "-ra"
