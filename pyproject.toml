[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdfvolume"
version = "0.1.0"
description = "Sample signed distance functions onto a voxel grid and export the result as a raw 8-bit volume."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["sdf", "signed distance field", "voxel", "volume", "raymarching", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sdfvolume = "sdfvolume.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sdfvolume"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
