[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motionplan"
version = "0.1.0"
description = "2D motion planning tools: polygon geometry, planning problems and paths, directed graphs, and a potential-field gradient descent planner"
requires-python = ">=3.10"
keywords = ["motion planning", "robotics", "potential field", "gradient descent", "geometry", "graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["motionplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
