[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pumasim"
version = "0.1.0"
description = "Interactive simulator of a three-joint PUMA-style robot arm with teach-in, playback and inverse kinematics"
requires-python = ">=3.10"
keywords = ["robotics", "simulation", "inverse-kinematics", "puma", "manipulator"]
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
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Education",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pumasim = "pumasim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pumasim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
