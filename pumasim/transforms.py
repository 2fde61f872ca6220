"""Homogeneous 4x4 transforms acting on column vectors."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def identity() -> np.ndarray:
    """The identity transform."""
    return np.eye(4)


def translation(x: float, y: float, z: float) -> np.ndarray:
    """A transform that moves points by ``(x, y, z)``."""
    matrix = np.eye(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def rotation(axis: Sequence[float], angle: float) -> np.ndarray:
    """A right-handed rotation by ``angle`` radians about ``axis``."""
    vector = np.asarray(axis, dtype=float)
    length = np.linalg.norm(vector)
    if length == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = vector / length
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    matrix = np.eye(4)
    matrix[:3, :3] = [
        [x * x * t + c, x * y * t - z * s, x * z * t + y * s],
        [y * x * t + z * s, y * y * t + c, y * z * t - x * s],
        [z * x * t - y * s, z * y * t + x * s, z * z * t + c],
    ]
    return matrix


def transform_point(point: Sequence[float], matrix: np.ndarray) -> tuple[float, float, float]:
    """Apply ``matrix`` to a 3D point."""
    x, y, z, _ = np.asarray(matrix, dtype=float) @ np.array([*point, 1.0], dtype=float)
    return float(x), float(y), float(z)