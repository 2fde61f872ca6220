"""Forward and inverse kinematics of the three-joint arm.

Coordinates are ``(x, height, depth)``; joint angles are in degrees.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

UPPER_ARM = 1.85
FOREARM = 2.55
SHOULDER_HEIGHT = 2.75
BASE_HEIGHT = 5.5

TOLERANCE = 1e-6
MAX_ITERATIONS = 300
INITIAL_GUESS = (10.0, 10.0, 10.0)


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0


def normalize_angle(angle_degrees: float) -> float:
    """Wrap an angle in degrees into the range [-180, 180]."""
    if not math.isfinite(angle_degrees):
        raise ValueError(f"angle must be finite, got {angle_degrees!r}")
    while angle_degrees > 180.0:
        angle_degrees -= 360.0
    while angle_degrees < -180.0:
        angle_degrees += 360.0
    return angle_degrees


def _forward(alpha: float, beta: float, gamma: float) -> np.ndarray:
    """End-effector position for joint angles given in radians."""
    sa, ca = math.sin(alpha), math.cos(alpha)
    sb, cb = math.sin(beta), math.cos(beta)
    sg, cg = math.sin(gamma), math.cos(gamma)
    return np.array(
        [
            UPPER_ARM * sa * cb - FOREARM * sa * sb * sg + FOREARM * sa * cb * cg,
            BASE_HEIGHT
            - (SHOULDER_HEIGHT + UPPER_ARM * sb + FOREARM * sb * cg + FOREARM * cb * sg),
            UPPER_ARM * ca * cb + FOREARM * ca * cb * cg - FOREARM * ca * sb * sg,
        ]
    )


def _radians(angles: Iterable[float]) -> tuple[float, float, float]:
    alpha, beta, gamma = (degrees_to_radians(float(a)) for a in angles)
    return alpha, beta, gamma


def equations(angles: Sequence[float], xyz: Sequence[float]) -> np.ndarray:
    """Residual between a target position and the position reached by ``angles``."""
    return np.asarray(xyz, dtype=float) - _forward(*_radians(angles))


def jacobian(angles: Sequence[float]) -> np.ndarray:
    """Partial derivatives of the end-effector position by each joint angle (per radian)."""
    alpha, beta, gamma = _radians(angles)
    sa, ca = math.sin(alpha), math.cos(alpha)
    sb, cb = math.sin(beta), math.cos(beta)
    sg, cg = math.sin(gamma), math.cos(gamma)
    u, f = UPPER_ARM, FOREARM
    return np.array(
        [
            [
                u * ca * cb - f * ca * sb * sg + f * ca * cb * cg,
                -u * sa * sb - f * sa * cb * sg - f * sa * sb * cg,
                -f * sa * sb * cg - f * sa * cb * sg,
            ],
            [
                0.0,
                -u * cb - f * cb * cg + f * sb * sg,
                f * sb * sg - f * cb * cg,
            ],
            [
                -u * sa * cb - f * sa * cb * cg + f * sa * sb * sg,
                -u * ca * sb - f * ca * cb * sg - f * ca * sb * cg,
                -f * ca * sb * cg - f * ca * cb * sg,
            ],
        ]
    )


def find_angles(x: float, y: float, z: float) -> tuple[int, int, int]:
    """Find joint angles that bring the end effector to ``(x, y, z)``.

    Newton-Raphson iteration from a fixed first guess; the result is
    truncated to whole degrees.
    """
    target = np.array([x, y, z], dtype=float)
    angles = np.array(INITIAL_GUESS, dtype=float)
    for _ in range(MAX_ITERATIONS):
        residual = equations(angles, target)
        delta, *_ = np.linalg.lstsq(jacobian(angles), residual, rcond=None)
        angles = np.array([normalize_angle(a) for a in angles + delta])
        if np.linalg.norm(delta) < TOLERANCE:
            break
    alpha, beta, gamma = (int(a) for a in angles)
    return alpha, beta, gamma


def manipulator_coordinates(rot1: float, rot2: float, rot3: float) -> tuple[float, float, float]:
    """End-effector position for joint angles given in degrees."""
    x, y, z = _forward(*_radians((rot1, rot2, rot3)))
    return float(x), float(y), float(z)


def rotation_axis_coordinates(rot1: float, rot2: float, rot3: float) -> tuple[float, float, float]:
    """Position of the elbow axis used for the collision check."""
    alpha, beta, gamma = _radians((rot1, rot2, rot3))
    return (
        UPPER_ARM * math.sin(alpha) * math.cos(beta),
        UPPER_ARM * math.cos(alpha) * math.cos(beta),
        SHOULDER_HEIGHT + UPPER_ARM * math.sin(gamma),
    )