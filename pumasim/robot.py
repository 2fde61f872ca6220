"""Links of the three-joint arm."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .transforms import rotation, translation

GRAY = (130, 130, 130)

_SHOULDER_HEIGHT = 2.75
_UPPER_ARM = 1.85
_ANGLE_LIMIT = 180
_SIDES = {"+": 1, "-": -1}


@dataclass
class RobotPart:
    """One box-shaped link; parts 1 to 3 each carry one revolute joint."""

    part_number: int
    position: tuple[float, float, float]
    width: float
    height: float
    length: float
    color: tuple[int, int, int] = GRAY
    angle: int = 0

    @property
    def has_joint(self) -> bool:
        return self.part_number in (1, 2, 3)

    def rotate(self, side: str) -> bool:
        """Turn the joint one degree towards ``side`` ("+" or "-").

        The joint stays strictly inside (-180, 180). Returns whether it moved.
        """
        try:
            step = _SIDES[side]
        except KeyError:
            raise ValueError(f"side must be '+' or '-', got {side!r}") from None
        if not self.has_joint or not -_ANGLE_LIMIT < self.angle < _ANGLE_LIMIT:
            return False
        if not -_ANGLE_LIMIT < self.angle + step < _ANGLE_LIMIT:
            return False
        self.angle += step
        return True

    def transform(self) -> np.ndarray:
        """The transform this link adds to the chain of links before it."""
        angles = {1: 0.0, 2: 0.0, 3: 0.0}
        if self.has_joint:
            angles[self.part_number] = float(self.angle)
        return (
            rotation((0, 1, 0), math.radians(angles[1]))
            @ translation(0.0, _SHOULDER_HEIGHT, 0.0)
            @ rotation((1, 0, 0), math.radians(angles[2]))
            @ translation(0.0, 0.0, _UPPER_ARM)
            @ rotation((1, 0, 0), math.radians(angles[3]))
            @ translation(0.0, -_SHOULDER_HEIGHT, -_UPPER_ARM)
        )