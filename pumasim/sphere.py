"""The ball the arm can pick up and carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

RED = (230, 41, 55)


@dataclass
class MovableSphere:
    """A sphere that can be attached to the end effector."""

    position: tuple[float, float, float]
    radius: float
    color: tuple[int, int, int] = RED

    def follow_manipulator(self, coords: Sequence[float]) -> None:
        """Move the sphere to the end-effector position."""
        x, y, z = coords
        self.position = (float(x), float(y), float(z))

    def is_near(self, coords: Sequence[float]) -> bool:
        """Whether ``coords`` lies within one radius of the centre on every axis."""
        return all(abs(c - p) <= self.radius for c, p in zip(coords, self.position))