"""Simulator of a three-joint PUMA-style robot arm: kinematics, scene state and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]