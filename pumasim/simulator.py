"""Frame-by-frame behaviour of the arm: manual driving, teaching, replay and reaching."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Sequence

from .kinematics import find_angles, manipulator_coordinates, rotation_axis_coordinates
from .panel import ControlPanel
from .robot import GRAY, RobotPart
from .sphere import MovableSphere
from .states import GameState

DARKGRAY = (80, 80, 80)

JOINT_KEYS = (("1", "2"), ("3", "4"), ("5", "6"))
PICK_UP_KEY = "space"
PUT_DOWN_KEY = "enter"

CLEARANCE_RADIUS = 0.8 * math.sqrt(2) / 2 + 0.2
MAX_SAFE_HEIGHT = 3.5

_STEPS = {"+": 1, "-": -1}


class Waypoint(NamedTuple):
    """One recorded pose of the arm together with where the ball was."""

    angles: tuple[int, int, int]
    sphere_position: tuple[float, float, float]


def is_move_safe(rotations: Sequence[int], joint: int, side: str) -> bool:
    """Whether turning ``joint`` (1 to 3) one degree towards ``side`` keeps the arm
    clear of the base column and above the floor."""
    angles = list(rotations)
    if len(angles) != 3:
        raise ValueError(f"expected three joint angles, got {len(angles)}")
    if joint not in (1, 2, 3):
        raise ValueError(f"joint must be 1, 2 or 3, got {joint!r}")
    try:
        angles[joint - 1] += _STEPS[side]
    except KeyError:
        raise ValueError(f"side must be '+' or '-', got {side!r}") from None

    mx, my, mz = manipulator_coordinates(*angles)
    ax, _, az = rotation_axis_coordinates(*angles)
    limit = CLEARANCE_RADIUS**2
    clear_of_base = mx * mx + mz * mz > limit or my > MAX_SAFE_HEIGHT
    return clear_of_base and ax * ax + az * az > limit and my >= 0


def _default_parts() -> list[RobotPart]:
    return [
        RobotPart(1, (0.0, 1.5, 0.0), 0.8, 3.0, 0.8, GRAY),
        RobotPart(2, (0.65, 2.75, 0.85), 0.5, 0.5, 2.5, GRAY),
        RobotPart(3, (0.15, 2.75, 2.75), 0.5, 0.5, 2.5, GRAY),
        RobotPart(4, (0.15, 2.75, 4.15), 0.3, 0.3, 0.3, DARKGRAY),
    ]


def _default_sphere() -> MovableSphere:
    return MovableSphere((0.0, 0.5, 2.0), 0.5)


@dataclass
class Simulator:
    """The whole scene and the state machine that drives it."""

    screen_width: int = 1500
    screen_height: int = 800
    parts: list[RobotPart] = field(default_factory=_default_parts)
    sphere: MovableSphere = field(default_factory=_default_sphere)
    state: GameState = GameState.MANUAL
    execute_flag: int = 1
    carrying: bool = False
    recording: list[Waypoint] = field(default_factory=list)
    playback_index: int = 0
    moving: bool = False
    target_angles: tuple[int, int, int] = (0, 0, 0)
    panel: ControlPanel = field(init=False)

    def __post_init__(self) -> None:
        self.panel = ControlPanel(self.screen_width, self.screen_height)

    @property
    def joints(self) -> list[RobotPart]:
        """The three parts that carry a joint, base first."""
        return self.parts[:3]

    @property
    def angles(self) -> tuple[int, int, int]:
        """Current joint angles in degrees."""
        first, second, third = (part.angle for part in self.joints)
        return first, second, third

    @angles.setter
    def angles(self, values: Sequence[int]) -> None:
        for part, value in zip(self.joints, values, strict=True):
            part.angle = int(value)

    def manipulator(self) -> tuple[float, float, float]:
        """Current end-effector position."""
        return manipulator_coordinates(*self.angles)

    def rotation_axis(self) -> tuple[float, float, float]:
        """Current position of the elbow axis."""
        return rotation_axis_coordinates(*self.angles)

    def can_rotate(self, joint: int, side: str) -> bool:
        """Whether the given one-degree move is safe from the current pose."""
        return is_move_safe(self.angles, joint, side)

    def click(self, point: Sequence[float]) -> None:
        """Handle a left mouse click at a screen position."""
        self.state, self.execute_flag = self.panel.handle_click(point, self.state, self.execute_flag)

    def step(self, keys: Iterable[str], writing: bool) -> None:
        """Advance one frame with the given keys held down."""
        held = set(keys)
        coords = self.manipulator()

        if self.carrying and PUT_DOWN_KEY in held:
            self.carrying = False
        if self.sphere.is_near(coords) and PICK_UP_KEY in held:
            self.carrying = True
        if self.carrying:
            self.sphere.follow_manipulator(coords)

        if self.state == GameState.MANUAL:
            self.recording.clear()
            self.playback_index = 0
            if not writing:
                self._drive(held, record=False)
        elif self.state == GameState.LEARNING:
            if not writing:
                self._drive(held, record=True)
        elif self.state == GameState.EXECUTE:
            self._replay()
        elif self.state == GameState.INVERSE:
            self._reach()

    def _drive(self, held: set[str], record: bool) -> None:
        for part, (plus, minus) in zip(self.joints, JOINT_KEYS):
            for side, key in (("+", plus), ("-", minus)):
                if key in held and self.can_rotate(part.part_number, side):
                    part.rotate(side)
                    if record:
                        self.recording.append(Waypoint(self.angles, self.sphere.position))
                    break

    def _replay(self) -> None:
        if self.playback_index < len(self.recording) and self.execute_flag == 1:
            waypoint = self.recording[self.playback_index]
            self.angles = waypoint.angles
            self.sphere.position = waypoint.sphere_position
            self.playback_index += 1
        else:
            self.execute_flag = 0
            self.playback_index = 0

    def _reach(self) -> None:
        if not self.moving:
            x, y, z = self.panel.final_coordinates()
            self.target_angles = find_angles(x, z, y)
            self.moving = True
        for part, target in zip(self.joints, self.target_angles):
            if part.angle > target:
                part.rotate("-")
            elif part.angle < target:
                part.rotate("+")
        if self.angles == tuple(self.target_angles):
            self.state = GameState.MANUAL
            self.moving = False