"""The control panel: buttons, coordinate entry fields and their behaviour."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from .states import GameState

MAX_FIELD_LENGTH = 5
PANEL_FRACTION = 0.3
SAFE_OFFSET = 0.6
UNSAFE_RADIUS = 0.4
UNSAFE_HEIGHT = 3.5

_SIGNED_CHARS = frozenset(string.digits + ".-")
_UNSIGNED_CHARS = frozenset(string.digits + ".")
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


@dataclass(frozen=True)
class Rect:
    """An axis-aligned screen rectangle."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Sequence[float]) -> bool:
        """Whether ``point`` lies inside; the right and bottom edges are excluded."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


@dataclass
class TextField:
    """A short numeric entry field."""

    allowed: frozenset[str] = _SIGNED_CHARS
    max_length: int = MAX_FIELD_LENGTH
    text: str = ""

    def type_char(self, char: str) -> bool:
        """Append ``char`` if it is allowed and the field has room. Returns whether it was taken."""
        if char not in self.allowed or len(self.text) >= self.max_length:
            return False
        self.text += char
        return True

    def backspace(self) -> None:
        """Remove the last character, if any."""
        self.text = self.text[:-1]

    def clear(self) -> None:
        """Empty the field."""
        self.text = ""

    def value(self) -> float:
        """The number at the start of the text, or 0.0 when there is none."""
        match = _NUMBER_PREFIX.match(self.text)
        return float(match.group()) if match else 0.0


def _as_single(value: float) -> float:
    return float(np.float32(value))


def _keep_clear_of_base(value: float, height: float) -> float:
    if height <= UNSAFE_HEIGHT:
        if 0 <= value <= UNSAFE_RADIUS:
            return SAFE_OFFSET
        if -UNSAFE_RADIUS <= value < 0:
            return -SAFE_OFFSET
    return value


@dataclass
class ControlPanel:
    """Layout and input handling of the panel along the bottom of the window."""

    screen_width: int
    screen_height: int
    x_field: TextField = field(default_factory=TextField)
    y_field: TextField = field(default_factory=TextField)
    z_field: TextField = field(default_factory=lambda: TextField(allowed=_UNSIGNED_CHARS))

    def __post_init__(self) -> None:
        w, h = self.screen_width, self.screen_height
        top = _as_single(h - h * PANEL_FRACTION)
        tenth = _as_single(h * 0.1)
        box_height = _as_single(h * 0.03)
        self.top = top
        self.background = Rect(0, top, w, _as_single(h * PANEL_FRACTION))
        self.accept = Rect(10, top + 130, w // 6, tenth)
        self.start = Rect(w // 5, top + 30, w // 5, tenth)
        self.finish = Rect(w // 5, top + 130, w // 5, tenth)
        self.execute = Rect(w // 2 - 120, top + 30, w // 5 - 30, _as_single(h * 0.1 + 100))
        self.manual = Rect(w // 5 * 3 + 30, top + 30, w // 5, _as_single(h * 0.07))
        self.x_box = Rect(40, top + 30, w // 6 - 30, box_height)
        self.y_box = Rect(40, top + 62, w // 6 - 30, box_height)
        self.z_box = Rect(40, top + 100, w // 6 - 30, box_height)

    @property
    def fields(self) -> tuple[tuple[Rect, TextField], ...]:
        """Each entry box with the field it edits, in x, y, z order."""
        return (
            (self.x_box, self.x_field),
            (self.y_box, self.y_field),
            (self.z_box, self.z_field),
        )

    def field_at(self, point: Sequence[float]) -> TextField | None:
        """The entry field under ``point``, if any."""
        return next((f for box, f in self.fields if box.contains(point)), None)

    def handle_click(
        self, point: Sequence[float], state: GameState, execute_flag: int
    ) -> tuple[GameState, int]:
        """Apply a left click at ``point``; returns the new state and execute flag."""
        if self.accept.contains(point) and state == GameState.MANUAL:
            state = GameState.INVERSE
        if self.start.contains(point) and state == GameState.MANUAL:
            state = GameState.LEARNING
        if self.finish.contains(point) and state == GameState.LEARNING:
            state = GameState.FINISHED_LEARNING
        if self.execute.contains(point) and state in (
            GameState.FINISHED_LEARNING,
            GameState.EXECUTE,
        ):
            state = GameState.EXECUTE
            execute_flag = 1
        if self.manual.contains(point):
            state = GameState.MANUAL
            execute_flag = 1
        return GameState(state), execute_flag

    def handle_typing(self, point: Sequence[float], chars: Iterable[str], backspace: bool) -> bool:
        """Feed typed characters to the field under the mouse.

        Returns whether the mouse is over an entry field, i.e. the user is writing.
        """
        target = self.field_at(point)
        if target is None:
            return False
        for char in chars:
            target.type_char(char)
        if backspace:
            target.backspace()
        return True

    def final_coordinates(self) -> tuple[float, float, float]:
        """The entered target, nudged clear of the base column; empties the fields."""
        x = _as_single(self.x_field.value())
        y = _as_single(self.y_field.value())
        z = _as_single(self.z_field.value())
        x = _keep_clear_of_base(x, z)
        y = _keep_clear_of_base(y, z)
        for _, entry in self.fields:
            entry.clear()
        return x, y, z