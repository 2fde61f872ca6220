"""Interactive window: the arm in 3D above the control panel."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from itertools import product
from typing import Sequence

import numpy as np
import pygame

from .simulator import DARKGRAY, Simulator
from .states import GameState
from .transforms import identity, transform_point

RAYWHITE = (245, 245, 245)
BLACK = (0, 0, 0)
LIGHTGRAY = (200, 200, 200)
GRID_COLOR = (130, 130, 130)
PANEL_GRAY = (130, 130, 130)
BLUE = (0, 121, 241)
RED = (230, 41, 55)
GREEN = (0, 228, 48)
PURPLE = (200, 122, 255)

WIRE_COLORS = (BLUE, RED, GREEN, PURPLE)
FONT_SIZE = 25
NEAR_PLANE = 0.01
ORBIT_SPEED = 0.005

_KEYS = {
    pygame.K_1: "1",
    pygame.K_2: "2",
    pygame.K_3: "3",
    pygame.K_4: "4",
    pygame.K_5: "5",
    pygame.K_6: "6",
    pygame.K_SPACE: "space",
    pygame.K_RETURN: "enter",
}

_FACES = ((0, 1, 3, 2), (4, 5, 7, 6), (0, 1, 5, 4), (2, 3, 7, 6), (0, 2, 6, 4), (1, 3, 7, 5))
_EDGES = tuple((i, i | bit) for i in range(8) for bit in (1, 2, 4) if not i & bit)


@dataclass
class _Camera:
    position: tuple[float, float, float] = (10.0, 10.0, 10.0)
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)
    fovy: float = 45.0

    def basis(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        forward = np.subtract(self.target, self.position).astype(float)
        forward /= np.linalg.norm(forward)
        right = np.cross(forward, self.up)
        right /= np.linalg.norm(right)
        return right, np.cross(right, forward), forward

    def depth(self, point: Sequence[float]) -> float:
        _, _, forward = self.basis()
        return float(np.dot(np.subtract(point, self.position), forward))

    def project(self, point: Sequence[float], width: int, height: int) -> tuple[float, float] | None:
        right, up, forward = self.basis()
        relative = np.subtract(point, self.position).astype(float)
        depth = float(np.dot(relative, forward))
        if depth <= NEAR_PLANE:
            return None
        focal = 1.0 / math.tan(math.radians(self.fovy) / 2)
        aspect = width / height
        ndc_x = float(np.dot(relative, right)) * focal / (aspect * depth)
        ndc_y = float(np.dot(relative, up)) * focal / depth
        return (ndc_x + 1) / 2 * width, (1 - ndc_y) / 2 * height

    def orbit(self, yaw: float, pitch: float) -> None:
        offset = np.subtract(self.position, self.target).astype(float)
        radius = float(np.linalg.norm(offset))
        azimuth = math.atan2(offset[0], offset[2]) + yaw
        elevation = math.asin(offset[1] / radius) + pitch
        elevation = max(-1.5, min(1.5, elevation))
        horizontal = radius * math.cos(elevation)
        self.position = (
            self.target[0] + horizontal * math.sin(azimuth),
            self.target[1] + radius * math.sin(elevation),
            self.target[2] + horizontal * math.cos(azimuth),
        )


def project(point: Sequence[float], width: int, height: int) -> tuple[float, float] | None:
    """Screen position of a world point seen from the default camera, or None if behind it."""
    return _Camera().project(point, width, height)


def _box_corners(part, matrix: np.ndarray) -> list[tuple[float, float, float]]:
    cx, cy, cz = part.position
    return [
        transform_point((cx + sx * part.width, cy + sy * part.height, cz + sz * part.length), matrix)
        for sx, sy, sz in product((-0.5, 0.5), repeat=3)
    ]


def _draw_scene(surface: pygame.Surface, sim: Simulator, camera: _Camera) -> None:
    width, height = surface.get_size()

    for i in range(-5, 6):
        for start, end in (((i, 0, -5), (i, 0, 5)), ((-5, 0, i), (5, 0, i))):
            a = camera.project(start, width, height)
            b = camera.project(end, width, height)
            if a and b:
                pygame.draw.line(surface, GRID_COLOR, a, b)

    polygons = []
    wires = []
    matrix = identity()
    for part, wire_color in zip(sim.parts, WIRE_COLORS):
        matrix = matrix @ part.transform()
        corners = _box_corners(part, matrix)
        screen = [camera.project(c, width, height) for c in corners]
        if any(p is None for p in screen):
            continue
        for face in _FACES:
            depth = sum(camera.depth(corners[i]) for i in face) / len(face)
            polygons.append((depth, part.color, [screen[i] for i in face]))
        wires.append((wire_color, [(screen[a], screen[b]) for a, b in _EDGES]))

    for depth, color, points in sorted(polygons, key=lambda item: item[0], reverse=True):
        pygame.draw.polygon(surface, color, points)
    for color, segments in wires:
        for a, b in segments:
            pygame.draw.line(surface, color, a, b)

    centre = camera.project(sim.sphere.position, width, height)
    if centre is not None:
        right, _, _ = camera.basis()
        rim = camera.project(np.add(sim.sphere.position, right * sim.sphere.radius), width, height)
        if rim is not None:
            radius = max(1, round(math.dist(centre, rim)))
            pygame.draw.circle(surface, sim.sphere.color, centre, radius)


def _rect(rect) -> pygame.Rect:
    return pygame.Rect(round(rect.x), round(rect.y), round(rect.width), round(rect.height))


def _text(surface, font, text: str, x: float, y: float) -> None:
    surface.blit(font.render(text, True, BLACK), (round(x), round(y)))


def _draw_panel(surface: pygame.Surface, sim: Simulator, fonts: dict[str, pygame.font.Font]) -> None:
    panel = sim.panel
    w = panel.screen_width
    top = panel.top
    normal, large, small, entry = fonts["normal"], fonts["large"], fonts["small"], fonts["entry"]

    pygame.draw.rect(surface, PANEL_GRAY, _rect(panel.background))

    _text(surface, normal, "x: ", 20, top + 30)
    _text(surface, normal, "y: ", 20, top + 60)
    _text(surface, normal, "z: ", 20, top + 100)
    for box, entry_field in panel.fields:
        pygame.draw.rect(surface, LIGHTGRAY, _rect(box))
        _text(surface, entry, entry_field.text, box.x + 3, box.y + 3)

    buttons = (
        (panel.accept, "ACCEPT", (60, top + 150), GameState.INVERSE),
        (panel.start, "Start learning", (w / 4 - 55, top + 50), GameState.LEARNING),
        (panel.finish, "Finish learning", (w / 4 - 55, top + 150), GameState.FINISHED_LEARNING),
        (panel.execute, "Execute", (w / 2 - 60, top + 110), GameState.EXECUTE),
        (panel.manual, "Manual mode", (w // 5 * 3 + 70, top + 40), GameState.MANUAL),
    )
    for rect, label, (x, y), state in buttons:
        pygame.draw.rect(surface, DARKGRAY, _rect(rect))
        _text(surface, large, label, x, y)
        if sim.state == state:
            pygame.draw.rect(surface, BLUE, _rect(rect), 1)

    help_x = w // 5 * 3 + 50
    for label, offset in (
        ("Button 1/2 - Axis 1", 100),
        ("Button 3/4 - Axis 2", 125),
        ("Button 5/6 - Axis 3", 150),
        ("Space/Enter -", 180),
        ("Pick Up/Put Down", 200),
    ):
        _text(surface, small, label, help_x, top + offset)

    x, y, z = sim.manipulator()
    coords_x = w // 5 * 4 + 80
    _text(surface, normal, "Manipulator", coords_x, top + 30)
    _text(surface, normal, "coordinates:", coords_x, top + 60)
    _text(surface, normal, f"X: {x:.2f}", coords_x, top + 110)
    _text(surface, normal, f"Y: {z:.2f}", coords_x, top + 150)
    _text(surface, normal, f"Z: {y:.2f}", coords_x, top + 180)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a three-joint robot arm.")
    parser.add_argument("--width", type=int, default=1500, help="window width in pixels")
    parser.add_argument("--height", type=int, default=800, help="window height in pixels")
    parser.add_argument("--fps", type=int, default=60, help="frames per second")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the simulator window and run until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption("PUMA robot")
        clock = pygame.time.Clock()
        sim = Simulator(args.width, args.height)
        camera = _Camera()
        fonts = {
            "normal": pygame.font.Font(None, FONT_SIZE),
            "large": pygame.font.Font(None, int(FONT_SIZE * 1.5)),
            "small": pygame.font.Font(None, int(FONT_SIZE * 0.8)),
            "entry": pygame.font.Font(None, 20),
        }
        pygame.key.start_text_input()

        writing = False
        orbiting = False
        ibeam = False
        running = True
        while running:
            typed: list[str] = []
            backspace = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_BACKSPACE:
                        backspace = True
                elif event.type == pygame.TEXTINPUT:
                    typed.extend(event.text)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:
                        sim.click(event.pos)
                    elif event.button == 3:
                        orbiting = not orbiting
                        pygame.event.set_grab(orbiting)
                        pygame.mouse.set_visible(not orbiting)
                elif event.type == pygame.MOUSEMOTION and orbiting:
                    dx, dy = event.rel
                    camera.orbit(-dx * ORBIT_SPEED, dy * ORBIT_SPEED)

            pressed = pygame.key.get_pressed()
            sim.step({name for code, name in _KEYS.items() if pressed[code]}, writing)

            screen.fill(RAYWHITE)
            _draw_scene(screen, sim, camera)
            _draw_panel(screen, sim, fonts)

            mouse = pygame.mouse.get_pos()
            writing = sim.panel.handle_typing(mouse, typed, backspace)
            if writing:
                box = next(b for b, f in sim.panel.fields if b.contains(mouse))
                pygame.draw.rect(screen, BLUE, _rect(box), 1)
            if writing != ibeam:
                ibeam = writing
                pygame.mouse.set_cursor(
                    pygame.SYSTEM_CURSOR_IBEAM if ibeam else pygame.SYSTEM_CURSOR_ARROW
                )

            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0