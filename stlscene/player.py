"""First-person camera driven by an analog stick and face buttons."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from .stl import Vec3

ANGLE_STEP = 0.1
DEADZONE = 20.0
STICK_CENTER = 128.0
STICK_RANGE = 127.0
EYE_HEIGHT = 50.0


class Buttons(enum.IntFlag):
    """Face buttons, with the controller's bit values."""

    NONE = 0
    TRIANGLE = 0x1000
    CIRCLE = 0x2000
    CROSS = 0x4000
    SQUARE = 0x8000


def stick_to_axes(lx: float, ly: float) -> tuple[float, float]:
    """Turn raw stick readings (0..255) into strafe and forward amounts."""
    raw_x = lx - STICK_CENTER
    raw_y = ly - STICK_CENTER
    magnitude = math.hypot(raw_x, raw_y)
    if magnitude <= DEADZONE:
        return 0.0, 0.0
    scale = (magnitude - DEADZONE) / (STICK_RANGE - DEADZONE)
    return (raw_x / magnitude) * scale, -(raw_y / magnitude) * scale


@dataclass
class Player:
    """Camera position and orientation."""

    x: float = 0.0
    y: float = 0.0
    z: float = -20.0
    yaw: float = 0.0
    pitch: float = 0.0

    def update(self, lx: float, ly: float, buttons: Buttons | int) -> None:
        """Advance one frame of input."""
        strafe, forward = stick_to_axes(lx, ly)
        forward_x, forward_z = math.sin(self.yaw), math.cos(self.yaw)
        right_x, right_z = -math.cos(self.yaw), math.sin(self.yaw)
        self.x += forward_x * forward + right_x * strafe
        self.z += forward_z * forward + right_z * strafe

        pressed = Buttons(buttons)
        if pressed & Buttons.TRIANGLE:
            self.pitch += ANGLE_STEP
        if pressed & Buttons.CROSS:
            self.pitch -= ANGLE_STEP
        if pressed & Buttons.CIRCLE:
            self.yaw -= ANGLE_STEP
        if pressed & Buttons.SQUARE:
            self.yaw += ANGLE_STEP

    def eye(self) -> Vec3:
        return Vec3(self.x, self.y + EYE_HEIGHT, self.z)

    def center(self) -> Vec3:
        """The point one unit ahead of the eye along the view direction."""
        cos_pitch = math.cos(self.pitch)
        return Vec3(
            self.x + math.sin(self.yaw) * cos_pitch,
            self.y + math.sin(self.pitch) + EYE_HEIGHT,
            self.z + math.cos(self.yaw) * cos_pitch,
        )