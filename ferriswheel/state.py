"""Animation and input state of the Ferris wheel scene."""

from __future__ import annotations

from dataclasses import dataclass

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 800

LIGHT_AMBIENT = (0.2, 0.2, 0.2, 1.0)
LIGHT_DIFFUSE = (0.8, 0.8, 0.8, 1.0)
LIGHT_POSITION = (5.0, 5.0, 10.0, 1.0)

WHEEL_STEP = 0.5
FULL_TURN = 360.0
SWAY_LIMIT = 5.0
SWAY_SPEED = 0.2
SWAY_DECAY = 0.0005
SWAY_STOP = 0.01

CAMERA_ANGLE_STEP = 0.05
ELEVATION_LIMIT = 1.5
ZOOM_STEP = 0.2
MIN_DISTANCE = 2.0

_LEFT = frozenset("aA")
_RIGHT = frozenset("dD")
_UP = frozenset("wW")
_DOWN = frozenset("sS")
_ZOOM_IN = frozenset("eE=")
_ZOOM_OUT = frozenset("qQ-")
_TOGGLE = frozenset("lL")


@dataclass
class WheelState:
    """Mutable state of the wheel rotation, cabin sway and orbiting camera."""

    wheel_angle: float = 0.0
    moving: bool = True
    sway_angle: float = 0.0
    sway_speed: float = SWAY_SPEED
    sway_forward: bool = True
    azimuth: float = 0.0
    elevation: float = 0.0
    distance: float = 6.0

    def _swing(self) -> None:
        if self.sway_forward:
            self.sway_angle += self.sway_speed
            if self.sway_angle > SWAY_LIMIT:
                self.sway_forward = False
        else:
            self.sway_angle -= self.sway_speed
            if self.sway_angle < -SWAY_LIMIT:
                self.sway_forward = True

    def tick(self) -> None:
        """Advance the animation by one frame."""
        if self.moving:
            self.wheel_angle += WHEEL_STEP
            if self.wheel_angle > FULL_TURN:
                self.wheel_angle -= FULL_TURN
            self._swing()
            if self.sway_speed < SWAY_SPEED:
                self.sway_speed = SWAY_SPEED
        else:
            if self.sway_speed > 0.0:
                self.sway_speed -= SWAY_DECAY
            self._swing()

        if self.sway_speed < SWAY_STOP:
            self.sway_speed = 0.0

    def press(self, key: str) -> None:
        """Apply a key press: orbit, tilt or zoom the camera, or toggle motion."""
        if key in _LEFT:
            self.azimuth -= CAMERA_ANGLE_STEP
        elif key in _RIGHT:
            self.azimuth += CAMERA_ANGLE_STEP
        elif key in _UP:
            self.elevation = min(self.elevation + CAMERA_ANGLE_STEP, ELEVATION_LIMIT)
        elif key in _DOWN:
            self.elevation = max(self.elevation - CAMERA_ANGLE_STEP, -ELEVATION_LIMIT)
        elif key in _ZOOM_IN:
            self.distance = max(self.distance - ZOOM_STEP, MIN_DISTANCE)
        elif key in _ZOOM_OUT:
            self.distance += ZOOM_STEP
        elif key in _TOGGLE:
            self.moving = not self.moving