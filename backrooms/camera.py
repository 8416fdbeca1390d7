"""First- and third-person camera driven by keyboard and mouse input."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Iterable

import numpy as np

from backrooms.transforms import look_at, normalize

PITCH_LIMIT = 89.0
MIN_ZOOM = 30.0
DEFAULT_ZOOM = 60.0
ORBIT_SPEED = 30.0
ZOOM_SPEED = 50.0
SPRINT_FACTOR = 2.0


class CameraMode(Enum):
    FIRST_PERSON = auto()
    THIRD_PERSON = auto()


class Key(Enum):
    W = auto()
    S = auto()
    A = auto()
    D = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    LEFT_SHIFT = auto()
    LEFT_CONTROL = auto()
    RIGHT_CONTROL = auto()


_FORWARD = frozenset({Key.W, Key.UP})
_BACKWARD = frozenset({Key.S, Key.DOWN})
_LEFTWARD = frozenset({Key.A, Key.LEFT})
_RIGHTWARD = frozenset({Key.D, Key.RIGHT})
_ZOOM = frozenset({Key.LEFT_CONTROL, Key.RIGHT_CONTROL})


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class Camera:
    """A camera with Euler-angle orientation and two viewing modes."""

    def __init__(self, position) -> None:
        self.position = np.asarray(position, dtype=float).copy()
        self.front = np.array([0.0, 0.0, -1.0])
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.up = self.world_up.copy()
        self.right = np.array([1.0, 0.0, 0.0])

        self.yaw = -90.0
        self.pitch = 0.0

        self.movement_speed = 3.0
        self.mouse_sensitivity = 0.1
        self.zoom = DEFAULT_ZOOM

        self.target = np.zeros(3)
        self.distance_to_target = 5.0

        self.mode = CameraMode.FIRST_PERSON
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix for the current mode."""
        if self.mode is CameraMode.FIRST_PERSON:
            return look_at(self.position, self.position + self.front, self.up)
        eye = self.target - self.front * self.distance_to_target
        return look_at(eye, self.target, self.up)

    def process_keyboard(self, pressed: Iterable[Key], delta_time: float) -> None:
        """Move, orbit and zoom according to the keys held for ``delta_time`` seconds."""
        held = frozenset(pressed)

        def active(keys: frozenset[Key]) -> bool:
            return not held.isdisjoint(keys)

        velocity = self.movement_speed * delta_time
        if Key.LEFT_SHIFT in held:
            velocity *= SPRINT_FACTOR

        if self.mode is CameraMode.FIRST_PERSON:
            if active(_FORWARD):
                self.position = self.position + self.front * velocity
            if active(_BACKWARD):
                self.position = self.position - self.front * velocity
            if active(_LEFTWARD):
                self.position = self.position - self.right * velocity
            if active(_RIGHTWARD):
                self.position = self.position + self.right * velocity
        else:
            step = ORBIT_SPEED * delta_time
            if active(_FORWARD):
                self.pitch += step
            if active(_BACKWARD):
                self.pitch -= step
            if active(_LEFTWARD):
                self.yaw -= step
            if active(_RIGHTWARD):
                self.yaw += step
            self.pitch = _clamp(self.pitch, -PITCH_LIMIT, PITCH_LIMIT)
            self._update_vectors()

        if active(_ZOOM):
            self.zoom = max(MIN_ZOOM, self.zoom - ZOOM_SPEED * delta_time)
        elif self.zoom < DEFAULT_ZOOM:
            self.zoom = min(DEFAULT_ZOOM, self.zoom + ZOOM_SPEED * delta_time)

    def process_mouse_movement(self, xoffset: float, yoffset: float) -> None:
        """Turn the camera by a mouse offset, scaled by the sensitivity."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        self.pitch = _clamp(self.pitch, -PITCH_LIMIT, PITCH_LIMIT)
        self._update_vectors()

    def switch_mode(self) -> None:
        """Toggle between first- and third-person modes."""
        if self.mode is CameraMode.FIRST_PERSON:
            self.mode = CameraMode.THIRD_PERSON
        else:
            self.mode = CameraMode.FIRST_PERSON

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = normalize(front)
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = normalize(np.cross(self.right, self.front))