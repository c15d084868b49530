"""The view matrix and the component that steers it with the mouse."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from revengine.component import BaseComponent
from revengine.core import CoreSystems

LOOK_SENSITIVITY = 5.0


def _roll_pitch_yaw(pitch: float, yaw: float, roll: float) -> np.ndarray:
    """Rotation applied roll, then pitch, then yaw (row-vector convention)."""
    cp, sp = math.cos(pitch), math.sin(pitch)
    cy, sy = math.cos(yaw), math.sin(yaw)
    cr, sr = math.cos(roll), math.sin(roll)
    rz = np.array([[cr, sr, 0.0], [-sr, cr, 0.0], [0.0, 0.0, 1.0]])
    rx = np.array([[1.0, 0.0, 0.0], [0.0, cp, sp], [0.0, -sp, cp]])
    ry = np.array([[cy, 0.0, -sy], [0.0, 1.0, 0.0], [sy, 0.0, cy]])
    return rz @ rx @ ry


def _look_at_lh(eye: np.ndarray, focus: np.ndarray, up: np.ndarray) -> np.ndarray:
    forward = focus - eye
    forward = forward / np.linalg.norm(forward)
    right = np.cross(up, forward)
    right = right / np.linalg.norm(right)
    new_up = np.cross(forward, right)
    view = np.identity(4)
    view[:3, 0] = right
    view[:3, 1] = new_up
    view[:3, 2] = forward
    view[3, :3] = (-right @ eye, -new_up @ eye, -forward @ eye)
    return view


class Camera:
    """A left-handed view matrix built from a position and a (pitch, yaw, roll) rotation."""

    def __init__(self) -> None:
        self._view = np.identity(4)

    def update(self, position, rotation) -> None:
        """Rebuild the view matrix; the camera looks along +z before rotation."""
        eye = np.asarray(position, dtype=float)
        pitch, yaw, roll = (float(v) for v in rotation)
        rot = _roll_pitch_yaw(pitch, yaw, roll)
        look = np.array([0.0, 0.0, 1.0]) @ rot
        up = np.array([0.0, 1.0, 0.0]) @ rot
        self._view = _look_at_lh(eye, eye + look, up)

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()


class CompCamera(BaseComponent):
    """Follows a transform and turns it by the mouse motion of each frame."""

    def __init__(self, game_object: Any, transform: Any, flip_controls: bool = False) -> None:
        super().__init__(game_object)
        self._camera = Camera()
        self._transform = transform
        self._sensitivity = LOOK_SENSITIVITY
        self._flipped = flip_controls

    def late_update(self, delta_time: float) -> None:
        """Refresh the view from the transform, then turn it by the mouse motion."""
        self._camera.update(self._transform.position, self._transform.rotation)
        motion = CoreSystems.input_manager.mouse_relative_motion
        turn_x = motion.x * self._sensitivity * delta_time
        turn_y = motion.y * self._sensitivity * delta_time
        if self._flipped:
            self.turn(turn_x, turn_y)
        else:
            self.turn(turn_y, turn_x)

    def turn(self, x: float, y: float) -> None:
        """Add pitch x and yaw y, in degrees, to the followed transform."""
        self._transform.turn(x, y)

    @property
    def camera(self) -> Camera:
        return self._camera