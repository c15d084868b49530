"""Position, rotation and scale of a game object, propagated to its children."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from revengine.component import BaseComponent

_TWO_PI = 2.0 * math.pi


def _vec3(args: tuple) -> np.ndarray:
    if len(args) == 3:
        return np.array(args, dtype=float)
    if len(args) == 1:
        vec = np.asarray(args[0], dtype=float)
        if vec.shape != (3,):
            raise ValueError(f"expected a 3-component vector, got shape {vec.shape}")
        return vec.copy()
    raise TypeError(f"expected x, y, z or a single vector, got {len(args)} arguments")


def _yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> np.ndarray:
    ch, sh = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cb, sb = math.cos(roll), math.sin(roll)
    return np.array(
        [
            [ch * cb + sh * sp * sb, -ch * sb + sh * sp * cb, sh * cp, 0.0],
            [sb * cp, cb * cp, -sp, 0.0],
            [-sh * cb + ch * sp * sb, sb * sh + ch * sp * cb, ch * cp, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


class CompTransform(BaseComponent):
    """Holds the world transform of a game object.

    Rotation is stored in radians as (pitch, yaw, roll) and wrapped into [0, 2*pi).
    """

    def __init__(
        self,
        game_object: Any,
        position=(0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
        scale=(1.0, 1.0, 1.0),
    ) -> None:
        super().__init__(game_object)
        self._position = _vec3((position,))
        self._rotation = _vec3((rotation,))
        self._scale = _vec3((scale,))
        self.local_position = np.zeros(3)
        self.local_rotation = np.zeros(3)

    def update(self, delta_time: float) -> None:
        """The transform has no per-frame work."""

    def _children(self):
        owner = self.game_object
        if owner is None or owner.child_count == 0:
            return ()
        return owner.children

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    def set_position(self, *args) -> None:
        """Set the world position from x, y, z or a vector; children keep their offset."""
        pos = _vec3(args)
        self._position = pos
        for child in self._children():
            child.transform.set_position(child.transform.local_position + pos)

    def set_rotation_rad(self, *args) -> None:
        """Set the rotation in radians; children orbit around this transform."""
        self._rotation = np.mod(_vec3(args), _TWO_PI)
        for child in self._children():
            model = self.model_matrix()
            world_pos = model[:3, 3]
            rotated = model[:3, :3] @ child.transform.local_position
            child.transform.set_position(world_pos + rotated)
            child.transform.set_rotation_rad(child.transform.local_rotation + self._rotation)

    def set_rotation_degree(self, *args) -> None:
        """Set the rotation in degrees."""
        self.set_rotation_rad(np.radians(_vec3(args)))

    def model_matrix(self) -> np.ndarray:
        """Return translation * rotation * scale as a 4x4 matrix."""
        scale_mat = np.diag([*self._scale, 1.0])
        pitch, yaw, roll = self._rotation
        rotation_mat = _yaw_pitch_roll(yaw, pitch, roll)
        position_mat = np.identity(4)
        position_mat[:3, 3] = self._position
        return position_mat @ rotation_mat @ scale_mat

    def forward_vector(self) -> np.ndarray:
        return self.model_matrix()[:3, 2].copy()

    def right_vector(self) -> np.ndarray:
        return self.model_matrix()[:3, 0].copy()

    def move(self, direction, speed: float = 1.0) -> None:
        self.set_position(self._position + np.asarray(direction, dtype=float) * speed)

    def move_forward(self, value: int, speed: float = 1.0) -> None:
        self.move(self.forward_vector(), value * speed)

    def move_right(self, value: int, speed: float = 1.0) -> None:
        self.move(self.right_vector(), value * speed)

    def turn(self, x: float, y: float) -> None:
        """Add pitch x and yaw y, both in degrees."""
        self.add_pitch_input(math.radians(x))
        self.add_yaw_input(math.radians(y))

    def add_yaw_input(self, value: float) -> None:
        pitch, yaw, roll = self._rotation
        self.set_rotation_rad(pitch, yaw + value, roll)

    def add_pitch_input(self, value: float) -> None:
        pitch, yaw, roll = self._rotation
        self.set_rotation_rad(pitch + value, yaw, roll)