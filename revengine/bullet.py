"""A component that flies its game object forward at a fixed speed."""

from __future__ import annotations

from typing import Any

from revengine.component import BaseComponent

BULLET_SPEED = 0.1


class BulletComp(BaseComponent):
    """Moves the followed transform forward on every fixed update."""

    def __init__(self, game_object: Any, transform: Any) -> None:
        super().__init__(game_object)
        self._transform = transform

    def init(self, position, rotation) -> None:
        """Place the bullet at ``position`` facing ``rotation``, given in degrees."""
        self._transform.set_position(position)
        self._transform.set_rotation_degree(rotation)

    def fixed_update(self, fixed_delta_time: float) -> None:
        self._transform.move_forward(1, BULLET_SPEED)