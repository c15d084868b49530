"""Base class for components attached to game objects."""

from __future__ import annotations

from typing import Any


class BaseComponent:
    """A behaviour attached to a game object; every hook does nothing by default."""

    def __init__(self, game_object: Any) -> None:
        self.game_object = game_object

    def update(self, delta_time: float) -> None:
        """Called once per frame."""

    def late_update(self, delta_time: float) -> None:
        """Called once per frame after every update."""

    def fixed_update(self, fixed_delta_time: float) -> None:
        """Called at the fixed simulation rate."""

    def render(self) -> None:
        """Called when the frame is drawn."""