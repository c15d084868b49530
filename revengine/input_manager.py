"""Dispatches key presses and mouse motion to subscribed input components."""

from __future__ import annotations

from typing import Any

from revengine.utils import MouseRelativeMotion


class InputManager:
    """Routes raw input events to input components."""

    def __init__(self) -> None:
        self._subscribers: list[Any] = []
        self._mouse_motion = MouseRelativeMotion()

    def subscribe(self, component: Any) -> None:
        """Register a component whose execute(key) is called on every key press."""
        self._subscribers.append(component)

    def handle_key_down(self, key: int) -> None:
        for component in self._subscribers:
            component.execute(key)

    def handle_mouse_relative_motion(self, x: int, y: int) -> None:
        self._mouse_motion = MouseRelativeMotion(x, y)

    @property
    def mouse_relative_motion(self) -> MouseRelativeMotion:
        return self._mouse_motion