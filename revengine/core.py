"""The engine-wide systems, created on first use and shared by everything."""

from __future__ import annotations

from typing import Any, Callable

from revengine.input_manager import InputManager
from revengine.render_window import RenderWindow
from revengine.resource_manager import ResourceManager
from revengine.scene_manager import SceneManager
from revengine.sound import Sound


class _System:
    """A class attribute whose value is built by ``factory`` on first access."""

    def __init__(self, factory: Callable[[], Any]) -> None:
        self._factory = factory
        self._slot = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._slot = name

    def __get__(self, obj: Any, owner: type) -> Any:
        instances = owner._instances
        if self._slot not in instances:
            instances[self._slot] = self._factory()
        return instances[self._slot]


class CoreSystems:
    """Shared scene manager, sound, render window, input manager and resource manager."""

    _instances: dict[str, Any] = {}

    scene_manager = _System(SceneManager)
    sound = _System(Sound)
    render_window = _System(lambda: RenderWindow(CoreSystems.input_manager))
    input_manager = _System(InputManager)
    resource_manager = _System(ResourceManager)

    def __init__(self) -> None:
        raise TypeError("CoreSystems is not meant to be instantiated")

    @classmethod
    def reset(cls) -> None:
        """Forget every system so the next access builds a fresh one."""
        cls._instances.clear()