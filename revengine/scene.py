"""A scene: a flat list of root game objects that can be switched on and off."""

from __future__ import annotations

import itertools
from typing import Any, Optional, TypeVar

from revengine.core import CoreSystems
from revengine.game_object import GameObject

G = TypeVar("G", bound=GameObject)


class Scene:
    """Holds root game objects and forwards the frame hooks to the enabled ones."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self._id = next(Scene._ids)
        self._game_objects: list[GameObject] = []
        self._active = False
        self.manager: Optional[Any] = None

    def _enabled(self):
        return (obj for obj in self._game_objects if obj.enabled)

    def update(self, delta_time: float) -> None:
        for obj in self._enabled():
            obj.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        for obj in self._enabled():
            obj.late_update(delta_time)

    def fixed_update(self, fixed_delta_time: float) -> None:
        for obj in self._enabled():
            obj.fixed_update(fixed_delta_time)

    def render(self) -> None:
        for obj in self._enabled():
            obj.render()

    def add_game_object(self, game_object: GameObject) -> GameObject:
        """Add a root object; the same object may be added more than once."""
        self._game_objects.append(game_object)
        return game_object

    def has_game_object(self, object_type: type) -> bool:
        return any(isinstance(obj, object_type) for obj in self._game_objects)

    def get_game_object(self, object_type: type[G]) -> Optional[G]:
        return next((o for o in self._game_objects if isinstance(o, object_type)), None)

    def remove_game_object(self, object_type: type) -> None:
        self._game_objects = [o for o in self._game_objects if not isinstance(o, object_type)]

    def display_hierarchy(self) -> None:
        """Print the scene and the hierarchy of each of its objects."""
        print(f"Scene Hierachy: {type(self).__name__}\tSceneID: {self._id}")
        for obj in self._game_objects:
            obj.display_hierarchy()

    @property
    def id(self) -> int:
        return self._id

    def set_active(self, active: bool) -> None:
        """Switch the scene on or off in its manager (the shared one if it has none)."""
        self._active = active
        manager = self.manager if self.manager is not None else CoreSystems.scene_manager
        if active:
            manager.add_active_scene(self)
        else:
            manager.remove_active_scene(self)

    @property
    def is_active(self) -> bool:
        return self._active