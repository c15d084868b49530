"""Keeps every scene and drives the ones that are active."""

from __future__ import annotations

import itertools
from typing import Any, Optional, TypeVar

S = TypeVar("S")


class SceneManager:
    """Owns all scenes and forwards the frame hooks to the active ones."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self._id = next(SceneManager._ids)
        self._all_scenes: list[Any] = []
        self._active_scenes: list[Any] = []

    def update(self, delta_time: float) -> None:
        for scene in self._active_scenes:
            scene.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        for scene in self._active_scenes:
            scene.late_update(delta_time)

    def fixed_update(self, fixed_delta_time: float) -> None:
        for scene in self._active_scenes:
            scene.fixed_update(fixed_delta_time)

    def render(self) -> None:
        for scene in self._active_scenes:
            scene.render()

    def add_scene(self, scene: Any) -> Any:
        """Take ownership of a scene and make it active."""
        scene.manager = self
        scene.set_active(True)
        self._all_scenes.append(scene)
        return scene

    def get_scene(self, scene_type: type[S]) -> Optional[S]:
        """Return the first scene that is an instance of ``scene_type``, or None."""
        return next((s for s in self._all_scenes if isinstance(s, scene_type)), None)

    def remove_scene(self, scene_type: type) -> None:
        """Drop every scene that is an instance of ``scene_type``."""
        self._all_scenes = [s for s in self._all_scenes if not isinstance(s, scene_type)]
        self._active_scenes = [s for s in self._active_scenes if not isinstance(s, scene_type)]

    def _is_active(self, scene: Any) -> bool:
        return any(active is scene for active in self._active_scenes)

    def add_active_scene(self, scene: Any) -> None:
        if not self._is_active(scene):
            self._active_scenes.append(scene)

    def remove_active_scene(self, scene: Any) -> None:
        if self._is_active(scene):
            self._active_scenes = [s for s in self._active_scenes if s is not scene]

    @property
    def active_scenes(self) -> list[Any]:
        return list(self._active_scenes)

    @property
    def id(self) -> int:
        return self._id