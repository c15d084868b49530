"""A fixed-size pool of game object slots that can be switched on."""

from __future__ import annotations

from typing import Optional

from revengine.game_object import GameObject


class MemoryPool:
    """Holds a fixed number of slots, each referring to the given game object.

    The object is disabled on creation; activation enables the first disabled slot.
    """

    def __init__(self, game_object: GameObject, size: int) -> None:
        game_object.enabled = False
        self._objects = [game_object] * size

    def activate(self) -> Optional[GameObject]:
        """Enable and return the first disabled object, or None if none is left."""
        obj = next((o for o in self._objects if not o.enabled), None)
        if obj is not None:
            obj.enabled = True
        return obj

    def activate_many(self, count: int) -> list[Optional[GameObject]]:
        """Call activate count times and collect the results."""
        return [self.activate() for _ in range(count)]

    @property
    def objects(self) -> list[GameObject]:
        return list(self._objects)