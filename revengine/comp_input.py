"""Component that maps key presses to bound actions."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

from revengine.component import BaseComponent
from revengine.core import CoreSystems


class CompInput(BaseComponent):
    """Runs every action bound to a key when that key is pressed.

    The component subscribes itself to the shared input manager on creation.
    """

    def __init__(self, game_object: Any) -> None:
        super().__init__(game_object)
        self._actions: defaultdict[int, list[Callable[[], Any]]] = defaultdict(list)
        CoreSystems.input_manager.subscribe(self)

    def bind_action(self, key: int, action: Callable[[], Any]) -> None:
        """Add an action for ``key``; a key may carry several actions."""
        self._actions[key].append(action)

    def execute(self, key: int) -> None:
        """Run every action bound to ``key`` in the order they were bound."""
        for action in self._actions.get(key, ()):
            action()