"""Game objects: containers of components arranged in a parent/child tree."""

from __future__ import annotations

import itertools
from typing import Optional, TypeVar

from revengine.component import BaseComponent
from revengine.transform import CompTransform

C = TypeVar("C", bound=BaseComponent)


class ComponentExistsError(Exception):
    """Raised when a game object already has a component of the requested type."""


class GameObject:
    """An entity that owns components and child objects."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self.enabled = True
        self._id = next(GameObject._ids)
        self._components: list[BaseComponent] = []
        self._children: list[GameObject] = []
        self._parent: Optional[GameObject] = None
        self.transform: CompTransform = self.add_component(CompTransform)

    def update(self, delta_time: float) -> None:
        for comp in self._components:
            comp.update(delta_time)
        for child in self._children:
            child.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        for comp in self._components:
            comp.late_update(delta_time)
        for child in self._children:
            child.late_update(delta_time)

    def fixed_update(self, fixed_delta_time: float) -> None:
        for comp in self._components:
            comp.fixed_update(fixed_delta_time)
        for child in self._children:
            child.fixed_update(fixed_delta_time)

    def render(self) -> None:
        for comp in self._components:
            comp.render()
        for child in self._children:
            child.render()

    def add_component(self, component_type: type[C], *args, **kwargs) -> C:
        """Create a component of the given type owned by this object and attach it."""
        if self.has_component(component_type):
            raise ComponentExistsError(
                f"game object {self._id} already has a {component_type.__name__}"
            )
        comp = component_type(self, *args, **kwargs)
        self._components.append(comp)
        return comp

    def has_component(self, component_type: type) -> bool:
        return any(isinstance(comp, component_type) for comp in self._components)

    def get_component(self, component_type: type[C]) -> Optional[C]:
        return next((c for c in self._components if isinstance(c, component_type)), None)

    def remove_component(self, component_type: type) -> None:
        self._components = [c for c in self._components if not isinstance(c, component_type)]

    def add_child(self, child: "GameObject") -> "GameObject":
        """Attach a child, recording its offset from this object."""
        child._parent = self
        child.transform.local_position = child.transform.position - self.transform.position
        child.transform.local_rotation = child.transform.rotation - self.transform.rotation
        self._children.append(child)
        return child

    def remove_child(self, child: "GameObject") -> None:
        """Detach a child together with its whole subtree."""
        for grandchild in list(child._children):
            child.remove_child(grandchild)
        self._children = [c for c in self._children if c is not child]

    @property
    def children(self) -> tuple["GameObject", ...]:
        return tuple(self._children)

    @property
    def child_count(self) -> int:
        return len(self._children)

    def display_hierarchy(self) -> None:
        """Print this object, its components and its children."""
        print(f"\tGameObject: {type(self).__name__}\tID: {self._id}")
        for comp in self._components:
            print(f"\t\tComponents: {type(comp).__name__}")
        for child in self._children:
            print(f"Parent: {type(child.parent).__name__}\tID: {child.parent.id}")
            child.display_hierarchy()

    @property
    def id(self) -> int:
        return self._id

    @property
    def parent(self) -> Optional["GameObject"]:
        return self._parent