"""Component-based game engine with scenes, transforms, input bindings and recorded sprite draws."""

__version__ = "0.1.0"