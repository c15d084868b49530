"""Caches textures by name so each is loaded once."""

from __future__ import annotations

import os
from typing import Union

from revengine.device import Device
from revengine.texture import Texture


class ResourceNotFoundError(LookupError):
    """Raised when a named resource has not been loaded."""


class ResourceManager:
    """Loads textures on first request and hands out the cached one afterwards."""

    def __init__(self) -> None:
        self._loaded: dict[str, Texture] = {}

    def load_resource(
        self, device: Device, name: str, path: Union[str, os.PathLike]
    ) -> Texture:
        """Return the texture called ``name``, loading it from ``path`` if it is new."""
        texture = self._loaded.get(name)
        if texture is None:
            texture = Texture(device, path)
            self._loaded[name] = texture
        return texture

    def get_resource(self, name: str) -> Texture:
        try:
            return self._loaded[name]
        except KeyError:
            raise ResourceNotFoundError(f'Texture "{name}" not found!') from None