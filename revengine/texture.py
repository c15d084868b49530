"""Textures loaded from image files and uploaded to a device."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

import numpy as np
from PIL import Image

from revengine.device import Device


@dataclass
class TextureData:
    """Size and channel count of a loaded image."""

    width: int = 0
    height: int = 0
    channels: int = 0
    desired_channels: int = 4


class TextureNotFoundError(OSError):
    """Raised when a texture's image cannot be found or decoded."""


class Texture:
    """An image file decoded to RGBA8 and turned into a shader resource view."""

    def __init__(self, device: Device, path: Union[str, os.PathLike]) -> None:
        self._path = os.fspath(path)
        self._load(self._path)
        self._view = device.create_texture(
            self._data.width, self._data.height, self._image_data
        )

    def _load(self, path: str) -> None:
        try:
            with Image.open(path) as img:
                channels = len(img.getbands())
                rgba = img.convert("RGBA")
        except OSError:
            raise TextureNotFoundError(f'Texture\'s path "{path}" not found!') from None
        self._data = TextureData(rgba.width, rgba.height, channels, 4)
        self._image_data = rgba.tobytes()

    @property
    def texture_data(self) -> TextureData:
        return self._data

    @property
    def image_data(self) -> bytes:
        return self._image_data

    @property
    def shader_resource_view(self) -> np.ndarray:
        return self._view