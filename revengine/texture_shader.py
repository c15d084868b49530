"""The 3D textured shader: world, view and projection matrices plus one texture."""

from __future__ import annotations

import os
from typing import Any, Optional, Union

from revengine.base_shader import BaseShader
from revengine.device import Buffer, Device, DeviceContext

DEFAULT_VERTEX_FILE = "../engine_resources/shaders/VertexShader.hlsl"
DEFAULT_PIXEL_FILE = "../engine_resources/shaders/PixelShader.hlsl"


class TextureShader(BaseShader):
    """Draws textured geometry in world space."""

    def __init__(
        self,
        device: Device,
        device_context: DeviceContext,
        vertex_file: Union[str, os.PathLike] = DEFAULT_VERTEX_FILE,
        pixel_file: Union[str, os.PathLike] = DEFAULT_PIXEL_FILE,
    ) -> None:
        super().__init__(device, device_context)
        self.load_shaders(vertex_file, pixel_file)
        self.init_shader()

    def init_shader(self) -> None:
        self.setup_input_layer()
        self._setup_matrix_buffer(3)
        self._setup_sampler()

    def set_shader(self, model_matrix, view_matrix, projection_matrix, texture: Any) -> None:
        """Upload the transposed world, view and projection matrices and bind the texture."""
        self._upload((model_matrix, view_matrix, projection_matrix), texture)

    @property
    def matrix_buffer(self) -> Optional[Buffer]:
        return self._matrix_buffer