"""The screen-space textured shader: a single orthographic matrix plus one texture."""

from __future__ import annotations

import os
from typing import Any, Optional, Union

from revengine.base_shader import BaseShader
from revengine.device import Buffer, Device, DeviceContext

DEFAULT_VERTEX_FILE = "../engine_resources/shaders/UI_vs.hlsl"
DEFAULT_PIXEL_FILE = "../engine_resources/shaders/PixelShader.hlsl"


class TextureShader2D(BaseShader):
    """Draws textured quads in screen space, ignoring the camera."""

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
        self._setup_matrix_buffer(1)
        self._setup_sampler()

    def set_shader(self, model_matrix, view_matrix, projection_matrix, texture: Any) -> None:
        """Upload the transposed model matrix as the ortho matrix; view and projection are unused."""
        self._upload((model_matrix,), texture)

    @property
    def matrix_buffer(self) -> Optional[Buffer]:
        return self._matrix_buffer