"""Shader programs: compiling sources, binding stages and uploading per-draw state."""

from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import numpy as np

from revengine.device import Buffer, Device, DeviceContext

# Per-vertex input: a float3 position followed by a float2 texture coordinate.
INPUT_ELEMENTS = (("POSITION", "R32G32B32_FLOAT"), ("UV", "R32G32_FLOAT"))

VERTEX_ENTRY_POINT = "vs_main"
VERTEX_PROFILE = "vs_5_0"
PIXEL_ENTRY_POINT = "ps_main"
PIXEL_PROFILE = "ps_5_0"

_PROFILE = re.compile(r"(vs|ps)_\d_\d")
_FLT_MAX = float(np.finfo(np.float32).max)
_MATRIX_BYTES = 16 * 4


class ShaderCompileError(Exception):
    """Raised when a shader source cannot be read or compiled."""


@dataclass(frozen=True)
class _ShaderProgram:
    stage: str
    entry_point: str
    profile: str
    byte_code: bytes


@dataclass(frozen=True)
class _InputLayout:
    elements: tuple
    byte_code: bytes


@dataclass(frozen=True)
class _SamplerState:
    filter: str = "min_mag_mip_point"
    address: tuple = ("wrap", "wrap", "wrap")
    mip_lod_bias: float = 0.0
    max_anisotropy: int = 1
    comparison: str = "never"
    border_colour: tuple = (1.0, 1.0, 1.0, 1.0)
    min_lod: float = -_FLT_MAX
    max_lod: float = _FLT_MAX


class BaseShader(ABC):
    """A vertex/pixel shader pair bound to a device and its context."""

    def __init__(self, device: Device, device_context: DeviceContext) -> None:
        self.device = device
        self.device_context = device_context
        self._vertex_byte_code = b""
        self._vertex_shader: Optional[_ShaderProgram] = None
        self._pixel_shader: Optional[_ShaderProgram] = None
        self._input_layout: Optional[_InputLayout] = None
        self._sampler_state: Optional[_SamplerState] = None
        self._matrix_buffer: Optional[Buffer] = None

    @abstractmethod
    def set_shader(self, model_matrix, view_matrix, projection_matrix, texture) -> None:
        """Upload the per-draw matrices and texture."""

    @property
    def vertex_byte_code(self) -> bytes:
        return self._vertex_byte_code

    def set_shader_stages(self) -> None:
        """Bind this shader's input layout, vertex shader and pixel shader."""
        ctx = self.device_context
        ctx.input_layout = self._input_layout
        ctx.vertex_shader = self._vertex_shader
        ctx.pixel_shader = self._pixel_shader

    def setup_input_layer(self) -> None:
        """Describe the vertex layout against the loaded vertex shader."""
        if not self._vertex_byte_code:
            raise RuntimeError("load_shaders() must run before the input layout is set up")
        self._input_layout = _InputLayout(INPUT_ELEMENTS, self._vertex_byte_code)

    def load_shaders(
        self, vertex_file: Union[str, os.PathLike], pixel_file: Union[str, os.PathLike]
    ) -> None:
        """Compile the vertex and pixel shaders and bind the vertex shader."""
        vs = self.compile_shader(vertex_file, VERTEX_ENTRY_POINT, VERTEX_PROFILE)
        ps = self.compile_shader(pixel_file, PIXEL_ENTRY_POINT, PIXEL_PROFILE)
        self._vertex_byte_code = vs
        self._vertex_shader = _ShaderProgram("vertex", VERTEX_ENTRY_POINT, VERTEX_PROFILE, vs)
        self.device_context.vertex_shader = self._vertex_shader
        self._pixel_shader = _ShaderProgram("pixel", PIXEL_ENTRY_POINT, PIXEL_PROFILE, ps)

    def compile_shader(
        self, source_file: Union[str, os.PathLike], entry_point: str, profile: str
    ) -> bytes:
        """Read a shader source, check its entry point and profile, and return its byte code."""
        if not source_file or not entry_point or not profile:
            raise ValueError("source file, entry point and profile are all required")
        if not _PROFILE.fullmatch(profile):
            raise ShaderCompileError(f"unknown shader profile {profile!r}")
        try:
            source = Path(source_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ShaderCompileError(f"cannot read shader {os.fspath(source_file)}: {exc}") from None
        if not re.search(rf"\b{re.escape(entry_point)}\s*\(", source):
            raise ShaderCompileError(
                f"entry point {entry_point!r} not found in {os.fspath(source_file)}"
            )
        return source.encode("utf-8")

    def _setup_matrix_buffer(self, matrix_count: int) -> None:
        data = bytes(_MATRIX_BYTES * matrix_count)
        self._matrix_buffer = self.device.create_buffer(data, len(data))

    def _setup_sampler(self) -> None:
        self._sampler_state = _SamplerState()

    def _upload(self, matrices, texture: Any) -> None:
        packed = []
        for matrix in matrices:
            mat = np.asarray(matrix, dtype=np.float32)
            if mat.shape != (4, 4):
                raise ValueError(f"expected a 4x4 matrix, got shape {mat.shape}")
            packed.append(mat.T.tobytes())
        data = b"".join(packed)
        self._matrix_buffer = self.device.create_buffer(data, len(data))
        ctx = self.device_context
        ctx.vs_constant_buffers = (self._matrix_buffer,)
        ctx.ps_shader_resources = (texture,)
        ctx.ps_samplers = (self._sampler_state,)