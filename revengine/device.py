"""A software stand-in for the graphics device: buffers, textures, draw state and presenting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np
import pygame

BACKGROUND_COLOUR = (0x64 / 255.0, 0x95 / 255.0, 0xED / 255.0, 0.0)
INDEX_SIZE = 2


@dataclass(frozen=True)
class Buffer:
    """An immutable block of GPU-style memory split into elements of ``stride`` bytes."""

    data: bytes
    stride: int

    @property
    def count(self) -> int:
        return len(self.data) // self.stride


@dataclass(frozen=True)
class DrawCall:
    """One recorded indexed draw."""

    vertex_buffer: Buffer
    vertex_stride: int
    vertex_offset: int
    index_buffer: Buffer
    index_count: int


class Device:
    """Creates resources: buffers and textures."""

    def create_buffer(self, data: bytes, stride: int) -> Buffer:
        """Create a buffer holding ``data``, made of elements ``stride`` bytes long."""
        data = bytes(data)
        if stride <= 0:
            raise ValueError(f"buffer stride must be positive, got {stride}")
        if not data:
            raise ValueError("cannot create an empty buffer")
        if len(data) % stride:
            raise ValueError(
                f"buffer size {len(data)} is not a multiple of its stride {stride}"
            )
        return Buffer(data, stride)

    def create_texture(self, width: int, height: int, pixels: bytes) -> np.ndarray:
        """Create a read-only RGBA8 texture view of shape (height, width, 4)."""
        if width <= 0 or height <= 0:
            raise ValueError(f"texture size must be positive, got {width}x{height}")
        pixels = bytes(pixels)
        expected = width * height * 4
        if len(pixels) != expected:
            raise ValueError(f"texture needs {expected} bytes of RGBA data, got {len(pixels)}")
        view = np.frombuffer(pixels, dtype=np.uint8).reshape(height, width, 4).copy()
        view.setflags(write=False)
        return view


class DeviceContext:
    """Holds pipeline state and records the draws issued in the current frame."""

    def __init__(self) -> None:
        self.vertex_buffer: Optional[Buffer] = None
        self.vertex_stride = 0
        self.vertex_offset = 0
        self.index_buffer: Optional[Buffer] = None
        self.draw_calls: list[DrawCall] = []
        self.clear_colour: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
        self.topology = "triangle_list"
        self.viewport: tuple[float, float] = (0.0, 0.0)
        self.depth_range: tuple[float, float] = (0.0, 1.0)
        self.alpha_blending = False
        self.cull_back_faces = False

    def set_vertex_buffer(self, buffer: Buffer, stride: int, offset: int = 0) -> None:
        self.vertex_buffer = buffer
        self.vertex_stride = stride
        self.vertex_offset = offset

    def set_index_buffer(self, buffer: Buffer) -> None:
        """Bind a buffer of 16-bit unsigned indices."""
        if buffer.stride != INDEX_SIZE:
            raise ValueError(f"index buffer must hold 16-bit indices, got stride {buffer.stride}")
        self.index_buffer = buffer

    def draw_indexed(self, count: int) -> DrawCall:
        """Record a draw of ``count`` indices from the bound buffers."""
        if self.vertex_buffer is None or self.index_buffer is None:
            raise RuntimeError("a vertex buffer and an index buffer must be bound before drawing")
        if count < 0 or count > self.index_buffer.count:
            raise ValueError(
                f"cannot draw {count} indices from a buffer of {self.index_buffer.count}"
            )
        call = DrawCall(
            self.vertex_buffer,
            self.vertex_stride,
            self.vertex_offset,
            self.index_buffer,
            count,
        )
        self.draw_calls.append(call)
        return call

    def clear(self, colour) -> None:
        """Clear the back buffer to ``colour`` and drop the recorded draws."""
        values = tuple(float(c) for c in colour)
        if len(values) != 4:
            raise ValueError(f"clear colour needs 4 components, got {len(values)}")
        self.clear_colour = values
        self.draw_calls = []


@dataclass
class WindowHandler:
    """Owns the device and context for a window and presents finished frames."""

    window: Any
    width: int
    height: int
    background_colour: tuple[float, float, float, float] = BACKGROUND_COLOUR
    frames_presented: int = field(default=0, init=False)
    _device: Optional[Device] = field(default=None, init=False, repr=False)
    _context: Optional[DeviceContext] = field(default=None, init=False, repr=False)

    def setup(self) -> None:
        """Create the device and context and configure the pipeline."""
        self._device = Device()
        context = DeviceContext()
        context.topology = "triangle_list"
        context.alpha_blending = True
        context.cull_back_faces = True
        context.viewport = (float(self.width), float(self.height))
        context.depth_range = (0.0, 1.0)
        self._context = context

    def update_window(self) -> None:
        """Present the finished frame, then clear for the next one."""
        context = self.device_context
        if self.window is not None:
            pygame.display.flip()
        self.frames_presented += 1
        context.clear(self.background_colour)
        if self.window is not None:
            self.window.fill(tuple(round(c * 255) for c in self.background_colour[:3]))

    @property
    def device(self) -> Device:
        if self._device is None:
            raise RuntimeError("setup() has not been called")
        return self._device

    @property
    def device_context(self) -> DeviceContext:
        if self._context is None:
            raise RuntimeError("setup() has not been called")
        return self._context