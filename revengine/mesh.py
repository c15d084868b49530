"""A mesh: a vertex buffer and a 16-bit index buffer created on a device."""

from __future__ import annotations

import itertools
import struct
from typing import Iterable, Optional

from revengine.device import INDEX_SIZE, Buffer, Device
from revengine.utils import VERTEX_SIZE, Vertex

_VERTEX = struct.Struct("<5f")
_INDEX = struct.Struct("<H")


class Mesh:
    """Geometry uploaded to a device; every mesh gets a unique, increasing id."""

    _ids = itertools.count()

    def __init__(self, device: Device) -> None:
        self._device = device
        self._id = next(Mesh._ids)
        self._vertex_buffer: Optional[Buffer] = None
        self._index_buffer: Optional[Buffer] = None
        self._index_count = 0

    def setup_vertex_buffer(self, vertices: Iterable[Vertex]) -> None:
        data = b"".join(_VERTEX.pack(*v.pos, *v.uv) for v in vertices)
        self._vertex_buffer = self._device.create_buffer(data, VERTEX_SIZE)

    def setup_index_buffer(self, indices: Iterable[int]) -> None:
        indices = list(indices)
        try:
            data = b"".join(_INDEX.pack(i) for i in indices)
        except struct.error as exc:
            raise ValueError(f"indices must fit in 16 unsigned bits: {exc}") from None
        self._index_buffer = self._device.create_buffer(data, INDEX_SIZE)
        self._index_count = len(indices)

    @property
    def id(self) -> int:
        return self._id

    @property
    def vertex_buffer(self) -> Optional[Buffer]:
        return self._vertex_buffer

    @property
    def index_buffer(self) -> Optional[Buffer]:
        return self._index_buffer

    @property
    def index_count(self) -> int:
        return self._index_count