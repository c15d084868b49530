import struct

import pytest

from revengine.device import Device
from revengine.mesh import Mesh
from revengine.utils import VERTEX_SIZE, Vertex

VERTICES = [
    Vertex((-0.5, -0.5, 2.0), (0.0, 1.0)),
    Vertex((0.5, -0.5, 2.0), (1.0, 1.0)),
    Vertex((-0.5, 0.5, 2.0), (0.0, 0.0)),
]


def test_ids_increase():
    first = Mesh(Device())
    second = Mesh(Device())
    assert second.id == first.id + 1


def test_vertex_buffer_round_trip():
    mesh = Mesh(Device())
    mesh.setup_vertex_buffer(VERTICES)
    buf = mesh.vertex_buffer
    assert buf.stride == VERTEX_SIZE
    assert buf.count == len(VERTICES)
    decoded = [
        Vertex(values[:3], values[3:]) for values in struct.iter_unpack("<5f", buf.data)
    ]
    assert decoded == VERTICES


def test_index_buffer_round_trip():
    mesh = Mesh(Device())
    mesh.setup_index_buffer([0, 1, 2, 2, 1, 3])
    assert mesh.index_count == 6
    values = [v for (v,) in struct.iter_unpack("<H", mesh.index_buffer.data)]
    assert values == [0, 1, 2, 2, 1, 3]


def test_index_out_of_range():
    with pytest.raises(ValueError):
        Mesh(Device()).setup_index_buffer([0, 70000])


def test_empty_vertex_buffer():
    with pytest.raises(ValueError):
        Mesh(Device()).setup_vertex_buffer([])


def test_fresh_mesh_has_no_buffers():
    mesh = Mesh(Device())
    assert mesh.vertex_buffer is None
    assert mesh.index_buffer is None
    assert mesh.index_count == 0