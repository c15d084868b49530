import math

import numpy as np
import pytest

from revengine.camera import LOOK_SENSITIVITY, Camera, CompCamera
from revengine.core import CoreSystems
from revengine.game_object import GameObject


@pytest.fixture(autouse=True)
def _fresh_core():
    CoreSystems.reset()
    yield
    CoreSystems.reset()


def test_new_camera_view_is_identity():
    assert np.allclose(Camera().view_matrix, np.identity(4))


def test_origin_without_rotation_is_identity():
    cam = Camera()
    cam.update((0, 0, 0), (0, 0, 0))
    assert np.allclose(cam.view_matrix, np.identity(4))


def test_translation_row_negates_position():
    cam = Camera()
    cam.update((1, 2, 3), (0, 0, 0))
    view = cam.view_matrix
    assert np.allclose(view[3], [-1, -2, -3, 1])
    assert np.allclose(view[:3, :3], np.identity(3))


@pytest.mark.parametrize("rotation", [(0.3, 1.2, 0.0), (1.0, 4.0, 0.5), (5.5, 0.2, 2.0)])
def test_rotation_part_is_orthonormal(rotation):
    cam = Camera()
    cam.update((4, -1, 2), rotation)
    rot = cam.view_matrix[:3, :3]
    assert np.allclose(rot @ rot.T, np.identity(3))
    assert np.isclose(np.linalg.det(rot), 1.0)


@pytest.mark.parametrize("rotation", [(0.3, 1.2, 0.0), (1.0, 4.0, 0.5)])
def test_eye_maps_to_origin_and_forward_to_plus_z(rotation):
    position = np.array([4.0, -1.0, 2.0])
    cam = Camera()
    cam.update(position, rotation)
    view = cam.view_matrix
    obj = GameObject()
    obj.transform.set_rotation_rad(rotation)
    forward = obj.transform.forward_vector()

    assert np.allclose(np.append(position, 1.0) @ view, [0, 0, 0, 1])
    assert np.allclose(np.append(position + forward, 1.0) @ view, [0, 0, 1, 1])


def test_view_matrix_is_a_copy():
    cam = Camera()
    cam.view_matrix[0, 0] = 42.0
    assert np.allclose(cam.view_matrix, np.identity(4))


def _player(flip=False):
    obj = GameObject()
    comp = obj.add_component(CompCamera, obj.transform, flip)
    return obj, comp


def test_late_update_turns_by_mouse_motion():
    obj, comp = _player()
    reference = GameObject()
    CoreSystems.input_manager.handle_mouse_relative_motion(2, 4)
    dt = 0.1
    comp.late_update(dt)
    reference.transform.turn(4 * LOOK_SENSITIVITY * dt, 2 * LOOK_SENSITIVITY * dt)
    assert np.allclose(obj.transform.rotation, reference.transform.rotation)


def test_late_update_flipped_swaps_axes():
    obj, comp = _player(flip=True)
    reference = GameObject()
    CoreSystems.input_manager.handle_mouse_relative_motion(2, 4)
    dt = 0.1
    comp.late_update(dt)
    reference.transform.turn(2 * LOOK_SENSITIVITY * dt, 4 * LOOK_SENSITIVITY * dt)
    assert np.allclose(obj.transform.rotation, reference.transform.rotation)


def test_late_update_views_from_rotation_before_turning():
    obj, comp = _player()
    CoreSystems.input_manager.handle_mouse_relative_motion(10, 10)
    comp.late_update(1.0)
    assert np.allclose(comp.camera.view_matrix, np.identity(4))
    assert not np.allclose(obj.transform.rotation, 0.0)


def test_turn_forwards_degrees_to_transform():
    obj, comp = _player()
    comp.turn(90, 0)
    assert np.allclose(obj.transform.rotation, [math.pi / 2, 0, 0])