import math

import numpy as np
import pytest

from revengine.game_object import GameObject
from revengine.transform import CompTransform


def test_defaults_give_identity_model_matrix():
    transform = GameObject().transform
    assert np.allclose(transform.position, np.zeros(3))
    assert np.allclose(transform.rotation, np.zeros(3))
    assert np.allclose(transform.model_matrix(), np.identity(4))


def test_constructor_values_are_kept():
    transform = CompTransform(None, position=(1, 2, 3))
    assert np.allclose(transform.position, [1, 2, 3])
    assert np.allclose(transform.model_matrix()[:3, 3], [1, 2, 3])


def test_set_position_forms_agree():
    a = GameObject().transform
    b = GameObject().transform
    a.set_position(1.5, -2.0, 4.0)
    b.set_position(np.array([1.5, -2.0, 4.0]))
    assert np.allclose(a.position, b.position)
    assert np.allclose(a.model_matrix()[:3, 3], [1.5, -2.0, 4.0])


def test_set_position_bad_arguments():
    transform = GameObject().transform
    with pytest.raises(TypeError):
        transform.set_position(1.0, 2.0)
    with pytest.raises(ValueError):
        transform.set_position([1.0, 2.0])


def test_position_is_a_copy():
    transform = GameObject().transform
    pos = transform.position
    pos[0] = 99.0
    assert transform.position[0] == 0.0


def test_default_direction_vectors():
    transform = GameObject().transform
    assert np.allclose(transform.forward_vector(), [0, 0, 1])
    assert np.allclose(transform.right_vector(), [1, 0, 0])


def test_direction_vectors_orthonormal_after_rotation():
    transform = GameObject().transform
    transform.set_rotation_rad(0.3, 1.1, -0.7)
    forward = transform.forward_vector()
    right = transform.right_vector()
    assert np.linalg.norm(forward) == pytest.approx(1.0)
    assert np.linalg.norm(right) == pytest.approx(1.0)
    assert np.dot(forward, right) == pytest.approx(0.0, abs=1e-12)
    rot = transform.model_matrix()[:3, :3]
    assert np.allclose(rot.T @ rot, np.identity(3))


def test_move_forward_follows_forward_vector():
    transform = GameObject().transform
    transform.set_rotation_rad(0.2, 0.9, 0.0)
    forward = transform.forward_vector()
    transform.move_forward(2, 0.5)
    assert np.allclose(transform.position, forward * 1.0)


def test_move_right_follows_right_vector():
    transform = GameObject().transform
    transform.set_rotation_rad(0.0, 0.4, 0.0)
    right = transform.right_vector()
    transform.move_right(-3)
    assert np.allclose(transform.position, right * -3)


def test_rotation_wraps_into_range():
    transform = GameObject().transform
    transform.set_rotation_rad(2 * math.pi + 0.5, -0.5, 0.0)
    assert transform.rotation[0] == pytest.approx(0.5)
    assert transform.rotation[1] == pytest.approx(2 * math.pi - 0.5)


def test_degree_and_radian_setters_agree():
    a = GameObject().transform
    b = GameObject().transform
    a.set_rotation_degree(90, 45, 10)
    b.set_rotation_rad(math.radians(90), math.radians(45), math.radians(10))
    assert np.allclose(a.rotation, b.rotation)


def test_turn_adds_degrees_as_pitch_and_yaw():
    transform = GameObject().transform
    transform.turn(30, 60)
    assert transform.rotation[0] == pytest.approx(math.radians(30))
    assert transform.rotation[1] == pytest.approx(math.radians(60))
    transform.add_yaw_input(0.1)
    transform.add_pitch_input(0.2)
    assert transform.rotation[0] == pytest.approx(math.radians(30) + 0.2)
    assert transform.rotation[1] == pytest.approx(math.radians(60) + 0.1)


def test_children_follow_parent_position():
    parent = GameObject()
    parent.transform.set_position(3, 0, 0)
    child = GameObject()
    child.transform.set_position(4, 1, 0)
    parent.add_child(child)
    parent.transform.set_position(5, 0, 0)
    assert np.allclose(child.transform.position, np.array([5, 0, 0]) + child.transform.local_position)
    assert np.allclose(child.transform.local_position, [1, 1, 0])


def test_children_orbit_when_parent_rotates():
    parent = GameObject()
    child = GameObject()
    child.transform.set_position(2, 0, 0)
    child.transform.set_rotation_rad(0.1, 0.0, 0.0)
    parent.add_child(child)
    parent.transform.set_rotation_rad(0.0, 1.2, 0.0)
    assert np.linalg.norm(child.transform.position) == pytest.approx(2.0)
    assert child.transform.position[1] == pytest.approx(0.0, abs=1e-12)
    assert np.allclose(child.transform.rotation, np.mod(child.transform.local_rotation + parent.transform.rotation, 2 * math.pi))