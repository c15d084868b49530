import math

import numpy as np
import pytest

from revengine.bullet import BULLET_SPEED, BulletComp
from revengine.game_object import ComponentExistsError, GameObject


@pytest.fixture
def bullet():
    obj = GameObject()
    comp = obj.add_component(BulletComp, obj.transform)
    return obj, comp


def test_fixed_update_moves_forward_from_origin(bullet):
    obj, comp = bullet
    comp.fixed_update(1 / 120)
    assert np.allclose(obj.transform.position, (0.0, 0.0, 0.1))


def test_init_sets_position_and_rotation(bullet):
    obj, comp = bullet
    comp.init((1.0, 2.0, 3.0), (0.0, 90.0, 0.0))
    assert np.allclose(obj.transform.position, (1.0, 2.0, 3.0))
    assert np.allclose(obj.transform.rotation, (0.0, math.pi / 2, 0.0))


def test_step_follows_forward_vector_after_init(bullet):
    obj, comp = bullet
    comp.init((1.0, 2.0, 3.0), (0.0, 90.0, 0.0))
    before = obj.transform.position
    forward = obj.transform.forward_vector()
    comp.fixed_update(1 / 120)
    assert np.allclose(obj.transform.position - before, BULLET_SPEED * forward)
    assert np.allclose(forward, (1.0, 0.0, 0.0), atol=1e-9)


def test_distance_grows_with_each_step(bullet):
    obj, comp = bullet
    comp.init((0.0, 0.0, 0.0), (30.0, 45.0, 0.0))
    for _ in range(10):
        comp.fixed_update(1 / 120)
    assert np.linalg.norm(obj.transform.position) == pytest.approx(10 * BULLET_SPEED)


def test_fixed_update_ignores_time_step(bullet):
    obj, comp = bullet
    comp.fixed_update(5.0)
    assert np.linalg.norm(obj.transform.position) == pytest.approx(BULLET_SPEED)


def test_second_bullet_component_rejected(bullet):
    obj, _ = bullet
    with pytest.raises(ComponentExistsError):
        obj.add_component(BulletComp, obj.transform)