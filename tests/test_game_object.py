import numpy as np
import pytest

from revengine.component import BaseComponent
from revengine.game_object import ComponentExistsError, GameObject
from revengine.transform import CompTransform


class _Logger(BaseComponent):
    def __init__(self, game_object, log, tag="comp"):
        super().__init__(game_object)
        self.log = log
        self.tag = tag

    def update(self, delta_time):
        self.log.append((self.tag, "update", delta_time))

    def late_update(self, delta_time):
        self.log.append((self.tag, "late", delta_time))

    def fixed_update(self, fixed_delta_time):
        self.log.append((self.tag, "fixed", fixed_delta_time))

    def render(self):
        self.log.append((self.tag, "render"))


def test_ids_increase():
    a = GameObject()
    b = GameObject()
    assert b.id == a.id + 1


def test_transform_is_first_component():
    obj = GameObject()
    assert obj.has_component(CompTransform)
    assert obj.get_component(CompTransform) is obj.transform
    assert obj.transform.game_object is obj
    assert obj.enabled is True


def test_duplicate_component_raises():
    obj = GameObject()
    with pytest.raises(ComponentExistsError):
        obj.add_component(CompTransform)


def test_add_component_passes_arguments():
    obj = GameObject()
    log = []
    comp = obj.add_component(_Logger, log, tag="x")
    assert comp.game_object is obj
    assert comp.tag == "x"
    assert obj.get_component(_Logger) is comp


def test_remove_component():
    obj = GameObject()
    obj.add_component(_Logger, [])
    obj.remove_component(_Logger)
    assert obj.get_component(_Logger) is None
    assert obj.has_component(_Logger) is False


def test_updates_run_components_then_children():
    log = []
    parent = GameObject()
    parent.add_component(_Logger, log, tag="parent")
    child = GameObject()
    child.add_component(_Logger, log, tag="child")
    parent.add_child(child)
    parent.update(0.5)
    parent.late_update(0.5)
    parent.fixed_update(0.25)
    parent.render()
    assert log == [
        ("parent", "update", 0.5),
        ("child", "update", 0.5),
        ("parent", "late", 0.5),
        ("child", "late", 0.5),
        ("parent", "fixed", 0.25),
        ("child", "fixed", 0.25),
        ("parent", "render"),
        ("child", "render"),
    ]


def test_add_child_records_offsets():
    parent = GameObject()
    parent.transform.set_position(1, 2, 3)
    child = GameObject()
    child.transform.set_position(4, 4, 4)
    returned = parent.add_child(child)
    assert returned is child
    assert child.parent is parent
    assert parent.child_count == 1
    assert parent.children == (child,)
    assert np.allclose(child.transform.local_position, child.transform.position - parent.transform.position)


def test_remove_child_detaches_subtree():
    root = GameObject()
    middle = GameObject()
    leaf = GameObject()
    root.add_child(middle)
    middle.add_child(leaf)
    root.remove_child(middle)
    assert root.child_count == 0
    assert middle.child_count == 0
    assert root.children == ()


def test_display_hierarchy(capsys):
    parent = GameObject()
    child = GameObject()
    parent.add_child(child)
    parent.display_hierarchy()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"\tGameObject: GameObject\tID: {parent.id}"
    assert lines[1] == "\t\tComponents: CompTransform"
    assert lines[2] == f"Parent: GameObject\tID: {parent.id}"
    assert lines[3] == f"\tGameObject: GameObject\tID: {child.id}"