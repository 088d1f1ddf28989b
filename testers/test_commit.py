# -*- coding: utf-8 -*-
import numpy as np
import pytest

from studiosg.graphics.backend import ObjectKind
from studiosg.sg.registry import create_node
from studiosg.sg.visitors import CommitVisitor


def _commit(root, backend):
    visitor = CommitVisitor(backend)
    root.traverse(visitor)
    return visitor


@pytest.fixture
def scene():
    world = create_node("world", "world")
    xfm = world.create_child("xfm", "transform")
    volume = create_node("structuredRegular", "volume")
    volume["dimensions"] = (4, 4, 4)
    xfm.add(volume)
    return world, xfm, volume


def test_world_transform_volume_end_to_end(mock_backend, scene):
    world, xfm, volume = scene
    visitor = _commit(world, mock_backend)

    assert visitor.ok
    assert mock_backend.created(ObjectKind.VOLUME) == 1
    assert mock_backend.named("set_vec3i", "dimensions") == [(volume.handle, (4, 4, 4))]
    assert mock_backend.named("set_object", "volume") == [(xfm.handle, volume.handle)]
    assert mock_backend.named("set_object", "xfm") == [(world.handle, xfm.handle)]
    assert not world.is_modified
    assert not volume.is_modified


def test_clean_graph_commits_nothing(mock_backend, scene):
    world = scene[0]
    _commit(world, mock_backend)
    mock_backend.reset()
    _commit(world, mock_backend)
    assert mock_backend.calls == []


def test_only_changed_parameter_is_pushed(mock_backend, scene):
    world, xfm, volume = scene
    _commit(world, mock_backend)
    mock_backend.reset()

    volume["gridSpacing"] = (2, 2, 2)
    _commit(world, mock_backend)

    setters = [c for c in mock_backend.calls if c[0].startswith("set_")]
    assert setters == [("set_vec3f", (volume.handle, "gridSpacing", (2.0, 2.0, 2.0)), {})]
    assert not mock_backend.called("new_object")
    # объём, transform и мир коммитятся заново
    assert [c[1][0] for c in mock_backend.calls if c[0] == "commit"] == [
        volume.handle, xfm.handle, world.handle,
    ]


def test_removed_child_is_dropped_from_backend_object(mock_backend, scene):
    world, xfm, volume = scene
    _commit(world, mock_backend)
    mock_backend.reset()

    xfm.remove("volume")
    _commit(world, mock_backend)
    assert ("remove_param", (xfm.handle, "volume"), {}) in mock_backend.calls
    assert not world.is_modified


def test_rejected_node_stays_dirty_and_is_retried(mock_backend, scene):
    world, xfm, volume = scene
    light = world.create_child("light", "ambient")
    mock_backend.reject_kinds = {ObjectKind.VOLUME}

    visitor = _commit(world, mock_backend)
    assert [node for node, _ in visitor.failures] == [volume]
    assert volume.is_modified and xfm.is_modified and world.is_modified
    # соседняя ветка закоммичена
    assert not light.is_modified
    assert mock_backend.named("set_object", "light") == [(world.handle, light.handle)]

    mock_backend.reject_kinds = set()
    visitor = _commit(world, mock_backend)
    assert visitor.ok
    assert mock_backend.created(ObjectKind.VOLUME) == 2
    assert not world.is_modified
    assert mock_backend.named("set_object", "volume") == [(xfm.handle, volume.handle)]


def test_rejected_parameter_handle(mock_backend, scene):
    world, xfm, volume = scene
    _commit(world, mock_backend)

    mock_backend.rejected.add(volume.handle.id)
    volume["visible"] = False
    visitor = _commit(world, mock_backend)
    assert not visitor.ok
    assert volume.is_modified and world.is_modified


def test_shared_value_is_seen_from_both_parents(mock_backend):
    world = create_node("world", "world")
    l1 = world.create_child("l1", "ambient")
    l2 = world.create_child("l2", "ambient")
    tint = create_node("vec3f", "tint", (1.0, 0.0, 0.0))
    l1.add(tint)
    l2.add(tint)
    _commit(world, mock_backend)
    mock_backend.reset()

    tint.set_value((0.0, 1.0, 0.0))
    assert l1.is_modified and l2.is_modified
    _commit(world, mock_backend)
    pushed = mock_backend.named("set_vec3f", "tint")
    assert {h for h, _ in pushed} == {l1.handle, l2.handle}
    assert all(v == (0.0, 1.0, 0.0) for _, v in pushed)


def test_shared_object_is_created_once(mock_backend):
    world = create_node("world", "world")
    volume = create_node("structuredRegular", "volume")
    a = world.create_child("a", "transform")
    b = world.create_child("b", "transform")
    a.add(volume)
    b.add(volume)

    _commit(world, mock_backend)
    assert mock_backend.created(ObjectKind.VOLUME) == 1
    assert {h for h, _ in mock_backend.named("set_object", "volume")} == {a.handle, b.handle}
    assert not world.is_modified


def test_group_without_value_pushes_nothing(mock_backend):
    world = create_node("world", "world")
    world.create_child("group")
    _commit(world, mock_backend)
    assert all(c[1][1] != "group" for c in mock_backend.calls if c[0].startswith("set_"))


def test_node_commit_pushes_own_parameters(mock_backend):
    spot = create_node("spot", "spot")
    for child in spot:
        child.commit(mock_backend)
    assert spot.commit(mock_backend) is True
    assert mock_backend.created(ObjectKind.LIGHT) == 1
    assert mock_backend.named("set_float", "openingAngle") == [(spot.handle, 180.0)]
    assert mock_backend.named("set_float", "penumbraAngle") == [(spot.handle, 5.0)]


def test_loaded_voxels_are_pushed_once(mock_backend):
    world = create_node("world", "world")
    volume = world.create_child("volume", "structuredRegular")
    volume["dimensions"] = (2, 2, 2)
    volume.set_voxels(np.zeros((2, 2, 2), dtype=np.float32))
    _commit(world, mock_backend)
    volume["visible"] = False
    _commit(world, mock_backend)

    assert mock_backend.count("new_data") == 1
    assert len(mock_backend.named("set_object", "data")) == 1
