# -*- coding: utf-8 -*-
import numpy as np

from studiosg.graphics.backend import ObjectKind
from studiosg.math import Vec3f
from studiosg.sg.instancing import instance, make_grid
from studiosg.sg.registry import create_node
from studiosg.sg.visitors import CommitVisitor


def _model():
    """Импортированная модель: transform + объём 5×3×2 (границы 4×2×1)."""
    model = create_node("transform", "model")
    volume = model.create_child("model_volume", "structuredRegular")
    volume["dimensions"] = (5, 3, 2)
    return model


def test_grid_2x2x1_references_one_shared_subgraph():
    model = _model()
    copies = make_grid(model, (2, 2, 1))

    assert [c.name for c in copies] == [
        "copy_0:0:0_xfm", "copy_1:0:0_xfm", "copy_0:1:0_xfm", "copy_1:1:0_xfm",
    ]
    tx, ty = 4 * 1.2, 2 * 1.2
    expected = [(0, 0, 0), (tx, 0, 0), (0, ty, 0), (tx, ty, 0)]
    for copy, t in zip(copies, expected):
        assert np.allclose(copy["translation"].value_as(Vec3f).as_np(), t)
        assert copy["model"] is model
    assert len(model.parents()) == 4


def test_grid_with_zero_extent_is_empty():
    assert make_grid(_model(), (0, 3, 1)) == []


def test_instance_defaults():
    model = _model()
    xfm = instance(model)
    assert xfm.name == "model_instance"
    assert xfm.type_tag == "transform"
    assert xfm["translation"].value_as(Vec3f) == Vec3f(0.0)
    assert model in xfm


def test_shared_change_reaches_every_instance_but_translation_does_not(mock_backend):
    world = create_node("world", "world")
    model = _model()
    copies = make_grid(model, (2, 1, 1))
    for c in copies:
        world.add(c)
    world.traverse(CommitVisitor(mock_backend))

    model["model_volume"]["visible"] = False
    assert all(c.is_modified for c in copies)
    world.traverse(CommitVisitor(mock_backend))

    copies[0]["translation"] = (9.0, 0.0, 0.0)
    assert copies[0].is_modified
    assert not copies[1].is_modified
    assert not model.is_modified


def test_grid_commit_creates_shared_objects_once(mock_backend):
    world = create_node("world", "world")
    model = _model()
    for c in make_grid(model, (2, 2, 1)):
        world.add(c)
    visitor = CommitVisitor(mock_backend)
    world.traverse(visitor)

    assert visitor.ok
    assert mock_backend.created(ObjectKind.VOLUME) == 1
    # 4 копии + transform самой модели
    assert mock_backend.created(ObjectKind.INSTANCE) == 5
    assert len(mock_backend.named("set_object", "model")) == 4
    assert not world.is_modified
