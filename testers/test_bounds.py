# -*- coding: utf-8 -*-
import numpy as np

from studiosg.math import Box3f, Quat, Vec4f
from studiosg.sg.node import Node
from studiosg.sg.registry import create_node


def _volume(name="volume", origin=(0, 0, 0), spacing=(1, 1, 1), dims=(2, 2, 2)):
    volume = create_node("structuredRegular", name)
    volume["gridOrigin"] = origin
    volume["gridSpacing"] = spacing
    volume["dimensions"] = dims
    return volume


def test_volume_bounds_span_the_grid():
    volume = _volume(origin=(1, 1, 1), spacing=(0.5, 0.5, 0.5), dims=(3, 3, 3))
    assert volume.bounds() == Box3f((1, 1, 1), (2, 2, 2))


def test_translation_moves_bounds():
    xfm = create_node("transform", "xfm")
    xfm["translation"] = (10, 0, 0)
    xfm.add(_volume())
    assert xfm.bounds() == Box3f((10, 0, 0), (11, 1, 1))


def test_every_instance_path_counts():
    world = create_node("world", "world")
    volume = _volume()
    for i, x in enumerate((0.0, 5.0)):
        xfm = world.create_child(f"copy{i}", "transform")
        xfm["translation"] = (x, 0.0, 0.0)
        xfm.add(volume)
    assert world.bounds() == Box3f((0, 0, 0), (6, 1, 1))


def test_rotation_and_scale():
    xfm = create_node("transform", "xfm")
    q = Quat.from_axis_angle((0, 0, 1), 90.0)
    xfm["rotation"] = Vec4f(*q.to_tuple())
    xfm["scale"] = (2, 2, 2)
    xfm.add(_volume(dims=(2, 2, 1)))
    box = xfm.bounds()
    assert np.allclose(box.lower, (-2, 0, 0), atol=1e-5)
    assert np.allclose(box.upper, (0, 2, 0), atol=1e-5)


def test_spherical_volume_bounds():
    volume = create_node("structuredSpherical", "sph")
    volume["gridSpacing"] = (0.5, 1.0, 1.0)
    volume["dimensions"] = (5, 8, 8)
    assert volume.bounds() == Box3f((-2, -2, -2), (2, 2, 2))


def test_graph_without_geometry_is_empty():
    root = Node("root")
    root.create_child("a")
    assert root.bounds().is_empty
