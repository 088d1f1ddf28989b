# -*- coding: utf-8 -*-
import numpy as np
import pytest

from studiosg.graphics.backend import ObjectKind
from studiosg.math import Box3f, Vec3f, Vec3i
from studiosg.sg.registry import create_node
from studiosg.sg.nodes import Volume
from studiosg.sg.visitors import CommitVisitor


def _commit(node, backend):
    visitor = CommitVisitor(backend)
    node.traverse(visitor)
    return visitor


def test_light_subtype_follows_tag(mock_backend):
    world = create_node("world", "world")
    spot = world.create_child("spot", "spot")
    spot["openingAngle"] = 30.0
    _commit(world, mock_backend)

    assert mock_backend.created(ObjectKind.LIGHT) == 1
    assert ("new_object", (ObjectKind.LIGHT, "spot"), {}) in mock_backend.calls
    assert mock_backend.named("set_float", "openingAngle")[0][1] == 30.0
    assert mock_backend.named("set_vec3f", "color")[0][1] == (1.0, 1.0, 1.0)
    assert mock_backend.named("set_object", "spot")[0][1] is spot.handle


def test_plugin_light_uses_its_own_subtype(mock_backend):
    quad = create_node("quad_light", "quad")
    _commit(quad, mock_backend)
    assert ("new_object", (ObjectKind.LIGHT, "quad"), {}) in mock_backend.calls
    assert mock_backend.named("set_vec3f", "edge2")[0][1] == (0.0, 1.0, 0.0)


def test_material_parameters(mock_backend):
    material = create_node("principled", "paint")
    material["roughness"] = 0.25
    _commit(material, mock_backend)
    assert mock_backend.created(ObjectKind.MATERIAL) == 1
    assert mock_backend.named("set_float", "roughness")[0][1] == 0.25
    assert create_node("obj", "m")["kd"].value == Vec3f(0.8)


def test_camera_look_at_and_types():
    camera = create_node("camera_orthographic", "camera")
    camera.look_at((1, 2, 3), (0, 0, -1), (0, 1, 0))
    assert camera["position"].value == Vec3f(1, 2, 3)
    assert camera["direction"].value == Vec3f(0, 0, -1)
    assert camera.has_child("height")
    assert create_node("camera_panoramic", "camera").subtype == "panoramic"


def test_structured_volume_bounds():
    volume = create_node("structuredRegular", "v")
    volume["dimensions"] = Vec3i(3, 5, 2)
    volume["gridSpacing"] = Vec3f(2.0, 1.0, 1.0)
    volume["gridOrigin"] = Vec3f(-1.0, 0.0, 0.0)
    assert volume.local_bounds() == Box3f((-1, 0, 0), (3, 4, 1))


def test_spherical_volume_bounds():
    volume = create_node("structuredSpherical", "v")
    volume["dimensions"] = Vec3i(5, 2, 2)
    volume["gridSpacing"] = Vec3f(0.5, 1.0, 1.0)
    assert volume.local_bounds() == Box3f((-2, -2, -2), (2, 2, 2))


def test_scivis_has_ambient_occlusion_samples(mock_backend):
    renderer = create_node("renderer_scivis", "renderer")
    renderer["aoSamples"] = 8
    _commit(renderer, mock_backend)
    assert mock_backend.named("set_int", "aoSamples")[0][1] == 8
    assert mock_backend.named("set_vec4f", "backgroundColor")[0][1] == tuple(
        np.float32(v).item() for v in (0.1, 0.1, 0.1, 1.0)
    )


def test_volume_load_checks_file_size(tmp_path):
    path = tmp_path / "v.raw"
    np.zeros(5, dtype=np.float32).tofile(path)
    volume = create_node("structuredRegular", "v")
    volume["dimensions"] = Vec3i(2, 2, 2)
    with pytest.raises(ValueError):
        volume.load(path)
    assert volume.voxels is None
    assert not hasattr(Volume, "load")
