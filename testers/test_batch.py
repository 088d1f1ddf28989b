# -*- coding: utf-8 -*-
import argparse
import json
import logging

import numpy as np
import pytest
from PIL import Image

from studiosg.app.batch import BatchContext, build_parser, main
from studiosg.graphics.backend import ObjectKind
from studiosg.math import Vec2i, Vec3f


@pytest.fixture
def workdir(tmp_path, monkeypatch, config):
    """Рабочая папка с одним 2×2×2 .raw файлом."""
    monkeypatch.chdir(tmp_path)
    config["raw"] = {"voxel_type": "float", "dimensions": [2, 2, 2]}
    np.linspace(0.0, 1.0, 8, dtype=np.float32).tofile(tmp_path / "cube.raw")
    return tmp_path


def _args(*argv) -> argparse.Namespace:
    return build_parser().parse_args(list(argv))


def test_main_renders_and_numbers_images(workdir):
    assert main(["-s", "8", "6", "-i", "out", "cube.raw"]) == 0
    first = workdir / "out.00000.png"
    assert first.is_file()
    with Image.open(first) as img:
        assert img.size == (8, 6)

    assert main(["-s", "8", "6", "-i", "out", "cube.raw"]) == 0
    assert (workdir / "out.00001.png").is_file()

    assert main(["-s", "8", "6", "-i", "out", "-fr", "cube.raw"]) == 0
    assert not (workdir / "out.00002.png").exists()


def test_unknown_options_are_reported_and_ignored(workdir, caplog):
    with caplog.at_level(logging.WARNING, logger="StudioSG"):
        assert main(["--bogus", "-s", "4", "4", "cube.raw"]) == 0
    assert "Unknown option: --bogus" in caplog.text


def test_nothing_to_import_fails(workdir, caplog):
    with caplog.at_level(logging.ERROR, logger="StudioSG"):
        assert main(["missing.raw"]) == 1
    assert "No files to import" in caplog.text


def test_context_builds_graph_with_settings(workdir, config, mock_backend):
    ctx = BatchContext(_args("-r", "scivis", "-s", "320", "200", "-spp", "4", "-pf", "2", "cube.raw"),
                       config, mock_backend)
    assert ctx.build()
    frame = ctx.frame
    assert frame["renderer"].type_tag == "renderer_scivis"
    assert frame["renderer"]["pixelSamples"].value == 4
    assert frame["renderer"]["pixelFilter"].value == 2
    assert frame["windowSize"].value == Vec2i(320, 200)
    assert frame["world"]["importXfm"].has_child("cube_rootXfm")

    ctx.render()
    assert mock_backend.count("render_frame") == 1
    assert mock_backend.named("set_vec2i", "size")[-1][1] == (320, 200)
    assert ctx.saved == ["studio.00000.png"]


def test_grid_replaces_import_with_instances(workdir, config, mock_backend):
    ctx = BatchContext(_args("-g", "2", "2", "1", "cube.raw"), config, mock_backend)
    assert ctx.build()
    world = ctx.frame["world"]
    assert not world.has_child("importXfm")
    names = [n for n in world.children() if n.startswith("copy_")]
    assert names == ["copy_0:0:0_xfm", "copy_1:0:0_xfm", "copy_0:1:0_xfm", "copy_1:1:0_xfm"]
    assert world["copy_1:1:0_xfm"]["importXfm"] is world["copy_0:0:0_xfm"]["importXfm"]

    ctx.frame.start_new_frame(wait=True)
    assert mock_backend.created(ObjectKind.VOLUME) == 1


def test_view_options_override_camera(workdir, config, mock_backend):
    ctx = BatchContext(_args("-vp", "0", "0", "-10", "-vi", "0", "0", "0", "cube.raw"),
                       config, mock_backend)
    assert ctx.build()
    camera = ctx.frame["camera"]
    assert np.allclose(camera["position"].value_as(Vec3f).as_np(), (0, 0, -10))
    assert np.allclose(camera["direction"].value_as(Vec3f).as_np(), (0, 0, 1))


def test_camera_state_from_cams_file(workdir, config, mock_backend):
    (workdir / "cams.json").write_text(
        json.dumps([{"center": [9, 9, 9], "distance": 1},
                    {"center": [0, 0, 0], "distance": 5}]),
        encoding="utf-8",
    )
    ctx = BatchContext(_args("-cam", "2", "cube.raw"), config, mock_backend)
    assert ctx.build()
    position = ctx.frame["camera"]["position"].value_as(Vec3f)
    assert np.allclose(position.as_np(), (0, 0, -5))


def test_denoiser_needs_backend_support(workdir, config, mock_backend):
    ctx = BatchContext(_args("-oidn", "1", "cube.raw"), config, mock_backend)
    assert ctx.build()
    assert not ctx.frame.denoise_fb

    mock_backend.denoiser = True
    ctx = BatchContext(_args("-oidn", "1", "cube.raw"), config, mock_backend)
    assert ctx.build()
    assert ctx.frame.denoise_fb
    assert ctx.frame["framebuffer"]["floatFormat"].value is True


def test_unknown_renderer_and_camera_fall_back_to_defaults(workdir, config, mock_backend, caplog):
    ctx = BatchContext(_args("-r", "foo", "-c", "fisheye", "cube.raw"), config, mock_backend)
    with caplog.at_level(logging.WARNING, logger="StudioSG"):
        assert ctx.build()
    assert ctx.frame["renderer"].type_tag == "renderer_pathtracer"
    assert ctx.frame["camera"].type_tag == "camera_perspective"
    assert "Unknown renderer type 'foo'" in caplog.text
    assert "Unknown camera type 'fisheye'" in caplog.text


def test_main_with_unknown_renderer_still_renders(workdir):
    assert main(["-r", "foo", "-s", "4", "4", "-i", "shot", "cube.raw"]) == 0
    assert (workdir / "shot.00000.png").is_file()


def test_range_start_sets_first_image_number(workdir):
    assert main(["-rn", "10", "20", "-s", "4", "4", "-i", "seq", "cube.raw"]) == 0
    assert (workdir / "seq.00010.png").is_file()
    assert main(["-rn", "10", "20", "-s", "4", "4", "-i", "seq", "cube.raw"]) == 0
    assert (workdir / "seq.00011.png").is_file()
    assert not (workdir / "seq.00000.png").exists()
