"""
Пакетный рендер: импорт файлов → (сетка instance‑ов) → камера →
один кадр → сохранение `<image>.<NNNNN>.<format>`.

    studiosg [опции] файлы...

Неизвестные опции сообщаются в лог и игнорируются.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from studiosg.camera import ArcballCamera, load_camera_states
from studiosg.errors import UnknownType
from studiosg.graphics.backend import select_backend
from studiosg.importers import import_files
from studiosg.math import Vec2i, Vec3f
from studiosg.sg.instancing import make_grid
from studiosg.sg.nodes import Frame
from studiosg.sg.registry import create_node, init_registry
from studiosg.utils import Config, Timer, logger, set_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="studiosg", description="Batch rendering of scene files", allow_abbrev=False
    )
    parser.add_argument("files", nargs="*", help="Scene files to import (.raw, .spherical, .sg, .json)")
    parser.add_argument("-r", "--renderer", default=None, help="Renderer type (pathtracer, scivis)")
    parser.add_argument("-c", "--camera", default=None, help="Camera type (perspective, orthographic, panoramic)")
    parser.add_argument("-vp", type=float, nargs=3, default=None, metavar=("X", "Y", "Z"), help="Camera position")
    parser.add_argument("-vu", type=float, nargs=3, default=None, metavar=("X", "Y", "Z"), help="Camera up vector")
    parser.add_argument("-vi", type=float, nargs=3, default=None, metavar=("X", "Y", "Z"), help="Camera view (gaze) point")
    parser.add_argument("-sm", "--stereoMode", type=int, default=0, help="Camera stereo mode")
    parser.add_argument("-id", "--interpupillaryDistance", type=float, default=0.0635, help="Stereo eye separation")
    parser.add_argument("-f", "--format", default=None, help="Image format (default png)")
    parser.add_argument("-i", "--image", default=None, help="Base name of the saved image")
    parser.add_argument("-s", "--size", type=int, nargs=2, default=None, metavar=("W", "H"), help="Image size")
    parser.add_argument("-spp", "--samples", type=int, default=None, help="Samples per pixel")
    parser.add_argument("-pf", "--pixelfilter", type=int, default=None, help="Pixel filter type")
    parser.add_argument("-oidn", "--denoiser", type=int, default=0, choices=(0, 1, 2), help="Denoise final frame")
    parser.add_argument("-g", "--grid", type=int, nargs=3, default=None, metavar=("X", "Y", "Z"), help="Instance a grid of models")
    parser.add_argument("-rn", "--range", type=int, nargs=2, default=None, metavar=("START", "END"),
                        help="Frame range; START is the first image number")
    parser.add_argument("-fr", "--force", action="store_true", help="Overwrite existing images")
    parser.add_argument("-cam", "--camera-index", type=int, default=0, help="Camera state from cams file (1-based)")
    parser.add_argument("--config", default=None, help="Path to JSON config")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


class BatchContext:
    """Состояние одного пакетного запуска."""

    def __init__(self, args: argparse.Namespace, config: Config = None, backend=None):
        self.args = args
        self.config = config if config is not None else Config()
        self.backend = backend
        self.frame: Optional[Frame] = None
        self.imported = None
        self.arcball: Optional[ArcballCamera] = None
        self.saved: List[str] = []

    # -----------------------------------------------------------------
    def _opt(self, name, key):
        value = getattr(self.args, name)
        return self.config[key] if value is None else value

    def _set_type(self, name, setter) -> None:
        value = self._opt(name, name)
        try:
            setter(value)
        except UnknownType:
            logger.warning(f"[Batch] Unknown {name} type '{value}', keeping {self.frame[name].type_tag}")

    def build(self) -> bool:
        """Собрать граф; False, если импортировать нечего."""
        cfg = self.config
        init_registry(plugins=bool(cfg["plugins"]))
        if self.backend is None:
            self.backend = select_backend(cfg["backend"])

        self.frame = Frame(backend=self.backend)
        self._set_type("renderer", self.frame.set_renderer)
        self._set_type("camera", self.frame.set_camera)

        world = self.frame["world"]
        self.imported = world.add(create_node("transform", "importXfm"))
        roots = import_files(self.imported, self.args.files, params=cfg["raw"])
        if not roots:
            logger.error("[Batch] No files to import")
            return False

        size = Vec2i(self._opt("size", "window_size"))
        self.frame["windowSize"] = size
        renderer = self.frame["renderer"]
        renderer["pixelSamples"] = max(1, int(self._opt("samples", "samples")))
        if self.args.pixelfilter is not None:
            renderer.create_child("pixelFilter", "int", max(0, self.args.pixelfilter))

        if self.args.denoiser:
            if self.backend.denoiser_available:
                self.frame["framebuffer"]["floatFormat"] = True
                self.frame.denoise_fb = True
            else:
                logger.warning("[Batch] Denoiser is not available, option ignored")

        if self.args.grid is not None and tuple(self.args.grid) != (1, 1, 1):
            self.build_grid(self.args.grid)

        self.setup_camera(size)
        return True

    def build_grid(self, grid) -> None:
        world = self.frame["world"]
        world.remove(self.imported)
        grid = [max(0, int(v)) for v in grid]
        for xfm in make_grid(self.imported, grid, float(self.config["grid_spacing"])):
            world.add(xfm)
        logger.info(f"[Batch] Instanced a {grid[0]}x{grid[1]}x{grid[2]} grid")

    def setup_camera(self, size: Vec2i) -> None:
        self.arcball = ArcballCamera(self.frame["world"].bounds(), size)
        states = load_camera_states(self.config["cams_file"])
        index = self.args.camera_index
        if index > 0:
            if index <= len(states):
                self.arcball.set_state(states[index - 1])
            else:
                logger.warning(f"[Batch] No camera state #{index}, using the default view")
        elif states:
            self.arcball.set_state(states[0])

        camera = self.frame["camera"]
        self.arcball.apply_to(camera)
        a = self.args
        if a.vp is not None or a.vi is not None or a.vu is not None:
            pos = Vec3f(a.vp) if a.vp is not None else camera["position"].value_as(Vec3f)
            gaze = Vec3f(a.vi) if a.vi is not None else pos + camera["direction"].value_as(Vec3f)
            up = Vec3f(a.vu) if a.vu is not None else camera["up"].value_as(Vec3f)
            camera.look_at(pos, (gaze - pos).normalized(), up)
        if camera.has_child("stereoMode"):
            camera["stereoMode"] = max(0, a.stereoMode)
        if camera.has_child("interpupillaryDistance"):
            camera["interpupillaryDistance"] = max(0.0, a.interpupillaryDistance)

    # -----------------------------------------------------------------
    def next_filename(self, start: int = 0) -> str:
        image = self.config["image"]
        name = self.args.image or image.get("name", "studio")
        fmt = self.args.format or image.get("format", "png")
        num = start
        while True:
            filename = f"{name}.{num:05d}.{fmt}"
            if self.args.force or not Path(filename).exists():
                return filename
            num += 1

    def render(self) -> str:
        timer = Timer()
        self.frame.start_new_frame(wait=True)
        timer.tick()
        start = self.args.range[0] if self.args.range is not None else 0
        filename = self.next_filename(max(0, start))
        self.frame.save_frame(filename)
        self.saved.append(filename)
        logger.info(f"[Batch] Frame rendered in {timer.delta * 1000.0:.1f} ms -> {filename}")
        return filename


def main(argv=None) -> int:
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    for arg in unknown:
        if arg.startswith("-"):
            logger.warning(f"[Batch] Unknown option: {arg}")
        else:
            logger.warning(f"[Batch] Ignoring argument: {arg}")

    if args.config is not None:
        Config.reset()
        config = Config(args.config)
    else:
        config = Config()
    set_level(args.log_level or config["log_level"])

    ctx = BatchContext(args, config)
    try:
        if not ctx.build():
            return 1
        ctx.render()
    finally:
        if ctx.backend is not None:
            ctx.backend.shutdown()
    logger.info("[Batch] ...finished!")
    return 0
