"""
Frame – корень сцены, который держит драйвер.

Дети: windowSize, camera, renderer, framebuffer, world. Один кадр =
commit‑обход всего графа, затем асинхронный рендер в бекенде. Пока кадр
не завершён (или не отменён), граф заново не коммитится.
"""

from __future__ import annotations

from concurrent.futures import Future

from studiosg.errors import FrameInFlight
from studiosg.graphics.backend import RenderBackend, select_backend
from studiosg.math import Vec2i
from studiosg.sg.node import Node
from studiosg.sg.registry import create_node
from studiosg.sg.visitors.commit import CommitVisitor
from studiosg.utils.logger import logger
from studiosg.utils.profiler import Profiler

_CAMERA_PARAMS = ("position", "direction", "up")


class Frame(Node):
    def __init__(self, name: str = "frame", type_tag: str = "frame",
                 backend: RenderBackend = None):
        super().__init__(name, type_tag)
        self.backend = backend if backend is not None else select_backend()
        self.denoise_fb = False
        self._future: Future = None
        self.last_commit: CommitVisitor = None

        self.create_child("windowSize", "vec2i", Vec2i(1024, 768))
        self.create_child("camera", "camera_perspective")
        self.create_child("renderer", "renderer_pathtracer")
        self.create_child("framebuffer", "framebuffer")
        self.create_child("world", "world")

    # -----------------------------------------------------------------
    # Смена камеры / рендерера по типу
    # -----------------------------------------------------------------
    def set_renderer(self, renderer_type: str) -> Node:
        tag = f"renderer_{renderer_type}"
        if self["renderer"].type_tag == tag:
            return self["renderer"]
        # старый узел удаляется только после создания нового
        return self._replace("renderer", create_node(tag, "renderer"))

    def set_camera(self, camera_type: str) -> Node:
        tag = f"camera_{camera_type}"
        old = self["camera"]
        if old.type_tag == tag:
            return old
        camera = create_node(tag, "camera")
        for param in _CAMERA_PARAMS:
            if old.has_child(param) and camera.has_child(param):
                camera[param] = old[param].value
        return self._replace("camera", camera)

    def _replace(self, name: str, node: Node) -> Node:
        self.remove(name)
        return self.add(node, name)

    # -----------------------------------------------------------------
    # Кадр
    # -----------------------------------------------------------------
    def pre_commit(self, backend) -> None:
        size = self["windowSize"].value_as(Vec2i)
        self["framebuffer"]["size"] = size
        camera = self["camera"]
        if camera.has_child("aspect") and size.y > 0:
            camera["aspect"] = size.x / size.y

    def start_new_frame(self, wait: bool = False) -> Future:
        if not self.frame_ready():
            raise FrameInFlight("Previous frame is still rendering")

        denoise = bool(self.denoise_fb) and self.backend.denoiser_available
        visitor = CommitVisitor(self.backend)
        with Profiler("commit"):
            self.traverse(visitor)
        self.last_commit = visitor
        if visitor.failures:
            logger.warning(f"[Frame] {len(visitor.failures)} node(s) failed to commit, will retry")

        self._future = self.backend.render_frame(
            self["framebuffer"].handle,
            self["renderer"].handle,
            self["camera"].handle,
            self["world"].handle,
            denoise=denoise,
        )
        if wait:
            self.wait_for_frame()
        return self._future

    def frame_ready(self) -> bool:
        return self._future is None or self._future.done()

    def wait_for_frame(self):
        """Дождаться кадра; вернуть результат бекенда (None, если кадра не было)."""
        if self._future is None or self._future.cancelled():
            return None
        return self._future.result()

    def cancel_frame(self) -> None:
        if self._future is not None and not self._future.done():
            self.backend.cancel_frame(self._future)
            logger.info("[Frame] Frame cancelled")

    def save_frame(self, filename: str) -> None:
        self.wait_for_frame()
        self.backend.save_frame(self["framebuffer"].handle, str(filename))
