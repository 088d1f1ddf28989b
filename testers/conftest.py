# -*- coding: utf-8 -*-
"""
conftest.py – мок‑бекенд для графа сцены.
Не рендерит ничего, а проверяет, что коммит вызывает ожидаемые
методы бекенда с ожидаемыми аргументами.
"""

from concurrent.futures import Future
from typing import Any, Tuple

import pytest

from studiosg.errors import BackendRejected
from studiosg.graphics.backend import BackendHandle, ObjectKind, RenderBackend
from studiosg.sg.registry import NodeRegistry, init_registry
from studiosg.sg.nodes import register_builtins
from studiosg.utils.config import Config


# ----------------------------------------------------------------------
# MockBackend – полностью реализует интерфейс RenderBackend.
# ----------------------------------------------------------------------
class MockBackend(RenderBackend):
    """
    Каждый метод только записывает вызов в `self.calls`.
    Handle‑ы из `self.rejected` отклоняются (BackendRejected).
    """

    def __init__(self) -> None:
        # (method_name, args, kwargs)
        self.calls: list[Tuple[str, Tuple[Any, ...], dict]] = []
        self.rejected: set = set()
        self.reject_kinds: set = set()
        self.denoiser = False

    # -----------------------------------------------------------------
    # Вспомогательная запись вызова
    # -----------------------------------------------------------------
    def _record(self, name: str, *a, **kw) -> None:
        self.calls.append((name, a, kw))

    def _check(self, handle) -> None:
        if not isinstance(handle, BackendHandle) or handle.id in self.rejected:
            raise BackendRejected(f"rejected {handle!r}")

    # -----------------------------------------------------------------
    # Объекты
    # -----------------------------------------------------------------
    def new_object(self, kind: ObjectKind, subtype: str) -> BackendHandle:
        self._record("new_object", kind, subtype)
        if kind in self.reject_kinds:
            raise BackendRejected(f"cannot create {kind.value}")
        return BackendHandle(kind, subtype)

    def new_data(self, array) -> BackendHandle:
        self._record("new_data", array)
        return BackendHandle(ObjectKind.DATA, "data")

    def commit(self, handle) -> None:
        self._check(handle)
        self._record("commit", handle)

    def release(self, handle) -> None:
        self._record("release", handle)

    # -----------------------------------------------------------------
    # Параметры
    # -----------------------------------------------------------------
    def _param(self, method, handle, name, value):
        self._check(handle)
        self._record(method, handle, name, value)

    def set_bool(self, handle, name, value):
        self._param("set_bool", handle, name, value)

    def set_int(self, handle, name, value):
        self._param("set_int", handle, name, value)

    def set_float(self, handle, name, value):
        self._param("set_float", handle, name, value)

    def set_vec2f(self, handle, name, value):
        self._param("set_vec2f", handle, name, value)

    def set_vec3f(self, handle, name, value):
        self._param("set_vec3f", handle, name, value)

    def set_vec4f(self, handle, name, value):
        self._param("set_vec4f", handle, name, value)

    def set_vec2i(self, handle, name, value):
        self._param("set_vec2i", handle, name, value)

    def set_vec3i(self, handle, name, value):
        self._param("set_vec3i", handle, name, value)

    def set_string(self, handle, name, value):
        self._param("set_string", handle, name, value)

    def set_object(self, handle, name, value):
        self._param("set_object", handle, name, value)

    def remove_param(self, handle, name):
        self._check(handle)
        self._record("remove_param", handle, name)

    # -----------------------------------------------------------------
    # Кадр
    # -----------------------------------------------------------------
    def render_frame(self, framebuffer, renderer, camera, world, denoise=False) -> Future:
        for h in (framebuffer, renderer, camera, world):
            self._check(h)
        self._record("render_frame", framebuffer, renderer, camera, world, denoise=denoise)
        future = Future()
        future.set_result(1)
        return future

    def cancel_frame(self, future) -> None:
        self._record("cancel_frame", future)
        future.cancel()

    def save_frame(self, framebuffer, filename, flags=0) -> None:
        self._record("save_frame", framebuffer, filename, flags)

    @property
    def denoiser_available(self) -> bool:
        return self.denoiser

    # -----------------------------------------------------------------
    # Утилиты для тестов
    # -----------------------------------------------------------------
    def called(self, name: str) -> bool:
        """True, если метод `name` был вызван хотя бы один раз."""
        return any(call[0] == name for call in self.calls)

    def count(self, name: str) -> int:
        """Сколько раз был вызван метод `name`."""
        return sum(1 for call in self.calls if call[0] == name)

    def named(self, method: str, param: str) -> list:
        """Вызовы сеттера `method` для параметра `param`: [(handle, value), …]."""
        return [(c[1][0], c[1][2]) for c in self.calls if c[0] == method and c[1][1] == param]

    def created(self, kind: ObjectKind) -> int:
        return sum(1 for c in self.calls if c[0] == "new_object" and c[1][0] is kind)

    def reset(self) -> None:
        self.calls.clear()


# ----------------------------------------------------------------------
# PyTest‑fixtures
# ----------------------------------------------------------------------
@pytest.fixture
def mock_backend() -> MockBackend:
    """Создаёт чистый MockBackend."""
    return MockBackend()


@pytest.fixture(scope="session", autouse=True)
def _process_registry():
    """Реестр процесса инициализируется один раз (встроенные типы + плагины)."""
    return init_registry()


@pytest.fixture
def registry() -> NodeRegistry:
    """Отдельный, ещё не замороженный реестр со встроенными типами."""
    reg = NodeRegistry()
    register_builtins(reg)
    return reg


@pytest.fixture
def config(tmp_path):
    """Config, читающий файл из временной папки (файла нет → defaults)."""
    Config.reset()
    cfg = Config(str(tmp_path / "studiosg.json"))
    yield cfg
    Config.reset()
