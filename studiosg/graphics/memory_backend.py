# -*- coding: utf-8 -*-
"""
Эталонный in‑process бекенд.

* Хранит объекты и их параметры в словарях, проверяет handle‑ы
  (неизвестный/освобождённый handle → BackendRejected).
* «Рендерит» кадр асинхронно в TaskPool: накапливает заданное число
  сэмплов фонового цвета рендера в RGBA‑буфер (настоящая генерация
  пикселей – забота внешнего движка).
* Сохраняет кадр через Pillow.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future
from pathlib import Path
from typing import Any, Dict, Tuple

import numpy as np
from PIL import Image

from studiosg.errors import BackendRejected, NotFound
from studiosg.graphics.backend import BackendHandle, ObjectKind, RenderBackend
from studiosg.multithread import TaskPool
from studiosg.utils.logger import logger


class _Object:
    """Запись об объекте бекенда."""
    __slots__ = ("kind", "subtype", "params", "committed", "commit_count", "data")

    def __init__(self, kind: ObjectKind, subtype: str, data: np.ndarray = None):
        self.kind = kind
        self.subtype = subtype
        self.params: Dict[str, Tuple[str, Any]] = {}
        self.committed = False
        self.commit_count = 0
        self.data = data


class MemoryBackend(RenderBackend):
    """Бекенд, который держит всё состояние в памяти процесса."""

    def __init__(self, max_workers: int = 1):
        self._objects: Dict[int, _Object] = {}
        self._pool = TaskPool(max_workers=max_workers)
        self._cancel_events: Dict[int, threading.Event] = {}
        self._pixels: Dict[int, np.ndarray] = {}
        self._lock = threading.Lock()
        self.frames_rendered = 0

    # -----------------------------------------------------------------
    # Вспомогательное
    # -----------------------------------------------------------------
    def _get(self, handle) -> _Object:
        if not isinstance(handle, BackendHandle):
            raise BackendRejected(f"Not a backend handle: {handle!r}")
        obj = self._objects.get(handle.id)
        if obj is None:
            raise BackendRejected(f"Unknown or released handle {handle!r}")
        return obj

    def _set(self, handle, name: str, type_name: str, value) -> None:
        obj = self._get(handle)
        obj.params[name] = (type_name, value)
        obj.committed = False

    # -----------------------------------------------------------------
    # Объекты
    # -----------------------------------------------------------------
    def new_object(self, kind: ObjectKind, subtype: str) -> BackendHandle:
        handle = BackendHandle(kind, subtype)
        self._objects[handle.id] = _Object(kind, subtype)
        logger.debug(f"[Backend] new {kind.value} '{subtype}' -> #{handle.id}")
        return handle

    def new_data(self, array: np.ndarray) -> BackendHandle:
        handle = BackendHandle(ObjectKind.DATA, str(np.asarray(array).dtype))
        obj = _Object(ObjectKind.DATA, handle.subtype, data=np.array(array))
        obj.committed = True
        self._objects[handle.id] = obj
        return handle

    def commit(self, handle: BackendHandle) -> None:
        obj = self._get(handle)
        obj.committed = True
        obj.commit_count += 1

    def release(self, handle: BackendHandle) -> None:
        self._get(handle)
        del self._objects[handle.id]
        self._pixels.pop(handle.id, None)

    # -----------------------------------------------------------------
    # Параметры
    # -----------------------------------------------------------------
    def set_bool(self, handle, name, value):
        self._set(handle, name, "bool", bool(value))

    def set_int(self, handle, name, value):
        self._set(handle, name, "int", int(value))

    def set_float(self, handle, name, value):
        self._set(handle, name, "float", float(value))

    def set_vec2f(self, handle, name, value):
        self._set(handle, name, "vec2f", tuple(float(v) for v in value))

    def set_vec3f(self, handle, name, value):
        self._set(handle, name, "vec3f", tuple(float(v) for v in value))

    def set_vec4f(self, handle, name, value):
        self._set(handle, name, "vec4f", tuple(float(v) for v in value))

    def set_vec2i(self, handle, name, value):
        self._set(handle, name, "vec2i", tuple(int(v) for v in value))

    def set_vec3i(self, handle, name, value):
        self._set(handle, name, "vec3i", tuple(int(v) for v in value))

    def set_string(self, handle, name, value):
        self._set(handle, name, "string", str(value))

    def set_object(self, handle, name, value):
        self._get(value)
        self._set(handle, name, "object", value)

    def remove_param(self, handle, name):
        obj = self._get(handle)
        if obj.params.pop(name, None) is not None:
            obj.committed = False

    # -----------------------------------------------------------------
    # Интроспекция (используется тестами и драйвером)
    # -----------------------------------------------------------------
    def param(self, handle: BackendHandle, name: str, default=NotFound):
        """Значение параметра объекта; NotFound, если его нет."""
        obj = self._get(handle)
        if name not in obj.params:
            if default is NotFound:
                raise NotFound(f"Object #{handle.id} has no parameter '{name}'")
            return default
        return obj.params[name][1]

    def params(self, handle: BackendHandle) -> Dict[str, Any]:
        return {k: v for k, (_, v) in self._get(handle).params.items()}

    def is_committed(self, handle: BackendHandle) -> bool:
        return self._get(handle).committed

    def objects(self, kind: ObjectKind = None):
        return [o for o in self._objects.values() if kind is None or o.kind is kind]

    def map_frame(self, framebuffer: BackendHandle) -> np.ndarray:
        """Копия последнего отрисованного RGBA8‑буфера."""
        self._get(framebuffer)
        pixels = self._pixels.get(framebuffer.id)
        if pixels is None:
            raise BackendRejected(f"Framebuffer #{framebuffer.id} has no rendered frame")
        return pixels.copy()

    # -----------------------------------------------------------------
    # Кадр
    # -----------------------------------------------------------------
    def _require(self, handle, kind: ObjectKind) -> _Object:
        obj = self._get(handle)
        if obj.kind is not kind:
            raise BackendRejected(f"Expected a {kind.value} handle, got {handle!r}")
        if not obj.committed:
            raise BackendRejected(f"{kind.value} #{handle.id} is not committed")
        return obj

    def render_frame(self, framebuffer, renderer, camera, world, denoise=False) -> Future:
        fb = self._require(framebuffer, ObjectKind.FRAMEBUFFER)
        rend = self._require(renderer, ObjectKind.RENDERER)
        self._require(camera, ObjectKind.CAMERA)
        self._require(world, ObjectKind.WORLD)

        width, height = fb.params.get("size", ("vec2i", (1, 1)))[1]
        background = rend.params.get("backgroundColor", ("vec4f", (0.0, 0.0, 0.0, 1.0)))[1]
        samples = max(1, rend.params.get("pixelSamples", ("int", 1))[1])
        if denoise:
            logger.debug("[Backend] Denoising is not available, frame left as is")

        cancel = threading.Event()
        future = self._pool.submit(
            self._render, framebuffer.id, max(1, width), max(1, height), background, samples, cancel
        )
        self._cancel_events[id(future)] = cancel
        future.add_done_callback(lambda f: self._cancel_events.pop(id(f), None))
        return future

    def _render(self, fb_id, width, height, background, samples, cancel) -> int:
        accum = np.zeros((height, width, 4), dtype=np.float32)
        colour = np.asarray(background, dtype=np.float32)
        done = 0
        for _ in range(samples):
            if cancel.is_set():
                break
            accum += colour
            done += 1
        if done:
            pixels = np.clip(accum / done * 255.0, 0.0, 255.0).astype(np.uint8)
            with self._lock:
                self._pixels[fb_id] = pixels
                self.frames_rendered += 1
        return done

    def cancel_frame(self, future: Future) -> None:
        event = self._cancel_events.get(id(future))
        if event is not None:
            event.set()
        future.cancel()

    def save_frame(self, framebuffer, filename, flags=0):
        pixels = self.map_frame(framebuffer)
        image = Image.fromarray(pixels)
        if Path(filename).suffix.lower() in (".jpg", ".jpeg", ".ppm"):
            image = image.convert("RGB")
        image.save(filename)
        logger.info(f"[Backend] Saved frame to {filename}")

    def shutdown(self) -> None:
        self._pool.wait_all()
        self._pool.shutdown(wait=True)
