"""
Абстрактный интерфейс рендер‑бекенда.

Граф сцены ничего не знает о том, как бекенд рисует: он только создаёт
агрегатные объекты (камера, мир, объём, …), выставляет им типизированные
параметры и коммитит их. Кадр запускается асинхронно и ожидается явно.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from concurrent.futures import Future
from enum import Enum

import numpy as np


class ObjectKind(Enum):
    """Категории агрегатных объектов бекенда."""
    CAMERA = "camera"
    RENDERER = "renderer"
    FRAMEBUFFER = "framebuffer"
    WORLD = "world"
    INSTANCE = "instance"
    VOLUME = "volume"
    LIGHT = "light"
    MATERIAL = "material"
    TRANSFER_FUNCTION = "transfer_function"
    DATA = "data"


class BackendHandle:
    """
    Непрозрачный handle объекта бекенда.
    Сравнивается только по идентичности (== это `is`).
    """

    __slots__ = ("kind", "subtype", "id", "__weakref__")

    _ids = itertools.count(1)

    def __init__(self, kind: ObjectKind, subtype: str = ""):
        self.kind = kind
        self.subtype = subtype
        self.id = next(BackendHandle._ids)

    def __repr__(self):
        return f"<BackendHandle #{self.id} {self.kind.value}:{self.subtype}>"


class RenderBackend(ABC):
    """Base interface for rendering backends."""

    # -----------------------------------------------------------------
    # Объекты
    # -----------------------------------------------------------------
    @abstractmethod
    def new_object(self, kind: ObjectKind, subtype: str) -> BackendHandle:
        pass

    @abstractmethod
    def new_data(self, array: np.ndarray) -> BackendHandle:
        pass

    @abstractmethod
    def commit(self, handle: BackendHandle) -> None:
        pass

    @abstractmethod
    def release(self, handle: BackendHandle) -> None:
        pass

    # -----------------------------------------------------------------
    # Параметры (по одному методу на вид значения)
    # -----------------------------------------------------------------
    @abstractmethod
    def set_bool(self, handle: BackendHandle, name: str, value: bool) -> None:
        pass

    @abstractmethod
    def set_int(self, handle: BackendHandle, name: str, value: int) -> None:
        pass

    @abstractmethod
    def set_float(self, handle: BackendHandle, name: str, value: float) -> None:
        pass

    @abstractmethod
    def set_vec2f(self, handle: BackendHandle, name: str, value: tuple) -> None:
        pass

    @abstractmethod
    def set_vec3f(self, handle: BackendHandle, name: str, value: tuple) -> None:
        pass

    @abstractmethod
    def set_vec4f(self, handle: BackendHandle, name: str, value: tuple) -> None:
        pass

    @abstractmethod
    def set_vec2i(self, handle: BackendHandle, name: str, value: tuple) -> None:
        pass

    @abstractmethod
    def set_vec3i(self, handle: BackendHandle, name: str, value: tuple) -> None:
        pass

    @abstractmethod
    def set_string(self, handle: BackendHandle, name: str, value: str) -> None:
        pass

    @abstractmethod
    def set_object(self, handle: BackendHandle, name: str, value: BackendHandle) -> None:
        pass

    @abstractmethod
    def remove_param(self, handle: BackendHandle, name: str) -> None:
        pass

    # -----------------------------------------------------------------
    # Кадр
    # -----------------------------------------------------------------
    @abstractmethod
    def render_frame(
        self,
        framebuffer: BackendHandle,
        renderer: BackendHandle,
        camera: BackendHandle,
        world: BackendHandle,
        denoise: bool = False,
    ) -> Future:
        pass

    @abstractmethod
    def cancel_frame(self, future: Future) -> None:
        pass

    @abstractmethod
    def save_frame(self, framebuffer: BackendHandle, filename: str, flags: int = 0) -> None:
        pass

    @property
    def denoiser_available(self) -> bool:
        return False

    def shutdown(self) -> None:
        pass


def select_backend(name: str = "memory") -> RenderBackend:
    """Select rendering backend by name."""
    name = name.lower()
    if name == "memory":
        from .memory_backend import MemoryBackend
        return MemoryBackend()
    else:
        raise ValueError(f"Unknown rendering backend: {name}")

