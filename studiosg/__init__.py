"""
StudioSG – граф сцены с отложенным коммитом в рендер‑бекенд.

Пакет:
    * sg        – узлы, обход, реестр типов, коммит, instancing
    * graphics  – интерфейс бекенда и эталонный in‑memory бекенд
    * importers – raw‑объёмы и декларативные JSON‑сцены
    * camera    – arcball‑камера
    * app       – пакетный рендер (`studiosg` в консоли)
"""

__version__ = "0.3.0"

from studiosg.errors import (
    SceneGraphError, NotFound, DuplicateName, TypeMismatch, UnknownType,
    BackendRejected, CycleError, RegistryFrozen, ImportFailed, FrameInFlight,
)
from studiosg.sg import Node, create_node, init_registry, register_type, traverse
from studiosg.sg.nodes import Frame
from studiosg.graphics import select_backend

__all__ = [
    "SceneGraphError", "NotFound", "DuplicateName", "TypeMismatch", "UnknownType",
    "BackendRejected", "CycleError", "RegistryFrozen", "ImportFailed", "FrameInFlight",
    "Node", "create_node", "init_registry", "register_type", "traverse",
    "Frame", "select_backend",
]
