"""
Графический слой – интерфейс рендер‑бекенда и эталонный in‑memory бекенд.
"""

from studiosg.graphics.backend import BackendHandle, ObjectKind, RenderBackend, select_backend
from studiosg.graphics.memory_backend import MemoryBackend

__all__ = [
    "BackendHandle",
    "ObjectKind",
    "RenderBackend",
    "MemoryBackend",
    "select_backend",
]
