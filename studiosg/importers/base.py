"""
Импортёры: файл → отдельный под‑граф.

Импортёр строит под‑граф «на стороне» и возвращает его корень;
к миру он прикрепляется только целиком. Ошибка в одном файле
логируется, файл пропускается, остальные импортируются.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Type

from studiosg.errors import ImportFailed, SceneGraphError
from studiosg.sg.node import Node
from studiosg.utils.logger import logger


class Importer:
    """Базовый импортёр."""

    extensions: tuple = ()

    def __init__(self, params: dict = None):
        self.params = dict(params or {})

    def import_scene(self, path) -> Node:
        raise NotImplementedError


_IMPORTERS: Dict[str, Type[Importer]] = {}


def register_importer(cls: Type[Importer]) -> Type[Importer]:
    for ext in cls.extensions:
        _IMPORTERS[ext] = cls
    return cls


def get_importer(path, params: dict = None) -> Importer:
    ext = Path(path).suffix.lower()
    cls = _IMPORTERS.get(ext)
    if cls is None:
        raise ImportFailed(f"No importer for '{ext}' files")
    return cls(params)


def import_files(parent: Node, files, params: dict = None) -> List[Node]:
    """Импортировать файлы под `parent`; вернуть прикреплённые корни."""
    imported = []
    for file in files:
        logger.info(f"[Importer] Importing: {file}")
        try:
            root = get_importer(file, params).import_scene(file)
            parent.add(root)
        except (SceneGraphError, OSError, ValueError) as exc:
            logger.error(f"[Importer] Failed to open file '{file}': {exc}")
            continue
        imported.append(root)
    return imported
