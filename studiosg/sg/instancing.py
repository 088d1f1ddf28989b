"""
Instancing: один и тот же под‑граф под несколькими Transform‑ами.

Копий не создаётся – каждый Transform держит ссылку на тот же узел,
так что изменение общего под‑графа видно во всех instance‑ах, а
перенос каждого Transform‑а – только в своём.
"""

from __future__ import annotations

from typing import List, Sequence

from studiosg.math import Vec3f, Vec3i
from studiosg.sg.node import Node
from studiosg.sg.registry import create_node


def instance(shared: Node, translation=(0.0, 0.0, 0.0), name: str = None) -> Node:
    """Новый Transform с переносом `translation`, ссылающийся на `shared`."""
    name = name if name is not None else f"{shared.name}_instance"
    xfm = create_node("transform", name)
    xfm["translation"] = Vec3f(translation)
    xfm.add(shared)
    return xfm


def make_grid(shared: Node, grid_size: Sequence[int], spacing: float = 1.2) -> List[Node]:
    """
    Сетка instance‑ов `copy_{x}:{y}:{z}_xfm`.

    Шаг сетки – размер границ под‑графа, умноженный на `spacing`.
    Возвращает transform‑ы в порядке z, y, x (x меняется быстрее всего).
    """
    grid = Vec3i(grid_size)
    step = shared.bounds().size * spacing
    transforms = []
    for z in range(grid.z):
        for y in range(grid.y):
            for x in range(grid.x):
                translation = Vec3f(step.x * x, step.y * y, step.z * z)
                transforms.append(instance(shared, translation, f"copy_{x}:{y}:{z}_xfm"))
    return transforms
