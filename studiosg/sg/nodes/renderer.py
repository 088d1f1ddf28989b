"""
Рендереры. Тег узла – `renderer_<тип бекенда>`.
"""

from studiosg.graphics.backend import ObjectKind
from studiosg.math import Vec4f
from studiosg.sg.nodes.base import ObjectNode


class Renderer(ObjectNode):
    object_kind = ObjectKind.RENDERER

    def __init__(self, name: str, type_tag: str, subtype: str):
        super().__init__(name, type_tag, subtype)
        self.create_child("pixelSamples", "int", 1)
        self.create_child("maxPathLength", "int", 20)
        self.create_child("backgroundColor", "vec4f", Vec4f(0.1, 0.1, 0.1, 1.0))


class PathTracer(Renderer):
    def __init__(self, name: str = "renderer", type_tag: str = "renderer_pathtracer"):
        super().__init__(name, type_tag, "pathtracer")


class SciVis(Renderer):
    def __init__(self, name: str = "renderer", type_tag: str = "renderer_scivis"):
        super().__init__(name, type_tag, "scivis")
        self.create_child("aoSamples", "int", 1)
