"""
Пример плагина: четырёхугольный источник света `quad_light`.
"""

from studiosg.math import Vec3f
from studiosg.sg.nodes.lights import Light


class QuadLight(Light):
    def __init__(self, name: str = "quad", type_tag: str = "quad_light"):
        super().__init__(name, type_tag)
        self.subtype = "quad"
        self.create_child("position", "vec3f", Vec3f(0.0))
        self.create_child("edge1", "vec3f", Vec3f(1.0, 0.0, 0.0))
        self.create_child("edge2", "vec3f", Vec3f(0.0, 1.0, 0.0))


def register(registry):
    """Регистрирует QuadLight под тегом 'quad_light'."""
    registry.register_type("quad_light", QuadLight)
