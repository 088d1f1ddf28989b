"""
Источники света. Тег узла совпадает с типом света бекенда.
"""

from studiosg.graphics.backend import ObjectKind
from studiosg.math import Vec3f
from studiosg.sg.nodes.base import ObjectNode


class Light(ObjectNode):
    object_kind = ObjectKind.LIGHT

    def __init__(self, name: str, type_tag: str):
        super().__init__(name, type_tag, type_tag)
        self.create_child("visible", "bool", True)
        self.create_child("intensity", "float", 1.0)
        self.create_child("color", "vec3f", Vec3f(1.0))


class AmbientLight(Light):
    def __init__(self, name: str = "ambient", type_tag: str = "ambient"):
        super().__init__(name, type_tag)


class DistantLight(Light):
    def __init__(self, name: str = "distant", type_tag: str = "distant"):
        super().__init__(name, type_tag)
        self.create_child("direction", "vec3f", Vec3f(0.0, 0.0, 1.0))
        self.create_child("angularDiameter", "float", 0.0)


class SphereLight(Light):
    def __init__(self, name: str = "sphere", type_tag: str = "sphere"):
        super().__init__(name, type_tag)
        self.create_child("position", "vec3f", Vec3f(0.0))
        self.create_child("radius", "float", 0.0)


class SpotLight(Light):
    def __init__(self, name: str = "spot", type_tag: str = "spot"):
        super().__init__(name, type_tag)
        self.create_child("position", "vec3f", Vec3f(0.0))
        self.create_child("direction", "vec3f", Vec3f(0.0, 0.0, 1.0))
        self.create_child("openingAngle", "float", 180.0)
        self.create_child("penumbraAngle", "float", 5.0)
        self.create_child("radius", "float", 0.0)
