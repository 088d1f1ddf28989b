from studiosg.graphics.backend import ObjectKind
from studiosg.math import Vec3f
from studiosg.sg.nodes.base import ObjectNode


class Material(ObjectNode):
    object_kind = ObjectKind.MATERIAL

    def __init__(self, name: str, type_tag: str):
        super().__init__(name, type_tag, type_tag)


class OBJMaterial(Material):
    """Классический OBJ/MTL материал."""

    def __init__(self, name: str = "material", type_tag: str = "obj"):
        super().__init__(name, type_tag)
        self.create_child("kd", "vec3f", Vec3f(0.8))
        self.create_child("ks", "vec3f", Vec3f(0.0))
        self.create_child("ns", "float", 10.0)
        self.create_child("d", "float", 1.0)


class PrincipledMaterial(Material):
    def __init__(self, name: str = "material", type_tag: str = "principled"):
        super().__init__(name, type_tag)
        self.create_child("baseColor", "vec3f", Vec3f(0.8))
        self.create_child("metallic", "float", 0.0)
        self.create_child("roughness", "float", 0.0)
        self.create_child("opacity", "float", 1.0)
