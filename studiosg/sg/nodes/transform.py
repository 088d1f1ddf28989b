"""
Transform – instance‑объект бекенда: перенос/поворот/масштаб плюс
ссылки на под‑графы, которые он размещает в мире.
"""

from studiosg.graphics.backend import ObjectKind
from studiosg.math import Mat4, Quat, Vec3f, Vec4f
from studiosg.sg.nodes.base import ObjectNode


class Transform(ObjectNode):
    object_kind = ObjectKind.INSTANCE
    subtype = "instance"

    def __init__(self, name: str, type_tag: str = "transform"):
        super().__init__(name, type_tag)
        self.create_child("translation", "vec3f", Vec3f(0.0))
        self.create_child("rotation", "vec4f", Vec4f(0.0, 0.0, 0.0, 1.0))
        self.create_child("scale", "vec3f", Vec3f(1.0))

    def local_transform(self) -> Mat4:
        t = self["translation"].value_as(Vec3f)
        r = self["rotation"].value_as(Vec4f)
        s = self["scale"].value_as(Vec3f)
        return Mat4.from_trs(t, Quat.from_vec4(r), s)
