"""
Камеры. Тег узла – `camera_<тип бекенда>`.
"""

from studiosg.graphics.backend import ObjectKind
from studiosg.math import Vec3f
from studiosg.sg.nodes.base import ObjectNode


class Camera(ObjectNode):
    object_kind = ObjectKind.CAMERA

    def __init__(self, name: str, type_tag: str, subtype: str):
        super().__init__(name, type_tag, subtype)
        self.create_child("position", "vec3f", Vec3f(0.0))
        self.create_child("direction", "vec3f", Vec3f(0.0, 0.0, 1.0))
        self.create_child("up", "vec3f", Vec3f(0.0, 1.0, 0.0))

    def look_at(self, eye, direction, up) -> None:
        self["position"] = Vec3f(eye)
        self["direction"] = Vec3f(direction)
        self["up"] = Vec3f(up)


class PerspectiveCamera(Camera):
    def __init__(self, name: str = "camera", type_tag: str = "camera_perspective"):
        super().__init__(name, type_tag, "perspective")
        self.create_child("fovy", "float", 60.0)
        self.create_child("aspect", "float", 1.0)
        self.create_child("stereoMode", "int", 0)
        self.create_child("interpupillaryDistance", "float", 0.0635)


class OrthographicCamera(Camera):
    def __init__(self, name: str = "camera", type_tag: str = "camera_orthographic"):
        super().__init__(name, type_tag, "orthographic")
        self.create_child("height", "float", 1.0)
        self.create_child("aspect", "float", 1.0)


class PanoramicCamera(Camera):
    def __init__(self, name: str = "camera", type_tag: str = "camera_panoramic"):
        super().__init__(name, type_tag, "panoramic")
        self.create_child("stereoMode", "int", 0)
        self.create_child("interpupillaryDistance", "float", 0.0635)
