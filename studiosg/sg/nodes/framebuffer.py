from studiosg.graphics.backend import ObjectKind
from studiosg.math import Vec2i
from studiosg.sg.nodes.base import ObjectNode


class FrameBuffer(ObjectNode):
    object_kind = ObjectKind.FRAMEBUFFER
    subtype = "framebuffer"

    def __init__(self, name: str = "framebuffer", type_tag: str = "framebuffer"):
        super().__init__(name, type_tag)
        self.create_child("size", "vec2i", Vec2i(1024, 768))
        self.create_child("colorFormat", "string", "RGBA8")
        self.create_child("floatFormat", "bool", False)
