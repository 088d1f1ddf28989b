from studiosg.graphics.backend import ObjectKind
from studiosg.sg.nodes.base import ObjectNode


class World(ObjectNode):
    """Корень содержимого сцены: instance‑ы, свет."""
    object_kind = ObjectKind.WORLD
    subtype = "world"

    def __init__(self, name: str = "world", type_tag: str = "world"):
        super().__init__(name, type_tag)
