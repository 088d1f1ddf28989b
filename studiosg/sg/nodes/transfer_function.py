"""
Передаточная функция: таблица цветов и прозрачностей плюс диапазон значений.
"""

import numpy as np

from studiosg.graphics.backend import ObjectKind
from studiosg.math import Vec2f
from studiosg.sg.nodes.base import ObjectNode

JET_COLORS = np.array(
    [
        [0.0, 0.0, 0.562493],
        [0.0, 0.0, 1.0],
        [0.0, 1.0, 1.0],
        [0.500008, 1.0, 0.500008],
        [1.0, 1.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.500008, 0.0, 0.0],
    ],
    dtype=np.float32,
)


class TransferFunction(ObjectNode):
    object_kind = ObjectKind.TRANSFER_FUNCTION
    subtype = "piecewiseLinear"

    def __init__(self, name: str, type_tag: str, colors: np.ndarray, opacities: np.ndarray):
        super().__init__(name, type_tag)
        self.create_child("valueRange", "vec2f", Vec2f(0.0, 1.0))
        self.colors = np.asarray(colors, dtype=np.float32)
        self.opacities = np.asarray(opacities, dtype=np.float32)
        self._data = None

    def post_commit(self, backend) -> None:
        if self._data is None:
            handle = self.ensure_handle(backend)
            self._data = (backend.new_data(self.colors), backend.new_data(self.opacities))
            backend.set_object(handle, "color", self._data[0])
            backend.set_object(handle, "opacity", self._data[1])
        super().post_commit(backend)


class JetTransferFunction(TransferFunction):
    def __init__(self, name: str = "transferFunction", type_tag: str = "transfer_function_jet"):
        super().__init__(name, type_tag, JET_COLORS, np.linspace(0.0, 1.0, len(JET_COLORS)))
