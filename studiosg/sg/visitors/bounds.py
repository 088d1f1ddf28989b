"""
BoundsVisitor – границы мира с учётом накопленных преобразований.

Узел под несколькими instance‑ами учитывается на каждом пути со своим
преобразованием.
"""

from studiosg.math import Box3f, Mat4
from studiosg.sg.traversal import Visitor


class BoundsVisitor(Visitor):
    def __init__(self):
        self.bounds = Box3f.empty()
        self._xfms = [Mat4.identity()]

    def visit(self, node, ctx) -> bool:
        current = self._xfms[-1]
        local = node.local_transform()
        if local is not None:
            current = current @ local
        self._xfms.append(current)

        box = node.local_bounds()
        if box is not None and not box.is_empty:
            self.bounds.extend(box.transformed(current))
        return True

    def post_visit(self, node, ctx) -> None:
        self._xfms.pop()
