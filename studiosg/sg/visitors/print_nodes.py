from studiosg.sg.traversal import Visitor
from studiosg.sg.value import ValueKind
from studiosg.utils.logger import logger


class PrintNodes(Visitor):
    """Дерево с отступами: `name : type = value`."""

    def __init__(self, log: bool = False):
        self.lines = []
        self.log = log

    def visit(self, node, ctx) -> bool:
        line = "  " * ctx.level + f"{node.name} : {node.type_tag}"
        if node.value_kind is not ValueKind.NONE:
            line += f" = {node.value!r}"
        self.lines.append(line)
        if self.log:
            logger.info(line)
        return True

    def __str__(self):
        return "\n".join(self.lines)
