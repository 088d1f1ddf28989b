from studiosg.sg.traversal import Visitor


class NodeCollector(Visitor):
    """
    Собирает каждый узел ровно один раз, даже если он достижим по
    нескольким путям. Можно ограничиться тегом типа или предикатом.
    """

    def __init__(self, type_tag: str = None, predicate=None):
        self.type_tag = type_tag
        self.predicate = predicate
        self.nodes = []
        self._seen = set()

    def visit(self, node, ctx) -> bool:
        if id(node) in self._seen:
            return False
        self._seen.add(id(node))
        if self.type_tag is not None and node.type_tag != self.type_tag:
            return True
        if self.predicate is not None and not self.predicate(node):
            return True
        self.nodes.append(node)
        return True
