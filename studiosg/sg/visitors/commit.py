"""
CommitVisitor – конвейер коммита.

Чистые поддеревья отсекаются (`visit` возвращает `is_modified`).
Для грязного узла: `pre_commit` до детей (создать объект бекенда),
`post_commit` после детей (передать изменившихся детей, закоммитить).
Флаг снимается, только если коммит узла удался и ни один ребёнок
не остался грязным.
"""

from __future__ import annotations

from typing import List, Tuple

from studiosg.errors import BackendRejected
from studiosg.sg.traversal import TraversalContext, Visitor
from studiosg.utils.logger import logger


class CommitVisitor(Visitor):
    def __init__(self, backend):
        self.backend = backend
        self.failures: List[Tuple[object, BackendRejected]] = []
        self.committed = 0
        # для каждого открытого узла: (был ли грязным, удался ли pre_commit)
        self._stack: List[Tuple[bool, bool]] = []

    def visit(self, node, ctx: TraversalContext) -> bool:
        if not node.is_modified:
            self._stack.append((False, False))
            return False
        ok = self._guard(node, node.pre_commit)
        self._stack.append((True, ok))
        return True

    def post_visit(self, node, ctx: TraversalContext) -> None:
        dirty, ok = self._stack.pop()
        if not dirty:
            return
        if ok:
            ok = self._guard(node, node.post_commit)
        if ok and not any(c.is_modified for c in node.children().values()):
            node.mark_as_committed()
            self.committed += 1

    def _guard(self, node, step) -> bool:
        try:
            step(self.backend)
        except BackendRejected as exc:
            logger.error(f"[Commit] Backend rejected '{node.name}' ({node.type_tag}): {exc}")
            self.failures.append((node, exc))
            return False
        return True

    @property
    def ok(self) -> bool:
        return not self.failures
