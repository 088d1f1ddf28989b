"""
Агрегатные узлы: их «значение» – handle объекта бекенда, а параметры
несут дети. Коммит = убедиться, что объект есть, передать в него
изменившихся детей, удалить пропавшие параметры и закоммитить объект.
"""

from __future__ import annotations

from studiosg.graphics.backend import ObjectKind
from studiosg.sg.binding import apply_binding, push_value
from studiosg.sg.node import Node
from studiosg.sg.value import ValueKind
from studiosg.utils.logger import logger


class ObjectNode(Node):
    """Узел, которому соответствует один объект бекенда."""

    object_kind: ObjectKind = None
    subtype: str = ""

    def __init__(self, name: str, type_tag: str, subtype: str = None):
        super().__init__(name, type_tag, ValueKind.HANDLE)
        if subtype is not None:
            self.subtype = subtype

    @property
    def handle(self):
        """Handle объекта бекенда (None, пока узел ни разу не коммитился)."""
        return self._value.value

    def ensure_handle(self, backend):
        """Создать объект бекенда один раз на узел (не на путь обхода)."""
        handle = self._value.value
        if handle is None:
            handle = backend.new_object(self.object_kind, self.subtype)
            self._value.set(handle)
            # родители должны заново передать ссылку на объект
            self._version += 1
            logger.debug(f"[Commit] Created {self.object_kind.value} '{self.subtype}' for '{self.name}'")
        return handle

    def pre_commit(self, backend) -> None:
        self.ensure_handle(backend)

    def post_commit(self, backend) -> None:
        handle = self.ensure_handle(backend)
        for name in list(self._removed):
            if name not in self._children:
                backend.remove_param(handle, name)
            del self._removed[name]
        self.apply_children(backend, handle)
        backend.commit(handle)

    def apply_children(self, backend, handle) -> None:
        for name, child in self._children.items():
            state = (id(child), child.version)
            if self._applied.get(name) == state:
                continue
            if isinstance(child, ObjectNode):
                if child.handle is None:
                    # объект ребёнка ещё не создан (его коммит не удался)
                    continue
                push_value(backend, handle, name, ValueKind.HANDLE, child.handle)
            else:
                apply_binding(backend, handle, name, child._value)
            self._applied[name] = state
