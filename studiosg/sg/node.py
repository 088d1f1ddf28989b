"""
Узел графа сцены.

Узел владеет ячейкой значения и упорядоченным словарём детей
(имя → узел). Один и тот же узел может быть ребёнком нескольких
родителей (instancing), поэтому граф – DAG. Ссылки на родителей слабые
(WeakSet): они нужны только для распространения «грязности» и никогда
не продлевают жизнь родителя.
"""

from __future__ import annotations

import weakref
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from studiosg.errors import CycleError, DuplicateName, NotFound
from studiosg.sg.traversal import TraversalContext, traverse as _traverse
from studiosg.sg.value import UNSET, ValueCell, ValueKind


class Node:
    """Именованная типизированная вершина графа со значением и детьми."""

    def __init__(self, name: str, type_tag: str = "node",
                 kind: ValueKind = ValueKind.NONE, value=None):
        self.name = name
        self.type_tag = type_tag
        self._value = ValueCell(kind, value)
        self._children: Dict[str, Node] = {}
        self._parents = weakref.WeakSet()
        self._modified = True
        self._version = 0
        # что уже передано в объект бекенда этого узла: имя → (id ребёнка, версия)
        self._applied: Dict[str, tuple] = {}
        # удалённые с прошлого коммита имена (упорядоченное множество)
        self._removed: Dict[str, None] = {}

    # -----------------------------------------------------------------
    # Значение
    # -----------------------------------------------------------------
    def set_value(self, value) -> bool:
        """Записать значение; при изменении узел и все предки становятся грязными."""
        changed = self._value.set(value)
        if changed:
            self._version += 1
            self.mark_as_modified()
        return changed

    def value_as(self, t=None):
        return self._value.get(t)

    def value_is_type(self, t) -> bool:
        return self._value.is_type(t)

    @property
    def value(self):
        return self._value.value

    @property
    def value_kind(self) -> ValueKind:
        return self._value.kind

    # -----------------------------------------------------------------
    # Дети
    # -----------------------------------------------------------------
    def create_child(self, name: str, type_tag: str = "node", value=UNSET) -> "Node":
        """
        Создать ребёнка через реестр или, если имя уже занято,
        только обновить значение существующего (идемпотентно).
        """
        existing = self._children.get(name)
        if existing is not None:
            if value is not UNSET:
                existing.set_value(value)
            return existing
        from studiosg.sg.registry import create_node
        return self.add(create_node(type_tag, name, value))

    def add(self, child: "Node", name: str = None) -> "Node":
        """Прикрепить готовый узел (в т.ч. уже имеющий других родителей)."""
        name = child.name if name is None else name
        existing = self._children.get(name)
        if existing is child:
            return child
        if existing is not None:
            raise DuplicateName(
                f"'{self.name}' already has a different child named '{name}'"
            )
        if child is self or self.has_ancestor(child):
            raise CycleError(f"Adding '{child.name}' under '{self.name}' would create a cycle")

        self._children[name] = child
        child._parents.add(self)
        self._removed.pop(name, None)
        self._applied.pop(name, None)
        self._version += 1
        self._force_modified()
        return child

    def remove(self, name_or_node) -> "Node":
        """Отцепить ребёнка; сам узел живёт, пока его держат другие."""
        if isinstance(name_or_node, Node):
            name = next(
                (k for k, c in self._children.items() if c is name_or_node), None
            )
        else:
            name = name_or_node
        if name is None or name not in self._children:
            raise NotFound(f"'{self.name}' has no child {name_or_node!r}")

        child = self._children.pop(name)
        if not any(c is child for c in self._children.values()):
            child._parents.discard(self)
        self._applied.pop(name, None)
        self._removed[name] = None
        self._version += 1
        self._force_modified()
        return child

    def has_child(self, name: str) -> bool:
        return name in self._children

    def child(self, name: str) -> "Node":
        try:
            return self._children[name]
        except KeyError:
            raise NotFound(f"'{self.name}' has no child '{name}'") from None

    def children(self) -> Mapping[str, "Node"]:
        """Упорядоченное отображение имя → ребёнок (только чтение)."""
        return MappingProxyType(self._children)

    def __getitem__(self, name: str) -> "Node":
        return self.child(name)

    def __setitem__(self, name: str, value) -> None:
        self.child(name).set_value(value)

    def __contains__(self, item) -> bool:
        if isinstance(item, Node):
            return any(c is item for c in self._children.values())
        return item in self._children

    def __iter__(self) -> Iterator["Node"]:
        return iter(list(self._children.values()))

    def __len__(self) -> int:
        return len(self._children)

    # -----------------------------------------------------------------
    # Родители
    # -----------------------------------------------------------------
    def parents(self) -> List["Node"]:
        return list(self._parents)

    @property
    def is_shared(self) -> bool:
        return len(self._parents) > 1

    def has_ancestor(self, node: "Node") -> bool:
        """True, если `node` достижим вверх по родительским ссылкам."""
        seen = set()
        stack = list(self._parents)
        while stack:
            parent = stack.pop()
            if parent is node:
                return True
            if id(parent) in seen:
                continue
            seen.add(id(parent))
            stack.extend(parent._parents)
        return False

    # -----------------------------------------------------------------
    # Грязность
    # -----------------------------------------------------------------
    @property
    def is_modified(self) -> bool:
        return self._modified

    @property
    def version(self) -> int:
        return self._version

    def mark_as_modified(self) -> None:
        """Пометить узел и всех предков; уже грязные узлы дальше не идут."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node._modified:
                continue
            node._modified = True
            stack.extend(node._parents)

    def _force_modified(self):
        self._modified = False
        self.mark_as_modified()

    def mark_as_committed(self) -> None:
        self._modified = False

    # -----------------------------------------------------------------
    # Коммит (только этот узел; дети – забота обхода)
    # -----------------------------------------------------------------
    def pre_commit(self, backend) -> None:
        pass

    def post_commit(self, backend) -> None:
        self._removed.clear()

    def commit(self, backend) -> bool:
        """Закоммитить этот узел; вернуть True, если флаг снят."""
        if not self._modified:
            return True
        self.pre_commit(backend)
        self.post_commit(backend)
        if any(c.is_modified for c in self._children.values()):
            return False
        self.mark_as_committed()
        return True

    # -----------------------------------------------------------------
    # Обход и границы
    # -----------------------------------------------------------------
    def traverse(self, visitor, ctx: TraversalContext = None) -> TraversalContext:
        return _traverse(self, visitor, ctx)

    def local_bounds(self):
        """Собственные границы в локальных координатах (None – нет геометрии)."""
        return None

    def local_transform(self):
        """Собственное преобразование (None – единичное)."""
        return None

    def bounds(self):
        """Box3f всех путей под этим узлом (каждый instance – отдельно)."""
        from studiosg.sg.visitors.bounds import BoundsVisitor
        visitor = BoundsVisitor()
        self.traverse(visitor)
        return visitor.bounds

    # -----------------------------------------------------------------
    def __repr__(self):
        return f"<{type(self).__name__} '{self.name}' ({self.type_tag})>"


def leaf_factory(type_tag: str, kind: ValueKind):
    """Конструктор листа заданного вида для реестра."""
    def ctor(name: str) -> Node:
        return Node(name, type_tag, kind)
    ctor.__name__ = f"make_{type_tag}"
    return ctor


def find(root: Node, path: str) -> Optional[Node]:
    """Узел по пути 'a/b/c' относительно root (None, если его нет)."""
    node = root
    for part in filter(None, path.split("/")):
        if not node.has_child(part):
            return None
        node = node.child(part)
    return node
