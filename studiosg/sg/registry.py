"""
Реестр типов узлов: строковый тег → конструктор `ctor(name) -> Node`.

Заполняется один раз явным упорядоченным списком (`init_registry`:
встроенные типы, затем плагины) и после этого замораживается.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from studiosg.errors import RegistryFrozen, UnknownType
from studiosg.sg.value import UNSET
from studiosg.utils.logger import logger

NodeCtor = Callable[[str], "Node"]


class NodeRegistry:
    """Таблица тег → фабрика."""

    def __init__(self):
        self._types: Dict[str, NodeCtor] = {}
        self._frozen = False

    def register_type(self, tag: str, ctor: NodeCtor) -> None:
        if self._frozen:
            raise RegistryFrozen(f"Cannot register '{tag}': registry is initialised")
        if tag in self._types:
            logger.warning(f"[Registry] Type '{tag}' re-registered, previous constructor replaced")
        self._types[tag] = ctor

    def is_registered(self, tag: str) -> bool:
        return tag in self._types

    def types(self) -> List[str]:
        return list(self._types)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def create(self, tag: str, name: str, value=UNSET):
        ctor = self._types.get(tag)
        if ctor is None:
            raise UnknownType(f"Unknown node type '{tag}'")
        node = ctor(name)
        if value is not UNSET:
            node.set_value(value)
        return node


# ----------------------------------------------------------------------
# Реестр процесса
# ----------------------------------------------------------------------
_registry = NodeRegistry()


def get_registry() -> NodeRegistry:
    return _registry


def register_type(tag: str, ctor: NodeCtor) -> None:
    """Зарегистрировать тип в реестре процесса (до `init_registry`)."""
    _registry.register_type(tag, ctor)


def init_registry(plugins: bool = True) -> NodeRegistry:
    """Встроенные типы → плагины → заморозка. Повторный вызов ничего не делает."""
    if _registry.frozen:
        return _registry
    from studiosg.sg.nodes import register_builtins
    register_builtins(_registry)
    if plugins:
        from studiosg.plugins.plugin_manager import PluginManager
        PluginManager().discover(_registry)
    _registry.freeze()
    logger.info(f"[Registry] {len(_registry.types())} node types registered")
    return _registry


def create_node(tag: str, name: str, value=UNSET):
    """Создать узел по тегу (реестр инициализируется при первом вызове)."""
    if not _registry.frozen:
        init_registry()
    return _registry.create(tag, name, value)

