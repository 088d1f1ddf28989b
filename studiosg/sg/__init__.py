"""
Ядро графа сцены: значения, узлы, обход, реестр, коммит, instancing.
"""

from studiosg.sg.value import UNSET, ValueCell, ValueKind
from studiosg.sg.node import Node, find
from studiosg.sg.traversal import FunctionVisitor, TraversalContext, Visitor, VisitorProtocol, traverse
from studiosg.sg.binding import apply_binding, push_value
from studiosg.sg.registry import (
    NodeRegistry, create_node, get_registry, init_registry, register_type,
)
from studiosg.sg.visitors import BoundsVisitor, CommitVisitor, NodeCollector, PrintNodes
from studiosg.sg.instancing import instance, make_grid

__all__ = [
    "UNSET", "ValueCell", "ValueKind",
    "Node", "find",
    "FunctionVisitor", "TraversalContext", "Visitor", "VisitorProtocol", "traverse",
    "apply_binding", "push_value",
    "NodeRegistry", "create_node", "get_registry", "init_registry", "register_type",
    "BoundsVisitor", "CommitVisitor", "NodeCollector", "PrintNodes",
    "instance", "make_grid",
]
