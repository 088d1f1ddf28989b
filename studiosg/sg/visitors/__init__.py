"""
Готовые visitor-ы: коммит, границы, печать дерева, сборщик узлов.
"""

from studiosg.sg.visitors.commit import CommitVisitor
from studiosg.sg.visitors.bounds import BoundsVisitor
from studiosg.sg.visitors.print_nodes import PrintNodes
from studiosg.sg.visitors.collector import NodeCollector

__all__ = ["CommitVisitor", "BoundsVisitor", "PrintNodes", "NodeCollector"]
