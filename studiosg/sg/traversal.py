"""
Обход графа в глубину (visitor‑протокол).

Visitor – любой объект с двумя методами:

* `visit(node, ctx) -> bool` – вызывается до детей; False = не спускаться;
* `post_visit(node, ctx)` – вызывается после детей, всегда.

Узел, достижимый по нескольким путям (instancing), посещается один раз
на каждый путь. Движок сам не дедуплицирует: если visitor-у нужен
«ровно один раз на узел», он отслеживает identity сам (см. NodeCollector).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Protocol, runtime_checkable


@dataclass
class TraversalContext:
    """Изменяемый контекст обхода: глубина + произвольное состояние."""
    level: int = 0
    state: Dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class VisitorProtocol(Protocol):
    def visit(self, node, ctx: TraversalContext) -> bool: ...

    def post_visit(self, node, ctx: TraversalContext) -> None: ...


class Visitor:
    """Базовый visitor: спускается везде, post_visit ничего не делает."""

    def visit(self, node, ctx: TraversalContext) -> bool:
        return True

    def post_visit(self, node, ctx: TraversalContext) -> None:
        pass


class FunctionVisitor(Visitor):
    """Обёртка над функцией `fn(node, ctx) -> bool | None` (None = спускаться)."""

    def __init__(self, fn: Callable, post: Callable = None):
        self.fn = fn
        self.post = post

    def visit(self, node, ctx):
        result = self.fn(node, ctx)
        return True if result is None else bool(result)

    def post_visit(self, node, ctx):
        if self.post is not None:
            self.post(node, ctx)


def as_visitor(visitor) -> VisitorProtocol:
    if isinstance(visitor, VisitorProtocol):
        return visitor
    if callable(visitor):
        return FunctionVisitor(visitor)
    raise TypeError(f"{visitor!r} is neither a visitor nor a callable")


def traverse(node, visitor, ctx: TraversalContext = None) -> TraversalContext:
    """
    Pre‑order visit → дети в порядке вставки (level + 1) → post_visit.
    Возвращает использованный контекст.
    """
    visitor = as_visitor(visitor)
    if ctx is None:
        ctx = TraversalContext()
    _walk(node, visitor, ctx)
    return ctx


def _walk(node, visitor, ctx):
    descend = visitor.visit(node, ctx)
    if descend:
        ctx.level += 1
        try:
            # снимок: visitor может менять структуру текущего узла
            for child in list(node.children().values()):
                _walk(child, visitor, ctx)
        finally:
            ctx.level -= 1
    visitor.post_visit(node, ctx)
