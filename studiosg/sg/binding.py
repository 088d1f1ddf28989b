"""
Привязка значений к бекенду: ровно одна функция на вид значения.

Набор видов закрыт (ValueKind), поэтому диспетчеризация – обычная
таблица, а не открытый механизм специализаций.
"""

from __future__ import annotations

from studiosg.errors import BackendRejected
from studiosg.graphics.backend import BackendHandle, RenderBackend
from studiosg.sg.value import ValueCell, ValueKind


def _push_none(backend, handle, name, value):
    pass


def _push_bool(backend, handle, name, value):
    backend.set_bool(handle, name, value)


def _push_int(backend, handle, name, value):
    backend.set_int(handle, name, value)


def _push_float(backend, handle, name, value):
    backend.set_float(handle, name, value)


def _push_vec2f(backend, handle, name, value):
    backend.set_vec2f(handle, name, value.to_tuple())


def _push_vec3f(backend, handle, name, value):
    backend.set_vec3f(handle, name, value.to_tuple())


def _push_vec4f(backend, handle, name, value):
    backend.set_vec4f(handle, name, value.to_tuple())


def _push_vec2i(backend, handle, name, value):
    backend.set_vec2i(handle, name, value.to_tuple())


def _push_vec3i(backend, handle, name, value):
    backend.set_vec3i(handle, name, value.to_tuple())


def _push_string(backend, handle, name, value):
    backend.set_string(handle, name, value)


def _push_handle(backend, handle, name, value):
    backend.set_object(handle, name, value)


BINDINGS = {
    ValueKind.NONE: _push_none,
    ValueKind.BOOL: _push_bool,
    ValueKind.INT: _push_int,
    ValueKind.FLOAT: _push_float,
    ValueKind.VEC2F: _push_vec2f,
    ValueKind.VEC3F: _push_vec3f,
    ValueKind.VEC4F: _push_vec4f,
    ValueKind.VEC2I: _push_vec2i,
    ValueKind.VEC3I: _push_vec3i,
    ValueKind.STRING: _push_string,
    ValueKind.HANDLE: _push_handle,
}


def push_value(backend: RenderBackend, handle, name: str, kind: ValueKind, value) -> None:
    """Передать одно типизированное значение как параметр `name` объекта `handle`."""
    if not isinstance(handle, BackendHandle):
        raise BackendRejected(f"Cannot set '{name}': {handle!r} is not a backend handle")
    BINDINGS[kind](backend, handle, name, value)


def apply_binding(backend: RenderBackend, handle, name: str, cell: ValueCell) -> None:
    """Передать текущее содержимое ячейки (в её фактическом виде)."""
    push_value(backend, handle, name, cell.kind, cell.value)
