# -*- coding: utf-8 -*-
"""
Ячейка значения узла (type‑erased value) – атомарная единица
детектора изменений.

Набор видов значений закрыт (ValueKind): всё, что граф умеет передавать
в бекенд, – это bool/int/float, векторы 2/3/4, строка, handle бекенда
или «нет значения».
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from studiosg.errors import TypeMismatch
from studiosg.graphics.backend import BackendHandle
from studiosg.math.vec import Vec2f, Vec3f, Vec4f, Vec2i, Vec3i


class ValueKind(Enum):
    NONE = "none"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    VEC2F = "vec2f"
    VEC3F = "vec3f"
    VEC4F = "vec4f"
    VEC2I = "vec2i"
    VEC3I = "vec3i"
    STRING = "string"
    HANDLE = "handle"

    # -----------------------------------------------------------------
    @staticmethod
    def of(value) -> "ValueKind":
        """Вид python‑значения (bool проверяется раньше int)."""
        if value is None:
            return ValueKind.NONE
        if isinstance(value, (bool, np.bool_)):
            return ValueKind.BOOL
        if isinstance(value, (int, np.integer)):
            return ValueKind.INT
        if isinstance(value, (float, np.floating)):
            return ValueKind.FLOAT
        if isinstance(value, str):
            return ValueKind.STRING
        if isinstance(value, BackendHandle):
            return ValueKind.HANDLE
        for kind, cls in _VECTOR_TYPES.items():
            if type(value) is cls:
                return kind
        if isinstance(value, (tuple, list, np.ndarray)):
            kind = _sequence_kind(value)
            if kind is not None:
                return kind
        raise TypeMismatch(f"Unsupported value type: {type(value).__name__}")

    @staticmethod
    def from_type(t) -> "ValueKind":
        """ValueKind по python‑типу (int, Vec3f, …) или самому ValueKind."""
        if isinstance(t, ValueKind):
            return t
        kind = _PY_TYPES.get(t)
        if kind is None:
            raise TypeMismatch(f"No value kind for type {t!r}")
        return kind

    def coerce(self, value):
        """
        Привести значение к этому виду.
        Бросает TypeError/ValueError, если привести нельзя.
        """
        if self is ValueKind.NONE:
            if value is not None:
                raise TypeError("none cell only holds None")
            return None
        if self is ValueKind.BOOL:
            if not isinstance(value, (bool, np.bool_)):
                raise TypeError("not a bool")
            return bool(value)
        if self is ValueKind.INT:
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
                raise TypeError("not an int")
            return int(value)
        if self is ValueKind.FLOAT:
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
                raise TypeError("not a float")
            return float(value)
        if self is ValueKind.STRING:
            if not isinstance(value, str):
                raise TypeError("not a string")
            return value
        if self is ValueKind.HANDLE:
            if not isinstance(value, BackendHandle):
                raise TypeError("not a backend handle")
            return value
        cls = _VECTOR_TYPES[self]
        if type(value) is cls:
            return value
        if isinstance(value, (str, bytes)) or not hasattr(value, "__len__"):
            raise TypeError(f"not a {self.value}")
        if len(value) != cls.size:
            raise ValueError(f"{self.value} needs {cls.size} components")
        if cls.dtype == np.int32 and np.asarray(list(value)).dtype.kind == "f":
            raise TypeError(f"{self.value} needs integer components")
        return cls(*value)


_VECTOR_TYPES = {
    ValueKind.VEC2F: Vec2f,
    ValueKind.VEC3F: Vec3f,
    ValueKind.VEC4F: Vec4f,
    ValueKind.VEC2I: Vec2i,
    ValueKind.VEC3I: Vec3i,
}


def _sequence_kind(value):
    """Вид вектора для tuple/list/ndarray чисел (int → VecNi, иначе VecNf)."""
    arr = np.asarray(value)
    if arr.ndim != 1 or arr.dtype.kind not in "iuf":
        return None
    if arr.dtype.kind in "iu" and arr.size in (2, 3):
        return {2: ValueKind.VEC2I, 3: ValueKind.VEC3I}[arr.size]
    return {2: ValueKind.VEC2F, 3: ValueKind.VEC3F, 4: ValueKind.VEC4F}.get(arr.size)


_PY_TYPES = {
    type(None): ValueKind.NONE,
    bool: ValueKind.BOOL,
    int: ValueKind.INT,
    float: ValueKind.FLOAT,
    str: ValueKind.STRING,
    BackendHandle: ValueKind.HANDLE,
    Vec2f: ValueKind.VEC2F,
    Vec3f: ValueKind.VEC3F,
    Vec4f: ValueKind.VEC4F,
    Vec2i: ValueKind.VEC2I,
    Vec3i: ValueKind.VEC3I,
}


class ValueCell:
    """
    Ячейка со значением одного вида.

    `declared` – вид, заданный при создании узла; `kind` – вид того,
    что лежит в ячейке сейчас. Запись принимается всегда: если значение
    приводится к объявленному виду – хранится приведённым, иначе хранится
    как есть, и типизированное чтение объявленного вида даст TypeMismatch.
    """

    __slots__ = ("declared", "kind", "_value")

    def __init__(self, declared: ValueKind = ValueKind.NONE, value=None):
        self.declared = declared
        self.kind = ValueKind.NONE
        self._value = None
        if value is not None:
            self.set(value)

    def _convert(self, value):
        try:
            return self.declared.coerce(value), self.declared
        except (TypeError, ValueError):
            kind = ValueKind.of(value)
            return kind.coerce(value), kind

    def set(self, value) -> bool:
        """Записать значение; вернуть True, если оно изменилось."""
        value, kind = self._convert(value)
        if self._equals(kind, value):
            return False
        self.kind = kind
        self._value = value
        return True

    def _equals(self, kind: ValueKind, value) -> bool:
        if kind is not self.kind:
            return False
        if kind is ValueKind.HANDLE:
            return value is self._value
        return value == self._value

    def get(self, t=None):
        """Значение как вид `t` (по умолчанию – объявленный вид)."""
        kind = self.declared if t is None else ValueKind.from_type(t)
        if kind is not self.kind:
            raise TypeMismatch(f"Value is '{self.kind.value}', not '{kind.value}'")
        return self._value

    def is_type(self, t) -> bool:
        try:
            return ValueKind.from_type(t) is self.kind
        except TypeMismatch:
            return False

    @property
    def value(self):
        """Сырое значение без проверки вида."""
        return self._value

    def __repr__(self):
        return f"ValueCell({self.kind.value}: {self._value!r})"


class _Unset:
    """Маркер «значение не передано» (None – тоже допустимое значение)."""

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET = _Unset()
