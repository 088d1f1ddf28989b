# studiosg/math/vec.py
"""
Короткие векторы на базе NumPy: Vec2f/Vec3f/Vec4f (float32) и
Vec2i/Vec3i (int32).

В отличие от «игровых» векторов, эти – неизменяемые: значение узла
сравнивается при каждой записи, и изменение вектора «на месте»
обошло бы детектор изменений.
"""

import numpy as np
from typing import Iterable, Tuple


class _Vec:
    """Общая часть всех векторов: хранение, арифметика, сравнение."""

    __slots__ = ("_v",)

    size = 0
    dtype = np.float32

    def __init__(self, *components):
        if len(components) == 1 and self.size > 1:
            components = _expand(components[0], self.size)
        if len(components) != self.size:
            raise ValueError(
                f"{type(self).__name__} expects {self.size} components, got {len(components)}"
            )
        v = np.array(components, dtype=self.dtype)
        v.setflags(write=False)
        self._v = v

    # -----------------------------------------------------------------
    # компоненты (только чтение)
    # -----------------------------------------------------------------
    def _component(self, i):
        return self._v[i].item()

    @property
    def x(self):
        return self._component(0)

    @property
    def y(self):
        return self._component(1)

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other):
        return type(self)(*(self._v + _as_array(other)))

    def __sub__(self, other):
        return type(self)(*(self._v - _as_array(other)))

    def __mul__(self, scalar):
        return type(self)(*(self._v * scalar))

    __rmul__ = __mul__

    def __neg__(self):
        return type(self)(*(-self._v))

    def __getitem__(self, i):
        return self._component(i)

    def __iter__(self):
        return iter(self._v.tolist())

    def __len__(self):
        return self.size

    # -----------------------------------------------------------------
    # сравнение: только с тем же типом вектора
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self):
        return hash((type(self).__name__, self.to_tuple()))

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def dot(self, other) -> float:
        return float(np.dot(self._v, _as_array(other)))

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def as_np(self) -> np.ndarray:
        """Копия массива (dtype вектора)."""
        return np.array(self._v)

    def to_tuple(self) -> Tuple:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"{type(self).__name__}{self.to_tuple()}"


def _expand(value, size):
    """Один аргумент: скаляр (дублируется) или iterable нужной длины."""
    if isinstance(value, (_Vec, np.ndarray, list, tuple)):
        return tuple(np.asarray(_as_array(value)).ravel().tolist())
    return (value,) * size


def _as_array(value) -> np.ndarray:
    if isinstance(value, _Vec):
        return value._v
    return np.asarray(value)


class Vec2f(_Vec):
    __slots__ = ()
    size = 2
    dtype = np.float32


class Vec3f(_Vec):
    __slots__ = ()
    size = 3
    dtype = np.float32

    @property
    def z(self):
        return self._component(2)

    def cross(self, other) -> "Vec3f":
        return Vec3f(*np.cross(self._v, _as_array(other)))

    def normalized(self) -> "Vec3f":
        n = self.length()
        if n == 0.0:
            return Vec3f(0.0)
        return Vec3f(*(self._v / n))


class Vec4f(_Vec):
    __slots__ = ()
    size = 4
    dtype = np.float32

    @property
    def z(self):
        return self._component(2)

    @property
    def w(self):
        return self._component(3)


class Vec2i(_Vec):
    __slots__ = ()
    size = 2
    dtype = np.int32


class Vec3i(_Vec):
    __slots__ = ()
    size = 3
    dtype = np.int32

    @property
    def z(self):
        return self._component(2)

    def product(self) -> int:
        """Произведение компонент (число вокселей для размеров сетки)."""
        return int(np.prod(self._v.astype(np.int64)))


def vec_of(values: Iterable, integer: bool = False):
    """Подобрать тип вектора по длине последовательности."""
    values = tuple(values)
    table = {2: Vec2i, 3: Vec3i} if integer else {2: Vec2f, 3: Vec3f, 4: Vec4f}
    cls = table.get(len(values))
    if cls is None:
        raise ValueError(f"No vector type with {len(values)} components")
    return cls(*values)
