"""
Осе‑ориентированный bounding‑box (AABB) для запросов границ мира.
"""

from __future__ import annotations

import numpy as np

from studiosg.math.vec import Vec3f


class Box3f:
    """AABB: lower/upper как float32‑массивы; пустой box – lower > upper."""

    __slots__ = ("lower", "upper")

    def __init__(self, lower=None, upper=None):
        if lower is None or upper is None:
            self.lower = np.full(3, np.inf, dtype=np.float32)
            self.upper = np.full(3, -np.inf, dtype=np.float32)
        else:
            self.lower = np.array(list(lower), dtype=np.float32)
            self.upper = np.array(list(upper), dtype=np.float32)

    @staticmethod
    def empty() -> "Box3f":
        return Box3f()

    @property
    def is_empty(self) -> bool:
        return bool(np.any(self.lower > self.upper))

    def extend(self, other) -> "Box3f":
        """Расширить box точкой или другим box‑ом (на месте)."""
        if isinstance(other, Box3f):
            if other.is_empty:
                return self
            self.lower = np.minimum(self.lower, other.lower)
            self.upper = np.maximum(self.upper, other.upper)
        else:
            p = np.asarray(list(other), dtype=np.float32)
            self.lower = np.minimum(self.lower, p)
            self.upper = np.maximum(self.upper, p)
        return self

    def corners(self) -> np.ndarray:
        lo, hi = self.lower, self.upper
        return np.array(
            [[x, y, z] for x in (lo[0], hi[0]) for y in (lo[1], hi[1]) for z in (lo[2], hi[2])],
            dtype=np.float32,
        )

    def transformed(self, xfm) -> "Box3f":
        """Box после аффинного преобразования (по 8 углам)."""
        if self.is_empty:
            return Box3f()
        pts = xfm.transform_points(self.corners())
        return Box3f(pts.min(axis=0), pts.max(axis=0))

    @property
    def size(self) -> Vec3f:
        if self.is_empty:
            return Vec3f(0.0)
        return Vec3f(*(self.upper - self.lower))

    @property
    def center(self) -> Vec3f:
        if self.is_empty:
            return Vec3f(0.0)
        return Vec3f(*((self.lower + self.upper) * 0.5))

    def __eq__(self, other):
        if not isinstance(other, Box3f):
            return NotImplemented
        if self.is_empty and other.is_empty:
            return True
        return bool(np.allclose(self.lower, other.lower) and np.allclose(self.upper, other.upper))

    __hash__ = None

    def __repr__(self):
        if self.is_empty:
            return "Box3f(empty)"
        return f"Box3f({self.lower.tolist()}, {self.upper.tolist()})"
