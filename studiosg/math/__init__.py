"""
Математический суб‑пакет: векторы, Mat4, Quat, Box3f.
"""

from studiosg.math.vec import Vec2f, Vec3f, Vec4f, Vec2i, Vec3i, vec_of
from studiosg.math.mat4 import Mat4
from studiosg.math.quat import Quat
from studiosg.math.box import Box3f

__all__ = ["Vec2f", "Vec3f", "Vec4f", "Vec2i", "Vec3i", "vec_of", "Mat4", "Quat", "Box3f"]
