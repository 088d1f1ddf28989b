# studiosg/math/mat4.py
import numpy as np


class Mat4:
    """Аффинная матрица 4×4 (float32, column‑vector соглашение)."""
    __slots__ = ("m",)

    def __init__(self, array: np.ndarray = None):
        if array is None:
            self.m = np.identity(4, dtype=np.float32)
        else:
            self.m = np.array(array, dtype=np.float32).reshape((4, 4))

    @staticmethod
    def identity():
        return Mat4(np.identity(4, dtype=np.float32))

    @staticmethod
    def translate(x: float, y: float, z: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 3] = x
        m[1, 3] = y
        m[2, 3] = z
        return Mat4(m)

    @staticmethod
    def scale(sx: float, sy: float, sz: float):
        m = np.identity(4, dtype=np.float32)
        m[0, 0] = sx
        m[1, 1] = sy
        m[2, 2] = sz
        return Mat4(m)

    @staticmethod
    def from_quat(q) -> "Mat4":
        """Матрица вращения из кватерниона (x, y, z, w)."""
        return Mat4(q.to_mat4())

    @staticmethod
    def from_trs(translation, rotation, scale) -> "Mat4":
        """model = T * R * S."""
        T = Mat4.translate(*translation)
        R = Mat4.from_quat(rotation)
        S = Mat4.scale(*scale)
        return T @ R @ S

    def __matmul__(self, other: "Mat4") -> "Mat4":
        return Mat4(np.dot(self.m, other.m))

    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def __repr__(self):
        return f"Mat4({self.m})"

    def transform_point(self, p) -> np.ndarray:
        """Применить матрицу к точке (w = 1)."""
        ph = np.append(np.asarray(p, dtype=np.float32), 1.0).astype(np.float32)
        return (self.m @ ph)[:3]

    def transform_points(self, pts: np.ndarray) -> np.ndarray:
        """То же для массива точек N×3."""
        pts = np.asarray(pts, dtype=np.float32).reshape((-1, 3))
        ph = np.hstack([pts, np.ones((pts.shape[0], 1), dtype=np.float32)])
        return (ph @ self.m.T)[:, :3]

    def to_np(self) -> np.ndarray:
        return self.m.copy()
