"""Row-major 4x4 float matrix acting on column vectors."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .vector import Vec3, Vec4


class Mat4:
    """A 4x4 matrix; ``m[row, col]`` indexes elements."""

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self._data = [1.0 if r == c else 0.0 for r in range(4) for c in range(4)]
        else:
            data = [float(v) for v in values]
            if len(data) != 16:
                raise ValueError("Mat4 needs exactly 16 values")
            self._data = data

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Mat4:
        return cls(v for row in rows for v in row)

    def rows(self) -> list[list[float]]:
        return [self._data[r * 4:r * 4 + 4] for r in range(4)]

    def __getitem__(self, key: tuple[int, int]) -> float:
        r, c = key
        return self._data[r * 4 + c]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        r, c = key
        self._data[r * 4 + c] = float(value)

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Mat4) and self._data == other._data

    def is_close(self, other: Mat4, tol: float = 1e-6) -> bool:
        return all(math.isclose(a, b, abs_tol=tol) for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"Mat4({self.rows()!r})"

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            a, b = self.rows(), other.rows()
            return Mat4(
                sum(a[r][k] * b[k][c] for k in range(4))
                for r in range(4)
                for c in range(4)
            )
        if isinstance(other, Vec4):
            return Vec4(*(sum(row[k] * other[k] for k in range(4)) for row in self.rows()))
        if isinstance(other, Vec3):
            return self.transform_point(other)
        return NotImplemented

    __mul__ = __matmul__

    def transform_point(self, point: Vec3) -> Vec3:
        """Transform a point (w = 1), dividing by w when it is not 1 or 0."""
        v = self @ Vec4.from_vec3(point, 1.0)
        if v.w not in (0.0, 1.0):
            return v.xyz() / v.w
        return v.xyz()

    def transform_direction(self, direction: Vec3) -> Vec3:
        """Transform a direction (w = 0): translation is ignored."""
        return (self @ Vec4.from_vec3(direction, 0.0)).xyz()

    @classmethod
    def identity(cls) -> Mat4:
        return cls()

    @classmethod
    def translation(cls, vec: Vec3) -> Mat4:
        m = cls()
        m[0, 3], m[1, 3], m[2, 3] = vec.x, vec.y, vec.z
        return m

    @classmethod
    def scaling(cls, vec: Vec3) -> Mat4:
        m = cls()
        m[0, 0], m[1, 1], m[2, 2] = vec.x, vec.y, vec.z
        return m

    @classmethod
    def rotation_x(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls.from_rows([[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1]])

    @classmethod
    def rotation_y(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls.from_rows([[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]])

    @classmethod
    def rotation_z(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls.from_rows([[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])

    @classmethod
    def look_at(cls, eye: Vec3, target: Vec3, up: Vec3) -> Mat4:
        """Right-handed view matrix looking from ``eye`` towards ``target``."""
        f = (target - eye).normalized()
        s = f.cross(up).normalized()
        u = s.cross(f)
        return cls.from_rows([
            [s.x, s.y, s.z, -s.dot(eye)],
            [u.x, u.y, u.z, -u.dot(eye)],
            [-f.x, -f.y, -f.z, f.dot(eye)],
            [0, 0, 0, 1],
        ])

    @classmethod
    def perspective(cls, fov: float, aspect: float, near: float, far: float) -> Mat4:
        """Perspective projection; ``fov`` is the vertical field of view in degrees."""
        if aspect == 0.0 or near == far:
            raise ValueError("degenerate perspective parameters")
        f = 1.0 / math.tan(math.radians(fov) / 2.0)
        return cls.from_rows([
            [f / aspect, 0, 0, 0],
            [0, f, 0, 0],
            [0, 0, (far + near) / (near - far), 2 * far * near / (near - far)],
            [0, 0, -1, 0],
        ])

    @classmethod
    def orthographic(cls, left: float, right: float, bottom: float, top: float,
                     near: float, far: float) -> Mat4:
        if left == right or bottom == top or near == far:
            raise ValueError("degenerate orthographic parameters")
        return cls.from_rows([
            [2 / (right - left), 0, 0, -(right + left) / (right - left)],
            [0, 2 / (top - bottom), 0, -(top + bottom) / (top - bottom)],
            [0, 0, -2 / (far - near), -(far + near) / (far - near)],
            [0, 0, 0, 1],
        ])

    def transposed(self) -> Mat4:
        return Mat4(self[r, c] for c in range(4) for r in range(4))

    def _eliminate(self):
        """Gauss-Jordan on [self | I]; returns (determinant, inverse rows or None)."""
        a = [row + [1.0 if i == j else 0.0 for j in range(4)]
             for i, row in enumerate(self.rows())]
        det = 1.0
        for col in range(4):
            pivot = max(range(col, 4), key=lambda r: abs(a[r][col]))
            if abs(a[pivot][col]) < 1e-12:
                return 0.0, None
            if pivot != col:
                a[col], a[pivot] = a[pivot], a[col]
                det = -det
            p = a[col][col]
            det *= p
            a[col] = [v / p for v in a[col]]
            for r in range(4):
                if r != col and a[r][col] != 0.0:
                    factor = a[r][col]
                    a[r] = [v - factor * w for v, w in zip(a[r], a[col])]
        return det, [row[4:] for row in a]

    def determinant(self) -> float:
        return self._eliminate()[0]

    def inverted(self) -> Mat4:
        """Return the inverse; raises ValueError for a singular matrix."""
        _, inv = self._eliminate()
        if inv is None:
            raise ValueError("matrix is singular")
        return Mat4.from_rows(inv)