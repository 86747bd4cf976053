"""Row-major 4x4 matrices and the transforms built from them."""

from __future__ import annotations

import math
from itertools import permutations
from typing import Iterable, Iterator, Sequence, Tuple, Union, overload

from zenengine.vectors import (
    OrthoProjInfo,
    PersProjInfo,
    Quaternion,
    Vector3,
    Vector4,
    to_radian,
)

Row = Tuple[float, float, float, float]

_SIZE = 4


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


def _permutation_sign(perm: Sequence[int]) -> int:
    sign = 1
    seen = list(perm)
    for i, value in enumerate(seen):
        for later in seen[i + 1:]:
            if later < value:
                sign = -sign
    return sign


_PERMUTATIONS = tuple(
    (perm, _permutation_sign(perm)) for perm in permutations(range(_SIZE))
)


def _minor(rows: Sequence[Sequence[float]], skip_row: int, skip_col: int) -> list:
    return [
        [value for c, value in enumerate(row) if c != skip_col]
        for r, row in enumerate(rows)
        if r != skip_row
    ]


def _det3(m: Sequence[Sequence[float]]) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


class Matrix4:
    """An immutable 4x4 matrix stored as four rows."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        built = tuple(tuple(float(value) for value in row) for row in rows)
        if len(built) != _SIZE or any(len(row) != _SIZE for row in built):
            raise ValueError("a Matrix4 needs four rows of four values")
        self._rows: Tuple[Row, ...] = built

    @overload
    def __getitem__(self, index: int) -> Row: ...

    @overload
    def __getitem__(self, index: Tuple[int, int]) -> float: ...

    def __getitem__(self, index: Union[int, Tuple[int, int]]):
        """Return a row by number, or an element by ``(row, column)``."""
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return self._rows[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Matrix4({[list(row) for row in self._rows]!r})"

    def __mul__(self, other: object):
        """Multiply by another matrix, or transform a ``Vector4``."""
        if isinstance(other, Matrix4):
            columns = list(zip(*other._rows))
            return Matrix4(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._rows
            )
        if isinstance(other, Vector4):
            vec = tuple(other)
            return Vector4(*(sum(a * b for a, b in zip(row, vec)) for row in self._rows))
        return NotImplemented

    @classmethod
    def identity(cls) -> Matrix4:
        """Return the identity matrix."""
        return cls(
            [1.0 if r == c else 0.0 for c in range(_SIZE)] for r in range(_SIZE)
        )

    @classmethod
    def zero(cls) -> Matrix4:
        """Return the matrix with every element zero."""
        return cls([0.0] * _SIZE for _ in range(_SIZE))

    @classmethod
    def scale_transform(cls, x: float, y: float, z: float) -> Matrix4:
        """Return a matrix scaling each axis by the given factor."""
        return cls(
            [
                [x, 0.0, 0.0, 0.0],
                [0.0, y, 0.0, 0.0],
                [0.0, 0.0, z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotate_transform(cls, x: float, y: float, z: float) -> Matrix4:
        """Return the rotation ``Rz * Ry * Rx`` for angles in degrees."""
        ax, ay, az = to_radian(x), to_radian(y), to_radian(z)
        rx = cls(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, math.cos(ax), -math.sin(ax), 0.0],
                [0.0, math.sin(ax), math.cos(ax), 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        ry = cls(
            [
                [math.cos(ay), 0.0, -math.sin(ay), 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [math.sin(ay), 0.0, math.cos(ay), 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        rz = cls(
            [
                [math.cos(az), -math.sin(az), 0.0, 0.0],
                [math.sin(az), math.cos(az), 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return rz * ry * rx

    @classmethod
    def quaternion_transform(cls, quat: Quaternion) -> Matrix4:
        """Return the rotation matrix described by a quaternion."""
        x, y, z, w = quat
        yy2 = 2.0 * y * y
        xy2 = 2.0 * x * y
        xz2 = 2.0 * x * z
        yz2 = 2.0 * y * z
        zz2 = 2.0 * z * z
        wz2 = 2.0 * w * z
        wy2 = 2.0 * w * y
        wx2 = 2.0 * w * x
        xx2 = 2.0 * x * x
        return cls(
            [
                [-yy2 - zz2 + 1.0, xy2 + wz2, xz2 - wy2, 0.0],
                [xy2 - wz2, -xx2 - zz2 + 1.0, yz2 + wx2, 0.0],
                [xz2 + wy2, yz2 - wx2, -xx2 - yy2 + 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def translation_transform(cls, x: float, y: float, z: float) -> Matrix4:
        """Return a matrix translating by ``(x, y, z)``."""
        return cls(
            [
                [1.0, 0.0, 0.0, x],
                [0.0, 1.0, 0.0, y],
                [0.0, 0.0, 1.0, z],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def camera_transform(cls, target: Vector3, up: Vector3) -> Matrix4:
        """Return the rotation that aligns the camera axes with the world axes."""
        n = target.normalized()
        u = up.cross(n).normalized()
        v = n.cross(u)
        return cls(
            [
                [u.x, u.y, u.z, 0.0],
                [v.x, v.y, v.z, 0.0],
                [n.x, n.y, n.z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def perspective_projection(cls, info: PersProjInfo) -> Matrix4:
        """Return a perspective projection matrix."""
        ar = info.width / info.height
        z_range = info.z_near - info.z_far
        tan_half_fov = math.tan(to_radian(info.fov / 2.0))
        return cls(
            [
                [1.0 / (tan_half_fov * ar), 0.0, 0.0, 0.0],
                [0.0, 1.0 / tan_half_fov, 0.0, 0.0],
                [
                    0.0,
                    0.0,
                    (-info.z_near - info.z_far) / z_range,
                    2.0 * info.z_far * info.z_near / z_range,
                ],
                [0.0, 0.0, 1.0, 0.0],
            ]
        )

    @classmethod
    def orthographic_projection(cls, info: OrthoProjInfo) -> Matrix4:
        """Return an orthographic projection matrix."""
        l, r = info.left, info.right
        b, t = info.bottom, info.top
        n, f = info.near, info.far
        return cls(
            [
                [2.0 / (r - l), 0.0, 0.0, -(r + l) / (r - l)],
                [0.0, 2.0 / (t - b), 0.0, -(t + b) / (t - b)],
                [0.0, 0.0, 2.0 / (f - n), -(f + n) / (f - n)],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def transpose(self) -> Matrix4:
        """Return the transposed matrix."""
        return Matrix4(zip(*self._rows))

    def determinant(self) -> float:
        """Return the determinant."""
        rows = self._rows
        total = 0.0
        for perm, sign in _PERMUTATIONS:
            product = float(sign)
            for r, c in enumerate(perm):
                product *= rows[r][c]
            total += product
        return total

    def inverse(self) -> Matrix4:
        """Return the inverse matrix.

        Raises SingularMatrixError when the determinant is zero.
        """
        det = self.determinant()
        if det == 0.0:
            raise SingularMatrixError("matrix is not invertible")
        inv_det = 1.0 / det
        rows = self._rows
        return Matrix4(
            [
                inv_det * (-1) ** (r + c) * _det3(_minor(rows, c, r))
                for c in range(_SIZE)
            ]
            for r in range(_SIZE)
        )

    def flatten(self) -> Tuple[float, ...]:
        """Return the sixteen elements in row-major order."""
        return tuple(value for row in self._rows for value in row)

    def format(self) -> str:
        """Return the matrix as four lines of six-decimal numbers."""
        return "".join(
            " ".join(f"{value:f}" for value in row) + "\n" for row in self._rows
        )