# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Square matrices (2x2, 3x3 and 4x4) acting on the vectors of the same size.

Elements are addressed as ``m[row, col]``. A matrix can be built either from
its N*N scalars in row-major order or from its N column vectors:

>>> Matrix2D(1, 2,
...          3, 4) == Matrix2D(Vector2D(1, 3), Vector2D(2, 4))
True
"""

import numbers
from typing import List, Tuple

import numpy as np

from .utils import DTYPE, check_index
from .vectors import Vector2D, Vector3D, Vector4D, _Vector


class _Matrix:
    dim: int = 0
    vector_type = _Vector

    __array_ufunc__ = None
    __hash__ = None  # mutable

    def __init__(self, *args):
        n = self.dim
        if len(args) == n * n and all(isinstance(a, numbers.Real) for a in args):
            self._m = np.array(args, dtype=DTYPE).reshape(n, n)
        elif len(args) == n and all(isinstance(a, self.vector_type) for a in args):
            self._m = np.column_stack([a.to_array() for a in args])
        else:
            raise TypeError(
                f"{type(self).__name__} takes {n * n} scalars (row-major) "
                f"or {n} {self.vector_type.__name__} columns"
            )

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "_Matrix":
        m = cls.__new__(cls)
        m._m = np.asarray(arr, dtype=DTYPE)
        return m

    @classmethod
    def identity(cls) -> "_Matrix":
        return cls._wrap(np.eye(cls.dim, dtype=DTYPE))

    def _index(self, key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix elements are indexed as m[row, col]")
        return check_index(key[0], self.dim), check_index(key[1], self.dim)

    def __getitem__(self, key) -> float:
        return float(self._m[self._index(key)])

    def __setitem__(self, key, value: float) -> None:
        self._m[self._index(key)] = value

    def column(self, j: int) -> _Vector:
        return self.vector_type._wrap(self._m[:, check_index(j, self.dim)].copy())

    def columns(self) -> List[_Vector]:
        return [self.column(j) for j in range(self.dim)]

    def row(self, i: int) -> _Vector:
        return self.vector_type._wrap(self._m[check_index(i, self.dim), :].copy())

    def copy(self) -> "_Matrix":
        return self._wrap(self._m.copy())

    def to_array(self) -> np.ndarray:
        return self._m.copy()

    def __repr__(self) -> str:
        args = ", ".join(repr(float(c)) for c in self._m.ravel())
        return f"{self.__class__.__name__}({args})"

    def __str__(self) -> str:
        cells = [[f"{c:g}" for c in row] for row in self._m]
        w = max(len(c) for row in cells for c in row)
        return "".join(
            "[ " + " ".join(c.rjust(w) for c in row) + " ]\n" for row in cells
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Matrix):
            return NotImplemented
        return other.dim == self.dim and bool(np.array_equal(self._m, other._m))

    def _other(self, other: object):
        if isinstance(other, (_Matrix, _Vector)) and other.dim != self.dim:
            raise TypeError(
                f"Dimension mismatch: {type(self).__name__} "
                f"and {type(other).__name__}"
            )
        return other

    def __neg__(self) -> "_Matrix":
        return self._wrap(-self._m)

    def __add__(self, other):
        if not isinstance(self._other(other), _Matrix):
            return NotImplemented
        return self._wrap(self._m + other._m)

    def __sub__(self, other):
        if not isinstance(self._other(other), _Matrix):
            return NotImplemented
        return self._wrap(self._m - other._m)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return self._wrap(self._m * other)
        other = self._other(other)
        if isinstance(other, _Matrix):
            # result[i, j] = sum_k self[i, k] * other[k, j]
            return self._wrap(self._m @ other._m)
        if isinstance(other, _Vector):
            # result[i] = sum_k self[i, k] * v[k]
            return self.vector_type._wrap(self._m @ other._c)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self._wrap(other * self._m)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return self._wrap(self._m / other)
        return NotImplemented


class Matrix2D(_Matrix):
    dim = 2
    vector_type = Vector2D


class Matrix3D(_Matrix):
    dim = 3
    vector_type = Vector3D


class Matrix4D(_Matrix):
    dim = 4
    vector_type = Vector4D


MATRIX_TYPES = {2: Matrix2D, 3: Matrix3D, 4: Matrix4D}
