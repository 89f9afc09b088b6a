# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Fixed-size vectors (2D, 3D and 4D).

Each vector wraps a float64 NumPy array of length N. Every arithmetic
operation returns a new vector; the only in-place change is item
assignment, ``v[i] = value``.
"""

import math
import numbers

import numpy as np

from .utils import DTYPE, check_index


def _component(i: int, name: str) -> property:
    def fget(self) -> float:
        return float(self._c[i])

    def fset(self, value: float) -> None:
        self._c[i] = value

    return property(fget, fset, doc=f"Component {i} ({name}).")


class _Vector:
    dim: int = 0

    # Keep NumPy scalars on the left of an operator from broadcasting
    # over us; Python falls back to our reflected methods instead.
    __array_ufunc__ = None
    __hash__ = None  # mutable

    def __init__(self, *components: float):
        if len(components) != self.dim:
            raise TypeError(
                f"{type(self).__name__} takes {self.dim} components, "
                f"got {len(components)}"
            )
        for c in components:
            if not isinstance(c, numbers.Real):
                raise TypeError(f"Components must be real numbers, got: {type(c)}")
        self._c = np.array(components, dtype=DTYPE)

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "_Vector":
        v = cls.__new__(cls)
        v._c = np.asarray(arr, dtype=DTYPE)
        return v

    def _other(self, other: object):
        """Components of a same-dimension vector, None for non-vectors."""
        if not isinstance(other, _Vector):
            return None
        if other.dim != self.dim:
            raise TypeError(
                f"Dimension mismatch: {type(self).__name__} "
                f"and {type(other).__name__}"
            )
        return other._c

    def copy(self) -> "_Vector":
        return self._wrap(self._c.copy())

    def to_array(self) -> np.ndarray:
        return self._c.copy()

    def __len__(self) -> int:
        return self.dim

    def __iter__(self):
        return (float(c) for c in self._c)

    def __getitem__(self, i: int) -> float:
        return float(self._c[check_index(i, self.dim)])

    def __setitem__(self, i: int, value: float) -> None:
        self._c[check_index(i, self.dim)] = value

    def __repr__(self) -> str:
        args = ", ".join(repr(c) for c in self)
        return f"{self.__class__.__name__}({args})"

    def __str__(self) -> str:
        return "(" + ", ".join(f"{c:g}" for c in self) + ")"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Vector):
            return NotImplemented
        # exact comparison, no tolerance
        return other.dim == self.dim and bool(np.array_equal(self._c, other._c))

    def magnitude_squared(self) -> float:
        return float(self._c @ self._c)

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalized(self) -> "_Vector":
        """
        Return a unit-length copy pointing in the same direction.
        The zero vector has no direction and raises ValueError.
        """
        m = self.magnitude()
        if m == 0:
            raise ValueError("Cannot normalize a zero-length vector")
        return self._wrap(self._c / m)

    def dot(self, other: "_Vector") -> float:
        c = self._other(other)
        if c is None:
            raise TypeError(f"Invalid type, got: {type(other)}")
        return float(self._c @ c)

    def __neg__(self) -> "_Vector":
        return self._wrap(-self._c)

    def __add__(self, other):
        c = self._other(other)
        if c is None:
            return NotImplemented
        return self._wrap(self._c + c)

    def __sub__(self, other):
        c = self._other(other)
        if c is None:
            return NotImplemented
        return self._wrap(self._c - c)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return self._wrap(self._c * other)
        c = self._other(other)
        if c is None:
            return NotImplemented
        # vector * vector is the Hadamard product
        return self._wrap(self._c * c)

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self._wrap(other * self._c)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return self._wrap(self._c / other)
        return NotImplemented


class Vector2D(_Vector):
    dim = 2

    def __init__(self, x: float, y: float):
        super().__init__(x, y)

    x = _component(0, "x")
    y = _component(1, "y")


class Vector3D(_Vector):
    dim = 3

    def __init__(self, x: float, y: float, z: float):
        super().__init__(x, y, z)

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")


class Vector4D(_Vector):
    dim = 4

    def __init__(self, x: float, y: float, z: float, w: float):
        super().__init__(x, y, z, w)

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")
    w = _component(3, "w")


VECTOR_TYPES = {2: Vector2D, 3: Vector3D, 4: Vector4D}


def dot(u: _Vector, v: _Vector) -> float:
    """
    Implements the scalar (dot) product between two vectors.
    """
    return u.dot(v)


def hadamard(u: _Vector, v: _Vector) -> _Vector:
    """Element-wise product of two vectors of the same dimension."""
    if not isinstance(u, _Vector) or not isinstance(v, _Vector):
        raise TypeError("hadamard() expects two vectors")
    return u * v


def cross(u: Vector3D, v: Vector3D) -> Vector3D:
    """
    Implements classical cross product u x v in R^3
    Defines a vector orthogonal to u and v with magnitude
    equal to the parallelogram area.
    """
    if not isinstance(u, Vector3D) or not isinstance(v, Vector3D):
        raise TypeError("The cross product is only defined for Vector3D")
    return Vector3D(
        x=u.y * v.z - u.z * v.y, y=u.z * v.x - u.x * v.z, z=u.x * v.y - u.y * v.x
    )
