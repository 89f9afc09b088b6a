# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Scaling matrices.

- Uniform: ``s * I``, the same as multiplying by the scalar s.
- Non-uniform, axis-aligned: a diagonal matrix with one factor per axis.
- Arbitrary axis: stretch only the part of a vector parallel to an axis a,

      M v = s * Proj(v, a) + Reject(v, a)

  Writing Proj(v, a) = (a a^T / a . a) v and Reject(v, a) = v - Proj(v, a)
  gives

      M = I + (s - 1) * (a a^T) / (a . a)
"""

import logging
import numbers

import numpy as np

from .matrices import MATRIX_TYPES, _Matrix
from .utils import DTYPE
from .vectors import _Vector

logger = logging.getLogger(__name__)


def uniform_scale(s: float, n: int) -> _Matrix:
    """Return s * I of size n (2, 3 or 4)."""
    if n not in MATRIX_TYPES:
        raise ValueError(f"Unsupported dimension {n}, expected one of 2, 3, 4")
    return MATRIX_TYPES[n]._wrap(s * np.eye(n, dtype=DTYPE))


def scale_axes(*factors: float) -> _Matrix:
    """
    Diagonal matrix with one scale factor per axis.

    Parameters
    ----------
    factors : 2, 3 or 4 real numbers
        sx, sy[, sz[, sw]]

    Returns
    -------
    Matrix2D, Matrix3D or Matrix4D with the factors on the diagonal
    """
    n = len(factors)
    if n not in MATRIX_TYPES:
        raise TypeError(f"scale_axes() takes 2, 3 or 4 factors, got {n}")
    if not all(isinstance(f, numbers.Real) for f in factors):
        raise TypeError("Scale factors must be real numbers")
    M = MATRIX_TYPES[n]._wrap(np.diag(np.array(factors, dtype=DTYPE)))
    logger.debug(f"scale_axes{factors} =\n{M}")
    return M


def scale_along(s: float, axis: _Vector) -> _Matrix:
    """
    Scale by s along an arbitrary axis, leaving the orthogonal
    complement of the axis unchanged.

    The axis does not need to be unit length: dividing by a . a
    normalizes it, so a and k * a give the same matrix.
    """
    if not isinstance(s, numbers.Real):
        raise TypeError(f"Scale factor must be a real number, got: {type(s)}")
    if not isinstance(axis, _Vector):
        raise TypeError(f"Axis must be a vector, got: {type(axis)}")
    a = axis.to_array()
    aa = float(a @ a)
    if aa == 0:
        raise ValueError("Cannot scale along a zero-length axis")

    n = axis.dim
    M = MATRIX_TYPES[n]._wrap(np.eye(n, dtype=DTYPE) + (s - 1) * np.outer(a, a) / aa)
    logger.debug(f"scale_along({s}, {axis}) =\n{M}")
    return M


def scale(*args) -> _Matrix:
    """
    Build a scaling matrix.

    scale(sx, sy), scale(sx, sy, sz), scale(sx, sy, sz, sw)
        axis-aligned scaling, see `scale_axes`
    scale(s, axis)
        scaling by s along a vector axis, see `scale_along`
    """
    if len(args) == 2 and isinstance(args[1], _Vector):
        return scale_along(*args)
    return scale_axes(*args)
