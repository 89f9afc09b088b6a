# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
gamemath
========

Small, educational 2D/3D/4D vector and matrix types for games and
simulations, with a focus on scaling transformations.

Public API
~~~~~~~~~~
- Vectors
    - `Vector2D`, `Vector3D`, `Vector4D`
    - `dot`, `cross`, `hadamard`
- Matrices
    - `Matrix2D`, `Matrix3D`, `Matrix4D`
- Projections
    - `project`, `reject`
- Scaling
    - `scale`, `scale_axes`, `scale_along`, `uniform_scale`

Example
-------
>>> import gamemath as gm
>>> gm.scale(2, -3, 4) * gm.Vector3D(1, 1, 1)
Vector3D(2.0, -3.0, 4.0)
>>> gm.scale(2, gm.Vector2D(1, 1)) * gm.Vector2D(1, 0)
Vector2D(1.5, 0.5)
"""

from importlib.metadata import version as _pkg_version

from .matrices import Matrix2D, Matrix3D, Matrix4D
from .projections import project, reject
from .scaling import scale, scale_along, scale_axes, uniform_scale
from .utils import rand_int_f
from .vectors import Vector2D, Vector3D, Vector4D, cross, dot, hadamard

__all__ = [
    "Vector2D",
    "Vector3D",
    "Vector4D",
    "dot",
    "cross",
    "hadamard",
    "Matrix2D",
    "Matrix3D",
    "Matrix4D",
    "project",
    "reject",
    "scale",
    "scale_axes",
    "scale_along",
    "uniform_scale",
    "rand_int_f",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show gamemath”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
