#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Projection operations
"""

from .vectors import _Vector


def _check_direction(v: _Vector, a: _Vector) -> float:
    if not isinstance(v, _Vector) or not isinstance(a, _Vector):
        raise TypeError("Projection expects two vectors")
    aa = a.magnitude_squared()
    if aa == 0:
        raise ValueError("Cannot project onto a zero-length direction")
    return aa


def project(v: _Vector, a: _Vector) -> _Vector:
    """
    Find p = (v . a / a . a) a, the part of v parallel to a.
    The direction a does not need to be unit length.
    """
    aa = _check_direction(v, a)
    return (v.dot(a) / aa) * a


def reject(v: _Vector, a: _Vector) -> _Vector:
    """
    The part of v orthogonal to a, v - project(v, a).
    """
    _check_direction(v, a)
    return v - project(v, a)
