# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from gamemath.projections import project, reject
from gamemath.vectors import Vector2D, Vector3D, Vector4D

TEST_ITERATIONS = 50


def test_projections():
    v = Vector2D(1, 0)
    a = Vector2D(1, 1)
    assert project(v, a) == Vector2D(0.5, 0.5)
    assert reject(v, a) == Vector2D(0.5, -0.5)

    # Projection onto a basis axis just picks out that coordinate
    assert project(Vector3D(3, -4, 5), Vector3D(0, 2, 0)) == Vector3D(0, -4, 0)
    assert reject(Vector3D(3, -4, 5), Vector3D(0, 2, 0)) == Vector3D(3, 0, 5)


def test_projection_decomposition():
    rng = np.random.default_rng(0)
    for cls in (Vector2D, Vector3D, Vector4D):
        for _ in range(TEST_ITERATIONS):
            v = cls(*rng.standard_normal(cls.dim))
            a = cls(*rng.standard_normal(cls.dim))
            p = project(v, a)
            r = reject(v, a)
            np.testing.assert_allclose((p + r).to_array(), v.to_array(), atol=1e-12)
            # rejection is orthogonal to the axis
            assert math.isclose(r.dot(a), 0.0, abs_tol=1e-12)
            # projecting twice changes nothing
            np.testing.assert_allclose(
                project(p, a).to_array(), p.to_array(), atol=1e-12
            )


def test_zero_direction():
    with pytest.raises(ValueError):
        project(Vector2D(1, 2), Vector2D(0, 0))
    with pytest.raises(ValueError):
        reject(Vector3D(1, 2, 3), Vector3D(0, 0, 0))


def test_mismatched_types():
    with pytest.raises(TypeError):
        project(Vector2D(1, 2), Vector3D(1, 2, 3))
    with pytest.raises(TypeError):
        project((1, 2), Vector2D(1, 2))
