# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from gamemath.utils import check_index, rand_int_f

TEST_ITERATIONS = 200


def test_rand_int_f_range():
    rng = np.random.default_rng(0)
    seen = set()
    for _ in range(TEST_ITERATIONS):
        x = rand_int_f(-2, 2, rng)
        assert isinstance(x, float)
        assert x.is_integer()
        assert -2 <= x <= 2
        seen.add(x)
    # both ends are inclusive
    assert seen == {-2.0, -1.0, 0.0, 1.0, 2.0}


def test_rand_int_f_degenerate_range():
    assert rand_int_f(3, 3) == 3.0
    with pytest.raises(ValueError):
        rand_int_f(1, 0)


def test_check_index():
    assert check_index(0, 2) == 0
    assert check_index(np.int64(3), 4) == 3
    with pytest.raises(IndexError):
        check_index(2, 2)
    with pytest.raises(IndexError):
        check_index(-1, 2)
    with pytest.raises(TypeError):
        check_index(1.0, 2)
