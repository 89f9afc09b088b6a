# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional

import numpy as np

EPS: float = 1e-12
DTYPE = np.float64


def check_index(i: int, n: int) -> int:
    """Return i unchanged if 0 <= i < n, otherwise raise IndexError."""
    if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
        raise TypeError(f"Index must be an integer, got: {type(i)}")
    if not 0 <= i < n:
        raise IndexError(f"Index {i} out of range for dimension {n}")
    return int(i)


def rand_int_f(
    low: int = -10, high: int = 10, rng: Optional[np.random.Generator] = None
) -> float:
    """
    Draw a uniformly random integer from [low, high] (both inclusive)
    and return it as a float.
    """
    if low > high:
        raise ValueError(f"Empty range: low={low} > high={high}")
    if rng is None:
        rng = np.random.default_rng()
    return float(rng.integers(low, high, endpoint=True))
