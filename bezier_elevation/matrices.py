"""
Degree elevation matrices.

Elevating a degree-n control polygon P ((n+1) x 2) is the matrix product
E @ P with E of shape (n+2, n+1). Matrices are cached per degree; the
editor only ever needs degrees 1..15 plus the elevation levels on top.
"""

import logging
from functools import lru_cache
from typing import Dict, Tuple

import numpy as np

logger = logging.getLogger(__name__)

# (kind, from_degree, to_degree) -> read-only matrix
_MATRIX_CACHE: Dict[Tuple[str, int, int], np.ndarray] = {}


@lru_cache(maxsize=256)
def _compute_binomial_coefficient(n: int, k: int) -> float:
    """Binomial coefficient C(n, k) as float, 0 outside 0 <= k <= n."""
    if k > n or k < 0:
        return 0.0
    if k == 0 or k == n:
        return 1.0

    result = 1.0
    for i in range(min(k, n - k)):
        result = result * (n - i) / (i + 1)
    return result


def _store(key, matrix):
    matrix.setflags(write=False)
    _MATRIX_CACHE[key] = matrix
    return matrix


def get_E_matrix(N: int) -> np.ndarray:
    """
    Single-step elevation matrix from degree N to N+1.

    Q_0 = P_0, Q_{N+1} = P_N and for 1 <= i <= N
    Q_i = alpha * P_{i-1} + (1 - alpha) * P_i with alpha = i / (N+1).

    Args:
        N: Original degree

    Returns:
        E: (N+2, N+1) read-only matrix
    """
    key = ("step", N, N + 1)
    if key in _MATRIX_CACHE:
        return _MATRIX_CACHE[key]

    E = np.zeros((N + 2, N + 1))
    E[0, 0] = 1.0
    E[N + 1, N] = 1.0
    for i in range(1, N + 1):
        alpha = i / (N + 1)
        E[i, i - 1] = alpha
        E[i, i] = 1.0 - alpha

    return _store(key, E)


def get_elevation_matrix(from_degree: int, to_degree: int) -> np.ndarray:
    """
    Direct elevation matrix from `from_degree` to `to_degree`.

    [E]_{i,j} = C(n, j) * C(m-n, i-j) / C(m, i) for j <= i <= j + (m-n).

    Args:
        from_degree: Original degree n
        to_degree: Target degree m >= n

    Returns:
        (m+1, n+1) read-only matrix
    """
    if to_degree < from_degree:
        raise ValueError(f"target degree {to_degree} is below source degree {from_degree}")

    key = ("direct", from_degree, to_degree)
    if key in _MATRIX_CACHE:
        return _MATRIX_CACHE[key]

    n = from_degree
    m = to_degree
    E = np.zeros((m + 1, n + 1))
    for i in range(m + 1):
        for j in range(n + 1):
            if j <= i <= j + (m - n):
                numerator = _compute_binomial_coefficient(n, j) * _compute_binomial_coefficient(m - n, i - j)
                E[i, j] = numerator / _compute_binomial_coefficient(m, i)

    return _store(key, E)


def clear_matrix_cache():
    _MATRIX_CACHE.clear()


def get_cache_info() -> dict:
    return {
        'cached_matrices': len(_MATRIX_CACHE),
        'cache_keys': list(_MATRIX_CACHE.keys())
    }


def precompute_elevation_matrices(max_degree: int):
    """Fill the cache with single-step matrices for degrees 1..max_degree."""
    for degree in range(1, max_degree + 1):
        get_E_matrix(degree)
    logger.debug("Cached %d elevation matrices (max degree %d)", len(_MATRIX_CACHE), max_degree)
