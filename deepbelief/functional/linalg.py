"""
Linear algebra primitives (functional API)

Every function returns a newly allocated float32 array; inputs are left
untouched. Index arguments are not bounds checked.
"""
import numpy as np
from typing import List

from ..utils.numba_ops import _column_numba, _identity_numba, _scale_numba


def multiply_vector_by_scalar(lam: float, v: np.ndarray) -> np.ndarray:
    """lam * v"""
    v = np.ascontiguousarray(v, dtype=np.float32)
    return _scale_numba(v, lam)


def multiply_matrix_by_scalar(lam: float, M: np.ndarray) -> np.ndarray:
    """lam * M"""
    M = np.ascontiguousarray(M, dtype=np.float32)
    return _scale_numba(M.reshape(-1), lam).reshape(M.shape)


def identity_matrix(n: int) -> np.ndarray:
    """(n, n) identity"""
    return _identity_numba(n)


def column(j: int, M: np.ndarray) -> np.ndarray:
    """Copy of column j of M"""
    return _column_numba(np.asarray(M, dtype=np.float32), j)


def to_columns(M: np.ndarray) -> List[np.ndarray]:
    """
    Split a matrix into its columns.

    Args:
        M: Matrix (h, w)

    Returns:
        List of w vectors of length h
    """
    M = np.asarray(M, dtype=np.float32)
    return [column(j, M) for j in range(M.shape[1])]


def to_list(M: np.ndarray) -> List[List[float]]:
    """Rows of M as nested Python lists"""
    M = np.asarray(M, dtype=np.float32)
    return [[float(M[i, j]) for j in range(M.shape[1])] for i in range(M.shape[0])]
