"""
Numba-Accelerated CPU Kernels

JIT-compiled element loops behind the tiling, linear algebra and activation
helpers. Each kernel allocates its output; inputs are never written.

Callers are expected to pass contiguous float32 arrays (see the public
wrappers in deepbelief.backend.tiling and deepbelief.functional).
"""

import numpy as np
from numba import jit, prange


# ============================================================================
# Padding / Cropping
# ============================================================================

@jit(nopython=True, parallel=True, cache=True)
def _pad_matrix_numba(M: np.ndarray, padded_height: int, padded_width: int) -> np.ndarray:
    """
    Copy M into the top-left corner of a zero matrix.

    Args:
        M: Source matrix (h, w), float32
        padded_height: Output height (>= h)
        padded_width: Output width (>= w)

    Returns:
        Zero-padded matrix (padded_height, padded_width)
    """
    h, w = M.shape
    output = np.zeros((padded_height, padded_width), dtype=np.float32)
    for i in prange(h):
        for j in range(w):
            output[i, j] = M[i, j]
    return output


@jit(nopython=True, cache=True)
def _pad_vector_numba(x: np.ndarray, padded_size: int) -> np.ndarray:
    output = np.zeros(padded_size, dtype=np.float32)
    for i in range(x.shape[0]):
        output[i] = x[i]
    return output


@jit(nopython=True, parallel=True, cache=True)
def _top_left_numba(M: np.ndarray, h: int, w: int) -> np.ndarray:
    """Copy the top-left (h, w) block of M. Bounds are the caller's job."""
    output = np.empty((h, w), dtype=np.float32)
    for i in prange(h):
        for j in range(w):
            output[i, j] = M[i, j]
    return output


# ============================================================================
# Flatten / Rebuild / Transpose
# ============================================================================

@jit(nopython=True, parallel=True, cache=True)
def _flatten_numba(M: np.ndarray) -> np.ndarray:
    """Row-major linearization: output[i * w + j] = M[i, j]"""
    h, w = M.shape
    output = np.empty(h * w, dtype=np.float32)
    for i in prange(h):
        for j in range(w):
            output[i * w + j] = M[i, j]
    return output


@jit(nopython=True, parallel=True, cache=True)
def _rebuild_numba(X: np.ndarray, full_width: int, h: int, w: int) -> np.ndarray:
    """
    Inverse of flatten for a buffer laid out with row stride full_width.

    output[i, j] = X[i * full_width + j]
    """
    output = np.empty((h, w), dtype=np.float32)
    for i in prange(h):
        for j in range(w):
            output[i, j] = X[i * full_width + j]
    return output


@jit(nopython=True, parallel=True, cache=True)
def _transpose_numba(M: np.ndarray) -> np.ndarray:
    h, w = M.shape
    output = np.empty((w, h), dtype=np.float32)
    for i in prange(w):
        for j in range(h):
            output[i, j] = M[j, i]
    return output


# ============================================================================
# Scaling / Identity / Columns
# ============================================================================

@jit(nopython=True, parallel=True, fastmath=True, cache=True)
def _scale_numba(x: np.ndarray, scale: float) -> np.ndarray:
    """Elementwise scale of a flat float32 array."""
    s = np.float32(scale)
    output = np.empty_like(x)
    for i in prange(x.shape[0]):
        output[i] = s * x[i]
    return output


@jit(nopython=True, cache=True)
def _identity_numba(n: int) -> np.ndarray:
    output = np.zeros((n, n), dtype=np.float32)
    for i in range(n):
        output[i, i] = 1.0
    return output


@jit(nopython=True, cache=True)
def _column_numba(M: np.ndarray, j: int) -> np.ndarray:
    h = M.shape[0]
    output = np.empty(h, dtype=np.float32)
    for i in range(h):
        output[i] = M[i, j]
    return output


# ============================================================================
# Sigmoid
# ============================================================================

@jit(nopython=True, parallel=True, cache=True)
def _sigmoid_numba(x: np.ndarray) -> np.ndarray:
    """
    Logistic function over a flat float32 array.

    1 / (1 + exp(-x)), evaluated in single precision.
    """
    one = np.float32(1.0)
    output = np.empty_like(x)
    for i in prange(x.shape[0]):
        output[i] = one / (one + np.exp(-x[i]))
    return output


@jit(nopython=True, parallel=True, cache=True)
def _sigmoid_derivative_numba(s: np.ndarray) -> np.ndarray:
    """s * (1 - s), where s is already a sigmoid output."""
    one = np.float32(1.0)
    output = np.empty_like(s)
    for i in prange(s.shape[0]):
        output[i] = s[i] * (one - s[i])
    return output
