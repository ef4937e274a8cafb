"""
Tile Alignment for Compute Dispatch

Compute shaders are launched on fixed-size tiles, so host matrices are
zero-padded up to a tile multiple before upload and the raw result buffers
are cropped back to their logical shape afterwards.

Element correspondence is exact: padding keeps every cell at its
coordinates and fills new cells with 0.0, cropping takes the top-left
block, and rebuild_matrix undoes flatten_matrix for any row stride.
"""

import logging
import numpy as np
from typing import Dict, Sequence, Tuple

from ..utils.numba_ops import (
    _flatten_numba,
    _pad_matrix_numba,
    _pad_vector_numba,
    _rebuild_numba,
    _top_left_numba,
    _transpose_numba,
)

logger = logging.getLogger(__name__)

# 16x16 tiles for 2D dispatch, 256 invocations per 1D workgroup
DEFAULT_TILE_SIZE = 16
DEFAULT_LOCAL_SIZE = 256


def _as_float32(M) -> np.ndarray:
    return np.ascontiguousarray(M, dtype=np.float32)


def next_multiple_of(n: int, i: int) -> int:
    """Smallest multiple of n that is >= i"""
    r = i % n
    if r == 0:
        return i
    return i + n - r


def workgroup_count(total: int, local_size: int = DEFAULT_LOCAL_SIZE) -> int:
    """
    Number of workgroups needed to cover total invocations.

    Same as (total + local_size - 1) // local_size.
    """
    return next_multiple_of(local_size, total) // local_size


def pad_to_multiples_of(n: int, M: np.ndarray) -> np.ndarray:
    """
    Zero-pad a matrix so both dimensions are multiples of n.

    Args:
        n: Tile size
        M: Matrix (h, w)

    Returns:
        New float32 matrix (next_multiple_of(n, h), next_multiple_of(n, w))
        with M in the top-left corner
    """
    M = _as_float32(M)
    h, w = M.shape
    return _pad_matrix_numba(M, next_multiple_of(n, h), next_multiple_of(n, w))


def pad_to_multiple_of(n: int, x: np.ndarray) -> np.ndarray:
    """Zero-pad a vector to a length that is a multiple of n"""
    x = _as_float32(x)
    return _pad_vector_numba(x, next_multiple_of(n, x.shape[0]))


def top_left_submatrix(h: int, w: int, M: np.ndarray) -> np.ndarray:
    """
    Copy of the top-left (h, w) block of M.

    h and w are not checked against the shape of M.
    """
    return _top_left_numba(_as_float32(M), h, w)


def subvector(size: int, x: np.ndarray) -> np.ndarray:
    """Copy of the first size elements of x (not bounds checked)"""
    x = _as_float32(x)
    return x[:size].copy()


def flatten_matrix(M: np.ndarray) -> np.ndarray:
    """Row-major flatten to a vector of length h * w"""
    return _flatten_numba(_as_float32(M))


def flatten_samples(samples: Sequence[np.ndarray]) -> np.ndarray:
    """
    Flatten each sample and concatenate them in order.

    Produces the single contiguous buffer a batch is uploaded as.
    """
    if len(samples) == 0:
        return np.zeros(0, dtype=np.float32)
    return np.concatenate([flatten_matrix(M) for M in samples])


def rebuild_matrix(full_width: int, h: int, w: int, X: np.ndarray) -> np.ndarray:
    """
    Rebuild an (h, w) matrix from a row-major buffer with row stride full_width.

    Cell (i, j) is X[i * full_width + j]. With full_width == w this inverts
    flatten_matrix; with full_width > w it also crops padded columns.
    """
    return _rebuild_numba(_as_float32(X), full_width, h, w)


def transpose(M: np.ndarray) -> np.ndarray:
    """Transposed copy of M"""
    return _transpose_numba(_as_float32(M))


class TileAligner:
    """
    Pads host arrays to the tile size of a compute pipeline and crops the
    results back.

    Example:
        >>> aligner = TileAligner(tile_size=16)
        >>> padded = aligner.pad_matrix(weights)       # (h, w) -> tile multiples
        >>> result = aligner.crop_matrix(h, w, raw)    # back to (h, w)
    """

    def __init__(self, tile_size: int = DEFAULT_TILE_SIZE, local_size: int = DEFAULT_LOCAL_SIZE):
        """
        Args:
            tile_size: Tile edge the dispatch layer requires
            local_size: Invocations per 1D workgroup
        """
        if tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {tile_size}")
        if local_size <= 0:
            raise ValueError(f"local_size must be positive, got {local_size}")
        self.tile_size = tile_size
        self.local_size = local_size
        logger.debug(f"TileAligner(tile_size={tile_size}, local_size={local_size})")

    def padded_shape(self, h: int, w: int) -> Tuple[int, int]:
        return next_multiple_of(self.tile_size, h), next_multiple_of(self.tile_size, w)

    def pad_matrix(self, M: np.ndarray) -> np.ndarray:
        return pad_to_multiples_of(self.tile_size, M)

    def pad_vector(self, x: np.ndarray) -> np.ndarray:
        return pad_to_multiple_of(self.tile_size, x)

    def crop_matrix(self, h: int, w: int, M: np.ndarray) -> np.ndarray:
        return top_left_submatrix(h, w, M)

    def crop_vector(self, size: int, x: np.ndarray) -> np.ndarray:
        return subvector(size, x)

    def get_tiling_info(self, h: int, w: int) -> Dict[str, int]:
        """
        Launch geometry for an (h, w) matrix.

        Returns:
            Dict with padded dimensions and 2D / 1D workgroup counts
        """
        padded_h, padded_w = self.padded_shape(h, w)
        return {
            'tile_size': self.tile_size,
            'padded_height': padded_h,
            'padded_width': padded_w,
            'groups_x': padded_w // self.tile_size,
            'groups_y': padded_h // self.tile_size,
            'workgroups_1d': workgroup_count(padded_h * padded_w, self.local_size),
        }

    def __repr__(self):
        return f"TileAligner(tile_size={self.tile_size}, local_size={self.local_size})"
