"""
Host-side helpers for the compute backend.

This module provides:
- Per-lane LCG seed expansion and uint32 -> float conversion
- Tile-alignment padding, cropping and reshaping for dispatch
"""

from .random import (
    LCG_A,
    LCG_C,
    LANE_STATE_SIZE,
    UINT32_TO_FLOAT32,
    UINT32_TO_FLOAT64,
    generate_start_state,
    generate_start_states,
    to_float32,
    to_float64,
)
from .tiling import (
    DEFAULT_TILE_SIZE,
    DEFAULT_LOCAL_SIZE,
    TileAligner,
    next_multiple_of,
    workgroup_count,
    pad_to_multiples_of,
    pad_to_multiple_of,
    top_left_submatrix,
    subvector,
    flatten_matrix,
    flatten_samples,
    rebuild_matrix,
    transpose,
)

__all__ = [
    'LCG_A',
    'LCG_C',
    'LANE_STATE_SIZE',
    'UINT32_TO_FLOAT32',
    'UINT32_TO_FLOAT64',
    'generate_start_state',
    'generate_start_states',
    'to_float32',
    'to_float64',
    'DEFAULT_TILE_SIZE',
    'DEFAULT_LOCAL_SIZE',
    'TileAligner',
    'next_multiple_of',
    'workgroup_count',
    'pad_to_multiples_of',
    'pad_to_multiple_of',
    'top_left_submatrix',
    'subvector',
    'flatten_matrix',
    'flatten_samples',
    'rebuild_matrix',
    'transpose',
]
