"""
DeepBelief - numeric substrate for training RBM / DBN models on a GPU
compute backend.

- backend: per-lane LCG seed expansion, uint32 -> float conversion,
  tile-alignment padding / cropping / reshaping
- functional: differentiable activation units (sigmoid), linear algebra
  primitives, numerical helpers
- utils: key-sort shuffling, mini-batching, resource release
"""

from deepbelief.backend import (
    LCG_A,
    LCG_C,
    generate_start_state,
    generate_start_states,
    to_float32,
    to_float64,
    TileAligner,
    next_multiple_of,
    pad_to_multiples_of,
    pad_to_multiple_of,
    top_left_submatrix,
    subvector,
    flatten_matrix,
    flatten_samples,
    rebuild_matrix,
    transpose,
)
from deepbelief.functional import (
    Domain,
    Range,
    Gradient,
    DifferentiableFunction,
    sigmoid_activation,
    logit,
)
from deepbelief.utils import (
    permute,
    permute_rows,
    batches_of,
    release_all,
    ResourceScope,
)

# Import submodules for easy access
import deepbelief.backend as backend
import deepbelief.functional as functional
import deepbelief.utils as utils

__all__ = [
    'LCG_A',
    'LCG_C',
    'generate_start_state',
    'generate_start_states',
    'to_float32',
    'to_float64',
    'TileAligner',
    'next_multiple_of',
    'pad_to_multiples_of',
    'pad_to_multiple_of',
    'top_left_submatrix',
    'subvector',
    'flatten_matrix',
    'flatten_samples',
    'rebuild_matrix',
    'transpose',
    'Domain',
    'Range',
    'Gradient',
    'DifferentiableFunction',
    'sigmoid_activation',
    'logit',
    'permute',
    'permute_rows',
    'batches_of',
    'release_all',
    'ResourceScope',
    # Submodules
    'backend',
    'functional',
    'utils',
]

__version__ = '0.1.0'
