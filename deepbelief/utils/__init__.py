"""
Utilities Module

Helpers for shuffling and batching training data and for releasing
device-side resources.
"""
from .data import (
    permutation,
    permute,
    permute_rows,
    batches_of,
    BatchSampler,
)
from .resources import Disposable, ResourceScope, release_all

__all__ = [
    # Ordering
    'permutation',
    'permute',
    'permute_rows',
    'batches_of',
    'BatchSampler',
    # Resources
    'Disposable',
    'ResourceScope',
    'release_all',
]
