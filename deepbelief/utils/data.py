"""
Data Ordering Utilities

Shuffling and mini-batching of training examples. Shuffles are key-sort
permutations: every element gets an independent uniform key drawn from the
caller's random source and elements are ordered by key.

The random source is anything numpy.random.default_rng accepts (a
Generator, an integer seed or None). A Generator shared between threads
must be serialized by the caller.
"""
import numpy as np
from typing import Iterator, List, Optional, Sequence, TypeVar

from ..backend.random import UINT32_MAX, to_float64

T = TypeVar('T')


def _random_keys(rng, n: int) -> np.ndarray:
    rng = np.random.default_rng(rng)
    draws = rng.integers(0, UINT32_MAX, size=n, dtype=np.uint32, endpoint=True)
    return to_float64(draws)


def permutation(rng, arr: Sequence[T]) -> np.ndarray:
    """
    Reorder arr by independent random keys.

    Args:
        rng: Random source
        arr: 1-D sequence

    Returns:
        New array with the elements of arr in shuffled order
    """
    arr = np.asarray(arr)
    keys = _random_keys(rng, arr.shape[0])
    return arr[np.argsort(keys, kind='stable')]


def permute(rng, n: int) -> np.ndarray:
    """Random permutation of 0..n-1 (int64)"""
    return permutation(rng, np.arange(n, dtype=np.int64))


def permute_rows(rng, M: np.ndarray) -> np.ndarray:
    """Copy of M with its rows in random order"""
    M = np.asarray(M, dtype=np.float32)
    return M[permute(rng, M.shape[0])]


def batches_of(n: int, items: Sequence[T]) -> List[List[T]]:
    """
    Split items into consecutive batches of n, keeping order.

    The last batch is shorter when len(items) is not a multiple of n.
    """
    if n <= 0:
        raise ValueError(f"Batch size must be positive, got {n}")
    items = list(items)
    return [items[i:i + n] for i in range(0, len(items), n)]


class BatchSampler:
    """
    Yields batches of dataset indices, reshuffled every epoch.

    Example:
        >>> sampler = BatchSampler(len(samples), batch_size=10, shuffle=True, rng=42)
        >>> for epoch in range(epochs):
        ...     for indices in sampler:
        ...         batch = flatten_samples([samples[i] for i in indices])
    """

    def __init__(self, dataset_size: int, batch_size: int, shuffle: bool = False,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize BatchSampler.

        Args:
            dataset_size: Size of dataset
            batch_size: Batch size
            shuffle: Whether to shuffle
            rng: Random source for shuffling (Generator, seed or None)
        """
        if batch_size <= 0:
            raise ValueError(f"Batch size must be positive, got {batch_size}")
        self.dataset_size = dataset_size
        self.batch_size = batch_size
        self.shuffle = shuffle
        self.rng = np.random.default_rng(rng)

    def __iter__(self) -> Iterator[List[int]]:
        """Iterate over batch indices"""
        if self.shuffle:
            indices = [int(i) for i in permute(self.rng, self.dataset_size)]
        else:
            indices = list(range(self.dataset_size))
        yield from batches_of(self.batch_size, indices)

    def __len__(self) -> int:
        """Number of batches"""
        return (self.dataset_size + self.batch_size - 1) // self.batch_size
