"""
Per-lane Random Seed Expansion

Every GPU lane runs its own linear congruential generator. The start state
of a lane is derived from a single uint32 seed, so lanes never share or
synchronize generator state:

    state[0] = seed
    state[i] = LCG_A * state[i - 1] + LCG_C  (mod 2^32)

Raw uint32 draws are mapped to floats with a fixed scale factor rather than
recomputing 1 / (2^32 - 1) at runtime. The kernels use the same literal
constants, so host and device agree bit for bit.
"""

import operator
import numpy as np
from typing import Sequence, Union

LCG_A = 1664525
LCG_C = 1013904223

# Number of uint32 words in one lane's start state
LANE_STATE_SIZE = 8

UINT32_MAX = 0xFFFFFFFF

# 1 / (2^32 - 1), rounded once for each target precision
UINT32_TO_FLOAT32 = np.float32(2.3283064E-10)
UINT32_TO_FLOAT64 = np.float64(2.328306437080797e-10)


def _as_seed_array(seeds) -> np.ndarray:
    """Validate seeds as Python ints in [0, UINT32_MAX] before any fixed-width cast"""
    checked = []
    for seed in np.asarray(seeds, dtype=object).reshape(-1).tolist():
        try:
            seed = operator.index(seed)
        except TypeError:
            raise ValueError(f"Seeds must be integers, got {seed!r}") from None
        if seed < 0 or seed > UINT32_MAX:
            raise ValueError(f"Seeds must be in [0, {UINT32_MAX}], got {seed}")
        checked.append(seed)
    return np.array(checked, dtype=np.uint64)


def generate_start_states(seeds: Union[Sequence[int], np.ndarray]) -> np.ndarray:
    """
    Expand one seed per lane into lane start states.

    Args:
        seeds: 1-D sequence of uint32 seeds, one per lane

    Returns:
        Read-only uint32 array of shape (n_lanes, LANE_STATE_SIZE)
    """
    seeds = _as_seed_array(seeds)

    # uint64 holds A * state + C without overflow; reduce mod 2^32 each step
    states = np.empty((seeds.shape[0], LANE_STATE_SIZE), dtype=np.uint64)
    states[:, 0] = seeds
    for i in range(1, LANE_STATE_SIZE):
        states[:, i] = (np.uint64(LCG_A) * states[:, i - 1] + np.uint64(LCG_C)) & np.uint64(UINT32_MAX)

    states = states.astype(np.uint32)
    states.flags.writeable = False
    return states


def generate_start_state(seed: int) -> np.ndarray:
    """
    Start state of a single lane.

    Args:
        seed: uint32 seed (0 is valid)

    Returns:
        Read-only uint32 array of LANE_STATE_SIZE words, state[0] == seed
    """
    state = generate_start_states([seed])[0]
    state.flags.writeable = False
    return state


def to_float32(x):
    """
    Map uint32 draws to single precision floats on [0, 1].

    Computed as float32(x) * 2.3283064E-10f. The largest inputs round up
    to exactly 1.0 in single precision.
    """
    if np.isscalar(x):
        return np.float32(x) * UINT32_TO_FLOAT32
    return np.asarray(x).astype(np.float32) * UINT32_TO_FLOAT32


def to_float64(x):
    """Map uint32 draws to double precision floats on [0, 1]."""
    if np.isscalar(x):
        return np.float64(x) * UINT32_TO_FLOAT64
    return np.asarray(x).astype(np.float64) * UINT32_TO_FLOAT64
