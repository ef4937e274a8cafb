"""
DeepBelief Quick Start Tutorial
===============================

One epoch of host-side preparation for an RBM layer: seed the GPU lanes,
shuffle and batch the training set, pad a weight matrix to the tile size
and evaluate the sigmoid unit with its matching gradient.
"""

import numpy as np

from deepbelief import (
    Domain,
    ResourceScope,
    TileAligner,
    batches_of,
    flatten_samples,
    generate_start_states,
    permute,
    sigmoid_activation,
)
from deepbelief.functional import proportion_of_visible_units

rng = np.random.default_rng(42)

# 1. Per-lane generator start states
lane_states = generate_start_states(np.arange(256))
print(f"Lane states: {lane_states.shape} {lane_states.dtype}")

# 2. Shuffle and batch the training set
samples = [rng.random((28, 28), dtype=np.float32) for _ in range(100)]
order = permute(rng, len(samples))
batches = batches_of(32, [samples[i] for i in order])
print(f"Batches: {[len(batch) for batch in batches]}")
upload = flatten_samples(batches[0])
print(f"First batch buffer: {upload.shape}")

# 3. Tile-align the weights before dispatch, crop the result afterwards
aligner = TileAligner(tile_size=16)
weights = rng.standard_normal((500, 784)).astype(np.float32)
padded = aligner.pad_matrix(weights)
print(f"Padded weights: {weights.shape} -> {padded.shape}")
print(f"Launch geometry: {aligner.get_tiling_info(*weights.shape)}")
restored = aligner.crop_matrix(500, 784, padded)
print(f"Round trip exact: {np.array_equal(restored, weights)}")

# 4. Activation and its gradient from the same output
hidden = sigmoid_activation(Domain(upload[:500] @ weights))
gradient = sigmoid_activation.gradient(hidden)
print(f"Active hidden units: {proportion_of_visible_units(hidden.value):.2f}")
print(f"Mean gradient: {gradient.value.mean():.4f}")


# 5. Release device handles at teardown
class HostBuffer:
    def __init__(self, name):
        self.name = name

    def release(self):
        print(f"released {self.name}")


with ResourceScope() as scope:
    scope.track(HostBuffer("weights"), HostBuffer("hidden"))

print("\nAll operations completed successfully!")
