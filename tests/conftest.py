"""
Pytest configuration and fixtures for DeepBelief tests
"""
import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random source for shuffling tests"""
    return np.random.default_rng(42)


@pytest.fixture
def test_data():
    """Fixture providing test data"""
    np.random.seed(42)
    return {
        'small_vector': np.random.randn(100).astype(np.float32),
        'odd_vector': np.random.randn(37).astype(np.float32),
        'matrix_5x7': np.random.randn(5, 7).astype(np.float32),
        'matrix_16x16': np.random.randn(16, 16).astype(np.float32),
        'matrix_100x33': np.random.randn(100, 33).astype(np.float32),
        'samples': [np.random.randn(3, 4).astype(np.float32) for _ in range(6)],
    }


class Handle:
    """Fake device handle that records the order it was released in"""

    def __init__(self, name, log, fail=False):
        self.name = name
        self.log = log
        self.fail = fail

    def release(self):
        if self.fail:
            raise RuntimeError(f"release failed: {self.name}")
        self.log.append(self.name)

    def __repr__(self):
        return f"Handle({self.name!r})"


@pytest.fixture
def release_log():
    return []


@pytest.fixture
def make_handle(release_log):
    """Factory for fake handles sharing one release log"""
    def _make(name, fail=False):
        return Handle(name, release_log, fail=fail)
    return _make
