"""
Numerical helpers used when checking activation units and sampling noise.
"""
import math
import numpy as np
from typing import Callable

SQRT_2PI = math.sqrt(2.0 * math.pi)


def derivative(eps: float, f: Callable) -> Callable:
    """
    Midpoint-rule derivative of f.

    Args:
        eps: Step width
        f: Scalar (or elementwise) function

    Returns:
        x -> (f(x + eps/2) - f(x - eps/2)) / eps
    """
    half = eps / 2.0

    def df(x):
        return (f(x + half) - f(x - half)) / eps

    return df


def normpdf(mu: float, sigma: float) -> Callable:
    """Density of a normal distribution with mean mu and std sigma"""

    def pdf(x):
        x = np.asarray(x, dtype=np.float32) if not np.isscalar(x) else np.float32(x)
        return np.exp(-(x - mu) * (x - mu) / (2.0 * sigma * sigma)) / (sigma * SQRT_2PI)

    return pdf
