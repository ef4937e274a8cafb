"""
Differentiable activation units (functional API)

An activation unit pairs a forward map with its derivative written in terms
of the forward *output*. Values are wrapped by role:

    Domain    pre-activation input
    Range     activation output
    Gradient  derivative value

The derivative only ever receives a Range, so a unit can only represent
functions with f'(x) = g(f(x)). Sigmoid is the canonical case:

    s  = 1 / (1 + exp(-x))
    s' = s * (1 - s)

Usage:
    >>> s = sigmoid_activation(Domain(x))   # Range
    >>> g = sigmoid_activation.gradient(s)  # Gradient, from the same Range
"""
import numpy as np
from dataclasses import dataclass
from typing import Callable, Union

from ..utils.numba_ops import _sigmoid_derivative_numba, _sigmoid_numba

Value = Union[float, np.ndarray]


def _to_float32(value: Value) -> Value:
    if np.isscalar(value):
        return np.float32(value)
    return np.asarray(value, dtype=np.float32)


@dataclass(frozen=True, eq=False)
class Domain:
    """Pre-activation value"""
    value: Value


@dataclass(frozen=True, eq=False)
class Range:
    """Activation output"""
    value: Value


@dataclass(frozen=True, eq=False)
class Gradient:
    """Derivative of an activation at some Range value"""
    value: Value


def _check_role(arg, role: type, what: str):
    if not isinstance(arg, role):
        raise TypeError(f"{what} expects {role.__name__}, got {type(arg).__name__}")


@dataclass(frozen=True)
class DifferentiableFunction:
    """
    Forward map and matching derivative-from-output map, held together.

    Args:
        function: Domain -> Range
        derivative: Range -> Gradient, the derivative expressed in terms of
            the forward output
    """
    function: Callable[[Domain], Range]
    derivative: Callable[[Range], Gradient]

    def forward(self, x: Domain) -> Range:
        _check_role(x, Domain, "forward")
        return self.function(x)

    def gradient(self, y: Range) -> Gradient:
        """Derivative at the point whose activation is y"""
        _check_role(y, Range, "gradient")
        return self.derivative(y)

    def __call__(self, x: Domain) -> Range:
        return self.forward(x)


def _apply_elementwise(kernel, value: Value) -> Value:
    value = _to_float32(value)
    if isinstance(value, np.ndarray):
        flat = np.ascontiguousarray(value).reshape(-1)
        return kernel(flat).reshape(value.shape)
    return kernel(np.array([value], dtype=np.float32))[0]


def sigmoid_function(x: Domain) -> Range:
    """1 / (1 + exp(-x))"""
    _check_role(x, Domain, "sigmoid_function")
    return Range(_apply_elementwise(_sigmoid_numba, x.value))


def sigmoid_derivative(s: Range) -> Gradient:
    """s * (1 - s)"""
    _check_role(s, Range, "sigmoid_derivative")
    return Gradient(_apply_elementwise(_sigmoid_derivative_numba, s.value))


sigmoid_activation = DifferentiableFunction(sigmoid_function, sigmoid_derivative)


def logit(x: Value) -> Value:
    """
    Inverse of the logistic function: log(x) - log(1 - x).

    Only defined on (0, 1). Boundary inputs give +/-inf or nan.
    """
    x = _to_float32(x)
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.log(x) - np.log(np.float32(1.0) - x)


def proportion_of_visible_units(v: np.ndarray) -> np.float32:
    """
    Fraction of entries of v strictly above 0.5.

    Summarizes a sampled binary unit vector. An empty vector gives nan.
    """
    v = np.asarray(v, dtype=np.float32)
    active = np.count_nonzero(v > 0.5)
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.float32(active) / np.float32(v.size)
