"""
Functional API: activation units, linear algebra primitives and numerical
helpers.
"""
from .activations import (
    Domain,
    Range,
    Gradient,
    DifferentiableFunction,
    sigmoid_function,
    sigmoid_derivative,
    sigmoid_activation,
    logit,
    proportion_of_visible_units,
)
from .linalg import (
    multiply_vector_by_scalar,
    multiply_matrix_by_scalar,
    identity_matrix,
    column,
    to_columns,
    to_list,
)
from .calculus import derivative, normpdf

__all__ = [
    'Domain',
    'Range',
    'Gradient',
    'DifferentiableFunction',
    'sigmoid_function',
    'sigmoid_derivative',
    'sigmoid_activation',
    'logit',
    'proportion_of_visible_units',
    'multiply_vector_by_scalar',
    'multiply_matrix_by_scalar',
    'identity_matrix',
    'column',
    'to_columns',
    'to_list',
    'derivative',
    'normpdf',
]
