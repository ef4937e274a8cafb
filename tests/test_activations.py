"""
Tests for differentiable activation units and numerical helpers
"""
import dataclasses
import math

import pytest
import numpy as np

from deepbelief.functional.activations import (
    DifferentiableFunction,
    Domain,
    Gradient,
    Range,
    logit,
    proportion_of_visible_units,
    sigmoid_activation,
    sigmoid_derivative,
    sigmoid_function,
)
from deepbelief.functional.calculus import derivative, normpdf


class TestSigmoid:
    """Test the sigmoid activation unit"""

    def test_sigmoid_at_zero(self):
        s = sigmoid_function(Domain(0.0))

        assert isinstance(s, Range)
        assert s.value == 0.5

    def test_derivative_at_zero(self):
        g = sigmoid_derivative(sigmoid_function(Domain(0.0)))

        assert isinstance(g, Gradient)
        assert g.value == 0.25

    def test_activation_unit(self):
        s = sigmoid_activation(Domain(0.0))
        g = sigmoid_activation.gradient(s)

        assert s.value == 0.5
        assert g.value == 0.25

    def test_array_input(self):
        x = np.array([[-2.0, 0.0], [1.0, 3.0]], dtype=np.float32)

        s = sigmoid_activation(Domain(x))
        g = sigmoid_activation.gradient(s)

        assert s.value.shape == (2, 2)
        assert s.value.dtype == np.float32
        np.testing.assert_allclose(s.value, 1.0 / (1.0 + np.exp(-x)), rtol=1e-6)
        np.testing.assert_allclose(g.value, s.value * (1.0 - s.value), rtol=1e-6)

    def test_saturation(self):
        s = sigmoid_activation(Domain(np.array([-100.0, 100.0], dtype=np.float32)))

        np.testing.assert_allclose(s.value, [0.0, 1.0], atol=1e-6)

    def test_derivative_matches_numerical(self):
        """Derivative-from-output agrees with a midpoint-rule estimate"""
        df = derivative(1e-4, lambda x: 1.0 / (1.0 + math.exp(-x)))

        for x in (-3.0, -0.7, 0.0, 0.3, 2.5):
            g = sigmoid_activation.gradient(sigmoid_activation(Domain(x)))
            assert g.value == pytest.approx(df(x), abs=1e-5)


class TestRoles:
    """Test that value roles cannot be mixed up"""

    def test_gradient_rejects_domain(self):
        with pytest.raises(TypeError):
            sigmoid_activation.gradient(Domain(0.5))

    def test_forward_rejects_range(self):
        with pytest.raises(TypeError):
            sigmoid_activation(Range(0.5))

    def test_forward_rejects_raw_float(self):
        with pytest.raises(TypeError):
            sigmoid_activation(0.5)

    def test_sigmoid_derivative_rejects_domain(self):
        """The derivative is only defined on activation outputs"""
        with pytest.raises(TypeError):
            sigmoid_derivative(Domain(0.5))

    def test_sigmoid_function_rejects_range(self):
        with pytest.raises(TypeError):
            sigmoid_function(Range(0.5))

    def test_sigmoid_derivative_rejects_raw_float(self):
        with pytest.raises(TypeError):
            sigmoid_derivative(0.5)

    def test_array_wrappers_compare_and_hash(self):
        """Wrappers are tags: identity equality, hashable with array values"""
        values = np.array([0.1, 0.9], dtype=np.float32)
        a = Range(values)
        b = Range(values)

        assert a == a
        assert a != b
        assert len({a, b}) == 2

    def test_unit_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sigmoid_activation.derivative = sigmoid_derivative

    def test_wrappers_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Domain(1.0).value = 2.0

    def test_custom_unit(self):
        """tanh' = 1 - tanh^2 is also expressible from the output"""
        tanh = DifferentiableFunction(
            lambda x: Range(np.tanh(x.value)),
            lambda y: Gradient(1.0 - y.value * y.value),
        )

        y = tanh(Domain(0.5))

        assert tanh.gradient(y).value == pytest.approx(1.0 - math.tanh(0.5) ** 2)


class TestLogit:
    """Test the inverse logistic function"""

    def test_logit_at_half(self):
        assert logit(0.5) == 0.0

    def test_round_trip(self):
        x = np.linspace(-5.0, 5.0, 41).astype(np.float32)

        s = sigmoid_activation(Domain(x)).value

        np.testing.assert_allclose(logit(s), x, atol=1e-3)

    def test_boundaries(self):
        assert logit(0.0) == -np.inf
        assert logit(1.0) == np.inf


class TestProportionActive:
    """Test fraction of units above 0.5"""

    def test_strictly_greater(self):
        v = np.array([0.2, 0.6, 0.9, 0.5], dtype=np.float32)

        assert proportion_of_visible_units(v) == 0.5

    def test_all_and_none(self):
        assert proportion_of_visible_units(np.ones(8, dtype=np.float32)) == 1.0
        assert proportion_of_visible_units(np.zeros(8, dtype=np.float32)) == 0.0

    def test_empty(self):
        assert np.isnan(proportion_of_visible_units(np.zeros(0, dtype=np.float32)))


class TestNormpdf:
    """Test the normal density helper"""

    def test_peak(self):
        pdf = normpdf(0.0, 1.0)

        assert pdf(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi), rel=1e-6)

    def test_symmetric(self):
        pdf = normpdf(1.5, 0.5)

        np.testing.assert_allclose(pdf(np.array([1.0])), pdf(np.array([2.0])), rtol=1e-6)
