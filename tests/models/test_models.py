"""
Tests for the model catalog.

Validates:
    - Analytic partial derivatives against central finite differences
    - Known values of evaluate()
    - Coefficient index validation
    - FixedBase construction constants
    - Registry lookup via resolve_model()
    - Rank deficiency of the poorly conditioned forms
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from pygaussnewton.core.exceptions import ValidationError
from pygaussnewton.core.protocols import Model
from pygaussnewton.core.compute.tolerances import select_tolerance
from pygaussnewton.models import (
    POORLY_CONDITIONED,
    DampedSine,
    DampedSineCosine,
    DampedSineCosinePhase,
    Exponential,
    ExponentialDecay,
    ExponentialDecayOffset,
    ExponentialDecayShifted,
    ExponentialOffset,
    ExponentialShifted,
    FixedBase,
    FixedBaseOffset,
    Geometric,
    GeometricScaled,
    GeometricShifted,
    GeometricShiftedOffset,
    PowerLaw,
    PowerLawOffset,
    available_models,
    resolve_model,
)
from pygaussnewton.regression._gauss_newton import build_jacobian


DERIVATIVE_TOL = select_tolerance("derivative")

# (model, representative coefficients)
MODEL_CASES = [
    (Exponential(), [1.5, 0.7]),
    (ExponentialOffset(), [1.5, -0.7, 0.3]),
    (ExponentialShifted(), [1.2, 0.4, -0.3, 0.5]),
    (ExponentialDecay(), [2.0, -0.8]),
    (ExponentialDecayOffset(), [2.0, -0.8, 0.5]),
    (ExponentialDecayShifted(), [2.0, -0.8, 0.2, 0.5]),
    (PowerLaw(), [1.5, 1.3]),
    (PowerLawOffset(), [1.5, -0.5, 2.0]),
    (FixedBase(2.0), [1.5, 0.8]),
    (FixedBaseOffset(10.0), [0.5, 0.3, 1.0]),
    (Geometric(), [1.5, 1.8]),
    (GeometricScaled(), [1.5, 1.8, 0.7]),
    (GeometricShifted(), [1.5, 1.8, 0.7, 0.2]),
    (GeometricShiftedOffset(), [1.5, 1.8, 0.7, 0.2, -1.0]),
    (DampedSine(), [2.0, -0.3, 1.7, 0.4]),
    (DampedSineCosine(), [2.0, -0.3, 1.7]),
    (DampedSineCosinePhase(), [2.0, -0.3, 1.7, 0.4]),
]

CASE_IDS = [model.name for model, _ in MODEL_CASES]


def _central_difference(model, x, index, coefficients):
    c = np.asarray(coefficients, dtype=float)
    h = np.cbrt(np.finfo(float).eps) * max(1.0, abs(c[index]))
    up, down = c.copy(), c.copy()
    up[index] += h
    down[index] -= h
    return (model.evaluate(x, up) - model.evaluate(x, down)) / (2.0 * h)


# ═══════════════════════════════════════════════════════════════════════
# Catalog-wide properties
# ═══════════════════════════════════════════════════════════════════════


class TestCatalog:

    def test_every_model_has_a_case(self):
        assert sorted(CASE_IDS) == available_models()

    @pytest.mark.parametrize("model,coefficients", MODEL_CASES, ids=CASE_IDS)
    def test_satisfies_protocol(self, model, coefficients):
        assert isinstance(model, Model)
        assert model.n_parameters == len(coefficients)

    @pytest.mark.parametrize("model,coefficients", MODEL_CASES, ids=CASE_IDS)
    def test_derivatives_match_finite_difference(self, model, coefficients, rng):
        x_values = rng.uniform(0.5, 2.0, size=5)
        base = np.asarray(coefficients)
        for _ in range(3):
            c = base * rng.uniform(0.9, 1.1, size=base.size)
            for x in x_values:
                for k in range(model.n_parameters):
                    analytic = model.partial_derivative(x, k, c)
                    numeric = _central_difference(model, x, k, c)
                    np.testing.assert_allclose(
                        analytic, numeric,
                        rtol=DERIVATIVE_TOL.rtol, atol=1e-6,
                        err_msg=f"{model.name}: d/dc[{k}] at x={x}",
                    )

    @pytest.mark.parametrize("model,coefficients", MODEL_CASES, ids=CASE_IDS)
    def test_index_out_of_range(self, model, coefficients):
        with pytest.raises(ValidationError, match="out of range"):
            model.partial_derivative(1.0, model.n_parameters, coefficients)
        with pytest.raises(ValidationError, match="out of range"):
            model.partial_derivative(1.0, -1, coefficients)

    @pytest.mark.parametrize("model,coefficients", MODEL_CASES, ids=CASE_IDS)
    def test_index_must_be_integer(self, model, coefficients):
        with pytest.raises(ValidationError, match="expected integer"):
            model.partial_derivative(1.0, 0.0, coefficients)

    @pytest.mark.parametrize("model,coefficients", MODEL_CASES, ids=CASE_IDS)
    def test_returns_python_float(self, model, coefficients):
        assert type(model.evaluate(1.0, coefficients)) is float
        assert type(model.partial_derivative(1.0, 0, coefficients)) is float

    @pytest.mark.parametrize("model,coefficients", MODEL_CASES, ids=CASE_IDS)
    def test_frozen(self, model, coefficients):
        with pytest.raises((FrozenInstanceError, AttributeError)):
            model.extra = 1


# ═══════════════════════════════════════════════════════════════════════
# Known values
# ═══════════════════════════════════════════════════════════════════════


class TestKnownValues:

    def test_exponential(self):
        assert Exponential().evaluate(1.0, [2.0, 1.0]) == pytest.approx(2.0 * np.e)

    def test_exponential_decay(self):
        assert ExponentialDecay().evaluate(0.0, [3.0, -1.0]) == 0.0

    def test_power_law_inverse(self):
        assert PowerLaw().evaluate(4.0, [1.0, -2.0]) == pytest.approx(1.0 / 16.0)

    def test_fixed_base(self):
        assert FixedBase(2.0).evaluate(3.0, [1.0, 1.0]) == pytest.approx(8.0)
        assert FixedBase(10.0).evaluate(2.0, [3.0, 1.0]) == pytest.approx(300.0)

    def test_geometric(self):
        assert Geometric().evaluate(3.0, [2.0, 3.0]) == pytest.approx(54.0)

    def test_damped_sine_at_zero(self):
        assert DampedSine().evaluate(0.0, [2.0, -0.5, 1.0, np.pi / 2]) == pytest.approx(2.0)

    def test_damped_sine_cosine_at_zero(self):
        assert DampedSineCosine().evaluate(0.0, [2.0, -0.5, 1.0]) == pytest.approx(2.0)

    def test_offsets_are_unit_derivatives(self):
        assert ExponentialOffset().partial_derivative(1.3, 2, [1.0, 1.0, 1.0]) == 1.0
        assert PowerLawOffset().partial_derivative(1.3, 2, [1.0, 1.0, 1.0]) == 1.0
        assert FixedBaseOffset(2.0).partial_derivative(1.3, 2, [1.0, 1.0, 1.0]) == 1.0


# ═══════════════════════════════════════════════════════════════════════
# FixedBase constants
# ═══════════════════════════════════════════════════════════════════════


class TestFixedBase:

    @pytest.mark.parametrize("cls", [FixedBase, FixedBaseOffset])
    @pytest.mark.parametrize("base", [0.0, -2.0, np.inf, np.nan])
    def test_invalid_base(self, cls, base):
        with pytest.raises(ValidationError, match="base"):
            cls(base)

    def test_base_is_frozen(self):
        model = FixedBase(2.0)
        with pytest.raises(FrozenInstanceError):
            model.base = 3.0

    def test_equal_by_value(self):
        assert FixedBase(2.0) == FixedBase(2.0)
        assert FixedBase(2.0) != FixedBase(3.0)


# ═══════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════


class TestResolveModel:

    def test_by_name(self):
        assert isinstance(resolve_model('exponential'), Exponential)

    def test_case_insensitive(self):
        assert isinstance(resolve_model('Power_Law'), PowerLaw)

    def test_with_constants(self):
        model = resolve_model('fixed_base', base=10.0)
        assert model == FixedBase(10.0)
        assert model.evaluate(2.0, [3.0, 1.0]) == pytest.approx(300.0)

    def test_instance_passthrough(self):
        model = DampedSine()
        assert resolve_model(model) is model

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown model"):
            resolve_model('logistic')

    def test_constants_with_instance(self):
        with pytest.raises(TypeError, match="constants"):
            resolve_model(Exponential(), base=2.0)

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="must be str or Model"):
            resolve_model(42)

    def test_missing_constant(self):
        with pytest.raises(TypeError):
            resolve_model('fixed_base')

    def test_user_defined_model(self):
        class Line:
            name = 'line'
            n_parameters = 2

            def evaluate(self, x, coefficients):
                return coefficients[0] + coefficients[1] * x

            def partial_derivative(self, x, index, coefficients):
                return 1.0 if index == 0 else x

        line = Line()
        assert isinstance(line, Model)
        assert resolve_model(line) is line


# ═══════════════════════════════════════════════════════════════════════
# Poorly conditioned forms
# ═══════════════════════════════════════════════════════════════════════


class TestPoorlyConditioned:

    def test_names_are_registered(self):
        assert POORLY_CONDITIONED <= set(available_models())

    @pytest.mark.parametrize(
        "model,coefficients",
        [case for case in MODEL_CASES if case[0].name in POORLY_CONDITIONED],
        ids=sorted(POORLY_CONDITIONED, key=CASE_IDS.index),
    )
    def test_jacobian_is_rank_deficient(self, model, coefficients):
        x = np.linspace(0.5, 2.0, 10)
        J = build_jacobian(model, x, np.asarray(coefficients, dtype=float))
        s = np.linalg.svd(J, compute_uv=False)
        assert s[-1] / s[0] < 1e-10
