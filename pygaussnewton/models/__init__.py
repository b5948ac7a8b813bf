"""
Catalog of closed-form models for Gauss-Newton fitting.

Every model is an independent, immutable value implementing the Model
protocol (name, n_parameters, evaluate, partial_derivative) with exact
analytic derivatives. Models share no base class; the engine only relies
on the protocol, so user-defined models need not come from here.

Families:
    exponential: a·exp(b·x) and its offset, shifted and decay forms
    power: a·x^b, fixed-base a·n^(b·x), geometric a·b^x and variants
    sine: exponentially damped sinusoids

Example:
    >>> from pygaussnewton.models import resolve_model
    >>> model = resolve_model('fixed_base', base=10.0)
    >>> model.evaluate(2.0, [3.0, 1.0])
    300.0
"""

from __future__ import annotations

from typing import Any

from pygaussnewton.core.protocols import Model
from pygaussnewton.models.exponential import (
    Exponential,
    ExponentialOffset,
    ExponentialShifted,
    ExponentialDecay,
    ExponentialDecayOffset,
    ExponentialDecayShifted,
)
from pygaussnewton.models.power import (
    PowerLaw,
    PowerLawOffset,
    FixedBase,
    FixedBaseOffset,
    Geometric,
    GeometricScaled,
    GeometricShifted,
    GeometricShiftedOffset,
)
from pygaussnewton.models.sine import (
    DampedSine,
    DampedSineCosine,
    DampedSineCosinePhase,
)


# =====================================================================
# Model name → class mapping
# =====================================================================

_MODEL_CLASSES: dict[str, type] = {
    cls.name: cls
    for cls in (
        Exponential,
        ExponentialOffset,
        ExponentialShifted,
        ExponentialDecay,
        ExponentialDecayOffset,
        ExponentialDecayShifted,
        PowerLaw,
        PowerLawOffset,
        FixedBase,
        FixedBaseOffset,
        Geometric,
        GeometricScaled,
        GeometricShifted,
        GeometricShiftedOffset,
        DampedSine,
        DampedSineCosine,
        DampedSineCosinePhase,
    )
}

# Forms whose normal equations are singular up to rounding because two
# coefficients are not separately identifiable. Kept for evaluation;
# Gauss-Newton is not expected to converge on them.
POORLY_CONDITIONED: frozenset[str] = frozenset({
    ExponentialShifted.name,
    ExponentialDecayShifted.name,
    GeometricScaled.name,
    GeometricShifted.name,
    GeometricShiftedOffset.name,
})


def available_models() -> list[str]:
    """Names accepted by resolve_model(), sorted."""
    return sorted(_MODEL_CLASSES)


def resolve_model(model: str | Model, **constants: Any) -> Model:
    """
    Resolve a model argument to a Model instance.

    Args:
        model: A registered model name (case-insensitive) or any object
            already satisfying the Model protocol
        **constants: Construction-time constants, e.g. base=2.0 for
            'fixed_base'. Not allowed when `model` is an instance.

    Returns:
        Model instance

    Raises:
        ValueError: If the name is unknown
        TypeError: If `model` is neither a string nor a Model, or the
            constants do not match the model's constructor
    """
    if isinstance(model, str):
        cls = _MODEL_CLASSES.get(model.lower())
        if cls is None:
            valid = ', '.join(available_models())
            raise ValueError(f"Unknown model: {model!r}. Valid models: {valid}")
        return cls(**constants)
    if isinstance(model, Model):
        if constants:
            raise TypeError(
                f"constants {sorted(constants)} given with a model instance; "
                f"pass them to the model's constructor instead"
            )
        return model
    raise TypeError(f"model must be str or Model, got {type(model).__name__}")


__all__ = [
    # Exponential
    "Exponential",
    "ExponentialOffset",
    "ExponentialShifted",
    "ExponentialDecay",
    "ExponentialDecayOffset",
    "ExponentialDecayShifted",
    # Power
    "PowerLaw",
    "PowerLawOffset",
    "FixedBase",
    "FixedBaseOffset",
    "Geometric",
    "GeometricScaled",
    "GeometricShifted",
    "GeometricShiftedOffset",
    # Sine
    "DampedSine",
    "DampedSineCosine",
    "DampedSineCosinePhase",
    # Registry
    "POORLY_CONDITIONED",
    "available_models",
    "resolve_model",
]
