"""
Power-law and fixed-base exponentiation models.

    PowerLaw                f(x) = a·x^b                (x > 0)
    PowerLawOffset          f(x) = a·x^b + c            (x > 0)
    FixedBase(n)            f(x) = a·n^(b·x)            (n > 0, fixed)
    FixedBaseOffset(n)      f(x) = a·n^(b·x) + c        (n > 0, fixed)
    Geometric               f(x) = a·b^x                (b > 0)
    GeometricScaled         f(x) = a·b^(c·x)            (*)
    GeometricShifted        f(x) = a·b^(c·x + d)        (*)
    GeometricShiftedOffset  f(x) = a·b^(c·x + d) + g    (*)

A negative exponent in PowerLaw gives the inverse forms a / x^|b|.

(*) The base and the exponent scale are not separately identifiable:
b^(c·x) = exp(c·ln(b)·x), so only the product c·ln(b) is determined by the
data and J'J is singular up to rounding. Gauss-Newton is not expected to
converge on these forms.

Coefficients are ordered (a, b, c, d, g).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence
import numpy as np

from pygaussnewton.core.exceptions import ValidationError
from pygaussnewton.core.validation import check_index


def _check_base(base: float) -> None:
    if not np.isfinite(base) or base <= 0:
        raise ValidationError(f"base: must be finite and > 0, got {base}")


@dataclass(frozen=True)
class PowerLaw:
    """f(x) = a·x^b"""

    name: ClassVar[str] = 'power_law'
    n_parameters: ClassVar[int] = 2

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b = coefficients[0], coefficients[1]
        return float(a * np.power(x, b))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b = coefficients[0], coefficients[1]
        if index == 0:
            return float(np.power(x, b))
        return float(a * np.power(x, b) * np.log(x))


@dataclass(frozen=True)
class PowerLawOffset:
    """f(x) = a·x^b + c"""

    name: ClassVar[str] = 'power_law_offset'
    n_parameters: ClassVar[int] = 3

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        return float(a * np.power(x, b) + c)

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b = coefficients[0], coefficients[1]
        if index == 0:
            return float(np.power(x, b))
        if index == 1:
            return float(a * np.power(x, b) * np.log(x))
        return 1.0


@dataclass(frozen=True)
class FixedBase:
    """
    f(x) = a·n^(b·x) with the base n fixed at construction.

    Attributes:
        base: The fixed base n, finite and > 0

    Example:
        >>> FixedBase(2.0).evaluate(3.0, [1.0, 1.0])
        8.0
    """

    base: float
    name: ClassVar[str] = 'fixed_base'
    n_parameters: ClassVar[int] = 2

    def __post_init__(self):
        _check_base(self.base)

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b = coefficients[0], coefficients[1]
        return float(a * np.power(self.base, b * x))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b = coefficients[0], coefficients[1]
        if index == 0:
            return float(np.power(self.base, b * x))
        return float(a * np.power(self.base, b * x) * x * np.log(self.base))


@dataclass(frozen=True)
class FixedBaseOffset:
    """f(x) = a·n^(b·x) + c with the base n fixed at construction."""

    base: float
    name: ClassVar[str] = 'fixed_base_offset'
    n_parameters: ClassVar[int] = 3

    def __post_init__(self):
        _check_base(self.base)

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        return float(a * np.power(self.base, b * x) + c)

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b = coefficients[0], coefficients[1]
        if index == 0:
            return float(np.power(self.base, b * x))
        if index == 1:
            return float(a * np.power(self.base, b * x) * x * np.log(self.base))
        return 1.0


@dataclass(frozen=True)
class Geometric:
    """f(x) = a·b^x"""

    name: ClassVar[str] = 'geometric'
    n_parameters: ClassVar[int] = 2

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b = coefficients[0], coefficients[1]
        return float(a * np.power(b, x))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b = coefficients[0], coefficients[1]
        if index == 0:
            return float(np.power(b, x))
        return float(a * x * np.power(b, x - 1))


@dataclass(frozen=True)
class GeometricScaled:
    """f(x) = a·b^(c·x)"""

    name: ClassVar[str] = 'geometric_scaled'
    n_parameters: ClassVar[int] = 3

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        return float(a * np.power(b, c * x))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        exponent = c * x
        if index == 0:
            return float(np.power(b, exponent))
        if index == 1:
            return float(a * exponent * np.power(b, exponent - 1))
        return float(a * np.power(b, exponent) * x * np.log(b))


@dataclass(frozen=True)
class GeometricShifted:
    """f(x) = a·b^(c·x + d)"""

    name: ClassVar[str] = 'geometric_shifted'
    n_parameters: ClassVar[int] = 4

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c, d = coefficients[0], coefficients[1], coefficients[2], coefficients[3]
        return float(a * np.power(b, c * x + d))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        return _shifted_derivative(x, index, coefficients)


@dataclass(frozen=True)
class GeometricShiftedOffset:
    """f(x) = a·b^(c·x + d) + g"""

    name: ClassVar[str] = 'geometric_shifted_offset'
    n_parameters: ClassVar[int] = 5

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c, d, g = (coefficients[0], coefficients[1], coefficients[2],
                         coefficients[3], coefficients[4])
        return float(a * np.power(b, c * x + d) + g)

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        if index == 4:
            return 1.0
        return _shifted_derivative(x, index, coefficients)


def _shifted_derivative(x: float, index: int, coefficients: Sequence[float]) -> float:
    """∂/∂(a, b, c, d) of a·b^(c·x + d); index already validated."""
    a, b, c, d = coefficients[0], coefficients[1], coefficients[2], coefficients[3]
    exponent = c * x + d
    if index == 0:
        return float(np.power(b, exponent))
    if index == 1:
        return float(a * exponent * np.power(b, exponent - 1))
    if index == 2:
        return float(a * np.power(b, exponent) * x * np.log(b))
    return float(a * np.power(b, exponent) * np.log(b))
