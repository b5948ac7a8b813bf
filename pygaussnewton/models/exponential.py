"""
Exponential growth and decay models.

    Exponential              f(x) = a·exp(b·x)
    ExponentialOffset        f(x) = a·exp(b·x) + c
    ExponentialShifted       f(x) = a·exp(b·x + c) + d        (*)
    ExponentialDecay         f(x) = a·(1 − exp(b·x))
    ExponentialDecayOffset   f(x) = a·(1 − exp(b·x)) + c
    ExponentialDecayShifted  f(x) = a·(1 − exp(b·x + c)) + d  (*)

(*) Over-parameterized: a·exp(b·x + c) = (a·e^c)·exp(b·x), so the a and c
columns of the Jacobian are proportional; in the decay form a and d also
collapse into one constant. J'J is singular up to rounding and
Gauss-Newton is not expected to converge on these forms. They are kept
because they are valid functions to evaluate.

Coefficients are ordered (a, b, c, d).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence
import numpy as np

from pygaussnewton.core.validation import check_index


@dataclass(frozen=True)
class Exponential:
    """f(x) = a·exp(b·x)"""

    name: ClassVar[str] = 'exponential'
    n_parameters: ClassVar[int] = 2

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b = coefficients[0], coefficients[1]
        return float(a * np.exp(b * x))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b = coefficients[0], coefficients[1]
        if index == 0:
            return float(np.exp(b * x))
        return float(a * x * np.exp(b * x))


@dataclass(frozen=True)
class ExponentialOffset:
    """f(x) = a·exp(b·x) + c"""

    name: ClassVar[str] = 'exponential_offset'
    n_parameters: ClassVar[int] = 3

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        return float(a * np.exp(b * x) + c)

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b = coefficients[0], coefficients[1]
        if index == 0:
            return float(np.exp(b * x))
        if index == 1:
            return float(a * x * np.exp(b * x))
        return 1.0


@dataclass(frozen=True)
class ExponentialShifted:
    """
    f(x) = a·exp(b·x + c) + d

    Poorly conditioned: ∂f/∂c = a·∂f/∂a, see module docstring.
    """

    name: ClassVar[str] = 'exponential_shifted'
    n_parameters: ClassVar[int] = 4

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c, d = coefficients[0], coefficients[1], coefficients[2], coefficients[3]
        return float(a * np.exp(b * x + c) + d)

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        growth = np.exp(b * x + c)
        if index == 0:
            return float(growth)
        if index == 1:
            return float(a * x * growth)
        if index == 2:
            return float(a * growth)
        return 1.0


@dataclass(frozen=True)
class ExponentialDecay:
    """
    f(x) = a·(1 − exp(b·x))

    With b < 0 this rises from 0 towards the asymptote a.
    """

    name: ClassVar[str] = 'exponential_decay'
    n_parameters: ClassVar[int] = 2

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b = coefficients[0], coefficients[1]
        return float(a * (1.0 - np.exp(b * x)))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b = coefficients[0], coefficients[1]
        if index == 0:
            return float(1.0 - np.exp(b * x))
        return float(-a * x * np.exp(b * x))


@dataclass(frozen=True)
class ExponentialDecayOffset:
    """f(x) = a·(1 − exp(b·x)) + c"""

    name: ClassVar[str] = 'exponential_decay_offset'
    n_parameters: ClassVar[int] = 3

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        return float(a * (1.0 - np.exp(b * x)) + c)

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b = coefficients[0], coefficients[1]
        if index == 0:
            return float(1.0 - np.exp(b * x))
        if index == 1:
            return float(-a * x * np.exp(b * x))
        return 1.0


@dataclass(frozen=True)
class ExponentialDecayShifted:
    """
    f(x) = a·(1 − exp(b·x + c)) + d

    Poorly conditioned, see module docstring.
    """

    name: ClassVar[str] = 'exponential_decay_shifted'
    n_parameters: ClassVar[int] = 4

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c, d = coefficients[0], coefficients[1], coefficients[2], coefficients[3]
        return float(a * (1.0 - np.exp(b * x + c)) + d)

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        growth = np.exp(b * x + c)
        if index == 0:
            return float(1.0 - growth)
        if index == 1:
            return float(-a * x * growth)
        if index == 2:
            return float(-a * growth)
        return 1.0
