"""
Damped sinusoid models.

    DampedSine             f(x) = a·exp(b·x)·sin(c·x + d)
    DampedSineCosine       f(x) = a·exp(b·x)·(cos(c·x) + sin(c·x))
    DampedSineCosinePhase  f(x) = a·exp(b·x)·(cos(c·x + d) + sin(c·x + d))

b < 0 gives a decaying envelope. Gauss-Newton on periodic models only
converges from a guess whose frequency c is already close; the residual
surface has a local minimum near every alias of the true frequency.

Coefficients are ordered (a, b, c, d).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence
import numpy as np

from pygaussnewton.core.validation import check_index


@dataclass(frozen=True)
class DampedSine:
    """f(x) = a·exp(b·x)·sin(c·x + d)"""

    name: ClassVar[str] = 'damped_sine'
    n_parameters: ClassVar[int] = 4

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c, d = coefficients[0], coefficients[1], coefficients[2], coefficients[3]
        return float(a * np.exp(b * x) * np.sin(c * x + d))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b, c, d = coefficients[0], coefficients[1], coefficients[2], coefficients[3]
        envelope = np.exp(b * x)
        phase = c * x + d
        if index == 0:
            return float(envelope * np.sin(phase))
        if index == 1:
            return float(a * x * envelope * np.sin(phase))
        if index == 2:
            return float(a * x * envelope * np.cos(phase))
        return float(a * envelope * np.cos(phase))


@dataclass(frozen=True)
class DampedSineCosine:
    """f(x) = a·exp(b·x)·(cos(c·x) + sin(c·x))"""

    name: ClassVar[str] = 'damped_sine_cosine'
    n_parameters: ClassVar[int] = 3

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        return float(a * np.exp(b * x) * (np.cos(c * x) + np.sin(c * x)))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b, c = coefficients[0], coefficients[1], coefficients[2]
        envelope = np.exp(b * x)
        cos_cx, sin_cx = np.cos(c * x), np.sin(c * x)
        if index == 0:
            return float(envelope * (cos_cx + sin_cx))
        if index == 1:
            return float(a * x * envelope * (cos_cx + sin_cx))
        return float(a * x * envelope * (cos_cx - sin_cx))


@dataclass(frozen=True)
class DampedSineCosinePhase:
    """f(x) = a·exp(b·x)·(cos(c·x + d) + sin(c·x + d))"""

    name: ClassVar[str] = 'damped_sine_cosine_phase'
    n_parameters: ClassVar[int] = 4

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        a, b, c, d = coefficients[0], coefficients[1], coefficients[2], coefficients[3]
        phase = c * x + d
        return float(a * np.exp(b * x) * (np.cos(phase) + np.sin(phase)))

    def partial_derivative(
        self, x: float, index: int, coefficients: Sequence[float]
    ) -> float:
        check_index(index, self.n_parameters, 'index')
        a, b, c, d = coefficients[0], coefficients[1], coefficients[2], coefficients[3]
        envelope = np.exp(b * x)
        phase = c * x + d
        cos_p, sin_p = np.cos(phase), np.sin(phase)
        if index == 0:
            return float(envelope * (cos_p + sin_p))
        if index == 1:
            return float(a * x * envelope * (cos_p + sin_p))
        if index == 2:
            return float(a * x * envelope * (cos_p - sin_p))
        return float(a * envelope * (cos_p - sin_p))
