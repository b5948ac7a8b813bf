"""
Generic result container for pygaussnewton computations.

Backends return a Result envelope around their parameter payload so
that timing, diagnostics and warnings travel with every step without
each payload type redefining them.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, sample size, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True); a step never changes after it is produced
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for one computation.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Payload (new coefficients, step, residuals, ...)
        info: Structured metadata (method, n, p)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Example:
        >>> Result(
        ...     params=StepParams(coefficients=c_new, ...),
        ...     info={'method': 'gauss_newton', 'n': 4, 'p': 2},
        ...     timing={'total_seconds': 0.001, 'elimination': 0.0002},
        ...     backend_name='cpu_gauss_newton'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
