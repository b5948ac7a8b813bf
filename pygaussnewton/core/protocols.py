"""
Core protocols for pygaussnewton.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that the engine depends on a capability set, never on a class hierarchy:
any object with the right attributes is a Model, and the catalog models
share no base class.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Stateless collaborators: models and backends are immutable
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, Sequence, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Model(Protocol):
    """
    Parametric model f(x; c) fitted by Gauss-Newton.

    A model is a stateless function family. It may carry fixed
    construction-time constants (a fixed exponent base, say) but must
    never change during use, which makes a single instance safe to share
    across threads and fitting sessions.

    The engine trusts partial_derivative to be the exact analytic
    derivative of evaluate; it performs no consistency check of its own.
    """

    @property
    def name(self) -> str:
        """Short identifier, e.g. 'exponential'."""
        ...

    @property
    def n_parameters(self) -> int:
        """Number of coefficients m the model takes."""
        ...

    def evaluate(self, x: float, coefficients: Sequence[float]) -> float:
        """
        Evaluate f(x; c).

        Args:
            x: Point at which to evaluate
            coefficients: Sequence of n_parameters coefficients

        Returns:
            f(x; c)
        """
        ...

    def partial_derivative(
        self,
        x: float,
        index: int,
        coefficients: Sequence[float],
    ) -> float:
        """
        Evaluate ∂f(x; c)/∂c_index.

        Args:
            x: Point at which to evaluate
            index: Coefficient index, 0 <= index < n_parameters
            coefficients: Sequence of n_parameters coefficients

        Returns:
            The partial derivative with respect to coefficient `index`

        Raises:
            ValidationError: If index is outside [0, n_parameters)
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a validated design plus the current
    coefficient estimate and produce a domain-specific parameter payload.

    Backends are stateless; all configuration is passed at construction
    time. This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_gauss_newton'
        """
        ...

    def solve(self, design: D, coefficients: Any) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated data container
            coefficients: Current coefficient estimate

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent solution (singularity, etc.)
            ValidationError: If design is invalid for this backend
        """
        ...
