"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different kinds of result the
package produces:
- direct linear solves: machine precision against a LAPACK reference
- iterated Gauss-Newton fits: converged to a fixed absolute accuracy
- analytic model derivatives: compared with central finite differences

Used by the test suite and by callers who want a ready-made threshold for
their own stopping rule.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Gaussian elimination on a well-conditioned system
LINEAR_SOLVE = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='linear_solve',
    description='Direct solve, well-conditioned, matches LAPACK',
)

# Gaussian elimination, ill-conditioned system (cond > 1e4)
LINEAR_SOLVE_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='linear_solve_ill_conditioned',
    description='Direct solve, ill-conditioned (cond > 1e4)',
)

# Coefficients after repeated refinement on noiseless data
CONVERGED_FIT = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='converged_fit',
    description='Gauss-Newton iterate at the least-squares optimum',
)

# Analytic partial derivative vs central finite difference
FINITE_DIFFERENCE = ToleranceTier(
    rtol=1e-5,
    atol=1e-7,
    name='finite_difference',
    description='Central difference with step ~ cbrt(eps) * max(1, |c|)',
)

# Pivot entries with |value| <= this are treated as zero.
# Zero keeps the exact nonzero test of classical elimination.
DEFAULT_PIVOT_TOL = 0.0


def select_tolerance(
    kind: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a kind of comparison."""
    if kind == 'solve':
        if is_ill_conditioned:
            return LINEAR_SOLVE_ILL_CONDITIONED
        return LINEAR_SOLVE
    if kind == 'fit':
        return CONVERGED_FIT
    if kind == 'derivative':
        return FINITE_DIFFERENCE
    raise ValueError(f"Unknown tolerance kind: {kind!r}")
