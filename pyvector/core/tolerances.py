"""
Tolerance tiers and numeric configuration.

Defines the comparison tolerances used by approximate equality checks,
plus the module-level constants that configure the matrix engine:

- EXACT: bitwise float equality (collinearity default)
- DEFAULT: double-precision round-off
- LOOSE: results of truncated series (Padé exponential)

Used by the library, the test suite and Vector/Matrix isclose().
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact float equality',
)

DEFAULT = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='default',
    description='Double precision round-off',
)

LOOSE = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='loose',
    description='Truncated series approximations',
)

# Polynomial degree of the diagonal Padé approximant used by Matrix.exp/pow.
PADE_DEFAULT_DEGREE = 6

# Without scaling-and-squaring the Padé error grows like ||A||^(2k+1);
# past this 1-norm the result is flagged with a RuntimeWarning.
PADE_NORM_WARNING_THRESHOLD = 4.0

# Condition number above which Matrix.inverse warns that the result is
# dominated by round-off.
ILL_CONDITIONED_THRESHOLD = 1e12


def select_tolerance(name: str) -> ToleranceTier:
    """Look up a tolerance tier by name."""
    tiers = {tier.name: tier for tier in (EXACT, DEFAULT, LOOSE)}
    if name not in tiers:
        raise KeyError(
            f"Unknown tolerance tier {name!r}. Must be one of {sorted(tiers)}"
        )
    return tiers[name]
