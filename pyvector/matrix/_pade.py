"""
Diagonal Padé approximation of the matrix exponential.

    e^A ≈ Q_k(A)^-1 P_k(A)

    P_k(A) = sum_{j=0..k} c_j A^j
    Q_k(A) = P_k(-A)
    c_j    = (2k - j)! k! / ((2k)! j! (k - j)!)

For k = 1 this is (I - A/2)^-1 (I + A/2). No scaling-and-squaring is
applied, so accuracy degrades as ||A|| grows; callers are expected to
warn about large norms.
"""

from math import factorial

import numpy as np
from numpy.typing import NDArray
from scipy import linalg

from pyvector.core.exceptions import SingularMatrixError


def pade_coefficients(degree: int) -> list[float]:
    """Coefficients c_0..c_k of the (k, k) Padé approximant to e^x."""
    k = degree
    return [
        factorial(2 * k - j) * factorial(k)
        / (factorial(2 * k) * factorial(j) * factorial(k - j))
        for j in range(k + 1)
    ]


def pade_expm(a: NDArray[np.float64], degree: int) -> NDArray[np.float64]:
    """
    Approximate e^A with a diagonal Padé approximant of the given degree.

    Args:
        a: Square matrix
        degree: Polynomial degree k >= 1

    Returns:
        New array approximating the matrix exponential

    Raises:
        SingularMatrixError: If the denominator Q_k(A) is singular
    """
    n = a.shape[0]
    power = np.eye(n)
    numer = np.zeros((n, n))
    denom = np.zeros((n, n))

    for j, c in enumerate(pade_coefficients(degree)):
        if j > 0:
            power = power @ a
        term = c * power
        numer += term
        denom += term if j % 2 == 0 else -term

    try:
        return linalg.solve(denom, numer)
    except linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"Padé denominator Q_{degree}(A) is singular: {e}",
            matrix_name=f"Q_{degree}(A)",
        ) from e


def one_norm(a: NDArray[np.float64]) -> float:
    """Maximum absolute column sum."""
    return float(np.abs(a).sum(axis=0).max())
