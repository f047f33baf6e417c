"""
Span and collinearity.

``span`` describes the subspace generated by a vector or by the columns of
a matrix. ``collinear`` tests whether a vector lies along a span, by
comparing component ratios rather than solving a linear system.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pyvector.core.exceptions import ValidationError
from pyvector.core.tolerances import EXACT, ToleranceTier, select_tolerance
from pyvector.matrix.matrix import Matrix
from pyvector.vector import BaseVector, VecN, as_components


@dataclass(frozen=True)
class Span:
    """
    Result of :func:`span`.

    Attributes:
        basis: Generating vectors (matrix columns, or the single vector)
        dimension: Number of generating vectors
    """
    basis: tuple[BaseVector, ...]
    dimension: int

    def __iter__(self):
        return iter(self.basis)

    def __len__(self) -> int:
        return len(self.basis)


def span(value: Matrix | Any) -> Span:
    """
    Span of a matrix or a vector.

    A Matrix spans its columns; the basis holds ``cols`` vectors of
    dimension ``rows`` and ``dimension == cols``. Anything vector-like
    spans the line through it: ``Span((VecN(value),), 1)``.

    The basis is not reduced; dependent columns are kept as given.
    """
    if isinstance(value, Matrix):
        return Span(basis=tuple(value.col()), dimension=value.cols)
    return Span(basis=(VecN(value),), dimension=1)


def _span_components(value: Span | Any) -> np.ndarray:
    if isinstance(value, Span):
        lengths = {b.dimension for b in value.basis}
        if len(lengths) != 1:
            raise ValidationError(
                f"span: basis vectors have inconsistent dimensions {sorted(lengths)}"
            )
        return np.sum([b.components for b in value.basis], axis=0)
    return as_components(value, 'span')


def collinear(
    span_or_vector: Span | Any,
    v: Any,
    tolerance: ToleranceTier | str = EXACT,
) -> bool:
    """
    Whether ``v`` is collinear with a vector, or lies along a span.

    A Span is reduced to the sum of its basis vectors first.

    Rules:
        - different dimensions: False
        - ``v`` is the zero vector: False
        - the span is the zero vector: True
        - otherwise the ratio span[i] / v[i] at the first non-zero
          component of ``v`` must be shared by every other component;
          where v[i] == 0, span[i] must be 0 as well

    Args:
        span_or_vector: Span, vector, or vector-like value
        v: Vector-like value to test
        tolerance: Comparison tier for the ratios; EXACT by default

    Returns:
        bool
    """
    if isinstance(tolerance, str):
        tolerance = select_tolerance(tolerance)

    s = _span_components(span_or_vector)
    u = as_components(v, 'v')

    if s.shape != u.shape:
        return False
    if not np.any(u != 0.0):
        return False
    if not np.any(s != 0.0):
        return True

    index = int(np.flatnonzero(u)[0])
    ratio = s[index] / u[index]

    for i in range(u.shape[0]):
        if i == index:
            continue
        if u[i] == 0.0:
            if abs(s[i]) > tolerance.atol:
                return False
            continue
        if not np.isclose(s[i] / u[i], ratio, rtol=tolerance.rtol, atol=tolerance.atol):
            return False

    return True
