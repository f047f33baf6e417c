"""
Dense matrix engine.

Matrix wraps a rectangular float64 grid. Mutating operations (add,
subtract, multiply, divide, transpose, rref, identity, zero, power, exp,
pow) replace the grid in place, update the shape and return ``self`` for
chaining. clone, minor, adjoint and inverse return new instances, and the
operators (+, -, @, *, /, **) never touch their operands.
"""

from __future__ import annotations

import math
import warnings
from numbers import Integral, Real
from typing import Any, Iterator, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from pyvector.core.exceptions import (
    DimensionError,
    DivisionByZeroError,
    InvalidArgumentError,
    SingularMatrixError,
    ValidationError,
)
from pyvector.core.tolerances import (
    DEFAULT,
    ILL_CONDITIONED_THRESHOLD,
    PADE_DEFAULT_DEGREE,
    PADE_NORM_WARNING_THRESHOLD,
    ToleranceTier,
    select_tolerance,
)
from pyvector.core.validation import (
    check_2d,
    check_array,
    check_not_empty,
    check_positive_int,
    check_scalar,
    check_square,
)
from pyvector.matrix import _cofactor
from pyvector.matrix._elimination import rank_of_reduced, row_reduce
from pyvector.matrix._pade import one_norm, pade_expm


MatrixLike = Union['Matrix', Sequence[Sequence[float]], NDArray[np.floating]]


def _is_scalar(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def as_grid(value: Any, name: str = 'matrix') -> NDArray[np.float64]:
    """
    Coerce a Matrix or a rectangular grid into a fresh 2D float64 array.

    Raises:
        ValidationError: If the grid is empty, ragged or non-numeric
    """
    if isinstance(value, Matrix):
        return value._grid.copy()
    grid = check_array(value, name)
    check_2d(grid, name)
    check_not_empty(grid, name)
    return grid


class Matrix:
    """
    Dense real matrix.

    Construction:
        Matrix([[1, 2], [3, 4]])    rectangular grid (nested sequences or 2D array)
        Matrix(3)                   3x3 grid with every cell set to 3
        Matrix(other_matrix)        copy

    Note that ``Matrix(n)`` is a scalar-filled square, not a scaled
    identity; use :meth:`Matrix.eye` for the identity.
    """

    __slots__ = ('_grid',)

    def __init__(self, matrix: MatrixLike | int):
        if isinstance(matrix, Integral) and not isinstance(matrix, bool):
            n = check_positive_int(matrix, 'matrix')
            self._grid = np.full((n, n), float(n))
        else:
            self._grid = as_grid(matrix, 'matrix')

    @classmethod
    def eye(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        n = check_positive_int(n, 'n')
        return cls(np.eye(n))

    @classmethod
    def zeros(cls, rows: int, cols: int | None = None) -> Matrix:
        """rows x cols zero matrix (square when cols is omitted)."""
        rows = check_positive_int(rows, 'rows')
        cols = rows if cols is None else check_positive_int(cols, 'cols')
        return cls(np.zeros((rows, cols)))

    # ─── read access ──────────────────────────────────────────────────

    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def cols(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def grid(self) -> NDArray[np.float64]:
        """Copy of the underlying grid."""
        return self._grid.copy()

    @property
    def T(self) -> Matrix:
        """Transposed copy."""
        return Matrix(self._grid.T)

    def tolist(self) -> list[list[float]]:
        return self._grid.tolist()

    def __getitem__(self, key):
        value = self._grid[key]
        if isinstance(value, np.ndarray):
            return value.copy()
        return float(value)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        for row in self._grid:
            yield tuple(float(v) for v in row)

    def __len__(self) -> int:
        return self.rows

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._grid, other._grid)

    __hash__ = None  # mutable

    def isclose(self, other: Any, tolerance: ToleranceTier | str = DEFAULT) -> bool:
        """Cellwise approximate equality against a Matrix or grid."""
        if isinstance(tolerance, str):
            tolerance = select_tolerance(tolerance)
        other_grid = as_grid(other, 'other')
        if other_grid.shape != self.shape:
            return False
        return bool(np.allclose(
            self._grid, other_grid, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    # ─── construction helpers ─────────────────────────────────────────

    def clone(self) -> Matrix:
        """Return an independent copy."""
        return Matrix(self)

    def zero(self) -> Matrix:
        """Set every cell to 0."""
        self._grid = np.zeros_like(self._grid)
        return self

    def identity(self) -> Matrix:
        """
        Set cells to 0, then 1 along the main diagonal.

        Only meaningful for square matrices; a rectangular matrix gets
        ones on its leading diagonal.
        """
        self._grid = np.eye(self.rows, self.cols)
        return self

    # ─── structural ───────────────────────────────────────────────────

    def transpose(self) -> Matrix:
        """Swap rows and columns in place."""
        self._grid = self._grid.T.copy()
        return self

    def rref(self, pivot_tol: float = 0.0) -> Matrix:
        """
        Reduce in place to reduced row echelon form.

        Args:
            pivot_tol: Entries with |value| <= pivot_tol are not used as
                pivots. The default only skips exact zeros.
        """
        self._grid = row_reduce(self._grid, check_scalar(pivot_tol, 'pivot_tol'))
        return self

    def reduced(self, pivot_tol: float = 0.0) -> Matrix:
        """Row-reduced copy; see :meth:`rref`."""
        return self.clone().rref(pivot_tol)

    def rank(self, tol: float = 0.0) -> int:
        """Number of non-zero rows after row reduction."""
        tol = check_scalar(tol, 'tol')
        return rank_of_reduced(row_reduce(self._grid, tol), tol)

    # ─── cofactor algebra ─────────────────────────────────────────────

    def determinant(self) -> float:
        """
        Determinant by cofactor (Laplace) expansion along the first row.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self._grid, 'matrix', 'determinant')
        return _cofactor.determinant(self._grid)

    def minor(self, i: int, j: int) -> Matrix:
        """
        New matrix with row ``i`` and column ``j`` removed.

        Raises:
            NotSquareError: If the matrix is not square
            ValidationError: If the matrix is 1x1 or an index is out of range
        """
        check_square(self._grid, 'matrix', 'minor')
        n = self.rows
        if n == 1:
            raise ValidationError("minor: a 1x1 matrix has no minors")
        for name, index in (('i', i), ('j', j)):
            if isinstance(index, bool) or not isinstance(index, Integral) or not 0 <= index < n:
                raise ValidationError(f"minor: {name}={index!r} out of range for {n}x{n} matrix")
        return Matrix(_cofactor.minor_of(self._grid, int(i), int(j)))

    def adjoint(self) -> Matrix:
        """
        Adjugate: transpose of the cofactor matrix.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self._grid, 'matrix', 'adjoint')
        return Matrix(_cofactor.adjugate(self._grid))

    def inverse(self) -> Matrix:
        """
        New matrix equal to adjoint / determinant.

        Issues a RuntimeWarning when the condition number exceeds
        ``ILL_CONDITIONED_THRESHOLD``.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If the determinant is zero
        """
        check_square(self._grid, 'matrix', 'inverse')
        det = _cofactor.determinant(self._grid)
        if det == 0.0:
            raise SingularMatrixError(
                f"inverse: {self.rows}x{self.cols} matrix is singular (determinant is 0)",
                matrix_name='matrix',
                determinant=det,
            )

        cond = float(np.linalg.cond(self._grid))
        if cond > ILL_CONDITIONED_THRESHOLD:
            warnings.warn(
                f"inverse: matrix is ill-conditioned (condition number {cond:.3g} > "
                f"{ILL_CONDITIONED_THRESHOLD:.0e}); result may be dominated by round-off",
                RuntimeWarning,
                stacklevel=2,
            )

        return Matrix(_cofactor.adjugate(self._grid) / det)

    # ─── arithmetic ───────────────────────────────────────────────────

    def _same_shape(self, other: Any, operation: str) -> NDArray[np.float64]:
        grid = as_grid(other, 'other')
        if grid.shape != self.shape:
            raise DimensionError(
                f"{operation}: shapes differ, {self.rows}x{self.cols} vs "
                f"{grid.shape[0]}x{grid.shape[1]}"
            )
        return grid

    def add(self, other: MatrixLike) -> Matrix:
        """Cellwise sum with an equal-shape matrix."""
        self._grid = self._grid + self._same_shape(other, 'add')
        return self

    def subtract(self, other: MatrixLike) -> Matrix:
        """Cellwise difference with an equal-shape matrix."""
        self._grid = self._grid - self._same_shape(other, 'subtract')
        return self

    def sub(self, other: MatrixLike) -> Matrix:
        """Alias for :meth:`subtract`."""
        return self.subtract(other)

    def multiply(self, other: MatrixLike | float) -> Matrix:
        """
        Matrix product ``self @ other``, or scaling by a number.

        The product of an r x c matrix with a c x k matrix is r x k.

        Raises:
            DimensionError: If self.cols != other.rows
        """
        if _is_scalar(other):
            self._grid = self._grid * float(other)
            return self

        grid = as_grid(other, 'other')
        if self.cols != grid.shape[0]:
            raise DimensionError(
                f"multiply: cannot multiply {self.rows}x{self.cols} by "
                f"{grid.shape[0]}x{grid.shape[1]}, inner dimensions differ"
            )
        self._grid = self._grid @ grid
        return self

    def divide(self, other: MatrixLike | float, elementwise: bool = False) -> Matrix:
        """
        Divide by a number or a matrix.

        A matrix divisor is interpreted as ``self @ other^-1`` unless
        ``elementwise=True``, in which case equal-shape grids are divided
        cell by cell.

        Raises:
            DivisionByZeroError: On a zero scalar or a zero cell (elementwise)
            DimensionError: If the shapes are incompatible
            NotSquareError: If the divisor is not square (matrix inverse)
            SingularMatrixError: If the divisor is singular (matrix inverse)
        """
        if _is_scalar(other):
            if other == 0:
                raise DivisionByZeroError("divide: division by zero scalar")
            self._grid = self._grid / float(other)
            return self

        if elementwise:
            grid = self._same_shape(other, 'divide')
            if np.any(grid == 0.0):
                raise DivisionByZeroError("divide: divisor has zero cells")
            self._grid = self._grid / grid
            return self

        return self.multiply(Matrix(other).inverse())

    def div(self, other: MatrixLike | float, elementwise: bool = False) -> Matrix:
        """Alias for :meth:`divide`."""
        return self.divide(other, elementwise)

    def power(self, n: int) -> Matrix:
        """
        Integer power by repeated multiplication.

        ``n == 0`` gives the identity; negative ``n`` raises the inverse.

        Raises:
            NotSquareError: If the matrix is not square
            InvalidArgumentError: If n is not an integer
        """
        check_square(self._grid, 'matrix', 'power')
        if isinstance(n, bool) or not isinstance(n, Integral):
            raise InvalidArgumentError(
                f"n: expected an integer exponent, got {type(n).__name__}",
                name='n',
                value=n,
            )

        base = self._grid if n >= 0 else self.inverse()._grid
        result = np.eye(self.rows)
        for _ in range(abs(int(n))):
            result = result @ base
        self._grid = result
        return self

    # ─── exponential ──────────────────────────────────────────────────

    def _apply_exp(self, a: NDArray[np.float64], degree: int) -> None:
        norm = one_norm(a)
        if norm > PADE_NORM_WARNING_THRESHOLD:
            warnings.warn(
                f"exp: ||A||_1 = {norm:.3g} exceeds {PADE_NORM_WARNING_THRESHOLD}; "
                f"the degree-{degree} Padé approximant may be inaccurate",
                RuntimeWarning,
                stacklevel=3,
            )
        self._grid = pade_expm(a, degree)

    def exp(self, degree: int = PADE_DEFAULT_DEGREE) -> Matrix:
        """
        Replace A with an approximation of e^A.

        Uses the diagonal Padé approximant Q_k(A)^-1 P_k(A) of degree k.

        Raises:
            NotSquareError: If the matrix is not square
            InvalidArgumentError: If degree is not a positive integer
        """
        check_square(self._grid, 'matrix', 'exp')
        degree = check_positive_int(degree, 'degree')
        self._apply_exp(self._grid, degree)
        return self

    def pow(self, base: float, degree: int = PADE_DEFAULT_DEGREE) -> Matrix:
        """
        Replace A with base^A = e^(ln(base) * A).

        Raises:
            NotSquareError: If the matrix is not square
            InvalidArgumentError: If base <= 0 or degree is not a positive integer
        """
        check_square(self._grid, 'matrix', 'pow')
        base = check_scalar(base, 'base')
        if base <= 0.0:
            raise InvalidArgumentError(
                f"base: must be > 0, got {base}", name='base', value=base
            )
        degree = check_positive_int(degree, 'degree')
        self._apply_exp(math.log(base) * self._grid, degree)
        return self

    # ─── views as vectors ─────────────────────────────────────────────

    def col(self) -> list:
        """Columns as vectors of dimension ``rows`` (Vec1/Vec2/Vec3/VecN)."""
        from pyvector.transform import vector_from_components

        return [vector_from_components(self._grid[:, j]) for j in range(self.cols)]

    def range(self) -> list:
        """Rows as vectors of dimension ``cols`` (Vec1/Vec2/Vec3/VecN)."""
        from pyvector.transform import vector_from_components

        return [vector_from_components(self._grid[i, :]) for i in range(self.rows)]

    # ─── non-mutating operators ───────────────────────────────────────

    def __add__(self, other: Any) -> Matrix:
        return self.clone().add(other)

    def __sub__(self, other: Any) -> Matrix:
        return self.clone().subtract(other)

    def __neg__(self) -> Matrix:
        return self.clone().multiply(-1.0)

    def __mul__(self, other: Any) -> Matrix:
        if not _is_scalar(other):
            return NotImplemented
        return self.clone().multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Matrix:
        return self.clone().divide(other)

    def __matmul__(self, other: Any):
        from pyvector.vector import BaseVector

        if isinstance(other, BaseVector):
            from pyvector.transform import apply_transform

            return apply_transform(other, self)
        return self.clone().multiply(as_grid(other, 'other'))

    def __rmatmul__(self, other: Any) -> Matrix:
        return Matrix(other).multiply(self)

    def __pow__(self, n: int) -> Matrix:
        return self.clone().power(n)


def expm(matrix: MatrixLike, degree: int = PADE_DEFAULT_DEGREE) -> Matrix:
    """Padé approximation of e^A as a new Matrix; ``matrix`` is not modified."""
    return Matrix(matrix).exp(degree)


def powm(matrix: MatrixLike, base: float, degree: int = PADE_DEFAULT_DEGREE) -> Matrix:
    """base^A as a new Matrix; ``matrix`` is not modified."""
    return Matrix(matrix).pow(base, degree)
