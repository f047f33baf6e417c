"""
Exception hierarchy for pyvector.

All exceptions inherit from PyVectorError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyVectorError(Exception):
    """Base exception for all pyvector errors."""
    pass


class ValidationError(PyVectorError):
    """
    Input validation failed.

    Raised when a constructor argument or vector-like operand is malformed:
    wrong type, non-numeric, missing named axes, ragged grid.
    """
    pass


class DimensionError(ValidationError):
    """
    Vector or matrix dimensions are incompatible.

    Raised when a binary operation combines operands of different sizes,
    or when a vector-like input does not match the target dimension.
    """
    pass


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: (rows, cols) of the offending matrix
        operation: Name of the operation that was attempted
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.operation = operation


class InvalidArgumentError(ValidationError):
    """
    A scalar argument is outside its valid domain.

    Attributes:
        name: Parameter name
        value: The rejected value
    """

    def __init__(self, message: str, name: str | None = None, value=None):
        super().__init__(message)
        self.name = name
        self.value = value


class NumericalError(PyVectorError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility but the
    determinant is zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed, if available
        condition_number: Estimated condition number, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        condition_number: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.condition_number = condition_number


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    Division by zero, or a zero-magnitude operand where a direction is required.

    Raised by scalar division, angle queries (between) and projections
    whose geometry is undefined for the zero vector.
    """
    pass
