"""Exception taxonomy for numlab.

Every exception derives from :class:`NumericalError` and from the builtin
exception a caller would naturally catch, so ``except ValueError`` keeps
working for malformed arguments.
"""

from __future__ import annotations

from typing import Optional


class NumericalError(Exception):
    """Base class for all errors raised by numlab."""


class InvalidInput(NumericalError, ValueError):
    """Malformed arguments: mismatched lengths, degenerate interval, bad tolerance."""


class PreconditionViolation(NumericalError, ValueError):
    """A domain precondition does not hold before iterating."""


class SingularPivot(NumericalError, ZeroDivisionError):
    """A diagonal entry is too small to divide by."""

    def __init__(self, row: int, pivot: float) -> None:
        self.row = int(row)
        self.pivot = float(pivot)
        super().__init__(f"Diagonal element A[{self.row}][{self.row}] = {self.pivot!r} is (near) zero.")


class DerivativeTooSmall(NumericalError, ZeroDivisionError):
    """Newton's method hit an iterate where the derivative nearly vanishes."""

    def __init__(self, x: float, derivative: float) -> None:
        self.x = float(x)
        self.derivative = float(derivative)
        super().__init__(f"Derivative {self.derivative!r} at x = {self.x!r} is too small.")


class NotConverged(NumericalError, RuntimeError):
    """Iteration budget exhausted without meeting the tolerance.

    Attributes:
        value: Last estimate computed before giving up.
        error: Error estimate of ``value``.
        nit: Number of iterations performed.
    """

    def __init__(
        self,
        message: str,
        value: float,
        error: float,
        nit: Optional[int] = None,
    ) -> None:
        self.value = float(value)
        self.error = float(error)
        self.nit = nit
        super().__init__(message)


__all__ = [
    "DerivativeTooSmall",
    "InvalidInput",
    "NotConverged",
    "NumericalError",
    "PreconditionViolation",
    "SingularPivot",
]
