"""Exception types raised by glmath operations.

Misuse of an operation (mismatched operand lengths, an unsupported
vector/matrix combination) raises one of these. A singular matrix is not
an error: ``inverse`` returns ``None`` instead.
"""

from __future__ import annotations


class GLMathError(Exception):
    """Base class for all glmath errors."""


class DimensionMismatch(GLMathError, ValueError):
    """Operands of an elementwise operation have different lengths."""


class IncompatibleOperands(GLMathError, TypeError):
    """Operand shapes are not supported by the requested operation."""


class UnsupportedAxis(GLMathError, ValueError):
    """Rotation axis is not one of the three unit basis vectors."""
