"""Exception hierarchy for SciCalc.

``InvalidArgument`` covers structurally invalid input and is raised before
any work is done. Numerically degenerate or out-of-range inputs are not
exceptions; they come back as an :class:`~scicalc.core.outcome.Outcome`.
The two ``*Error`` classes below are raised only when a caller unwraps an
absent outcome.
"""


class ScicalcError(Exception):
    """Base class for all SciCalc errors."""


class InvalidArgument(ScicalcError, ValueError):
    """Raised when input is structurally invalid (empty, mismatched, out of domain)."""


class NotSquare(InvalidArgument):
    """Raised when an operation requires a square matrix."""


class NoResultError(ScicalcError):
    """Raised when unwrapping an outcome for which no result exists."""


class UnsupportedError(ScicalcError):
    """Raised when unwrapping an outcome outside the algorithm's designed range."""
