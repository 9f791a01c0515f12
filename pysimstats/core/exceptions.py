"""
Exception hierarchy for PySimStats.

All exceptions inherit from PySimStatsError to allow catching any
library-specific error. Every failure the library raises is an input
problem the caller can correct, so the hierarchy is shallow.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
    - Exceptions raised by user-supplied trial or statistic functions
      are not wrapped; they reach the caller unchanged
"""


class PySimStatsError(Exception):
    """Base exception for all PySimStats errors."""
    pass


class InvalidInputError(PySimStatsError):
    """
    Input validation failed.

    Raised for empty datasets, non-positive counts, probabilities
    outside (0, 1), out-of-domain distribution parameters, and trial
    functions that do not return a scalar.

    Attributes:
        parameter: Name of the offending parameter, if known
        value: The rejected value, if known
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class DimensionError(InvalidInputError):
    """
    Array dimensions are incorrect.

    Raised when an array does not have the number of dimensions an
    operation requires (e.g. a 2D array passed where a 1D sample is
    expected).
    """
    pass
