"""Exception hierarchy for sofajax.

The numerical routines are total over finite inputs and never raise.
Exceptions are confined to the caller-facing seams: model and method
selection, and precision configuration.
"""

from __future__ import annotations


class SofaError(Exception):
    """Base class for all sofajax errors."""


class IllegalParameterError(SofaError, ValueError):
    """An identifier or option passed by the caller is not recognised.

    Raised for unknown precession-nutation model names, unknown
    transformation methods and unsupported float dtypes.
    """


class InternalError(SofaError, RuntimeError):
    """The library detected an inconsistency in its own state."""
