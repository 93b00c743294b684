# src/graded_presentations/errors.py
"""
Exceptions raised by the Segre / Veronese constructions.

Failures inside Sage itself (a kernel that cannot be computed, a cone
Sage refuses to build, ...) are not wrapped: they reach the caller as
whatever Sage raised.
"""


class PresentationError(Exception):
    """Base class for everything raised by graded_presentations."""


class InputValidationError(PresentationError, ValueError):
    """
    The caller handed us something we cannot work with: a ring that is not
    a graded polynomial ring or quotient, rings over different fields,
    degrees that are not single positive integers, a bad Veronese index n,
    or an empty list for the product enumerator.
    """


class ConsistencyError(PresentationError, RuntimeError):
    """
    An internal invariant broke, e.g. the tensor ring does not have m+n
    generators or a Hilbert basis vector is not degree-balanced. Points at
    the algebra engine, never at user input.
    """
