# src/graded_presentations/validation.py
"""
Input checks shared by the Segre and Veronese pipelines.

Only ring-type inspection is done here (is it graded, which field, which
generators, which degrees); nothing in this module asks the engine for
cones, kernels or graded pieces.
"""
from numbers import Integral

from .errors import InputValidationError


def require_positive_integer(value, what):
    """Return ``int(value)`` or raise InputValidationError if it is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InputValidationError(f"{what} must be a positive integer, got {value!r}")
    if value <= 0:
        raise InputValidationError(f"{what} must be a positive integer, got {value}")
    return int(value)


def require_graded(ring, engine, label="ring"):
    if not engine.is_graded_quotient_or_polynomial_ring(ring):
        raise InputValidationError(
            f"{label} must be a graded polynomial ring over a field or a quotient "
            f"of one by a homogeneous ideal, got {ring!r}")


def unigraded_degrees(ring, engine, label="ring"):
    """
    Degrees of the generators of ``ring``, one positive integer each.

    Parameters
    ----------
    ring : graded ring handle
    engine : algebra engine
    label : str
        Used in error messages ("R", "S", ...).

    Returns
    -------
    tuple of int
        ``deg(g_1), ..., deg(g_r)`` in generator order. For a quotient these
        are the degrees of the polynomial-ring variables, so a generator
        that is zero in the quotient still has its degree.
    """
    degrees = []
    for idx, deg in enumerate(engine.generator_degrees(ring)):
        deg = tuple(deg)
        if len(deg) != 1:
            raise InputValidationError(
                f"generator {idx} of {label} has degree {deg}; only single-integer "
                "(unigraded) degrees are supported")
        degrees.append(require_positive_integer(deg[0], f"degree of generator {idx} of {label}"))
    return tuple(degrees)


def shared_field(R, S, engine):
    """The common coefficient field of R and S; InputValidationError if they differ."""
    K = engine.coefficient_field(R)
    L = engine.coefficient_field(S)
    if K != L:
        raise InputValidationError(
            f"R and S must have the same coefficient field, got {K} and {L}")
    return K
