# src/graded_presentations/products.py
"""
Degree-bounded product enumeration.

Given homogeneous elements L[0..k-1] of degrees d_0..d_{k-1} and a target
degree t, walk every exponent tuple e with  Σ e_i·d_i = t  and produce the
product  ∏ L[i]^e_i.  Used as the redundancy oracle of the Veronese
generator search.
"""
import operator
from functools import reduce

from .errors import InputValidationError
from .validation import require_positive_integer


def _checked_degrees(degrees):
    degrees = tuple(degrees)
    if not degrees:
        raise InputValidationError("cannot enumerate products of an empty list")
    return tuple(require_positive_integer(d, f"degree {i}") for i, d in enumerate(degrees))


def _extend(degrees, i, prefix, remaining):
    # depth-first: index i, exponent 0..floor(remaining / d_i)
    if i == len(degrees):
        if remaining == 0:
            yield prefix
        return
    top = remaining // degrees[i]
    for e in range(top + 1):
        yield from _extend(degrees, i + 1, prefix + (e,), remaining - e * degrees[i])


def degree_bounded_exponents(degrees, target):
    """
    All exponent tuples of total weighted degree ``target``.

    Parameters
    ----------
    degrees : sequence of positive int
    target : positive int

    Returns
    -------
    iterator of tuple of int
        Tuples ``(e_0, ..., e_{k-1})`` with ``Σ e_i·degrees[i] == target``,
        ordered by index then ascending exponent. Each call returns a fresh
        iterator.

    Raises
    ------
    InputValidationError
        Immediately (not on first ``next``) for an empty ``degrees``, a
        non-positive degree, or a non-positive / non-integer target.
    """
    degrees = _checked_degrees(degrees)
    target = require_positive_integer(target, "target degree")
    return _extend(degrees, 0, (), target)


def _power_product(elements, exponents):
    factors = [elements[i] ** e for i, e in enumerate(exponents) if e]
    return reduce(operator.mul, factors)


def degree_bounded_products(elements, degrees, target):
    """
    Products ``∏ elements[i]^e_i`` for every exponent tuple of
    :func:`degree_bounded_exponents`, in the same order.

    Distinct tuples may give equal ring elements; nothing is deduplicated
    by value.
    """
    elements = tuple(elements)
    degrees = _checked_degrees(degrees)
    if len(elements) != len(degrees):
        raise InputValidationError(
            f"got {len(elements)} elements but {len(degrees)} degrees")
    exponents = degree_bounded_exponents(degrees, target)
    return (_power_product(elements, e) for e in exponents)
