# src/graded_presentations/veronese.py
"""
n-th Veronese subring R^(n) = ⊕_k R_{kn}.

Generators are searched degree block by degree block (n, 2n, ..., s·n with
s = lcm(n, deg g_1, ..., deg g_r) / n). In each block the engine hands us a
spanning set of R_{in}; an element is kept only if it cannot already be
produced from the generators accepted so far.
"""
import logging

from .errors import ConsistencyError, InputValidationError
from .presentation import assemble_presentation
from .products import degree_bounded_products
from .validation import require_graded, require_positive_integer, unigraded_degrees

logger = logging.getLogger(__name__)

STRATEGIES = ("products", "linear")


def veronese_period(degrees, n, engine):
    """
    Number of degree blocks to scan: s = lcm(n, d_1, ..., d_r) / n.

    Past degree lcm(...) every graded piece of R^(n) is spanned by products
    of lower blocks, so no new generators can appear.
    """
    n = require_positive_integer(n, "n")
    m = int(engine.lcm([n] + [int(d) for d in degrees]))
    return m // n


# -----------------------------------------------------------------------------
# Redundancy tests
# -----------------------------------------------------------------------------

def _is_product(element, degree, accepted, accepted_degrees):
    return any(p == element
               for p in degree_bounded_products(accepted, accepted_degrees, degree))


def _in_product_span(ring, element, degree, accepted, accepted_degrees, engine):
    rows = [engine.coordinates(ring, p, degree)
            for p in degree_bounded_products(accepted, accepted_degrees, degree)]
    before = engine.rank(engine.coefficient_field(ring), rows)
    rows.append(engine.coordinates(ring, element, degree))
    return engine.rank(engine.coefficient_field(ring), rows) == before


def select_generators(ring, n, blocks, engine, strategy="products"):
    """
    Greedy minimal generating set of R^(n).

    Parameters
    ----------
    ring : graded ring
    n : positive int
    blocks : positive int
        Scan degrees n, 2n, ..., blocks·n (see :func:`veronese_period`).
    engine : algebra engine
    strategy : {"products", "linear"}
        "products": drop a spanning element when it equals some product of
        accepted generators of the same degree.
        "linear": drop it when it lies in the linear span of those products.
        The second also catches elements that are sums of products.

    Returns
    -------
    tuple
        Accepted generators, in acceptance order. Every one has degree
        divisible by n.
    """
    if strategy not in STRATEGIES:
        raise InputValidationError(f"unknown strategy {strategy!r}; expected one of {STRATEGIES}")
    n = require_positive_integer(n, "n")
    blocks = require_positive_integer(blocks, "number of degree blocks")

    accepted = []
    accepted_degrees = []
    for i in range(1, blocks + 1):
        spanning = engine.basis_of_graded_piece(ring, i * n)
        logger.debug("degree %d: %d spanning elements", i * n, len(spanning))
        for e in spanning:
            d = tuple(engine.degree(e))
            if d != (i * n,):
                raise ConsistencyError(
                    f"graded piece of degree {i * n} returned {e} of degree {d}")
            d = d[0]
            if accepted:
                if strategy == "products":
                    redundant = _is_product(e, d, accepted, accepted_degrees)
                else:
                    redundant = _in_product_span(ring, e, d, accepted, accepted_degrees, engine)
                if redundant:
                    continue
            accepted.append(e)
            accepted_degrees.append(d)
    logger.info("Veronese generators: %d accepted over %d block(s)", len(accepted), blocks)
    return tuple(accepted)


def veronese_presentation(R, n, engine=None, strategy="products"):
    """
    Presentation of the n-th Veronese subring of R.

    Parameters
    ----------
    R : graded polynomial ring or quotient
    n : positive int
    engine : algebra engine, optional
        Defaults to :class:`~graded_presentations.engine.SageEngine`.
    strategy : {"products", "linear"}
        Passed to :func:`select_generators`.

    Returns
    -------
    Presentation or R
        ``map: K[x1..xc] -> R`` with ``x_i`` sent to the i-th selected
        generator and graded by ``deg / n``, and ``ring = K[x1..xc] / ker``.
        When R has no generators, R itself is returned. A univariate R
        (K[x] or K[x]/(f)) is replaced by its multivariate form, which is
        then the codomain of ``map``.

    Raises
    ------
    InputValidationError
        If n is not a positive integer (checked first, before touching R),
        R is not graded, or a degree is not a single positive integer.
    """
    n = require_positive_integer(n, "n")
    if engine is None:
        from .engine import SageEngine
        engine = SageEngine()

    require_graded(R, engine, "R")
    degrees = unigraded_degrees(R, engine, "R")
    if not degrees:
        logger.info("R has no generators; its Veronese subring is R itself")
        return R
    R = engine.normalize(R)

    blocks = veronese_period(degrees, n, engine)
    logger.info("Veronese subring: n=%d, degrees=%s, blocks=%d", n, degrees, blocks)
    gens = select_generators(R, n, blocks, engine, strategy=strategy)

    ambient_degrees = [engine.degree(g)[0] // n for g in gens]
    K = engine.coefficient_field(R)
    ambient = engine.polynomial_ring(K, len(gens), 'x', ambient_degrees)
    return assemble_presentation(ambient, R, gens, engine)
