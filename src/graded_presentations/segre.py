# src/graded_presentations/segre.py
"""
Segre product of two unigraded algebras.

For R with generators of degrees d_1..d_m and S with generators of degrees
e_1..e_n, the Segre product is the part of R ⊗ S where the R-degree equals
the S-degree. Its monomials are exactly the exponent vectors v >= 0 with

    d_1 v_1 + ... + d_m v_m - e_1 v_{m+1} - ... - e_n v_{m+n} = 0,

so the Hilbert basis of that cone gives a generating set of monomials, one
ambient variable s_k per basis vector.
"""
import logging

from .errors import ConsistencyError
from .presentation import assemble_presentation
from .validation import require_graded, shared_field, unigraded_degrees

logger = logging.getLogger(__name__)


def weight_vector(degrees_r, degrees_s):
    """(d_1, ..., d_m, -e_1, ..., -e_n)."""
    return tuple(int(d) for d in degrees_r) + tuple(-int(e) for e in degrees_s)


def _identity(size):
    return tuple(tuple(1 if i == j else 0 for j in range(size)) for i in range(size))


def _pairing(weights, v):
    return sum(w * c for w, c in zip(weights, v))


def segre_cone(weights, engine):
    """The cone {v : v >= 0, weights · v = 0}."""
    return engine.build_cone_from_inequalities(_identity(len(weights)), [weights])


def segre_hilbert_basis(weights, engine):
    """
    Hilbert basis of :func:`segre_cone`, as a tuple of exponent tuples.

    Raises
    ------
    ConsistencyError
        If the engine returns a vector of the wrong length, with a negative
        entry, or off the hyperplane ``weights · v = 0``.
    """
    weights = tuple(weights)
    basis = tuple(tuple(int(c) for c in v)
                  for v in engine.hilbert_basis(segre_cone(weights, engine)))
    for v in basis:
        if len(v) != len(weights) or min(v) < 0 or _pairing(weights, v) != 0:
            raise ConsistencyError(
                f"Hilbert basis vector {v} does not lie in the cone of weights {weights}")
    return basis


def hilbert_basis_to_monomials(basis, tensor_generators, expected):
    """
    Turn each exponent vector v into  ∏ tensor_generators[i] ** v[i].

    Parameters
    ----------
    basis : sequence of tuple of int
    tensor_generators : sequence of ring elements
        Generators of R ⊗ S: R's first, then S's.
    expected : int
        m + n. A different generator count means the tensor ring was built
        wrongly and the exponents cannot be trusted.

    Returns
    -------
    tuple
        One monomial per basis vector, in basis order.
    """
    gens = tuple(tensor_generators)
    if len(gens) != expected:
        raise ConsistencyError(
            f"tensor ring has {len(gens)} generators, expected {expected}")
    monomials = []
    for v in basis:
        if len(v) != expected:
            raise ConsistencyError(f"exponent vector {tuple(v)} has length {len(v)}, expected {expected}")
        mono = gens[0] ** 0
        for g, e in zip(gens, v):
            if e:
                mono = mono * g ** e
        monomials.append(mono)
    return tuple(monomials)


def segre_presentation(R, S, engine=None):
    """
    Presentation of the Segre product of R and S.

    Parameters
    ----------
    R, S : graded polynomial rings or quotients, same coefficient field
    engine : algebra engine, optional
        Defaults to :class:`~graded_presentations.engine.SageEngine`.

    Returns
    -------
    Presentation
        ``map: K[s1..sl] -> R ⊗ S`` and ``ring = K[s1..sl] / ker(map)``,
        where l is the size of the Hilbert basis. ``s_k`` has the R-degree
        of its monomial. When R or S has no generators the Segre product is
        K itself: l = 0 and the relations are the zero ideal.

    Raises
    ------
    InputValidationError
        Before any cone work, if either ring is not graded, the fields
        differ, or a degree is not a single positive integer.
    """
    if engine is None:
        from .engine import SageEngine
        engine = SageEngine()

    require_graded(R, engine, "R")
    require_graded(S, engine, "S")
    K = shared_field(R, S, engine)
    degrees_r = unigraded_degrees(R, engine, "R")
    degrees_s = unigraded_degrees(S, engine, "S")
    R, S = engine.normalize(R), engine.normalize(S)

    m, n = len(degrees_r), len(degrees_s)
    weights = weight_vector(degrees_r, degrees_s)
    logger.info("Segre product: m=%d, n=%d, weights=%s", m, n, weights)

    if m and n:
        basis = segre_hilbert_basis(weights, engine)
    else:
        # only v = 0 balances a one-sided weight vector
        basis = ()
    T = engine.tensor_product(R, S)
    monomials = hilbert_basis_to_monomials(basis, engine.generators(T), m + n)

    ambient_degrees = [_pairing(weights[:m], v[:m]) for v in basis]
    ambient = engine.polynomial_ring(K, len(basis), 's', ambient_degrees)
    return assemble_presentation(ambient, T, monomials, engine, exponents=basis)
