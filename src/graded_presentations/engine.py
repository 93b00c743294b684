# src/graded_presentations/engine.py
"""
Sage-backed algebra engine.

Everything that needs real symbolic algebra lives here: ring construction,
degrees, tensor products, cones and their Hilbert bases, ring maps,
kernels, quotients and bases of graded pieces. The Segre / Veronese code
only talks to an engine object, so tests can swap in a recording fake.

Gradings are carried by the term order: a ring graded by (d_1, ..., d_r)
uses TermOrder('wdegrevlex', (d_1, ..., d_r)), and Sage's ``degree()`` then
returns the weighted degree.
"""
import logging

from sage.all import (
    Cone,
    PolynomialRing,
    Polyhedron,
    TermOrder,
    WeightedIntegerVectors,
    ZZ,
    lcm,
    matrix,
    sage_eval,
)
from sage.rings.polynomial.multi_polynomial_ring_base import MPolynomialRing_base
from sage.rings.polynomial.polynomial_element import Polynomial
from sage.rings.polynomial.polynomial_quotient_ring import PolynomialQuotientRing_generic
from sage.rings.quotient_ring import QuotientRing_nc

from .errors import InputValidationError

logger = logging.getLogger(__name__)


def graded_polynomial_ring(field, names, degrees=None):
    """
    K[names] graded by ``degrees`` (all 1 when omitted). Always the
    multivariate implementation, even for a single variable.
    """
    names = list(names)
    if not names:
        return PolynomialRing(field, 0, [])
    if degrees is None:
        degrees = [1] * len(names)
    return PolynomialRing(field, len(names), names,
                          order=TermOrder('wdegrevlex', tuple(int(d) for d in degrees)))


def graded_ring(field, names, degrees=None, relations=()):
    """
    Build a graded algebra K[names] / (relations).

    Parameters
    ----------
    field : Sage field (QQ, GF(p), ...)
    names : sequence of str
        Variable names, in generator order.
    degrees : sequence of positive int, optional
        Degree of each variable. Defaults to the standard grading.
    relations : sequence of str or polynomials
        Homogeneous relations; strings are parsed by Sage in the
        polynomial ring.

    Returns
    -------
    The polynomial ring itself when there are no relations, otherwise its
    quotient by the ideal they generate.
    """
    P = graded_polynomial_ring(field, names, degrees)
    rels = [P(r) for r in relations]
    if not rels:
        return P
    return P.quotient(P.ideal(rels))


def parse_field(text):
    """Evaluate a Sage field expression such as "QQ" or "GF(7)"."""
    try:
        K = sage_eval(text)
    except Exception as e:
        raise InputValidationError(f"Could not parse field: {text!r}") from e
    if not (hasattr(K, "is_field") and K.is_field()):
        raise InputValidationError(f"{text!r} is not a field")
    return K


def parse_ring_spec(spec, field):
    """
    Parse ``"x:1,y:2; x^3 - y^2"`` into a graded ring over ``field``.

    Variables are comma-separated, each with an optional ``:degree``
    (default 1). Relations follow, separated by ``;``.

    Examples
    --------
    "x,y"                → K[x,y], standard grading
    "x:2,y:3"            → K[x,y] with deg x = 2, deg y = 3
    "x,y,z; x*z - y^2"   → K[x,y,z] / (xz - y²)
    """
    head, _, tail = spec.partition(';')
    names, degrees = [], []
    for tok in head.split(','):
        tok = tok.strip()
        if not tok:
            continue
        name, sep, deg = tok.partition(':')
        try:
            d = int(deg) if sep else 1
        except ValueError as e:
            raise InputValidationError(f"Bad degree in {tok!r}") from e
        if d <= 0:
            raise InputValidationError(f"Degree of {name.strip()} must be positive, got {d}")
        names.append(name.strip())
        degrees.append(d)
    if not names:
        raise InputValidationError(f"No variables in ring spec {spec!r}")

    P = graded_polynomial_ring(field, names, degrees)
    rels = []
    for text in tail.split(';'):
        if not text.strip():
            continue
        try:
            rels.append(P(text.strip()))
        except Exception as e:
            raise InputValidationError(f"Could not parse relation: {text.strip()!r}") from e
    if not rels:
        return P
    return P.quotient(P.ideal(rels))


class SageEngine:
    """The algebra operations the Segre / Veronese constructions delegate."""

    # -------------------------------------------------------------------------
    # Ring inspection
    # -------------------------------------------------------------------------

    @staticmethod
    def _is_quotient(ring):
        return isinstance(ring, QuotientRing_nc)

    @staticmethod
    def _is_univariate(ring):
        if isinstance(ring, PolynomialQuotientRing_generic):
            return True
        if isinstance(ring, MPolynomialRing_base):
            return False
        try:
            return ring.ngens() == 1 and isinstance(ring.gen(), Polynomial)
        except (AttributeError, NotImplementedError):
            return False

    def normalize(self, ring):
        """
        Multivariate form of ``ring``.

        K[x] becomes the one-variable multivariate ring K[x] (standard
        grading), and K[x]/(f) its quotient by f. Any other ring is returned
        unchanged.
        """
        if not self._is_univariate(ring):
            return ring
        if isinstance(ring, PolynomialQuotientRing_generic):
            cover, modulus = ring.polynomial_ring(), ring.modulus()
        else:
            cover, modulus = ring, None
        P = graded_polynomial_ring(cover.base_ring(), [cover.variable_name()])
        if modulus is None or modulus == 0:
            return P
        f = P({(e,): c for e, c in modulus.dict().items()})
        return P.quotient(P.ideal([f]))

    def _cover(self, ring):
        return ring.cover_ring() if self._is_quotient(ring) else ring

    def _lift(self, element):
        return element.lift() if self._is_quotient(element.parent()) else element

    def _relations(self, ring):
        if not self._is_quotient(ring):
            return []
        return [f for f in ring.defining_ideal().gens() if f != 0]

    def is_graded_quotient_or_polynomial_ring(self, ring):
        ring = self.normalize(ring)
        cover = self._cover(ring)
        if not isinstance(cover, MPolynomialRing_base):
            return False
        if not cover.base_ring().is_field():
            return False
        if self._is_quotient(ring):
            return ring.defining_ideal().is_homogeneous()
        return True

    def coefficient_field(self, ring):
        return ring.base_ring()

    def generators(self, ring):
        return tuple(ring.gens())

    def generator_degrees(self, ring):
        """Degrees of the polynomial-ring variables behind ``ring``'s generators."""
        cover = self._cover(self.normalize(ring))
        return tuple(self.degree(g) for g in cover.gens())

    def degree(self, element):
        return (int(self._lift(element).degree()),)

    def lcm(self, values):
        return int(lcm([ZZ(v) for v in values]))

    # -------------------------------------------------------------------------
    # Ring construction
    # -------------------------------------------------------------------------

    def polynomial_ring(self, field, count, prefix='x', degrees=None):
        names = [f"{prefix}{k + 1}" for k in range(count)]
        return graded_polynomial_ring(field, names, degrees)

    def tensor_product(self, A, B):
        """
        A ⊗_K B: generators of A followed by generators of B, graded by the
        concatenated degrees, modulo the defining ideals of both factors.
        Clashing variable names are replaced by a0, a1, ... / b0, b1, ...
        """
        A0, B0 = self._cover(A), self._cover(B)
        names_a, names_b = list(A0.variable_names()), list(B0.variable_names())
        if set(names_a) & set(names_b):
            names_a = [f"a{i}" for i in range(len(names_a))]
            names_b = [f"b{i}" for i in range(len(names_b))]
        degrees = [self.degree(g)[0] for g in A0.gens()] + [self.degree(g)[0] for g in B0.gens()]
        T = graded_polynomial_ring(A0.base_ring(), names_a + names_b, degrees)
        m = len(names_a)
        rels = []
        if self._relations(A):
            into_a = A0.hom(list(T.gens()[:m]), T)
            rels += [into_a(f) for f in self._relations(A)]
        if self._relations(B):
            into_b = B0.hom(list(T.gens()[m:]), T)
            rels += [into_b(f) for f in self._relations(B)]
        logger.debug("tensor product: %d generators, %d relations", T.ngens(), len(rels))
        if not rels:
            return T
        return T.quotient(T.ideal(rels))

    def ring_map(self, domain, codomain, images):
        return domain.hom(list(images), codomain)

    def kernel(self, ring_map):
        domain = ring_map.domain()
        if domain.ngens() == 0:
            # maps out of the coefficient field are injective
            return domain.zero_ideal()
        logger.debug("computing kernel of %s", ring_map)
        return ring_map.kernel()

    def quotient(self, ring, ideal):
        return ring.quotient(ideal)

    # -------------------------------------------------------------------------
    # Cones
    # -------------------------------------------------------------------------

    def build_cone_from_inequalities(self, inequalities, equations):
        """
        Cone {v : A·v >= 0, E·v = 0} for inequality rows A and equation rows E.
        Both are homogeneous, so the polyhedron has the origin as its only vertex.
        """
        ieqs = [[0] + [int(c) for c in row] for row in inequalities]
        eqns = [[0] + [int(c) for c in row] for row in equations]
        P = Polyhedron(ieqs=ieqs, eqns=eqns)
        return Cone(P)

    def hilbert_basis(self, cone):
        basis = [tuple(int(c) for c in v) for v in cone.Hilbert_basis()]
        logger.debug("Hilbert basis has %d elements", len(basis))
        return basis

    # -------------------------------------------------------------------------
    # Graded pieces
    # -------------------------------------------------------------------------

    def basis_of_graded_piece(self, ring, degree):
        """
        Standard monomials of weighted degree ``degree``, i.e. those not
        divisible by a leading monomial of a Gröbner basis of the defining
        ideal, in decreasing term order, as elements of ``ring``.
        """
        cover = self._cover(ring)
        weights = [self.degree(g)[0] for g in cover.gens()]
        leading = []
        if self._is_quotient(ring):
            leading = [g.lm() for g in ring.defining_ideal().groebner_basis() if g != 0]
        monomials = []
        for exps in WeightedIntegerVectors(int(degree), weights):
            mono = cover.monomial(*[int(e) for e in exps])
            if any(cover.monomial_divides(lm, mono) for lm in leading):
                continue
            monomials.append(mono)
        monomials.sort(reverse=True)
        return tuple(ring(mono) for mono in monomials)

    def coordinates(self, ring, element, degree):
        """Coefficients of ``element`` against :meth:`basis_of_graded_piece`."""
        basis = [self._lift(b) for b in self.basis_of_graded_piece(ring, degree)]
        nf = self._lift(element)
        if self._is_quotient(ring):
            nf = ring.defining_ideal().reduce(nf)
        return [nf.monomial_coefficient(b) for b in basis]

    def rank(self, field, rows):
        rows = [list(r) for r in rows]
        if not rows:
            return 0
        return matrix(field, rows).rank()
