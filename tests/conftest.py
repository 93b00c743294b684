"""
Sage-free stand-ins for the algebra engine.

FakeRing is a polynomial ring K[x_1..x_r] with given degrees; its elements
are FakeMonomials (exponent tuples). That is enough to drive validation,
period computation and the Veronese generator search, and FakeEngine
records every call so tests can check which engine operations ran.
"""
import math
from fractions import Fraction
from itertools import product

import pytest


INSPECTION_CALLS = {
    "is_graded_quotient_or_polynomial_ring",
    "coefficient_field",
    "generators",
    "degree",
    "generator_degrees",
}


class FakeMonomial:
    def __init__(self, exps, degrees, degree_length=1):
        self.exps = tuple(exps)
        self.degrees = tuple(degrees)
        self.degree_length = degree_length

    def total_degree(self):
        return sum(e * d for e, d in zip(self.exps, self.degrees))

    def __mul__(self, other):
        return FakeMonomial([a + b for a, b in zip(self.exps, other.exps)],
                            self.degrees, self.degree_length)

    def __pow__(self, k):
        return FakeMonomial([a * k for a in self.exps], self.degrees, self.degree_length)

    def __eq__(self, other):
        return isinstance(other, FakeMonomial) and self.exps == other.exps

    def __hash__(self):
        return hash(self.exps)

    def __repr__(self):
        return "FakeMonomial(%s)" % (self.exps,)


class FakeRing:
    def __init__(self, degrees, field="QQ", graded=True, degree_length=1):
        self.degrees = tuple(degrees)
        self.field = field
        self.graded = graded
        self.degree_length = degree_length

    def gens(self):
        r = len(self.degrees)
        return tuple(FakeMonomial([1 if i == j else 0 for j in range(r)],
                                  self.degrees, self.degree_length)
                     for i in range(r))

    def __repr__(self):
        return "FakeRing(%s)" % (self.degrees,)


class FakeEngine:
    def __init__(self):
        self.calls = []

    def _record(self, name):
        self.calls.append(name)

    def non_inspection_calls(self):
        return [c for c in self.calls if c not in INSPECTION_CALLS]

    # inspection
    def is_graded_quotient_or_polynomial_ring(self, ring):
        self._record("is_graded_quotient_or_polynomial_ring")
        return ring.graded

    def coefficient_field(self, ring):
        self._record("coefficient_field")
        return ring.field

    def generators(self, ring):
        self._record("generators")
        return ring.gens()

    def degree(self, element):
        self._record("degree")
        return (element.total_degree(),) + (0,) * (element.degree_length - 1)

    def generator_degrees(self, ring):
        self._record("generator_degrees")
        return tuple((d,) + (0,) * (ring.degree_length - 1) for d in ring.degrees)

    def normalize(self, ring):
        self._record("normalize")
        return ring

    # combinatorics / construction
    def lcm(self, values):
        self._record("lcm")
        return math.lcm(*values)

    def basis_of_graded_piece(self, ring, degree):
        self._record("basis_of_graded_piece")
        top = [degree // d for d in ring.degrees]
        out = []
        for exps in product(*[range(t + 1) for t in top]):
            if sum(e * d for e, d in zip(exps, ring.degrees)) == degree:
                out.append(FakeMonomial(exps, ring.degrees))
        out.sort(key=lambda m: m.exps, reverse=True)
        return tuple(out)

    def coordinates(self, ring, element, degree):
        self._record("coordinates")
        basis = self.basis_of_graded_piece(ring, degree)
        return [1 if b == element else 0 for b in basis]

    def rank(self, field, rows):
        self._record("rank")
        return _rank(rows)

    def tensor_product(self, A, B):
        self._record("tensor_product")
        return FakeRing(A.degrees + B.degrees, A.field)

    def build_cone_from_inequalities(self, inequalities, equations):
        self._record("build_cone_from_inequalities")
        return (tuple(inequalities), tuple(equations))

    def hilbert_basis(self, cone):
        self._record("hilbert_basis")
        return []

    def polynomial_ring(self, field, count, prefix='x', degrees=None):
        self._record("polynomial_ring")
        return ("ambient", field, count, tuple(degrees or ()))

    def ring_map(self, domain, codomain, images):
        self._record("ring_map")
        return ("map", domain, codomain, tuple(images))

    def kernel(self, ring_map):
        self._record("kernel")
        return FakeIdeal()

    def quotient(self, ring, ideal):
        self._record("quotient")
        return ("quotient", ring, ideal)


def _rank(rows):
    # row reduction over the rationals
    rows = [[Fraction(c) for c in r] for r in rows]
    rank = 0
    ncols = len(rows[0]) if rows else 0
    for col in range(ncols):
        pivot = next((i for i in range(rank, len(rows)) if rows[i][col] != 0), None)
        if pivot is None:
            continue
        rows[rank], rows[pivot] = rows[pivot], rows[rank]
        for i in range(len(rows)):
            if i != rank and rows[i][col] != 0:
                factor = rows[i][col] / rows[rank][col]
                rows[i] = [a - factor * b for a, b in zip(rows[i], rows[rank])]
        rank += 1
    return rank


class FakeIdeal:
    def gens(self):
        return [0]


@pytest.fixture
def engine():
    return FakeEngine()
