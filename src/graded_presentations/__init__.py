# src/graded_presentations/__init__.py
"""
Finite presentations of Segre products and Veronese subrings of unigraded
algebras.

The Sage-backed engine lives in :mod:`graded_presentations.engine` and is
imported on first use, so the combinatorial parts load without Sage.
"""
from .errors import ConsistencyError, InputValidationError, PresentationError
from .presentation import Presentation, assemble_presentation
from .products import degree_bounded_exponents, degree_bounded_products
from .segre import (
    hilbert_basis_to_monomials,
    segre_cone,
    segre_hilbert_basis,
    segre_presentation,
    weight_vector,
)
from .veronese import select_generators, veronese_period, veronese_presentation

__all__ = [
    "ConsistencyError",
    "InputValidationError",
    "PresentationError",
    "Presentation",
    "assemble_presentation",
    "degree_bounded_exponents",
    "degree_bounded_products",
    "hilbert_basis_to_monomials",
    "segre_cone",
    "segre_hilbert_basis",
    "segre_presentation",
    "weight_vector",
    "select_generators",
    "veronese_period",
    "veronese_presentation",
]
