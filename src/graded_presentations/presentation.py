# src/graded_presentations/presentation.py
"""
Presentation record and the step shared by both pipelines: map fresh
variables onto chosen generators, take the kernel, pass to the quotient.
"""
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Presentation:
    """
    A ring presented as  ambient / ker(map).

    Attributes
    ----------
    map : ring homomorphism
        ``ambient -> target``, sending the k-th ambient variable to
        ``generators[k]``.
    ring : quotient ring
        ``ambient / relations``; isomorphic to the image of ``map``.
    generators : tuple
        Images of the ambient variables, in variable order.
    relations : ideal
        ``ker(map)``.
    exponents : tuple of tuple of int
        For a Segre product, the Hilbert basis vector behind each generator.
        Empty for a Veronese subring.
    """
    map: object
    ring: object
    generators: tuple
    relations: object
    exponents: tuple = field(default=())

    def __iter__(self):
        # f, Q = presentation
        yield self.map
        yield self.ring

    def ngens(self):
        return len(self.generators)

    def relations_list(self):
        """Nonzero generators of the relation ideal."""
        return [g for g in self.relations.gens() if g != 0]


def assemble_presentation(ambient, target, images, engine, exponents=()):
    """
    Build ``f: ambient -> target`` with ``f(x_k) = images[k]`` and return
    the Presentation of ``ambient / ker(f)``.

    Parameters
    ----------
    ambient : polynomial ring with ``len(images)`` variables
    target : ring containing every element of ``images``
    images : sequence of ring elements
    engine : algebra engine
    exponents : sequence of tuple of int, optional
        Recorded on the result unchanged.
    """
    images = tuple(images)
    f = engine.ring_map(ambient, target, images)
    ker = engine.kernel(f)
    Q = engine.quotient(ambient, ker)
    result = Presentation(map=f, ring=Q, generators=images, relations=ker,
                          exponents=tuple(tuple(v) for v in exponents))
    logger.info("presentation: %d generators, %d relations",
                result.ngens(), len(result.relations_list()))
    return result
