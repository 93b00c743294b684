# scripts/demo_presentations.py
from sage.all import *

from graded_presentations import segre_presentation, veronese_presentation
from graded_presentations.engine import graded_ring


def show(title, pres):
    print(title)
    for var, img in zip(pres.map.domain().gens(), pres.generators):
        print("   ", var, "->", img)
    print("  relations:", pres.relations_list())


def main():
    # Segre of K[x] and K[y]: one generator x*y, no relations
    R = graded_ring(QQ, ['x'])
    S = graded_ring(QQ, ['y'])
    show("Segre K[x] x K[y]:", segre_presentation(R, S))

    # Segre of two projective lines: quadric surface x0y0*x1y1 = x0y1*x1y0
    show("Segre P^1 x P^1:", segre_presentation(graded_ring(QQ, ['x0', 'x1']),
                                                graded_ring(QQ, ['y0', 'y1'])))

    # Second Veronese of K[x,y]: the conic
    show("Veronese K[x,y]^(2):", veronese_presentation(graded_ring(QQ, ['x', 'y']), 2))

    # Third Veronese of K[x,y]: the twisted cubic, three quadrics
    show("Veronese K[x,y]^(3):", veronese_presentation(graded_ring(QQ, ['x', 'y']), 3))


if __name__ == "__main__":
    main()
