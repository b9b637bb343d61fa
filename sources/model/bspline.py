#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
B-splines non uniformes et NURBS.

Evaluation par l'algorithme de De Boor sur le vecteur de noeuds interne
(``n + p - 1`` noeuds, voir :mod:`knots`). Avec des poids, l'evaluation
se fait en coordonnees homogenes puis est projetee (NURBS).

Creation::

    # Spline cubique bornee, noeuds equidistants sur [0, 1]
    s = BSpline.builder().elements([0., 5., 3., 10., 7.]) \\
                         .clamped().equidistant().degree(3) \\
                         .normalized().build()

    # Noeuds internes explicites, degre deduit
    s = BSpline.builder().elements([0., 0., 1., 0., 0.]) \\
                         .knots([0., 0., 1., 2., 3., 3.]).build()

@author: Nervures
@date: 2026-02
"""

from .base import ElementCurve


def de_boor(knots, elements, degree, t):
    """Evalue une B-spline en t par l'algorithme de De Boor.

    L'intervalle de noeuds est cherche dans ``[degree, len(knots) -
    degree]`` : le dernier intervalle est ferme et les parametres hors
    domaine utilisent le premier ou le dernier intervalle
    (extrapolation). Un intervalle de largeur nulle donne un facteur 0.
    En degre 0, l'element de l'intervalle est retourne tel quel.

    :param knots: noeuds internes tries
    :type knots: SortedSequence
    :param elements: elements
    :type elements: Sequence
    :param degree: degre p
    :type degree: int
    :param t: parametre
    :type t: float
    :returns: element
    """
    p = degree
    index = knots.strict_upper_bound(t, p, len(knots) - p)
    ws = [elements.at(index - p + i) for i in range(p + 1)]
    for r in range(1, p + 1):
        for j in range(p - r + 1):
            i = j + r + index - p
            k_lo = knots.at(i - 1)
            width = knots.at(i + p - r) - k_lo
            if width == 0:
                f = 0.0
            else:
                f = (t - k_lo) / width
            ws[j] = ws[j] * (1.0 - f) + ws[j + 1] * f
    return ws[0]


class BSpline(ElementCurve):
    """B-spline (ou NURBS si des poids sont fournis).

    Le constructeur ne verifie rien : passer par :meth:`builder`.
    """

    def __init__(self, knots, elements, degree, domain, weights=None):
        super().__init__(elements, weights)
        self._knots = knots
        self._degree = degree
        self._domain = (float(domain[0]), float(domain[1]))

    @staticmethod
    def builder():
        """Constructeur verifie, voir :class:`BSplineBuilder`."""
        from .builder import BSplineBuilder
        return BSplineBuilder()

    def __repr__(self):
        kind = 'NURBS' if self.is_rational else 'BSpline'
        return "%s(degre=%d, %d elements)" % (
            kind, self._degree, len(self._elements))

    @property
    def knots(self):
        """Noeuds internes (``n + p - 1`` valeurs)."""
        return self._knots

    @property
    def degree(self):
        return self._degree

    @property
    def domain(self):
        return self._domain

    def _eval(self, t):
        value = de_boor(self._knots, self._kernel_elements, self._degree, t)
        return self._finish(value, t)
