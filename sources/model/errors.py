#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Exceptions levees a la construction et a l'evaluation des courbes.

Toutes derivent de :class:`CurveError`, elle-meme sous-classe de
``ValueError`` : un appelant peut intercepter l'une ou l'autre.
Chaque exception conserve les grandeurs fautives en attributs.

@author: Nervures
@date: 2026-02
"""


class CurveError(ValueError):
    """Erreur de base du package."""


class TooFewElements(CurveError):
    """Pas assez d'elements pour construire la courbe."""

    def __init__(self, found, required):
        self.found = found
        self.required = required
        super().__init__(
            "Il faut au moins %d element(s), recu %d" % (required, found))


class InvalidDegree(CurveError):
    """Degre absent, negatif ou trop grand pour le nombre d'elements."""

    def __init__(self, degree, n_elements=None, reason=None):
        self.degree = degree
        self.n_elements = n_elements
        if reason is None:
            reason = ("degre %s invalide pour %s element(s)"
                      % (degree, n_elements))
        super().__init__(reason)


class KnotCountMismatch(CurveError):
    """Nombre de noeuds incompatible avec le nombre d'elements et le degre."""

    def __init__(self, found, expected, msg=None):
        self.found = found
        self.expected = expected
        if msg is None:
            msg = ("Nombre de noeuds incorrect : %d attendu(s), recu %d"
                   % (expected, found))
        super().__init__(msg)


class LegacyKnotMismatch(KnotCountMismatch):
    """Vecteur de noeuds classique (n+p+1) de mauvaise longueur."""

    def __init__(self, found, expected):
        super().__init__(
            found, expected,
            "Vecteur de noeuds classique : %d noeuds attendus "
            "(elements + degre + 1), recu %d" % (expected, found))


class KnotsNotSorted(CurveError):
    """Noeuds non tries (ou NaN) a partir de l'index ``index``."""

    def __init__(self, index):
        self.index = index
        super().__init__(
            "Les noeuds doivent etre croissants : "
            "rupture a l'index %d" % index)


class InvalidDomain(CurveError):
    """Domaine vide, inverse, non fini, ou incompatible avec les noeuds."""

    def __init__(self, start, end, reason=None):
        self.start = start
        self.end = end
        if reason is None:
            reason = ("Domaine invalide [%s, %s] : il faut min < max"
                      % (start, end))
        super().__init__(reason)


class WeightCountMismatch(CurveError):
    """Nombre de poids different du nombre d'elements."""

    def __init__(self, found, expected):
        self.found = found
        self.expected = expected
        super().__init__(
            "Il faut un poids par element : %d attendu(s), recu %d"
            % (expected, found))


class NonPositiveWeight(CurveError):
    """Poids nul, negatif ou non fini."""

    def __init__(self, index, weight):
        self.index = index
        self.weight = weight
        super().__init__(
            "Les poids doivent etre strictement positifs : "
            "poids[%d] = %s" % (index, weight))


class DegenerateWeight(CurveError, ArithmeticError):
    """Poids homogene final quasi nul lors de l'evaluation (NURBS)."""

    def __init__(self, weight, t=None):
        self.weight = weight
        self.t = t
        if t is None:
            msg = "Poids homogene degenere : %g" % weight
        else:
            msg = "Poids homogene degenere en t=%g : %g" % (t, weight)
        super().__init__(msg)
