#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Adaptateurs de courbes.

Chaque adaptateur enveloppe une courbe et transforme son parametre ou son
domaine ; ils se composent par simple imbrication::

    c = curve.slice(0.2, 0.8).clamp()
    smooth = Plateau(0.2).composite(curve)

@author: Nervures
@date: 2026-02
"""

import bisect

from .base import Curve
from .errors import TooFewElements
from .knots import check_domain


class Adaptor(Curve):
    """Base des adaptateurs : delegue a la courbe enveloppee."""

    def __init__(self, curve):
        self._curve = curve

    @property
    def inner(self):
        """Courbe enveloppee."""
        return self._curve

    @property
    def domain(self):
        return self._curve.domain

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self._curve)


class Clamp(Adaptor):
    """Ramene t dans le domaine avant l'evaluation."""

    def _eval(self, t):
        start, end = self.domain
        return self._curve.evaluate(min(max(t, start), end))


class Wrap(Adaptor):
    """Courbe periodique : t est ramene dans [min, max) modulo la largeur."""

    def _eval(self, t):
        start, end = self.domain
        return self._curve.evaluate(start + (t - start) % (end - start))


class Slice(Adaptor):
    """Restreint le domaine a [start, end] sans changer l'evaluation."""

    def __init__(self, curve, start, end):
        super().__init__(curve)
        self._domain = check_domain(start, end)

    @property
    def domain(self):
        return self._domain

    def _eval(self, t):
        return self._curve.evaluate(t)


class Reparametrize(Adaptor):
    """Changement de variable lineaire de [start, end] vers le domaine
    de la courbe enveloppee."""

    def __init__(self, curve, start, end):
        super().__init__(curve)
        self._domain = check_domain(start, end)

    @property
    def domain(self):
        return self._domain

    def _eval(self, t):
        start, end = self._domain
        a, b = self._curve.domain
        return self._curve.evaluate(a + (t - start) * (b - a) / (end - start))


class Stack(Curve):
    """Courbes enchainees bout a bout.

    La courbe ``i`` occupe un intervalle de la largeur de son propre
    domaine ; le premier commence au minimum du domaine de la premiere
    courbe. Les intervalles sont semi-ouverts a droite, sauf le dernier.
    Hors du domaine, la premiere ou la derniere courbe extrapole.
    """

    def __init__(self, *curves):
        if not curves:
            raise TooFewElements(0, 1)
        self._curves = curves
        start = float(curves[0].domain[0])
        bounds = [start]
        for curve in curves:
            a, b = curve.domain
            bounds.append(bounds[-1] + (b - a))
        self._bounds = bounds

    @property
    def curves(self):
        return self._curves

    @property
    def domain(self):
        return (self._bounds[0], self._bounds[-1])

    def __repr__(self):
        return "Stack(%d courbes)" % len(self._curves)

    def _eval(self, t):
        n = len(self._curves)
        i = bisect.bisect_right(self._bounds, t) - 1
        i = min(max(i, 0), n - 1)
        curve = self._curves[i]
        return curve.evaluate(curve.domain[0] + (t - self._bounds[i]))


class Composite(Adaptor):
    """Enchainement de fonctions : ``second(first(t))``.

    Le domaine est celui de la premiere courbe. ``second`` est une
    courbe ou tout appelable, par exemple une fonction d'attenuation
    appliquee avant une courbe::

        Plateau(0.5).composite(curve)
    """

    def __init__(self, curve, second):
        super().__init__(curve)
        if not callable(second):
            raise TypeError("%r n'est pas appelable" % (second,))
        self._second = second

    @property
    def second(self):
        """Courbe (ou fonction) appliquee au resultat de la premiere."""
        return self._second

    def __repr__(self):
        return "Composite(%r, %r)" % (self._curve, self._second)

    def _eval(self, t):
        return self._second(self._curve.evaluate(t))
