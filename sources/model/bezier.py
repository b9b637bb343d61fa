#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Courbe de Bezier de degre arbitraire, eventuellement rationnelle.

Evaluation par l'algorithme de De Casteljau.
Derivees par reduction de degre sur les differences de points de controle.

Creation::

    # Cubique (4 points de controle), domaine [0, 1]
    b = Bezier.builder().elements([[0,0], [100,200], [300,200], [400,0]]) \\
                        .build()

    # Evaluation
    pt = b.evaluate(0.5)                    # ndarray(2,)
    pts = b.evaluate([0, .25, .5, .75, 1])  # ndarray(5, 2)

    # Derivee, elevation de degre
    dp = b.derivative(0.5)                  # B'(0.5)
    c = b.elevate(2)                        # meme courbe, degre 5

@author: Nervures
@date: 2026-02
"""

import numpy as np
from scipy.special import comb

from .base import ElementCurve
from .sequence import ArraySequence

# --------------------------------------------------------------------------
#  Algorithme de De Casteljau (fonction utilitaire)
# --------------------------------------------------------------------------

def de_casteljau(elements, t):
    """Evalue une courbe de Bezier en t par l'algorithme de De Casteljau.

    Tout t reel est accepte : hors de [0, 1], le meme polynome est
    prolonge.

    :param elements: points de controle, ndarray(n+1, ...) ou Sequence
    :param t: parametre scalaire
    :returns: point sur la courbe
    """
    if isinstance(elements, np.ndarray):
        pts = np.array(elements, dtype=float)
        n = len(pts) - 1
        for r in range(1, n + 1):
            pts[:n - r + 1] = (1.0 - t) * pts[:n - r + 1] + t * pts[1:n - r + 2]
        return pts[0]
    pts = list(elements)
    n = len(pts) - 1
    for r in range(1, n + 1):
        for i in range(n - r + 1):
            pts[i] = pts[i] * (1.0 - t) + pts[i + 1] * t
    return pts[0]


def _elevate_once(P):
    """Points de controle Q0..Q(n+1) de la courbe elevee au degre n+1.

    - Q0 = P0
    - Qi = (i/(n+1)) * P(i-1) + (1 - i/(n+1)) * Pi   pour i=1..n
    - Q(n+1) = Pn
    """
    n = len(P) - 1
    Q = np.empty((n + 2,) + P.shape[1:], dtype=float)
    Q[0] = P[0]
    Q[n + 1] = P[n]
    for i in range(1, n + 1):
        alpha = float(i) / (n + 1)
        Q[i] = alpha * P[i - 1] + (1.0 - alpha) * P[i]
    return Q


# --------------------------------------------------------------------------
#  Classe Bezier
# --------------------------------------------------------------------------

class Bezier(ElementCurve):
    """Courbe de Bezier sur un domaine [a, b].

    Degre n = nombre de points de controle - 1. Le parametre t du domaine
    est ramene a u = (t - a) / (b - a) avant l'evaluation.
    Le constructeur ne verifie rien : passer par :meth:`builder`.
    """

    def __init__(self, elements, domain=(0.0, 1.0), weights=None):
        super().__init__(elements, weights)
        self._domain = (float(domain[0]), float(domain[1]))
        # chemin vectorise pour les elements numeriques non ponderes
        if (weights is None and isinstance(elements, ArraySequence)
                and elements.is_numeric):
            self._kernel_elements = elements.values

    @staticmethod
    def builder():
        """Constructeur verifie, voir :class:`BezierBuilder`."""
        from .builder import BezierBuilder
        return BezierBuilder()

    # ------------------------------------------------------------------
    #  Representation
    # ------------------------------------------------------------------

    def __repr__(self):
        return "Bezier(degre=%d, %d elements)" % (
            self.degree, len(self._elements))

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def degree(self):
        """Degre de la courbe (n = nb_elements - 1)."""
        return len(self._elements) - 1

    @property
    def domain(self):
        return self._domain

    def _to_unit(self, t):
        a, b = self._domain
        return (t - a) / (b - a)

    def _numeric_elements(self):
        try:
            return np.asarray(self._elements.to_list(), dtype=float)
        except (TypeError, ValueError):
            raise TypeError(
                "Operation reservee aux elements numeriques") from None

    # ------------------------------------------------------------------
    #  Evaluation
    # ------------------------------------------------------------------

    def _eval(self, t):
        value = de_casteljau(self._kernel_elements, self._to_unit(t))
        return self._finish(value, t)

    def basis(self, t):
        """Polynomes de Bernstein en t.

        B_{i,n}(u) = C(n,i) * u^i * (1 - u)^(n-i), u = (t - a) / (b - a)

        :param t: parametre, scalaire ou array
        :returns: ndarray(n+1,) si t scalaire, ndarray(m, n+1) sinon
        :rtype: numpy.ndarray
        """
        n = self.degree
        u = self._to_unit(np.asarray(t, dtype=float))
        i = np.arange(n + 1)
        binom = comb(n, i)
        return binom * u[..., None]**i * (1.0 - u[..., None])**(n - i)

    # ------------------------------------------------------------------
    #  Derivees
    # ------------------------------------------------------------------

    def derivative(self, t, order=1):
        """Derivee d'ordre ``order`` en t, par rapport a t.

        Derivee d'ordre 1 : B'(u) = n * Bezier(delta_P)(u)
          ou delta_P[i] = P[i+1] - P[i]

        L'operation est repetee ``order`` fois, puis divisee par
        (b - a)^order pour passer de u a t. Au-dela du degre, la derivee
        est nulle.

        :param t: parametre, scalaire ou array
        :param order: ordre de derivation (>= 1)
        :type order: int
        :returns: vecteur(s) derivee
        :rtype: ndarray
        :raises ValueError: pour une courbe rationnelle ou order < 1
        """
        if order < 1:
            raise ValueError(
                "Ordre de derivation %d non supporte (>= 1)" % order)
        if self.is_rational:
            raise ValueError(
                "Derivee non supportee pour une courbe rationnelle")
        pts = self._numeric_elements()
        n = self.degree
        if order > n:
            delta = np.zeros((1,) + pts.shape[1:])
        else:
            delta = pts
            for k in range(order):
                delta = (n - k) * (delta[1:] - delta[:-1])
            a, b = self._domain
            delta = delta / (b - a)**order
        deriv = Bezier(ArraySequence(delta), self._domain)
        return deriv.evaluate(t)

    # ------------------------------------------------------------------
    #  Elevation de degre
    # ------------------------------------------------------------------

    def elevate(self, times=1):
        """Courbe de meme forme, de degre augmente de ``times``.

        Les courbes rationnelles sont elevees en coordonnees homogenes.

        :param times: nombre d'elevations successives (defaut 1)
        :type times: int
        :returns: nouvelle courbe
        :rtype: Bezier
        """
        if times < 1:
            raise ValueError(
                "times doit etre >= 1, recu %d" % times)
        pts = self._numeric_elements()
        if not self.is_rational:
            for _ in range(times):
                pts = _elevate_once(pts)
            return Bezier(ArraySequence(pts), self._domain)
        w = np.asarray(self._weights.to_list(), dtype=float)
        pw = pts * w.reshape((-1,) + (1,) * (pts.ndim - 1))
        for _ in range(times):
            pw = _elevate_once(pw)
            w = _elevate_once(w)
        pts = pw / w.reshape((-1,) + (1,) * (pw.ndim - 1))
        return Bezier(ArraySequence(pts), self._domain,
                      weights=ArraySequence(w))
