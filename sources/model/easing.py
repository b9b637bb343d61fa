#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Fonctions d'attenuation sur [0, 1].

A passer a ``Linear.builder().easing(...)`` pour adoucir le melange entre
deux elements consecutifs.

@author: Nervures
@date: 2026-02
"""

from .base import Curve


def identity(x):
    return x


def flip(x):
    """1 - x"""
    return 1.0 - x


def smoothstart(x, n=2):
    """Depart lent : x^n."""
    return x**n


def smoothend(x, n=2):
    """Arrivee lente : 1 - (1 - x)^n."""
    return flip(smoothstart(flip(x), n))


def smoothstep(x):
    """Polynome d'Hermite 3x^2 - 2x^3."""
    return x * x * (3.0 - 2.0 * x)


def smootherstep(x):
    """Polynome 6x^5 - 15x^4 + 10x^3 (derivees 1 et 2 nulles aux bords)."""
    return x * x * x * (x * (x * 6.0 - 15.0) + 10.0)


class Plateau(Curve):
    """Attenuation avec paliers aux extremites.

    Les valeurs de x dans [0, strength/2] donnent 0, celles dans
    [1 - strength/2, 1] donnent 1, avec un :func:`smoothstep` entre les deux.
    """

    def __init__(self, strength):
        """
        :param strength: largeur totale des paliers, dans [0, 1] ; 1 ne
            donne que 0 ou 1 (la valeur la plus proche)
        :type strength: float
        """
        strength = float(strength)
        if not 0.0 <= strength <= 1.0:
            raise ValueError(
                "strength doit etre dans [0, 1], recu %g" % strength)
        half = strength / 2.0
        self._min = half
        self._max = 1.0 - half

    @property
    def domain(self):
        return (0.0, 1.0)

    def __repr__(self):
        return "Plateau(%g)" % (2.0 * self._min)

    def _eval(self, t):
        if t < self._min:
            x = 0.0
        elif t > self._max:
            x = 1.0
        elif self._max == self._min:
            # strength 1 : point milieu, a egale distance des paliers
            x = 0.5
        else:
            x = (t - self._min) / (self._max - self._min)
        return smoothstep(x)
