#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Coordonnees homogenes pour les courbes rationnelles (NURBS).

Un element pondere ``(e, w)`` est stocke sous la forme ``(e*w, w)`` ;
les noyaux d'evaluation le melangent comme n'importe quel element, puis
:meth:`Homogeneous.project` divise par le poids final.

@author: Nervures
@date: 2026-02
"""

from .errors import DegenerateWeight
from .sequence import Sequence, as_sequence


class Homogeneous:
    """Element en coordonnees homogenes."""

    __slots__ = ('element', 'weight')

    def __init__(self, element, weight):
        self.element = element
        self.weight = float(weight)

    @classmethod
    def weighted(cls, element, weight):
        """Element ``element`` de poids ``weight`` : stocke ``(e*w, w)``."""
        return cls(element * float(weight), weight)

    def __add__(self, other):
        return Homogeneous(self.element + other.element,
                           self.weight + other.weight)

    def __mul__(self, scalar):
        return Homogeneous(self.element * scalar, self.weight * scalar)

    __rmul__ = __mul__

    def project(self, eps=0.0, t=None):
        """Division perspective : retourne ``element / weight``.

        :param eps: poids minimal (en valeur absolue) accepte
        :type eps: float
        :param t: parametre evalue, repris dans le message d'erreur
        :type t: float or None
        :raises DegenerateWeight: si ``|weight| <= eps``
        """
        if abs(self.weight) <= eps:
            raise DegenerateWeight(self.weight, t)
        return self.element * (1.0 / self.weight)

    def __repr__(self):
        return "Homogeneous(%r, %g)" % (self.element, self.weight)


class WeightedSequence(Sequence):
    """Vue ``(elements[i] * w[i], w[i])`` sur deux sequences de meme taille."""

    generated = True

    def __init__(self, elements, weights):
        self._elements = as_sequence(elements)
        self._weights = as_sequence(weights)
        if len(self._elements) != len(self._weights):
            raise ValueError(
                "Elements et poids de tailles differentes : %d != %d"
                % (len(self._elements), len(self._weights)))

    @property
    def elements(self):
        return self._elements

    @property
    def weights(self):
        return self._weights

    def __len__(self):
        return len(self._elements)

    def at(self, index):
        return Homogeneous.weighted(self._elements.at(index),
                                    self._weights.at(index))
