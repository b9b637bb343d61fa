#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Interpolation lineaire par morceaux.

Un noeud par element ; entre deux noeuds, melange lineaire des deux
elements (eventuellement adouci par une fonction d'attenuation). Hors
des noeuds, le premier ou le dernier segment est prolonge.

Creation::

    lin = Linear.builder().elements([20., 100., 0., 200.]) \\
                          .knots([1., 2., 3., 4.]).build()
    lin.evaluate(1.5)      # 60.

@author: Nervures
@date: 2026-02
"""

from .base import ElementCurve


def linear_interpolate(knots, elements, t, easing=None):
    """Interpolation lineaire en t.

    :param knots: noeuds tries, un par element
    :type knots: SortedSequence
    :param elements: elements
    :type elements: Sequence
    :param t: parametre
    :type t: float
    :param easing: fonction appliquee au facteur de melange
    :type easing: callable or None
    :returns: element interpole
    """
    if len(elements) == 1:
        return elements.at(0)
    lo, hi, factor = knots.upper_border(t)
    if easing is not None:
        factor = easing(factor)
    return elements.at(lo) * (1.0 - factor) + elements.at(hi) * factor


class Linear(ElementCurve):
    """Courbe lineaire par morceaux.

    Le constructeur ne verifie rien : passer par :meth:`builder`.
    """

    def __init__(self, knots, elements, domain, weights=None, easing=None):
        super().__init__(elements, weights)
        self._knots = knots
        self._domain = (float(domain[0]), float(domain[1]))
        self._easing = easing

    @staticmethod
    def builder():
        """Constructeur verifie, voir :class:`LinearBuilder`."""
        from .builder import LinearBuilder
        return LinearBuilder()

    def __repr__(self):
        return "Linear(%d elements)" % len(self._elements)

    @property
    def knots(self):
        """Noeuds, un par element."""
        return self._knots

    @property
    def domain(self):
        return self._domain

    @property
    def easing(self):
        """Fonction d'attenuation, ou None."""
        return self._easing

    def _eval(self, t):
        value = linear_interpolate(self._knots, self._kernel_elements, t,
                                   self._easing)
        return self._finish(value, t)
