#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Classes abstraites des courbes parametriques.

Une courbe associe a tout parametre reel ``t`` un element (nombre, vecteur
numpy, ou tout objet supportant ``a + b`` et ``a * float``). Le domaine
``(min, max)`` est l'intervalle de definition ; hors domaine, les courbes
concretes extrapolent.

Toute courbe sait :

- s'evaluer en un parametre ou un tableau de parametres ;
- s'echantillonner sur son domaine ;
- se tracer (matplotlib) ;
- s'envelopper dans un adaptateur (clamp, wrap, slice, ...).

@author: Nervures
@date: 2026-02
"""

from abc import ABC, abstractmethod

import numpy as np

from .curveconfig import get_default
from .homogeneous import WeightedSequence
from .sequence import Equidistant, GeneratedSequence


def _collect(values, shape):
    """Regroupe des resultats d'evaluation en ndarray si possible."""
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError):
        return values
    if not values:
        return np.empty(shape, dtype=float)
    return arr.reshape(tuple(shape) + arr.shape[1:])


class Curve(ABC):
    """Courbe parametrique sur un domaine ``(min, max)``."""

    @property
    @abstractmethod
    def domain(self):
        """Intervalle de definition (min, max)."""
        pass

    @abstractmethod
    def _eval(self, t):
        """Evalue la courbe en un parametre scalaire (float)."""
        pass

    # ------------------------------------------------------------------
    #  Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, t):
        """Evalue la courbe en t.

        :param t: parametre, scalaire ou array
        :type t: float or array-like
        :returns: element si t scalaire ; sinon ndarray (elements
            numeriques, un element par parametre sur le premier axe) ou
            liste (autres elements)
        """
        if isinstance(t, (list, tuple)) or np.ndim(t) > 0:
            ts = np.asarray(t, dtype=float)
            values = [self._eval(float(x)) for x in ts.ravel()]
            return _collect(values, ts.shape)
        return self._eval(float(t))

    def __call__(self, t):
        return self.evaluate(t)

    def parameters(self, count):
        """``count`` parametres equidistants couvrant le domaine.

        :rtype: Equidistant
        """
        start, end = self.domain
        return Equidistant(count, start, end)

    def sample(self, count):
        """Echantillonne la courbe en ``count`` points equidistants.

        Le premier point est ``evaluate(min)``, le dernier
        ``evaluate(max)`` ; ``count == 1`` donne ``[evaluate(min)]``.
        La sequence retournee est paresseuse et peut etre parcourue
        plusieurs fois.

        :param count: nombre de points (>= 0)
        :type count: int
        :rtype: GeneratedSequence
        """
        if count < 0:
            raise ValueError("count doit etre >= 0, recu %d" % count)
        params = self.parameters(count)
        return GeneratedSequence(count, lambda i: self._eval(params.at(i)))

    # ------------------------------------------------------------------
    #  Adaptateurs
    # ------------------------------------------------------------------

    def clamp(self):
        """Courbe limitee a son domaine (pas d'extrapolation)."""
        from .adaptors import Clamp
        return Clamp(self)

    def wrap(self):
        """Courbe periodique de periode la largeur du domaine."""
        from .adaptors import Wrap
        return Wrap(self)

    def slice(self, start, end):
        """Meme courbe, domaine restreint a [start, end]."""
        from .adaptors import Slice
        return Slice(self, start, end)

    def reparametrize(self, start, end):
        """Meme courbe parcourue sur [start, end]."""
        from .adaptors import Reparametrize
        return Reparametrize(self, start, end)

    def composite(self, second):
        """Courbe t -> second(self(t)), sur le domaine de cette courbe."""
        from .adaptors import Composite
        return Composite(self, second)

    def stack(self, *others):
        """Enchaine cette courbe et ``others`` bout a bout."""
        from .adaptors import Stack
        return Stack(self, *others)

    # ------------------------------------------------------------------
    #  Trace
    # ------------------------------------------------------------------

    def plot(self, ax=None, show=True, n=None, label=None):
        """Trace la courbe.

        Elements scalaires : trace de la valeur en fonction de t.
        Elements 2D : trace de y en fonction de x.

        :param ax: axes matplotlib existants (None = creation)
        :param show: appeler plt.show() a la fin
        :param n: nombre de points (defaut PLOT_SAMPLES)
        :param label: legende de la courbe (defaut repr)
        :returns: axes matplotlib
        """
        import matplotlib.pyplot as plt

        if n is None:
            n = int(get_default('PLOT_SAMPLES'))
        if label is None:
            label = repr(self)
        t_vals = np.asarray(self.parameters(n).to_list(), dtype=float)
        values = np.asarray(self.evaluate(t_vals), dtype=float)

        if ax is None:
            fig, ax = plt.subplots(1, 1, figsize=(10, 6))

        if values.ndim == 1:
            ax.plot(t_vals, values, 'b-', linewidth=1.5, label=label)
            ax.set_xlabel('t')
        elif values.ndim == 2 and values.shape[1] == 2:
            ax.plot(values[:, 0], values[:, 1], 'b-', linewidth=1.5,
                    label=label)
            ax.set_aspect('equal')
        else:
            raise ValueError(
                "Trace impossible pour des elements de shape %s"
                % str(values.shape[1:]))

        ax.grid(True, alpha=0.3)
        ax.legend(fontsize=8)

        if show:
            plt.show()

        return ax


class ElementCurve(Curve):
    """Courbe definie par une sequence d'elements, eventuellement ponderes.

    Avec des poids, les noyaux travaillent en coordonnees homogenes et le
    resultat est projete (division par le poids final).
    """

    def __init__(self, elements, weights=None):
        self._elements = elements
        self._weights = weights
        self._eps = float(get_default('WEIGHT_EPSILON'))
        if weights is None:
            self._kernel_elements = elements
        else:
            self._kernel_elements = WeightedSequence(elements, weights)

    @property
    def elements(self):
        """Sequence des elements (points de controle)."""
        return self._elements

    @property
    def weights(self):
        """Sequence des poids, ou None."""
        return self._weights

    @property
    def is_rational(self):
        """True si la courbe est ponderee."""
        return self._weights is not None

    def _finish(self, value, t):
        """Projette un resultat homogene ; rien a faire sans poids."""
        if self._weights is None:
            return value
        return value.project(self._eps, t)
