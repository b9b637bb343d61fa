#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Sequences indexables utilisees pour les elements, les noeuds et les poids.

Une sequence est une collection finie, de longueur connue, accedee par
index. Le stockage peut etre fixe (:class:`ArraySequence`), extensible
(:class:`DynamicSequence`) ou calcule a la demande
(:class:`GeneratedSequence`, :class:`Equidistant`).

Les sequences triees (:class:`SortedSequence`) offrent en plus une
recherche dichotomique de la borne superieure stricte, utilisee par les
noyaux d'evaluation.

Usage::

    k = Sorted.checked([0., 0., 1., 2., 3., 3.])
    k.strict_upper_bound(1.5)        # 3
    e = Equidistant(5, 0., 1.)
    list(e)                          # [0., .25, .5, .75, 1.]

@author: Nervures
@date: 2026-02
"""

import bisect
import math
import operator
from abc import ABC, abstractmethod

import numpy as np

from .errors import KnotsNotSorted, TooFewElements


def find_unsorted(values):
    """Index du premier noeud qui rompt l'ordre croissant, ou None.

    Un NaN rompt l'ordre (il n'est comparable a rien).

    :param values: valeurs a verifier
    :type values: array-like
    :returns: index fautif ou None si la suite est triee
    :rtype: int or None
    """
    arr = np.asarray(values, dtype=float).ravel()
    if arr.size == 0:
        return None
    if np.isnan(arr[0]):
        return 0
    bad = np.flatnonzero(~(arr[1:] >= arr[:-1]))
    if bad.size:
        return int(bad[0]) + 1
    return None


# --------------------------------------------------------------------------
#  Classe abstraite
# --------------------------------------------------------------------------

class Sequence(ABC):
    """Collection finie indexable.

    ``at(i)`` n'est pas verifie : ``0 <= i < len(seq)`` est a la charge de
    l'appelant. ``seq[i]`` est verifie et accepte les index negatifs.
    """

    #: True si les valeurs sont calculees a chaque acces
    generated = False

    @abstractmethod
    def __len__(self):
        pass

    @abstractmethod
    def at(self, index):
        """Valeur d'index ``index``, sans verification."""
        pass

    def __getitem__(self, index):
        if isinstance(index, slice):
            raise TypeError("%s ne supporte pas le decoupage"
                            % type(self).__name__)
        index = operator.index(index)
        n = len(self)
        if index < -n or index >= n:
            raise IndexError(
                "Index %d hors limites pour %d valeurs" % (index, n))
        if index < 0:
            index += n
        return self.at(index)

    def __iter__(self):
        for i in range(len(self)):
            yield self.at(i)

    def first(self):
        """Premiere valeur."""
        return self[0]

    def last(self):
        """Derniere valeur."""
        return self[-1]

    def to_list(self):
        """Copie des valeurs dans une liste."""
        return [self.at(i) for i in range(len(self))]

    def __repr__(self):
        return "%s(%d valeurs)" % (type(self).__name__, len(self))


def as_sequence(values):
    """Retourne ``values`` si c'est deja une :class:`Sequence`, sinon
    l'encapsule dans une :class:`ArraySequence`."""
    if isinstance(values, Sequence):
        return values
    return ArraySequence(values)


# --------------------------------------------------------------------------
#  Stockages
# --------------------------------------------------------------------------

class ArraySequence(Sequence):
    """Stockage fixe.

    Les donnees numeriques (nombres, listes de vecteurs, ndarray) sont
    converties en ndarray flottant en lecture seule, le premier axe
    indexant les valeurs. Les autres objets sont gardes dans un tuple.
    """

    def __init__(self, values):
        if isinstance(values, Sequence):
            values = values.to_list()
        elif not isinstance(values, (list, tuple, np.ndarray)):
            values = list(values)
        try:
            arr = np.array(values, dtype=float)
        except (TypeError, ValueError):
            arr = None
        if arr is not None and arr.ndim >= 1:
            arr.setflags(write=False)
            self._data = arr
        else:
            self._data = tuple(values)

    def __len__(self):
        return len(self._data)

    def at(self, index):
        return self._data[index]

    @property
    def values(self):
        """Donnees brutes (ndarray en lecture seule ou tuple)."""
        return self._data

    @property
    def is_numeric(self):
        """True si le stockage est un ndarray flottant."""
        return isinstance(self._data, np.ndarray)


class DynamicSequence(Sequence):
    """Stockage extensible (liste).

    Les lignes donnees sous forme de liste, de tuple ou de ndarray sont
    copiees dans un ndarray flottant en lecture seule.
    """

    def __init__(self, values=()):
        self._data = []
        self.extend(values)

    @staticmethod
    def _coerce(value):
        if isinstance(value, (list, tuple, np.ndarray)):
            value = np.array(value, dtype=float)
            value.setflags(write=False)
        return value

    def append(self, value):
        """Ajoute une valeur en fin de sequence.

        :returns: self (pour chainage)
        :rtype: DynamicSequence
        """
        self._data.append(self._coerce(value))
        return self

    def extend(self, values):
        """Ajoute plusieurs valeurs en fin de sequence.

        :returns: self (pour chainage)
        :rtype: DynamicSequence
        """
        for value in values:
            self._data.append(self._coerce(value))
        return self

    def __len__(self):
        return len(self._data)

    def at(self, index):
        return self._data[index]


class FrozenSequence(Sequence):
    """Vue en lecture seule d'une autre sequence.

    Masque les methodes de modification (``append``, ``extend``) du
    stockage enveloppe, garde par la courbe construite.
    """

    def __init__(self, inner):
        self._inner = as_sequence(inner)

    def __len__(self):
        return len(self._inner)

    def at(self, index):
        return self._inner.at(index)


class Repeat(Sequence):
    """Vue de ``length`` valeurs repetant cycliquement une sequence.

    ``at(i)`` vaut ``inner.at(i % len(inner))``.
    """

    def __init__(self, inner, length):
        self._inner = as_sequence(inner)
        if not len(self._inner):
            raise TooFewElements(0, 1)
        self._length = operator.index(length)
        if self._length < 0:
            raise ValueError("Longueur negative : %d" % self._length)

    @property
    def inner(self):
        return self._inner

    def __len__(self):
        return self._length

    def at(self, index):
        return self._inner.at(index % len(self._inner))


class GeneratedSequence(Sequence):
    """Valeurs calculees a la demande par ``func(index)``.

    Rien n'est stocke : chaque iteration recalcule les valeurs, une meme
    instance peut donc etre parcourue plusieurs fois.
    """

    generated = True

    def __init__(self, length, func):
        """
        :param length: nombre de valeurs
        :type length: int
        :param func: fonction index -> valeur
        :type func: callable
        """
        length = operator.index(length)
        if length < 0:
            raise ValueError("Longueur negative : %d" % length)
        self._length = length
        self._func = func

    def __len__(self):
        return self._length

    def at(self, index):
        return self._func(index)


# --------------------------------------------------------------------------
#  Sequences triees
# --------------------------------------------------------------------------

class SortedSequence(Sequence):
    """Sequence dont les valeurs sont croissantes (au sens large)."""

    def strict_upper_bound(self, value, lo=0, hi=None):
        """Premier index de ``[lo, hi)`` dont la valeur est > ``value``.

        Retourne ``hi`` si aucune valeur ne depasse ``value``.
        Recherche dichotomique, O(log n).

        :param value: valeur cherchee
        :type value: float
        :param lo: borne inferieure de recherche
        :type lo: int
        :param hi: borne superieure (exclue) de recherche, defaut len
        :type hi: int or None
        :rtype: int
        """
        if hi is None:
            hi = len(self)
        if lo >= hi:
            return lo
        return bisect.bisect_right(self, value, lo, hi)

    def upper_border(self, value):
        """Intervalle encadrant ``value`` et facteur de melange.

        Hors des noeuds, le premier (ou dernier) intervalle est utilise :
        le facteur sort alors de [0, 1] (extrapolation). Un intervalle de
        largeur nulle donne un facteur 1 (valeur de droite).

        :param value: parametre
        :type value: float
        :returns: (index_bas, index_haut, facteur)
        :rtype: tuple
        """
        n = len(self)
        if n < 2:
            raise TooFewElements(n, 2)
        idx = self.strict_upper_bound(value)
        if idx == 0:
            lo, hi = 0, 1
        elif idx == n:
            lo, hi = n - 2, n - 1
        else:
            lo, hi = idx - 1, idx
        k_lo = self.at(lo)
        width = self.at(hi) - k_lo
        if width == 0:
            return lo, hi, 1.0
        return lo, hi, (value - k_lo) / width


class Sorted(SortedSequence):
    """Vue triee d'une sequence.

    Le constructeur fait confiance a l'appelant ; :meth:`checked` verifie
    l'ordre une fois et leve :class:`KnotsNotSorted` sinon.
    """

    def __init__(self, inner):
        self._inner = as_sequence(inner)

    @classmethod
    def checked(cls, inner):
        """Construit la vue apres verification exhaustive de l'ordre.

        :raises KnotsNotSorted: si une valeur decroit ou est NaN
        """
        inner = as_sequence(inner)
        index = find_unsorted(inner.to_list())
        if index is not None:
            raise KnotsNotSorted(index)
        return cls(inner)

    @property
    def inner(self):
        return self._inner

    def __len__(self):
        return len(self._inner)

    def at(self, index):
        return self._inner.at(index)


class Equidistant(SortedSequence):
    """``length`` valeurs regulierement espacees de ``start`` a ``end``.

    La derniere valeur vaut exactement ``end``. La recherche de borne
    superieure est en O(1).
    """

    generated = True

    def __init__(self, length, start, end):
        length = operator.index(length)
        if length < 0:
            raise ValueError("Longueur negative : %d" % length)
        self._length = length
        self._start = float(start)
        self._end = float(end)
        if length > 1:
            self._step = (self._end - self._start) / (length - 1)
        else:
            self._step = 0.0

    @classmethod
    def step(cls, length, start, step):
        """Construit la sequence a partir du pas plutot que de la fin."""
        return cls(length, start, float(start) + float(step) * (length - 1))

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @property
    def spacing(self):
        """Pas entre deux valeurs consecutives."""
        return self._step

    def __len__(self):
        return self._length

    def at(self, index):
        if index and index == self._length - 1:
            return self._end
        return self._start + index * self._step

    def strict_upper_bound(self, value, lo=0, hi=None):
        if hi is None:
            hi = self._length
        if lo >= hi:
            return lo
        if self._step <= 0.0:
            return super().strict_upper_bound(value, lo, hi)
        q = (value - self._start) / self._step
        if not math.isfinite(q):
            return super().strict_upper_bound(value, lo, hi)
        guess = min(max(int(math.floor(q)) + 1, lo), hi)
        # correction des erreurs d'arrondi
        while guess > lo and self.at(guess - 1) > value:
            guess -= 1
        while guess < hi and self.at(guess) <= value:
            guess += 1
        return guess

    def __repr__(self):
        return "Equidistant(%d, %g, %g)" % (
            self._length, self._start, self._end)


class BorderBuffer(SortedSequence):
    """Repete ``n`` fois de plus la premiere et la derniere valeur.

    Sert a completer les noeuds d'une B-spline bornee (clamped).
    """

    def __init__(self, inner, n):
        self._inner = as_sequence(inner)
        self._n = operator.index(n)
        if self._n < 0:
            raise ValueError("Nombre de repetitions negatif : %d" % self._n)
        if len(self._inner) < 1:
            raise TooFewElements(len(self._inner), 1)

    def __len__(self):
        return len(self._inner) + 2 * self._n

    def at(self, index):
        m = len(self._inner)
        if index < self._n:
            return self._inner.at(0)
        if index >= self._n + m:
            return self._inner.at(m - 1)
        return self._inner.at(index - self._n)


class BorderDeletion(SortedSequence):
    """Vue sans la premiere ni la derniere valeur.

    Sert a convertir un vecteur de noeuds classique en vecteur interne.
    """

    def __init__(self, inner):
        self._inner = as_sequence(inner)
        if len(self._inner) < 2:
            raise TooFewElements(len(self._inner), 2)

    def __len__(self):
        return len(self._inner) - 2

    def at(self, index):
        return self._inner.at(index + 1)
