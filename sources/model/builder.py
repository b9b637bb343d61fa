#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Constructeurs verifies des courbes.

Chaque etape retourne le constructeur (pour chainage) ; seule
:meth:`build` peut echouer. Les verifications suivent l'ordre des
etapes : elements, noeuds (mode, degre), domaine, poids. La premiere
erreur rencontree est levee, la courbe retournee est immuable.

Usage::

    lin = Linear.builder().elements([1., 5., 100.]).equidistant() \\
                          .normalized().build()

    nurbs = BSpline.builder() \\
        .elements_with_weights([([1., 0.], 1.), ([1., 1.], .7071), ...]) \\
        .knots([0., 0., 1., 1., 2., 2., 3., 3., 4., 4.]).build()

@author: Nervures
@date: 2026-02
"""

import logging

import numpy as np

from .bezier import Bezier
from .bspline import BSpline
from .errors import (InvalidDegree, NonPositiveWeight, TooFewElements,
                     WeightCountMismatch)
from .knots import (check_degree_type, check_domain, default_domain,
                    linear_knots, normalize_knots)
from .linear import Linear
from .sequence import (ArraySequence, DynamicSequence, FrozenSequence,
                       Sequence)

logger = logging.getLogger(__name__)


class CurveBuilder:
    """Etapes communes : elements, poids, domaine, stockage."""

    #: nombre minimal d'elements
    min_elements = 2

    def __init__(self):
        self._elements = None
        self._weights = None
        self._domain = None
        self._dynamic = False

    # ------------------------------------------------------------------
    #  Etapes
    # ------------------------------------------------------------------

    def elements(self, values):
        """Elements de la courbe : liste, ndarray ou :class:`Sequence`.

        Une sequence generee (:class:`GeneratedSequence`) est conservee
        telle quelle, ses elements sont calcules a la demande.

        :returns: self (pour chainage)
        """
        self._elements = values
        return self

    def elements_with_weights(self, pairs):
        """Elements et poids donnes par couples ``(element, poids)``.

        :returns: self (pour chainage)
        """
        pairs = list(pairs)
        self._elements = [e for e, _w in pairs]
        self._weights = [w for _e, w in pairs]
        return self

    def weights(self, values):
        """Poids des elements (courbe rationnelle).

        :returns: self (pour chainage)
        """
        self._weights = values
        return self

    def domain(self, start, end):
        """Domaine de la courbe.

        :returns: self (pour chainage)
        """
        self._domain = (start, end)
        return self

    def normalized(self):
        """Domaine [0, 1].

        :returns: self (pour chainage)
        """
        return self.domain(0.0, 1.0)

    def constant(self):
        """Stockage fixe des elements (defaut).

        :returns: self (pour chainage)
        """
        self._dynamic = False
        return self

    def dynamic(self):
        """Stockage extensible des elements.

        :returns: self (pour chainage)
        """
        self._dynamic = True
        return self

    # ------------------------------------------------------------------
    #  Verifications
    # ------------------------------------------------------------------

    def _build_elements(self):
        values = self._elements
        if values is None:
            raise TooFewElements(0, self.min_elements)
        if isinstance(values, Sequence) and values.generated:
            seq = values
        elif self._dynamic:
            seq = FrozenSequence(DynamicSequence(values))
        else:
            seq = ArraySequence(values)
        if len(seq) < self.min_elements:
            raise TooFewElements(len(seq), self.min_elements)
        return seq

    def _build_weights(self, n_elements):
        if self._weights is None:
            return None
        values = self._weights
        if isinstance(values, Sequence):
            values = values.to_list()
        w = np.array(values, dtype=float).ravel()
        if len(w) != n_elements:
            raise WeightCountMismatch(len(w), n_elements)
        bad = np.flatnonzero(~(np.isfinite(w) & (w > 0.0)))
        if bad.size:
            raise NonPositiveWeight(int(bad[0]), float(w[bad[0]]))
        return ArraySequence(w)

    def build(self):
        """Verifie la configuration et construit la courbe."""
        curve = self._build()
        logger.debug("Courbe construite : %r", curve)
        return curve

    def _build(self):
        raise NotImplementedError


class LinearBuilder(CurveBuilder):
    """Constructeur de :class:`Linear`.

    Noeuds explicites (un par element) ou equidistants sur le domaine
    (defaut). Un seul element suffit : la courbe est alors constante.
    """

    min_elements = 1

    def __init__(self):
        super().__init__()
        self._knots = None
        self._easing = None

    def knots(self, values):
        """Noeuds explicites, un par element.

        :returns: self (pour chainage)
        """
        self._knots = values
        return self

    def equidistant(self):
        """Noeuds equidistants sur le domaine.

        :returns: self (pour chainage)
        """
        self._knots = None
        return self

    def easing(self, func):
        """Fonction d'attenuation appliquee au facteur de melange.

        :returns: self (pour chainage)
        """
        self._easing = func
        return self

    def _build(self):
        elements = self._build_elements()
        knots, _degree, domain = linear_knots(len(elements), self._knots,
                                              self._domain)
        weights = self._build_weights(len(elements))
        return Linear(knots, elements, domain, weights=weights,
                      easing=self._easing)


class BezierBuilder(CurveBuilder):
    """Constructeur de :class:`Bezier`. Le degre vaut nb_elements - 1."""

    def __init__(self):
        super().__init__()
        self._degree = None

    def degree(self, value):
        """Degre attendu (doit valoir nb_elements - 1).

        :returns: self (pour chainage)
        """
        self._degree = value
        return self

    def _build(self):
        elements = self._build_elements()
        n = len(elements)
        if self._degree is not None:
            degree = check_degree_type(self._degree, n)
            if degree != n - 1:
                raise InvalidDegree(
                    degree, n,
                    "Une courbe de Bezier a %d elements est de degre %d, "
                    "recu %d" % (n, n - 1, degree))
        if self._domain is None:
            domain = default_domain()
        else:
            domain = check_domain(*self._domain)
        weights = self._build_weights(n)
        return Bezier(elements, domain, weights=weights)


class BSplineBuilder(CurveBuilder):
    """Constructeur de :class:`BSpline` (NURBS avec des poids).

    Mode des noeuds : ``open()`` (defaut, noeuds internes), ``clamped()``
    (noeuds distincts, extremites repetees) ou ``legacy()`` (vecteur
    classique de n + p + 1 noeuds). Sans ``knots()``, les noeuds sont
    equidistants et le degre est obligatoire.
    """

    def __init__(self):
        super().__init__()
        self._mode = 'open'
        self._knots = None
        self._degree = None

    def open(self):
        """Noeuds internes fournis tels quels (n + p - 1 noeuds).

        :returns: self (pour chainage)
        """
        self._mode = 'open'
        return self

    def clamped(self):
        """Courbe passant par le premier et le dernier element.

        :returns: self (pour chainage)
        """
        self._mode = 'clamped'
        return self

    def legacy(self):
        """Vecteur de noeuds classique (n + p + 1 noeuds).

        :returns: self (pour chainage)
        """
        self._mode = 'legacy'
        return self

    def knots(self, values):
        """Noeuds explicites, interpretes selon le mode.

        :returns: self (pour chainage)
        """
        self._knots = values
        return self

    def equidistant(self):
        """Noeuds equidistants sur le domaine (degre obligatoire).

        :returns: self (pour chainage)
        """
        self._knots = None
        return self

    def degree(self, value):
        """Degre de la spline ; deduit des noeuds si absent.

        :returns: self (pour chainage)
        """
        self._degree = value
        return self

    def _build(self):
        elements = self._build_elements()
        knots, degree, domain = normalize_knots(
            len(elements), self._mode, knots=self._knots,
            degree=self._degree, domain=self._domain)
        weights = self._build_weights(len(elements))
        return BSpline(knots, elements, degree, domain, weights=weights)
