#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Tests pour la classe Bezier.

Lance :
    python test_bezier.py

@author: Nervures
@date: 2026-02
"""

import os
import sys
import unittest

import numpy as np

# Ajouter le repertoire sources/ au path
_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

import matplotlib
matplotlib.use('Agg')

from model.bezier import Bezier, de_casteljau
from model.errors import InvalidDegree, InvalidDomain, TooFewElements
from model.sequence import ArraySequence


def make(points, **kwargs):
    builder = Bezier.builder().elements(points)
    if 'domain' in kwargs:
        builder.domain(*kwargs['domain'])
    if 'weights' in kwargs:
        builder.weights(kwargs['weights'])
    return builder.build()


class Vec2:
    """Element minimal : addition et produit par un scalaire."""

    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, s):
        return Vec2(self.x * s, self.y * s)


class TestBezierConstruction(unittest.TestCase):
    """Tests de construction."""

    def test_from_list(self):
        """Creation depuis une liste de listes."""
        b = make([[0, 0], [100, 200], [300, 200], [400, 0]])
        self.assertIsInstance(b, Bezier)
        self.assertEqual(b.degree, 3)
        self.assertEqual(len(b.elements), 4)

    def test_from_ndarray(self):
        """Creation depuis un ndarray."""
        b = make(np.array([[0, 0], [50, 100], [100, 0]]))
        self.assertEqual(b.degree, 2)

    def test_degree_1(self):
        """Degre 1 (droite) : 2 points."""
        b = make([[0, 0], [100, 50]])
        self.assertEqual(b.degree, 1)

    def test_too_few_points_raises(self):
        """Moins de 2 points -> TooFewElements."""
        with self.assertRaises(TooFewElements):
            make([[0, 0]])

    def test_degree_mismatch_raises(self):
        """Degre incompatible avec le nombre d'elements."""
        with self.assertRaises(InvalidDegree):
            Bezier.builder().elements([0., 1., 2.]).degree(3).build()
        b = Bezier.builder().elements([0., 1., 2.]).degree(2).build()
        self.assertEqual(b.degree, 2)

    def test_invalid_domain_raises(self):
        """Domaine inverse -> InvalidDomain."""
        with self.assertRaises(InvalidDomain):
            make([0., 1.], domain=(1., 0.))

    def test_default_domain(self):
        """Domaine par defaut [0, 1]."""
        self.assertEqual(make([0., 1.]).domain, (0., 1.))

    def test_repr(self):
        """__repr__ lisible."""
        r = repr(make([[0, 0], [1, 2], [3, 4], [5, 0]]))
        self.assertIn('degre=3', r)
        self.assertIn('4 elements', r)


class TestBezierEvaluation(unittest.TestCase):
    """Tests d'evaluation."""

    def test_eval_t0(self):
        """B(0) = P0."""
        b = make([[10, 20], [50, 100], [90, 100], [130, 20]])
        np.testing.assert_allclose(b.evaluate(0.0), [10, 20], atol=1e-10)

    def test_eval_t1(self):
        """B(1) = Pn."""
        b = make([[10, 20], [50, 100], [90, 100], [130, 20]])
        np.testing.assert_allclose(b.evaluate(1.0), [130, 20], atol=1e-10)

    def test_eval_line_midpoint(self):
        """Droite (degre 1) : B(0.5) = milieu."""
        b = make([[0, 0], [100, 60]])
        np.testing.assert_allclose(b.evaluate(0.5), [50, 30], atol=1e-10)

    def test_eval_quadratic_midpoint(self):
        """Quadratique symetrique : B(0.5) = point connu."""
        # B(0.5) = 0.25*P0 + 0.5*P1 + 0.25*P2 = (50, 50)
        b = make([[0, 0], [50, 100], [100, 0]])
        np.testing.assert_allclose(b.evaluate(0.5), [50, 50], atol=1e-10)

    def test_eval_vector_t(self):
        """Evaluation avec un vecteur de t."""
        b = make([[0, 0], [100, 0]])
        pts = b.evaluate(np.array([0.0, 0.25, 0.5, 0.75, 1.0]))
        self.assertEqual(pts.shape, (5, 2))
        np.testing.assert_allclose(pts[:, 0], [0, 25, 50, 75, 100], atol=1e-10)
        np.testing.assert_allclose(pts[:, 1], 0, atol=1e-10)

    def test_eval_scalar_returns_1d(self):
        """t scalaire -> ndarray(2,)."""
        self.assertEqual(make([[0, 0], [1, 1]]).evaluate(0.5).shape, (2,))

    def test_scalar_sample(self):
        """Elements scalaires, 5 echantillons."""
        b = make([20., 100., 0., 200.])
        np.testing.assert_allclose(list(b.sample(5)),
                                   [20., 53.75, 65., 98.75, 200.])

    def test_extrapolation(self):
        """Hors de [0, 1], le polynome est prolonge."""
        b = make([20., 0., 200.])
        self.assertAlmostEqual(b.evaluate(2.), 820.)
        self.assertAlmostEqual(b.evaluate(-1.), 280.)

    def test_domain_mapping(self):
        """Domaine [1, 3] : t=2 correspond a u=0.5."""
        pts = [[0, 0], [50, 100], [100, 0]]
        b = make(pts, domain=(1., 3.))
        np.testing.assert_allclose(b.evaluate(2.), make(pts).evaluate(0.5))

    def test_generic_elements(self):
        """Elements quelconques : resultat du meme type."""
        b = make([Vec2(0., 0.), Vec2(2., 4.)])
        p = b.evaluate(0.5)
        self.assertIsInstance(p, Vec2)
        self.assertAlmostEqual(p.x, 1.)
        self.assertAlmostEqual(p.y, 2.)
        self.assertIsInstance(b.evaluate([0., 1.]), list)

    def test_kernel_generic_and_vectorized(self):
        """Le noyau donne le meme resultat sur ndarray et sur Sequence."""
        pts = np.array([[0., 0.], [1., 3.], [2., -1.], [4., 0.]])
        np.testing.assert_allclose(de_casteljau(pts, 0.3),
                                   de_casteljau(ArraySequence(pts), 0.3))


class TestBezierDerivatives(unittest.TestCase):
    """Tests des derivees."""

    def test_deriv1_line(self):
        """Droite (degre 1) : derivee constante = direction."""
        b = make([[0, 0], [100, 60]])
        np.testing.assert_allclose(b.derivative(0.0), [100, 60], atol=1e-10)
        np.testing.assert_allclose(b.derivative(0.7), [100, 60], atol=1e-10)

    def test_deriv1_cubic_endpoints(self):
        """B'(0) = 3*(P1-P0), B'(1) = 3*(P3-P2)."""
        P = np.array([[0, 0], [100, 200], [300, 200], [400, 0]], dtype=float)
        b = make(P)
        np.testing.assert_allclose(b.derivative(0.0), 3 * (P[1] - P[0]))
        np.testing.assert_allclose(b.derivative(1.0), 3 * (P[3] - P[2]))

    def test_deriv2_quadratic(self):
        """Quadratique : B'' = 2*(P2 - 2*P1 + P0) constante."""
        P = np.array([[0, 0], [50, 100], [100, 0]], dtype=float)
        b = make(P)
        expected = 2 * (P[2] - 2 * P[1] + P[0])
        np.testing.assert_allclose(b.derivative(0.3, order=2), expected)

    def test_deriv_beyond_degree(self):
        """Ordre > degre : derivee nulle."""
        b = make([[0, 0], [100, 60]])
        np.testing.assert_allclose(b.derivative(0.5, order=2), [0, 0])

    def test_deriv_domain_scaling(self):
        """Domaine de largeur 2 : derivee divisee par 2."""
        b = make([[0, 0], [100, 60]], domain=(0., 2.))
        np.testing.assert_allclose(b.derivative(1.0), [50, 30])

    def test_deriv_vector_t(self):
        """Derivee sur un vecteur de t."""
        b = make([[0, 0], [100, 200], [300, 200], [400, 0]])
        self.assertEqual(b.derivative([0., .5, 1.]).shape, (3, 2))

    def test_deriv_finite_difference(self):
        """Coherence avec une difference finie."""
        b = make([1., 4., -2., 3., 0.])
        h = 1e-6
        fd = (b.evaluate(0.4 + h) - b.evaluate(0.4 - h)) / (2 * h)
        self.assertAlmostEqual(b.derivative(0.4), fd, places=5)

    def test_deriv_invalid_order(self):
        """Ordre < 1 -> ValueError."""
        with self.assertRaises(ValueError):
            make([[0, 0], [1, 1]]).derivative(0.5, order=0)

    def test_deriv_rational_raises(self):
        """Courbe rationnelle -> ValueError."""
        b = make([0., 1., 2.], weights=[1., 2., 1.])
        with self.assertRaises(ValueError):
            b.derivative(0.5)


class TestBezierElevate(unittest.TestCase):
    """Elevation de degre."""

    def test_elevate_preserves_shape(self):
        """La courbe elevee est identique."""
        b = make([[0, 0], [100, 200], [300, 200], [400, 0]])
        c = b.elevate(times=2)
        self.assertEqual(c.degree, 5)
        t = np.linspace(0, 1, 21)
        np.testing.assert_allclose(c.evaluate(t), b.evaluate(t), atol=1e-9)

    def test_elevate_returns_new(self):
        """La courbe d'origine n'est pas modifiee."""
        b = make([0., 1., 0.])
        b.elevate()
        self.assertEqual(b.degree, 2)

    def test_elevate_rational(self):
        """Elevation d'une courbe rationnelle."""
        b = make([[0, 0], [1, 1], [2, 0]], weights=[1., 2., 1.])
        c = b.elevate()
        self.assertTrue(c.is_rational)
        t = np.linspace(0, 1, 11)
        np.testing.assert_allclose(c.evaluate(t), b.evaluate(t), atol=1e-12)

    def test_elevate_invalid(self):
        """times < 1 -> ValueError."""
        with self.assertRaises(ValueError):
            make([0., 1.]).elevate(0)


class TestBezierBasis(unittest.TestCase):
    """Polynomes de Bernstein."""

    def test_partition_of_unity(self):
        """Somme des polynomes = 1."""
        b = make([0., 1., 3., 2., 5.])
        t = np.linspace(-0.5, 1.5, 9)
        np.testing.assert_allclose(b.basis(t).sum(axis=1), 1.0)

    def test_basis_reproduces_curve(self):
        """Combinaison des elements par la base = evaluation."""
        elements = np.array([0., 1., 3., 2., 5.])
        b = make(elements, domain=(2., 4.))
        for t in (2., 2.5, 3.7, 4.):
            self.assertAlmostEqual(b.basis(t).dot(elements), b.evaluate(t))

    def test_basis_scalar_shape(self):
        """t scalaire -> ndarray(n+1,)."""
        self.assertEqual(make([0., 1., 2.]).basis(0.5).shape, (3,))


class TestBezierPlot(unittest.TestCase):
    """Trace matplotlib."""

    def test_plot_2d(self):
        """Trace y(x) pour des elements 2D."""
        b = make([[0, 0], [100, 200], [300, 200], [400, 0]])
        ax = b.plot(show=False, n=50)
        x = ax.lines[0].get_xdata()
        self.assertEqual(len(x), 50)
        self.assertAlmostEqual(x[-1], 400.)

    def test_plot_3d_raises(self):
        """Elements 3D -> ValueError."""
        b = make([[0, 0, 0], [1, 1, 1]])
        with self.assertRaises(ValueError):
            b.plot(show=False)


if __name__ == '__main__':
    unittest.main()
