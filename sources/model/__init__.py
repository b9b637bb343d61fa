#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Package curvetools : courbes parametriques.

Interpolation lineaire, courbes de Bezier, B-splines et NURBS sur des
elements quelconques (nombres, vecteurs numpy, ...).

Usage::

    from curvetools import BSpline

    s = BSpline.builder().elements([0., 5., 3., 10., 7.]) \\
                         .clamped().equidistant().degree(3) \\
                         .normalized().build()
    list(s.sample(11))

@author: Nervures
@date: 2026-02
"""

from .errors import (CurveError, TooFewElements, InvalidDegree,
                     KnotCountMismatch, LegacyKnotMismatch, KnotsNotSorted,
                     InvalidDomain, WeightCountMismatch, NonPositiveWeight,
                     DegenerateWeight)
from .sequence import (Sequence, ArraySequence, DynamicSequence,
                       FrozenSequence, Repeat, GeneratedSequence,
                       SortedSequence, Sorted, Equidistant, BorderBuffer,
                       BorderDeletion)
from .homogeneous import Homogeneous, WeightedSequence
from .knots import KnotVector, normalize_knots, linear_knots
from .base import Curve
from .linear import Linear, linear_interpolate
from .bezier import Bezier, de_casteljau
from .bspline import BSpline, de_boor
from .adaptors import (Clamp, Wrap, Slice, Reparametrize, Stack,
                       Composite)
from .builder import LinearBuilder, BezierBuilder, BSplineBuilder
from .easing import (identity, flip, smoothstart, smoothend, smoothstep,
                     smootherstep, Plateau)
from .curveio import to_dict, from_dict, save, load
from .curveconfig import load_config, load_defaults, merge_params
