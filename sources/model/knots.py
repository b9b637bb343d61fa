#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Normalisation des vecteurs de noeuds.

Conventions, pour ``n`` elements et un degre ``p`` :

- vecteur classique (mode ``'legacy'``) : ``n + p + 1`` noeuds ;
- vecteur interne (normalise) : ``n + p - 1`` noeuds, soit le vecteur
  classique sans son premier ni son dernier noeud ;
- domaine de la courbe : ``[k[p-1], k[n-1]]`` en indices internes.

Modes acceptes par :func:`normalize_knots` :

- ``'open'`` : les noeuds fournis sont deja le vecteur interne ;
- ``'legacy'`` : vecteur classique, le premier et le dernier noeud sont
  supprimes ;
- ``'clamped'`` : seuls les noeuds distincts du domaine sont fournis
  (``n - p + 1`` noeuds), les extremites sont repetees pour que la courbe
  passe par le premier et le dernier element.

Sans noeuds explicites, un vecteur equidistant est genere sur le domaine
demande ; le degre est alors obligatoire.

@author: Nervures
@date: 2026-02
"""

import math
import operator
from collections import namedtuple

from .curveconfig import get_default
from .errors import (InvalidDegree, InvalidDomain, KnotCountMismatch,
                     KnotsNotSorted, LegacyKnotMismatch)
from .sequence import (ArraySequence, BorderBuffer, BorderDeletion,
                       Equidistant, Sorted, find_unsorted)

MODES = ('open', 'clamped', 'legacy')

#: Resultat de la normalisation : noeuds internes, degre et domaine
KnotVector = namedtuple('KnotVector', ['knots', 'degree', 'domain'])


def default_domain():
    """Domaine par defaut (DOMAIN_MIN, DOMAIN_MAX) du fichier de defauts."""
    return (float(get_default('DOMAIN_MIN')),
            float(get_default('DOMAIN_MAX')))


def check_domain(start, end):
    """Verifie qu'un domaine est fini et non vide.

    :returns: (start, end) en flottants
    :rtype: tuple
    :raises InvalidDomain: si ``start >= end`` ou une borne non finie
    """
    start = float(start)
    end = float(end)
    if not (math.isfinite(start) and math.isfinite(end)) or not start < end:
        raise InvalidDomain(start, end)
    return start, end


def check_degree_type(degree, n_elements=None):
    """Convertit un degre en entier.

    :raises InvalidDegree: si le degre n'est pas un entier (2.0 refuse)
    """
    try:
        return operator.index(degree)
    except TypeError:
        raise InvalidDegree(
            degree, n_elements,
            "Le degre doit etre un entier, recu %r" % (degree,)) from None


def _check_degree(degree, n_elements, minimum=0):
    if degree < minimum or degree > n_elements - 1:
        if degree < minimum and minimum > 0:
            reason = ("Degre %d non supporte avec des noeuds explicites "
                      "(domaine indeterminable), minimum %d"
                      % (degree, minimum))
        else:
            reason = ("Degre %d hors de [%d, %d] pour %d element(s)"
                      % (degree, minimum, n_elements - 1, n_elements))
        raise InvalidDegree(degree, n_elements, reason)


def _check_sorted(values):
    index = find_unsorted(values)
    if index is not None:
        raise KnotsNotSorted(index)


def _reject_imposed_domain(domain):
    if domain is not None:
        raise InvalidDomain(
            domain[0], domain[1],
            "Le domaine est deduit des noeuds explicites, "
            "il ne peut pas etre impose")


def normalize_knots(n_elements, mode='open', knots=None, degree=None,
                    domain=None):
    """Construit le vecteur de noeuds interne d'une B-spline.

    Ordre des verifications : nombre de noeuds (si le degre est fourni),
    ordre croissant, bornes du degre. La premiere erreur est levee.

    :param n_elements: nombre d'elements (points de controle)
    :type n_elements: int
    :param mode: ``'open'``, ``'clamped'`` ou ``'legacy'``
    :type mode: str
    :param knots: noeuds explicites, ou None pour des noeuds equidistants
    :type knots: array-like or None
    :param degree: degre, deduit du nombre de noeuds si None
    :type degree: int or None
    :param domain: domaine (min, max) des noeuds equidistants
    :type domain: tuple or None
    :returns: noeuds internes, degre, domaine
    :rtype: KnotVector
    """
    if mode not in MODES:
        raise ValueError("Mode de noeuds inconnu '%s'. Attendu : %s"
                         % (mode, ', '.join(MODES)))
    if degree is not None:
        degree = check_degree_type(degree, n_elements)
    if knots is None:
        return _equidistant_knots(n_elements, mode, degree, domain)
    raw = ArraySequence(knots)
    m = len(raw)
    n = n_elements

    if mode == 'open':
        if degree is not None and m != n + degree - 1:
            raise KnotCountMismatch(m, n + degree - 1)
        p = m - n + 1
    elif mode == 'legacy':
        if degree is not None and m != n + degree + 1:
            raise LegacyKnotMismatch(m, n + degree + 1)
        p = m - n - 1
    else:
        if degree is not None and m != n - degree + 1:
            raise KnotCountMismatch(m, n - degree + 1)
        p = n - m + 1

    # les bordures ajoutees repetent les extremites : verifier les noeuds
    # fournis suffit
    _check_sorted(raw.to_list())
    _check_degree(p, n, minimum=1 if mode == 'open' else 0)

    if mode == 'open':
        normalized = Sorted(raw)
        dom = (raw.at(p - 1), raw.at(n - 1))
    elif mode == 'legacy':
        normalized = BorderDeletion(Sorted(raw))
        dom = (raw.at(p), raw.at(n))
    else:
        if p >= 1:
            normalized = BorderBuffer(Sorted(raw), p - 1)
        else:
            normalized = BorderDeletion(Sorted(raw))
        dom = (raw.at(0), raw.at(m - 1))
    _reject_imposed_domain(domain)
    dom = check_domain(*dom)
    return KnotVector(normalized, p, dom)


def _equidistant_knots(n_elements, mode, degree, domain):
    if degree is None:
        raise InvalidDegree(
            None, n_elements,
            "Le degre est obligatoire pour des noeuds equidistants")
    n = n_elements
    p = degree
    _check_degree(p, n)
    if domain is None:
        domain = default_domain()
    start, end = check_domain(*domain)
    if mode == 'clamped':
        inner = Equidistant(n - p + 1, start, end)
        if p >= 1:
            normalized = BorderBuffer(inner, p - 1)
        else:
            normalized = BorderDeletion(inner)
    else:
        # pas choisi pour que [k[p-1], k[n-1]] soit exactement le domaine
        h = (end - start) / (n - p)
        normalized = Equidistant.step(n + p - 1, start - (p - 1) * h, h)
    return KnotVector(normalized, p, (start, end))


def linear_knots(n_elements, knots=None, domain=None):
    """Noeuds d'une interpolation lineaire : un noeud par element.

    :returns: noeuds tries et domaine (premier, dernier noeud)
    :rtype: KnotVector (degre 1)
    """
    if knots is None:
        if domain is None:
            domain = default_domain()
        start, end = check_domain(*domain)
        return KnotVector(Equidistant(n_elements, start, end), 1,
                          (start, end))
    raw = ArraySequence(knots)
    if len(raw) != n_elements:
        raise KnotCountMismatch(len(raw), n_elements)
    _check_sorted(raw.to_list())
    _reject_imposed_domain(domain)
    dom = (float(raw.at(0)), float(raw.at(len(raw) - 1)))
    if n_elements >= 2:
        dom = check_domain(*dom)
    return KnotVector(Sorted(raw), 1, dom)
