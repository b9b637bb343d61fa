#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Forme persistee des courbes.

Une courbe construite se decrit par ses champs bruts (type, elements,
noeuds, degre, domaine, poids). :func:`to_dict` / :func:`from_dict`
convertissent vers et depuis un dictionnaire ; :func:`save` / :func:`load`
ecrivent et relisent un fichier ``cle=valeur`` au format des fichiers de
configuration::

    FORMAT=curvetools-1
    KIND=bspline
    DEGREE=2
    DOMAIN=0.0,3.0
    KNOTS=0.0,0.0,1.0,2.0,3.0,3.0
    ELEMENT_SHAPE=
    ELEMENTS=0.0;0.0;1.0;0.0;0.0

Les elements sont separes par ``;``, les composantes par ``,``. Seuls les
elements numeriques sont persistables.

A la relecture, les champs sont re-verifies par les constructeurs
(``validate=True``) ; ``validate=False`` reconstruit la courbe sans
verification et n'est a utiliser que sur des donnees produites par ce
module.

@author: Nervures
@date: 2026-02
"""

import logging

import numpy as np

from .bezier import Bezier
from .bspline import BSpline
from .curveconfig import load_config, load_defaults, merge_params
from .knots import default_domain
from .linear import Linear
from .sequence import ArraySequence, Sorted

logger = logging.getLogger(__name__)

FORMAT = 'curvetools-1'

_KINDS = {Linear: 'linear', Bezier: 'bezier', BSpline: 'bspline'}


# --------------------------------------------------------------------------
#  Dictionnaire
# --------------------------------------------------------------------------

def _floats(seq):
    return [float(v) for v in seq.to_list()]


def to_dict(curve):
    """Champs bruts d'une courbe.

    :param curve: courbe construite (Linear, Bezier ou BSpline)
    :returns: dictionnaire serialisable (listes de flottants)
    :rtype: dict
    :raises TypeError: courbe non persistable (type, elements non
        numeriques, fonction d'attenuation)
    """
    kind = _KINDS.get(type(curve))
    if kind is None:
        raise TypeError("Type de courbe non persistable : %s"
                        % type(curve).__name__)
    if kind == 'linear' and curve.easing is not None:
        raise TypeError("Une fonction d'attenuation n'est pas persistable")
    try:
        elements = np.asarray(curve.elements.to_list(), dtype=float)
    except (TypeError, ValueError):
        raise TypeError(
            "Seuls les elements numeriques sont persistables") from None
    data = {
        'format': FORMAT,
        'kind': kind,
        'elements': elements.tolist(),
        'domain': list(curve.domain),
        'weights': None,
    }
    if kind == 'linear':
        data['knots'] = _floats(curve.knots)
    elif kind == 'bspline':
        data['knots'] = _floats(curve.knots)
        data['degree'] = curve.degree
    if curve.is_rational:
        data['weights'] = _floats(curve.weights)
    return data


def from_dict(data, validate=True):
    """Reconstruit une courbe a partir de ses champs bruts.

    :param data: champs produits par :func:`to_dict`
    :type data: dict
    :param validate: re-verifier les invariants de construction
    :type validate: bool
    :returns: courbe
    :raises ValueError: format ou type inconnu
    :raises CurveError: champs invalides (si ``validate``)
    """
    fmt = data.get('format', FORMAT)
    if fmt != FORMAT:
        raise ValueError("Format inconnu '%s'. Attendu : '%s'"
                         % (fmt, FORMAT))
    kind = data.get('kind')
    if kind not in _KINDS.values():
        raise ValueError("Type de courbe inconnu '%s'" % kind)
    if validate:
        return _build_checked(kind, data)
    return _build_trusted(kind, data)


def _build_checked(kind, data):
    weights = data.get('weights')
    if kind == 'linear':
        builder = Linear.builder().elements(data['elements'])
        if data.get('knots') is None:
            builder.equidistant().domain(*data['domain'])
        else:
            builder.knots(data['knots'])
    elif kind == 'bezier':
        builder = Bezier.builder().elements(data['elements'])
        if data.get('domain') is not None:
            builder.domain(*data['domain'])
    else:
        builder = BSpline.builder().elements(data['elements'])
        degree = data.get('degree')
        knots = data.get('knots')
        if knots is None:
            builder.equidistant().domain(*data['domain'])
        elif degree == 0:
            # le domaine d'une spline de degre 0 n'est pas deductible des
            # noeuds internes : passer par le vecteur classique
            start, end = data['domain']
            builder.legacy().knots([start] + list(knots) + [end])
        else:
            builder.open().knots(knots)
        builder.degree(degree)
    if weights is not None:
        builder.weights(weights)
    return builder.build()


def _build_trusted(kind, data):
    elements = ArraySequence(data['elements'])
    domain = data.get('domain') or default_domain()
    weights = data.get('weights')
    if weights is not None:
        weights = ArraySequence(weights)
    if kind == 'linear':
        return Linear(Sorted(ArraySequence(data['knots'])), elements,
                      domain, weights=weights)
    if kind == 'bezier':
        return Bezier(elements, domain, weights=weights)
    return BSpline(Sorted(ArraySequence(data['knots'])), elements,
                   int(data['degree']), domain, weights=weights)


# --------------------------------------------------------------------------
#  Fichier cle=valeur
# --------------------------------------------------------------------------

def _format_list(values):
    return ','.join(repr(float(v)) for v in values)


def _parse_list(value):
    return [float(v) for v in str(value).split(',') if v.strip()]


def save(curve, filepath):
    """Ecrit une courbe dans un fichier cle=valeur.

    :param curve: courbe construite
    :param filepath: chemin du fichier
    :type filepath: str
    """
    data = to_dict(curve)
    elements = np.asarray(data['elements'], dtype=float)
    shape = elements.shape[1:]
    rows = elements.reshape(len(elements), -1)
    lines = [
        '# Courbe %r' % curve,
        'FORMAT=%s' % FORMAT,
        'KIND=%s' % data['kind'],
        'DOMAIN=%s' % _format_list(data['domain']),
        'ELEMENT_SHAPE=%s' % ','.join(str(d) for d in shape),
        'ELEMENTS=%s' % ';'.join(_format_list(row) for row in rows),
    ]
    if 'degree' in data:
        lines.append('DEGREE=%d' % data['degree'])
    if 'knots' in data:
        lines.append('KNOTS=%s' % _format_list(data['knots']))
    if data['weights'] is not None:
        lines.append('WEIGHTS=%s' % _format_list(data['weights']))
    with open(filepath, 'w') as f:
        f.write('\n'.join(lines) + '\n')
    logger.info("Courbe %r ecrite dans %s", curve, filepath)


def load(filepath, validate=True):
    """Relit une courbe ecrite par :func:`save`.

    Le domaine absent est pris dans le fichier de defauts.

    :param filepath: chemin du fichier
    :type filepath: str
    :param validate: re-verifier les invariants de construction
    :type validate: bool
    :returns: courbe
    :raises IOError: si le fichier n'existe pas
    """
    defaults = load_defaults()
    params = merge_params(
        {'DOMAIN': '%r,%r' % (defaults['DOMAIN_MIN'],
                              defaults['DOMAIN_MAX'])},
        load_config(filepath))
    if 'KIND' not in params or 'ELEMENTS' not in params:
        raise ValueError("Fichier de courbe incomplet : %s" % filepath)

    shape_str = str(params.get('ELEMENT_SHAPE', ''))
    shape = tuple(int(d) for d in shape_str.split(',') if d.strip())
    rows = [_parse_list(row) for row in str(params['ELEMENTS']).split(';')]
    elements = np.asarray(rows, dtype=float).reshape((len(rows),) + shape)

    data = {
        'format': params.get('FORMAT', FORMAT),
        'kind': params['KIND'],
        'elements': elements,
        'domain': _parse_list(params['DOMAIN']),
        'weights': None,
    }
    if 'KNOTS' in params:
        data['knots'] = _parse_list(params['KNOTS'])
    if 'DEGREE' in params:
        data['degree'] = int(params['DEGREE'])
    if 'WEIGHTS' in params:
        data['weights'] = _parse_list(params['WEIGHTS'])

    if validate:
        logger.info("Lecture de %s", filepath)
    else:
        logger.warning("Lecture de %s sans verification", filepath)
    return from_dict(data, validate=validate)
