#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Lecture des fichiers de configuration du package.

Format : cle=valeur, une par ligne. Les lignes commencant par # sont ignorees.
Les types sont inferes automatiquement (bool, int, float, str).

Les valeurs par defaut (domaine, tolerance sur les poids, resolution des
traces) sont lues dans ``defaults_<nom>.cfg``, a cote de ce module, puis
gardees en cache.

@author: Nervures
@date: 2026-02
"""

import logging
import os

logger = logging.getLogger(__name__)

_DEFAULTS_CACHE = {}


def _parse_value(value_str):
    """Infere le type d'une valeur depuis sa representation texte.

    :param value_str: valeur brute lue depuis le fichier
    :type value_str: str
    :returns: valeur typee (bool, int, float ou str)
    """
    s = value_str.strip()
    # Booleens
    if s.lower() in ('true', 'yes', 'on'):
        return True
    if s.lower() in ('false', 'no', 'off'):
        return False
    # Entier
    try:
        return int(s)
    except ValueError:
        pass
    # Flottant
    try:
        return float(s)
    except ValueError:
        pass
    # Chaine
    return s


def load_config(filepath):
    """Charge un fichier de configuration cle=valeur.

    :param filepath: chemin du fichier .cfg
    :type filepath: str
    :returns: dictionnaire des parametres
    :rtype: dict
    :raises IOError: si le fichier n'existe pas
    """
    if not os.path.isfile(filepath):
        raise IOError("Fichier de configuration introuvable : %s" % filepath)
    params = {}
    with open(filepath, 'r') as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            if '=' not in line:
                logger.warning("%s:%d : ligne ignoree (pas de '=') : %s",
                               filepath, lineno, line)
                continue
            key, value = line.split('=', 1)
            params[key.strip()] = _parse_value(value)
    return params


def load_defaults(name='curvetools'):
    """Charge les parametres par defaut.

    Cherche le fichier defaults_<name>.cfg dans le meme repertoire.
    Le fichier n'est lu qu'une fois ; une copie est retournee.

    :param name: suffixe du fichier de defauts
    :type name: str
    :returns: parametres par defaut
    :rtype: dict
    """
    if name not in _DEFAULTS_CACHE:
        cfg_dir = os.path.dirname(os.path.abspath(__file__))
        cfg_file = os.path.join(cfg_dir, 'defaults_%s.cfg' % name)
        _DEFAULTS_CACHE[name] = load_config(cfg_file)
        logger.debug("Defauts charges depuis %s", cfg_file)
    return dict(_DEFAULTS_CACHE[name])


def get_default(key):
    """Valeur par defaut ``key`` du fichier defaults_curvetools.cfg.

    :raises KeyError: si la cle est absente
    """
    return load_defaults()[key]


def merge_params(defaults, user_params):
    """Fusionne les parametres utilisateur avec les defauts.

    Les parametres utilisateur surchargent les defauts.

    :param defaults: parametres par defaut
    :type defaults: dict
    :param user_params: parametres utilisateur (peuvent etre None)
    :type user_params: dict or None
    :returns: parametres fusionnes
    :rtype: dict
    """
    merged = dict(defaults)
    if user_params:
        for key, value in user_params.items():
            merged[key] = value
    return merged
