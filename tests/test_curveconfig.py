#!/usr/bin/python
#-*-coding: utf-8 -*-

"""
Tests de la lecture des fichiers de configuration.

Lance :
    python test_curveconfig.py

@author: Nervures
@date: 2026-02
"""

import os
import shutil
import sys
import tempfile
import unittest

# Ajouter le repertoire sources/ au path
_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.curveconfig import (_parse_value, get_default, load_config,
                               load_defaults, merge_params)


class TestParseValue(unittest.TestCase):
    """Inference des types."""

    def test_types(self):
        """bool, int, float, str."""
        self.assertIs(_parse_value('yes'), True)
        self.assertIs(_parse_value('Off'), False)
        self.assertEqual(_parse_value(' 12 '), 12)
        self.assertIsInstance(_parse_value('12'), int)
        self.assertEqual(_parse_value('1e-12'), 1e-12)
        self.assertEqual(_parse_value('0.0,1.0'), '0.0,1.0')
        self.assertEqual(_parse_value(''), '')


class TestLoadConfig(unittest.TestCase):
    """Fichiers cle=valeur."""

    def setUp(self):
        self.work_dir = tempfile.mkdtemp(prefix='test_curveconfig_')

    def tearDown(self):
        shutil.rmtree(self.work_dir, ignore_errors=True)

    def test_load(self):
        """Commentaires ignores, lignes sans '=' signalees."""
        path = os.path.join(self.work_dir, 'test.cfg')
        with open(path, 'w') as f:
            f.write('# commentaire\n\nDOMAIN_MAX = 2.5\nligne invalide\n'
                    'PLOT_SAMPLES=50\n')
        with self.assertLogs('model.curveconfig', level='WARNING') as logs:
            params = load_config(path)
        self.assertEqual(params, {'DOMAIN_MAX': 2.5, 'PLOT_SAMPLES': 50})
        self.assertEqual(len(logs.output), 1)
        self.assertIn(':4', logs.output[0])

    def test_missing(self):
        """Fichier absent -> IOError."""
        with self.assertRaises(IOError):
            load_config(os.path.join(self.work_dir, 'absent.cfg'))


class TestDefaults(unittest.TestCase):
    """Fichier de defauts du package."""

    def test_keys(self):
        """Cles attendues et types."""
        defaults = load_defaults()
        self.assertEqual(defaults['DOMAIN_MIN'], 0.0)
        self.assertEqual(defaults['DOMAIN_MAX'], 1.0)
        self.assertGreater(defaults['WEIGHT_EPSILON'], 0.0)
        self.assertIsInstance(defaults['PLOT_SAMPLES'], int)
        self.assertEqual(get_default('PLOT_SAMPLES'),
                         defaults['PLOT_SAMPLES'])

    def test_copy(self):
        """Modifier le dictionnaire retourne ne change pas le cache."""
        defaults = load_defaults()
        defaults['DOMAIN_MIN'] = -5.
        self.assertEqual(load_defaults()['DOMAIN_MIN'], 0.0)

    def test_merge(self):
        """Les parametres utilisateur surchargent les defauts."""
        merged = merge_params(load_defaults(), {'PLOT_SAMPLES': 10})
        self.assertEqual(merged['PLOT_SAMPLES'], 10)
        self.assertEqual(merged['DOMAIN_MAX'], 1.0)
        self.assertEqual(merge_params({'A': 1}, None), {'A': 1})


if __name__ == '__main__':
    unittest.main()
