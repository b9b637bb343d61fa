#!/usr/bin/python
#-*-coding: utf-8 -*-

from setuptools import setup

setup(
    name='curvetools',
    version='0.1.0',
    description='Parametric curves - linear interpolation, Bezier, B-splines and NURBS',
    author='Nervures',
    author_email='be@nervures.com',
    license='LGPL-3.0',
    package_dir={
        'curvetools': 'sources/model',
    },
    packages=['curvetools'],
    package_data={
        'curvetools': ['*.cfg'],
    },
    install_requires=[
        'numpy>=1.20',
        'scipy>=1.7',
        'matplotlib>=3.5',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
)
