#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name='adaptfun',
    version='0.1.0',
    description='Adaptive Chebyshev and Fourier approximation of functions',
    author='Andreas Buttenschoen',
    author_email='andreas@buttenschoen.ca',
    url='https://github.com/adrs0049/funpy',
    test_suite='adaptfun',
    packages=find_packages(include=['adaptfun', 'adaptfun.*']),
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
    license='BSD 3-clause',
    classifiers=[
        'Development Status :: 1 - Planning',
        'Intended Audience :: Science/Research',
        'License :: BSD License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
