#!/usr/bin/env python
from setuptools import setup, find_packages
import sys


long_description = ''

if 'upload' in sys.argv:
    with open('README.rst') as f:
        long_description = f.read()


setup(
    name='peekiter',
    version='0.1.0',
    description='Lookahead and lookbehind buffers for iterators',
    packages=find_packages(exclude=['tests', 'tests.*']),
    long_description=long_description,
    license='GPLv3+',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',  # noqa
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Operating System :: POSIX',
        'Topic :: Software Development :: Libraries',
    ],
    entry_points={
        'console_scripts': [
            'peekiter = peekiter.__main__:main',
        ],
    },
    install_requires=[
        'click',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
        ],
        'dev': [
            'flake8>=6.0',
            'pytest>=7.0',
            'pytest-cov>=4.0',
        ],
    },
)
