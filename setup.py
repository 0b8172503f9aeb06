import os
import sys

if not hasattr(sys, 'version_info') or sys.version_info < (3, 6, 0, 'final'):
    raise SystemExit("couchevents requires Python 3.6 or later.")

from setuptools import setup, find_packages

version = {}
with open(os.path.join(os.path.dirname(__file__), "couchevents", "version.py")) as f:
    exec(f.read(), version)

with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as f:
    long_description = f.read()

setup(
    name = 'couchdb-events',
    version = version['__version__'],

    description = 'Event driven CouchDB Python Interface',
    long_description = long_description,
    license = 'MIT',

    classifiers = [
        'Development Status :: 4 - Beta',
        'Environment :: Other Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
        'Topic :: Utilities',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    packages = find_packages(exclude=['tests']),

    zip_safe = False,

    install_requires = [
        'requests>=2.0',
        'blinker>=1.4',
    ],
    extras_require = {
        'test': [
            'mock',
            'pytest',
        ],
    },
)
