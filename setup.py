# (c) Copyright 2025 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# based on <http://click.pocoo.org/5/setuptools/#setuptools-integration>
#
# To use this, install with:
#
#   pip install --editable .
#
# and for the tests:
#
#   pip install --editable '.[test]'

from setuptools import setup

setup(
    name='txqr',
    version='1.0.0',
    description='Split signed transactions into multi-part QR codes for terminal display',
    packages=['txqr'],
    python_requires='>=3.7',
    install_requires=[
        'Click',
        'qrcode>=7.4',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points='''
        [console_scripts]
        txqr=txqr.cli:main
    ''',
)
