#!/usr/bin/env python

# Setup file for Stoqreceipt

from setuptools import setup, find_packages

from stoqreceipt import _version


with open('requirements.txt') as f:
    install_requires = [l.strip() for l in f.readlines() if
                        l.strip() and not l.startswith('#')]

setup(
    name="stoqreceipt",
    version=_version,
    author="Stoq Tecnologia",
    author_email="stoq-devel@async.com.br",
    description="ESC/POS receipt layout and encoding for thermal printers",
    long_description=("This package builds receipts for 58mm and 80mm "
                      "thermal printers: a content model, a fluent "
                      "builder, a text layout engine and an ESC/POS "
                      "encoder, plus serial, USB and spooler outputs "
                      "and an HTML preview."),
    url="http://www.stoq.com.br",
    license="GNU GPL 2 (see COPYING)",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=install_requires,
    extras_require={'test': ['pytest']},
    python_requires='>=3.7',
)
