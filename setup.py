#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

import pathlib

from setuptools import find_packages, setup

readme = pathlib.Path("README.rst").read_text()
history = pathlib.Path("HISTORY.rst").read_text()

requirements = pathlib.Path("requirements.txt").read_text().strip().splitlines()

setup(
    author="The slotbits developers",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
    ],
    description="A resizable collection of boolean flags",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    license="Apache Software License 2.0",
    long_description="{}\n\n{}".format(readme, history),
    include_package_data=True,
    keywords="slotbits",
    name="slotbits",
    packages=find_packages(include=["slotbits", "slotbits.*"]),
    version="0.1.0",
    zip_safe=False,
    python_requires=">=3.8",
)
