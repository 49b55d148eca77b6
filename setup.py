#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os
from setuptools import setup, find_packages
here = os.path.abspath(os.path.dirname(__file__))

setup(
    name="fieldvisit",
    description="fieldvisit holds field visit measurements with grade-based discharge errors and gage height shifts",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_dir={"fieldvisit": "fieldvisit"},
    test_suite="tests",
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.3.0",
        "python-dotenv",
    ],
    extras_require={
        "dev": ["pytest", "pytest-cov", "pytest-mock", "pytz"],
        "optional": [],
    },
    include_package_data=True,
    license="AGPLv3",
    zip_safe=False,
    classifiers=[
        # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Hydrology",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    keywords="hydrology, hydrometry, discharge, field visit, gage height, shift",
)
