#!/usr/bin/env/python

"""
setup.py

===============================================================================

    Copyright (C) 2019 Rudolf Cardinal (rudolf@pobox.com).

    This file is part of biglittle.

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <https://www.gnu.org/licenses/>.

===============================================================================

Python package configuration.

"""

from setuptools import setup, find_packages

from biglittle.version import VERSION

setup(
    name="biglittle",
    version=VERSION,
    description="Match Littles to Bigs by mutual preference",
    author="Rudolf Cardinal",
    author_email="rudolf@pobox.com",
    license="GNU General Public License v3 or later (GPLv3+)",
    # See https://pypi.org/classifiers/
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",  # noqa
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Topic :: Education",
    ],
    # Python code:
    packages=find_packages(),
    # Static files:
    package_data={
        "biglittle": ["testdata/*"],
    },
    # Requirements:
    install_requires=[
        "cardinal_pythonlib>=1.1.23",
        "openpyxl>=3.0.10",
        "lxml>=4.9.1",  # Will speed up openpyxl export
        "scipy>=1.10.1",  # for rankdata
    ],
    extras_require={
        # For development:
        "dev": [
            "black>=24.3.0",  # auto code formatter
            "flake8>=3.8.3",  # code checks
            "pytest>=7.1.1",  # automatic testing
        ],
        "test": [
            "pytest>=7.1.1",
        ],
    },
    # Launch scripts:
    entry_points={
        "console_scripts": [
            # Format is 'script=module:function".
            "biglittle=biglittle.main:main",
            "biglittle_run_tests=biglittle.run_tests:main",
        ],
    },
)
