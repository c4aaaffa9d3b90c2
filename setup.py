# File: genomeconcord/setup.py
# Location: genomeconcord/genomeconcord/setup.py
"""
Setup script for genomeconcord.

This file configures how the package is built, installed, and what
dependencies are required.
"""

import os
from setuptools import setup, find_packages

# Load version from version.py without importing the module
version = {}
with open(os.path.join("genomeconcord", "version.py")) as f:
    exec(f.read(), version)

# Read the README for the long description
this_dir = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_dir, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="genomeconcord",
    version=version["__version__"],
    description="Family genotype concordance checks and mitochondrial haplogroup classification.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.5",
        "jinja2",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["genomeconcord=genomeconcord.cli:main"]},
    include_package_data=True,
    package_data={
        "genomeconcord": [
            "config.json",
            "haplogroup_rules.json",
            "traits.json",
            "templates/*.html",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
