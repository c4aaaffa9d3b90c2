# File: genomeconcord/__init__.py
# Location: genomeconcord/genomeconcord/__init__.py

"""
genomeconcord Package.

This package provides modules for checking biological consistency in a
four-person (father, mother, two sons) SNP genotype dataset: Mendelian
inheritance, maternal mitochondrial concordance, sibling allele sharing
and mitochondrial haplogroup classification.
"""

from .version import __version__
