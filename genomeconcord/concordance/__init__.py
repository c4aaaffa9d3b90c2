"""
Family concordance analysis module for genomeconcord.

This module provides the Mendelian, mitochondrial, sibling-sharing and
haplogroup analyses over four-person genotype records.
"""

from .analyzer import FamilyAnalysis, analyze_family
from .haplogroup import classify_haplogroup
from .mendelian import check_mendelian
from .mitochondrial import check_mitochondrial
from .sibling import estimate_sibling_sharing

__all__ = [
    "FamilyAnalysis",
    "analyze_family",
    "check_mendelian",
    "check_mitochondrial",
    "classify_haplogroup",
    "estimate_sibling_sharing",
]
