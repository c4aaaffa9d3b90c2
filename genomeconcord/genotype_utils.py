"""
Genotype utility functions for family concordance analysis.

This module provides functions to classify chromosome labels and to compare
allele-character genotype calls such as "AG", "CC", "A" or "--".
"""

NO_CALL_TOKENS = ("--", "__")


def normalize_genotype(gt: str) -> str:
    """
    Normalize a raw genotype call.

    Parameters
    ----------
    gt : str
        Raw genotype token (e.g., "AG", "--", "__")

    Returns
    -------
    str
        The call itself, or "" for a no-call sentinel
    """
    if gt is None:
        return ""
    gt = gt.strip()
    if gt in NO_CALL_TOKENS:
        return ""
    return gt


def is_no_call(gt: str) -> bool:
    """Check if genotype is missing or untested."""
    return not gt


def is_diploid_call(gt: str) -> bool:
    """Check if genotype has exactly two allele characters."""
    return bool(gt) and len(gt) == 2


def is_autosomal(chrom: str) -> bool:
    """
    Check if a chromosome label denotes an autosome.

    The label must be an unsigned decimal integer; "X", "Y", "MT", signed
    or otherwise malformed labels are not autosomal.
    """
    if not chrom:
        return False
    return chrom.isascii() and chrom.isdigit()


def is_mitochondrial(chrom: str) -> bool:
    """Check if a chromosome label is the mitochondrial genome."""
    return chrom == "MT"


def is_mendelian_consistent(child_gt: str, father_gt: str, mother_gt: str) -> bool:
    """
    Check if a child's genotype is consistent with Mendelian inheritance.

    One allele must be explainable from the father and the other from the
    mother, in either order.

    Parameters
    ----------
    child_gt : str
        Child's two-character genotype
    father_gt : str
        Father's two-character genotype
    mother_gt : str
        Mother's two-character genotype

    Returns
    -------
    bool
        True if consistent with Mendelian inheritance
    """
    father_possible = set(father_gt)
    mother_possible = set(mother_gt)
    first, second = child_gt[0], child_gt[1]

    if first in father_possible and second in mother_possible:
        return True
    if first in mother_possible and second in father_possible:
        return True
    return False


def ibs_count(gt1: str, gt2: str) -> int:
    """
    Count alleles shared identical-by-state between two diploid calls.

    Each allele of ``gt2`` can be matched at most once, so "AA" against "AG"
    shares one allele, not two.

    Parameters
    ----------
    gt1, gt2 : str
        Two-character genotypes

    Returns
    -------
    int
        Number of shared alleles (0, 1, or 2)
    """
    remaining = sorted(gt2)
    shared = 0
    for allele in sorted(gt1):
        if allele in remaining:
            remaining.remove(allele)
            shared += 1
    return shared
