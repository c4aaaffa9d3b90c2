"""Pytest configuration and fixtures for concordance tests."""

from typing import List

import pytest

from genomeconcord.models import GenotypeRecord


@pytest.fixture
def trio_record():
    """Build an autosomal record from father, mother, son1, son2 calls."""

    def _build(father: str, mother: str, son1: str, son2: str, chromosome: str = "1"):
        return GenotypeRecord(
            marker_id="rs_trio",
            chromosome=chromosome,
            position=1,
            father=father,
            mother=mother,
            son1=son1,
            son2=son2,
        )

    return _build


@pytest.fixture
def mt_record():
    """Build an MT record at a position from mother, son1, son2 (and father) calls."""

    def _build(position: int, mother: str, son1: str = "", son2: str = "", father: str = ""):
        return GenotypeRecord(
            marker_id=f"mt{position}",
            chromosome="MT",
            position=position,
            father=father,
            mother=mother,
            son1=son1,
            son2=son2,
        )

    return _build


@pytest.fixture
def non_autosomal_records() -> List[GenotypeRecord]:
    """Records that autosomal analyses must ignore even with perfect calls."""
    return [
        GenotypeRecord("rsX", chrom, 1, "AG", "CT", "CC", "CC")
        for chrom in ["X", "Y", "MT", "chr1", "", "-3", "1p"]
    ]
