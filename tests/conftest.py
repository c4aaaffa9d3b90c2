"""Shared pytest fixtures for all test modules."""

from pathlib import Path
from typing import List

import pytest

from genomeconcord.models import GenotypeRecord, HaplogroupMarker, HaplogroupRule


def make_record(
    chromosome: str = "1",
    father: str = "",
    mother: str = "",
    son1: str = "",
    son2: str = "",
    position: int = 100,
    marker_id: str = "rs1",
) -> GenotypeRecord:
    """Build a GenotypeRecord with keyword defaults for brevity in tests."""
    return GenotypeRecord(
        marker_id=marker_id,
        chromosome=chromosome,
        position=position,
        father=father,
        mother=mother,
        son1=son1,
        son2=son2,
    )


@pytest.fixture
def record_factory():
    """Expose make_record as a fixture."""
    return make_record


@pytest.fixture
def family_records() -> List[GenotypeRecord]:
    """A small mixed dataset covering autosomes, X, Y and MT markers."""
    return [
        make_record("1", "AG", "CT", "AC", "GT", 1000, "rs100"),
        make_record("2", "AA", "GG", "AG", "AG", 2000, "rs200"),
        make_record("3", "AG", "CT", "CC", "AC", 3000, "rs300"),
        make_record("4", "", "CT", "CT", "CC", 4000, "rs400"),
        make_record("X", "A", "AG", "A", "G", 5000, "rs500"),
        make_record("Y", "T", "", "T", "T", 6000, "rs600"),
        make_record("MT", "T", "C", "C", "C", 7028, "i7028"),
        make_record("MT", "G", "A", "A", "A", 2706, "i2706"),
        make_record("MT", "A", "G", "A", "G", 4793, "i4793"),
    ]


@pytest.fixture
def simple_rule_table() -> List[HaplogroupRule]:
    """H and H7 rules sharing their first two markers."""
    return [
        HaplogroupRule(
            label="H",
            markers=(HaplogroupMarker(7028, "C"), HaplogroupMarker(2706, "A")),
            description="Common European lineage.",
        ),
        HaplogroupRule(
            label="H7",
            markers=(
                HaplogroupMarker(7028, "C"),
                HaplogroupMarker(2706, "A"),
                HaplogroupMarker(4793, "G"),
            ),
            description="Subclade of H.",
        ),
    ]


@pytest.fixture
def genotype_file(tmp_path) -> Path:
    """A small family genotype file in the raw text layout."""
    content = """# Merged family genotypes
# rsid chromosome position father son1 son2 mother
rs4988235\t2\t136608646\tAG\tAA\tGA\tAG
rs12913832\t15\t28365618\tGG\tGG\tAG\tAG
rs100\t1\t1000\tAG\tAC\tGT\tCT
rs300\t3\t3000\tAG\tCC\tAC\tCT
rs_short\t4\t4000\tAA\tAA

i7028\tMT\t7028\t--\tC\tC\tC
i2706\tMT\t2706\tG\tA\tA\t__
i4793\tMT\t4793\tA\tA\tG\tA
"""
    path = tmp_path / "family.txt"
    path.write_text(content)
    return path
