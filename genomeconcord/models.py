"""
Data contracts shared by the family concordance analyses.

Genotype records are produced once by the parser and handed read-only to
every analysis. Reports are built fresh on each call and never mutated.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

PEOPLE = ("father", "mother", "son1", "son2")
UNDETERMINED = "Undetermined"


@dataclass(frozen=True)
class GenotypeRecord:
    """
    One tested marker across the four family members.

    Fields
    ------
    marker_id : str
        Opaque marker identifier (usually an rsid). Never parsed.
    chromosome : str
        "1".."22", "X", "Y" or "MT". Other labels are tolerated and simply
        excluded from autosomal analyses.
    position : int or None
        Genomic coordinate, used as the haplogroup lookup key. None when the
        input column was not an integer.
    father, mother, son1, son2 : str
        Genotype call of one or two allele characters, or "" for no call.
    """

    marker_id: str
    chromosome: str
    position: Optional[int]
    father: str = ""
    mother: str = ""
    son1: str = ""
    son2: str = ""

    def genotype_of(self, person: str) -> str:
        """Return the genotype call for ``person`` (one of PEOPLE)."""
        if person not in PEOPLE:
            raise ValueError(f"Unknown family member '{person}'. Expected one of {PEOPLE}")
        return getattr(self, person)


@dataclass(frozen=True)
class MendelianReport:
    """Autosomal trio-inheritance check over both sons."""

    total_checked: int = 0
    consistent_count: int = 0
    inconsistent_count: int = 0
    inconsistent_records: Tuple[GenotypeRecord, ...] = ()


@dataclass(frozen=True)
class MitochondrialReport:
    """Exact mother/son1/son2 identity over MT markers."""

    total_checked: int = 0
    match_count: int = 0
    mismatch_count: int = 0
    mismatched_records: Tuple[GenotypeRecord, ...] = ()


@dataclass(frozen=True)
class SiblingSharingReport:
    """Identity-by-state similarity between son1 and son2."""

    total_checked: int = 0
    shared_allele_sum: float = 0.0
    shared_percentage: float = 0.0


@dataclass(frozen=True)
class HaplogroupMarker:
    """
    A diagnostic (position, allele) pair of a haplogroup rule.

    ``weight`` is carried for compatibility with weighted rule files but is
    not read by the classifier.
    """

    position: int
    allele: str
    weight: float = 1


@dataclass(frozen=True)
class HaplogroupRule:
    """A named mitochondrial lineage and the markers that define it."""

    label: str
    markers: Tuple[HaplogroupMarker, ...] = ()
    description: str = ""


@dataclass(frozen=True)
class HaplogroupResult:
    """
    Best-supported haplogroup for the maternal line.

    Fields
    ------
    label : str
        Winning rule label, or "Undetermined".
    matched_marker_count : int
        Markers of the winning rule whose genotype carries the expected allele.
    tested_marker_count : int
        Markers of the winning rule with a genotype available.
    confidence_percentage : float
        100 * matched / tested for the winning rule.
    description : str
        Free-text description of the winning rule.
    proxy_marker_count : int
        Tested markers whose genotype was taken from son1 because the
        mother's call was missing.
    """

    label: str = UNDETERMINED
    matched_marker_count: int = 0
    tested_marker_count: int = 0
    confidence_percentage: float = 0.0
    description: str = ""
    proxy_marker_count: int = 0

    @property
    def is_determined(self) -> bool:
        """True when a rule reached the candidate threshold."""
        return self.label != UNDETERMINED

    @property
    def uses_proxy(self) -> bool:
        """True when at least one tested marker came from son1."""
        return self.proxy_marker_count > 0


@dataclass(frozen=True)
class InterpretationRule:
    """
    Genotype predicate mapped to a label.

    ``kind`` is "contains" (any allele in ``alleles`` occurs in the genotype)
    or "equals" (the genotype is one of ``alleles``).
    """

    kind: str
    alleles: Tuple[str, ...]
    label: str


@dataclass(frozen=True)
class TraitDefinition:
    """A phenotype lookup entry keyed by marker id."""

    rsid: str
    trait: str
    description: str = ""
    rules: Tuple[InterpretationRule, ...] = ()
    default: str = ""
    risk_allele: str = ""


@dataclass(frozen=True)
class PersonTrait:
    genotype: str
    interpretation: str


@dataclass(frozen=True)
class TraitResult:
    """Interpretation of one trait marker for each family member."""

    rsid: str
    trait: str
    description: str
    genotypes: Tuple[Tuple[str, PersonTrait], ...] = ()

    def for_person(self, person: str) -> PersonTrait:
        return dict(self.genotypes)[person]
