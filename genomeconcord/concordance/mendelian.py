"""
Mendelian consistency checker for the two sons.

Each autosomal marker with complete diploid calls for all four family
members is tested with the trio predicate: one allele of the son must be
found in the father's genotype and the other in the mother's.
"""

import logging
from typing import Iterable, List

from ..error_handling import require_records
from ..genotype_utils import is_autosomal, is_diploid_call, is_mendelian_consistent
from ..models import PEOPLE, GenotypeRecord, MendelianReport

logger = logging.getLogger(__name__)


def is_checkable_trio(record: GenotypeRecord) -> bool:
    """All four members must carry a two-allele call."""
    return all(is_diploid_call(record.genotype_of(person)) for person in PEOPLE)


def check_mendelian(records: Iterable[GenotypeRecord]) -> MendelianReport:
    """
    Check autosomal markers for Mendelian inheritance in both sons.

    A record is inconsistent when either son fails the trio predicate. son1
    is tested first and son2 is only tested if son1 passes, so a record is
    counted at most once.

    Parameters
    ----------
    records : Iterable[GenotypeRecord]
        Parsed genotype records in input order

    Returns
    -------
    MendelianReport
        Counts plus the inconsistent records
    """
    require_records(records, "check_mendelian")

    consistent = 0
    inconsistent_records: List[GenotypeRecord] = []
    skipped = 0

    for record in records:
        if not is_autosomal(record.chromosome):
            continue
        if not is_checkable_trio(record):
            skipped += 1
            continue

        if not is_mendelian_consistent(record.son1, record.father, record.mother):
            inconsistent_records.append(record)
        elif not is_mendelian_consistent(record.son2, record.father, record.mother):
            inconsistent_records.append(record)
        else:
            consistent += 1

    inconsistent = len(inconsistent_records)
    logger.debug(
        f"Mendelian check: {consistent} consistent, {inconsistent} inconsistent, "
        f"{skipped} autosomal markers without complete calls"
    )
    return MendelianReport(
        total_checked=consistent + inconsistent,
        consistent_count=consistent,
        inconsistent_count=inconsistent,
        inconsistent_records=tuple(inconsistent_records),
    )
