"""Maternal mitochondrial concordance: both sons must carry the mother's exact call."""

import logging
from typing import Iterable, List

from ..error_handling import require_records
from ..genotype_utils import is_mitochondrial, is_no_call
from ..models import GenotypeRecord, MitochondrialReport

logger = logging.getLogger(__name__)


def check_mitochondrial(records: Iterable[GenotypeRecord]) -> MitochondrialReport:
    """
    Compare the sons' MT calls with the mother's.

    Calls are compared as whole strings, not allele sets. The father's call
    is ignored.

    Parameters
    ----------
    records : Iterable[GenotypeRecord]
        Parsed genotype records

    Returns
    -------
    MitochondrialReport
        Match/mismatch counts and the mismatching records
    """
    require_records(records, "check_mitochondrial")

    matches = 0
    mismatched_records: List[GenotypeRecord] = []

    for record in records:
        if not is_mitochondrial(record.chromosome):
            continue
        if is_no_call(record.mother) or is_no_call(record.son1) or is_no_call(record.son2):
            continue

        if record.mother == record.son1 and record.mother == record.son2:
            matches += 1
        else:
            mismatched_records.append(record)

    mismatches = len(mismatched_records)
    logger.debug(f"Mitochondrial check: {matches} matches, {mismatches} mismatches")
    return MitochondrialReport(
        total_checked=matches + mismatches,
        match_count=matches,
        mismatch_count=mismatches,
        mismatched_records=tuple(mismatched_records),
    )
