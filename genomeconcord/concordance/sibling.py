"""
Sibling allele sharing estimator.

Computes an identity-by-state (IBS) similarity between son1 and son2 over
autosomal markers. Each marker contributes 0, 0.5 or 1.0 depending on how
many alleles the two calls share. This is an IBS figure: full siblings
usually land around 80-90%, well above the ~50% expected for
identity-by-descent.
"""

import logging
from typing import Iterable

from ..error_handling import require_records
from ..genotype_utils import ibs_count, is_autosomal, is_diploid_call
from ..models import GenotypeRecord, SiblingSharingReport

logger = logging.getLogger(__name__)


def estimate_sibling_sharing(records: Iterable[GenotypeRecord]) -> SiblingSharingReport:
    """
    Estimate IBS allele sharing between the two sons.

    Parameters
    ----------
    records : Iterable[GenotypeRecord]
        Parsed genotype records

    Returns
    -------
    SiblingSharingReport
        Number of markers compared, the summed per-marker sharing and the
        sharing percentage (0.0 when nothing could be compared)
    """
    require_records(records, "estimate_sibling_sharing")

    total = 0
    shared_sum = 0.0

    for record in records:
        if not is_autosomal(record.chromosome):
            continue
        if not is_diploid_call(record.son1) or not is_diploid_call(record.son2):
            continue

        shared_sum += ibs_count(record.son1, record.son2) / 2.0
        total += 1

    percentage = 100.0 * shared_sum / total if total > 0 else 0.0
    logger.debug(f"Sibling sharing: {total} markers compared, {percentage:.1f}% IBS")
    return SiblingSharingReport(
        total_checked=total,
        shared_allele_sum=shared_sum,
        shared_percentage=percentage,
    )
