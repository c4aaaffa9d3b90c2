"""
Mitochondrial haplogroup classifier.

This module scores an ordered table of haplogroup rules against the maternal
line's MT genotypes and picks the best-supported label.

Scoring
-------
For each rule, ``tested`` counts rule markers with a genotype available and
``matched`` counts those whose genotype contains the expected allele. A rule
is a candidate when ``100 * matched / tested >= 50``. Candidates are ranked
by ``matched * 100 + percentage``: the matched-count term dominates, so a
rule with more matched markers always outranks one with fewer, and the
percentage only separates rules with equal matched counts. Rules are
visited in table order and the best is replaced only on a strictly greater
score, so on ties the earlier rule wins.

Marker weights are not used.
"""

import logging
from typing import Dict, Iterable, NamedTuple, Optional, Sequence

from ..error_handling import require_records
from ..genotype_utils import is_mitochondrial, is_no_call
from ..models import UNDETERMINED, GenotypeRecord, HaplogroupResult, HaplogroupRule

logger = logging.getLogger(__name__)

MIN_CANDIDATE_PERCENTAGE = 50.0


class MaternalCall(NamedTuple):
    genotype: str
    from_proxy: bool


class RuleScore(NamedTuple):
    matched: int
    tested: int
    proxied: int

    @property
    def percentage(self) -> float:
        return 100.0 * self.matched / self.tested if self.tested > 0 else 0.0

    @property
    def score(self) -> float:
        return self.matched * 100 + self.percentage


def build_maternal_lookup(records: Iterable[GenotypeRecord]) -> Dict[int, MaternalCall]:
    """
    Map MT positions to the maternal line's genotype.

    The mother's call is used when present; otherwise son1's call stands in
    for it, flagged as a proxy. Positions where both are missing are not
    written, and later records overwrite earlier ones at the same position.

    Parameters
    ----------
    records : Iterable[GenotypeRecord]
        Parsed genotype records

    Returns
    -------
    Dict[int, MaternalCall]
        Position to (genotype, from_proxy)
    """
    lookup: Dict[int, MaternalCall] = {}
    for record in records:
        if not is_mitochondrial(record.chromosome) or record.position is None:
            continue
        if not is_no_call(record.mother):
            lookup[record.position] = MaternalCall(record.mother, False)
        elif not is_no_call(record.son1):
            lookup[record.position] = MaternalCall(record.son1, True)
    return lookup


def score_rule(rule: HaplogroupRule, lookup: Dict[int, MaternalCall]) -> RuleScore:
    """Count tested, matched and proxy-sourced markers of one rule."""
    matched = 0
    tested = 0
    proxied = 0
    for marker in rule.markers:
        call = lookup.get(marker.position)
        if call is None or is_no_call(call.genotype):
            continue
        tested += 1
        if call.from_proxy:
            proxied += 1
        if marker.allele in call.genotype:
            matched += 1
    return RuleScore(matched, tested, proxied)


def _is_well_formed_marker(marker) -> bool:
    position = getattr(marker, "position", None)
    allele = getattr(marker, "allele", None)
    if not isinstance(position, int) or isinstance(position, bool):
        return False
    return isinstance(allele, str) and bool(allele)


def _is_well_formed(rule) -> bool:
    markers = getattr(rule, "markers", None)
    if not getattr(rule, "label", None) or not isinstance(markers, (tuple, list)):
        return False
    return all(_is_well_formed_marker(m) for m in markers)


def classify_haplogroup(
    records: Iterable[GenotypeRecord], rule_table: Optional[Sequence[HaplogroupRule]]
) -> HaplogroupResult:
    """
    Classify the maternal mitochondrial haplogroup.

    Parameters
    ----------
    records : Iterable[GenotypeRecord]
        Parsed genotype records
    rule_table : Sequence[HaplogroupRule] or None
        Ordered rule table. Order matters: ties keep the earlier rule.

    Returns
    -------
    HaplogroupResult
        The winning rule, or an "Undetermined" result with zero counts when
        no rule reaches 50% on its tested markers or the table is empty
    """
    require_records(records, "classify_haplogroup")

    if not rule_table:
        logger.warning("Empty haplogroup rule table; maternal haplogroup is undetermined")
        return HaplogroupResult()

    lookup = build_maternal_lookup(records)
    logger.debug(f"Maternal MT lookup holds {len(lookup)} positions")

    best: Optional[HaplogroupResult] = None
    best_score = 0.0

    for rule in rule_table:
        if not _is_well_formed(rule):
            logger.warning(f"Skipping malformed haplogroup rule: {rule!r}")
            continue

        result = score_rule(rule, lookup)
        if result.tested == 0:
            continue
        if result.percentage < MIN_CANDIDATE_PERCENTAGE:
            continue

        logger.debug(
            f"Rule {rule.label}: {result.matched}/{result.tested} markers, "
            f"score {result.score:.1f}"
        )
        if result.score > best_score:
            best_score = result.score
            best = HaplogroupResult(
                label=rule.label,
                matched_marker_count=result.matched,
                tested_marker_count=result.tested,
                confidence_percentage=result.percentage,
                description=rule.description or "",
                proxy_marker_count=result.proxied,
            )

    if best is None:
        logger.info(f"No haplogroup rule reached {MIN_CANDIDATE_PERCENTAGE:.0f}% support")
        return HaplogroupResult(label=UNDETERMINED)

    if best.uses_proxy:
        logger.info(
            f"Haplogroup {best.label} relies on {best.proxy_marker_count} son1 calls "
            "where the mother's call was missing"
        )
    return best
