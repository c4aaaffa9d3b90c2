"""
Trait and wellness marker interpretation.

Trait tables map a marker id to a list of interpretation rules. A rule is a
plain value (kind, alleles, label) rather than a callable, so tables can be
stored as JSON and passed into the analysis explicitly:

- "contains": matches when any listed allele occurs in the genotype
- "equals": matches when the genotype is one of the listed values

The first matching rule gives the interpretation; otherwise the trait's
default label is used.
"""

import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .error_handling import require_records
from .models import (
    PEOPLE,
    GenotypeRecord,
    InterpretationRule,
    PersonTrait,
    TraitDefinition,
    TraitResult,
)

logger = logging.getLogger(__name__)

RULE_KINDS = ("contains", "equals")


def rule_matches(rule: InterpretationRule, genotype: str) -> bool:
    """Check whether a genotype satisfies an interpretation rule."""
    if rule.kind == "contains":
        return any(allele and allele in genotype for allele in rule.alleles)
    if rule.kind == "equals":
        return genotype in rule.alleles
    return False


def interpret_genotype(trait: TraitDefinition, genotype: str) -> str:
    """
    Interpret a genotype call for one trait.

    Parameters
    ----------
    trait : TraitDefinition
        The trait definition
    genotype : str
        Genotype call, "" for no call

    Returns
    -------
    str
        Label of the first matching rule, or the trait's default
    """
    for rule in trait.rules:
        if rule_matches(rule, genotype):
            return rule.label
    return trait.default


def analyze_traits(
    records: Iterable[GenotypeRecord], trait_table: Sequence[TraitDefinition]
) -> List[TraitResult]:
    """
    Interpret every trait marker present in the records for all four people.

    When a marker id occurs more than once the first record is used.

    Parameters
    ----------
    records : Iterable[GenotypeRecord]
        Parsed genotype records
    trait_table : Sequence[TraitDefinition]
        Traits to look up, in display order

    Returns
    -------
    List[TraitResult]
        One result per trait found in the records, in table order
    """
    require_records(records, "analyze_traits")

    wanted = {trait.rsid for trait in trait_table}
    by_marker: Dict[str, GenotypeRecord] = {}
    for record in records:
        if record.marker_id in wanted and record.marker_id not in by_marker:
            by_marker[record.marker_id] = record

    results = []
    for trait in trait_table:
        record = by_marker.get(trait.rsid)
        if record is None:
            continue
        genotypes = tuple(
            (
                person,
                PersonTrait(
                    genotype=record.genotype_of(person),
                    interpretation=interpret_genotype(trait, record.genotype_of(person)),
                ),
            )
            for person in PEOPLE
        )
        results.append(
            TraitResult(
                rsid=trait.rsid,
                trait=trait.trait,
                description=trait.description,
                genotypes=genotypes,
            )
        )

    logger.debug(f"Found {len(results)} of {len(trait_table)} trait markers")
    return results


def parse_trait_table(raw_traits: Any) -> List[TraitDefinition]:
    """
    Build TraitDefinition objects from decoded JSON.

    Entries without an rsid or trait name, and rules of an unknown kind,
    are skipped with a warning.
    """
    if not isinstance(raw_traits, list):
        logger.warning("Trait table is not a list; using an empty table")
        return []

    traits = []
    for raw in raw_traits:
        if not isinstance(raw, dict) or not raw.get("rsid") or not raw.get("trait"):
            logger.warning(f"Skipping malformed trait entry: {raw!r}")
            continue

        raw_rules = raw.get("rules") or []
        if not isinstance(raw_rules, list):
            logger.warning(f"Skipping malformed trait entry {raw['rsid']}: 'rules' is not a list")
            continue

        rules = []
        for raw_rule in raw_rules:
            kind = raw_rule.get("kind") if isinstance(raw_rule, dict) else None
            if kind not in RULE_KINDS:
                logger.warning(f"Skipping rule with unknown kind {kind!r} for {raw['rsid']}")
                continue
            rules.append(
                InterpretationRule(
                    kind=kind,
                    alleles=tuple(str(a) for a in raw_rule.get("alleles", [])),
                    label=str(raw_rule.get("label", "")),
                )
            )

        traits.append(
            TraitDefinition(
                rsid=str(raw["rsid"]),
                trait=str(raw["trait"]),
                description=str(raw.get("description", "")),
                rules=tuple(rules),
                default=str(raw.get("default", "")),
                risk_allele=str(raw.get("risk_allele", "")),
            )
        )
    return traits


def load_trait_tables(traits_file: Optional[str] = None) -> Dict[str, List[TraitDefinition]]:
    """
    Load named trait tables from a JSON file.

    Parameters
    ----------
    traits_file : str, optional
        Path to a JSON file whose top-level keys are table names (e.g.
        "traits", "wellness") and values are lists of trait entries. If None,
        defaults to the packaged 'traits.json'.

    Returns
    -------
    Dict[str, List[TraitDefinition]]
        Table name to parsed traits.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not valid JSON or not a JSON object.
    """
    if not traits_file:
        traits_file = os.path.join(os.path.dirname(__file__), "traits.json")

    if not os.path.exists(traits_file):
        raise FileNotFoundError(f"Trait table file '{traits_file}' not found.")

    with open(traits_file, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error parsing trait table JSON: {e}")

    if not isinstance(data, dict):
        raise ValueError("Trait table file must contain a JSON object of named tables")

    tables = {name: parse_trait_table(entries) for name, entries in data.items()}
    logger.info(
        "Loaded trait tables: "
        + ", ".join(f"{name} ({len(table)})" for name, table in tables.items())
    )
    return tables
