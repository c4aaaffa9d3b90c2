# File: genomeconcord/converter.py
# Location: genomeconcord/genomeconcord/converter.py

"""
Report conversion module.

Turns a FamilyAnalysis into:
- a JSON-serializable summary with the interpretation texts shown to users
- TSV tables of Mendelian inconsistencies, MT mismatches and trait results
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

import pandas as pd

from .concordance.analyzer import FamilyAnalysis
from .models import PEOPLE, TraitResult
from .parser import records_to_dataframe

logger = logging.getLogger("genomeconcord")

PATERNAL_HAPLOGROUP_NOTE = "Requires advanced Y-tree traversal (External Tool Recommended)"
UNDETERMINED_MATERNAL_LABEL = "Undetermined (Try external tool)"
SIBLING_IBS_NOTE = (
    "Measures allele sharing (Identity By State). For full siblings, this is typically "
    "80-90% (unlike IBD which is ~50%)."
)
HIGH_ERROR_TEXT = (
    "A higher than expected number of inconsistencies found (>{threshold:g}%). "
    "This may indicate sample mix-ups or low quality data."
)
LOW_ERROR_TEXT = (
    "The low number of inconsistencies (<{threshold:g}%) is typical for high-quality "
    "genotyping and confirms a true parent-child relationship."
)


def _percent(part: float, whole: float) -> float:
    return 100.0 * part / whole if whole > 0 else 0.0


def build_summary(
    analysis: FamilyAnalysis, metadata: Dict[str, Any], cfg: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Build the user-facing summary of a family analysis.

    Parameters
    ----------
    analysis : FamilyAnalysis
        Reports for the dataset
    metadata : dict
        Output of ``dataset_metadata`` (marker count and chromosomes)
    cfg : dict
        Configuration; reads ``mendelian_error_warning_rate``

    Returns
    -------
    dict
        Nested summary suitable for ``json.dump`` and the HTML template
    """
    threshold = float(cfg.get("mendelian_error_warning_rate", 1.0))

    mendelian = analysis.mendelian
    error_rate = _percent(mendelian.inconsistent_count, mendelian.total_checked)
    high_error = error_rate > threshold
    if mendelian.inconsistent_count == 0:
        mendelian_text = ""
    elif high_error:
        mendelian_text = HIGH_ERROR_TEXT.format(threshold=threshold)
    else:
        mendelian_text = LOW_ERROR_TEXT.format(threshold=threshold)

    mito = analysis.mitochondrial
    if mito.mismatch_count == 0:
        mito_text = "Matches Exactly"
    else:
        mito_text = f"{mito.mismatch_count} Mismatches"

    haplo = analysis.haplogroup
    if haplo.is_determined:
        maternal_label = haplo.label
        if haplo.uses_proxy:
            source = "mother+son1" if haplo.proxy_marker_count < haplo.tested_marker_count else "son1"
        else:
            source = "mother"
    else:
        maternal_label = UNDETERMINED_MATERNAL_LABEL
        source = "none"

    summary = {
        "dataset": {
            "marker_count": metadata.get("count", 0),
            "chromosomes": list(metadata.get("chromosomes", [])),
        },
        "mendelian": {
            "total_checked": mendelian.total_checked,
            "consistent": mendelian.consistent_count,
            "inconsistent": mendelian.inconsistent_count,
            "consistency_rate": _percent(mendelian.consistent_count, mendelian.total_checked),
            "error_rate": error_rate,
            "high_error": high_error,
            "interpretation": mendelian_text,
        },
        "mitochondrial": {
            "total_checked": mito.total_checked,
            "matches": mito.match_count,
            "mismatches": mito.mismatch_count,
            "verdict": mito_text,
        },
        "sibling": {
            "total_checked": analysis.sibling.total_checked,
            "shared_allele_sum": analysis.sibling.shared_allele_sum,
            "shared_percentage": analysis.sibling.shared_percentage,
            "note": SIBLING_IBS_NOTE,
        },
        "haplogroups": {
            "maternal": maternal_label,
            "maternal_details": {
                "match_count": haplo.matched_marker_count,
                "total_markers": haplo.tested_marker_count,
                "percentage": haplo.confidence_percentage,
                "description": haplo.description,
                "source": source,
                "proxy_marker_count": haplo.proxy_marker_count,
            },
            "paternal": PATERNAL_HAPLOGROUP_NOTE,
        },
        "traits": {
            name: [trait_to_dict(t) for t in results] for name, results in analysis.traits.items()
        },
    }
    return summary


def trait_to_dict(result: TraitResult) -> Dict[str, Any]:
    return {
        "rsid": result.rsid,
        "trait": result.trait,
        "description": result.description,
        "genotypes": {
            person: {
                "genotype": result.for_person(person).genotype,
                "interpretation": result.for_person(person).interpretation,
            }
            for person in PEOPLE
        },
    }


def traits_to_dataframe(traits: Dict[str, List[TraitResult]]) -> pd.DataFrame:
    """Flatten trait results into one row per (table, trait, person)."""
    rows = []
    for table, results in traits.items():
        for result in results:
            for person in PEOPLE:
                call = result.for_person(person)
                rows.append(
                    {
                        "table": table,
                        "rsid": result.rsid,
                        "trait": result.trait,
                        "person": person,
                        "genotype": call.genotype,
                        "interpretation": call.interpretation,
                    }
                )
    return pd.DataFrame(
        rows, columns=["table", "rsid", "trait", "person", "genotype", "interpretation"]
    )


def write_reports(
    analysis: FamilyAnalysis,
    metadata: Dict[str, Any],
    output_dir: str,
    cfg: Dict[str, Any],
    summary: Optional[Dict[str, Any]] = None,
) -> Dict[str, str]:
    """
    Write summary.json and the per-record TSV tables.

    Parameters
    ----------
    analysis : FamilyAnalysis
        Reports to write
    metadata : dict
        Dataset metadata
    output_dir : str
        Directory for the outputs (created if needed)
    cfg : dict
        Configuration dictionary
    summary : dict, optional
        Pre-built summary; built from ``analysis`` if omitted

    Returns
    -------
    Dict[str, str]
        Output name to file path
    """
    os.makedirs(output_dir, exist_ok=True)
    if summary is None:
        summary = build_summary(analysis, metadata, cfg)

    outputs = {}

    summary_path = os.path.join(output_dir, "summary.json")
    with open(summary_path, "w", encoding="utf-8") as sjf:
        json.dump(summary, sjf, indent=2)
    outputs["summary"] = summary_path

    mendelian_path = os.path.join(output_dir, "mendelian_inconsistencies.tsv")
    records_to_dataframe(analysis.mendelian.inconsistent_records).to_csv(
        mendelian_path, sep="\t", index=False
    )
    outputs["mendelian"] = mendelian_path

    mito_path = os.path.join(output_dir, "mitochondrial_mismatches.tsv")
    records_to_dataframe(analysis.mitochondrial.mismatched_records).to_csv(
        mito_path, sep="\t", index=False
    )
    outputs["mitochondrial"] = mito_path

    if any(analysis.traits.values()):
        traits_path = os.path.join(output_dir, "traits.tsv")
        traits_to_dataframe(analysis.traits).to_csv(traits_path, sep="\t", index=False)
        outputs["traits"] = traits_path

    logger.info(f"Wrote {len(outputs)} report files to {output_dir}")
    return outputs
