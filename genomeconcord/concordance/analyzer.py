"""
Family analysis orchestrator.

Runs the Mendelian, mitochondrial, sibling-sharing and haplogroup analyses
(and optional trait lookups) over one shared, read-only record sequence.
The analyses are independent, so with ``n_workers > 1`` they are submitted
to a thread pool; no locking is needed.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from ..error_handling import require_records
from ..models import (
    GenotypeRecord,
    HaplogroupResult,
    HaplogroupRule,
    MendelianReport,
    MitochondrialReport,
    SiblingSharingReport,
    TraitDefinition,
    TraitResult,
)
from ..traits import analyze_traits
from .haplogroup import classify_haplogroup
from .mendelian import check_mendelian
from .mitochondrial import check_mitochondrial
from .sibling import estimate_sibling_sharing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FamilyAnalysis:
    """All reports produced for one dataset."""

    mendelian: MendelianReport
    mitochondrial: MitochondrialReport
    sibling: SiblingSharingReport
    haplogroup: HaplogroupResult
    traits: Dict[str, List[TraitResult]] = field(default_factory=dict)


def _build_tasks(
    records: Sequence[GenotypeRecord],
    rule_table: Optional[Sequence[HaplogroupRule]],
    trait_tables: Mapping[str, Sequence[TraitDefinition]],
) -> Dict[str, Callable[[], object]]:
    tasks: Dict[str, Callable[[], object]] = {
        "mendelian": lambda: check_mendelian(records),
        "mitochondrial": lambda: check_mitochondrial(records),
        "sibling": lambda: estimate_sibling_sharing(records),
        "haplogroup": lambda: classify_haplogroup(records, rule_table),
    }
    for name, table in trait_tables.items():
        tasks[f"traits:{name}"] = lambda table=table: analyze_traits(records, table)
    return tasks


def analyze_family(
    records: Iterable[GenotypeRecord],
    rule_table: Optional[Sequence[HaplogroupRule]],
    trait_tables: Optional[Mapping[str, Sequence[TraitDefinition]]] = None,
    n_workers: int = 1,
) -> FamilyAnalysis:
    """
    Run every family analysis over the same records.

    Parameters
    ----------
    records : Iterable[GenotypeRecord]
        Parsed genotype records. Materialized once so that generators can be
        shared between analyses.
    rule_table : Sequence[HaplogroupRule] or None
        Haplogroup rule table in priority order
    trait_tables : Mapping[str, Sequence[TraitDefinition]], optional
        Named trait tables to interpret; none by default
    n_workers : int
        Number of worker threads. 1 runs the analyses sequentially.

    Returns
    -------
    FamilyAnalysis
        The four reports plus trait results keyed by table name
    """
    require_records(records, "analyze_family")
    records = tuple(records)
    trait_tables = trait_tables or {}

    logger.info(f"Starting family analysis of {len(records)} markers with {n_workers} worker(s)")
    start_time = time.time()

    tasks = _build_tasks(records, rule_table, trait_tables)
    results: Dict[str, object] = {}

    if n_workers <= 1:
        for name, task in tasks.items():
            results[name] = task()
    else:
        with ThreadPoolExecutor(max_workers=n_workers) as executor:
            future_to_name = {executor.submit(task): name for name, task in tasks.items()}
            for future in as_completed(future_to_name):
                name = future_to_name[future]
                try:
                    results[name] = future.result()
                except Exception as e:
                    logger.error(f"Analysis '{name}' failed: {e}")
                    raise

    traits = {name: results[f"traits:{name}"] for name in trait_tables}
    analysis = FamilyAnalysis(
        mendelian=results["mendelian"],
        mitochondrial=results["mitochondrial"],
        sibling=results["sibling"],
        haplogroup=results["haplogroup"],
        traits=traits,
    )

    logger.info(
        f"Family analysis complete in {time.time() - start_time:.2f}s: "
        f"{analysis.mendelian.inconsistent_count} Mendelian inconsistencies, "
        f"{analysis.mitochondrial.mismatch_count} MT mismatches, "
        f"{analysis.sibling.shared_percentage:.1f}% sibling IBS, "
        f"haplogroup {analysis.haplogroup.label}"
    )
    return analysis
