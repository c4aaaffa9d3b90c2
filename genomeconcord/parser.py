"""
Family genotype file reader.

This module parses the merged four-person raw genotype format: one marker
per line, whitespace separated, with the columns

    markerId  chromosome  position  father  son1  son2  mother

Blank lines, '#' comment lines and lines with fewer than seven fields are
skipped. The no-call tokens '--' and '__' become empty strings.
"""

import logging
import os
from typing import Dict, Iterable, List

import pandas as pd

from .error_handling import FileFormatError
from .genotype_utils import normalize_genotype
from .models import PEOPLE, GenotypeRecord

logger = logging.getLogger(__name__)

COLUMNS = ["marker_id", "chromosome", "position", "father", "son1", "son2", "mother"]


def parse_genotype_line(line: str):
    """
    Parse a single data line.

    Returns
    -------
    GenotypeRecord or None
        None for blank, comment or short lines
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    parts = stripped.split()
    if len(parts) < len(COLUMNS):
        return None

    marker_id, chromosome, position_str, father, son1, son2, mother = parts[: len(COLUMNS)]
    try:
        position = int(position_str)
    except ValueError:
        logger.debug(f"Marker {marker_id}: non-integer position '{position_str}' kept as None")
        position = None

    return GenotypeRecord(
        marker_id=marker_id,
        chromosome=chromosome,
        position=position,
        father=normalize_genotype(father),
        mother=normalize_genotype(mother),
        son1=normalize_genotype(son1),
        son2=normalize_genotype(son2),
    )


def parse_genotype_lines(lines: Iterable[str]) -> List[GenotypeRecord]:
    """Parse an iterable of text lines into genotype records, in input order."""
    records = []
    skipped = 0
    for line in lines:
        record = parse_genotype_line(line)
        if record is None:
            if line.strip() and not line.lstrip().startswith("#"):
                skipped += 1
            continue
        records.append(record)

    if skipped:
        logger.warning(f"Skipped {skipped} malformed genotype lines")
    return records


def read_genotype_file(file_path: str) -> List[GenotypeRecord]:
    """
    Read a family genotype file.

    Args:
        file_path: Path to the whitespace-delimited genotype file

    Returns:
        List of GenotypeRecord in file order

    Raises:
        FileFormatError: If the file does not exist
    """
    if not os.path.isfile(file_path):
        raise FileFormatError(file_path, "existing family genotype text file")

    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        records = parse_genotype_lines(f)

    logger.info(f"Successfully parsed genotype file with {len(records)} markers")
    return records


def dataset_metadata(records: Iterable[GenotypeRecord]) -> Dict[str, object]:
    """
    Summarize a parsed dataset.

    Returns
    -------
    dict
        ``count`` of records and ``chromosomes`` in first-seen order
    """
    count = 0
    chromosomes: Dict[str, None] = {}
    for record in records:
        count += 1
        chromosomes.setdefault(record.chromosome, None)
    return {"count": count, "chromosomes": list(chromosomes)}


def records_to_dataframe(records: Iterable[GenotypeRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per record and one column per field."""
    rows = [
        {
            "marker_id": r.marker_id,
            "chromosome": r.chromosome,
            "position": r.position,
            **{person: r.genotype_of(person) for person in PEOPLE},
        }
        for r in records
    ]
    df = pd.DataFrame(rows, columns=["marker_id", "chromosome", "position", *PEOPLE])
    df["position"] = df["position"].astype("Int64")
    return df
