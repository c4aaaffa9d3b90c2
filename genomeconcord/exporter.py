"""
Per-person raw data export in the 23andMe text layout.

The output has '#' header lines followed by tab-separated
``rsid chromosome position genotype`` rows in input order. No-calls are
written back as '--'.
"""

import io
import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from .models import PEOPLE, GenotypeRecord
from .version import __version__

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["rsid", "chromosome", "position", "genotype"]
NO_CALL = "--"


def export_person(records: Iterable[GenotypeRecord], person: str) -> str:
    """
    Render one family member's genotypes as 23andMe-formatted text.

    Parameters
    ----------
    records : Iterable[GenotypeRecord]
        Parsed genotype records
    person : str
        One of "father", "mother", "son1", "son2"

    Returns
    -------
    str
        The complete file content

    Raises
    ------
    ValueError
        If ``person`` is not a family member
    """
    if person not in PEOPLE:
        raise ValueError(f"Unknown family member '{person}'. Expected one of {PEOPLE}")

    df = pd.DataFrame(
        [
            (
                r.marker_id,
                r.chromosome,
                "" if r.position is None else r.position,
                r.genotype_of(person) or NO_CALL,
            )
            for r in records
        ],
        columns=EXPORT_COLUMNS,
    )

    buffer = io.StringIO()
    buffer.write(f"# This data file generated by genomeconcord {__version__}\n")
    buffer.write(f"# Individual: {person}\n")
    buffer.write("#\n")
    buffer.write("# " + "\t".join(EXPORT_COLUMNS) + "\n")
    df.to_csv(buffer, sep="\t", header=False, index=False, lineterminator="\n")
    return buffer.getvalue()


def write_person_export(records: Iterable[GenotypeRecord], person: str, output_dir: str) -> str:
    """
    Write ``23andme_format_<person>.txt`` into ``output_dir``.

    Returns
    -------
    str
        Path of the written file
    """
    output_path = Path(output_dir) / f"23andme_format_{person}.txt"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    content = export_person(records, person)
    with open(output_path, "w", encoding="utf-8") as out_f:
        out_f.write(content)
    logger.info(f"Exported {person} genotypes to {output_path}")
    return str(output_path)
