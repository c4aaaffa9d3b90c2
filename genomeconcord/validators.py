# File: genomeconcord/validators.py
# Location: genomeconcord/genomeconcord/validators.py

"""
Validation module for genomeconcord.

This module provides functions to validate:
- the family genotype input file (existence, non-empty)
- optional rule/trait table files (existence)
- the family members requested for export

These validations ensure that all critical inputs are provided correctly
before the analysis starts.
"""

import logging
import os
import sys
from typing import Iterable, Optional

from .models import PEOPLE

logger = logging.getLogger("genomeconcord")


def validate_genotype_file(genotype_path: Optional[str], logger: logging.Logger) -> None:
    """
    Validate that the input genotype file exists and is non-empty.

    Parameters
    ----------
    genotype_path : str or None
        Path to the genotype file to validate.
    logger : logging.Logger
        Logger instance for logging errors and debug information.

    Raises
    ------
    SystemExit
        If the genotype file is missing or empty.
    """
    if not genotype_path or not os.path.exists(genotype_path):
        logger.error("Genotype file not found: %s", genotype_path)
        sys.exit(1)
    if os.path.getsize(genotype_path) == 0:
        logger.error("Genotype file %s is empty.", genotype_path)
        sys.exit(1)


def validate_optional_file(path: Optional[str], description: str, logger: logging.Logger) -> None:
    """
    Validate that an optional input file exists when it is given.

    Raises
    ------
    SystemExit
        If a path is given but does not exist.
    """
    if path and not os.path.exists(path):
        logger.error("%s not found: %s", description, path)
        sys.exit(1)


def validate_export_people(people: Optional[Iterable[str]]) -> None:
    """
    Validate the family members requested for export.

    Raises
    ------
    SystemExit
        If an unknown family member is requested.
    """
    for person in people or []:
        if person not in PEOPLE:
            logger.error(
                "Cannot export '%s': expected one of %s.", person, ", ".join(PEOPLE)
            )
            sys.exit(1)
