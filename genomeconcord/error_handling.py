"""
Exception classes for genomeconcord.

Per-record data problems are never raised; analyses exclude such records
from their aggregates. These exceptions cover caller contract violations
and unreadable input files.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class ConcordanceError(Exception):
    """Base exception for all genomeconcord errors."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        """Initialize concordance error.

        Parameters
        ----------
        message : str
            Error message
        details : dict, optional
            Additional error details
        """
        super().__init__(message)
        self.details = details or {}


class FileFormatError(ConcordanceError):
    """Raised when an input file is missing or has an invalid format."""

    def __init__(self, file_path: str, expected_format: str):
        """Initialize file format error."""
        message = f"Invalid file format for {file_path}. Expected: {expected_format}"
        super().__init__(message, {"file": file_path, "expected_format": expected_format})


class DataValidationError(ConcordanceError):
    """Raised when an analysis is called with arguments it cannot work on."""

    def __init__(self, message: str, field: str):
        """Initialize data validation error."""
        super().__init__(message, {"field": field})


def require_records(records, analysis: str):
    """
    Reject an absent record sequence.

    Parameters
    ----------
    records : Iterable[GenotypeRecord] or None
        Records passed by the caller.
    analysis : str
        Name of the analysis, used in the error message.

    Raises
    ------
    DataValidationError
        If ``records`` is None.
    """
    if records is None:
        logger.error(f"{analysis} called without a record sequence")
        raise DataValidationError(f"{analysis} requires a record sequence, got None", "records")
    return records
