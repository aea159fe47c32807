"""
Domain models and value objects.

Contains the transaction log entities: OperationKind, Record, Totals, Report.
"""

from src.core.domain.operation import (
    FIELD_DELIMITER,
    RECORD_FIELD_COUNT,
    RESULT_TAG,
    OperationKind,
    Record,
)
from src.core.domain.report import Report
from src.core.domain.totals import Totals, TotalsAccumulator

__all__ = [
    # Operation module
    "FIELD_DELIMITER",
    "RECORD_FIELD_COUNT",
    "RESULT_TAG",
    "OperationKind",
    "Record",
    # Totals
    "Totals",
    "TotalsAccumulator",
    # Report
    "Report",
]
