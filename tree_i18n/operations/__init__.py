"""Operation result types and status enums.

Standardized result types returned by resource loading, so that format and
fallback decisions are made on explicit outcomes instead of caught exceptions.
"""

from tree_i18n.operations.result import OperationResult
from tree_i18n.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
