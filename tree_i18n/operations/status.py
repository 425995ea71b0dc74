"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of a
resource load attempt so the caller can decide whether to try the next
format or fall back to another resource.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Unexpected I/O failure (permissions, device errors)
        PERMANENT_ERROR: Content could not be decoded in the attempted format
        NOT_FOUND: Resource does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
