"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of calls to
external services so callers can decide whether a failure is worth reporting
as transient (try again later) or permanent (fix the input or credentials).
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Error that may clear up on its own (network, timeout, rate limit)
        PERMANENT_ERROR: Error that will repeat for the same input (bad request)
        UNAUTHORIZED: Missing, invalid or insufficient credentials
        NOT_FOUND: Requested resource (e.g. model) does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
