"""Operation result types and status enums.

This module contains standardized result types for calls to external
services, including the status enum, the result dataclass, and the error
classifier for OpenAI SDK exceptions.
"""

from infrastructure.operations.classifiers import classify_openai_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_openai_error",
]
