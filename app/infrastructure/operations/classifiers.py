"""Error classifiers for client exceptions.

Converts client-specific exceptions (OpenAI SDK) into standardized
OperationResult objects, so callers branch on a status instead of on the
exception hierarchy of each SDK.

Key Functions:
- classify_openai_error(): OpenAI SDK errors → OperationResult

Usage:
    from infrastructure.operations.classifiers import classify_openai_error

    try:
        response = client.chat.completions.create(...)
    except openai.OpenAIError as exc:
        return classify_openai_error(exc)
"""

import openai

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


def classify_openai_error(exc: Exception) -> OperationResult:
    """Classify OpenAI SDK errors into OperationResult.

    Status Mapping:
    - Timeout / connection failure → TRANSIENT_ERROR
    - 429: Rate limiting → TRANSIENT_ERROR
    - 401: Invalid API key → UNAUTHORIZED
    - 403: Permission denied → UNAUTHORIZED
    - 404: Unknown model → NOT_FOUND
    - 5xx: Server error → TRANSIENT_ERROR
    - Other 4xx: Bad request → PERMANENT_ERROR
    - Anything else → PERMANENT_ERROR

    Args:
        exc: Exception raised while calling the OpenAI API

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, openai.APITimeoutError):
        return OperationResult.transient_error(
            "OpenAI request timed out",
            error_code="TIMEOUT",
        )

    if isinstance(exc, openai.APIConnectionError):
        return OperationResult.transient_error(
            f"OpenAI connection error: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    if not isinstance(exc, openai.APIStatusError):
        return OperationResult.permanent_error(
            f"OpenAI error: {type(exc).__name__}: {str(exc)}",
            error_code="UNKNOWN_ERROR",
        )

    status_code = exc.status_code

    if status_code == 429:
        return OperationResult.transient_error(
            "OpenAI API rate limited",
            error_code="RATE_LIMITED",
        )

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"OpenAI API rejected the credentials ({status_code})",
            error_code="UNAUTHORIZED" if status_code == 401 else "FORBIDDEN",
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            f"OpenAI resource not found: {exc.message}",
            error_code="NOT_FOUND",
        )

    if 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"OpenAI server error ({status_code})",
            error_code="SERVER_ERROR",
        )

    return OperationResult.permanent_error(
        f"OpenAI client error ({status_code}): {exc.message}",
        error_code="HTTP_ERROR",
    )
