"""Run context binding for structured logging.

Binds run-scoped context (run id, catalog path, mode) so that every log entry
emitted during one translation or generation run can be correlated.

Usage:
    from infrastructure.logging import bind_run_context

    with bind_run_context(catalog_path="Localizable.xcstrings", mode="translate"):
        logger.info("run_started")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_run_context(
    run_id: Optional[str] = None,
    catalog_path: Optional[str] = None,
    mode: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind run-scoped context to all logs within the context manager.

    Args:
        run_id: Unique run identifier. Auto-generated if not provided.
        catalog_path: Path of the catalog being processed.
        mode: Operating mode (e.g. "translate", "generate").
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The run id bound to the context.
    """
    context: dict[str, Any] = {"run_id": run_id or uuid.uuid4().hex[:12]}

    if catalog_path is not None:
        context["catalog_path"] = catalog_path

    if mode is not None:
        context["mode"] = mode

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["run_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
