"""Infrastructure modules for xcstrings-translate.

Centralized infrastructure components:
- configuration: Settings management (settings, OpenAISettings, TranslationFeatureSettings)
- logging: Structured logging (configure_logging, get_module_logger, bind_run_context)
- operations: Operation results and error classification
- resilience: Rate limiting of external calls
- clients: External service clients (OpenAI)
- services: Application-scoped providers (get_settings)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger, logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Services
from infrastructure.services import get_settings

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
    "logger",
    # Operations
    "OperationResult",
    "OperationStatus",
    # Services
    "get_settings",
]
