"""Shared fixtures for the test suite."""

import pytest
import structlog

from infrastructure.services.providers import get_settings

ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_ORGANIZATION",
    "OPENAI_BASE_URL",
    "OPENAI_TIMEOUT_SECONDS",
    "OPENAI_TEMPERATURE",
    "TRANSLATION_LANGUAGES",
    "TRANSLATION_RATE_LIMIT_SECONDS",
    "TRANSLATION_MAX_WORKERS",
    "TRANSLATION_BACKUP_ENABLED",
    "CODEGEN_ESCAPE_PREFIX",
    "CODEGEN_COLLISION_POLICY",
    "CODEGEN_EXTRA_RESERVED_WORDS",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test without the caller's environment or `.env` file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clean_log_context():
    """Make sure no run context leaks between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
