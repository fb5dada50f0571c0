"""Resilience patterns and implementations.

This module contains resilience-related infrastructure components used
around calls to external services.
"""

from infrastructure.resilience.rate_limit import IntervalRateLimiter

__all__ = [
    "IntervalRateLimiter",
]
