"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.translation import TranslationFeatureSettings
from infrastructure.configuration.features.codegen import CodegenSettings

__all__ = [
    "TranslationFeatureSettings",
    "CodegenSettings",
]
