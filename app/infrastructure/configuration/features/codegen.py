"""Code generation feature settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings, split_csv


class CodegenSettings(FeatureSettings):
    """Configuration for accessor generation.

    Environment Variables:
        CODEGEN_ESCAPE_PREFIX: Prefix added to identifiers that are reserved
            words or start with a digit (default: "_")
        CODEGEN_COLLISION_POLICY: What to do when two keys derive the same
            identifier: "suffix" appends a counter, "error" aborts generation
        CODEGEN_EXTRA_RESERVED_WORDS: Comma separated words escaped in
            addition to the Swift keyword list
    """

    escape_prefix: str = Field(
        default="_",
        min_length=1,
        alias="CODEGEN_ESCAPE_PREFIX",
    )
    collision_policy: Literal["suffix", "error"] = Field(
        default="suffix",
        alias="CODEGEN_COLLISION_POLICY",
    )
    extra_reserved_words_csv: str = Field(
        default="",
        alias="CODEGEN_EXTRA_RESERVED_WORDS",
    )

    @property
    def extra_reserved_words(self) -> list[str]:
        """Additional reserved words parsed from CODEGEN_EXTRA_RESERVED_WORDS."""
        return split_csv(self.extra_reserved_words_csv)
