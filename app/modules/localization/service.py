"""Service layer for the localization module.

Application boundary used by the CLI: loads a catalog, runs the translation
pass, saves the result and generates the accessor file. The translation pass
and accessor generation never interleave; generation always reads the
catalog as it was saved.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from infrastructure.logging import bind_run_context, get_module_logger
from modules.localization.emitter import SwiftAccessorEmitter
from modules.localization.exceptions import ConfigurationMissing
from modules.localization.identifiers import IdentifierSynthesizer
from modules.localization.models import Catalog
from modules.localization.orchestrator import (
    ProcessingReport,
    ProgressCallback,
    TranslationOrchestrator,
)
from modules.localization.store import CatalogStore

logger = get_module_logger()

PathLike = Union[str, Path]


@dataclass
class RunResult:
    """What a run produced.

    Attributes:
        catalog_path: Catalog that was processed.
        report: Translation report, None when translation was not requested.
        swift_path: Generated accessor file, None when generation was skipped.
    """

    catalog_path: Path
    report: Optional[ProcessingReport] = None
    swift_path: Optional[Path] = None


class LocalizationService:
    """Catalog translation and accessor generation.

    Args:
        store: Catalog file access.
        synthesizer: Identifier derivation for generation.
        emitter: Accessor file writer.
        orchestrator: Translation pass. None when no translation service is
            configured; translate() then raises ConfigurationMissing.
        default_languages: Target languages used when a call passes none.
        backup_enabled: Default for keeping `<file>.original` when saving.
    """

    def __init__(
        self,
        store: CatalogStore,
        synthesizer: IdentifierSynthesizer,
        emitter: SwiftAccessorEmitter,
        orchestrator: Optional[TranslationOrchestrator] = None,
        default_languages: Sequence[str] = (),
        backup_enabled: bool = True,
    ) -> None:
        self.store = store
        self.synthesizer = synthesizer
        self.emitter = emitter
        self.orchestrator = orchestrator
        self.default_languages = list(default_languages)
        self.backup_enabled = backup_enabled

    def translate(
        self,
        catalog_path: PathLike,
        languages: Optional[Sequence[str]] = None,
        force_retranslate: bool = False,
        backup: Optional[bool] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ProcessingReport:
        """Translate a catalog file in place.

        Raises:
            ConfigurationMissing: If no translation service or no languages.
            MalformedDocument: If the file is not a valid catalog.
        """
        if self.orchestrator is None:
            raise ConfigurationMissing("Translation requires an OpenAI API key")

        catalog_path = Path(catalog_path)
        catalog = self.store.load(catalog_path)
        report = self.orchestrator.process(
            catalog,
            languages if languages is not None else self.default_languages,
            force_retranslate=force_retranslate,
            on_progress=on_progress,
        )
        self.store.save(
            catalog,
            catalog_path,
            backup=self.backup_enabled if backup is None else backup,
        )
        return report

    def generate_accessors(
        self,
        catalog_path: PathLike,
        output_path: Optional[PathLike] = None,
        catalog: Optional[Catalog] = None,
    ) -> Path:
        """Write the accessor file for a catalog.

        Args:
            catalog_path: Catalog file. Its stem names the strings table.
            output_path: Destination, `<stem>.swift` next to the catalog by default.
            catalog: Already loaded catalog; read from catalog_path when None.

        Returns:
            The generated file path.
        """
        if catalog is None:
            catalog = self.store.load(catalog_path)
        records = self.synthesizer.synthesize(catalog)
        return self.emitter.write(records, catalog_path, output_path)

    def run(
        self,
        catalog_path: PathLike,
        languages: Optional[Sequence[str]] = None,
        force_retranslate: bool = False,
        backup: Optional[bool] = None,
        translate: bool = True,
        generate: bool = True,
        output_path: Optional[PathLike] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> RunResult:
        """Translate and/or generate, in that order."""
        catalog_path = Path(catalog_path)
        mode = "+".join(
            name for name, enabled in (("translate", translate), ("generate", generate))
            if enabled
        )

        with bind_run_context(catalog_path=str(catalog_path), mode=mode):
            logger.info("localization_run_started")
            result = RunResult(catalog_path=catalog_path)

            if translate:
                result.report = self.translate(
                    catalog_path,
                    languages,
                    force_retranslate=force_retranslate,
                    backup=backup,
                    on_progress=on_progress,
                )
            if generate:
                result.swift_path = self.generate_accessors(catalog_path, output_path)

            logger.info(
                "localization_run_completed",
                swift_path=str(result.swift_path) if result.swift_path else None,
                failed=result.report.failed if result.report else 0,
            )
            return result
