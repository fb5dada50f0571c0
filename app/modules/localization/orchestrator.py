"""Translation pass over a catalog.

For every (key, target language) pair the orchestrator decides whether the
pair needs a translation, asks the translation provider for the ones that do
and merges the results back into the catalog. The catalog is only written
through `Catalog.set_translation`, always from the calling thread.

Usage:
    orchestrator = TranslationOrchestrator(provider, rate_limiter=limiter)
    report = orchestrator.process(catalog, ["de", "fr"])
    if report.has_failures:
        ...
"""

import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import nullcontext
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from infrastructure.logging import get_module_logger
from infrastructure.resilience import IntervalRateLimiter
from modules.localization.exceptions import (
    ConfigurationMissing,
    TranslationFailed,
    UnsupportedFormat,
)
from modules.localization.models import (
    ERROR,
    TRANSLATED,
    Catalog,
    LocalizationGroup,
)
from modules.localization.translator import TranslationProvider, is_non_linguistic

logger = get_module_logger()


class TranslationAction(str, Enum):
    """What to do with one (key, language) pair."""

    TRANSLATE = "translate"
    SKIP_SOURCE_LANGUAGE = "source_language"
    SKIP_UNSUPPORTED_FORMAT = "unsupported_format"
    SKIP_ALREADY_TRANSLATED = "already_translated"

    @property
    def is_skip(self) -> bool:
        return self is not TranslationAction.TRANSLATE


class PairOutcome(str, Enum):
    """Result of processing one (key, language) pair."""

    TRANSLATED = "translated"
    PASSTHROUGH = "passthrough"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class TranslationTask:
    """One text to translate.

    Attributes:
        key: Catalog key.
        language: Target language.
        source_text: Text handed to the provider.
        source_language: Language of source_text.
        context: Translator comment of the entry, if any.
    """

    key: str
    language: str
    source_text: str
    source_language: str
    context: Optional[str] = None


@dataclass(frozen=True)
class ProgressEvent:
    """Emitted once per processed pair."""

    processed: int
    total: int
    key: str
    language: str
    outcome: PairOutcome
    reason: Optional[TranslationAction] = None

    @property
    def percent(self) -> float:
        if self.total == 0:
            return 100.0
        return self.processed * 100.0 / self.total


ProgressCallback = Callable[[ProgressEvent], None]


@dataclass
class ProcessingReport:
    """Outcome of a translation pass.

    Attributes:
        total_pairs: Number of (key, language) pairs considered.
        translated: Pairs merged from a provider response.
        passthrough: Pairs with nothing to translate, merged unchanged.
        skipped: Skipped pairs counted by reason.
        warnings: Entries left alone because of their format.
        failures: Pairs the provider could not translate.
        calls: Number of provider calls made.
        elapsed_seconds: Wall time of the pass.
    """

    total_pairs: int = 0
    translated: int = 0
    passthrough: int = 0
    skipped: Dict[str, int] = field(default_factory=dict)
    warnings: List[UnsupportedFormat] = field(default_factory=list)
    failures: List[TranslationFailed] = field(default_factory=list)
    calls: int = 0
    elapsed_seconds: float = 0.0

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    @property
    def skipped_total(self) -> int:
        return sum(self.skipped.values())

    def count_skip(self, action: TranslationAction) -> None:
        self.skipped[action.value] = self.skipped.get(action.value, 0) + 1

    def summary(self) -> dict:
        """Counters as a plain dict, for logs and CLI output."""
        return {
            "total_pairs": self.total_pairs,
            "translated": self.translated,
            "passthrough": self.passthrough,
            "skipped": dict(self.skipped),
            "failed": self.failed,
            "warnings": len(self.warnings),
            "calls": self.calls,
            "elapsed_seconds": round(self.elapsed_seconds, 2),
        }


@dataclass(frozen=True)
class PlannedPair:
    """Decision for one pair, with the task when it is to be translated."""

    key: str
    language: str
    action: TranslationAction
    task: Optional[TranslationTask] = None
    needs_call: bool = False


_Attempt = Tuple[Optional[str], Optional[TranslationFailed]]


def unique_languages(languages: Iterable[str]) -> List[str]:
    """Languages in first-seen order, blanks and repeats dropped."""
    seen: List[str] = []
    for language in languages:
        language = language.strip()
        if language and language not in seen:
            seen.append(language)
    return seen


class TranslationOrchestrator:
    """Runs the translation pass.

    Args:
        provider: Translation capability.
        rate_limiter: Spacing between provider calls. None disables it.
        max_workers: Provider calls allowed in flight. Merges stay sequential.
        clock: Time source for the elapsed time in the report.
    """

    def __init__(
        self,
        provider: TranslationProvider,
        rate_limiter: Optional[IntervalRateLimiter] = None,
        max_workers: int = 1,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.provider = provider
        self.rate_limiter = rate_limiter
        self.max_workers = max_workers
        self._clock = clock

    def decide(
        self,
        catalog: Catalog,
        key: str,
        group: LocalizationGroup,
        language: str,
        force_retranslate: bool = False,
    ) -> TranslationAction:
        """Decide what to do with one pair. Never mutates the catalog."""
        if language == catalog.source_language:
            return TranslationAction.SKIP_SOURCE_LANGUAGE

        unit = group.unit(language)
        if unit is not None:
            if not unit.is_supported_format:
                return TranslationAction.SKIP_UNSUPPORTED_FORMAT
            if unit.has_translation and not force_retranslate:
                return TranslationAction.SKIP_ALREADY_TRANSLATED

        return TranslationAction.TRANSLATE

    def resolve_source_text(self, catalog: Catalog, key: str) -> str:
        """Source-language value of an entry, or the key when it has none."""
        return catalog.strings[key].source_text(key, catalog.source_language)

    def plan(
        self,
        catalog: Catalog,
        languages: Sequence[str],
        force_retranslate: bool = False,
        report: Optional[ProcessingReport] = None,
    ) -> List[PlannedPair]:
        """Decide every pair, keys outer and languages inner."""
        planned: List[PlannedPair] = []
        for key, group in catalog.entries():
            for language in languages:
                action = self.decide(catalog, key, group, language, force_retranslate)

                if action is TranslationAction.SKIP_UNSUPPORTED_FORMAT:
                    unit = group.unit(language)
                    warning = UnsupportedFormat(key, language, unit.alternate_format)
                    if report is not None:
                        report.warnings.append(warning)
                    logger.warning(
                        "unsupported_format_skipped",
                        key=key,
                        language=language,
                        shape=warning.shape,
                    )

                if action.is_skip:
                    planned.append(PlannedPair(key, language, action))
                    continue

                task = TranslationTask(
                    key=key,
                    language=language,
                    source_text=self.resolve_source_text(catalog, key),
                    source_language=catalog.source_language,
                    context=group.comment,
                )
                planned.append(
                    PlannedPair(
                        key,
                        language,
                        action,
                        task=task,
                        needs_call=not is_non_linguistic(task.source_text),
                    )
                )
        return planned

    def process(
        self,
        catalog: Catalog,
        target_languages: Sequence[str],
        force_retranslate: bool = False,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ProcessingReport:
        """Translate every pair that needs it and merge the results.

        Args:
            catalog: Catalog to update in place.
            target_languages: Languages to translate into.
            force_retranslate: Translate pairs that are already translated.
            on_progress: Called once per pair, in processing order.

        Returns:
            ProcessingReport of the pass.

        Raises:
            ConfigurationMissing: If target_languages is empty.
        """
        languages = unique_languages(target_languages)
        if not languages:
            raise ConfigurationMissing("No target languages given")

        started = self._clock()
        report = ProcessingReport()
        planned = self.plan(catalog, languages, force_retranslate, report)
        report.total_pairs = len(planned)

        call_tasks = [pair.task for pair in planned if pair.needs_call]
        report.calls = len(call_tasks)

        logger.info(
            "translation_pass_started",
            languages=languages,
            key_count=len(catalog.strings),
            pair_count=report.total_pairs,
            call_count=report.calls,
            force_retranslate=force_retranslate,
        )

        if self.max_workers > 1 and len(call_tasks) > 1:
            pool = ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="translate"
            )
            try:
                self._merge(
                    catalog,
                    planned,
                    pool.map(self._attempt, call_tasks),
                    report,
                    on_progress,
                )
            except BaseException:
                # Queued calls are dropped, calls in flight are not awaited.
                pool.shutdown(wait=False, cancel_futures=True)
                logger.warning(
                    "translation_pass_aborted",
                    merged=report.translated + report.failed,
                    call_count=report.calls,
                )
                raise
            pool.shutdown()
        else:
            self._merge(
                catalog, planned, map(self._attempt, call_tasks), report, on_progress
            )

        report.elapsed_seconds = self._clock() - started
        logger.info("translation_pass_completed", **report.summary())
        return report

    def _attempt(self, task: TranslationTask) -> _Attempt:
        limiter = self.rate_limiter if self.rate_limiter is not None else nullcontext()
        with limiter:
            try:
                text = self.provider.translate(
                    task.source_text,
                    task.source_language,
                    task.language,
                    task.context,
                )
            except TranslationFailed as e:
                return None, e.for_pair(task.key, task.language)
        return text, None

    def _merge(
        self,
        catalog: Catalog,
        planned: List[PlannedPair],
        attempts: Iterable[_Attempt],
        report: ProcessingReport,
        on_progress: Optional[ProgressCallback],
    ) -> None:
        attempts = iter(attempts)
        for processed, pair in enumerate(planned, start=1):
            if pair.action.is_skip:
                report.count_skip(pair.action)
                outcome = PairOutcome.SKIPPED
            elif not pair.needs_call:
                catalog.set_translation(
                    pair.key, pair.language, pair.task.source_text, TRANSLATED
                )
                report.passthrough += 1
                outcome = PairOutcome.PASSTHROUGH
            else:
                text, failure = next(attempts)
                if failure is None:
                    catalog.set_translation(pair.key, pair.language, text, TRANSLATED)
                    report.translated += 1
                    outcome = PairOutcome.TRANSLATED
                else:
                    catalog.set_translation(pair.key, pair.language, "", ERROR)
                    report.failures.append(failure)
                    outcome = PairOutcome.FAILED
                    logger.warning(
                        "translation_failed",
                        key=pair.key,
                        language=pair.language,
                        error=failure.reason,
                        error_code=failure.error_code,
                    )

            if on_progress is not None:
                on_progress(
                    ProgressEvent(
                        processed=processed,
                        total=len(planned),
                        key=pair.key,
                        language=pair.language,
                        outcome=outcome,
                        reason=pair.action if pair.action.is_skip else None,
                    )
                )
