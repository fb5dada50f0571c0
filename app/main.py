"""xcstrings-translate command line interface.

Translates an Xcode String Catalog with an OpenAI model and generates Swift
accessors for its keys.

Usage:
    xcstrings-translate translate Localizable.xcstrings -l de,fr -k sk-...
    xcstrings-translate generate Localizable.xcstrings
    xcstrings-translate interactive
"""

from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from infrastructure.configuration.base import split_csv
from infrastructure.logging import add_app_info, configure_logging, get_module_logger
from infrastructure.services import get_settings
from modules.localization.exceptions import LocalizationError
from modules.localization.factory import create_service
from modules.localization.orchestrator import (
    PairOutcome,
    ProcessingReport,
    ProgressEvent,
)

__version__ = "0.1.0"

load_dotenv()

app = typer.Typer(
    name="xcstrings-translate",
    help="Translate Xcode String Catalogs and generate Swift accessors.",
    add_completion=False,
)
console = Console()
logger = get_module_logger()

MODES = {
    "1": ("Generate Swift file only (no translation)", False, True),
    "2": ("Perform localization + generate Swift file", True, True),
    "3": ("Perform localization only", True, False),
}


def _setup_logging(verbose: bool) -> None:
    configure_logging(
        log_level="DEBUG" if verbose else None,
        extra_processors=[add_app_info("xcstrings-translate", __version__)],
    )


def format_duration(seconds: float) -> str:
    """Human readable duration, e.g. "1 hour, 2 minutes, 5 seconds"."""
    total = int(round(seconds))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    parts: List[str] = []
    for value, unit in ((hours, "hour"), (minutes, "minute")):
        if value:
            parts.append(f"{value} {unit}" + ("s" if value != 1 else ""))
    if secs or not parts:
        parts.append(f"{secs} second" + ("s" if secs != 1 else ""))
    return ", ".join(parts)


class ProgressPrinter:
    """Prints translation progress in 10% steps."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self._last_step: Optional[int] = None

    def __call__(self, event: ProgressEvent) -> None:
        if self.verbose and event.outcome is not PairOutcome.SKIPPED:
            console.print(
                f"[dim]{escape('[' + event.language + ']')}[/dim] "
                f"{escape(event.key)} -> {event.outcome.value}",
                highlight=False,
            )

        step = int(event.percent) // 10 * 10
        if step != self._last_step:
            self._last_step = step
            console.print(f"[cyan]{step}%[/cyan]")


def _print_report(report: ProcessingReport, verbose: bool = False) -> None:
    table = Table(title="Translation summary")
    table.add_column("Outcome")
    table.add_column("Pairs", justify="right")
    table.add_row("Translated", str(report.translated))
    table.add_row("Unchanged (nothing to translate)", str(report.passthrough))
    for reason, count in sorted(report.skipped.items()):
        table.add_row(f"Skipped: {reason.replace('_', ' ')}", str(count))
    table.add_row("Failed", str(report.failed), style="red" if report.failed else None)
    console.print(table)

    if report.warnings:
        console.print(
            f"[yellow]{len(report.warnings)} unit(s) use an unsupported format "
            "and were left untouched.[/yellow]"
        )
        if verbose:
            for warning in report.warnings:
                console.print(
                    f"  [yellow]-[/yellow] {escape(str(warning))}", highlight=False
                )

    if report.failures:
        failures = Table(title="Failed translations")
        failures.add_column("Key")
        failures.add_column("Language")
        failures.add_column("Reason", style="red")
        for failure in report.failures:
            failures.add_row(
                escape(failure.key), failure.language, escape(failure.reason)
            )
        console.print(failures)

    console.print(f"Translation time: {format_duration(report.elapsed_seconds)}")


def _fail(error: Exception) -> typer.Exit:
    logger.error("command_failed", error=str(error), error_type=type(error).__name__)
    console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    return typer.Exit(1)


def _run(
    file: Path,
    *,
    translate: bool,
    generate: bool,
    languages: Optional[List[str]] = None,
    api_key: Optional[str] = None,
    force: bool = False,
    backup: Optional[bool] = None,
    output: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    if not file.exists():
        console.print(
            f"[red]Error:[/red] File not found: {escape(str(file))}", highlight=False
        )
        raise typer.Exit(1)

    try:
        service = create_service(api_key=api_key, translation=translate)
        result = service.run(
            file,
            languages,
            force_retranslate=force,
            backup=backup,
            translate=translate,
            generate=generate,
            output_path=output,
            on_progress=ProgressPrinter(verbose) if translate else None,
        )
    except LocalizationError as e:
        raise _fail(e) from e

    if result.report is not None:
        _print_report(result.report, verbose)
    if result.swift_path is not None:
        console.print(
            f"Generated Swift file: [cyan]{escape(str(result.swift_path))}[/cyan]"
        )


def version_callback(value: bool) -> None:
    if value:
        console.print(f"xcstrings-translate {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """xcstrings-translate: translate String Catalogs with OpenAI."""


@app.command()
def translate(
    file: Path = typer.Argument(..., help="Path to the .xcstrings file."),
    languages: Optional[str] = typer.Option(
        None,
        "--languages",
        "-l",
        help="Comma separated language codes (must match the codes used by the catalog).",
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        "-k",
        envvar="OPENAI_API_KEY",
        help="OpenAI API key, see https://platform.openai.com/api-keys",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Translate every string, even those already translated.",
    ),
    skip_backup: bool = typer.Option(
        False,
        "--skip-backup",
        help="Do not keep a <file>.original copy of the catalog.",
    ),
    skip_swift: bool = typer.Option(
        False,
        "--skip-swift",
        help="Do not generate the Swift accessor file after translating.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
) -> None:
    """Translate a String Catalog, then generate its Swift accessors."""
    _setup_logging(verbose)
    _run(
        file,
        translate=True,
        generate=not skip_swift,
        languages=split_csv(languages) if languages is not None else None,
        api_key=api_key,
        force=force,
        backup=False if skip_backup else None,
        verbose=verbose,
    )


@app.command()
def generate(
    file: Path = typer.Argument(..., help="Path to the .xcstrings file."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path. Defaults to <name>.swift next to the catalog.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
) -> None:
    """Generate Swift accessors without translating."""
    _setup_logging(verbose)
    _run(file, translate=False, generate=True, output=output, verbose=verbose)


@app.command()
def interactive() -> None:
    """Guided mode: asks for everything it needs."""
    _setup_logging(False)
    console.print("Welcome to xcstrings-translate interactive mode!")
    console.print("=" * 50)

    console.print("\nWhat would you like to do?")
    for choice, (label, _, _) in MODES.items():
        console.print(f"{choice}. {label}")
    choice = typer.prompt("Choice").strip()
    if choice not in MODES:
        console.print("[red]Invalid choice.[/red] Select 1, 2, or 3.")
        raise typer.Exit(1)
    label, should_translate, should_generate = MODES[choice]
    console.print(f"Selected: {label}")

    file = Path(typer.prompt("Path to your .xcstrings file").strip())

    api_key = None
    languages = None
    if should_translate:
        api_key = typer.prompt(
            "OpenAI API key (Enter to use OPENAI_API_KEY)",
            default="",
            show_default=False,
            hide_input=True,
        ).strip() or None
        languages = split_csv(
            typer.prompt(
                "Languages to translate to",
                default=get_settings().translation.languages_csv,
            )
        )
        console.print(f"Languages: {', '.join(languages)}")

    console.print("\nStarting...")
    _run(
        file,
        translate=should_translate,
        generate=should_generate,
        languages=languages,
        api_key=api_key,
    )
    console.print("\n[green]Done.[/green]")


if __name__ == "__main__":
    app()
