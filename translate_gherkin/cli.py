"""
Command-line interface for translate-gherkin.

Provides commands for:
- Translating the keywords of feature files to another dialect
- Listing the available dialects

Usage:
    translate-gherkin translate features/*.feature --dialect de
    translate-gherkin translate -i features -o features_en features
    translate-gherkin translate --dry-run features/login.feature
    translate-gherkin dialects
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from translate_gherkin import __version__
from translate_gherkin.config import APP_NAME, DEFAULT_JOBS, DIALECT_ENV_VAR, FEATURE_SUFFIX
from translate_gherkin.dialects import available_dialects
from translate_gherkin.errors import UnknownDialectError
from translate_gherkin.translator import DEFAULT_DIALECT, GherkinTranslator, TranslatorConfig

app = typer.Typer(
    name=APP_NAME,
    help="Translate the keywords of Gherkin *.feature files to a target dialect.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"translate-gherkin v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """translate-gherkin: Keyword translation for Gherkin feature files."""
    pass


def setup_logging(quiet: bool = False, verbose: bool = False) -> None:
    """Route log records through rich, honoring --quiet and --verbose."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False, show_level=False)],
        force=True,
    )


def collect_input_files(paths: List[Path]) -> List[Path]:
    """Expand directories to the feature files they contain."""
    files: List[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.rglob(f"*{FEATURE_SUFFIX}")))
        else:
            files.append(path)
    return files


def resolve_output_path(
    input_file: Path,
    input_dir: Optional[Path] = None,
    output_dir: Optional[Path] = None,
) -> Path:
    """Compute where the translation of an input file is written.

    Without an output directory the input file is overwritten. Otherwise
    the input path, relative to the input directory if one is given, is
    placed below the output directory.

    Raises:
        ValueError: If the input file is not inside the input directory
    """
    if output_dir is None:
        return input_file
    if input_dir is not None:
        relative = input_file.resolve().relative_to(input_dir.resolve())
    elif input_file.is_absolute():
        relative = input_file.relative_to(input_file.anchor)
    else:
        relative = input_file
    return output_dir / relative


@app.command()
def translate(
    input_files: Optional[List[Path]] = typer.Argument(
        None,
        help="Feature files (or directories of feature files) to translate",
    ),
    input_dir: Optional[Path] = typer.Option(
        None, "--input", "-i",
        help="Input directory; stripped from input paths when building output paths",
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output", "-o",
        help="Output directory. By default the input files are overwritten.",
    ),
    dialect: str = typer.Option(
        DEFAULT_DIALECT, "--dialect", "-d",
        envvar=DIALECT_ENV_VAR,
        help="Language code of the dialect to translate to",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only report errors",
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="Log every translated keyword",
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n",
        help="Translate without writing any file",
    ),
    jobs: int = typer.Option(
        DEFAULT_JOBS, "--jobs", "-j",
        help="Number of files translated concurrently",
    ),
):
    """Translate the keywords of feature files."""
    setup_logging(quiet=quiet, verbose=verbose)

    files = collect_input_files(input_files or [])
    if not files:
        console.print("[red]Error:[/] No input files.", style="bold")
        raise typer.Exit(1)

    config = TranslatorConfig(
        output_dialect=dialect,
        enable_logging=not quiet,
        enable_verbose_logging=verbose and not quiet,
        dry_run=dry_run,
    )
    try:
        translator = GherkinTranslator(config)
    except UnknownDialectError as e:
        console.print(f"[red]Error:[/] {e.message}", style="bold")
        console.print("[dim]Run `translate-gherkin dialects` for the available codes.[/]")
        raise typer.Exit(1)

    errors: List[str] = []
    translated = 0
    with ThreadPoolExecutor(max_workers=max(1, jobs)) as executor:
        futures = {}
        for input_file in files:
            try:
                output_file = resolve_output_path(input_file, input_dir, output_dir)
            except ValueError:
                errors.append(f"{input_file}: not inside input directory {input_dir}")
                continue
            future = executor.submit(translator.translate_file, input_file, output_file)
            futures[future] = input_file

        for future in as_completed(futures):
            try:
                future.result()
                translated += 1
            except Exception as e:
                errors.append(f"{futures[future]}: {e}")

    if errors:
        console.print(f"[red]Failed to translate {len(errors)} file(s):[/]", style="bold")
        for error in sorted(errors):
            console.print(f"  - {error}", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    if not quiet:
        action = "Would translate" if dry_run else "Translated"
        console.print(f"[green]{action} {translated} file(s) to {translator.output_dialect.name}[/]")


@app.command()
def dialects():
    """List the available dialects."""
    table = Table(title="Gherkin dialects")
    table.add_column("Code", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Native", style="dim")

    for dialect in available_dialects():
        table.add_row(dialect.code, dialect.name, dialect.native)

    console.print(table)


if __name__ == "__main__":
    app()
