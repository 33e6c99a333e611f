import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from codescore.api import analyze as analyze_contents
from codescore.api import decode_source
from codescore.errors import CodeScoreError
from codescore.languages import LanguageSupport, analyzable_languages, parseable_languages
from codescore.parser import parse_to_text

from .config import DEFAULT_CONFIG_FILE, CliConfig
from .render import render_text

app = typer.Typer(help="codescore - language-aware static quality scoring for source files")


def infer_language(file_path: Path, command: str) -> Optional[LanguageSupport]:
    """Pick the language for a file from its extension, or None if the command doesn't support it"""
    candidates = analyzable_languages() if command == "analyze" else parseable_languages()
    extension = file_path.suffix.lower()
    for support in candidates:
        if extension in support.extensions:
            return support
    return None


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve(file_path: Path, command: str) -> LanguageSupport:
    if not file_path.exists():
        _fail(f"File '{file_path}' does not exist")

    support = infer_language(file_path, command)
    if support is None:
        candidates = analyzable_languages() if command == "analyze" else parseable_languages()
        supported = ", ".join(ext for s in candidates for ext in s.extensions)
        _fail(f"Unsupported file extension for '{file_path}' with command '{command}' (supported: {supported})")
    return support


@app.command()
def analyze(
    file: Path = typer.Argument(..., help="Source file to analyze"),
    output_format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: json or text"),
    min_severity: Optional[str] = typer.Option(None, help="Lowest severity listed in text output"),
    fail_under: Optional[float] = typer.Option(None, help="Exit with code 1 when the score is below this value"),
    config_file: Path = typer.Option(DEFAULT_CONFIG_FILE, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Analyze a source file and print its quality report"""
    _configure_logging(verbose)
    support = _resolve(file, "analyze")

    try:
        settings = CliConfig(config_file).merged(
            format=output_format, min_severity=min_severity, fail_under=fail_under
        )
        report = analyze_contents(file.read_bytes(), support.id)
    except CodeScoreError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Cannot read '{file}': {e}")

    if settings.format == "json":
        typer.echo(report.model_dump_json(indent=2))
    else:
        typer.echo(render_text(report, settings.severity_floor, f"{support.display_name}: {file}"))

    if settings.fail_under is not None and report.score < settings.fail_under:
        raise typer.Exit(code=1)


@app.command()
def parse(
    file: Path = typer.Argument(..., help="Source file to parse"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Parse a source file and print its syntax tree"""
    _configure_logging(verbose)
    support = _resolve(file, "parse")

    try:
        tree_text = parse_to_text(decode_source(file.read_bytes()), support.id)
    except CodeScoreError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Cannot read '{file}': {e}")

    typer.echo(f"Parsing {support.display_name} file: {file}")
    typer.echo("-" * 40)
    typer.echo(tree_text)


@app.command()
def languages():
    """List supported languages and file extensions"""
    for support in parseable_languages():
        commands = "analyze, parse" if support.analyzable else "parse"
        typer.echo(f"{support.display_name:<12} {' '.join(support.extensions):<28} {commands}")


if __name__ == "__main__":
    app()
