"""
Project commands for julietscript CLI.

- lint: Lint JulietScript files matched by glob patterns
- example: Print an annotated example script
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from julietscript.cli.utils import configure_logging
from julietscript.cli_ui import print_summary
from julietscript.core.errors import ConfigError, JulietScriptError
from julietscript.core.example import EXAMPLE_SCRIPT
from julietscript.core.fileset import DEFAULT_PATTERNS, collect_files
from julietscript.core.lint import LintResult, lint_files, summarize
from julietscript.core.manifest import OUTPUT_FORMATS, LintConfig, find_manifest, load_manifest

logger = logging.getLogger(__name__)


def _resolve_config(
    globs: list[str] | None,
    root: str | None,
    output_format: str | None,
    manifest: str | None,
) -> LintConfig:
    """Merge command-line options over manifest values over defaults."""
    if manifest is not None:
        config = load_manifest(Path(manifest))
    else:
        found = find_manifest(Path.cwd())
        config = load_manifest(found) if found else LintConfig()
        if found:
            logger.debug("Using manifest %s", found)

    if globs:
        config.globs = list(globs)
    elif not config.globs:
        config.globs = list(DEFAULT_PATTERNS)

    if root is not None:
        config.root = Path(root)

    if output_format is not None:
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"unsupported format {output_format!r}; expected one of {', '.join(OUTPUT_FORMATS)}",
            )
        config.format = output_format

    return config


def _print_diagnostic_lines(results: list[LintResult]) -> None:
    """Print one ``path:line:col: severity: message`` line per diagnostic."""
    for result in results:
        for diagnostic in result.diagnostics:
            typer.echo(diagnostic.format(result.path))


def _print_json(results: list[LintResult]) -> None:
    typer.echo(json.dumps([r.to_dict() for r in results], indent=2))


def lint_command(
    glob: list[str] | None = typer.Option(
        None,
        "--glob",
        "-g",
        help="Glob pattern for files to lint (repeatable, '**' matches directories)",
    ),
    root: str | None = typer.Option(
        None, "--root", "-r", help="Directory relative patterns are resolved against"
    ),
    format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: human, vscode or json"
    ),
    manifest: str | None = typer.Option(
        None, "--manifest", "-m", help="Path to julietscript.toml"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Lint JulietScript files.

    Exits 0 when no issues are found, 1 when any error or warning is
    reported, and 2 when files cannot be collected or read.
    """
    configure_logging(verbose)

    try:
        config = _resolve_config(glob, root, format, manifest)
        files = collect_files(config.root, config.globs)
        logger.info("Linting %d file(s)", len(files))
        results = lint_files(files)
    except JulietScriptError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    summary = summarize(results)

    if config.format == "json":
        _print_json(results)
    elif config.format == "vscode":
        _print_diagnostic_lines(results)
        typer.echo(summary.format())
    else:
        _print_diagnostic_lines(results)
        print_summary(summary)

    if not summary.clean:
        raise typer.Exit(code=1)


def example_command() -> None:
    """
    Print an annotated example script that lints cleanly.

    Redirect it into a file to start a new workflow:

        julietscript example > workflow.julietscript
    """
    typer.echo(EXAMPLE_SCRIPT, nl=False)
