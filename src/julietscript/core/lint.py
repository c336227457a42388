"""
Lint entry points for JulietScript.

``lint_source`` is the engine: a pure function from source text to a sorted
diagnostic list. The remaining helpers wrap it for collaborators that work
with files (CLI) and need per-file results and totals.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .dsl_parser_impl import parse_tokens
from .errors import Diagnostic, ErrorContext, FileSetError, Severity
from .lexer import tokenize

logger = logging.getLogger(__name__)


def lint_source(text: str) -> list[Diagnostic]:
    """
    Lint JulietScript source text.

    Tokenizes, parses and resolves references in a single left-to-right
    pass. Never raises for any string input; all findings are returned as
    diagnostics sorted by start position.

    Args:
        text: Full text of one JulietScript source unit

    Returns:
        Sorted list of errors and warnings (possibly empty)
    """
    tokens, lexical = tokenize(text)
    diagnostics = parse_tokens(tokens, lexical)
    logger.debug(
        "Linted %d chars: %d tokens, %d diagnostics", len(text), len(tokens), len(diagnostics)
    )
    return diagnostics


@dataclass
class LintResult:
    """Diagnostics for a single file."""

    path: Path
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warnings(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)

    def to_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "diagnostics": [d.model_dump(mode="json") for d in self.diagnostics],
        }


@dataclass
class LintSummary:
    """Totals across a lint run."""

    files: int = 0
    issues: int = 0
    errors: int = 0
    warnings: int = 0

    @property
    def clean(self) -> bool:
        return self.issues == 0

    def format(self) -> str:
        return (
            f"Linted {self.files} file(s): {self.issues} issue(s) "
            f"({self.errors} error(s), {self.warnings} warning(s))."
        )


def lint_file(path: Path) -> LintResult:
    """
    Lint a single file.

    Undecodable bytes are replaced rather than rejected, so binary files
    still produce diagnostics.

    Raises:
        FileSetError: If the file cannot be read
    """
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileSetError(f"failed to read file: {e.strerror or e}", ErrorContext(file=path)) from e
    return LintResult(path=path, diagnostics=lint_source(text))


def lint_files(paths: Iterable[Path]) -> list[LintResult]:
    """Lint files in order, one result per path."""
    return [lint_file(p) for p in paths]


def summarize(results: Iterable[LintResult]) -> LintSummary:
    summary = LintSummary()
    for result in results:
        summary.files += 1
        summary.issues += len(result.diagnostics)
        summary.errors += result.errors
        summary.warnings += result.warnings
    return summary
