"""
JulietScript core: tokenizer, parser, lint engine and tooling helpers.
"""

from .errors import (
    ConfigError,
    Diagnostic,
    FileSetError,
    JulietScriptError,
    Position,
    Range,
    Severity,
)
from .lint import LintResult, LintSummary, lint_file, lint_source, summarize

__all__ = [
    "ConfigError",
    "Diagnostic",
    "FileSetError",
    "JulietScriptError",
    "LintResult",
    "LintSummary",
    "Position",
    "Range",
    "Severity",
    "lint_file",
    "lint_source",
    "summarize",
]
