"""
JulietScript - lint engine for the JulietScript workflow DSL.

Turns JulietScript source text into a sorted list of diagnostics, with a
command-line wrapper and a language server built on top.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core.errors import (
    ConfigError,
    Diagnostic,
    FileSetError,
    JulietScriptError,
    Position,
    Range,
    Severity,
)
from .core.lint import LintResult, LintSummary, lint_file, lint_source, summarize

try:
    __version__ = _metadata_version("julietscript")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.1.0"

__all__ = [
    "__version__",
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
