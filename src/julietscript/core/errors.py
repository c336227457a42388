"""
Diagnostic model and error types for JulietScript linting.

Lint findings are values (``Diagnostic``), never exceptions. The exception
hierarchy below is only used by the collaborators around the engine (file
discovery, manifest loading, CLI).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"


class Position(BaseModel):
    """
    Zero-based source position.

    Attributes:
        line: 0-indexed line number
        character: 0-indexed UTF-16 code unit offset within the line
    """

    line: int
    character: int

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.line}:{self.character}"


class Range(BaseModel):
    """Half-open source range; ``end`` is exclusive."""

    start: Position
    end: Position

    model_config = ConfigDict(frozen=True)


class Diagnostic(BaseModel):
    """A single lint finding with severity, message and source range."""

    severity: Severity
    message: str
    range: Range

    model_config = ConfigDict(frozen=True)

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    def format(self, path: str | Path | None = None) -> str:
        """
        Format as ``path:line:col: severity: message`` with 1-indexed line/col.

        Without a path the location prefix is just ``line:col``.
        """
        location = f"{self.range.start.line + 1}:{self.range.start.character + 1}"
        if path is not None:
            location = f"{path}:{location}"
        return f"{location}: {self.severity.value}: {self.message}"


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """
    Order diagnostics by range start.

    ``sorted`` is stable, so diagnostics starting at the same position keep
    the order in which they were reported.
    """
    return sorted(
        diagnostics,
        key=lambda d: (d.range.start.line, d.range.start.character),
    )


class JulietScriptError(Exception):
    """Base exception for JulietScript tooling errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ConfigError(JulietScriptError):
    """
    Raised when a julietscript.toml manifest cannot be used.

    Examples:
    - Invalid TOML syntax
    - Wrong value types (e.g. ``globs`` not a list of strings)
    - Unsupported output format
    """

    pass


class FileSetError(JulietScriptError):
    """
    Raised when the set of files to lint cannot be built.

    Examples:
    - Root directory does not exist
    - No file matched any pattern
    - A matched file cannot be read
    """

    pass


@dataclass
class ErrorContext:
    """
    Location information for a tooling error.

    Attributes:
        file: Path of the file involved
        key: Optional manifest key or pattern the error relates to
    """

    file: Path
    key: str | None = None

    def format(self) -> str:
        if self.key:
            return f"{self.file} [{self.key}]"
        return str(self.file)
