"""
Rich console output for the julietscript CLI.

Diagnostic lines are plain text so editors and CI can parse them; the
helpers here style the human-facing status lines around them.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text

from julietscript.core.lint import LintSummary

console = Console()

# Style definitions
STYLES = {
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
}


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]), soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]), soft_wrap=True)


def print_summary(summary: LintSummary) -> None:
    """Print the run totals, styled by the worst severity found."""
    if summary.errors:
        console.print(Text(f"✗ {summary.format()}", style=STYLES["error"]), soft_wrap=True)
    elif summary.warnings:
        print_warning(summary.format())
    else:
        print_success(summary.format())
