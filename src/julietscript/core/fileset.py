"""
File discovery for lint runs.

Expands glob patterns into the sorted, de-duplicated set of regular files
the CLI lints.
"""

import glob
import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import ErrorContext, FileSetError

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ("**/*.julietscript", "**/*.juliet", "**/*.jls")


def collect_files(root: Path, patterns: Iterable[str]) -> list[Path]:
    """
    Expand glob patterns into lintable files.

    Relative patterns are resolved against ``root``; absolute patterns are
    used as given. ``**`` matches any number of directories and hidden
    entries are matched like any other.

    Args:
        root: Base directory for relative patterns
        patterns: Glob patterns

    Returns:
        Sorted list of resolved paths, each appearing once

    Raises:
        FileSetError: If root is not a directory or no file matched
    """
    patterns = list(patterns)
    if not root.is_dir():
        raise FileSetError("root directory does not exist", ErrorContext(file=root))

    files: set[Path] = set()
    for pattern in patterns:
        full_pattern = pattern if Path(pattern).is_absolute() else str(root / pattern)
        matches = glob.glob(full_pattern, recursive=True, include_hidden=True)
        logger.debug("Pattern %r matched %d path(s)", pattern, len(matches))
        for match in matches:
            path = Path(match)
            if path.is_file():
                files.add(path.resolve())

    if not files:
        raise FileSetError(
            f"no files matched. Provided patterns: {', '.join(patterns)}",
            ErrorContext(file=root),
        )

    return sorted(files)
