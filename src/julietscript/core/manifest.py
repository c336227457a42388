import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError, ErrorContext

MANIFEST_NAME = "julietscript.toml"

OUTPUT_FORMATS = ("human", "vscode", "json")


@dataclass
class LintConfig:
    """Settings from the ``[lint]`` table of julietscript.toml."""

    globs: list[str] = field(default_factory=list)
    root: Path = Path(".")
    format: str = "human"  # "human" | "vscode" | "json"


def _string_list(value: object, path: Path, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError("expected a list of strings", ErrorContext(file=path, key=key))
    return list(value)


def load_manifest(path: Path) -> LintConfig:
    """
    Load lint settings from a manifest file.

    A relative ``root`` is resolved against the manifest's directory.

    Raises:
        ConfigError: If the file is unreadable, not valid TOML or has bad values
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read manifest: {e.strerror or e}", ErrorContext(file=path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}", ErrorContext(file=path)) from e

    lint = data.get("lint", {})
    if not isinstance(lint, dict):
        raise ConfigError("expected a table", ErrorContext(file=path, key="lint"))

    globs = _string_list(lint.get("globs", []), path, "lint.globs")

    root_value = lint.get("root", ".")
    if not isinstance(root_value, str):
        raise ConfigError("expected a string", ErrorContext(file=path, key="lint.root"))
    root = Path(root_value)
    if not root.is_absolute():
        root = path.parent / root

    output_format = lint.get("format", "human")
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"unsupported format {output_format!r}; expected one of {', '.join(OUTPUT_FORMATS)}",
            ErrorContext(file=path, key="lint.format"),
        )

    return LintConfig(globs=globs, root=root, format=output_format)


def find_manifest(start: Path) -> Path | None:
    """Return ``start/julietscript.toml`` if it exists."""
    candidate = start / MANIFEST_NAME
    if candidate.is_file():
        return candidate
    return None
