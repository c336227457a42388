"""Tests for julietscript.toml loading."""

from pathlib import Path

import pytest

from julietscript.core.errors import ConfigError
from julietscript.core.manifest import LintConfig, find_manifest, load_manifest


@pytest.fixture
def manifest_file(tmp_path: Path):
    def _write(content: str) -> Path:
        path = tmp_path / "julietscript.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


class TestLoadManifest:
    def test_full_lint_table(self, manifest_file, tmp_path: Path) -> None:
        path = manifest_file(
            """
[lint]
globs = ["scripts/**/*.julietscript"]
root = "workflows"
format = "vscode"
"""
        )
        config = load_manifest(path)
        assert config.globs == ["scripts/**/*.julietscript"]
        assert config.root == tmp_path / "workflows"
        assert config.format == "vscode"

    def test_defaults_without_lint_table(self, manifest_file, tmp_path: Path) -> None:
        config = load_manifest(manifest_file("# nothing here\n"))
        assert config.globs == []
        assert config.root == tmp_path / "."
        assert config.format == "human"

    def test_absolute_root_kept(self, manifest_file, tmp_path: Path) -> None:
        target = tmp_path / "abs"
        config = load_manifest(manifest_file(f'[lint]\nroot = "{target.as_posix()}"\n'))
        assert config.root == Path(target.as_posix())

    def test_invalid_toml(self, manifest_file) -> None:
        with pytest.raises(ConfigError, match="invalid TOML"):
            load_manifest(manifest_file("[lint\n"))

    def test_globs_must_be_strings(self, manifest_file) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_manifest(manifest_file("[lint]\nglobs = [1, 2]\n"))
        assert exc_info.value.context.key == "lint.globs"
        assert "[lint.globs]" in str(exc_info.value)

    def test_unsupported_format(self, manifest_file) -> None:
        with pytest.raises(ConfigError, match="unsupported format 'xml'"):
            load_manifest(manifest_file('[lint]\nformat = "xml"\n'))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="cannot read manifest"):
            load_manifest(tmp_path / "julietscript.toml")


class TestFindManifest:
    def test_found(self, manifest_file, tmp_path: Path) -> None:
        path = manifest_file("[lint]\n")
        assert find_manifest(tmp_path) == path

    def test_absent(self, tmp_path: Path) -> None:
        assert find_manifest(tmp_path) is None


def test_lint_config_defaults() -> None:
    config = LintConfig()
    assert config.globs == []
    assert config.format == "human"
