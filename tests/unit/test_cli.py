"""Tests for CLI commands."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from julietscript import __version__, cli_ui
from julietscript.cli import app
from julietscript.core.example import EXAMPLE_SCRIPT
from julietscript.core.lint import LintSummary

BAD_SCRIPT = 'policy triage = """x"""\nhalt\n'


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


def run_lint(cli_runner: CliRunner, root: Path, *args: str):
    return cli_runner.invoke(app, ["lint", "--root", str(root), *args])


class TestLintCommand:
    def test_clean_file_exits_zero(
        self, cli_runner: CliRunner, write_script, tmp_path: Path, valid_script: str
    ) -> None:
        write_script("scripts/ok.julietscript", valid_script)
        result = run_lint(cli_runner, tmp_path, "--glob", "**/*.julietscript")
        assert result.exit_code == 0
        assert "Linted 1 file(s): 0 issue(s) (0 error(s), 0 warning(s))." in result.output

    def test_issues_exit_one_with_diagnostic_lines(
        self, cli_runner: CliRunner, write_script, tmp_path: Path
    ) -> None:
        path = write_script("scripts/bad.julietscript", BAD_SCRIPT).resolve()
        result = run_lint(cli_runner, tmp_path, "--glob", "**/*.julietscript")
        assert result.exit_code == 1
        assert f"{path}:2:1: error: Expected ';' after policy declaration." in result.output
        assert "Linted 1 file(s): 3 issue(s) (3 error(s), 0 warning(s))." in result.output

    def test_warnings_alone_exit_one(
        self, cli_runner: CliRunner, write_script, tmp_path: Path
    ) -> None:
        write_script("warn.jls", 'juliet { engine = codex; project = "x"; }')
        result = run_lint(cli_runner, tmp_path, "--glob", "*.jls")
        assert result.exit_code == 1
        assert "warning: Unknown juliet key 'project'" in result.output
        assert "(0 error(s), 1 warning(s))" in result.output

    def test_duplicate_matches_linted_once(
        self, cli_runner: CliRunner, write_script, tmp_path: Path, valid_script: str
    ) -> None:
        write_script("scripts/only-once.julietscript", valid_script)
        result = run_lint(
            cli_runner, tmp_path, "--glob", "**/*.julietscript", "--glob", "scripts/*"
        )
        assert result.exit_code == 0
        assert "Linted 1 file(s)" in result.output

    def test_files_reported_in_sorted_order(
        self, cli_runner: CliRunner, write_script, tmp_path: Path
    ) -> None:
        b = write_script("b.jls", "@").resolve()
        a = write_script("a.jls", "@").resolve()
        result = run_lint(cli_runner, tmp_path, "--glob", "*.jls", "--format", "vscode")
        lines = result.output.splitlines()
        assert lines[0].startswith(f"{a}:1:1: error:")
        assert lines[1].startswith(f"{b}:1:1: error:")
        assert lines[2] == "Linted 2 file(s): 2 issue(s) (2 error(s), 0 warning(s))."

    def test_no_matches_exit_two(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = run_lint(cli_runner, tmp_path, "--glob", "**/*.julietscript")
        assert result.exit_code == 2
        assert "no files matched. Provided patterns: **/*.julietscript" in result.output

    def test_missing_root_exit_two(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = run_lint(cli_runner, tmp_path / "nope", "--glob", "*.jls")
        assert result.exit_code == 2
        assert "root directory does not exist" in result.output

    def test_default_patterns(self, cli_runner: CliRunner, write_script, tmp_path: Path) -> None:
        write_script("a.jls", "halt;")
        write_script("nested/b.juliet", "halt;")
        result = run_lint(cli_runner, tmp_path)
        assert result.exit_code == 0
        assert "Linted 2 file(s)" in result.output

    def test_json_format(self, cli_runner: CliRunner, write_script, tmp_path: Path) -> None:
        path = write_script("bad.jls", "@").resolve()
        result = run_lint(cli_runner, tmp_path, "--glob", "*.jls", "--format", "json")
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data == [
            {
                "path": str(path),
                "diagnostics": [
                    {
                        "severity": "error",
                        "message": "Unexpected character '@'.",
                        "range": {
                            "start": {"line": 0, "character": 0},
                            "end": {"line": 0, "character": 1},
                        },
                    }
                ],
            }
        ]

    def test_unknown_format_exit_two(
        self, cli_runner: CliRunner, write_script, tmp_path: Path
    ) -> None:
        write_script("a.jls", "halt;")
        result = run_lint(cli_runner, tmp_path, "--glob", "*.jls", "--format", "xml")
        assert result.exit_code == 2
        assert "unsupported format 'xml'" in result.output

    def test_manifest_supplies_settings(
        self, cli_runner: CliRunner, write_script, tmp_path: Path
    ) -> None:
        write_script("workflows/a.julietscript", "halt;")
        manifest = write_script(
            "julietscript.toml",
            '[lint]\nglobs = ["**/*.julietscript"]\nroot = "workflows"\nformat = "json"\n',
        )
        result = cli_runner.invoke(app, ["lint", "--manifest", str(manifest)])
        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["diagnostics"] == []

    def test_options_override_manifest(
        self, cli_runner: CliRunner, write_script, tmp_path: Path
    ) -> None:
        write_script("a.jls", "halt;")
        manifest = write_script(
            "julietscript.toml", '[lint]\nglobs = ["*.missing"]\nformat = "json"\n'
        )
        result = cli_runner.invoke(
            app,
            ["lint", "--manifest", str(manifest), "--glob", "*.jls", "--format", "vscode"],
        )
        assert result.exit_code == 0
        assert "Linted 1 file(s): 0 issue(s) (0 error(s), 0 warning(s))." in result.output

    def test_bad_manifest_exit_two(
        self, cli_runner: CliRunner, write_script, tmp_path: Path
    ) -> None:
        manifest = write_script("julietscript.toml", "[lint\n")
        result = cli_runner.invoke(app, ["lint", "--manifest", str(manifest)])
        assert result.exit_code == 2
        assert "invalid TOML" in result.output


class TestExampleCommand:
    def test_prints_example(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["example"])
        assert result.exit_code == 0
        assert result.output == EXAMPLE_SCRIPT
        assert "create ProjectBrief from julietArtifactSourceFiles [" in result.output
        assert "extend PatchSeries.rubric with" in result.output

    def test_example_output_lints_cleanly(
        self, cli_runner: CliRunner, write_script, tmp_path: Path
    ) -> None:
        example = cli_runner.invoke(app, ["example"]).output
        write_script("scripts/example.julietscript", example)
        result = run_lint(cli_runner, tmp_path, "--glob", "**/*.julietscript")
        assert result.exit_code == 0
        assert "Linted 1 file(s): 0 issue(s) (0 error(s), 0 warning(s))." in result.output


class TestAppOptions:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"julietscript version {__version__}" in result.output

    def test_no_args_shows_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [])
        assert "lint" in result.output
        assert "example" in result.output

    def test_lsp_check(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["lsp", "check"])
        assert result.exit_code == 0
        assert "All LSP dependencies installed." in result.output


class TestSummaryOutput:
    def test_summary_stays_on_one_line(self, monkeypatch: pytest.MonkeyPatch) -> None:
        buffer = io.StringIO()
        monkeypatch.setattr(cli_ui, "console", Console(file=buffer, width=20))
        summary = LintSummary(files=12, issues=345, errors=300, warnings=45)

        cli_ui.print_summary(summary)

        assert buffer.getvalue() == f"✗ {summary.format()}\n"
