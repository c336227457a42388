"""
julietscript CLI Package.

- project.py: lint and example commands
- lsp.py: language server commands
- utils.py: shared utilities

``main`` is the console-script entry point.
"""

import typer

from julietscript.cli.lsp import lsp_app
from julietscript.cli.project import example_command, lint_command
from julietscript.cli.utils import get_version, version_callback

app = typer.Typer(
    help="""JulietScript lint tooling

Commands:
  • lint     Check JulietScript files for errors and warnings
  • example  Print an annotated example script
  • lsp      Run the language server for editors
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """julietscript CLI main callback for global options."""
    pass


app.command(name="lint")(lint_command)
app.command(name="example")(example_command)
app.add_typer(lsp_app, name="lsp")


def main() -> None:
    app(standalone_mode=True)


__all__ = [
    "app",
    "main",
    "lsp_app",
    "get_version",
    "version_callback",
]
