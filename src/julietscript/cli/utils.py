"""
julietscript CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform

import typer

from julietscript import __version__


def get_version() -> str:
    """Get julietscript version from package metadata."""
    return __version__


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, warnings only otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if not value:
        return

    lsp_available = True
    try:
        # Quiet pygls before importing the server module
        logging.getLogger("pygls").setLevel(logging.ERROR)

        import julietscript.lsp.server  # noqa: F401 - availability check
    except ImportError:
        lsp_available = False

    typer.echo(f"julietscript version {get_version()}")
    typer.echo("")
    typer.echo("Environment:")
    typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
    typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
    typer.echo("")
    typer.echo("Features:")
    lsp_status = "✓ Available" if lsp_available else "✗ Not available (install pygls)"
    typer.echo(f"  LSP Server:    {lsp_status}")

    raise typer.Exit()
