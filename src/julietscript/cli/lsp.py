"""
LSP (Language Server Protocol) CLI commands.

Commands for running the JulietScript language server.
"""

import typer

lsp_app = typer.Typer(
    help="Language Server Protocol (LSP) commands.",
    no_args_is_help=True,
)


@lsp_app.command("run")
def lsp_run(
    tcp: bool = typer.Option(
        False,
        "--tcp",
        help="Use TCP transport (for debugging)",
    ),
    port: int = typer.Option(
        2087,
        "--port",
        help="TCP port (only used with --tcp)",
    ),
) -> None:
    """
    Start the JulietScript language server.

    By default uses stdio transport for editor integration.
    Use --tcp --port for debugging with a TCP connection.
    """
    try:
        from julietscript.lsp.server import server, start_server
    except ImportError as e:
        typer.echo(
            f"Error: LSP dependencies not installed: {e}\nInstall with: pip install julietscript",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        if tcp:
            typer.echo(f"Starting JulietScript LSP server on TCP port {port}...", err=True)
            server.start_tcp("127.0.0.1", port)
        else:
            start_server()
    except KeyboardInterrupt:
        typer.echo("\nLSP server stopped.", err=True)


@lsp_app.command("check")
def lsp_check() -> None:
    """
    Verify LSP dependencies are installed and show version info.
    """
    errors = []

    try:
        import pygls

        pygls_version = getattr(pygls, "__version__", "unknown")
        typer.echo(f"pygls:        {pygls_version}")
    except ImportError:
        errors.append("pygls")

    try:
        import lsprotocol

        lsprotocol_version = getattr(lsprotocol, "__version__", "unknown")
        typer.echo(f"lsprotocol:   {lsprotocol_version}")
    except ImportError:
        errors.append("lsprotocol")

    if errors:
        typer.echo(f"\nMissing dependencies: {', '.join(errors)}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nAll LSP dependencies installed.")
