"""
Entry point for the JulietScript LSP server.

Usage:
    python -m julietscript.lsp
"""

from .server import start_server

if __name__ == "__main__":
    start_server()
