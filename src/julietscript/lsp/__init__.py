"""
JulietScript Language Server Protocol implementation.

Publishes lint diagnostics for open JulietScript documents.
"""

from .server import start_server

__all__ = ["start_server"]
