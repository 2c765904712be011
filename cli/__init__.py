"""CLI package for the Fortem MCP server"""

from cli.main import main

__all__ = [
    "main",
]
