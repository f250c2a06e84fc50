"""
Graphgate CLI - Command line tools for running a GraphQL server.
"""

from __future__ import annotations

from .main import app, main

__all__ = ["main", "app"]
