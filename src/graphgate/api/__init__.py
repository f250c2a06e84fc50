"""
API module - FastAPI endpoints.
"""

from __future__ import annotations

from .router import GRAPHQL_METHODS, create_graphql_router

__all__ = [
    "GRAPHQL_METHODS",
    "create_graphql_router",
]
