"""
Graphgate Gateway - main entry point for creating a GraphQL application.

Usage:
    from graphgate import Gateway, GraphQLOptions

    gateway = Gateway(GraphQLOptions(schema=schema))

    app = gateway.app
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import create_graphql_router
from .core.options import OptionsSource

logger = logging.getLogger(__name__)


class Gateway:
    """
    FastAPI application serving one GraphQL endpoint.

    Features:
    - GraphQL over GET and POST, with batching
    - Static options or a per-request options factory
    - CORS and a health check
    """

    def __init__(
        self,
        options: OptionsSource,
        *,
        title: str = "Graphgate",
        path: str = "/graphql",
        cors_origins: Optional[List[str]] = None,
    ):
        """
        Initialize gateway.

        Args:
            options: GraphQLOptions or a factory called with the FastAPI Request
            title: FastAPI app title
            path: URL path of the GraphQL endpoint
            cors_origins: CORS allowed origins (default: localhost:3000)
        """
        self.options = options
        self.title = title
        self.path = path
        self.cors_origins = cors_origins or ["http://localhost:3000", "http://127.0.0.1:3000"]

        self.app = self._create_app()
        self.app.state.gateway = self

    def _create_app(self) -> FastAPI:
        """Create FastAPI application."""
        app = FastAPI(
            title=self.title,
            description="Graphgate - GraphQL over HTTP",
            version="1.0.0",
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

        app.include_router(create_graphql_router(self.options, path=self.path))

        @app.get("/health")
        async def health():
            return {"status": "ok"}

        logger.info(f"GraphQL endpoint mounted at {self.path}")
        return app
