"""
FastAPI router for the GraphQL endpoint.

Endpoints:
- GET  {path}?query=...&variables=...&operationName=...  - query operations only
- POST {path}  - one operation object or a list of them (batch)

Other methods are routed too so they get a proper 405 with an Allow header.

Request body formats:

1. Single operation:
   {"query": "{ person(id: 1) { name } }", "variables": {...}, "operationName": "..."}

2. Batch:
   [{"query": "..."}, {"query": "mutation { ... }"}]
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response

from ..core.errors import HttpQueryError
from ..core.options import OptionsSource
from ..core.query_types import HttpQueryRequest
from ..runtime.batch import run_http_query

logger = logging.getLogger(__name__)

GRAPHQL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


async def read_payload(request: Request) -> Any:
    """Extract the operation payload for the request method."""
    if request.method == "GET":
        return dict(request.query_params)

    if request.method == "POST":
        body = await request.body()
        if not body:
            return None
        try:
            return await request.json()
        except ValueError:
            raise HttpQueryError(400, "POST body is not valid JSON.")

    return None


def create_graphql_router(options: OptionsSource, *, path: str = "/graphql") -> APIRouter:
    """
    Create router serving GraphQL over HTTP.

    Args:
        options: GraphQLOptions, or a factory called with the FastAPI Request
        path: Endpoint path

    Returns:
        APIRouter with the GraphQL endpoint
    """
    router = APIRouter()

    @router.api_route(path, methods=GRAPHQL_METHODS)
    async def graphql_endpoint(request: Request) -> Response:
        try:
            payload = await read_payload(request)
            body = await run_http_query(
                [request],
                HttpQueryRequest(method=request.method, query=payload, options=options),
            )
        except HttpQueryError as e:
            logger.debug(f"{request.method} {path} -> {e.status_code}: {e.message}")
            return Response(
                content=e.message,
                status_code=e.status_code,
                headers=e.headers,
                media_type="text/plain",
            )

        return Response(content=body, media_type="application/json")

    return router
