"""
Graphgate - GraphQL over HTTP with request batching.

Sits between the HTTP transport and graphql-core:
- GET and POST requests, single operations or batches
- Mutations sent over GET are rejected; batch results keep input order
- Per-operation context copies inside a batch
- Typed HTTP errors (status code, body, headers)

Usage:
    from graphgate import Gateway, GraphQLOptions

    gateway = Gateway(GraphQLOptions(schema=schema))
    app = gateway.app
"""

from __future__ import annotations

from .api import create_graphql_router
from .core import (
    GraphgateError,
    GraphQLOptions,
    HttpQueryError,
    HttpQueryRequest,
    HttpQueryRequestQuery,
    OperationKind,
    OperationResolutionError,
    OptionsError,
    QueryResult,
    classify_operation,
    format_error,
    resolve_graphql_options,
)
from .gateway import Gateway
from .runtime import (
    LogAction,
    LogMessage,
    LogStep,
    QueryParams,
    execute_operation,
    run_http_query,
    run_query,
)

__version__ = "0.1.0"

__all__ = [
    # API
    "create_graphql_router",
    # Errors
    "GraphgateError",
    "HttpQueryError",
    "OperationResolutionError",
    "OptionsError",
    "format_error",
    # Types
    "HttpQueryRequest",
    "HttpQueryRequestQuery",
    "QueryResult",
    "GraphQLOptions",
    "resolve_graphql_options",
    # Classifier
    "OperationKind",
    "classify_operation",
    # Runtime
    "run_http_query",
    "execute_operation",
    "run_query",
    "QueryParams",
    "LogAction",
    "LogMessage",
    "LogStep",
    # Gateway
    "Gateway",
]
