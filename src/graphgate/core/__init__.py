"""
Core module - request types, options, classification and errors.
"""

from __future__ import annotations

from .classifier import OperationKind, classify_operation, ensure_document
from .errors import (
    GraphgateError,
    HttpQueryError,
    OperationResolutionError,
    OptionsError,
    format_error,
)
from .options import GraphQLOptions, OptionsSource, resolve_graphql_options
from .query_types import HttpQueryRequest, HttpQueryRequestQuery, QueryResult

__all__ = [
    # Errors
    "GraphgateError",
    "HttpQueryError",
    "OperationResolutionError",
    "OptionsError",
    "format_error",
    # Query types
    "HttpQueryRequest",
    "HttpQueryRequestQuery",
    "QueryResult",
    # Options
    "GraphQLOptions",
    "OptionsSource",
    "resolve_graphql_options",
    # Classifier
    "OperationKind",
    "classify_operation",
    "ensure_document",
]
