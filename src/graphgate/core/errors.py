"""
Custom exceptions for the Graphgate system.

Two error classes cross the HTTP boundary:
- HttpQueryError aborts the whole request and is rendered as an HTTP error
- anything else raised while running one operation is formatted with
  format_error and embedded into that operation's result
"""

from __future__ import annotations

from typing import Any, Optional

from graphql import GraphQLError


class GraphgateError(Exception):
    """Base exception for all graphgate errors."""
    pass


class HttpQueryError(GraphgateError):
    """
    Raised when the request must short-circuit with an HTTP error.

    Carries everything needed to render the response: status code,
    body (message) and extra headers.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        is_graphql_error: bool = False,
        headers: Optional[dict[str, str]] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.is_graphql_error = is_graphql_error
        self.headers = dict(headers) if headers else {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.status_code}, {self.message!r})"


class OperationResolutionError(HttpQueryError):
    """Raised when an operation name does not select exactly one operation."""

    def __init__(self, operation_name: Optional[str]):
        self.operation_name = operation_name
        if operation_name:
            message = f"Unknown operation named '{operation_name}'."
        else:
            message = "Must provide operation name if query contains multiple operations."
        super().__init__(500, message)


class OptionsError(GraphgateError):
    """Raised when GraphQL options cannot be resolved."""
    pass


def format_error(error: Exception) -> dict[str, Any]:
    """
    Default error formatter.

    Converts any exception into the wire-safe GraphQL error shape
    ({"message": ..., "locations": ..., "path": ...}).
    """
    if not isinstance(error, GraphQLError):
        error = GraphQLError(str(error) or type(error).__name__, original_error=error)
    return error.formatted
