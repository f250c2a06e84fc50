"""
Operation classification.

Tells which kind of operation (query, mutation, subscription) an operation
name selects inside a parsed document.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from graphql import DocumentNode, GraphQLError, OperationType, get_operation_ast, parse

from .errors import OperationResolutionError


class OperationKind(str, Enum):
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


_KINDS: dict[OperationType, OperationKind] = {
    OperationType.QUERY: OperationKind.QUERY,
    OperationType.MUTATION: OperationKind.MUTATION,
    OperationType.SUBSCRIPTION: OperationKind.SUBSCRIPTION,
}


def ensure_document(query: Union[str, DocumentNode, None]) -> DocumentNode:
    """Parse source text; return documents unchanged."""
    if isinstance(query, DocumentNode):
        return query
    if not query:
        raise GraphQLError("Must provide query string.")
    return parse(query)


def classify_operation(document: DocumentNode, operation_name: Optional[str]) -> OperationKind:
    """
    Return the kind of the operation selected by operation_name.

    Raises:
        OperationResolutionError: If the name does not select exactly one operation
    """
    operation = get_operation_ast(document, operation_name)
    if operation is None:
        raise OperationResolutionError(operation_name)
    return _KINDS[operation.operation]
