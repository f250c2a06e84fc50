"""
Single-operation executor.

Handles:
- GET restriction to query operations
- Decoding variables sent as a JSON string
- Building QueryParams (and the optional format_params hook)
- Separating request-aborting errors from errors embedded in the result
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

from ..core.classifier import OperationKind, classify_operation, ensure_document
from ..core.errors import HttpQueryError
from ..core.options import GraphQLOptions
from ..core.query_types import HttpQueryRequestQuery, QueryResult
from .engine import QueryParams, run_query

logger = logging.getLogger(__name__)


async def execute_operation(
    operation: HttpQueryRequestQuery,
    *,
    is_get_request: bool,
    format_error: Callable[[Exception], dict[str, Any]],
    options: GraphQLOptions,
    context: Any,
) -> QueryResult:
    """
    Execute one operation.

    Args:
        operation: Raw operation from the request payload
        is_get_request: True when the request came in over GET
        format_error: Resolved error formatter
        options: Resolved GraphQL options
        context: Context prepared for this operation

    Returns:
        QueryResult from the engine, or a result holding the formatted failure

    Raises:
        HttpQueryError: For failures that must abort the whole request
    """
    try:
        query = operation.query
        if is_get_request:
            # GET is read-only: assert the operation before running anything
            query = ensure_document(query)
            if classify_operation(query, operation.operation_name) is not OperationKind.QUERY:
                raise HttpQueryError(
                    405,
                    "GET supports only query operation",
                    headers={"Allow": "POST"},
                )

        params = QueryParams(
            schema=options.schema,
            query=query,
            variables=parse_variables(operation.variables),
            context=context,
            root_value=options.root_value,
            operation_name=operation.operation_name,
            log_function=options.log_function,
            validation_rules=options.validation_rules,
            format_error=format_error,
            format_response=options.format_response,
            field_resolver=options.field_resolver,
            debug=options.debug,
            tracing=options.tracing,
        )

        if options.format_params:
            params = options.format_params(params)

        return await run_query(params)

    except HttpQueryError:
        raise
    except Exception as e:
        logger.debug(f"Operation {operation.operation_name or '<anonymous>'} failed: {e}")
        return QueryResult(errors=[format_error(e)])


def parse_variables(variables: Any) -> Optional[dict[str, Any]]:
    """
    Decode variables sent as a JSON string.

    Raises:
        HttpQueryError: 400 if the string is not a JSON object
    """
    if not isinstance(variables, str):
        return variables

    try:
        decoded = json.loads(variables)
    except ValueError:
        raise HttpQueryError(400, "Variables are invalid JSON.")

    if decoded is not None and not isinstance(decoded, dict):
        raise HttpQueryError(400, "Variables are invalid JSON.")
    return decoded
