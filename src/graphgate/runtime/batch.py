"""
Batch orchestrator - turns one HTTP request into one response body.

Handles:
- Resolving options once per request
- Method validation (GET/POST)
- Splitting a batch into a serial group and a parallel group
- Running the serial group in order, then the parallel group concurrently
- Reassembling results by original position and rendering JSON
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from graphql import GraphQLError
from pydantic import ValidationError as PydanticValidationError

from ..core.classifier import OperationKind, classify_operation, ensure_document
from ..core.errors import HttpQueryError
from ..core.errors import format_error as default_format_error
from ..core.options import resolve_graphql_options
from ..core.query_types import HttpQueryRequest, HttpQueryRequestQuery, QueryResult
from .context import prepare_contexts
from .executor import execute_operation

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST")


@dataclass
class BatchState:
    """
    Per-request orchestration state.

    serial and parallel hold original indices, in ascending order. The
    position of an index inside parallel is its ordinal in the gathered
    results.
    """
    operations: list[HttpQueryRequestQuery]
    is_batch: bool
    serial: tuple[int, ...] = ()
    parallel: tuple[int, ...] = ()
    responses: list[Optional[QueryResult]] = field(default_factory=list)

    def __post_init__(self):
        if not self.responses:
            self.responses = [None] * len(self.operations)


async def run_http_query(handler_args: Sequence[Any], request: HttpQueryRequest) -> str:
    """
    Run every operation of an HTTP request and return the response body.

    Args:
        handler_args: Transport arguments forwarded to an options factory
        request: Request envelope (method, payload, options)

    Returns:
        JSON string: one result, or a list of results for batch requests

    Raises:
        HttpQueryError: When the request must be answered with an HTTP error
    """
    try:
        options = await resolve_graphql_options(request.options, *handler_args)
    except Exception as e:
        raise HttpQueryError(500, str(e))

    format_error = options.format_error or default_format_error
    is_get_request = _validate_method(request)

    state = _build_state(request.query)
    state.serial, state.parallel = _partition(state.operations, is_get_request)
    logger.debug(
        f"Running {len(state.operations)} operation(s): "
        f"serial={list(state.serial)} parallel={list(state.parallel)} batch={state.is_batch}"
    )

    contexts = prepare_contexts(options.context, len(state.operations), state.is_batch)

    def run(index: int):
        return execute_operation(
            state.operations[index],
            is_get_request=is_get_request,
            format_error=format_error,
            options=options,
            context=contexts[index],
        )

    for index in state.serial:
        state.responses[index] = await run(index)

    await _run_parallel(state, run)

    if not state.is_batch:
        response = state.responses[0]
        if response.has_errors_without_data:
            raise HttpQueryError(
                400,
                json.dumps(response.to_dict()),
                is_graphql_error=True,
                headers={"Content-Type": "application/json"},
            )
        return json.dumps(response.to_dict())

    return json.dumps([response.to_dict() for response in state.responses])


def _validate_method(request: HttpQueryRequest) -> bool:
    """Check method and payload presence. Returns True for GET."""
    if request.method == "POST":
        if not request.query:
            raise HttpQueryError(500, "POST body missing. Did you forget to send a JSON body?")
        return False

    if request.method == "GET":
        if not request.query:
            raise HttpQueryError(400, "GET query missing.")
        return True

    raise HttpQueryError(
        405,
        "GraphQL only supports GET and POST requests.",
        headers={"Allow": ", ".join(SUPPORTED_METHODS)},
    )


def _build_state(payload: Any) -> BatchState:
    """Wrap a single operation into a one-element batch and validate items."""
    is_batch = isinstance(payload, list)
    items = payload if is_batch else [payload]

    operations = []
    for item in items:
        if isinstance(item, HttpQueryRequestQuery):
            operations.append(item)
            continue
        if not isinstance(item, Mapping):
            raise HttpQueryError(400, "Request payload must be an object or an array of objects.")
        try:
            operations.append(HttpQueryRequestQuery.model_validate(dict(item)))
        except PydanticValidationError as e:
            raise HttpQueryError(400, f"Invalid request payload: {e.error_count()} invalid field(s).")

    return BatchState(operations=operations, is_batch=is_batch)


def _partition(
    operations: list[HttpQueryRequestQuery],
    is_get_request: bool,
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Split operation indices into (serial, parallel).

    Only GET requests are classified: mutations are serialized, everything
    else runs in parallel. Parsed documents replace the source text in
    operations so the executor does not parse again. Queries that fail to
    parse go to the parallel group; the executor reports the syntax error
    in their result.
    """
    if not is_get_request:
        return (), tuple(range(len(operations)))

    serial: list[int] = []
    parallel: list[int] = []
    for index, operation in enumerate(operations):
        try:
            document = ensure_document(operation.query)
        except GraphQLError:
            parallel.append(index)
            continue

        if document is not operation.query:
            operations[index] = operation.model_copy(update={"query": document})

        kind = classify_operation(document, operation.operation_name)
        if kind is OperationKind.MUTATION:
            serial.append(index)
        elif kind is OperationKind.QUERY:
            parallel.append(index)
        elif kind is OperationKind.SUBSCRIPTION:
            # not serialized; rejected by the executor under GET
            parallel.append(index)

    return tuple(serial), tuple(parallel)


async def _run_parallel(state: BatchState, run) -> None:
    """Run the parallel group concurrently and store results by original index."""
    if not state.parallel:
        return

    tasks = [asyncio.ensure_future(run(index)) for index in state.parallel]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException as e:
        logger.warning(f"Batch aborted: {e!r}")
        for task in tasks:
            task.cancel()
        # let cancelled siblings unwind before the error leaves the batch
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    for ordinal, result in enumerate(results):
        state.responses[state.parallel[ordinal]] = result
