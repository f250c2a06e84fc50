"""
Execution engine adapter - runs one GraphQL operation with graphql-core.

Handles:
- Parsing source text (syntax errors become result errors)
- Validation with specified_rules plus configured extra rules
- Execution, awaiting async resolvers
- Error formatting, response formatting, log hooks and tracing
"""

from __future__ import annotations

import inspect
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

from graphql import (
    DocumentNode,
    ExecutionResult,
    GraphQLError,
    GraphQLSchema,
    execute,
    parse,
    specified_rules,
    validate,
)

from ..core.errors import format_error as default_format_error
from ..core.query_types import QueryResult

logger = logging.getLogger(__name__)


class LogAction(str, Enum):
    REQUEST = "request"
    PARSE = "parse"
    VALIDATION = "validation"
    EXECUTE = "execute"


class LogStep(str, Enum):
    START = "start"
    END = "end"
    STATUS = "status"


@dataclass
class LogMessage:
    """Event passed to the configured log_function."""
    action: LogAction
    step: LogStep
    key: Optional[str] = None
    data: Any = None


@dataclass
class QueryParams:
    """Parameter set for one engine invocation."""
    schema: GraphQLSchema
    query: Union[str, DocumentNode, None]
    variables: Optional[dict[str, Any]] = None
    context: Any = None
    root_value: Any = None
    operation_name: Optional[str] = None
    log_function: Optional[Callable[[LogMessage], None]] = None
    validation_rules: Sequence[Any] = field(default_factory=list)
    format_error: Callable[[Exception], dict[str, Any]] = default_format_error
    format_response: Optional[Callable[[QueryResult, "QueryParams"], QueryResult]] = None
    field_resolver: Optional[Callable[..., Any]] = None
    debug: bool = True
    tracing: bool = False


async def run_query(params: QueryParams) -> QueryResult:
    """
    Execute one operation and return its formatted result.

    GraphQL-level failures (syntax, validation, resolver errors) are
    returned inside the result. Anything else propagates to the caller.
    """
    log = params.log_function or _no_log
    started_at = datetime.now(timezone.utc)
    started_ns = time.perf_counter_ns()

    log(LogMessage(LogAction.REQUEST, LogStep.START))
    log(LogMessage(LogAction.REQUEST, LogStep.STATUS, key="query", data=params.query))
    log(LogMessage(LogAction.REQUEST, LogStep.STATUS, key="variables", data=params.variables))
    log(LogMessage(LogAction.REQUEST, LogStep.STATUS, key="operationName", data=params.operation_name))

    if isinstance(params.query, DocumentNode):
        document = params.query
    elif not params.query:
        return _finish(params, log, errors=[GraphQLError("Must provide query string.")])
    else:
        log(LogMessage(LogAction.PARSE, LogStep.START))
        try:
            document = parse(params.query)
        except GraphQLError as e:
            log(LogMessage(LogAction.PARSE, LogStep.END))
            return _finish(params, log, errors=[e])
        log(LogMessage(LogAction.PARSE, LogStep.END))

    log(LogMessage(LogAction.VALIDATION, LogStep.START))
    rules = list(specified_rules) + list(params.validation_rules or [])
    validation_errors = validate(params.schema, document, rules)
    log(LogMessage(LogAction.VALIDATION, LogStep.END))
    if validation_errors:
        return _finish(params, log, errors=validation_errors)

    log(LogMessage(LogAction.EXECUTE, LogStep.START))
    result = execute(
        params.schema,
        document,
        root_value=params.root_value,
        context_value=params.context,
        variable_values=params.variables,
        operation_name=params.operation_name,
        field_resolver=params.field_resolver,
    )
    if inspect.isawaitable(result):
        result = await result
    log(LogMessage(LogAction.EXECUTE, LogStep.END))

    extensions = None
    if params.tracing:
        ended_at = datetime.now(timezone.utc)
        extensions = {
            "tracing": {
                "version": 1,
                "startTime": started_at.isoformat(),
                "endTime": ended_at.isoformat(),
                "duration": time.perf_counter_ns() - started_ns,
            }
        }

    return _finish(
        params,
        log,
        data=result.data,
        errors=result.errors,
        extensions=extensions,
        executed=_execution_started(result),
    )


def _finish(
    params: QueryParams,
    log: Callable[[LogMessage], None],
    *,
    data: Optional[dict[str, Any]] = None,
    errors: Optional[Sequence[GraphQLError]] = None,
    extensions: Optional[dict[str, Any]] = None,
    executed: bool = False,
) -> QueryResult:
    """Format errors, apply format_response and emit the end-of-request log."""
    if errors and params.debug:
        for error in errors:
            original = error.original_error
            if original is not None:
                logger.error(
                    f"Error while resolving {error.path}: {original}",
                    exc_info=(type(original), original, original.__traceback__),
                )

    response = QueryResult(
        data=data,
        errors=[params.format_error(error) for error in errors] if errors else None,
        extensions=extensions,
        executed=executed,
    )

    if params.format_response:
        response = params.format_response(response, params)

    log(LogMessage(LogAction.REQUEST, LogStep.END, data=response))
    return response


def _execution_started(result: ExecutionResult) -> bool:
    # variable coercion and operation lookup fail before any field runs and
    # report errors without a path; resolver errors always carry one
    if result.data is not None:
        return True
    return any(error.path for error in result.errors or ())


def _no_log(message: LogMessage) -> None:
    pass
