"""
GraphQL options and their resolution.

Options are either a static GraphQLOptions value or a factory called with
the transport arguments of the current request (e.g. the FastAPI Request).
Factories may be sync or async. Resolution happens once per HTTP request.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Sequence, Union

from graphql import GraphQLSchema

from .errors import OptionsError


@dataclass
class GraphQLOptions:
    """
    Per-request execution configuration.

    Attributes:
        schema: Executable GraphQL schema
        root_value: Root value passed to top-level resolvers
        context: Context value; shallow-copied per operation in batches
        format_error: Formatter for errors embedded in results
        log_function: Hook receiving LogMessage events from the engine
        validation_rules: Extra validation rules (added to specified_rules)
        format_params: Hook rewriting QueryParams before execution
        format_response: Hook rewriting QueryResult after execution
        field_resolver: Default field resolver
        debug: Log resolver exceptions with traceback
        tracing: Add timing info to result extensions
    """
    schema: GraphQLSchema
    root_value: Any = None
    context: Any = None
    format_error: Optional[Callable[[Exception], dict[str, Any]]] = None
    log_function: Optional[Callable[..., None]] = None
    validation_rules: Sequence[Any] = field(default_factory=list)
    format_params: Optional[Callable[..., Any]] = None
    format_response: Optional[Callable[..., Any]] = None
    field_resolver: Optional[Callable[..., Any]] = None
    debug: bool = True
    tracing: bool = False


OptionsFactory = Callable[..., Union[GraphQLOptions, Awaitable[GraphQLOptions]]]
OptionsSource = Union[GraphQLOptions, OptionsFactory]


async def resolve_graphql_options(options: OptionsSource, *handler_args: Any) -> GraphQLOptions:
    """
    Resolve static options or call the options factory.

    Args:
        options: GraphQLOptions or a (sync or async) factory
        *handler_args: Transport arguments forwarded to the factory

    Returns:
        Resolved GraphQLOptions

    Raises:
        OptionsError: If the source or the factory result is not GraphQLOptions
    """
    if isinstance(options, GraphQLOptions):
        return options

    if not callable(options):
        raise OptionsError(
            f"GraphQL options must be GraphQLOptions or a callable, got {type(options).__name__}"
        )

    resolved = options(*handler_args)
    if inspect.isawaitable(resolved):
        resolved = await resolved

    if not isinstance(resolved, GraphQLOptions):
        raise OptionsError(
            f"GraphQL options factory returned {type(resolved).__name__}, expected GraphQLOptions"
        )

    return resolved
