"""
Runtime module - operation execution pipeline.
"""

from __future__ import annotations

from .batch import BatchState, run_http_query
from .context import prepare_context, prepare_contexts
from .engine import LogAction, LogMessage, LogStep, QueryParams, run_query
from .executor import execute_operation, parse_variables

__all__ = [
    "BatchState",
    "run_http_query",
    "prepare_context",
    "prepare_contexts",
    "LogAction",
    "LogMessage",
    "LogStep",
    "QueryParams",
    "run_query",
    "execute_operation",
    "parse_variables",
]
