"""
Execution context isolation for batched operations.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def prepare_context(base: Any, is_batch: bool) -> Any:
    """
    Return the context one operation should run with.

    Single requests share the configured context. Each operation of a batch
    gets its own shallow copy so siblings cannot see each other's writes.
    """
    if not is_batch:
        return base
    if base is None:
        return {}
    if isinstance(base, Mapping):
        return dict(base)
    return copy.copy(base)


def prepare_contexts(base: Any, count: int, is_batch: bool) -> list[Any]:
    """Prepare contexts for every operation up front, before any of them runs."""
    return [prepare_context(base, is_batch) for _ in range(count)]
