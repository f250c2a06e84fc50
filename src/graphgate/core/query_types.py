"""
Request and result types for the GraphQL HTTP layer.

Pydantic models describe what arrives from the client (one raw operation)
and what goes back (one execution result). HttpQueryRequest is the
transport-neutral envelope handed to run_http_query.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from graphql import DocumentNode
from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Input types (from client) ---

class HttpQueryRequestQuery(BaseModel):
    """
    One raw operation as sent by the client.

    Example:
    {
        "operationName": "GetPerson",
        "query": "query GetPerson($id: ID!) { person(id: $id) { name } }",
        "variables": {"id": 1}
    }

    Variables may also arrive as a JSON string (GET query parameters).
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    operation_name: Optional[str] = Field(default=None, alias="operationName")
    query: Union[str, DocumentNode, None] = None
    variables: Union[dict[str, Any], str, None] = None

    @field_validator("operation_name", mode="before")
    @classmethod
    def _blank_operation_name(cls, value: Any) -> Any:
        # GET forms send operationName= when the client has none
        if value == "":
            return None
        return value


@dataclass
class HttpQueryRequest:
    """
    Transport-level request envelope.

    Attributes:
        method: HTTP method ("GET" and "POST" are supported)
        query: A single operation mapping, a list of them (batch), or None
        options: GraphQLOptions or a factory producing them
    """
    method: str
    query: Any
    options: Any


# --- Output types ---

class QueryResult(BaseModel):
    """
    Result of executing one operation.

    errors holds already formatted errors (output of the error formatter).
    executed is set once execution started: from then on "data" is part of
    the response even when it is null.
    """
    model_config = ConfigDict(frozen=True)

    data: Optional[dict[str, Any]] = None
    errors: Optional[list[Any]] = None
    extensions: Optional[dict[str, Any]] = None
    executed: bool = Field(default=False, exclude=True)

    @property
    def has_data(self) -> bool:
        return self.executed or self.data is not None

    @property
    def has_errors_without_data(self) -> bool:
        return bool(self.errors) and not self.has_data

    def to_dict(self) -> dict[str, Any]:
        """Wire representation. "data" is omitted only when execution never ran."""
        payload: dict[str, Any] = {}
        if self.has_data or self.errors is None:
            payload["data"] = self.data
        if self.errors is not None:
            payload["errors"] = list(self.errors)
        if self.extensions:
            payload["extensions"] = self.extensions
        return payload
