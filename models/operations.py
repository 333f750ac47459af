"""
Catalog Operation Models
Unmarked Metacard Rejection Plugin

Requests and responses handed to access plugins at each lifecycle point.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from models.metacard import Metacard


class Operation(BaseModel):
    """Common base for catalog operations."""

    properties: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True)


class CreateRequest(Operation):
    """Metacards submitted together for admission."""

    metacards: list[Any] = Field(default_factory=list)


class UpdateRequest(Operation):
    """Replacement metacards keyed by metacard id."""

    updates: list[tuple[str, Metacard]] = Field(default_factory=list)


class DeleteRequest(Operation):
    ids: list[str] = Field(default_factory=list)


class DeleteResponse(Operation):
    request: DeleteRequest
    deleted_metacards: list[Metacard] = Field(default_factory=list)


class QueryRequest(Operation):
    query: Any = None


class QueryResponse(Operation):
    request: QueryRequest
    results: list[Metacard] = Field(default_factory=list)


class ResourceRequest(Operation):
    attribute_name: str = "id"
    attribute_value: Any = None


class ResourceResponse(Operation):
    request: ResourceRequest
    resource: Any = None
