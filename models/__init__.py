"""
Models Package
Unmarked Metacard Rejection Plugin

Pydantic models for metacards and catalog operations.
"""

from models.metacard import (
    Attribute,
    Metacard,
    MetacardLike,
    # Enums
    SecurityAttribute,
    is_attribute_completely_null,
)
from models.operations import (
    CreateRequest,
    DeleteRequest,
    DeleteResponse,
    QueryRequest,
    QueryResponse,
    ResourceRequest,
    ResourceResponse,
    UpdateRequest,
)

__all__ = [
    # Enums
    "SecurityAttribute",

    # Data Models
    "Attribute",
    "Metacard",
    "MetacardLike",
    "is_attribute_completely_null",

    # Operations
    "CreateRequest",
    "UpdateRequest",
    "DeleteRequest",
    "DeleteResponse",
    "QueryRequest",
    "QueryResponse",
    "ResourceRequest",
    "ResourceResponse",
]
