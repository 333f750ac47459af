"""
Access Plugin Contract
Unmarked Metacard Rejection Plugin

Lifecycle hooks the host catalog calls around create, update, delete,
query and resource operations. Every hook defaults to a pass-through.
"""

from collections.abc import Mapping
from typing import Any

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


class StopProcessing(Exception):
    """Raised by a plugin to halt the current catalog operation."""

    def __init__(self, message: str, plugin: str = None):
        self.message = message
        self.plugin = plugin
        super().__init__(message)


class AccessPlugin:
    """
    Base class for access plugins.

    Subclasses override the hooks they care about and raise StopProcessing
    to reject an operation. Hooks that are not overridden return their
    input unchanged.
    """

    def process_pre_create(self, request: CreateRequest) -> CreateRequest:
        return request

    def process_pre_update(
        self,
        request: UpdateRequest,
        existing_metacards: Mapping[str, Any],
    ) -> UpdateRequest:
        return request

    def process_pre_delete(self, request: DeleteRequest) -> DeleteRequest:
        return request

    def process_post_delete(self, response: DeleteResponse) -> DeleteResponse:
        return response

    def process_pre_query(self, request: QueryRequest) -> QueryRequest:
        return request

    def process_post_query(self, response: QueryResponse) -> QueryResponse:
        return response

    def process_pre_resource(self, request: ResourceRequest) -> ResourceRequest:
        return request

    def process_post_resource(
        self,
        response: ResourceResponse,
        metacard: Any,
    ) -> ResourceResponse:
        return response
