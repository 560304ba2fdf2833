"""Typed request and response payloads for Adverity resources."""
from .base import FlattenedRequestModel, Page, RequestModel, ResponseModel, WireModel
from .catalog import (
    AuthorizationType,
    AuthorizationTypePage,
    ConnectionType,
    ConnectionTypePage,
    DatastreamType,
    DatastreamTypePage,
    DestinationType,
    DestinationTypePage,
)
from .connection import (
    AuthorizationConfig,
    AuthorizationResponse,
    ConnectionConfig,
    ConnectionResponse,
)
from .datastream import (
    DatastreamCreateConfig,
    DatastreamResponse,
    DatastreamScheduleConfig,
    DatastreamUpdateConfig,
    Schedule,
)
from .destination import (
    DestinationConfig,
    DestinationMappingConfig,
    DestinationMappingResponse,
    DestinationResponse,
)
from .workspace import WorkspaceConfig, WorkspaceCounts, WorkspacePermissions, WorkspaceResponse

__all__ = [
    "AuthorizationConfig",
    "AuthorizationResponse",
    "AuthorizationType",
    "AuthorizationTypePage",
    "ConnectionConfig",
    "ConnectionResponse",
    "ConnectionType",
    "ConnectionTypePage",
    "DatastreamCreateConfig",
    "DatastreamResponse",
    "DatastreamScheduleConfig",
    "DatastreamType",
    "DatastreamTypePage",
    "DatastreamUpdateConfig",
    "DestinationConfig",
    "DestinationMappingConfig",
    "DestinationMappingResponse",
    "DestinationResponse",
    "DestinationType",
    "DestinationTypePage",
    "FlattenedRequestModel",
    "Page",
    "RequestModel",
    "ResponseModel",
    "Schedule",
    "WireModel",
    "WorkspaceConfig",
    "WorkspaceCounts",
    "WorkspacePermissions",
    "WorkspaceResponse",
]
