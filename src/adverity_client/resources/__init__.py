"""Resource-specific convenience wrappers."""
from .catalogs import (
    AuthorizationTypesResource,
    ConnectionTypesResource,
    DatastreamTypesResource,
    DestinationTypesResource,
)
from .connections import AuthorizationsResource, ConnectionsResource
from .datastreams import DatastreamsResource
from .destinations import DestinationMappingsResource, DestinationsResource
from .workspaces import WorkspacesResource

__all__ = [
    "WorkspacesResource",
    "ConnectionsResource",
    "AuthorizationsResource",
    "DatastreamsResource",
    "DestinationsResource",
    "DestinationMappingsResource",
    "ConnectionTypesResource",
    "AuthorizationTypesResource",
    "DatastreamTypesResource",
    "DestinationTypesResource",
]
