"""Type catalog lookups."""

from __future__ import annotations

from ..models.catalog import (
    AuthorizationType,
    AuthorizationTypePage,
    ConnectionType,
    ConnectionTypePage,
    DatastreamType,
    DatastreamTypePage,
    DestinationType,
    DestinationTypePage,
)
from .base import TypeCatalogResource


class ConnectionTypesResource(TypeCatalogResource[ConnectionType]):
    collection = "connection-types"
    page_type = ConnectionTypePage


class AuthorizationTypesResource(TypeCatalogResource[AuthorizationType]):
    # Authorizations are connections; they are searched in the same catalog.
    collection = "connection-types"
    page_type = AuthorizationTypePage


class DatastreamTypesResource(TypeCatalogResource[DatastreamType]):
    collection = "datastream-types"
    page_type = DatastreamTypePage


class DestinationTypesResource(TypeCatalogResource[DestinationType]):
    collection = "target-types"
    page_type = DestinationTypePage
