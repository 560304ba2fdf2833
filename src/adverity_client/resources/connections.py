"""Connection and authorization operations."""

from __future__ import annotations

from ..models.connection import (
    AuthorizationConfig,
    AuthorizationResponse,
    ConnectionConfig,
    ConnectionResponse,
)
from .base import TypedCollectionResource


class ConnectionsResource(
    TypedCollectionResource[ConnectionConfig, ConnectionConfig, ConnectionResponse]
):
    """Connections under ``connection-types/{type_id}/connections/``."""

    type_collection = "connection-types"
    item_collection = "connections"
    response_type = ConnectionResponse


class AuthorizationsResource(
    TypedCollectionResource[AuthorizationConfig, AuthorizationConfig, AuthorizationResponse]
):
    """Authorizations share the connection endpoints."""

    type_collection = "connection-types"
    item_collection = "connections"
    response_type = AuthorizationResponse
