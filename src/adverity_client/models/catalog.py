"""Read-only type catalogs and their listing envelopes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import Page, ResponseModel, wire_field


@dataclass(slots=True)
class ConnectionType(ResponseModel):
    id: int = 0
    name: str = ""
    slug: str = ""
    url: str = ""
    categories: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    is_deprecated: bool = False
    logo_url: str = ""
    create_url: str = ""
    connections: str = ""


@dataclass(slots=True)
class AuthorizationType(ResponseModel):
    id: int = 0
    name: str = ""
    slug: str = ""
    url: str = ""
    categories: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    is_deprecated: bool = False
    logo_url: str = ""
    create_url: str = ""
    authorizations: str = wire_field("connections", default="")


@dataclass(slots=True)
class DatastreamType(ResponseModel):
    id: int = 0
    name: str = ""
    slug: str = ""
    url: str = ""
    categories: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    is_deprecated: bool = False
    logo_url: str = ""
    create_url: str = ""
    datastreams: str = ""
    connection_types: list[str] = field(default_factory=list)


@dataclass(slots=True)
class DestinationType(ResponseModel):
    id: int = 0
    name: str = ""
    slug: str = ""
    url: str = ""
    destinations: str = wire_field("targets", default="")


class ConnectionTypePage(Page[ConnectionType]):
    item_type = ConnectionType


class AuthorizationTypePage(Page[AuthorizationType]):
    item_type = AuthorizationType


class DatastreamTypePage(Page[DatastreamType]):
    item_type = DatastreamType


class DestinationTypePage(Page[DestinationType]):
    item_type = DestinationType
