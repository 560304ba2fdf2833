"""Workspace ("stack") payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..parameters import Parameter
from .base import FlattenedRequestModel, ResponseModel, parameters_field, wire_field


@dataclass(slots=True)
class WorkspaceConfig(FlattenedRequestModel):
    name: str | None = None
    datalake_id: int | None = None
    parent_id: int | None = None
    parameters: list[Parameter] | None = parameters_field()


@dataclass(slots=True)
class WorkspaceCounts(ResponseModel):
    connections: int = 0
    datastreams: int = 0


@dataclass(slots=True)
class WorkspacePermissions(ResponseModel):
    is_creator: bool = wire_field("isCreator", default=False)
    is_datastream_manager: bool = wire_field("isDatastreamManager", default=False)
    is_viewer: bool = wire_field("isViewer", default=False)


@dataclass(slots=True)
class WorkspaceResponse(ResponseModel):
    id: int = 0
    slug: str = ""
    name: str = ""
    url: str = ""
    add_connection_url: str = ""
    add_datastream_url: str = ""
    change_url: str = ""
    extracts_url: str = ""
    issues_url: str = ""
    overview_url: str = ""
    datalake: str = ""
    destination: Any = None
    parent: str = ""
    parent_id: int = 0
    counts: WorkspaceCounts = field(default_factory=WorkspaceCounts)
    permissions: WorkspacePermissions = field(default_factory=WorkspacePermissions)
    manage_extract_names: bool = wire_field("default_manage_extract_names", default=False)
    created: str = ""
    updated: str = ""
