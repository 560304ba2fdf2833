"""Destination ("target") and destination mapping payloads."""

from __future__ import annotations

from dataclasses import dataclass

from ..parameters import Parameter
from .base import FlattenedRequestModel, ResponseModel, parameters_field, wire_field


@dataclass(slots=True)
class DestinationConfig(FlattenedRequestModel):
    name: str | None = None
    stack_id: int | None = wire_field("stack", default=None)
    auth_id: int | None = wire_field("auth", default=None)
    schema_mapping: bool | None = None
    force_string: bool | None = None
    format_headers: bool | None = None
    column_names_to_lowercase: bool | None = None
    headers_formatting: int | None = None
    parameters: list[Parameter] | None = parameters_field()


@dataclass(slots=True)
class DestinationResponse(ResponseModel):
    id: int = 0
    name: str = ""
    logo_url: str = ""
    is_schema_mapping_required: bool = False
    schema_mapping: bool = False
    force_string: bool = False
    format_headers: bool = False
    column_names_to_lowercase: bool = False
    headers_formatting: int = 0
    project: str = ""
    dataset: str = ""
    stack_id: int = wire_field("stack", default=0)
    auth_id: int = wire_field("auth", default=0)


@dataclass(slots=True)
class DestinationMappingConfig(FlattenedRequestModel):
    """Bind a datastream's output to a table in the destination."""

    datastream_id: int | None = wire_field("datastream", default=None)
    enabled: bool | None = None
    table_name: str | None = None
    parameters: list[Parameter] | None = parameters_field()


@dataclass(slots=True)
class DestinationMappingResponse(ResponseModel):
    id: int = 0
    destination_id: int = wire_field("target", default=0)
    datastream_id: int = wire_field("datastream", default=0)
    enabled: bool = False
    table_name: str = ""
