"""Connection and authorization payloads.

Both live under ``connection-types/{id}/connections/`` and share a wire shape;
they are kept as separate types because callers treat them as distinct
resources.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..parameters import Parameter
from .base import FlattenedRequestModel, ResponseModel, parameters_field, wire_field


@dataclass(slots=True)
class ConnectionConfig(FlattenedRequestModel):
    name: str | None = None
    stack_id: int | None = wire_field("stack", default=None)
    parameters: list[Parameter] | None = parameters_field()


@dataclass(slots=True)
class ConnectionResponse(ResponseModel):
    id: int = 0
    name: str = ""
    metadata_slack: int = 0
    stack_id: int = wire_field("stack", default=0)
    app: int = 0
    user: int = 0
    is_authorized: bool = False


@dataclass(slots=True)
class AuthorizationConfig(FlattenedRequestModel):
    name: str | None = None
    stack_id: int | None = wire_field("stack", default=None)
    parameters: list[Parameter] | None = parameters_field()


@dataclass(slots=True)
class AuthorizationResponse(ResponseModel):
    id: int = 0
    name: str = ""
    metadata_slack: int = 0
    stack_id: int = wire_field("stack", default=0)
    app: int = 0
    user: int = 0
    is_authorized: bool = False
