"""Generic create/read/update/delete verbs.

Every resource wrapper funnels through these four functions. Each one issues a
single request, then decodes the body into ``response_type``. An empty body
(for example a ``204 No Content``) yields ``None`` instead of an error.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

from .exceptions import SerializationError, ValidationError

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from .client import AdverityClient

ResponseT = TypeVar("ResponseT", bound="Decodable")


class Encodable(Protocol):
    def to_json(self) -> bytes: ...


class Decodable(Protocol):
    @classmethod
    def from_dict(cls: type[ResponseT], data: Any) -> ResponseT: ...


def create(
    client: AdverityClient,
    path: str,
    resource: Encodable,
    response_type: type[ResponseT],
    *,
    params: Mapping[str, str] | None = None,
) -> ResponseT | None:
    return _execute(client, "POST", path, resource, response_type, params)


def read(
    client: AdverityClient,
    path: str,
    response_type: type[ResponseT],
    *,
    params: Mapping[str, str] | None = None,
) -> ResponseT | None:
    return _execute(client, "GET", path, None, response_type, params)


def update(
    client: AdverityClient,
    path: str,
    resource: Encodable,
    response_type: type[ResponseT],
    *,
    params: Mapping[str, str] | None = None,
) -> ResponseT | None:
    return _execute(client, "PATCH", path, resource, response_type, params)


def delete(
    client: AdverityClient,
    path: str,
    response_type: type[ResponseT],
    *,
    params: Mapping[str, str] | None = None,
) -> ResponseT | None:
    return _execute(client, "DELETE", path, None, response_type, params)


def encode(resource: Encodable) -> bytes:
    """Serialise a request body, naming the request type on failure."""

    try:
        return resource.to_json()
    except ValidationError:
        raise
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"failed to marshal {type(resource).__name__}: {exc}", details=str(exc)
        ) from exc


def decode(body: bytes, response_type: type[ResponseT]) -> ResponseT:
    """Decode a response body into ``response_type``."""

    try:
        return response_type.from_dict(json.loads(body))
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"failed to unmarshal into {response_type.__name__}: {exc}", details=str(exc)
        ) from exc


def _execute(
    client: AdverityClient,
    method: str,
    path: str,
    resource: Encodable | None,
    response_type: type[ResponseT],
    params: Mapping[str, str] | None,
) -> ResponseT | None:
    data = encode(resource) if resource is not None else None
    body = client.request(method, path, params=params, data=data)
    if not body:
        return None
    return decode(body, response_type)


__all__ = ["Decodable", "Encodable", "create", "decode", "delete", "encode", "read", "update"]
