"""Dynamic parameters and the flattening marshaller.

Adverity resources accept many connector-specific fields that are not modelled
as named attributes. They travel as `Parameter` entries and are merged into the
request object at serialisation time, so the API receives one flat JSON object
rather than a nested ``parameters`` key.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from .models.base import WireModel


@dataclass(slots=True)
class Parameter:
    """One extra field merged into a request payload."""

    key: str
    value: Any


def parameters_from_mapping(values: Mapping[str, Any] | None) -> list[Parameter]:
    """Expand a plain mapping into `Parameter` entries, preserving key order."""

    if not values:
        return []
    return [Parameter(key=str(key), value=value) for key, value in values.items()]


def flatten(fields: Mapping[str, Any], parameters: Iterable[Parameter] | None) -> dict[str, Any]:
    """Apply ``parameters`` on top of ``fields``; later writes win on key collisions."""

    merged = dict(fields)
    for parameter in parameters or ():
        merged[parameter.key] = parameter.value
    return merged


def dumps(payload: Any) -> bytes:
    """Encode a wire payload; NaN/Infinity and unknown types raise."""

    return json.dumps(payload, separators=(",", ":"), allow_nan=False).encode("utf-8")


def flattened_marshal(base: WireModel, parameters: Iterable[Parameter] | None) -> bytes:
    """Serialise ``base`` and merge ``parameters`` into the same JSON object.

    Named fields are validated and encoded first (unset fields omitted),
    then each parameter is written in order. A parameter whose key matches a
    named field replaces that field's value.
    """

    return dumps(flatten(base.to_dict(validate=True), parameters))


__all__ = ["Parameter", "dumps", "flatten", "flattened_marshal", "parameters_from_mapping"]
