"""Dataclass plumbing shared by request configs and API responses."""

from __future__ import annotations

import types
from collections.abc import Mapping
from dataclasses import MISSING, Field, dataclass, field, fields
from typing import Any, ClassVar, Generic, TypeVar, Union, get_args, get_origin, get_type_hints

from ..parameters import Parameter, dumps, flattened_marshal

WIRE_KEY = "wire"
EXCLUDED_KEY = "exclude"

ModelT = TypeVar("ModelT", bound="WireModel")
ItemT = TypeVar("ItemT", bound="WireModel")


def wire_field(name: str, *, default: Any = MISSING, default_factory: Any = MISSING) -> Any:
    """Declare a dataclass field whose JSON key differs from the attribute name."""

    return field(default=default, default_factory=default_factory, metadata={WIRE_KEY: name})


def parameters_field() -> Any:
    """Declare the ``parameters`` bag; it is never encoded as its own key."""

    return field(default=None, metadata={EXCLUDED_KEY: True})


def wire_name(model_field: Field) -> str:
    return model_field.metadata.get(WIRE_KEY, model_field.name)


def _encode_value(value: Any, validate: bool) -> Any:
    if isinstance(value, WireModel):
        return value.to_dict(validate=validate)
    if isinstance(value, (list, tuple)):
        return [_encode_value(item, validate) for item in value]
    return value


_JSON_NAMES = {bool: "boolean", int: "integer", float: "number", str: "string"}


def _check_scalar(annotation: type, value: Any) -> Any:
    # bool is an int subclass; JSON true/false never fills a numeric field.
    if annotation is bool:
        ok = isinstance(value, bool)
    elif annotation is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif annotation is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    else:
        ok = isinstance(value, annotation)
    if not ok:
        raise TypeError(f"expected a JSON {_JSON_NAMES[annotation]}, got {type(value).__name__}")
    return value


def _decode_value(annotation: Any, value: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return _decode_value(args[0], value)
        return value
    if isinstance(annotation, type) and issubclass(annotation, WireModel):
        return annotation.from_dict(value)
    if annotation in _JSON_NAMES:
        return _check_scalar(annotation, value)
    if get_origin(annotation) is list:
        args = get_args(annotation)
        if not isinstance(value, list):
            raise TypeError(f"expected a JSON array, got {type(value).__name__}")
        if args:
            return [_decode_value(args[0], item) for item in value]
        return list(value)
    return value


class WireModel:
    """Mixin giving dataclasses a dict form that mirrors the API's JSON."""

    __slots__ = ()

    omit_none: ClassVar[bool] = False

    def to_dict(self, *, validate: bool = False) -> dict[str, Any]:
        """Encode to the wire shape.

        ``validate=True`` runs `validate` on this model and every nested one;
        request bodies set it, decoded responses are encoded as received.
        """
        if validate:
            self.validate()
        payload: dict[str, Any] = {}
        for model_field in fields(self):  # type: ignore[arg-type]
            if model_field.metadata.get(EXCLUDED_KEY):
                continue
            value = getattr(self, model_field.name)
            if value is None and self.omit_none:
                continue
            payload[wire_name(model_field)] = _encode_value(value, validate)
        return payload

    def validate(self) -> None:
        """Hook for subclasses that check field formats before encoding."""

    @classmethod
    def from_dict(cls: type[ModelT], data: Any) -> ModelT:
        """Build an instance from decoded JSON.

        Missing keys and JSON ``null`` keep the field default; unknown keys are
        ignored.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        hints = get_type_hints(cls)
        kwargs: dict[str, Any] = {}
        for model_field in fields(cls):  # type: ignore[arg-type]
            if model_field.metadata.get(EXCLUDED_KEY):
                continue
            key = wire_name(model_field)
            if key not in data or data[key] is None:
                continue
            kwargs[model_field.name] = _decode_value(hints[model_field.name], data[key])
        return cls(**kwargs)


class RequestModel(WireModel):
    """Request body: unset (``None``) fields are left off the wire."""

    __slots__ = ()

    omit_none: ClassVar[bool] = True

    def to_json(self) -> bytes:
        return dumps(self.to_dict(validate=True))


class FlattenedRequestModel(RequestModel):
    """Request body that also carries a dynamic ``parameters`` bag."""

    __slots__ = ()

    parameters: list[Parameter] | None

    def to_json(self) -> bytes:
        return flattened_marshal(self, self.parameters)


class ResponseModel(WireModel):
    """Typed mirror of an API response; every field is kept on encode."""

    __slots__ = ()


@dataclass(slots=True)
class Page(ResponseModel, Generic[ItemT]):
    """One page of a paginated listing; ``next``/``previous`` are page links."""

    item_type: ClassVar[type[WireModel]]

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[ItemT] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Page[ItemT]:
        if not isinstance(data, Mapping):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        results = data.get("results") or []
        if not isinstance(results, list):
            raise TypeError(f"expected a JSON array, got {type(results).__name__}")
        return cls(
            count=data.get("count") or 0,
            next=data.get("next") or None,
            previous=data.get("previous") or None,
            results=[cls.item_type.from_dict(item) for item in results],  # type: ignore[misc]
        )
