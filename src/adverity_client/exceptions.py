"""Custom exception hierarchy for the Adverity client."""
from __future__ import annotations

from typing import Any


class AdverityError(RuntimeError):
    """Base error for Adverity API failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class ConfigurationError(AdverityError):
    """Raised when the client cannot be built from the supplied settings."""


class UnsupportedMethodError(AdverityError):
    """Raised when a request uses an HTTP verb outside the allowed set."""


class RequestError(AdverityError):
    """Raised when an HTTP request cannot be fulfilled."""


class SerializationError(AdverityError):
    """Raised when a payload cannot be encoded or a response cannot be decoded."""


class ValidationError(AdverityError, ValueError):
    """Raised when a request value is malformed before it is sent."""
