"""Configuration helpers for the Adverity client."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlparse

from .exceptions import ConfigurationError

INSTANCE_URL_ENV = "ADVERITY_INSTANCE_URL"
AUTH_TOKEN_ENV = "ADVERITY_AUTH_TOKEN"
DEFAULT_API_PATH = "api"


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `AdverityClient`."""

    instance_url: str
    verify_ssl: bool | str = True
    timeout: float = 30.0
    api_path: str = DEFAULT_API_PATH
    default_headers: Mapping[str, str] | None = None

    @property
    def endpoint(self) -> str:
        """Absolute API base, always ending in a single ``/``.

        Relative resource paths are resolved against this value, so the
        trailing separator is required or the last segment would be replaced.
        """
        parsed = urlparse(self.instance_url)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ConfigurationError(f"Invalid Adverity instance URL: {self.instance_url!r}")
        base = self.instance_url.rstrip("/")
        api_path = self.api_path.strip("/")
        if not api_path:
            return f"{base}/"
        return f"{base}/{api_path}/"

    def resolved_headers(self, *, has_body: bool = False) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.default_headers:
            headers.update(self.default_headers)
        return headers


def read_env_settings(environ: Mapping[str, str] | None = None) -> tuple[str, str]:
    """Return ``(instance_url, auth_token)`` from the process environment."""

    env = os.environ if environ is None else environ
    values: list[str] = []
    for name in (INSTANCE_URL_ENV, AUTH_TOKEN_ENV):
        value = (env.get(name) or "").strip()
        if not value:
            raise ConfigurationError(f"Environment variable {name} is missing or empty.")
        values.append(value)
    return values[0], values[1]
