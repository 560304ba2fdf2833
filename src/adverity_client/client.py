"""High-level Adverity REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from urllib.parse import urljoin, urlparse

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .auth.base import AuthStrategy
from .auth.token import TokenAuth
from .config import ClientConfig, read_env_settings
from .exceptions import ConfigurationError, RequestError
from .http import HttpResponse, ensure_method
from .http import request as http_request
from .resources import (
    AuthorizationsResource,
    AuthorizationTypesResource,
    ConnectionsResource,
    ConnectionTypesResource,
    DatastreamsResource,
    DatastreamTypesResource,
    DestinationMappingsResource,
    DestinationsResource,
    DestinationTypesResource,
    WorkspacesResource,
)


logger = logging.getLogger(__name__)


class AdverityClient:
    """Wrap Adverity REST endpoints with typed helper methods.

    The client holds no per-call state of its own, but the underlying
    `requests.Session` keeps a cookie jar that every response may update.
    Serialise calls on one instance, or use one client per concurrent caller
    when independent sessions are needed.
    """

    def __init__(
        self,
        *,
        instance_url: str,
        token: str | None = None,
        auth_strategy: AuthStrategy | None = None,
        verify_ssl: bool | str = True,
        timeout: float = 30.0,
        default_headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if auth_strategy is None:
            if not token:
                raise ConfigurationError("An Adverity auth token or auth strategy is required.")
            auth_strategy = TokenAuth(token=token)
        self.config = ClientConfig(
            instance_url=instance_url,
            verify_ssl=verify_ssl,
            timeout=timeout,
            default_headers=default_headers,
        )
        self.endpoint = self.config.endpoint
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self._auth = auth_strategy
        logger.debug("Building Adverity API client for %s", self.endpoint)
        self.workspaces = WorkspacesResource(self)
        self.connections = ConnectionsResource(self)
        self.authorizations = AuthorizationsResource(self)
        self.datastreams = DatastreamsResource(self)
        self.destinations = DestinationsResource(self)
        self.destination_mappings = DestinationMappingsResource(self)
        self.connection_types = ConnectionTypesResource(self)
        self.authorization_types = AuthorizationTypesResource(self)
        self.datastream_types = DatastreamTypesResource(self)
        self.destination_types = DestinationTypesResource(self)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **kwargs,
    ) -> AdverityClient:
        """Build a client from ``ADVERITY_INSTANCE_URL`` and ``ADVERITY_AUTH_TOKEN``."""

        instance_url, token = read_env_settings(environ)
        return cls(instance_url=instance_url, token=token, **kwargs)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> AdverityClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Public API --------------------------------------------------------------
    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        data: bytes | None = None,
    ) -> bytes:
        """Perform one authenticated exchange and return the raw body.

        ``path`` is resolved against the API endpoint unless it is already an
        absolute URL (as pagination links are).
        """
        method = ensure_method(method)
        url = self._resolve_url(path)
        headers = self._prepare_headers(has_body=data is not None)
        self._log_request(method, url)
        response = self._perform_request(
            method,
            url,
            params=params,
            headers=headers,
            data=data,
        )
        return response.content

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _resolve_url(self, path: str) -> str:
        parsed = urlparse(path)
        if parsed.scheme and parsed.netloc:
            return path
        return urljoin(self.endpoint, path.lstrip("/"))

    def _prepare_headers(self, *, has_body: bool) -> MutableMapping[str, str]:
        headers = self.config.resolved_headers(has_body=has_body)
        self._auth.apply(headers)
        return headers

    def _perform_request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None,
        headers: MutableMapping[str, str],
        data: bytes | None,
    ) -> HttpResponse:
        try:
            return http_request(
                self._session,
                method,
                url,
                params=params,
                headers=headers,
                data_payload=data,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise RequestError(
                f"Failed to communicate with Adverity API: {reason}", details=reason
            ) from exc

    def _log_request(self, method: str, url: str) -> None:
        logger.info("Adverity request %s %s", method, url)

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
