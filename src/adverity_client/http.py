"""HTTP utilities for Adverity API access."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass

from requests import Response, Session

from .exceptions import RequestError, UnsupportedMethodError

ALLOWED_METHODS: tuple[str, ...] = ("OPTIONS", "GET", "POST", "PUT", "PATCH", "DELETE")
EXPECTED_STATUS_CODES: tuple[int, ...] = (200, 201, 202, 204)


@dataclass(slots=True)
class HttpResponse:
    """Raw response envelope; decoding is left to the caller."""

    status_code: int
    content: bytes
    headers: Mapping[str, str]


def ensure_method(method: str) -> str:
    """Return the normalised method or raise `UnsupportedMethodError`."""

    normalized = method.upper()
    if normalized not in ALLOWED_METHODS:
        raise UnsupportedMethodError(
            f"unsupported method: {method}, allowed: {', '.join(ALLOWED_METHODS)}"
        )
    return normalized


def ensure_success(response: Response) -> None:
    """Raise `RequestError` unless the status is one the API uses for success."""

    if response.status_code in EXPECTED_STATUS_CODES:
        return
    body = response.text
    expected = ", ".join(str(code) for code in EXPECTED_STATUS_CODES)
    message = f"status: {response.status_code}, body: {body}, expected: {expected}"
    raise RequestError(message, status_code=response.status_code, details=body)


def request(
    session: Session,
    method: str,
    url: str,
    *,
    params: Mapping[str, str] | None = None,
    headers: MutableMapping[str, str] | None = None,
    data_payload: bytes | None = None,
    timeout: float | tuple[float, float] | None = None,
    verify: bool | str = True,
) -> HttpResponse:
    """Make a request and return the raw response bytes."""

    normalized = ensure_method(method)
    response = session.request(
        method=normalized,
        url=url,
        params=params,
        headers=headers,
        data=data_payload,
        timeout=timeout,
        verify=verify,
    )
    ensure_success(response)
    return HttpResponse(
        status_code=response.status_code,
        content=response.content or b"",
        headers=response.headers,
    )
