"""Adverity API token authentication."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

from .base import AuthStrategy


@dataclass(slots=True)
class TokenAuth(AuthStrategy):
    """Apply an Adverity API token using the ``Token`` scheme."""

    token: str

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers["Authorization"] = f"Token {self.token}"

    def __repr__(self) -> str:
        return "TokenAuth(token='***')"
