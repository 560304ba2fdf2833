"""High-level Adverity client entrypoints."""
from .client import AdverityClient
from .config import ClientConfig
from .exceptions import AdverityError
from .parameters import Parameter

__all__ = ["AdverityClient", "ClientConfig", "AdverityError", "Parameter"]
