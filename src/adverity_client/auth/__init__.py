"""Authentication strategies for Adverity."""
from .base import AuthStrategy
from .token import TokenAuth

__all__ = ["AuthStrategy", "TokenAuth"]
