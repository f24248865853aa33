"""API v1 routers package."""

from . import statements

__all__ = [
    "statements",
]
