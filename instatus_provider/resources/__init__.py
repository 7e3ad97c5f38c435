"""
Provider resources.

Each resource maps a declarative model onto Instatus API calls.
"""
from .base import Resource, ResourceResponse
from .component import ComponentResource

__all__ = [
    "Resource",
    "ResourceResponse",
    "ComponentResource",
]
