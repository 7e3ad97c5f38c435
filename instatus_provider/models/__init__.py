"""
Data models for the Instatus provider.

This package contains the API payload models, the declarative resource model
and the diagnostics types returned by lifecycle operations.
"""

from .component import Component, ComponentGroup, ComponentRequest
from .diagnostics import Diagnostic, Diagnostics, Severity
from .state import ComponentResourceModel

__all__ = [
    # API payloads
    "Component",
    "ComponentGroup",
    "ComponentRequest",
    # Declarative model
    "ComponentResourceModel",
    # Diagnostics
    "Diagnostic",
    "Diagnostics",
    "Severity",
]
