"""
Contract for the Instatus API client used by resources.

The provider does not ship an HTTP client; whoever hosts the provider passes
an object implementing :class:`ComponentAPI` to each resource. Failures are
reported by raising: provider exceptions, aiohttp exceptions, or anything
else, all of which the resource turns into diagnostics.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models.component import Component, ComponentRequest


@runtime_checkable
class ComponentAPI(Protocol):
    """Component endpoints of the Instatus API."""

    async def create_component(
        self, page_id: str, request: ComponentRequest
    ) -> Component: ...

    async def get_component(self, page_id: str, component_id: str) -> Component: ...

    async def update_component(
        self, page_id: str, component_id: str, request: ComponentRequest
    ) -> Component: ...

    async def delete_component(self, page_id: str, component_id: str) -> None: ...


__all__ = ["ComponentAPI"]
