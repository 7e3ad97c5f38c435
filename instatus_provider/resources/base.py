"""
Resource base interface for provider-managed objects.

All resources implement the canonical async lifecycle methods:
- create: provision the object from a plan
- read: refresh state from the remote service
- update: apply a changed plan
- delete: remove the object
- import_state: build initial state from an operator-supplied identifier

Every method returns a ResourceResponse. Failures never raise; they are
recorded as diagnostics and the response carries no state.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from ..models.diagnostics import Diagnostics

StateT = TypeVar("StateT")


@dataclass
class ResourceResponse(Generic[StateT]):
    """Outcome of a lifecycle operation."""

    state: Optional[StateT] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def is_success(self) -> bool:
        return not self.diagnostics.has_error()

    def raise_for_error(self) -> None:
        """Re-raise the first error recorded during the operation."""
        for diagnostic in self.diagnostics.errors():
            if diagnostic.error is not None:
                raise diagnostic.error
            raise RuntimeError(f"{diagnostic.summary}: {diagnostic.detail}")


class Resource(ABC, Generic[StateT]):
    """Abstract base for all provider resources."""

    type_name: str

    @abstractmethod
    async def create(self, plan: StateT) -> ResourceResponse[StateT]:
        """Create the object and return its initial state."""
        raise NotImplementedError

    @abstractmethod
    async def read(self, state: StateT) -> ResourceResponse[StateT]:
        """Refresh state from the remote service."""
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, plan: StateT, state: Optional[StateT] = None
    ) -> ResourceResponse[StateT]:
        """Apply a plan to an existing object."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, state: StateT) -> ResourceResponse[StateT]:
        """Remove the object. A successful response carries no state."""
        raise NotImplementedError

    async def import_state(self, import_id: str) -> ResourceResponse[StateT]:
        """Build state from an import identifier; unsupported by default."""
        response: ResourceResponse[StateT] = ResourceResponse()
        response.diagnostics.add_error(
            "Resource Import Not Implemented",
            f"Resource {self.type_name} does not support import.",
        )
        return response


__all__ = ["Resource", "ResourceResponse"]
