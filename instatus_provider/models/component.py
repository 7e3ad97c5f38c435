"""
Instatus API payload models for status-page components.

The API speaks camelCase JSON; these models expose snake_case attributes and
accept either spelling on input.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComponentGroup(BaseModel):
    """Group membership as reported by the API."""

    name: Optional[str] = Field(default=None, description="Group display name")
    id: Optional[str] = Field(default=None, description="Group identifier")


class Component(BaseModel):
    """
    Component as returned by the Instatus API.

    Any field the service omits is ``None``. A missing or null ``group`` is
    read as an empty group so callers can always reach ``component.group.name``.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    show_uptime: Optional[bool] = Field(default=None, alias="showUptime")
    grouped: Optional[bool] = None
    group: ComponentGroup = Field(default_factory=ComponentGroup)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("group", mode="before")
    @classmethod
    def empty_group(cls, v: Any) -> Any:
        """Treat a null group as an empty one."""
        return ComponentGroup() if v is None else v


class ComponentRequest(BaseModel):
    """
    Request body for creating or updating a component.

    ``group`` is the value the API uses to place the component into a group;
    ``group_id`` is sent alongside it as ``groupId``.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    show_uptime: Optional[bool] = Field(default=None, alias="showUptime")
    grouped: Optional[bool] = None
    group: Optional[str] = None
    group_id: Optional[str] = Field(default=None, alias="groupId")

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body, omitting unset values."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["ComponentGroup", "Component", "ComponentRequest"]
