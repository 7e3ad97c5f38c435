"""
Declarative model of the ``component`` resource.

Field names match the attribute keys the host runtime uses in plans and state.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComponentResourceModel(BaseModel):
    """Plan or state data for a single component."""

    id: Optional[str] = Field(
        default=None, description="String Identifier of the component."
    )
    page_id: Optional[str] = Field(
        default=None, description="String Identifier of the page of the component."
    )
    name: Optional[str] = Field(default=None, description="Name of the component.")
    description: Optional[str] = Field(
        default=None, description="Description of the component."
    )
    show_uptime: Optional[bool] = Field(
        default=None, description="Whether show uptime is enabled in the component."
    )
    grouped: bool = Field(
        default=False,
        description=(
            "Whether the component is in a group "
            "(Require group set to desired name when true)."
        ),
    )
    group_name: Optional[str] = Field(
        default=None,
        description="Name of the group for the component (Require grouped set to true).",
    )
    group_id: Optional[str] = Field(
        default=None,
        description="Name of the group for the component (Require grouped set to true).",
    )

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    @field_validator("grouped", mode="before")
    @classmethod
    def default_grouped(cls, v: Any) -> Any:
        # A null from the host means "not set", which resolves to the default.
        return False if v is None else v

    @classmethod
    def from_state(cls, data: Mapping[str, Any]) -> "ComponentResourceModel":
        """Build a model from a host plan/state mapping."""
        return cls.model_validate(dict(data))

    def to_state(self) -> Dict[str, Any]:
        """Render every attribute, using ``None`` for unset values."""
        return self.model_dump()


__all__ = ["ComponentResourceModel"]
