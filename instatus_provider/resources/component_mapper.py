"""
Mapping between the declarative component model and Instatus API payloads.

Every function here is pure: inputs are never mutated and a new model is
returned, so a failed lifecycle call never leaves half-applied state behind.

Two behaviors are kept exactly as the provider has always shipped them:

- The outgoing ``group`` field is filled from ``group_id`` on create but
  from ``group_name`` on update.
- On read, ``grouped`` is derived from the presence of a group name in the
  response; any ``grouped`` flag the API returns is ignored.
"""

from __future__ import annotations

from typing import Tuple

from ..exceptions import ImportIdError
from ..models.component import Component, ComponentRequest
from ..models.state import ComponentResourceModel

IMPORT_ID_SEPARATOR = "/"


def build_create_request(plan: ComponentResourceModel) -> ComponentRequest:
    """Build the create request body from a plan."""
    return ComponentRequest(
        name=plan.name,
        description=plan.description,
        show_uptime=plan.show_uptime,
        grouped=plan.grouped,
        group=plan.group_id,
        group_id=plan.group_id,
    )


def apply_create_response(
    plan: ComponentResourceModel, component: Component
) -> ComponentResourceModel:
    """Fill computed attributes from a create response."""
    return plan.model_copy(
        update={
            "id": component.id,
            "description": component.description,
            "group_name": component.group.name,
            "group_id": component.group.id,
        }
    )


def refresh_from_read(
    state: ComponentResourceModel, component: Component
) -> ComponentResourceModel:
    """
    Overwrite state with the component as the API currently reports it.

    ``page_id`` and ``id`` are kept from the prior state.
    """
    return state.model_copy(
        update={
            "name": component.name,
            "description": component.description,
            "show_uptime": component.show_uptime,
            "grouped": component.group.name is not None,
            "group_name": component.group.name,
            "group_id": component.group.id,
        }
    )


def build_update_request(plan: ComponentResourceModel) -> ComponentRequest:
    """Build the update request body from a plan."""
    return ComponentRequest(
        name=plan.name,
        description=plan.description,
        show_uptime=plan.show_uptime,
        grouped=plan.grouped,
        group=plan.group_name,
        group_id=plan.group_id,
    )


def apply_update_response(
    plan: ComponentResourceModel, component: Component
) -> ComponentResourceModel:
    """Fill computed attributes from an update response."""
    return plan.model_copy(
        update={
            "id": component.id,
            "group_name": component.group.name,
            "description": component.description,
            "group_id": component.group.id,
        }
    )


def parse_import_id(raw: str) -> Tuple[str, str]:
    """
    Split an import identifier of the form ``<page_id>/<id>``.

    Args:
        raw: Identifier supplied by the operator

    Returns:
        Tuple of (page_id, component_id)

    Raises:
        ImportIdError: If the identifier does not split into exactly two
            non-empty segments
    """
    parts = raw.split(IMPORT_ID_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ImportIdError(raw)
    return parts[0], parts[1]


__all__ = [
    "IMPORT_ID_SEPARATOR",
    "build_create_request",
    "apply_create_response",
    "refresh_from_read",
    "build_update_request",
    "apply_update_response",
    "parse_import_id",
]
