"""
Instatus component resource.

Drives a status-page component through create, read, update, delete and
import, translating between the declarative model and the API client and
reporting every failure as a diagnostic.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..client import ComponentAPI
from ..exceptions import (
    CreateError,
    DeleteError,
    ImportIdError,
    ReadError,
    ResourceError,
    UpdateError,
)
from ..models.state import ComponentResourceModel
from .base import Resource, ResourceResponse
from .component_mapper import (
    apply_create_response,
    apply_update_response,
    build_create_request,
    build_update_request,
    parse_import_id,
    refresh_from_read,
)

logger = logging.getLogger(__name__)

ComponentResponse = ResourceResponse[ComponentResourceModel]


class ComponentResource(Resource[ComponentResourceModel]):
    """
    Resource implementation for Instatus components.

    The API client is injected at construction and shared by all operations;
    the resource itself keeps no per-component state, so one instance can
    serve concurrent operations on different components.

    Example:
        ```python
        resource = ComponentResource(client)

        plan = ComponentResourceModel(name="API", page_id="pg_1")
        response = await resource.create(plan)

        if response.is_success:
            print(response.state.id)
        else:
            for diagnostic in response.diagnostics:
                print(diagnostic.summary, diagnostic.detail)
        ```

    Attributes:
        type_name: Resource type suffix registered with the host
        client: Instatus API client
    """

    type_name = "component"

    def __init__(self, client: ComponentAPI) -> None:
        if not isinstance(client, ComponentAPI):
            raise TypeError(
                f"Expected a ComponentAPI client, got {type(client).__name__}"
            )
        self.client = client

    def _fail(self, response: ComponentResponse, error: ResourceError) -> ComponentResponse:
        logger.error(f"{error.summary}: {error.detail}")
        response.diagnostics.add_error(error.summary, error.detail, error)
        return response

    async def create(self, plan: ComponentResourceModel) -> ComponentResponse:
        """
        Create a component from the plan.

        Args:
            plan: Desired configuration; ``page_id`` and ``name`` are required

        Returns:
            Response whose state holds the plan plus service-assigned values
        """
        response: ComponentResponse = ResourceResponse()
        request = build_create_request(plan)

        try:
            component = await self.client.create_component(plan.page_id, request)
        except Exception as e:
            return self._fail(response, CreateError(e))

        response.state = apply_create_response(plan, component)
        logger.info(f"Created component {response.state.id} on page {plan.page_id}")
        return response

    async def read(self, state: ComponentResourceModel) -> ComponentResponse:
        """
        Refresh a component from the API.

        A missing component is reported as a ReadError like any other failure.
        """
        response: ComponentResponse = ResourceResponse()

        try:
            component = await self.client.get_component(state.page_id, state.id)
        except Exception as e:
            return self._fail(
                response,
                ReadError(e, component_id=state.id),
            )

        response.state = refresh_from_read(state, component)
        logger.debug(f"Refreshed component {state.id} on page {state.page_id}")
        return response

    async def update(
        self,
        plan: ComponentResourceModel,
        state: Optional[ComponentResourceModel] = None,
    ) -> ComponentResponse:
        """
        Apply the plan to an existing component.

        Args:
            plan: Desired configuration
            state: Prior state, used for the component id when the plan's id
                is still unknown

        Returns:
            Response whose state holds the plan plus refreshed computed values
        """
        response: ComponentResponse = ResourceResponse()
        if plan.id is None and state is not None:
            plan = plan.model_copy(update={"id": state.id})
        request = build_update_request(plan)

        try:
            component = await self.client.update_component(
                plan.page_id, plan.id, request
            )
        except Exception as e:
            return self._fail(response, UpdateError(e))

        response.state = apply_update_response(plan, component)
        logger.info(f"Updated component {plan.id} on page {plan.page_id}")
        return response

    async def delete(self, state: ComponentResourceModel) -> ComponentResponse:
        """Delete the component; a successful response carries no state."""
        response: ComponentResponse = ResourceResponse()

        try:
            await self.client.delete_component(state.page_id, state.id)
        except Exception as e:
            return self._fail(response, DeleteError(e))

        logger.info(f"Deleted component {state.id} on page {state.page_id}")
        return response

    async def import_state(self, import_id: str) -> ComponentResponse:
        """
        Build state for an existing component from ``<page_id>/<id>``.

        Only ``page_id`` and ``id`` are set; the host follows up with a read
        to fill in the remaining attributes.
        """
        response: ComponentResponse = ResourceResponse()

        try:
            page_id, component_id = parse_import_id(import_id)
        except ImportIdError as e:
            return self._fail(response, e)

        # Passthrough first, then the parsed segments overwrite it.
        state = ComponentResourceModel(id=import_id)
        response.state = state.model_copy(
            update={"page_id": page_id, "id": component_id}
        )
        logger.info(f"Imported component {component_id} on page {page_id}")
        return response


__all__ = ["ComponentResource"]
