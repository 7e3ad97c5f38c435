"""
Shared test fixtures and configuration for the instatus_provider test suite.
"""

import logging
from unittest.mock import AsyncMock

import pytest

from instatus_provider import (
    Component,
    ComponentAPI,
    ComponentResource,
    ComponentResourceModel,
)


@pytest.fixture
def api_client() -> AsyncMock:
    """Mock Instatus API client satisfying the ComponentAPI protocol."""
    return AsyncMock(spec=ComponentAPI)


@pytest.fixture
def resource(api_client: AsyncMock) -> ComponentResource:
    """Component resource wired to the mock client."""
    return ComponentResource(api_client)


@pytest.fixture
def plan() -> ComponentResourceModel:
    """Plan for a grouped component."""
    return ComponentResourceModel(
        name="API",
        page_id="pg_1",
        description="Public API",
        show_uptime=True,
        grouped=True,
        group_id="grp_9",
    )


@pytest.fixture
def state() -> ComponentResourceModel:
    """State of an existing grouped component."""
    return ComponentResourceModel(
        id="cmp_42",
        name="API",
        page_id="pg_1",
        description="Public API",
        show_uptime=True,
        grouped=True,
        group_name="Backend",
        group_id="grp_9",
    )


@pytest.fixture
def api_component() -> Component:
    """Component as returned by the API."""
    return Component.model_validate(
        {
            "id": "cmp_42",
            "name": "API",
            "description": "Public API",
            "showUptime": True,
            "grouped": True,
            "status": "OPERATIONAL",
            "group": {"name": "Backend", "id": "grp_9"},
        }
    )


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
