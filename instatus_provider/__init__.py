"""
Instatus status-page component resource for declarative provisioning hosts.

This package maps a declarative ``component`` resource onto the Instatus API:

- Plan/state models and camelCase API payload models built on Pydantic
- Create, read, update, delete and ``<page_id>/<id>`` import
- Every API failure reported as a diagnostic naming the operation and cause
- Configuration from files and ``INSTATUS_*`` environment variables
- Logging with structured output and credential masking
"""

from .client import ComponentAPI
from .config import ConfigLoader, GlobalConfig, LoggingConfig
from .exceptions import (
    AuthenticationError,
    ConnectionError,
    ContentError,
    CreateError,
    DeleteError,
    ErrorHandler,
    HTTPError,
    ImportIdError,
    InstatusError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ReadError,
    ResourceError,
    ServerError,
    TimeoutError,
    UpdateError,
)
from .logging import configure_logging, setup_logging
from .models import (
    Component,
    ComponentGroup,
    ComponentRequest,
    ComponentResourceModel,
    Diagnostic,
    Diagnostics,
    Severity,
)
from .resources import ComponentResource, Resource, ResourceResponse
from .resources.component_mapper import (
    apply_create_response,
    apply_update_response,
    build_create_request,
    build_update_request,
    parse_import_id,
    refresh_from_read,
)

__version__ = "0.1.0"

__all__ = [
    # Resources
    "ComponentResource",
    "Resource",
    "ResourceResponse",
    "ComponentAPI",
    # Mapping
    "build_create_request",
    "apply_create_response",
    "refresh_from_read",
    "build_update_request",
    "apply_update_response",
    "parse_import_id",
    # Models
    "Component",
    "ComponentGroup",
    "ComponentRequest",
    "ComponentResourceModel",
    "Diagnostic",
    "Diagnostics",
    "Severity",
    # Configuration
    "ConfigLoader",
    "GlobalConfig",
    "LoggingConfig",
    "setup_logging",
    "configure_logging",
    # Exceptions
    "InstatusError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "ContentError",
    "HTTPError",
    "RateLimitError",
    "AuthenticationError",
    "NotFoundError",
    "ServerError",
    "ResourceError",
    "CreateError",
    "ReadError",
    "UpdateError",
    "DeleteError",
    "ImportIdError",
    "ErrorHandler",
]
