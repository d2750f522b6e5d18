"""
netorca-sdk: Python client SDK for the NetOrca API.

Example usage::

    from netorca_sdk import ChangeInstanceFilter, NetOrcaClient

    client = NetOrcaClient("https://api.example.com", api_key="secret")

    # List pending change instances
    page = client.list_change_instances(ChangeInstanceFilter(state="PENDING", limit=10))

    # Drive a change instance through its lifecycle
    for change in page.results:
        client.approve_change_instance(change.id, "looks good")
        client.complete_change_instance(change.id, "deployed", {"data": "terraform"})
"""

from netorca_sdk.client import NetOrcaClient
from netorca_sdk.config import Settings, load_settings
from netorca_sdk.errors import (
    ConfigError,
    DecodeError,
    InvalidArgumentError,
    NetOrcaError,
    RequestFailedError,
    RequestTimeoutError,
    TransportError,
)
from netorca_sdk.query import encode_filters
from netorca_sdk.types import (
    Application,
    ChangeInstance,
    ChangeInstanceFilter,
    ChangeInstanceService,
    ChangeInstanceState,
    Declaration,
    Owner,
    Page,
    PointOfView,
    Service,
    ServiceItem,
    ServiceItemFilter,
    Submission,
    Team,
)

__all__ = [
    "NetOrcaClient",
    "Settings",
    "load_settings",
    "encode_filters",
    "ConfigError",
    "DecodeError",
    "InvalidArgumentError",
    "NetOrcaError",
    "RequestFailedError",
    "RequestTimeoutError",
    "TransportError",
    "Application",
    "ChangeInstance",
    "ChangeInstanceFilter",
    "ChangeInstanceService",
    "ChangeInstanceState",
    "Declaration",
    "Owner",
    "Page",
    "PointOfView",
    "Service",
    "ServiceItem",
    "ServiceItemFilter",
    "Submission",
    "Team",
]

__version__ = "0.1.0"
