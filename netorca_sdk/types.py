"""Type definitions for the NetOrca SDK."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class PointOfView(str, Enum):
    """API path segment a request is scoped to."""

    SERVICE_OWNER = "serviceowner"
    CONSUMER = "consumer"


class ChangeInstanceState(str, Enum):
    """Lifecycle states of a change instance.

    Transitions between them are validated by the service, not the client.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    COMPLETED = "COMPLETED"
    CLOSED = "CLOSED"
    REJECTED = "REJECTED"
    ERROR = "ERROR"


# ---- Filters ----


@dataclass(frozen=True)
class ServiceItemFilter:
    """Filter parameters for listing service items.

    Unset fields are ``None``. Empty strings, non-positive integers and
    ``False`` are treated as unset as well and never sent.
    """

    pov: PointOfView | str = PointOfView.SERVICE_OWNER
    name: str | None = None
    runtime_state: str | None = None
    change_state: str | None = None
    declaration: str | None = None
    application_id: str | None = None
    consumer_team_id: str | None = None
    declaration_contains: str | None = None
    declaration_regex: str | None = None
    service_id: str | None = None
    service_name: str | None = None
    service_owner_id: str | None = None
    service_owner_team_id: str | None = None
    limit: int | None = None
    offset: int | None = None
    ordering: str | None = None


@dataclass(frozen=True)
class ChangeInstanceFilter:
    """Filter parameters for listing change instances."""

    pov: PointOfView | str = PointOfView.SERVICE_OWNER
    change_type: str | None = None  # "CREATE", "MODIFY", "DELETE"
    commit_id: str | None = None
    consumer_team_id: str | None = None
    declaration: str | None = None
    declaration_contains: str | None = None
    declaration_regex: str | None = None
    exclude_referenced: bool | None = None
    limit: int | None = None
    modified: datetime | None = None
    offset: int | None = None
    ordering: str | None = None
    service_id: str | None = None
    service_item_id: str | None = None
    service_name: str | None = None
    service_owner_team_id: str | None = None
    state: ChangeInstanceState | str | None = None
    submission_id: str | None = None


# ---- Responses ----


@dataclass
class Page(Generic[T]):
    """One page of a list endpoint. Follow ``next``/``previous`` to paginate."""

    count: int
    next: str | None = None
    previous: str | None = None
    results: list[T] = field(default_factory=list)


@dataclass
class Owner:
    """Owner of a catalog service."""

    id: int
    name: str = ""


@dataclass
class Team:
    """A team owning or consuming services."""

    id: int
    name: str = ""
    metadata: Any = None


@dataclass
class Application:
    """Consumer application a service item belongs to."""

    id: int
    name: str = ""
    metadata: Any = None
    owner: int | None = None


@dataclass
class Service:
    """Catalog service as embedded in a service item."""

    id: int
    name: str = ""
    owner: Owner | None = None
    state: str = ""
    healthcheck: bool = False


@dataclass
class ChangeInstanceService:
    """Catalog service as embedded in a change instance."""

    id: int
    name: str = ""
    allow_manual_approval: bool = False
    allow_manual_completion: bool = False


@dataclass
class Submission:
    """Git submission that produced a change instance."""

    id: int
    commit_id: str = ""


@dataclass
class Declaration:
    """Versioned declaration document; ``declaration`` is kept as-is."""

    version: int
    declaration: Any = None


@dataclass
class ServiceItem:
    """A deployed instance of a catalog service."""

    id: int
    url: str = ""
    name: str = ""
    created: datetime | None = None
    modified: datetime | None = None
    runtime_state: str = ""  # "IN_SERVICE", "OUT_OF_SERVICE"
    change_state: str = ""
    service: Service | None = None
    application: Application | None = None
    related: str | None = None
    service_owner_team: Team | None = None
    consumer_team: Team | None = None
    deployed_item: Any = None
    declaration: Any = None
    healthcheck_status: str | None = None
    is_validated_minimum_schema: bool = False
    is_deprecated_service_schema: bool = False
    is_service_private: bool = False


@dataclass
class ChangeInstance:
    """A requested change to a service item, tracked through its lifecycle."""

    id: int
    url: str = ""
    state: str = ""
    created: datetime | None = None
    modified: datetime | None = None
    change_type: str = ""
    log: str = ""
    owner: Team | None = None
    service_item: ServiceItem | None = None
    submission: Submission | None = None
    new_declaration: Declaration | None = None
    old_declaration: Declaration | None = None
    service_owner_team: Team | None = None
    consumer_team: Team | None = None
    service: ChangeInstanceService | None = None
    application: Application | None = None
    is_dependant: bool = False
