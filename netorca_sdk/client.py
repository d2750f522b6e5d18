"""NetOrca API client implementation using httpx."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from netorca_sdk.errors import (
    DecodeError,
    InvalidArgumentError,
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

if TYPE_CHECKING:
    from netorca_sdk.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

SERVICE_ITEMS = "service_items"
CHANGE_INSTANCES = "change_instances"

_DISPLAY_NAMES = {
    SERVICE_ITEMS: "service items",
    CHANGE_INSTANCES: "change instances",
}


class NetOrcaClient:
    """Client for the NetOrca orcabase API.

    The configuration is fixed at construction and the client holds no other
    mutable state, so one instance can be shared between threads.

    Args:
        base_url: Root URL of the API (e.g., "https://api.example.com").
        api_key: API key sent as ``Authorization: Api-Key <key>``.
        api_version: Version path segment appended to ``base_url``.
        timeout: Seconds allowed for each phase of a request (connect, each
            read, each write, pool acquisition); 0 disables it. This is not
            a total deadline: a server sending bytes slowly can keep one
            request alive longer than ``timeout``.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_version: str = "v1",
        timeout: float = 5.0,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise InvalidArgumentError("base URL cannot be empty")
        if not base_url.startswith(("http://", "https://")):
            raise InvalidArgumentError("base URL must start with http:// or https://")
        if not api_version:
            raise InvalidArgumentError("API version cannot be empty")
        if not api_key:
            raise InvalidArgumentError("API key cannot be empty")
        if timeout < 0:
            raise InvalidArgumentError("request timeout cannot be negative")

        if not base_url.endswith("/"):
            base_url += "/"
        self._base_url = f"{base_url}{api_version}/"
        self._api_key = api_key
        self._timeout = timeout
        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=timeout or None,
            headers=self._build_headers(),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.BaseTransport | None = None
    ) -> NetOrcaClient:
        """Build a client from loaded configuration."""
        return cls(
            settings.api_url,
            settings.api_key,
            settings.api_version,
            float(settings.request_timeout),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def timeout(self) -> float:
        return self._timeout

    def __repr__(self) -> str:
        return f"NetOrcaClient(base_url={self._base_url!r}, timeout={self._timeout!r})"

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Api-Key {self._api_key}",
            "Accept": "application/json",
        }

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request and map transport failures to SDK errors."""
        request = self._client.build_request(method, path, json=json, headers=headers)
        logger.debug("Calling API URL: %s", request.url)
        try:
            return self._client.send(request)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"request to {request.url} timed out") from exc
        except httpx.DecodingError as exc:
            raise DecodeError(f"failed to decode response: {exc}") from exc
        except httpx.TransportError as exc:
            raise TransportError(f"failed to make request: {exc}") from exc

    def _list(
        self,
        collection: str,
        filters: ServiceItemFilter | ChangeInstanceFilter,
        parse: Callable[[dict[str, Any]], T],
    ) -> Page[T]:
        path = f"orcabase/{_wire_value(filters.pov)}/{collection}"
        query = encode_filters(filters)
        if query:
            path = f"{path}?{query}"

        resp = self._request("GET", path)
        if resp.status_code != httpx.codes.OK:
            raise RequestFailedError.for_list(resp, _DISPLAY_NAMES[collection])
        return _decode(resp, lambda data: _parse_page(data, parse))

    def _update(
        self,
        collection: str,
        resource_id: int,
        body: dict[str, Any],
        parse: Callable[[dict[str, Any]], T],
    ) -> T:
        # updates are only exposed on the service owner side of the API
        path = f"orcabase/{PointOfView.SERVICE_OWNER.value}/{collection}/{resource_id}/"
        resp = self._request(
            "PATCH",
            path,
            json=body,
            headers={"Content-Type": "application/json"},
        )
        if resp.status_code != httpx.codes.OK:
            raise RequestFailedError.for_update(resp, _DISPLAY_NAMES[collection][:-1])
        return _decode(resp, parse)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> NetOrcaClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # ---- Service items ----

    def list_service_items(
        self, filters: ServiceItemFilter | None = None
    ) -> Page[ServiceItem]:
        """List one page of service items visible from ``filters.pov``."""
        return self._list(SERVICE_ITEMS, filters or ServiceItemFilter(), _parse_service_item)

    # ---- Change instances ----

    def list_change_instances(
        self, filters: ChangeInstanceFilter | None = None
    ) -> Page[ChangeInstance]:
        """List one page of change instances visible from ``filters.pov``."""
        return self._list(
            CHANGE_INSTANCES, filters or ChangeInstanceFilter(), _parse_change_instance
        )

    def update_change_instance(
        self,
        change_instance_id: int,
        state: ChangeInstanceState | str,
        log: str,
        deployed_item: Any = None,
    ) -> ChangeInstance:
        """Request a state change for a change instance.

        The service decides whether the transition is allowed; a rejected
        transition surfaces as :class:`RequestFailedError`.

        Args:
            change_instance_id: ID of the change instance.
            state: Target state.
            log: Message stored on the change instance.
            deployed_item: Document describing what was deployed. Sent as-is.

        Returns:
            The updated change instance as returned by the service.
        """
        body = {
            "state": _wire_value(state),
            "log": log,
            "deployed_item": deployed_item,
        }
        return self._update(CHANGE_INSTANCES, change_instance_id, body, _parse_change_instance)

    def approve_change_instance(
        self, change_instance_id: int, log: str, deployed_item: Any = None
    ) -> ChangeInstance:
        """Move a change instance to APPROVED."""
        return self.update_change_instance(
            change_instance_id, ChangeInstanceState.APPROVED, log, deployed_item
        )

    def reject_change_instance(
        self, change_instance_id: int, log: str, deployed_item: Any = None
    ) -> ChangeInstance:
        """Move a change instance to REJECTED."""
        return self.update_change_instance(
            change_instance_id, ChangeInstanceState.REJECTED, log, deployed_item
        )

    def complete_change_instance(
        self, change_instance_id: int, log: str, deployed_item: Any = None
    ) -> ChangeInstance:
        """Move a change instance to COMPLETED."""
        return self.update_change_instance(
            change_instance_id, ChangeInstanceState.COMPLETED, log, deployed_item
        )

    def close_change_instance(
        self, change_instance_id: int, log: str, deployed_item: Any = None
    ) -> ChangeInstance:
        """Move a change instance to CLOSED."""
        return self.update_change_instance(
            change_instance_id, ChangeInstanceState.CLOSED, log, deployed_item
        )

    def set_change_instance_error(
        self, change_instance_id: int, log: str, deployed_item: Any = None
    ) -> ChangeInstance:
        """Move a change instance to ERROR."""
        return self.update_change_instance(
            change_instance_id, ChangeInstanceState.ERROR, log, deployed_item
        )

    def set_change_instance_pending(
        self, change_instance_id: int, log: str, deployed_item: Any = None
    ) -> ChangeInstance:
        """Move a change instance back to PENDING."""
        return self.update_change_instance(
            change_instance_id, ChangeInstanceState.PENDING, log, deployed_item
        )


def _wire_value(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def _decode(resp: httpx.Response, parse: Callable[[Any], T]) -> T:
    try:
        return parse(resp.json())
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise DecodeError(f"failed to decode response: {exc}") from exc


# ---- Parsing helpers ----


def _parse_page(data: dict[str, Any], parse: Callable[[dict[str, Any]], T]) -> Page[T]:
    return Page(
        count=int(data["count"]),
        next=data.get("next"),
        previous=data.get("previous"),
        results=[parse(item) for item in data.get("results") or []],
    )


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)


def _parse_owner(data: dict[str, Any] | None) -> Owner | None:
    if data is None:
        return None
    return Owner(id=data["id"], name=data.get("name", ""))


def _parse_team(data: dict[str, Any] | None) -> Team | None:
    if data is None:
        return None
    return Team(id=data["id"], name=data.get("name", ""), metadata=data.get("metadata"))


def _parse_application(data: dict[str, Any] | None) -> Application | None:
    if data is None:
        return None
    return Application(
        id=data["id"],
        name=data.get("name", ""),
        metadata=data.get("metadata"),
        owner=data.get("owner"),
    )


def _parse_service(data: dict[str, Any] | None) -> Service | None:
    if data is None:
        return None
    return Service(
        id=data["id"],
        name=data.get("name", ""),
        owner=_parse_owner(data.get("owner")),
        state=data.get("state", ""),
        healthcheck=data.get("healthcheck", False),
    )


def _parse_change_instance_service(
    data: dict[str, Any] | None,
) -> ChangeInstanceService | None:
    if data is None:
        return None
    return ChangeInstanceService(
        id=data["id"],
        name=data.get("name", ""),
        allow_manual_approval=data.get("allow_manual_approval", False),
        allow_manual_completion=data.get("allow_manual_completion", False),
    )


def _parse_submission(data: dict[str, Any] | None) -> Submission | None:
    if data is None:
        return None
    return Submission(id=data["id"], commit_id=data.get("commit_id", ""))


def _parse_declaration(data: dict[str, Any] | None) -> Declaration | None:
    if data is None:
        return None
    return Declaration(version=data.get("version", 0), declaration=data.get("declaration"))


def _parse_service_item(data: dict[str, Any]) -> ServiceItem:
    return ServiceItem(
        id=data["id"],
        url=data.get("url", ""),
        name=data.get("name", ""),
        created=_parse_timestamp(data.get("created")),
        modified=_parse_timestamp(data.get("modified")),
        runtime_state=data.get("runtime_state", ""),
        change_state=data.get("change_state", ""),
        service=_parse_service(data.get("service")),
        application=_parse_application(data.get("application")),
        related=data.get("related"),
        service_owner_team=_parse_team(data.get("service_owner_team")),
        consumer_team=_parse_team(data.get("consumer_team")),
        deployed_item=data.get("deployed_item"),
        declaration=data.get("declaration"),
        healthcheck_status=data.get("healthcheck_status"),
        is_validated_minimum_schema=data.get("is_validated_minimum_schema", False),
        is_deprecated_service_schema=data.get("is_deprecated_service_schema", False),
        is_service_private=data.get("is_service_private", False),
    )


def _parse_change_instance(data: dict[str, Any]) -> ChangeInstance:
    service_item = data.get("service_item")
    return ChangeInstance(
        id=data["id"],
        url=data.get("url", ""),
        state=data.get("state", ""),
        created=_parse_timestamp(data.get("created")),
        modified=_parse_timestamp(data.get("modified")),
        change_type=data.get("change_type", ""),
        log=data.get("log", ""),
        owner=_parse_team(data.get("owner")),
        service_item=_parse_service_item(service_item) if service_item is not None else None,
        submission=_parse_submission(data.get("submission")),
        new_declaration=_parse_declaration(data.get("new_declaration")),
        old_declaration=_parse_declaration(data.get("old_declaration")),
        service_owner_team=_parse_team(data.get("service_owner_team")),
        consumer_team=_parse_team(data.get("consumer_team")),
        service=_parse_change_instance_service(data.get("service")),
        application=_parse_application(data.get("application")),
        is_dependant=data.get("is_dependant", False),
    )
