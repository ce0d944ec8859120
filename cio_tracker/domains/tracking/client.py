"""Customer.io Track API client.

All network calls made by one client are serialized through an
``AsyncLock``: a call's HTTP round trip starts only after the previous
call's round trip has finished, successfully or not. Separate clients
share nothing.
"""

from types import TracebackType
from typing import Any, Callable, Mapping, Optional, Type

import httpx

from cio_tracker.core.async_lock import AsyncLock
from cio_tracker.core.config import Settings
from cio_tracker.core.config import settings as default_settings
from cio_tracker.core.config.enums import Region
from cio_tracker.core.exceptions import (
    CustomerIoApiError,
    CustomerIoTransportError,
    InvalidCredentialsError,
)
from cio_tracker.core.logging import logger
from cio_tracker.core.protocols.identity import IdentityProvider
from cio_tracker.domains.tracking.auth import FixedBasicAuth
from cio_tracker.domains.tracking.types import (
    CUSTOMER_EVENTS_PATH,
    CUSTOMER_PATH,
    RequestDescriptor,
    TrackedEvent,
)

DEFAULT_TIMEOUT_SECONDS = 10.0

# Longest slice of an error response body kept on CustomerIoApiError
_MAX_ERROR_BODY = 500


class TrackingClient:
    """Reports customers and events to Customer.io.

    Every operation asks the identity provider for the current customer id
    first. When there is none the operation returns immediately without any
    network traffic.

    Usage:
        identity = StaticIdentityProvider("42", {"email": "a@example.com"})
        async with TrackingClient(site_id, api_key, identity) as client:
            await client.identify()
            await client.track_event("signup", {"plan": "pro"})

    Raises:
        CustomerIoApiError: The service answered with anything but 200.
        CustomerIoTransportError: The request never got an answer.
    """

    def __init__(
        self,
        site_id: str,
        api_key: str,
        identity: IdentityProvider,
        *,
        base_url: str = Region.US.track_url,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Create a client for one Customer.io site.

        Args:
            site_id: Customer.io site (account) id.
            api_key: Track API key for the site.
            identity: Source of the current customer id and attributes.
            base_url: Track API base URL. Defaults to the US region.
            timeout: Per-request timeout in seconds for the owned HTTP client.
                Defaults to 10 seconds.
            transport: Transport for the owned HTTP client (tests pass
                ``httpx.MockTransport``).
            http_client: Externally managed HTTP client. The tracking client
                never closes it. Its own timeout and transport apply, so it
                cannot be combined with ``timeout`` or ``transport``.

        Raises:
            InvalidCredentialsError: If ``site_id`` or ``api_key`` is empty.
            ValueError: If ``http_client`` is given together with ``timeout``
                or ``transport``.
        """
        if not site_id or not api_key:
            raise InvalidCredentialsError()

        self._identity = identity
        self._auth = FixedBasicAuth(site_id, api_key)
        self._base_url = httpx.URL(base_url if base_url.endswith("/") else base_url + "/")
        self._lock = AsyncLock()
        self._logger = logger.with_prefix("[TrackingClient] ").with_context(site_id=site_id)

        if http_client is not None:
            if timeout is not None or transport is not None:
                raise ValueError(
                    "timeout and transport configure the owned HTTP client; "
                    "set them on the injected http_client instead"
                )
            self._http = http_client
            self._owns_http = False
        else:
            if timeout is None:
                timeout = DEFAULT_TIMEOUT_SECONDS
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout),
                transport=transport,
            )
            self._owns_http = True

    @classmethod
    def from_settings(
        cls,
        identity: IdentityProvider,
        settings: Optional[Settings] = None,
        **kwargs: Any,
    ) -> "TrackingClient":
        """Build a client from ``CIO_*`` environment settings.

        Raises:
            InvalidCredentialsError: If CIO_SITE_ID or CIO_API_KEY is unset.
        """
        settings = settings or default_settings
        if not settings.SITE_ID or settings.API_KEY is None:
            raise InvalidCredentialsError("CIO_SITE_ID and CIO_API_KEY must be set")
        kwargs.setdefault("base_url", settings.track_url)
        if "http_client" not in kwargs:
            kwargs.setdefault("timeout", settings.TIMEOUT_SECONDS)
        return cls(settings.SITE_ID, settings.API_KEY.get_secret_value(), identity, **kwargs)

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    async def identify(self) -> None:
        """Create or update the current customer with its attributes."""
        await self._call(CUSTOMER_PATH, "PUT", lambda: dict(self._identity.get_customer_details()))

    async def delete_customer(self) -> None:
        """Delete the current customer and its data."""
        await self._call(CUSTOMER_PATH, "DELETE")

    async def track_event(
        self,
        event_name: str,
        data: Optional[Mapping[str, Any]] = None,
        timestamp: Any = None,
    ) -> None:
        """Track a custom event for the current customer.

        Args:
            event_name: Name of the event, usable in campaign triggers.
            data: Attributes to attach to the event. Passed through as-is.
            timestamp: Back-dates the event (datetime or unix seconds).
                None uses the time the service receives it.
        """
        await self._call(
            CUSTOMER_EVENTS_PATH,
            "POST",
            lambda: TrackedEvent(name=event_name, data=data, timestamp=timestamp),
        )

    # -------------------------------------------------------------------------
    # Request pipeline
    # -------------------------------------------------------------------------

    async def _call(
        self,
        path_template: str,
        method: str,
        build_payload: Optional[Callable[[], Any]] = None,
    ) -> None:
        customer_id = self._identity.get_customer_id()
        if customer_id is None:
            self._logger.debug(f"No customer id, skipping {method} {path_template}")
            return

        descriptor = RequestDescriptor(
            path_template=path_template,
            method=method,
            path_params={"customer_id": customer_id},
            payload=build_payload() if build_payload is not None else None,
        )
        request = self._build_request(descriptor)

        self._logger.debug(f"{descriptor.method} {descriptor.path}")
        try:
            with await self._lock.acquire():
                response = await self._http.send(request, auth=self._auth)
        except httpx.TransportError as e:
            self._logger.error(f"{descriptor.method} {descriptor.path} failed: {e!r}")
            raise CustomerIoTransportError(
                f"{descriptor.method} {descriptor.path} failed: {e}"
            ) from e

        self._raise_for_status(descriptor, response)

    def _build_request(self, descriptor: RequestDescriptor) -> httpx.Request:
        body = descriptor.body()
        headers = {"Content-Type": "application/json"} if body is not None else None
        return self._http.build_request(
            descriptor.method,
            self._base_url.join(descriptor.path),
            content=body,
            headers=headers,
        )

    def _raise_for_status(self, descriptor: RequestDescriptor, response: httpx.Response) -> None:
        if response.status_code == httpx.codes.OK:
            return
        self._logger.warning(
            f"{descriptor.method} {descriptor.path} returned HTTP {response.status_code}"
        )
        raise CustomerIoApiError(response.status_code, body=response.text[:_MAX_ERROR_BODY])

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the HTTP client if this tracking client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "TrackingClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
