"""Context-variable identity provider.

Keeps the current customer in a ``contextvars.ContextVar`` so concurrent
requests in an async web app each see their own customer.

Usage:
    identity = ContextVarIdentityProvider()
    client = TrackingClient(site_id, api_key, identity)

    async def handle_request(request):
        with identity.bind(request.user.id, {"email": request.user.email}):
            await client.track_event("page_viewed", {"path": request.url.path})
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional


@dataclass(frozen=True)
class _BoundCustomer:
    customer_id: Optional[str]
    details: Dict[str, Any] = field(default_factory=dict)


_ANONYMOUS = _BoundCustomer(customer_id=None)


class ContextVarIdentityProvider:
    """Identity provider scoped to the current asyncio task/context."""

    def __init__(self, name: str = "cio_tracker_customer") -> None:
        """Create the backing context variable."""
        self._var: ContextVar[_BoundCustomer] = ContextVar(name, default=_ANONYMOUS)

    @contextmanager
    def bind(
        self, customer_id: Optional[str], details: Optional[Mapping[str, Any]] = None
    ) -> Iterator[None]:
        """Make ``customer_id`` current for the duration of the block."""
        token = self._var.set(_BoundCustomer(customer_id, dict(details or {})))
        try:
            yield
        finally:
            self._var.reset(token)

    def get_customer_id(self) -> Optional[str]:
        return self._var.get().customer_id

    def get_customer_details(self) -> Mapping[str, Any]:
        return dict(self._var.get().details)
