"""Fake identity provider for testing."""

from typing import Any, Dict, Mapping, Optional


class FakeIdentityProvider:
    """In-memory test double for IdentityProvider.

    Records how often each query ran so tests can assert that the client
    asked for attributes only when it needed them.

    Usage:
        identity = FakeIdentityProvider("42", {"email": "a@example.com"})
        client = TrackingClient("site", "key", identity, transport=transport)
        await client.identify()
        assert identity.details_calls == 1
    """

    def __init__(
        self, customer_id: Optional[str] = None, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize with the customer to report."""
        self.customer_id = customer_id
        self.details: Dict[str, Any] = details or {}
        self.id_calls = 0
        self.details_calls = 0

    def get_customer_id(self) -> Optional[str]:
        """Return the configured id and count the call."""
        self.id_calls += 1
        return self.customer_id

    def get_customer_details(self) -> Mapping[str, Any]:
        """Return the configured attributes and count the call."""
        self.details_calls += 1
        return self.details

    # Test helpers

    def clear(self) -> None:
        """Reset call counters."""
        self.id_calls = 0
        self.details_calls = 0
