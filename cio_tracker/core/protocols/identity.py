"""Protocol for customer identity providers.

The tracking client asks the provider who the current customer is right
before each call. A ``None`` id means the customer is anonymous and the
call is skipped without touching the network.

Usage:
    class SessionIdentity:
        def get_customer_id(self) -> Optional[str]:
            return session.user_id

        def get_customer_details(self) -> Mapping[str, Any]:
            return {"email": session.email}
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class IdentityProvider(Protocol):
    """Supplies the customer id and attributes for tracking calls."""

    def get_customer_id(self) -> Optional[str]:
        """Return the current customer id, or None if anonymous."""
        ...

    def get_customer_details(self) -> Mapping[str, Any]:
        """Return the attributes sent on identify.

        Contents are passed through to the Track API as-is. Values must be
        JSON-serializable.
        """
        ...
