"""Static identity provider for single-customer processes."""

from typing import Any, Dict, Mapping, Optional


class StaticIdentityProvider:
    """Serves one fixed customer until told otherwise.

    Suitable for CLIs, workers and client apps where the whole process acts
    for a single customer. Call ``clear()`` on logout to make subsequent
    tracking calls no-ops.
    """

    def __init__(
        self,
        customer_id: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Initialize with an optional customer id and attributes."""
        self._customer_id = customer_id
        self._details: Dict[str, Any] = dict(details or {})

    def set_customer(
        self, customer_id: Optional[str], details: Optional[Mapping[str, Any]] = None
    ) -> None:
        """Switch to another customer, replacing the attributes."""
        self._customer_id = customer_id
        self._details = dict(details or {})

    def clear(self) -> None:
        """Forget the customer; tracking becomes a no-op."""
        self.set_customer(None)

    def get_customer_id(self) -> Optional[str]:
        return self._customer_id

    def get_customer_details(self) -> Mapping[str, Any]:
        return dict(self._details)
