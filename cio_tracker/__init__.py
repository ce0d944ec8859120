"""Async client for the Customer.io Track API."""

from cio_tracker.adapters.identity import (
    ContextVarIdentityProvider,
    StaticIdentityProvider,
)
from cio_tracker.core.async_lock import AsyncLock
from cio_tracker.core.exceptions import (
    CustomerIoApiError,
    CustomerIoException,
    CustomerIoTransportError,
    InvalidCredentialsError,
)
from cio_tracker.core.protocols.identity import IdentityProvider
from cio_tracker.domains.tracking import TrackedEvent, TrackingClient

__all__ = [
    "AsyncLock",
    "ContextVarIdentityProvider",
    "CustomerIoApiError",
    "CustomerIoException",
    "CustomerIoTransportError",
    "IdentityProvider",
    "InvalidCredentialsError",
    "StaticIdentityProvider",
    "TrackedEvent",
    "TrackingClient",
]
