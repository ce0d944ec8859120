"""Tracking domain - customer and event reporting to Customer.io."""

from cio_tracker.domains.tracking.auth import FixedBasicAuth, build_basic_auth_header
from cio_tracker.domains.tracking.client import TrackingClient
from cio_tracker.domains.tracking.types import RequestDescriptor, TrackedEvent

__all__ = [
    "FixedBasicAuth",
    "RequestDescriptor",
    "TrackedEvent",
    "TrackingClient",
    "build_basic_auth_header",
]
