"""Configuration enums for type-safe settings.

They inherit from str to maintain JSON serialization compatibility.
"""

from enum import Enum


class Region(str, Enum):
    """Customer.io data center regions.

    Determines which Track API host requests are sent to.
    """

    US = "us"
    EU = "eu"

    @property
    def track_url(self) -> str:
        """Base URL of the Track API v1 for this region."""
        return TRACK_URLS[self]


TRACK_URLS = {
    Region.US: "https://track.customer.io/api/v1/",
    Region.EU: "https://track-eu.customer.io/api/v1/",
}
