"""Tracking domain types.

Pure domain types with no transport dependencies beyond JSON encoding.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Annotated, Any, Mapping, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Strict, StrictInt
from pydantic_core import to_json

CUSTOMER_PATH = "customers/{customer_id}"
CUSTOMER_EVENTS_PATH = "customers/{customer_id}/events"


def quote_segment(value: str) -> str:
    """Percent-encode one path segment, including the dot segments . and .."""
    quoted = quote(value, safe="")
    # Bare dot segments are removed by URL normalization
    if quoted in (".", ".."):
        return quoted.replace(".", "%2E")
    return quoted


class TrackedEvent(BaseModel):
    """Body of a track-event call.

    ``timestamp`` back-dates the event; ``None`` lets the service use the
    time of receipt. It is serialized as given: datetimes as ISO-8601
    strings, integers untouched. Any other type is rejected rather than
    converted.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    data: Optional[Any] = None
    timestamp: Optional[Union[Annotated[datetime, Strict()], StrictInt]] = None


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to issue one Track API request.

    Built fresh for each call and discarded afterwards.
    """

    path_template: str
    method: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    payload: Any = None

    @property
    def path(self) -> str:
        """Path relative to the API base with parameters URL-quoted."""
        return self.path_template.format(
            **{key: quote_segment(str(value)) for key, value in self.path_params.items()}
        )

    def body(self) -> Optional[bytes]:
        """Serialize the payload to JSON, or None when there is no payload."""
        if self.payload is None:
            return None
        if isinstance(self.payload, BaseModel):
            return self.payload.model_dump_json().encode()
        return to_json(self.payload)
