"""HTTP Basic authentication with a precomputed header."""

import base64
from typing import Generator

import httpx

AUTHORIZATION_HEADER = "Authorization"


def build_basic_auth_header(site_id: str, api_key: str) -> str:
    """Return ``Basic base64(site_id:api_key)``."""
    token = base64.b64encode(f"{site_id}:{api_key}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class FixedBasicAuth(httpx.Auth):
    """Adds one fixed Authorization header to outgoing requests.

    The header value is computed once at construction. A request that
    already carries an Authorization header, in any casing, is left as is,
    so applying the auth repeatedly to the same request never duplicates it.
    """

    def __init__(self, site_id: str, api_key: str) -> None:
        """Derive the header value from the credentials."""
        self._header_value = build_basic_auth_header(site_id, api_key)

    @property
    def header_value(self) -> str:
        return self._header_value

    def apply(self, request: httpx.Request) -> httpx.Request:
        """Attach the header unless one is present. Returns the same request."""
        # httpx.Headers membership is case-insensitive
        if AUTHORIZATION_HEADER not in request.headers:
            request.headers[AUTHORIZATION_HEADER] = self._header_value
        return request

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield self.apply(request)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted>)"
