"""Shared exceptions module."""

from typing import Optional


class CustomerIoException(Exception):
    """Base exception for the Customer.io tracking client."""

    def __init__(self, message: str):
        """Create a new CustomerIoException instance.

        Args:
        ----
            message (str): The error message.

        """
        self.message = message
        super().__init__(self.message)


class InvalidCredentialsError(CustomerIoException):
    """Raised when the site id or API key is missing at client construction."""

    def __init__(self, message: Optional[str] = "Site id and API key must be non-empty"):
        """Create a new InvalidCredentialsError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        super().__init__(message)


class CustomerIoApiError(CustomerIoException):
    """The Track API answered with a status other than 200 OK."""

    def __init__(self, status_code: int, message: Optional[str] = None, body: str = ""):
        """Create a new CustomerIoApiError instance.

        Args:
        ----
            status_code (int): HTTP status code returned by the Track API.
            message (str, optional): The error message. Defaults to one naming the code.
            body (str, optional): Response body text, truncated, for diagnostics.

        """
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"Customer.io API returned HTTP {status_code}")


class CustomerIoTransportError(CustomerIoException):
    """The HTTP call itself failed (connect, DNS, TLS or timeout).

    Always raised from the underlying httpx exception, available as
    ``__cause__``.
    """

    pass
