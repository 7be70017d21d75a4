"""Exceptions raised by the client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._models import ErrorDetail


class ArangoClientError(Exception):
    """Base class for client errors."""


class TransportFailureError(ArangoClientError):
    """The request never produced an HTTP response (connect, DNS, timeout...)."""


class ArangoResponseError(ArangoClientError):
    """The server answered with an error.

    Raised by ``Response.raise_for_error()``; ``detail`` carries the status code,
    the ArangoDB error number and the message.
    """

    def __init__(self, detail: "ErrorDetail"):
        super().__init__(detail.message)
        self.detail = detail
        self.status_code = detail.status_code
        self.number = detail.number
