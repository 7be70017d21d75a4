"""ArangoDB REST client with object/document mapping."""

import logging

from ._connection import Connection
from ._connections import ConnectionRegistry
from ._documents import to_document, to_object
from ._errors import ArangoClientError, ArangoResponseError, TransportFailureError
from ._markers import FieldMarker, IgnoreField, IgnoreNullValue, field_markers
from ._models import BodyType, ErrorDetail, HttpMethod, Request, Response
from ._results import Completed, ProtocolError, SendResult, TransportFailure
from ._settings import DRIVER_VERSION, ArangoSettings, get_settings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = DRIVER_VERSION
__all__ = [
    "Connection",
    "ConnectionRegistry",
    "Request",
    "Response",
    "ErrorDetail",
    "HttpMethod",
    "BodyType",
    "Completed",
    "ProtocolError",
    "TransportFailure",
    "SendResult",
    "ArangoClientError",
    "ArangoResponseError",
    "TransportFailureError",
    "FieldMarker",
    "IgnoreField",
    "IgnoreNullValue",
    "field_markers",
    "to_document",
    "to_object",
    "ArangoSettings",
    "get_settings",
]
