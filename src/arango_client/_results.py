"""Outcomes of ``Connection.send``."""

from typing import Union

from pydantic import BaseModel, ConfigDict

from ._errors import TransportFailureError
from ._models import Response


class Completed(BaseModel):
    """The call completed end to end. The status may still be an application error."""

    model_config = ConfigDict(frozen=True)

    response: Response

    def unwrap(self) -> Response:
        return self.response


class ProtocolError(BaseModel):
    """The server answered with an error status; ``response.error`` is set."""

    model_config = ConfigDict(frozen=True)

    response: Response

    def unwrap(self) -> Response:
        return self.response


class TransportFailure(BaseModel):
    """No HTTP response was received (connection refused, DNS, timeout...)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    exception: Exception
    message: str

    def unwrap(self) -> Response:
        """Raise ``TransportFailureError`` chained from the transport exception."""
        raise TransportFailureError(self.message) from self.exception


SendResult = Union[Completed, ProtocolError, TransportFailure]
