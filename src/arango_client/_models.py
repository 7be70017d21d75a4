"""Pydantic request/response models."""

import json
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from ._documents import to_document
from ._errors import ArangoResponseError


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"


class BodyType(str, Enum):
    """What a response body looks like before it is decoded."""

    DOCUMENT = "document"
    LIST = "list"
    TEXT = "text"


# === Requests ===


class Request(BaseModel):
    """Description of one call against the REST API."""

    method: HttpMethod
    relative_uri: str
    query: dict[str, str] = {}
    headers: dict[str, str] = {}
    body: str = ""

    @classmethod
    def for_document(
        cls,
        method: HttpMethod,
        relative_uri: str,
        document: Any,
        *,
        query: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> "Request":
        """Build a request whose body is ``document`` serialized to JSON.

        Dataclasses and pydantic models are converted with ``to_document``
        first, so field markers apply.
        """
        body = json.dumps(to_document(document), separators=(",", ":"), ensure_ascii=False)
        return cls(
            method=method,
            relative_uri=relative_uri,
            query=query or {},
            headers=headers or {},
            body=body,
        )

    def relative_url(self) -> str:
        """Relative URI plus the encoded query string, if any."""
        path = self.relative_uri.lstrip("/")
        if self.query:
            return f"{path}?{urlencode(self.query)}"
        return path


# === Responses ===


class ErrorDetail(BaseModel):
    """Structured error extracted from a protocol error."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    number: int
    message: str


class ErrorBody(BaseModel):
    """Error document returned by the server, e.g.
    ``{"error": true, "code": 404, "errorNum": 1202, "errorMessage": "..."}``.
    """

    error: bool
    code: int = 0
    error_num: int = Field(default=0, alias="errorNum")
    error_message: str = Field(default="", alias="errorMessage")


class Response(BaseModel):
    """Outcome of one HTTP round trip. Never mutated once built.

    ``headers`` keys are lower-cased; a header sent more than once (e.g.
    ``set-cookie``) is joined into a single comma-separated value.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: dict[str, str] = {}
    body: str | None = None
    body_type: BodyType | None = None
    error: ErrorDetail | None = None

    def parse_body(self) -> Any:
        """Decode a document or list body; other bodies yield None."""
        if self.body is None or self.body_type not in (BodyType.DOCUMENT, BodyType.LIST):
            return None
        return json.loads(self.body)

    def parse_body_as(self, type_: Any) -> Any:
        """Validate the body into ``type_`` (a model, dataclass or typing construct)."""
        if self.body is None:
            return None
        return TypeAdapter(type_).validate_json(self.body)

    def parse_error_body(self) -> ErrorBody | None:
        """Read the body as an error document, or None if it is not one."""
        if self.body_type is not BodyType.DOCUMENT:
            return None
        try:
            return ErrorBody.model_validate_json(self.body)
        except ValidationError:
            return None

    def raise_for_error(self) -> "Response":
        if self.error is not None:
            raise ArangoResponseError(self.error)
        return self


def infer_body_type(body: str) -> BodyType:
    """Classify a body by its first non-whitespace character."""
    stripped = body.lstrip()
    if stripped.startswith("{"):
        return BodyType.DOCUMENT
    if stripped.startswith("["):
        return BodyType.LIST
    return BodyType.TEXT
