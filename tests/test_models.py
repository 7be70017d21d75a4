"""Tests for Pydantic models."""

from dataclasses import dataclass
from typing import Annotated

import pytest
from pydantic import ValidationError

from arango_client import (
    ArangoResponseError,
    BodyType,
    ErrorDetail,
    HttpMethod,
    IgnoreField,
    Request,
    Response,
)
from arango_client._models import infer_body_type


@dataclass
class Movie:
    title: str
    year: int
    cached_rating: Annotated[float | None, IgnoreField] = None


def test_relative_url_without_query():
    req = Request(method=HttpMethod.GET, relative_uri="_api/version")
    assert req.relative_url() == "_api/version"


def test_relative_url_strips_leading_slash():
    req = Request(method=HttpMethod.GET, relative_uri="/_api/version")
    assert req.relative_url() == "_api/version"


def test_relative_url_with_query():
    req = Request(
        method=HttpMethod.PUT,
        relative_uri="_api/simple/all",
        query={"waitForSync": "true", "keepNull": "false"},
    )
    assert req.relative_url() == "_api/simple/all?waitForSync=true&keepNull=false"


def test_request_defaults():
    req = Request(method=HttpMethod.HEAD, relative_uri="_api/document/users/1")
    assert req.headers == {}
    assert req.query == {}
    assert req.body == ""


def test_request_for_document():
    req = Request.for_document(
        HttpMethod.POST,
        "_api/document/movies",
        Movie(title="Alien", year=1979, cached_rating=8.5),
    )
    assert req.body == '{"title":"Alien","year":1979}'


def test_request_for_mapping_keeps_unicode():
    req = Request.for_document(HttpMethod.POST, "_api/document/movies", {"title": "Amélie"})
    assert req.body == '{"title":"Amélie"}'


@pytest.mark.parametrize(
    "body,expected",
    [
        ('{"a": 1}', BodyType.DOCUMENT),
        ('  \n{"a": 1}', BodyType.DOCUMENT),
        ("[1, 2]", BodyType.LIST),
        ("plain text", BodyType.TEXT),
        ("", BodyType.TEXT),
    ],
)
def test_infer_body_type(body, expected):
    assert infer_body_type(body) == expected


def test_response_is_frozen():
    resp = Response(status_code=200, body="{}", body_type=BodyType.DOCUMENT)
    with pytest.raises(ValidationError):
        resp.status_code = 500


def test_parse_body_text_is_none():
    resp = Response(status_code=200, body="ok", body_type=BodyType.TEXT)
    assert resp.parse_body() is None


def test_parse_body_as_dataclass():
    resp = Response(status_code=200, body='{"title": "Alien", "year": 1979}',
                    body_type=BodyType.DOCUMENT)
    movie = resp.parse_body_as(Movie)
    assert movie == Movie(title="Alien", year=1979)


def test_parse_error_body():
    resp = Response(
        status_code=404,
        body='{"error": true, "code": 404, "errorNum": 1203, "errorMessage": "not found"}',
        body_type=BodyType.DOCUMENT,
    )
    error_body = resp.parse_error_body()
    assert error_body.error is True
    assert error_body.code == 404
    assert error_body.error_num == 1203
    assert error_body.error_message == "not found"


def test_parse_error_body_invalid_json():
    resp = Response(status_code=500, body="{not json", body_type=BodyType.DOCUMENT)
    assert resp.parse_error_body() is None


def test_raise_for_error_without_error_returns_response():
    resp = Response(status_code=200, body="{}", body_type=BodyType.DOCUMENT)
    assert resp.raise_for_error() is resp


def test_raise_for_error():
    detail = ErrorDetail(status_code=409, number=1210, message="ArangoDB error: unique constraint violated")
    resp = Response(status_code=409, error=detail)

    with pytest.raises(ArangoResponseError) as exc_info:
        resp.raise_for_error()
    assert exc_info.value.detail == detail
    assert str(exc_info.value) == "ArangoDB error: unique constraint violated"


def test_parse_error_body_missing_fields_use_defaults():
    resp = Response(status_code=404, body='{"error": true, "errorNum": 1203}',
                    body_type=BodyType.DOCUMENT)
    error_body = resp.parse_error_body()
    assert error_body.error is True
    assert error_body.code == 0
    assert error_body.error_num == 1203
    assert error_body.error_message == ""
