"""
Tests for the requests-based JokebookAPI client.
"""
from __future__ import annotations

from unittest.mock import MagicMock

import requests

from jokebook_client import JokebookAPI

from .helpers import make_response


def make_api(response=None, side_effect=None):
    session = MagicMock(spec=requests.Session)
    session.request.return_value = response
    session.request.side_effect = side_effect
    return JokebookAPI(base_url="http://localhost:3000/", session=session), session


def test_list_jokes_returns_data():
    api, session = make_api(make_response(200, [{"id": 1, "title": "t", "content": "c"}]))
    jokes, error = api.list_jokes()
    assert error is None
    assert jokes == [{"id": 1, "title": "t", "content": "c"}]
    _, kwargs = session.request.call_args
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://localhost:3000/api/jokes"


def test_server_error_message_is_extracted():
    api, _ = make_api(make_response(500, {"error": "Failed to fetch persons"}))
    persons, error = api.list_persons()
    assert persons == []
    assert error == {"status_code": 500, "message": "Failed to fetch persons"}


def test_connection_error_is_reported():
    api, _ = make_api(side_effect=requests.ConnectionError("refused"))
    jokes, error = api.list_jokes()
    assert jokes == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_non_list_response_is_an_error():
    api, _ = make_api(make_response(200, {"unexpected": True}))
    persons, error = api.list_persons()
    assert persons == []
    assert error is not None


def test_add_person_posts_payload():
    body = {"message": "Person added successfully!", "person": {"_id": "a1", "name": "Alice"}, "id": "a1"}
    api, session = make_api(make_response(200, body))
    payload = {"name": "Alice", "marks": 90, "age": 21, "dob": "2003-01-01"}
    result, error = api.add_person(payload)
    assert error is None
    assert result["id"] == "a1"
    _, kwargs = session.request.call_args
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://localhost:3000/api/persons"
    assert kwargs["json"] == payload


def test_add_person_validation_error():
    api, _ = make_api(make_response(400, {"error": "marks must be a number"}))
    result, error = api.add_person({"name": "Alice"})
    assert result is None
    assert error == {"status_code": 400, "message": "marks must be a number"}
