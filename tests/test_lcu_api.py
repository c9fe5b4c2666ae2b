"""HTTP requests and error classification."""
import pytest
import requests

from conftest import FakeResponse, FakeSession

from lcu import LCUError, RequestError, RequestSuccess
from lcu.core.lcu_api import LCUAPI, encode_query
from lcu.core.lcu_connection import LCUConnection
from lcu.types import Credentials


def connected(session):
    connection = LCUConnection()
    connection.credentials = Credentials(port=2999, password="pw")
    connection.session = session
    connection.ok = True
    return connection


def test_success_returns_status_and_json_body():
    session = FakeSession(FakeResponse(200, {"summonerLevel": 30}))
    api = LCUAPI(connected(session))
    result = api.request("GET", "/lol-summoner/v1/current-summoner")

    assert result == RequestSuccess(200, {"summonerLevel": 30})
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "https://127.0.0.1:2999/lol-summoner/v1/current-summoner")
    assert "json" not in kwargs and "data" not in kwargs


def test_empty_body_is_none():
    api = LCUAPI(connected(FakeSession(FakeResponse(204, reason="No Content"))))
    assert api.request("DELETE", "/x").body is None


def test_non_json_body_is_text():
    api = LCUAPI(connected(FakeSession(FakeResponse(200, text="plain"))))
    assert api.request("GET", "/x").body == "plain"


def test_error_body_becomes_lcu_error():
    payload = {
        "errorCode": "RPC_ERROR",
        "httpStatus": 404,
        "implementationDetails": {},
        "message": "Invalid function",
    }
    api = LCUAPI(connected(FakeSession(FakeResponse(404, payload, reason="Not Found"))))
    with pytest.raises(LCUError) as exc:
        api.request("GET", "/nope")
    err = exc.value
    assert (err.status_code, err.error_code, err.message) == (404, "RPC_ERROR", "Invalid function")
    assert err.implementation_details is None


def test_error_without_body_uses_reason():
    api = LCUAPI(connected(FakeSession(FakeResponse(500, reason="Internal Server Error"))))
    with pytest.raises(LCUError) as exc:
        api.request("GET", "/x")
    assert exc.value.message == "Internal Server Error"
    assert exc.value.error_code is None


def test_transport_failure_becomes_request_error():
    session = FakeSession(exc=requests.exceptions.ConnectionError("refused"))
    with pytest.raises(RequestError) as exc:
        LCUAPI(connected(session)).request("GET", "/x")
    assert exc.value.error_code == "ConnectionError"
    assert exc.value.message == "refused"


def test_not_connected_is_a_request_error():
    with pytest.raises(RequestError) as exc:
        LCUAPI(LCUConnection()).request("GET", "/x")
    assert exc.value.error_code == "NOT_CONNECTED"


def test_encode_query():
    assert encode_query(None) is None
    assert encode_query({"a": True, "b": None, "c": 3, "d": [False, "x"]}) == {
        "a": "true",
        "c": 3,
        "d": ["false", "x"],
    }


def test_path_without_leading_slash_is_joined_with_one_slash():
    session = FakeSession(FakeResponse(200, {}))
    LCUAPI(connected(session)).request("GET", "lol-summoner/v1/current-summoner")
    assert session.calls[0][1] == "https://127.0.0.1:2999/lol-summoner/v1/current-summoner"


def test_json_body_is_sent_as_json():
    session = FakeSession(FakeResponse(200, {}))
    LCUAPI(connected(session)).request("POST", "/x", body={"queueId": 420})
    assert session.calls[0][2]["json"] == {"queueId": 420}


def test_null_body_is_sent_as_json_null():
    session = FakeSession(FakeResponse(204, reason="No Content"))
    LCUAPI(connected(session)).request("PUT", "/x", body=None)
    kwargs = session.calls[0][2]
    assert kwargs["data"] == "null"
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert "json" not in kwargs
