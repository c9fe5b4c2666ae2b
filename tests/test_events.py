"""Websocket frame decoding, filtering, and dispatch."""
import json
import logging

import pytest

from lcu import LCU
from lcu.websocket import EventFilter, event_name_for_uri, parse_frame

PHASE = {"data": "Lobby", "eventType": "Update", "uri": "/lol-gameflow/v1/gameflow-phase"}


def frame(payload, name="OnJsonApiEvent"):
    return json.dumps([8, name, payload])


def test_event_name_for_uri():
    assert event_name_for_uri("/lol-gameflow/v1/gameflow-phase") == "OnJsonApiEvent_lol-gameflow_v1_gameflow-phase"


def test_parse_frame():
    assert parse_frame(frame(PHASE)) == ("OnJsonApiEvent", PHASE)
    assert parse_frame("[0, \"session\", 1, \"server\"]") is None
    assert parse_frame("") is None
    assert parse_frame("not json") is None


def test_filter_by_path_and_type():
    f = EventFilter(path="/lol-gameflow/v1/gameflow-phase", types=("Create", "Update"))
    assert f.matches("OnJsonApiEvent", PHASE)
    assert not f.matches("OnJsonApiEvent", dict(PHASE, eventType="Delete"))
    assert not f.matches("OnJsonApiEvent", dict(PHASE, uri="/lol-lobby/v2/lobby"))


def test_filter_by_name():
    assert EventFilter(name="OnJsonApiEvent_lol-gameflow_v1_gameflow-phase").matches("OnJsonApiEvent", PHASE)
    assert EventFilter(name="OnJsonApiEvent").matches("OnJsonApiEvent", PHASE)
    assert not EventFilter(name="OnJsonApiEvent_lol-lobby_v2_lobby").matches("OnJsonApiEvent", PHASE)


def test_empty_filter_matches_everything():
    assert EventFilter().matches("OnJsonApiEvent", PHASE)


def test_filter_rejects_name_and_path():
    with pytest.raises(ValueError):
        EventFilter(name="a", path="/b")


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(LCU, "_ensure_websocket", lambda self: None)
    return LCU()


def test_subscribe_queues_matching_events_in_order(client):
    events = client.subscribe(path="/lol-gameflow/v1/gameflow-phase")
    second = dict(PHASE, data="ChampSelect")
    client._dispatch_message(frame(PHASE))
    client._dispatch_message(frame(dict(PHASE, uri="/other")))
    client._dispatch_message(frame(second))

    assert events.get_nowait() == PHASE
    assert events.get_nowait() == second
    assert events.empty()


def test_removed_listener_stops_receiving(client):
    received = []
    subscription = client.add_event_listener(received.append)
    client._dispatch_message(frame(PHASE))
    client.remove_event_listener(subscription)
    client._dispatch_message(frame(PHASE))
    assert received == [PHASE]


def test_websocket_open_subscribes_to_json_api_events(caplog):
    from lcu.websocket import WebSocketConnection

    class Socket:
        def __init__(self):
            self.sent = []

        def send(self, data):
            self.sent.append(data)

    socket = Socket()
    connection = WebSocketConnection(connection=None, on_message=lambda msg: None)
    with caplog.at_level(logging.INFO, logger="hasagi"):
        connection._on_open(socket)

    assert socket.sent == ['[5, "OnJsonApiEvent"]']
    assert any("WebSocket subscribed" in r.getMessage() for r in caplog.records)
