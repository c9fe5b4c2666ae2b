"""Readiness wait of the LCU client."""
import functools
import logging
import threading

import pytest

from lcu import CONNECTED, CONNECTION_ATTEMPT_FAILED, LCU, ConnectionAborted
from lcu.types import Credentials
from main.core import context
from main.setup.arguments import GlobalOptions


def make_client(probe_results, stop_event=None):
    client = LCU(stop_event=stop_event)
    results = iter(probe_results)

    def refresh_if_needed(force=False):
        client._connection.credentials = Credentials(port=2999, password="secret")
        client._connection.ok = True

    client._connection.refresh_if_needed = refresh_if_needed
    client._connection.probe = lambda: next(results)
    return client


def test_connect_retries_until_the_client_answers():
    client = make_client([False, False, True])
    attempts = []
    connected = []
    client.on(CONNECTION_ATTEMPT_FAILED, attempts.append)
    client.on(CONNECTED, lambda: connected.append(True))

    client.connect(retry_delay=0)

    assert attempts == [1, 2]
    assert connected == [True]
    assert client.base_url == "https://127.0.0.1:2999"
    assert client.basic_auth_token == "cmlvdDpzZWNyZXQ="


def test_connect_aborts_when_stopped():
    stop_event = threading.Event()
    client = make_client([False] * 10, stop_event=stop_event)
    client.on(CONNECTION_ATTEMPT_FAILED, lambda attempt: stop_event.set())

    with pytest.raises(ConnectionAborted):
        client.connect(retry_delay=0)


def test_unknown_lifecycle_event():
    with pytest.raises(ValueError):
        LCU().on("disconnected", lambda: None)


def test_create_client_logs_waiting_notice_per_failed_attempt(monkeypatch, caplog):
    built = []

    def build(lockfile_path=None, stop_event=None):
        client = make_client([False, False, True], stop_event=stop_event)
        client.connect = functools.partial(client.connect, retry_delay=0)
        built.append((client, lockfile_path))
        return client

    monkeypatch.setattr(context, "LCU", build)
    with caplog.at_level(logging.INFO, logger="hasagi"):
        client = context.create_client(GlobalOptions(lockfile="/tmp/lockfile"), threading.Event())

    assert built == [(client, "/tmp/lockfile")]
    waiting = [r for r in caplog.records if r.getMessage() == context.WAITING_MESSAGE]
    assert len(waiting) == 2
    assert client.base_url == "https://127.0.0.1:2999"
