"""Shared fakes for command and client tests."""
import queue
import threading

import pytest

from main.core.context import CommandContext


class FakeClient:
    """Stands in for a connected lcu.LCU"""

    def __init__(self, result=None, error=None, events=None):
        self.base_url = "https://127.0.0.1:2999"
        self.basic_auth_token = "cmlvdDpzZWNyZXQ="
        self.result = result
        self.error = error
        self.events = events if events is not None else queue.Queue()
        self.requests = []
        self.subscriptions = []
        self.closed = False

    def request(self, method, path, body=None, params=None):
        self.requests.append((method, path, body, params))
        if self.error is not None:
            raise self.error
        return self.result

    def subscribe(self, name=None, path=None, types=None):
        self.subscriptions.append((name, path, types))
        return self.events

    def close(self):
        self.closed = True


class FakeResponse:
    """Minimal requests.Response"""

    def __init__(self, status_code=200, payload=None, text=None, reason="OK"):
        import json

        self.status_code = status_code
        self.reason = reason
        if text is not None:
            self.content = text.encode("utf-8")
            self.text = text
        elif payload is not None:
            self.text = json.dumps(payload)
            self.content = self.text.encode("utf-8")
        else:
            self.text = ""
            self.content = b""

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        import json

        return json.loads(self.text)


class FakeSession:
    """Records calls and replays one response or exception"""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)

    def close(self):
        pass


@pytest.fixture
def make_context():
    """Build a CommandContext whose connect() returns the given client"""
    created = []

    def _make(client):
        def factory(options, stop_event):
            created.append(client)
            return client
        return CommandContext(stop_event=threading.Event(), client_factory=factory)

    _make.created = created
    return _make
