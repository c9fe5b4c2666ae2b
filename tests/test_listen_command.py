"""listen command: event printing and appending."""
import json
import queue

from conftest import FakeClient

from main.commands.listen import drain_events, handle_event, run_listen
from main.core.output import resolve_output_target
from main.setup.arguments import ListenOptions


class StoppingQueue(queue.Queue):
    """Sets the stop event once it runs dry"""

    def __init__(self, events, stop_event):
        super().__init__()
        self.stop_event = stop_event
        for event in events:
            self.put(event)

    def get(self, block=True, timeout=None):
        try:
            return super().get(block=False)
        except queue.Empty:
            self.stop_event.set()
            raise


EVENTS = [
    {"data": "Lobby", "eventType": "Update", "uri": "/lol-gameflow/v1/gameflow-phase"},
    {"data": "ChampSelect", "eventType": "Update", "uri": "/lol-gameflow/v1/gameflow-phase"},
]


def test_handle_event_without_target_only_prints(capsys, tmp_path):
    handle_event(EVENTS[0], None)
    out = capsys.readouterr().out
    assert "Received event:" in out
    assert '"data": "Lobby"' in out
    assert list(tmp_path.iterdir()) == []


def test_events_append_to_directory_target(make_context, tmp_path, capsys):
    context = make_context(None)
    client = FakeClient(events=StoppingQueue(EVENTS, context.stop_event))
    context.client_factory = lambda options, stop_event: client

    code = run_listen(ListenOptions(path="/lol-gameflow/v1/gameflow-phase", types=("Update",), out=str(tmp_path)), context)

    assert code == 0
    assert client.subscriptions == [(None, "/lol-gameflow/v1/gameflow-phase", ("Update",))]
    assert client.closed
    content = (tmp_path / "lcu-websocket-events.txt").read_text(encoding="utf-8")
    assert content == "".join(json.dumps(event, indent=4) + "\n" for event in EVENTS)
    assert capsys.readouterr().out.count("Received event:") == 2


def test_events_append_to_file_target(tmp_path):
    path = tmp_path / "events.ndjson"
    path.write_text("", encoding="utf-8")
    target = resolve_output_target(str(path))
    handle_event(EVENTS[0], target)
    handle_event(EVENTS[1], target)
    assert path.read_text(encoding="utf-8") == (
        json.dumps(EVENTS[0], indent=4) + "\n" + json.dumps(EVENTS[1], indent=4) + "\n"
    )


def test_drain_preserves_order(make_context, capsys):
    context = make_context(None)
    events = StoppingQueue(EVENTS, context.stop_event)
    handled = drain_events(events, None, context.stop_event)
    out = capsys.readouterr().out
    assert handled == 2
    assert out.index('"Lobby"') < out.index('"ChampSelect"')


def test_drain_returns_when_stopped(make_context):
    context = make_context(None)
    context.stop_event.set()
    assert drain_events(queue.Queue(), None, context.stop_event) == 0
