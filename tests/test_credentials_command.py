"""credentials command."""
import json

from conftest import FakeClient

from main.commands.credentials import run_credentials
from main.setup.arguments import CredentialsOptions


def test_prints_url_and_basic_token(make_context, capsys):
    client = FakeClient()
    assert run_credentials(CredentialsOptions(), make_context(client)) == 0

    out = capsys.readouterr().out
    assert out.startswith("[hasagi] ")
    printed = json.loads(out[len("[hasagi] "):])
    assert printed == {
        "url": "https://127.0.0.1:2999",
        "Authorization": "Basic cmlvdDpzZWNyZXQ=",
    }
    assert client.closed
