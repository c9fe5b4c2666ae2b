"""Credential discovery from the lockfile and the client command line."""
from lcu.core import lockfile
from lcu.core.lockfile import (
    discover_credentials,
    find_lockfile,
    parse_client_arguments,
    parse_lockfile,
)
from lcu.types import Credentials


def test_parse_lockfile(tmp_path):
    path = tmp_path / "lockfile"
    path.write_text("LeagueClient:1234:54321:s3cr3t:https", encoding="utf-8")
    credentials = parse_lockfile(str(path))
    assert credentials == Credentials(port=54321, password="s3cr3t", protocol="https", pid=1234, name="LeagueClient")
    assert credentials.base_url == "https://127.0.0.1:54321"


def test_parse_lockfile_rejects_garbage(tmp_path):
    path = tmp_path / "lockfile"
    path.write_text("garbage", encoding="utf-8")
    assert parse_lockfile(str(path)) is None
    assert parse_lockfile(str(tmp_path / "missing")) is None


def test_basic_auth_token():
    assert Credentials(port=1, password="secret").basic_auth_token == "cmlvdDpzZWNyZXQ="


def test_find_lockfile_prefers_explicit_path(tmp_path, monkeypatch):
    explicit = tmp_path / "explicit"
    explicit.write_text("x", encoding="utf-8")
    env = tmp_path / "env"
    env.write_text("x", encoding="utf-8")
    monkeypatch.setenv("LCU_LOCKFILE", str(env))
    assert find_lockfile(str(explicit)) == str(explicit)
    assert find_lockfile(str(tmp_path / "nope")) == str(env)


def test_parse_client_arguments():
    cmdline = [
        "LeagueClientUx.exe",
        "--riotclient-auth-token=abc",
        "--app-port=60123",
        '"--remoting-auth-token=tok_en"',
    ]
    credentials = parse_client_arguments(cmdline, pid=42)
    assert credentials.port == 60123
    assert credentials.password == "tok_en"
    assert credentials.pid == 42


def test_parse_client_arguments_needs_port_and_token():
    assert parse_client_arguments(["--app-port=1"]) is None
    assert parse_client_arguments(["--app-port=x", "--remoting-auth-token=y"]) is None


def test_discover_falls_back_to_process(monkeypatch):
    expected = Credentials(port=5, password="p")
    monkeypatch.setattr(lockfile, "find_lockfile", lambda explicit=None: None)
    monkeypatch.setattr(lockfile, "find_process_credentials", lambda: expected)
    assert discover_credentials() is expected
