"""Argument parsing into typed option records."""
import pytest

from lcu import NO_BODY
from main.setup.arguments import (
    CredentialsOptions,
    ListenOptions,
    RequestOptions,
    SchemaOptions,
    setup_arguments,
)


def test_request_parses_json_body_and_query():
    global_options, options = setup_arguments([
        "request", "post", "/lol-lobby/v2/lobby",
        "--body", '{"queueId": 420}',
        "-q", '{"force": true}',
    ])
    assert isinstance(options, RequestOptions)
    assert options.method == "post"
    assert options.path == "/lol-lobby/v2/lobby"
    assert options.body == {"queueId": 420}
    assert options.query == {"force": True}
    assert options.out is None
    assert global_options.verbose is False


def test_body_defaults_to_no_body():
    _, options = setup_arguments(["request", "GET", "/x"])
    assert options.body is NO_BODY


def test_null_body_is_kept_apart_from_no_body():
    _, options = setup_arguments(["request", "PUT", "/x", "--body", "null"])
    assert options.body is None


def test_out_without_value_means_current_directory():
    _, options = setup_arguments(["request", "GET", "/x", "-o"])
    assert options.out == ""


def test_out_with_value_is_kept():
    _, options = setup_arguments(["request", "GET", "/x", "--out", "result.json"])
    assert options.out == "result.json"


def test_invalid_json_body_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        setup_arguments(["request", "GET", "/x", "--body", "{not json"])
    assert exc.value.code == 2
    assert "invalid JSON" in capsys.readouterr().err


def test_query_must_be_an_object():
    with pytest.raises(SystemExit) as exc:
        setup_arguments(["request", "GET", "/x", "--query", "[1, 2]"])
    assert exc.value.code == 2


def test_listen_types_and_name():
    _, options = setup_arguments(["listen", "-n", "OnJsonApiEvent", "-t", "Create", "Delete"])
    assert options == ListenOptions(name="OnJsonApiEvent", types=("Create", "Delete"))


def test_listen_name_and_path_conflict(capsys):
    with pytest.raises(SystemExit) as exc:
        setup_arguments(["listen", "--name", "a", "--path", "/b"])
    assert exc.value.code == 2
    assert "not allowed with" in capsys.readouterr().err


def test_listen_rejects_unknown_type():
    with pytest.raises(SystemExit):
        setup_arguments(["listen", "--type", "Patch"])


def test_schema_flags():
    _, options = setup_arguments(["schema", "-t", "--tsnamespace", "LCU", "-s", "out/swagger"])
    assert options == SchemaOptions(typescript="", tsnamespace="LCU", swagger="out/swagger", raw=None)
    assert options.requested


def test_schema_without_flags_requests_nothing():
    _, options = setup_arguments(["schema"])
    assert not options.requested


def test_global_options_before_command():
    global_options, options = setup_arguments(["--debug", "--lockfile", "/tmp/lockfile", "credentials"])
    assert isinstance(options, CredentialsOptions)
    assert global_options.debug is True
    assert global_options.lockfile == "/tmp/lockfile"


def test_missing_command_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        setup_arguments([])
    assert exc.value.code != 0
    assert "usage:" in capsys.readouterr().err
