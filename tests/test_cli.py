"""Tests for the command line entry point."""

import httpx
import pytest

from feedcore import main as cli
from feedcore.transport.http import HttpTransport


@pytest.fixture(autouse=True)
def no_global_setup(monkeypatch):
    monkeypatch.setattr(cli, "init", lambda app_settings: None)
    monkeypatch.setattr(cli, "shutdown", lambda: None)


def test_parse_command(tmp_path, capsys, sample_rss_content):
    path = tmp_path / "feed.xml"
    path.write_bytes(sample_rss_content)

    assert cli.main(["parse", str(path)]) == 0

    out = capsys.readouterr().out
    assert '"format": "rss-2.0"' in out
    assert '"title": "Example Engineering Blog"' in out


def test_parse_command_failure(tmp_path, capsys):
    assert cli.main(["parse", str(tmp_path / "missing.xml")]) == 1
    assert "error: could not parse file" in capsys.readouterr().err


def test_fetch_command(monkeypatch, capsys, sample_atom_content):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, headers={"ETag": '"v9"'}, content=sample_atom_content)

    monkeypatch.setattr(
        cli,
        "HttpTransport",
        lambda options: HttpTransport(options, transport=httpx.MockTransport(handler)),
    )

    exit_code = cli.main(
        ["fetch", "https://atom.example.com/feed.atom", "--etag", '"v8"', "--last-modified", "0"]
    )

    assert exit_code == 0
    assert seen[0].headers["If-None-Match"] == '"v8"'
    out = capsys.readouterr().out
    assert '"format": "atom-1.0"' in out
    assert '"etag": "\\"v9\\""' in out


def test_fetch_command_transport_error(monkeypatch, capsys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    monkeypatch.setattr(
        cli,
        "HttpTransport",
        lambda options: HttpTransport(options, transport=httpx.MockTransport(handler)),
    )

    assert cli.main(["fetch", "https://down.example.com/feed"]) == 1
    assert "HTTP response code said error 503" in capsys.readouterr().err


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_fetch_options_flow_from_settings(monkeypatch, tmp_path, minimal_atom_content):
    path = tmp_path / "feed.atom"
    path.write_bytes(minimal_atom_content)
    built = []

    def recording_transport(options):
        built.append(options)
        return HttpTransport(options)

    monkeypatch.setattr(cli.settings, "user_agent", "configured-agent/1.0")
    monkeypatch.setattr(cli, "HttpTransport", recording_transport)

    assert cli.main(["parse", str(path)]) == 0
    assert built[0].user_agent == "configured-agent/1.0"
