import httpx
import pytest
from typer.testing import CliRunner

from remote_data.adapters import http_client
from remote_data.cli import doctor
from remote_data.cli import main as cli_main
from remote_data.core import config

runner = CliRunner()


@pytest.fixture
def serve(monkeypatch):
    """Route the CLI's HTTP client to `handler`."""

    def _install(handler):
        def builder(settings=None, **kwargs):
            return http_client.build_async_client(settings, transport=httpx.MockTransport(handler))

        monkeypatch.setattr(cli_main, "build_async_client", builder)
        monkeypatch.setattr(doctor, "build_async_client", builder)

    return _install


def test_fetch_renders_json(serve):
    serve(lambda request: httpx.Response(200, request=request, json={"id": 1, "name": "Ana"}))

    result = runner.invoke(cli_main.app, ["fetch", "https://api.test/users/1"])

    assert result.exit_code == 0, result.output
    assert "Request state" in result.output
    assert '"name": "Ana"' in result.output


def test_fetch_failure_exits_non_zero(serve):
    serve(lambda request: httpx.Response(500, request=request, json={}))

    result = runner.invoke(cli_main.app, ["fetch", "https://api.test/boom"])

    assert result.exit_code == 1
    assert "HTTP Error 500" in result.output


def test_fetch_with_token_sends_bearer(serve):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, request=request, json={"me": True})

    serve(handler)

    result = runner.invoke(cli_main.app, ["fetch", "https://api.test/me", "--token", "secret"])

    assert result.exit_code == 0, result.output
    assert seen[0].headers["Authorization"] == "Bearer secret"


def test_fetch_uploads_file_as_multipart(serve, tmp_path):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, request=request, json={"stored": True})

    serve(handler)
    upload = tmp_path / "scan.pdf"
    upload.write_bytes(b"%PDF-1.4")

    result = runner.invoke(
        cli_main.app,
        ["fetch", "https://api.test/records", "-X", "post", "-F", "note=x", "--file", str(upload)],
    )

    assert result.exit_code == 0, result.output
    request = seen[0]
    assert request.method == "POST"
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'filename="scan.pdf"' in request.content
    assert b'name="note"' in request.content


def test_fetch_sends_json_body(serve):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, request=request, json={})

    serve(handler)

    result = runner.invoke(cli_main.app, ["fetch", "https://api.test/notes", "-X", "PUT", "--json", '{"a": 1}'])

    assert result.exit_code == 0, result.output
    assert seen[0].content == b'{"a":1}'


def test_fetch_writes_binary_output(serve, tmp_path):
    serve(
        lambda request: httpx.Response(
            200, request=request, content=b"%PDF-1.7", headers={"Content-Type": "application/pdf"}
        )
    )
    target = tmp_path / "out" / "report.pdf"

    result = runner.invoke(cli_main.app, ["fetch", "https://api.test/report", "-o", str(target)])

    assert result.exit_code == 0, result.output
    assert target.read_bytes() == b"%PDF-1.7"


def test_fetch_rejects_unknown_method(serve):
    serve(lambda request: httpx.Response(200, request=request, json={}))

    result = runner.invoke(cli_main.app, ["fetch", "https://api.test/x", "-X", "TRACE"])

    assert result.exit_code != 0


def test_fetch_rejects_malformed_field(serve):
    serve(lambda request: httpx.Response(200, request=request, json={}))

    result = runner.invoke(cli_main.app, ["fetch", "https://api.test/x", "-F", "novalue"])

    assert result.exit_code != 0


def test_doctor_run_without_base_url():
    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "Access token" in result.output
    assert "Base URL" in result.output


def test_doctor_run_checks_base_url(serve, monkeypatch):
    serve(lambda request: httpx.Response(200, request=request, text="ok"))
    monkeypatch.setenv("REMOTE_DATA_BASE_URL", "https://api.test")

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "HTTP 200" in result.output


def test_doctor_setup_auth_writes_env(monkeypatch, tmp_path):
    env = tmp_path / ".env"
    monkeypatch.setattr(
        doctor,
        "write_user_env_vars",
        lambda values: config.write_user_env_vars(values, env_path=env),
    )

    result = runner.invoke(cli_main.app, ["doctor", "setup-auth"], input="https://api.test\nsecret\n")

    assert result.exit_code == 0, result.output
    text = env.read_text(encoding="utf-8")
    assert "REMOTE_DATA_ACCESS_TOKEN=secret" in text
    assert "REMOTE_DATA_BASE_URL=https://api.test" in text
