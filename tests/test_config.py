import pytest
from pydantic import ValidationError

from remote_data.core.config import AppSettings, get_user_config_dir, write_user_env_vars
from remote_data.core.domain.models import HttpMethod


def test_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.base_url is None
    assert settings.http_timeout_seconds is None
    assert settings.file_field == "medicalFile"
    assert settings.discard_stale is False
    assert settings.access_token is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("REMOTE_DATA_BASE_URL", "https://api.test")
    monkeypatch.setenv("REMOTE_DATA_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("REMOTE_DATA_DISCARD_STALE", "true")
    monkeypatch.setenv("REMOTE_DATA_FILE_FIELD", "attachment")

    settings = AppSettings(_env_file=None)

    assert settings.base_url == "https://api.test"
    assert settings.http_timeout_seconds == 2.5
    assert settings.discard_stale is True
    assert settings.file_field == "attachment"


def test_env_file_is_read(tmp_path):
    env = tmp_path / ".env"
    env.write_text("REMOTE_DATA_ACCESS_TOKEN=file-token\nUNRELATED=1\n", encoding="utf-8")

    settings = AppSettings(_env_file=env)

    assert settings.access_token == "file-token"


def test_invalid_timeout_is_rejected():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, http_timeout_seconds=0)


def test_write_user_env_vars_merges_existing(tmp_path):
    env = tmp_path / "cfg" / ".env"
    write_user_env_vars({"REMOTE_DATA_BASE_URL": "https://a.test"}, env_path=env)
    write_user_env_vars({"REMOTE_DATA_ACCESS_TOKEN": "t", "REMOTE_DATA_BASE_URL": None}, env_path=env)

    lines = env.read_text(encoding="utf-8").splitlines()

    assert lines[0].startswith("#")
    assert "REMOTE_DATA_BASE_URL=https://a.test" in lines
    assert "REMOTE_DATA_ACCESS_TOKEN=t" in lines


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "remote-data"


def test_http_method_parse():
    assert HttpMethod.parse("patch") is HttpMethod.PATCH
    assert HttpMethod.parse(HttpMethod.DELETE) is HttpMethod.DELETE
    with pytest.raises(ValueError):
        HttpMethod.parse("TRACE")
