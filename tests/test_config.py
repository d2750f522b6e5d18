from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

from conftest import TESTDATA
from netorca_sdk import ConfigError, load_settings

ENV_VARS = ("API_URL", "API_KEY", "API_VERSION", "REQUEST_TIMEOUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def write_env(tmp_path: Path, text: str) -> Path:
    path = tmp_path / ".env"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_settings_from_env_file(tmp_path: Path) -> None:
    env_file = shutil.copy(TESTDATA / "env_example", tmp_path / ".env")

    settings = load_settings(env_file)

    assert settings.api_key == "11.12312312312"
    assert settings.api_url == "https://api.example.com"
    assert settings.api_version == "v1"
    assert settings.request_timeout == 15


def test_load_settings_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    env_file = write_env(tmp_path, "API_URL=https://api.example.com\nAPI_KEY=secret\n")

    with caplog.at_level(logging.INFO, logger="netorca_sdk.config"):
        settings = load_settings(env_file)

    assert settings.api_version == "v1"
    assert settings.request_timeout == 5
    assert "REQUEST_TIMEOUT not set" in caplog.text


def test_blank_values_fall_back_to_defaults(tmp_path: Path) -> None:
    env_file = write_env(tmp_path, "API_URL=https://api.example.com\nAPI_VERSION=\nREQUEST_TIMEOUT=\n")

    settings = load_settings(env_file)

    assert settings.api_version == "v1"
    assert settings.request_timeout == 5


def test_process_environment_overrides_env_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = write_env(tmp_path, "API_URL=https://file.example.com\nREQUEST_TIMEOUT=15\n")
    monkeypatch.setenv("API_URL", "https://env.example.com")

    settings = load_settings(env_file)

    assert settings.api_url == "https://env.example.com"
    assert settings.request_timeout == 15


def test_missing_env_file_uses_process_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("API_KEY", "from-env")

    settings = load_settings(tmp_path / "missing.env")

    assert settings.api_key == "from-env"


@pytest.mark.parametrize("timeout", ["abc", "-1", "1.5"])
def test_invalid_request_timeout(tmp_path: Path, timeout: str) -> None:
    env_file = write_env(tmp_path, f"REQUEST_TIMEOUT={timeout}\n")

    with pytest.raises(ConfigError):
        load_settings(env_file)
