"""Tests for content service configuration loading."""

import pytest
from pydantic import ValidationError

from wheelpower.utils.config_loader import DEFAULT_BASE_URL, load_content_config


def test_defaults_when_file_missing(monkeypatch, tmp_path):
    monkeypatch.setattr("wheelpower.utils.config_loader.DEFAULT_CONFIG_PATH", tmp_path / "none.yml")
    config = load_content_config()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.settings_collection == "settings"
    assert config.integrations_mode == "real"


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_content_config(tmp_path / "missing.yml")


def test_yaml_values_and_env_overrides(monkeypatch, tmp_path):
    path = tmp_path / "content.yml"
    path.write_text(
        "content_service:\n"
        "  base_url: https://cms.example.test/\n"
        "  settings_collection: site_settings\n"
        "  timeout_seconds: 5\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("INTEGRATIONS_MODE", "Local")

    config = load_content_config(path)

    assert config.base_url == "https://cms.example.test"
    assert config.settings_collection == "site_settings"
    assert config.timeout_seconds == 5
    assert config.integrations_mode == "mock"


def test_env_base_url_wins_over_file(monkeypatch, tmp_path):
    path = tmp_path / "content.yml"
    path.write_text("base_url: https://from-file.test\n", encoding="utf-8")
    monkeypatch.setenv("DIRECTUS_URL", "https://from-env.test")

    assert load_content_config(path).base_url == "https://from-env.test"


def test_invalid_settings_collection(tmp_path):
    path = tmp_path / "content.yml"
    path.write_text("settings_collection: pages\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_content_config(path)
