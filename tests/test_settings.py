"""Tests for settings loading and validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from searchprobe.exceptions import ConfigurationError
from searchprobe.settings import AppSettings


def test_load_from_yaml(tmp_settings_yaml):
    settings = AppSettings.from_yaml(tmp_settings_yaml)
    assert settings.headless is False
    assert settings.default_timeout_ms == 8000
    assert settings.probe_timeout_ms == 3000
    assert settings.scenarios == ["homepage", "basic-search"]


def test_base_url_normalised(tmp_settings_yaml):
    settings = AppSettings.from_yaml(tmp_settings_yaml)
    assert settings.base_url == "https://search.example.com"


def test_env_var_override(tmp_settings_yaml, monkeypatch):
    monkeypatch.setenv("SEARCHPROBE_DEFAULT_TIMEOUT_MS", "2500")
    settings = AppSettings.from_yaml(tmp_settings_yaml)
    assert settings.default_timeout_ms == 2500


def test_defaults_when_no_file(tmp_path):
    settings = AppSettings.from_yaml(tmp_path / "nonexistent.yaml")
    assert settings.base_url == "https://www.google.com"
    assert settings.default_timeout_ms == 10_000
    assert settings.probe_timeout_ms == 5_000
    assert settings.scenarios == []


def test_probe_budget_upper_bound():
    with pytest.raises(ValidationError):
        AppSettings(probe_timeout_ms=6_000)


def test_relative_base_url_rejected():
    with pytest.raises(ValidationError):
        AppSettings(base_url="www.google.com")


def test_non_mapping_yaml_rejected(tmp_path):
    p = tmp_path / "settings.yaml"
    p.write_text("- just\n- a list\n")
    with pytest.raises(ConfigurationError):
        AppSettings.from_yaml(p)
