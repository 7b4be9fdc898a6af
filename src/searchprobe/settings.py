"""Pydantic-based settings loaded from YAML with env-var overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from searchprobe.exceptions import ConfigurationError

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

_ENV_PREFIX = "SEARCHPROBE_"

# Probes are informational: they must give up quickly.
MAX_PROBE_TIMEOUT_MS = 5_000


class AppSettings(BaseSettings):
    """Harness configuration with YAML + env var support.

    Env vars are prefixed with ``SEARCHPROBE_``.
    Example: ``SEARCHPROBE_HEADLESS=false``
    """

    model_config = {"env_prefix": _ENV_PREFIX}

    # --- target ---
    base_url: str = "https://www.google.com"
    entry_path: str = "/"

    # --- browser ---
    headless: bool = True
    slow_mo: int = 0  # ms between Playwright actions
    locale: str = "en-US"
    viewport_width: int = 1280
    viewport_height: int = 900

    # --- timeout budgets (ms) ---
    default_timeout_ms: int = Field(default=10_000, gt=0)
    probe_timeout_ms: int = Field(default=MAX_PROBE_TIMEOUT_MS, gt=0, le=MAX_PROBE_TIMEOUT_MS)
    navigation_timeout_ms: int = Field(default=30_000, gt=0)
    suggestion_delay_ms: int = Field(default=1_000, ge=0)

    # --- run ---
    scenarios: list[str] = Field(default_factory=list)  # empty = all
    screenshot_on_failure: bool = True
    artifacts_dir: str = ".artifacts"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        return v.rstrip("/")

    # ---- factory ----

    @classmethod
    def from_yaml(cls, path: str | Path | None = None) -> "AppSettings":
        """Load settings from a YAML file, then overlay env vars.

        Env vars (``SEARCHPROBE_*``) take priority over YAML values.
        """
        if path is None:
            path = _PROJECT_ROOT / "settings.yaml"
        path = Path(path)
        raw: dict[str, Any] = {}
        if path.exists():
            with open(path) as fh:
                loaded = yaml.safe_load(fh) or {}
            if not isinstance(loaded, dict):
                raise ConfigurationError(f"{path} must contain a mapping, got {type(loaded).__name__}.")
            raw = loaded

        # Let env vars override YAML: remove YAML keys that have an env override
        for key in list(raw.keys()):
            env_key = f"{_ENV_PREFIX}{key.upper()}"
            if env_key in os.environ:
                del raw[key]

        return cls(**raw)
