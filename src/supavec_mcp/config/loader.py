"""Configuration loading: one optional TOML file, the environment, overrides.

Layers, lowest priority first:
    1. Built-in defaults (Pydantic model defaults)
    2. The API key from the env var named by ``api.api_key_env``
       (``SUPAVEC_API_KEY`` unless the file or an override renames it)
    3. The config file: the explicit ``path``, else ``$SUPAVEC_MCP_CONFIG``
    4. Programmatic overrides (the CLI's ``--api-key`` and ``--log-level``)

Every layer is a plain dict; they are merged before a single validation
pass, so ``--api-key`` beats ``api.api_key`` in the file, which beats the
environment.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from supavec_mcp.core.errors import ConfigError

from .schema import DEFAULT_API_KEY_ENV, SupavecConfig

CONFIG_ENV_VAR = "SUPAVEC_MCP_CONFIG"


def _config_file(path: str | Path | None) -> Path | None:
    """Return the config file to read, or None when there is none."""
    if path is not None:
        p = Path(path)
        if not p.is_file():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        return p

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if not env_path:
        return None
    p = Path(env_path)
    if not p.is_file():
        msg = f"{CONFIG_ENV_VAR} points to non-existent file: {env_path}"
        raise ConfigError(msg)
    return p


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigError(msg) from e


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base. Override wins on conflicts."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _credential_layer(data: dict[str, Any]) -> dict[str, Any]:
    """Build the env-var layer, honouring an ``api_key_env`` set in *data*.

    An empty variable counts as unset.
    """
    api = data.get("api")
    env_name = DEFAULT_API_KEY_ENV
    if isinstance(api, dict) and isinstance(api.get("api_key_env"), str):
        env_name = api["api_key_env"]
    value = os.environ.get(env_name)
    return {"api": {"api_key": value}} if value else {}


def load_config(
    path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> SupavecConfig:
    """Load and validate configuration.

    Raises:
        ConfigError: On invalid TOML, missing files, or validation failure.
    """
    config_file = _config_file(path)
    layered = _read_toml(config_file) if config_file else {}
    if overrides:
        layered = _deep_merge(layered, overrides)
    merged = _deep_merge(_credential_layer(layered), layered)

    try:
        return SupavecConfig.model_validate(merged)
    except ValidationError as e:
        msg = f"Configuration validation failed: {e}"
        raise ConfigError(msg) from e


def require_api_key(config: SupavecConfig) -> str:
    """Return the configured API key.

    Raises:
        ConfigError: If no key was supplied by flag, file, or environment.
    """
    if not config.api.api_key:
        msg = (
            "Supavec API key is required. Provide it via --api-key or the "
            f"{config.api.api_key_env} environment variable."
        )
        raise ConfigError(msg)
    return config.api.api_key
