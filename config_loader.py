#!/usr/bin/env python3
"""
Config Loader — mKit Setup
===========================
Loads the wizard's own settings from an optional setup.yaml and applies
environment variable overrides.

The settings only describe how the wizard runs (which CLI to call, where
the output files live). The values collected from the operator are never
read from or written to this file.

Usage:
  from config_loader import load_config
  settings = load_config()
  print(settings["wrangler_command"])

Environment overrides:
  MKIT_WRANGLER_COMMAND — command prefix for wrangler, e.g. "npx wrangler"
  MKIT_KV_BINDING       — KV binding name passed to "kv namespace create"
  MKIT_COMMAND_TIMEOUT  — seconds to wait for each wrangler call
"""
import os
import shlex
import sys
from pathlib import Path
from typing import Any

try:
    import yaml
except ImportError:
    print("❌ ERROR: pyyaml not installed. Run: pip install -e .")
    sys.exit(1)

DEFAULT_CONFIG_NAME = "setup.yaml"

DEFAULTS: dict[str, Any] = {
    "wrangler_command": ["pnpm", "wrangler"],
    "kv_binding": "OAUTH_KV",
    "env_file": ".env",
    "wrangler_config": "wrangler.jsonc",
    "command_timeout": 120,
    "default_base_url": "https://mkit.workers.dev",
}


class ConfigError(ValueError):
    """Raised when setup.yaml or an override holds an invalid value."""


def load_config(config_path: "str | Path | None" = None,
                project_dir: "str | Path" = ".") -> dict[str, Any]:
    """
    Load wizard settings.

    Args:
        config_path: Explicit settings file. When omitted, setup.yaml in
            project_dir is used if it exists; otherwise defaults apply.
        project_dir: Directory the output files are resolved against.

    Returns:
        Settings dict with env_file and wrangler_config as absolute Paths.

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ConfigError: If a setting has an invalid value
    """
    base = Path(project_dir).resolve()
    if config_path is not None:
        cfg_file = Path(config_path)
        if not cfg_file.exists():
            raise FileNotFoundError(f"settings file not found: {cfg_file}")
    else:
        cfg_file = base / DEFAULT_CONFIG_NAME

    cfg: dict[str, Any] = {}
    if cfg_file.exists():
        with open(cfg_file, encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigError(f"invalid YAML in {cfg_file}: {exc}") from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"{cfg_file} must contain a mapping")
        unknown = sorted(set(loaded) - set(DEFAULTS))
        if unknown:
            raise ConfigError(f"unknown settings in {cfg_file}: {unknown}")
        cfg.update(loaded)

    for key, value in DEFAULTS.items():
        cfg.setdefault(key, value)

    # Environment wins over the file
    env_cmd = os.environ.get("MKIT_WRANGLER_COMMAND")
    if env_cmd:
        cfg["wrangler_command"] = env_cmd
    env_binding = os.environ.get("MKIT_KV_BINDING")
    if env_binding:
        cfg["kv_binding"] = env_binding
    env_timeout = os.environ.get("MKIT_COMMAND_TIMEOUT")
    if env_timeout:
        cfg["command_timeout"] = env_timeout

    cfg["wrangler_command"] = _to_command(cfg["wrangler_command"])
    cfg["command_timeout"] = _to_timeout(cfg["command_timeout"])

    cfg["kv_binding"] = str(cfg["kv_binding"]).strip()
    if not cfg["kv_binding"]:
        raise ConfigError("kv_binding must not be empty")

    for key in ("env_file", "wrangler_config"):
        raw = str(cfg[key]).strip()
        if not raw:
            raise ConfigError(f"{key} must not be empty")
        p = Path(raw)
        cfg[key] = p if p.is_absolute() else base / p

    cfg["default_base_url"] = str(cfg["default_base_url"]).strip()
    cfg["project_dir"] = base
    return cfg


def _to_command(value: Any) -> list[str]:
    if isinstance(value, str):
        parts = shlex.split(value)
    elif isinstance(value, list):
        parts = [str(p) for p in value]
    else:
        raise ConfigError("wrangler_command must be a string or a list")
    if not parts:
        raise ConfigError("wrangler_command must not be empty")
    return parts


def _to_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"command_timeout must be a number, got {value!r}") from exc
    if timeout <= 0:
        raise ConfigError("command_timeout must be positive")
    return timeout


if __name__ == "__main__":
    """Quick validation — run: python3 config_loader.py"""
    try:
        settings = load_config()
        print("✅ Settings loaded successfully")
        print(f"   Wrangler:  {' '.join(settings['wrangler_command'])}")
        print(f"   Binding:   {settings['kv_binding']}")
        print(f"   .env:      {settings['env_file']}")
        print(f"   Config:    {settings['wrangler_config']}")
        print(f"   Timeout:   {settings['command_timeout']:.0f}s")
    except (FileNotFoundError, ConfigError) as e:
        print(f"❌ Settings error: {e}")
        sys.exit(1)
