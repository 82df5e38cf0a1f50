#!/usr/bin/env python3
"""Pre-flight check — verify the wrangler CLI is installed before prompting."""
import sys

from config_loader import ConfigError, load_config
from kv_namespace import run_wrangler


def check_wrangler(settings: dict) -> str:
    """Return the wrangler version string, or "" if wrangler is unusable."""
    rc, out, _ = run_wrangler(settings, "--version")
    if rc != 0:
        return ""
    return out


if __name__ == "__main__":
    try:
        settings = load_config()
    except (FileNotFoundError, ConfigError) as e:
        print(f"❌ Settings error: {e}")
        sys.exit(1)
    version = check_wrangler(settings)
    if not version:
        print(f"❌ Wrangler CLI not found ({' '.join(settings['wrangler_command'])}). "
              "Please run 'pnpm install' first.")
        sys.exit(1)
    print(f"✓ Wrangler {version}")
