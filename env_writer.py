#!/usr/bin/env python3
"""
.env writer — renders the collected settings as KEY=VALUE lines.

Values are written verbatim: no quoting, no escaping. A value holding a
newline or "=" is the operator's problem.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from dotenv import dotenv_values

from prompts import dim, ok, prompt_bool, warn

logger = logging.getLogger(__name__)

# Only wrangler.jsonc needs these
NAMESPACE_KEYS = ("OAUTH_KV_NAMESPACE_ID", "OAUTH_KV_PREVIEW_ID")


def render_env(config: dict[str, str]) -> str:
    ts = datetime.now().strftime("%Y-%m-%d %H:%M")
    lines = [
        "# mKit Environment Configuration",
        f"# Generated by setup wizard on {ts}",
        "",
    ]
    for key, value in config.items():
        if value and key not in NAMESPACE_KEYS:
            lines.append(f"{key}={value}")
    return "\n".join(lines) + "\n"


def write_env_file(config: dict[str, str], path: Path,
                   confirm: Callable[[str, bool], bool] = prompt_bool) -> bool:
    """
    Write config to path. An existing file is only replaced after the
    operator agrees; otherwise the content is printed and False returned.
    """
    content = render_env(config)
    if path.exists():
        try:
            existing = dotenv_values(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read existing %s: %s", path, e)
        else:
            print(f"  {dim(f'{path.name} currently holds {len(existing)} key(s).')}")
        if not confirm(f"{path.name} already exists. Overwrite?", False):
            warn(f"Skipping {path.name} write. Here's what would have been written:")
            print()
            print(content)
            return False
        path.write_text(content, encoding="utf-8")
        ok(f"Wrote {path.name}")
        return True

    path.write_text(content, encoding="utf-8")
    ok(f"Created {path.name}")
    return True
