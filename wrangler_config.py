#!/usr/bin/env python3
"""
wrangler.jsonc patcher — swaps the KV placeholder tokens for real ids.

Plain text substitution, so comments and formatting in the .jsonc file are
kept. A file without the placeholders is left alone.
"""
import re
from pathlib import Path

ID_PLACEHOLDER_RE = re.compile(r'"id":\s*"<YOUR_KV_NAMESPACE_ID>"')
PREVIEW_PLACEHOLDER_RE = re.compile(r'"preview_id":\s*"<YOUR_PREVIEW_KV_NAMESPACE_ID>"')


def patch_wrangler_config(path: Path, namespace_id: str,
                          preview_id: "str | None" = None) -> bool:
    """Return True if the file was rewritten with at least one new id."""
    if not path.exists():
        return False
    original = path.read_text(encoding="utf-8")

    content = ID_PLACEHOLDER_RE.sub(lambda _: f'"id": "{namespace_id}"', original, count=1)
    if preview_id:
        content = PREVIEW_PLACEHOLDER_RE.sub(
            lambda _: f'"preview_id": "{preview_id}"', content, count=1)

    if content == original:
        return False
    path.write_text(content, encoding="utf-8")
    return True
