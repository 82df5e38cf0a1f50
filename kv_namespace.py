#!/usr/bin/env python3
"""
KV namespace provisioning through the wrangler CLI.

Each create call is a real, non-idempotent side effect: running the wizard
twice creates two namespaces. Nothing is rolled back if a later stage fails.
"""
import logging
import re
import subprocess

logger = logging.getLogger(__name__)

# Also matches the preview_id = "..." line printed for --preview
NAMESPACE_ID_RE = re.compile(r'id\s*=\s*"([^"]+)"')


def run_wrangler(settings: dict, *args: str) -> tuple[int, str, str]:
    """Run wrangler with args, return (returncode, stdout, stderr)."""
    cmd = list(settings["wrangler_command"]) + list(args)
    timeout = settings["command_timeout"]
    logger.debug("Running: %s (timeout %ss)", " ".join(cmd), timeout)
    try:
        r = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout,
                           cwd=settings.get("project_dir"))
    except subprocess.TimeoutExpired:
        logger.debug("Command timed out after %ss", timeout)
        return -1, "", f"TIMEOUT after {timeout}s"
    except OSError as e:
        logger.debug("Command could not start: %s", e)
        return -1, "", str(e)
    logger.debug("Exit code %s", r.returncode)
    return r.returncode, r.stdout.strip(), r.stderr.strip()


def extract_namespace_id(output: str) -> "str | None":
    m = NAMESPACE_ID_RE.search(output)
    return m.group(1) if m else None


def create_namespace(settings: dict, preview: bool = False) -> "str | None":
    """
    Create the KV namespace for the configured binding.

    Returns the namespace id parsed from wrangler's output, or None when the
    command fails or prints no id.
    """
    args = ["kv", "namespace", "create", settings["kv_binding"]]
    if preview:
        args.append("--preview")
    rc, out, err = run_wrangler(settings, *args)
    if rc != 0:
        logger.info("kv namespace create%s failed (exit %s): %s",
                    " --preview" if preview else "", rc, err[:200])
        return None
    ns_id = extract_namespace_id(out)
    if ns_id is None:
        logger.info("No namespace id found in wrangler output")
    return ns_id
