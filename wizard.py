#!/usr/bin/env python3
"""
mKit Setup — Interactive Configuration Wizard
==============================================
Collects the settings the mKit MCP server needs, optionally creates the
OAuth KV namespaces with wrangler, writes .env and fills in the namespace
ids in wrangler.jsonc.

Usage:
  python3 wizard.py                        # Configure the project in the current directory
  python3 wizard.py --project-dir ../mkit  # Configure another checkout
  python3 wizard.py --config setup.yaml    # Use explicit wizard settings
  python3 wizard.py --verbose              # Log every wrangler call

Stages run once, in order, with no going back:
  1. wrangler pre-flight check (abort with exit 1 if missing)
  2. Prompts: base URL, OAuth, Stripe, cookie key
  3. KV namespace creation (optional)
  4. .env write (asks before overwriting)
  5. wrangler.jsonc patch (only when a namespace was created)
"""
import argparse
import logging
import secrets
import sys

from config_loader import load_config
from env_writer import write_env_file
from kv_namespace import create_namespace
from preflight_check import check_wrangler
from prompts import (bold, dim, fail, hdr, ok, prompt, prompt_bool,
                     prompt_secret, sec, warn)
from wrangler_config import patch_wrangler_config

logger = logging.getLogger(__name__)


def generate_cookie_key() -> str:
    """32 random bytes from the OS CSPRNG as 64 lowercase hex chars."""
    return secrets.token_hex(32)


# ════════════════════════════════════════════════════════════════
#  WIZARD — prompt sequence
# ════════════════════════════════════════════════════════════════
def run_wizard(settings: dict) -> dict[str, str]:
    """Run the prompt sequence. Returns the settings in prompt order."""
    cfg: dict[str, str] = {}

    sec("Base Configuration")
    cfg["BASE_URL"] = prompt(
        "Base URL for your worker (e.g., https://mkit.your-subdomain.workers.dev)",
        settings["default_base_url"],
    )
    cfg["WIDGET_DOMAIN"] = prompt(
        "Widget domain for OpenAI sandbox (optional, press enter to skip)"
    )

    sec("OAuth Configuration")
    if prompt_bool("Configure Google OAuth?"):
        cfg["GOOGLE_CLIENT_ID"] = prompt("Google Client ID")
        cfg["GOOGLE_CLIENT_SECRET"] = prompt_secret("Google Client Secret")

    if prompt_bool("Configure GitHub OAuth?"):
        cfg["GITHUB_CLIENT_ID"] = prompt("GitHub Client ID")
        cfg["GITHUB_CLIENT_SECRET"] = prompt_secret("GitHub Client Secret")

    if prompt_bool("Configure custom OAuth issuer?", False):
        cfg["OAUTH_ISSUER"] = prompt("OAuth Issuer URL")
        cfg["OAUTH_JWKS_URI"] = prompt("JWKS URI")

    sec("Stripe Configuration")
    if prompt_bool("Configure Stripe for paid tools?"):
        cfg["STRIPE_PUBLISHABLE_KEY"] = prompt("Stripe Publishable Key (pk_...)")
        cfg["STRIPE_SECRET_KEY"] = prompt_secret("Stripe Secret Key (sk_...)")
        cfg["STRIPE_WEBHOOK_SECRET"] = prompt_secret("Stripe Webhook Secret (whsec_...)")

        if prompt_bool("Configure Stripe price IDs?", False):
            cfg["STRIPE_SUBSCRIPTION_PRICE_ID"] = prompt("Subscription Price ID (price_...)")
            cfg["STRIPE_ONETIME_PRICE_ID"] = prompt("One-time Price ID (price_...)")
            cfg["STRIPE_METERED_PRICE_ID"] = prompt("Metered Price ID (price_...)")

    sec("Security")
    if prompt_bool("Generate a secure cookie encryption key?"):
        cfg["COOKIE_ENCRYPTION_KEY"] = generate_cookie_key()
        ok("Generated 32-byte encryption key")
    else:
        cfg["COOKIE_ENCRYPTION_KEY"] = prompt_secret("Cookie Encryption Key (32 bytes hex)")

    return cfg


def provision_kv(settings: dict, cfg: dict[str, str]) -> None:
    """Offer to create the primary and preview KV namespaces."""
    sec("KV Namespace")
    if not prompt_bool("Create KV namespace for OAuth state?"):
        return

    wrangler = " ".join(settings["wrangler_command"])
    print("\n  Creating KV namespace...")
    ns_id = create_namespace(settings)
    if ns_id:
        cfg["OAUTH_KV_NAMESPACE_ID"] = ns_id
        ok(f"Created KV namespace: {ns_id}")
    else:
        warn("Could not create KV namespace. "
             f"You may need to log in with '{wrangler} login' first.")

    if prompt_bool("Create preview KV namespace for local dev?"):
        preview_id = create_namespace(settings, preview=True)
        if preview_id:
            cfg["OAUTH_KV_PREVIEW_ID"] = preview_id
            ok(f"Created preview KV namespace: {preview_id}")
        else:
            warn("Could not create preview KV namespace.")


def print_next_steps(settings: dict):
    sec("Setup Complete")
    print("  Next steps:")
    print(f"    1. Review {settings['env_file'].name} and {settings['wrangler_config'].name}")
    print(f"    2. Run {bold('pnpm dev')} to start local development")
    print(f"    3. Run {bold('pnpm build-deploy')} to deploy to Cloudflare\n")


# ════════════════════════════════════════════════════════════════
#  MAIN
# ════════════════════════════════════════════════════════════════
def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Interactive setup for the mKit MCP server")
    p.add_argument("--project-dir", default=".",
                   help="Directory holding .env and wrangler.jsonc (default: current directory)")
    p.add_argument("--config", default=None,
                   help="Wizard settings file (default: setup.yaml in the project directory)")
    p.add_argument("--verbose", "-v", action="store_true", help="Log wrangler calls")
    return p


def setup(settings: dict) -> int:
    """Run every stage against loaded settings. Returns the exit code."""
    hdr("🚀 mKit Setup")
    print(f"  {dim('This script will help you configure your mKit MCP server.')}")

    version = check_wrangler(settings)
    if not version:
        fail("Wrangler CLI not found. Please run 'pnpm install' first.")
        return 1
    ok(f"Wrangler {version}")

    cfg = run_wizard(settings)
    provision_kv(settings, cfg)

    sec("Writing Configuration")
    write_env_file(cfg, settings["env_file"])

    ns_id = cfg.get("OAUTH_KV_NAMESPACE_ID")
    if ns_id:
        wrangler_path = settings["wrangler_config"]
        if patch_wrangler_config(wrangler_path, ns_id, cfg.get("OAUTH_KV_PREVIEW_ID")):
            ok(f"Updated {wrangler_path.name} with KV namespace IDs")

    print_next_steps(settings)
    return 0


def main(argv: "list[str] | None" = None) -> int:
    """Entry point for the mkit-setup command."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = load_config(args.config, args.project_dir)
        return setup(settings)
    except Exception as e:
        logger.error("Setup failed: %s", e)
        logger.debug("Traceback:", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
