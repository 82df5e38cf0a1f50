#!/usr/bin/env python3
"""
mKit Setup — Terminal prompts and status output
================================================
Shared by wizard.py and the stage modules. Every prompt blocks on input()
and accepts whatever is typed; there is no retry loop.
"""

# ── ANSI colours ──────────────────────────────────────────────
BOLD="\033[1m"; DIM="\033[2m"; CYAN="\033[36m"
GREEN="\033[32m"; YELLOW="\033[33m"; RED="\033[31m"; RESET="\033[0m"

def bold(s):   return f"{BOLD}{s}{RESET}"
def dim(s):    return f"{DIM}{s}{RESET}"
def cyan(s):   return f"{CYAN}{s}{RESET}"
def green(s):  return f"{GREEN}{s}{RESET}"
def yellow(s): return f"{YELLOW}{s}{RESET}"
def red(s):    return f"{RED}{s}{RESET}"

# ── Status lines ──────────────────────────────────────────────
def ok(msg):    print(f"  {green('✓')} {msg}")
def warn(msg):  print(f"  {yellow('⚠')} {yellow(msg)}")
def fail(msg):  print(f"  {red('❌')} {red(msg)}")


def hdr(title: str):
    print(f"\n{CYAN}{'='*62}{RESET}")
    print(f"{CYAN}  {BOLD}{title}{RESET}")
    print(f"{CYAN}{'='*62}{RESET}")


def sec(title: str):
    print(f"\n{BOLD}{CYAN}─── {title} ───{RESET}\n")


# ── Prompts ───────────────────────────────────────────────────
def prompt(q: str, default: str = "") -> str:
    """Ask for a value. Blank input returns the default ("" when none)."""
    sfx = f" [{dim(default)}]" if default else ""
    v = input(f"  {q}{sfx}: ").strip()
    return v or default


def prompt_secret(q: str) -> str:
    """Ask for a sensitive value. Input is echoed; nothing is masked."""
    return input(f"  {q}: ").strip()


def prompt_bool(q: str, default: bool = True) -> bool:
    sfx = "Y/n" if default else "y/N"
    raw = prompt(f"{q} [{dim(sfx)}]")
    if not raw: return default
    return raw.lower().startswith("y")
