#!/usr/bin/env python3
"""
Traycer Lite CLI

Turns a short prompt into a planning layer and final TypeScript code.

Usage:
- traycer-lite "<prompt>": Offline plan and code from templates
- traycer-lite --ai "<prompt>": Try the Hugging Face model first
- traycer-lite --json --out file.ts "<prompt>": JSON output, code saved to a file
"""

import asyncio
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console

from .. import __version__
from ..core.generator import make_offline_plan_and_code
from ..core.models import Flags, PlanAndCode
from ..llm.remote import maybe_remote_plan_and_code
from ..settings.models import Settings
from ..settings.storage import SettingsStorage
from .args import parse_args
from .output import OutputManager

logger = logging.getLogger(__name__)

VERSION_TEXT = f"traycer-lite v{__version__}"

HELP_TEXT = """
Traycer-Lite — show a planning layer + final TypeScript code

Usage:
  traycer-lite [options] <prompt>

Options:
  --ai            Use Hugging Face (optional) if HUGGINGFACE_API_KEY is set
  --json          Output raw JSON { plan: string[], code: string }
  --out <file>    Save the generated code to a file
  -h, --help      Show help
  -v, --version   Show version

Examples:
  traycer-lite "write a function to reverse a string"
  traycer-lite --out reverse.ts "reverse a string in TypeScript"
  traycer-lite --ai "implement debounce(fn, wait)"
"""

app = typer.Typer(
    name="traycer-lite",
    help="Traycer Lite - planning layer + final TypeScript code",
    add_completion=False,
)


def resolve_log_level(level: str) -> int:
    """Map a level name to a logging level, falling back to WARNING."""
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str) -> None:
    """Send diagnostics to stderr so stdout stays clean for results."""
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def generate_plan_and_code(flags: Flags, prompt: str, settings: Settings) -> PlanAndCode:
    """
    Produce the single PlanAndCode for a run.

    A well-formed remote result replaces the offline one entirely; any other
    remote outcome falls back to templates without notice.
    """
    result = None
    if flags.ai:
        result = asyncio.run(maybe_remote_plan_and_code(prompt, settings))
        if result is None:
            logger.debug("No remote result, using offline templates")
    if result is None:
        result = make_offline_plan_and_code(prompt)
    return result


def save_code(code: str, out: str, output: OutputManager) -> Path:
    """
    Write code to a path relative to the current directory.

    Args:
        code: Code text to write
        out: User-supplied path
        output: Output manager for the warning and confirmation

    Returns:
        Resolved path that was written
    """
    out_path = (Path.cwd() / out).resolve()
    if out_path.exists():
        output.print_warning(f"File already exists: {out_path} — overwriting.")
    out_path.write_text(code, encoding="utf-8")
    output.print_raw(f"Saved to {out_path}")
    return out_path


def run(argv: list[str], output: OutputManager, storage: SettingsStorage | None = None) -> int:
    """
    Execute one CLI invocation.

    Args:
        argv: Raw command-line tokens
        output: Output manager
        storage: Optional settings storage (defaults to ~/.traycer-lite)

    Returns:
        Process exit code
    """
    flags, prompt = parse_args(argv)

    if flags.version:
        output.print_raw(VERSION_TEXT)
        return 0

    if flags.help or not prompt:
        output.print_raw(HELP_TEXT)
        return 0 if prompt else 1

    settings = (storage or SettingsStorage()).load()
    setup_logging(settings.log_level)

    result = generate_plan_and_code(flags, prompt, settings)

    if flags.json:
        output.plan_and_code_json(result)
    else:
        output.plan_and_code(result)

    if flags.out:
        save_code(result.code, flags.out, output)

    return 0


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def generate(ctx: typer.Context):
    """
    Show a planning layer and final code for a prompt.

    Examples:
        traycer-lite "write a function to reverse a string"
        traycer-lite --out reverse.ts "reverse a string in TypeScript"
        traycer-lite --ai "implement debounce(fn, wait)"
    """
    output = OutputManager(Console(), Console(stderr=True))
    try:
        code = run(list(ctx.args), output)
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        output.print_error(f"Unexpected error: {e}")
        code = 1

    if code:
        raise typer.Exit(code=code)


def main():
    """CLI entry point."""
    app(prog_name="traycer-lite")


if __name__ == "__main__":
    main()
