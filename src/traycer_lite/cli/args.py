"""
Argument parsing for the Traycer Lite CLI.

Parsing is permissive: anything that is not a known flag, unknown flags
included, becomes part of the prompt.
"""

from ..core.models import Flags


def parse_args(argv: list[str]) -> tuple[Flags, str]:
    """
    Split raw tokens into flags and a prompt.

    Args:
        argv: Raw command-line tokens, program name excluded

    Returns:
        Tuple of (Flags, prompt) where prompt is the non-flag tokens joined
        by single spaces, in their original order.

    Example:
        >>> parse_args(["--out", "a.ts", "reverse", "a", "string"])
        (Flags(ai=False, json=False, out='a.ts', help=False, version=False), 'reverse a string')
    """
    ai = json_output = show_help = show_version = False
    out: str | None = None
    rest: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--ai":
            ai = True
        elif arg == "--json":
            json_output = True
        elif arg in ("--help", "-h"):
            show_help = True
        elif arg in ("--version", "-v"):
            show_version = True
        elif arg == "--out" and i + 1 < len(argv) and argv[i + 1] and not argv[i + 1].startswith("--"):
            i += 1
            out = argv[i]
        elif arg.startswith("--out="):
            out = arg[len("--out="):]
        else:
            rest.append(arg)
        i += 1

    flags = Flags(ai=ai, json=json_output, out=out, help=show_help, version=show_version)
    return flags, " ".join(rest).strip()
