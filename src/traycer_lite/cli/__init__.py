"""
Traycer Lite CLI Module

Contains the command-line interface:
- main: CLI entry point with typer
- args: Permissive flag parsing
- output: Rich terminal rendering
"""

from .args import parse_args
from .main import app, main, run
from .output import OutputManager

__all__ = [
    "app",
    "main",
    "run",
    "parse_args",
    "OutputManager",
]
